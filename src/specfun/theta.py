"""
Theta functions.

The four theta functions θ_1(ν, x), ..., θ_4(ν, x) are defined following
Spanier and Oldham, in terms of a real argument ν and a positive parameter
x. They are periodic in ν with period 2 (θ_3, θ_4 with period 1), and relate
to the classical Jacobian theta functions ϑ_i(z, q) by ν = z/π and
x = -ln(q)/π².

For x >= 1/π the Fourier series in the nome converge rapidly,

.. math::
    θ_3(ν, x) = 1 + 2 \\sum_{j \\geq 1} e^{-j^2 π^2 x} \\cos(2 j π ν),

while for smaller x the Poisson-transformed sums are used,

.. math::
    θ_3(ν, x) = \\frac{1}{\\sqrt{π x}} \\sum_j e^{-(ν + j)^2 / x}.
"""

from __future__ import annotations
import numpy as np
from dataclasses import dataclass

from .precision import EXTENDED, ONE, TWO, HALF, PI
from .typing import Extended, Real

SMALL_X_TERMS = 6
"""The Poisson sums run over j = -SMALL_X_TERMS, ..., SMALL_X_TERMS."""

LARGE_X_TERMS = 5
"""The Fourier sums run over j = 0, ..., LARGE_X_TERMS."""


@dataclass
class ThetaValues:
    """The four theta functions evaluated at the same point."""

    theta_1: float
    theta_2: float
    theta_3: float
    theta_4: float

    def astuple(self) -> tuple[float, float, float, float]:
        return (self.theta_1, self.theta_2, self.theta_3, self.theta_4)


def _small_x(ν: Extended, x: Extended) -> tuple[Extended, ...]:
    j = np.arange(-SMALL_X_TERMS, SMALL_X_TERMS + 1).astype(EXTENDED)
    phase = np.where(j % 2 == 0, ONE, -ONE)
    shifted = ν + j
    gaussian = np.exp(-shifted * shifted / x)
    gaussian_minus_half = np.exp(-(shifted - HALF) ** 2 / x)
    gaussian_plus_half = np.exp(-(shifted + HALF) ** 2 / x)
    scale = ONE / np.sqrt(PI * x)
    return (
        scale * np.sum(phase * gaussian_minus_half),
        scale * np.sum(phase * gaussian),
        scale * np.sum(gaussian),
        scale * np.sum(gaussian_plus_half),
    )


def _large_x(ν: Extended, x: Extended) -> tuple[Extended, ...]:
    ν = ν * PI
    x = x * PI * PI
    j = np.arange(0, LARGE_X_TERMS + 1).astype(EXTENDED)
    phase = np.where(j % 2 == 0, ONE, -ONE)
    half_integer = np.exp(-(j + HALF) ** 2 * x)
    integer = np.exp(-j[1:] ** 2 * x)
    angle = (TWO * j + ONE) * ν
    cosine = np.cos(TWO * j[1:] * ν)
    return (
        TWO * np.sum(phase * half_integer * np.sin(angle)),
        TWO * np.sum(half_integer * np.cos(angle)),
        ONE + TWO * np.sum(integer * cosine),
        ONE + TWO * np.sum(phase[1:] * integer * cosine),
    )


def _small_x_derivatives(ν: Extended, x: Extended) -> tuple[Extended, ...]:
    # Term by term derivative of _small_x with respect to ν.
    j = np.arange(-SMALL_X_TERMS, SMALL_X_TERMS + 1).astype(EXTENDED)
    phase = np.where(j % 2 == 0, ONE, -ONE)
    shifted = ν + j
    gaussian = shifted * np.exp(-shifted * shifted / x)
    gaussian_minus_half = (shifted - HALF) * np.exp(-(shifted - HALF) ** 2 / x)
    gaussian_plus_half = (shifted + HALF) * np.exp(-(shifted + HALF) ** 2 / x)
    scale = -TWO / (x * np.sqrt(PI * x))
    return (
        scale * np.sum(phase * gaussian_minus_half),
        scale * np.sum(phase * gaussian),
        scale * np.sum(gaussian),
        scale * np.sum(gaussian_plus_half),
    )


def _large_x_derivatives(ν: Extended, x: Extended) -> tuple[Extended, ...]:
    # Term by term derivative of _large_x with respect to ν.
    ν = ν * PI
    x = x * PI * PI
    j = np.arange(0, LARGE_X_TERMS + 1).astype(EXTENDED)
    phase = np.where(j % 2 == 0, ONE, -ONE)
    half_integer = (TWO * j + ONE) * np.exp(-(j + HALF) ** 2 * x)
    integer = j[1:] * np.exp(-j[1:] ** 2 * x)
    angle = (TWO * j + ONE) * ν
    sine = np.sin(TWO * j[1:] * ν)
    return (
        TWO * PI * np.sum(phase * half_integer * np.cos(angle)),
        -TWO * PI * np.sum(half_integer * np.sin(angle)),
        -4 * PI * np.sum(integer * sine),
        -4 * PI * np.sum(phase[1:] * integer * sine),
    )


def _reduce_argument(nu: Real) -> tuple[Extended, int]:
    # Returns ν - n with 0 <= ν - n < 1 and the number n of half periods removed.
    ν = EXTENDED(nu)
    n = int(abs(ν))
    if ν >= 0:
        ν -= n
    else:
        n += 1
        ν += n
    return ν, n


def theta_functions(nu: Real, x: Real) -> ThetaValues:
    """Evaluate θ_1(ν, x), θ_2(ν, x), θ_3(ν, x) and θ_4(ν, x), for x > 0.

    The argument is first reduced to 0 <= ν < 1; θ_1 and θ_2 change sign
    under ν -> ν + 1, while θ_3 and θ_4 are invariant.
    """
    ν, n = _reduce_argument(nu)
    xx = EXTENDED(x)
    if x < 1 / np.pi:
        θ1, θ2, θ3, θ4 = _small_x(ν, xx)
    else:
        θ1, θ2, θ3, θ4 = _large_x(ν, xx)
    if n % 2 == 1:
        θ1, θ2 = -θ1, -θ2
    return ThetaValues(float(θ1), float(θ2), float(θ3), float(θ4))


def theta_function_derivatives(nu: Real, x: Real) -> ThetaValues:
    """Derivatives dθ_i(ν, x)/dν of the four theta functions, for x > 0.

    The same series as in :func:`theta_functions` are differentiated term
    by term, so both functions switch between expansions at x = 1/π.
    """
    ν, n = _reduce_argument(nu)
    xx = EXTENDED(x)
    if x < 1 / np.pi:
        θ1, θ2, θ3, θ4 = _small_x_derivatives(ν, xx)
    else:
        θ1, θ2, θ3, θ4 = _large_x_derivatives(ν, xx)
    if n % 2 == 1:
        θ1, θ2 = -θ1, -θ2
    return ThetaValues(float(θ1), float(θ2), float(θ3), float(θ4))


def theta_functions_at_zero(x: Real) -> ThetaValues:
    """Theta functions at ν = 0, where θ_1 vanishes identically."""
    values = theta_functions(0.0, x)
    values.theta_1 = 0.0
    return values


def jacobian_theta_functions(z: Real, q: Real) -> ThetaValues:
    """Classical theta functions ϑ_i(z, q) for a nome 0 <= q < 1.

    For q = 0 the series reduce to their constant terms, (0, 0, 1, 1).
    """
    if q == 0:
        return ThetaValues(0.0, 0.0, 1.0, 1.0)
    x = -np.log(q) / (np.pi * np.pi)
    return theta_functions(z / np.pi, x)


def jacobian_theta_function_derivatives(z: Real, q: Real) -> ThetaValues:
    """Derivatives dϑ_i(z, q)/dz of the classical theta functions.

    For q = 0 every ϑ_i is constant in z and the derivatives vanish.
    """
    if q == 0:
        return ThetaValues(0.0, 0.0, 0.0, 0.0)
    x = -np.log(q) / (np.pi * np.pi)
    dθ = theta_function_derivatives(z / np.pi, x)
    return ThetaValues(
        dθ.theta_1 / np.pi, dθ.theta_2 / np.pi, dθ.theta_3 / np.pi, dθ.theta_4 / np.pi
    )


def jacobian_theta_functions_at_zero(q: Real) -> ThetaValues:
    """Classical theta functions ϑ_i(0, q), the theta constants."""
    if q == 0:
        return ThetaValues(0.0, 0.0, 1.0, 1.0)
    return theta_functions_at_zero(-np.log(q) / (np.pi * np.pi))


def neville_theta_functions(
    u: Real, k: Real, K: Real, r_tau: Real
) -> tuple[float, float, float, float]:
    """Neville theta functions (θ_s, θ_c, θ_d, θ_n) of argument u.

    Parameters
    ----------
    u : float
        Argument.
    k : float
        Elliptic modulus.
    K : float
        Complete elliptic integral of the first kind K(k).
    r_tau : float
        Ratio K(k) / K'(k), so that the nome is q = exp(-π / r_tau).

    Returns
    -------
    tuple[float, float, float, float]
        For k = 0 the result is (sin u, cos u, 1, 1). In general, the ratios
        sn = θ_s/θ_n, cn = θ_c/θ_n and dn = θ_d/θ_n hold.
    """
    if k == 0:
        return float(np.sin(u)), float(np.cos(u)), 1.0, 1.0
    scale = np.pi / (K + K)
    q = np.exp(-np.pi / r_tau)
    θ = jacobian_theta_functions(scale * u, q)
    θ2_0 = np.sqrt(2.0 * abs(k) * K / np.pi)
    θ3_0 = np.sqrt(2.0 * K / np.pi)
    θ4_0 = np.sqrt(2.0 * np.sqrt(1.0 - k * k) * K / np.pi)
    θ1_prime_0 = θ2_0 * θ3_0 * θ4_0
    return (
        float(θ.theta_1 / (scale * θ1_prime_0)),
        float(θ.theta_2 / θ2_0),
        float(θ.theta_3 / θ3_0),
        float(θ.theta_4 / θ4_0),
    )


def neville_theta_function_derivatives(
    u: Real, k: Real, K: Real, r_tau: Real
) -> tuple[float, float, float, float]:
    """Derivatives with respect to u of the Neville theta functions.

    Takes the same arguments as :func:`neville_theta_functions` and returns
    (dθ_s/du, dθ_c/du, dθ_d/du, dθ_n/du). For k = 0 this is
    (cos u, -sin u, 0, 0).
    """
    if k == 0:
        return float(np.cos(u)), float(-np.sin(u)), 0.0, 0.0
    scale = np.pi / (K + K)
    q = np.exp(-np.pi / r_tau)
    dθ = jacobian_theta_function_derivatives(scale * u, q)
    θ2_0 = np.sqrt(2.0 * abs(k) * K / np.pi)
    θ3_0 = np.sqrt(2.0 * K / np.pi)
    θ4_0 = np.sqrt(2.0 * np.sqrt(1.0 - k * k) * K / np.pi)
    θ1_prime_0 = θ2_0 * θ3_0 * θ4_0
    return (
        float(dθ.theta_1 / θ1_prime_0),
        float(scale * dθ.theta_2 / θ2_0),
        float(scale * dθ.theta_3 / θ3_0),
        float(scale * dθ.theta_4 / θ4_0),
    )
