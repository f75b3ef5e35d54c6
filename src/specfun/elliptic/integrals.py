"""
Elliptic integrals of the first and second kinds, Jacobi's zeta function
and Heuman's lambda function.

The elliptic parameter can be given in three forms, selected by `arg`:

- ``'k'``: the modulus k,

- ``'m'``: the parameter m = k²,

- ``'a'``: the modular angle α, with k = sin α.

Complete integrals are computed with the arithmetic-geometric mean, and the
incomplete ones with Landen's descending transformation, both carried out in
extended precision.
"""

from __future__ import annotations
import warnings
import numpy as np
from dataclasses import dataclass
from typing import Literal

from ..precision import EXTENDED, MAX_FLOAT, ZERO, ONE, TWO, HALF, PI, PI_2, EPSILON
from ..tools import log, make_logger
from ..typing import Extended, Real

Argument = Literal["k", "m", "a"]

MAX_ITERATIONS = 64
"""Safety bound on the number of arithmetic-geometric mean steps."""


@dataclass
class EllipticIntegrals:
    """Incomplete and complete Legendre elliptic integrals.

    Parameters
    ----------
    F : float
        Incomplete integral of the first kind, F(φ, k).
    K : float
        Complete integral of the first kind, K(k).
    E : float
        Incomplete integral of the second kind, E(φ, k).
    Ek : float
        Complete integral of the second kind, E(k).
    """

    F: float
    K: float
    E: float
    Ek: float


def modulus_and_parameter(x: Real, arg: Argument = "k") -> tuple[Extended, Extended]:
    """Return the modulus k and the parameter m described by (`arg`, `x`)."""
    x = EXTENDED(x)
    if arg == "k":
        k = abs(x)
        return k, k * k
    if arg == "m":
        return np.sqrt(abs(x)), x
    if arg == "a":
        k = np.sin(x)
        return k, k * k
    raise ValueError(f"Invalid elliptic argument type {arg!r}, expected 'k', 'm' or 'a'")


def _converged(a_old: Extended, g_old: Extended, step: int) -> bool:
    if abs(a_old - g_old) <= a_old * EPSILON:
        return True
    if step == MAX_ITERATIONS - 1:
        log(f"AGM stopped after {MAX_ITERATIONS} steps, a={a_old}, g={g_old}")
        warnings.warn("Arithmetic-geometric mean did not converge")
        return True
    return False


def complete_elliptic_integrals(x: Real, arg: Argument = "k") -> tuple[float, float]:
    """Complete elliptic integrals K(k) and E(k).

    Parameters
    ----------
    x : float
        Modulus, parameter or modular angle, according to `arg`.
    arg : {'k', 'm', 'a'}, default = 'k'
        Form in which the elliptic parameter is given.

    Returns
    -------
    tuple[float, float]
        The pair (K, E). For m = 1, K is infinite and ``(MAX_FLOAT, 1.0)`` is
        returned.
    """
    if x == 0:
        return float(PI_2), float(PI_2)
    _, m = modulus_and_parameter(x, arg)
    if m == ONE:
        return MAX_FLOAT, 1.0
    a = ONE
    g = np.sqrt(ONE - m)
    two_n = ONE
    total = TWO - m
    for step in range(MAX_ITERATIONS):
        g_old, a_old = g, a
        a = HALF * (g_old + a_old)
        g = g_old * a_old
        two_n += two_n
        total -= two_n * (a * a - g)
        if _converged(a_old, g_old, step):
            break
        g = np.sqrt(g)
    return float(PI_2 / a), float(PI_2 / TWO / a * total)


def complete_elliptic_integral_first_kind(x: Real, arg: Argument = "k") -> float:
    return complete_elliptic_integrals(x, arg)[0]


def complete_elliptic_integral_second_kind(x: Real, arg: Argument = "k") -> float:
    return complete_elliptic_integrals(x, arg)[1]


def _landen_transform(φ: Extended, parameter: Extended) -> tuple[Extended, ...]:
    # Descending Landen transformation for 0 <= φ <= π/2 and 0 < m < 1.
    two_n = ONE
    a = ONE
    g = np.sqrt(ONE - parameter)
    total = TWO * (TWO - parameter)
    integral = ZERO
    logger = make_logger(3)
    for step in range(MAX_ITERATIONS):
        tan_2n_φ = np.tan(two_n * φ)
        total -= two_n * (a - g) * (a - g)
        two_n += two_n
        φ -= np.arctan((a - g) * tan_2n_φ / (a + g * tan_2n_φ * tan_2n_φ)) / two_n
        integral += (a - g) * np.sin(two_n * φ)
        g_old, a_old = g, a
        a = HALF * (g_old + a_old)
        g = np.sqrt(g_old * a_old)
        logger(f"Landen step {step + 1}, a={a}, g={g}")
        if _converged(a_old, g_old, step):
            break
    logger.close()
    F = φ / g
    K = PI_2 / g
    E = HALF * integral + total * φ / (4 * g)
    Ek = PI_2 / TWO / a * total / TWO
    return F, K, E, Ek


def _reduced_amplitude(φ: Extended, m: Extended) -> tuple[Extended, ...]:
    # Uses F(φ + nπ) = F(φ) + 2nK and E(φ + nπ) = E(φ) + 2nE to reduce φ.
    n = int((φ + PI_2) / PI)
    φ -= n * PI
    n += n
    F, K, E, Ek = _landen_transform(abs(φ), m)
    if φ >= 0:
        return F + n * K, K, E + n * Ek, Ek
    return n * K - F, K, n * Ek - E, Ek


def _large_modulus(amplitude: Extended, k: Extended) -> tuple[Extended, ...]:
    # Reciprocal modulus transformation, F(φ|m) = F(θ|1/m) / k, sin θ = k sin φ.
    m = k * k
    n = int((amplitude + PI_2) / PI)
    φ = amplitude - n * PI
    n += n
    sin_φ = np.sin(φ)
    if abs(sin_φ) >= ONE / k:
        φ = PI_2 if φ > 0 else -PI_2
    else:
        φ = np.arcsin(k * sin_φ)
    F, K, E, Ek = _landen_transform(abs(φ), ONE / m)
    Ek = k * Ek + (ONE - m) * K / k
    E = k * E + (ONE - m) * F / k
    if φ >= 0:
        F += n * K
        E += n * Ek
    else:
        F = n * K - F
        E = n * Ek - E
    return F / k, K / k, E, Ek


def legendre_elliptic_integrals(
    amplitude: Real, x: Real, arg: Argument = "k"
) -> EllipticIntegrals:
    """Incomplete Legendre elliptic integrals of the first and second kinds.

    .. math::
        F(φ, k) = \\int_0^φ \\frac{dθ}{\\sqrt{1 - k^2 \\sin^2 θ}}, \\quad
        E(φ, k) = \\int_0^φ \\sqrt{1 - k^2 \\sin^2 θ}\\, dθ

    Parameters
    ----------
    amplitude : float
        Upper limit φ of the integrals, any real number.
    x : float
        Modulus, parameter or modular angle, according to `arg`. Negative
        parameters and moduli larger than one are reduced to 0 < m < 1 by the
        imaginary and reciprocal modulus transformations.
    arg : {'k', 'm', 'a'}, default = 'k'

    Returns
    -------
    EllipticIntegrals
        F(φ, k), K(k), E(φ, k) and E(k). Infinite values are saturated to
        ``MAX_FLOAT``.
    """
    if x == 0:
        return EllipticIntegrals(float(amplitude), float(PI_2), float(amplitude), float(PI_2))
    sign = 1 if amplitude >= 0 else -1
    k, m = modulus_and_parameter(x, arg)
    φ = abs(EXTENDED(amplitude))
    if ZERO < m < ONE:
        F, K, E, Ek = _reduced_amplitude(φ, m)
        return EllipticIntegrals(float(sign * F), float(K), float(sign * E), float(Ek))
    if m < ZERO:
        # Imaginary modulus transformation to m' = -m / (1 - m).
        φ = PI_2 - φ
        F, K, E, Ek = _reduced_amplitude(abs(φ), abs(m / (ONE - m)))
        root = np.sqrt(ONE - m)
        if φ < 0:
            F, E = K + F, Ek + E
        else:
            F, E = K - F, Ek - E
        return EllipticIntegrals(
            float(sign * F / root), float(K / root), float(sign * E * root), float(Ek * root)
        )
    if m == ONE:
        if φ >= PI_2:
            n = int((φ + PI_2) / PI)
            E = 2 * n + np.sin(φ - n * PI)
            return EllipticIntegrals(sign * MAX_FLOAT, MAX_FLOAT, float(sign * E), 1.0)
        t = np.tan(φ)
        return EllipticIntegrals(
            float(sign * np.log(t + np.sqrt(ONE + t * t))),
            MAX_FLOAT,
            float(sign * np.sin(φ)),
            1.0,
        )
    F, K, E, Ek = _large_modulus(φ, k)
    return EllipticIntegrals(float(sign * F), float(K), float(sign * E), float(Ek))


def legendre_elliptic_integral_first_kind(
    amplitude: Real, x: Real, arg: Argument = "k"
) -> float:
    return legendre_elliptic_integrals(amplitude, x, arg).F


def legendre_elliptic_integral_second_kind(
    amplitude: Real, x: Real, arg: Argument = "k"
) -> float:
    return legendre_elliptic_integrals(amplitude, x, arg).E


def jacobi_zeta(amplitude: Real, x: Real, arg: Argument = "k") -> float:
    """Jacobi's zeta function Z(φ, k) = E(φ, k) - E(k) F(φ, k) / K(k).

    Computed from the sum of the arithmetic-geometric mean differences along
    Landen's sequence of amplitudes. Z vanishes at φ = 0, φ = ±π/2 and k = 0,
    and equals sin φ for k = 1.
    """
    if amplitude == 0 or abs(amplitude) == float(PI_2) or x == 0:
        return 0.0
    _, m = modulus_and_parameter(x, arg)
    if m == ONE:
        return float(np.sin(EXTENDED(amplitude)))
    sign = 1 if amplitude >= 0 else -1
    φ = abs(EXTENDED(amplitude))
    g = np.sqrt(ONE - m)
    a = ONE
    total = ZERO
    for step in range(MAX_ITERATIONS):
        tan_φ = np.tan(φ)
        φ += φ - np.arctan((a - g) * tan_φ / (a + g * tan_φ * tan_φ))
        total += (a - g) * np.sin(φ)
        g_old, a_old = g, a
        a = HALF * (g_old + a_old)
        g = np.sqrt(g_old * a_old)
        if _converged(a_old, g_old, step):
            break
    return float(sign * HALF * total)


def heuman_lambda(amplitude: Real, modular_angle: Real) -> float:
    """Heuman's lambda function Λ₀(φ, α).

    .. math::
        Λ_0(φ, α) = \\frac{2}{π}\\left[K(k) E(φ, k') - (K(k) - E(k)) F(φ, k')\\right]

    with k = sin α and k' = cos α.
    """
    if modular_angle == 0:
        return float(np.sin(EXTENDED(amplitude)))
    if modular_angle == float(PI_2):
        return float(EXTENDED(amplitude) / PI_2)
    if amplitude == 0:
        return 0.0
    if abs(amplitude) == float(PI_2):
        return 1.0 if amplitude > 0 else -1.0
    k = np.sin(EXTENDED(modular_angle))
    ck = np.sqrt(ONE - k * k)
    complementary = legendre_elliptic_integrals(amplitude, ck, "k")
    K, Ek = complete_elliptic_integrals(k, "k")
    return (K * complementary.E - (K - Ek) * complementary.F) / float(PI_2)
