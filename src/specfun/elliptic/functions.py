"""
Jacobi elliptic functions, their inverses and the nome.

All functions take the argument u first, followed by the elliptic
parameter `x` in the form selected by `arg` (see
:mod:`specfun.elliptic.integrals`). Parameters outside 0 <= m <= 1 are
handled by the reciprocal modulus transformation (m > 1) and the imaginary
modulus transformation (m < 0).
"""

from __future__ import annotations
import numpy as np

from ..precision import EXTENDED, MAX_FLOAT, ZERO, ONE, TWO, HALF, PI, PI_2, EPSILON
from ..tools import make_logger
from ..typing import Real
from .integrals import (
    Argument,
    MAX_ITERATIONS,
    modulus_and_parameter,
    complete_elliptic_integral_first_kind,
    legendre_elliptic_integral_first_kind,
)

Triple = tuple[float, float, float]


def jacobi_am(u: Real, x: Real, arg: Argument = "k") -> float:
    """Jacobi amplitude am(u, k), the inverse of F(φ, k) with respect to φ.

    Uses the descending Landen (arithmetic-geometric mean) sequence
    a_{n+1} = (a_n + b_n)/2, b_{n+1} = √(a_n b_n), c_{n+1} = (a_n - b_n)/2,
    followed by the backward recursion
    φ_{n-1} = (φ_n + arcsin(c_n sin φ_n / a_n)) / 2 from φ_N = 2^N a_N u.
    """
    k, m = modulus_and_parameter(x, arg)
    u = EXTENDED(u)
    if m == ZERO:
        return float(u)
    if m == ONE:
        return float(TWO * np.arctan(np.exp(u)) - PI_2)
    if m > ONE:
        sn, cn, _ = jacobi_sn_cn_dn(u, x, arg)
        return float(np.arctan2(sn, cn))
    a = [ONE]
    c = [ZERO]
    b = np.sqrt(ONE - m)
    for _ in range(MAX_ITERATIONS):
        a_n = a[-1]
        a.append(HALF * (a_n + b))
        c.append(HALF * (a_n - b))
        b = np.sqrt(a_n * b)
        if abs(c[-1]) <= EPSILON * a[-1]:
            break
    N = len(a) - 1
    φ = EXTENDED(2**N) * a[N] * u
    for n in range(N, 0, -1):
        φ = HALF * (φ + np.arcsin(c[n] * np.sin(φ) / a[n]))
    make_logger(3)(f"jacobi_am({u}, m={m}) used {N} Landen steps")
    return float(φ)


def jacobi_sn_cn_dn(u: Real, x: Real, arg: Argument = "k") -> Triple:
    """Return the triple (sn(u, k), cn(u, k), dn(u, k))."""
    k, m = modulus_and_parameter(x, arg)
    u = EXTENDED(u)
    if m == ONE:
        sech = ONE / np.cosh(u)
        return float(np.tanh(u)), float(sech), float(sech)
    if m == ZERO:
        return float(np.sin(u)), float(np.cos(u)), 1.0
    if m > ONE:
        sn, dn, cn = jacobi_sn_cn_dn(k * u, ONE / k, "k")
        return float(sn / k), cn, dn
    if m < ZERO:
        root = np.sqrt(ONE - m)
        sd, cd, nd = jacobi_sd_cd_nd(root * u, -m / (ONE - m), "m")
        return float(sd / root), cd, nd
    φ = EXTENDED(jacobi_am(u, x, arg))
    sn = np.sin(φ)
    return float(sn), float(np.cos(φ)), float(np.sqrt(ONE - m * sn * sn))


def _ratios(numerators: tuple[float, float, float], denominator: float) -> Triple:
    if denominator == 0:
        return MAX_FLOAT, MAX_FLOAT, MAX_FLOAT
    a, b, c = numerators
    return a / denominator, b / denominator, c / denominator


def jacobi_cs_ds_ns(u: Real, x: Real, arg: Argument = "k") -> Triple:
    """Return (cs, ds, ns) = (cn, dn, 1) / sn, or MAX_FLOAT where sn = 0."""
    sn, cn, dn = jacobi_sn_cn_dn(u, x, arg)
    return _ratios((cn, dn, 1.0), sn)


def jacobi_sc_dc_nc(u: Real, x: Real, arg: Argument = "k") -> Triple:
    """Return (sc, dc, nc) = (sn, dn, 1) / cn, or MAX_FLOAT where cn = 0."""
    sn, cn, dn = jacobi_sn_cn_dn(u, x, arg)
    return _ratios((sn, dn, 1.0), cn)


def jacobi_sd_cd_nd(u: Real, x: Real, arg: Argument = "k") -> Triple:
    """Return (sd, cd, nd) = (sn, cn, 1) / dn, or MAX_FLOAT where dn = 0."""
    sn, cn, dn = jacobi_sn_cn_dn(u, x, arg)
    return _ratios((sn, cn, 1.0), dn)


def jacobi_sn(u: Real, x: Real, arg: Argument = "k") -> float:
    return jacobi_sn_cn_dn(u, x, arg)[0]


def jacobi_cn(u: Real, x: Real, arg: Argument = "k") -> float:
    return jacobi_sn_cn_dn(u, x, arg)[1]


def jacobi_dn(u: Real, x: Real, arg: Argument = "k") -> float:
    return jacobi_sn_cn_dn(u, x, arg)[2]


def _asech(x: float) -> float:
    if x == 0:
        return MAX_FLOAT
    return float(np.arccosh(1.0 / x))


def _parameter(x: Real, arg: Argument) -> tuple[float, float]:
    k, m = modulus_and_parameter(x, arg)
    return float(k), float(m)


def inverse_jacobi_sn(s: Real, x: Real, arg: Argument = "k") -> float:
    """Return u such that sn(u, k) = s, with |u| <= K(k) for 0 < m < 1."""
    k, m = _parameter(x, arg)
    if 0 < m < 1:
        return legendre_elliptic_integral_first_kind(np.arcsin(s), k, "k")
    if m == 0:
        return float(np.arcsin(s))
    if m == 1:
        if s == -1:
            return -MAX_FLOAT
        if s == 1:
            return MAX_FLOAT
        return float(np.arctanh(s))
    if m > 1:
        return inverse_jacobi_sn(k * s, 1.0 / k, "k") / k
    kp = np.sqrt(1.0 - m)
    return _inverse_jacobi_sd(kp * s, k / kp) / kp


def inverse_jacobi_cn(c: Real, x: Real, arg: Argument = "k") -> float:
    """Return u such that cn(u, k) = c, with 0 <= u <= 2K(k) for 0 < m < 1."""
    k, m = _parameter(x, arg)
    if 0 < m < 1:
        return legendre_elliptic_integral_first_kind(np.arccos(c), k, "k")
    if m == 0:
        return float(np.arccos(c))
    if m == 1:
        return _asech(c)
    if m > 1:
        return inverse_jacobi_dn(c, 1.0 / k, "k") / k
    kp = np.sqrt(1.0 - m)
    return _inverse_jacobi_cd(c, k / kp) / kp


def inverse_jacobi_dn(d: Real, x: Real, arg: Argument = "k") -> float:
    """Return u such that dn(u, k) = d, with 0 <= u <= K(k) for 0 < m < 1."""
    k, m = _parameter(x, arg)
    if 0 < m < 1:
        φ = np.arcsin(np.sqrt(1.0 - d * d) / abs(k))
        return legendre_elliptic_integral_first_kind(φ, k, "k")
    if m == 0:
        return 0.0
    if m == 1:
        return _asech(d)
    if m > 1:
        return inverse_jacobi_cn(d, 1.0 / k, "k") / k
    kp = np.sqrt(1.0 - m)
    return _inverse_jacobi_nd(d, k / kp) / kp


def _inverse_jacobi_sd(s: float, k: float) -> float:
    m = k * k
    if 0 < m < 1:
        φ = np.arcsin(s / np.sqrt(1.0 + m * s * s))
        return legendre_elliptic_integral_first_kind(φ, k, "k")
    if m == 0:
        return float(np.arcsin(s))
    return float(np.arcsinh(s))


def _inverse_jacobi_cd(c: float, k: float) -> float:
    m = k * k
    if 0 < m < 1:
        φ = np.arccos(c * np.sqrt((1.0 - m) / (1.0 - m * c * c)))
        return legendre_elliptic_integral_first_kind(φ, k, "k")
    if m == 0:
        return float(np.arccos(c))
    return 0.0


def _inverse_jacobi_nd(n: float, k: float) -> float:
    return inverse_jacobi_dn(1.0 / n, k, "k")


def nome(k: Real) -> float:
    """Nome q = exp(-π K'(k) / K(k)), with q = 0 for k = 0 and q = 1 for |k| >= 1."""
    if k == 0:
        return 0.0
    if abs(k) >= 1:
        return 1.0
    K = complete_elliptic_integral_first_kind(k, "k")
    cK = complete_elliptic_integral_first_kind(1.0 - k * k, "m")
    return float(np.exp(-PI * EXTENDED(cK) / EXTENDED(K)))
