"""Probability density functions of continuous distributions.

Densities are evaluated in double precision and vanish outside the support
of the distribution. Where a density diverges at a boundary point the value
``MAX_FLOAT`` is returned.
"""

from __future__ import annotations
import numpy as np
from scipy.special import beta, betaln, gammaln  # type: ignore

from ..precision import MAX_FLOAT
from ..typing import Real

_T2_CUTOFF = 3.5553731598732436e102  # 1/cbrt(DBL_MIN)


def beta_density(x: Real, a: Real, b: Real) -> float:
    """Beta(a, b) density x^{a-1} (1-x)^{b-1} / B(a, b) on 0 < x < 1."""
    if x <= 0 or x >= 1:
        return 0.0
    return float(x ** (a - 1.0) * (1.0 - x) ** (b - 1.0) / beta(a, b))


def cauchy_density(x: Real) -> float:
    return float(1.0 / (np.pi * (1.0 + x * x)))


def chi_square_density(x: Real, n: int) -> float:
    """Chi-square density with `n` degrees of freedom."""
    if x < 0:
        return 0.0
    if x == 0:
        if n == 1:
            return MAX_FLOAT
        if n == 2:
            return 0.5
        return 0.0
    n2 = 0.5 * n
    ln_density = (n2 - 1.0) * np.log(0.5 * x) - 0.5 * x - gammaln(n2)
    return float(0.5 * np.exp(ln_density))


def exponential_density(x: Real) -> float:
    return 0.0 if x < 0 else float(np.exp(-x))


def f_density(x: Real, v1: int, v2: int) -> float:
    """Snedecor's F density with `v1` and `v2` degrees of freedom."""
    if x <= 0:
        return 0.0
    v12 = v1 / 2.0
    v22 = v2 / 2.0
    ln_density = (
        v12 * np.log(v1)
        + v22 * np.log(v2)
        + (v12 - 1.0) * np.log(x)
        - (v12 + v22) * np.log(v2 + v1 * x)
        - betaln(v12, v22)
    )
    return float(np.exp(ln_density))


def gaussian_density(x: Real) -> float:
    """Standard normal density."""
    return float(np.exp(-0.5 * x * x) / np.sqrt(2.0 * np.pi))


def gumbels_maximum_density(x: Real) -> float:
    with np.errstate(over="ignore", invalid="ignore"):
        t = np.exp(-x)
        value = t * np.exp(-t)
    return 0.0 if np.isnan(value) else float(value)


def gumbels_minimum_density(x: Real) -> float:
    with np.errstate(over="ignore", invalid="ignore"):
        t = np.exp(x)
        value = t * np.exp(-t)
    return 0.0 if np.isnan(value) else float(value)


def kumaraswamys_density(x: Real, a: Real, b: Real) -> float:
    """Kumaraswamy density a b x^{a-1} (1 - x^a)^{b-1} on 0 < x < 1."""
    if x <= 0 or x >= 1:
        return 0.0
    t = x ** (a - 1.0)
    return float(a * b * t * (1.0 - t * x) ** (b - 1.0))


def laplace_density(x: Real) -> float:
    return float(0.5 * np.exp(-abs(x)))


def logistic_density(x: Real) -> float:
    with np.errstate(over="ignore"):
        t = np.exp(-abs(x))
    return float(t / ((1.0 + t) * (1.0 + t)))


def pareto_density(x: Real, a: Real) -> float:
    """Pareto density a / x^{a+1} for x >= 1."""
    if x < 1:
        return 0.0
    return float(a / x ** (a + 1.0))


def t2_density(x: Real) -> float:
    """Student's t density with two degrees of freedom, (2 + x²)^{-3/2}."""
    if abs(x) >= _T2_CUTOFF:
        return 0.0
    p = 1.0 / (2.0 + x * x)
    return float(p * np.sqrt(p))


def uniform_0_1_density(x: Real) -> float:
    """Uniform density on (0, 1).

    The jumps at the endpoints are marked with ``MAX_FLOAT`` at x = 0 and
    ``-MAX_FLOAT`` at x = 1, as the derivative of the distribution function.
    """
    if x <= 0:
        return MAX_FLOAT if x == 0 else 0.0
    if x >= 1:
        return -MAX_FLOAT if x == 1 else 0.0
    return 1.0


def weibull_density(x: Real, a: Real) -> float:
    """Weibull density a x^{a-1} exp(-x^a) with shape parameter `a`."""
    if x < 0:
        return 0.0
    if x == 0:
        if a > 1:
            return 0.0
        if a == 1:
            return 1.0
        return MAX_FLOAT
    t = np.log(a) + (a - 1.0) * np.log(x) - x**a
    if t >= np.log(MAX_FLOAT):
        return MAX_FLOAT
    return float(np.exp(t))
