"""Cumulative distribution functions Pr(X <= k) of discrete distributions."""

from __future__ import annotations
import numpy as np
from scipy.special import binom  # type: ignore

from ..typing import Real
from .distributions import beta_distribution, gamma_distribution


def binomial_cumulative_distribution(n: int, k: int, p: Real) -> float:
    """Pr(X <= k) = I_{1-p}(n - k, k + 1) for a binomial law B(n, p)."""
    if k < 0:
        return 0.0
    if k >= n or p == 0:
        return 1.0
    if p == 1:
        return 0.0
    return beta_distribution(1.0 - p, n - k, k + 1)


def geometric_cumulative_distribution(k: int, p: Real) -> float:
    if k < 0 or p == 0:
        return 0.0
    if p == 1:
        return 1.0
    return float(-np.expm1((k + 1) * np.log1p(-p)))


def hypergeometric_cumulative_distribution(n1: int, n2: int, n: int, k: int) -> float:
    """Sum of hypergeometric probabilities from the lowest admissible count to `k`."""
    k1 = 0 if n <= n2 else n - n2
    k2 = n if n <= n1 else n1
    if k < k1:
        return 0.0
    if k >= k2:
        return 1.0
    summand = binom(n1, k1) * binom(n2, n - k1) / binom(n1 + n2, n)
    total = summand
    for i in range(k1, k):
        summand *= (n1 - i) * (n - i) / ((i + 1) * (n2 - n + i + 1))
        total += summand
    return float(total)


def log_series_cumulative_distribution(k: int, p: Real) -> float:
    if k <= 0:
        return 0.0
    i = np.arange(1, k + 1)
    return float(-np.sum(np.power(float(p), i) / i) / np.log1p(-p))


def negative_binomial_cumulative_distribution(n: int, k: int, p: Real) -> float:
    """Pr(X <= k) = I_p(n, k + 1) for the number of failures before `n` successes."""
    if k < 0 or p == 0:
        return 0.0
    if p == 1:
        return 1.0
    return beta_distribution(p, n, k + 1)


def poisson_cumulative_distribution(k: int, mu: Real) -> float:
    """Pr(X <= k) = 1 - P(k + 1, μ) for a Poisson law of mean μ."""
    if k < 0:
        return 0.0
    return 1.0 - gamma_distribution(mu, k + 1)
