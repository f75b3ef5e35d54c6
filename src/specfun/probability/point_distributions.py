"""Probability mass functions Pr(X = k) of discrete distributions."""

from __future__ import annotations
import numpy as np
from scipy.special import binom, gammaln  # type: ignore

from ..typing import Real


def binomial_point_distribution(n: int, k: int, p: Real) -> float:
    """Probability of `k` successes in `n` trials of probability `p`."""
    if k < 0 or k > n:
        return 0.0
    if p == 0:
        return 1.0 if k == 0 else 0.0
    if p == 1:
        return 1.0 if k == n else 0.0
    return float(
        np.exp(
            gammaln(n + 1)
            - gammaln(k + 1)
            - gammaln(n - k + 1)
            + k * np.log(p)
            + (n - k) * np.log1p(-p)
        )
    )


def geometric_point_distribution(k: int, p: Real) -> float:
    """Probability of `k` failures before the first success."""
    if k < 0 or p == 0:
        return 0.0
    if p == 1:
        return 1.0 if k == 0 else 0.0
    return float(p * (1.0 - p) ** k)


def hypergeometric_point_distribution(n1: int, n2: int, n: int, k: int) -> float:
    """Probability of drawing `k` marked items in `n` draws without replacement
    from a population of `n1` marked and `n2` unmarked items."""
    if k < 0 or k > n or k > n1 or k < n - n2:
        return 0.0
    return float(binom(n1, k) * binom(n2, n - k) / binom(n1 + n2, n))


def log_series_point_distribution(k: int, p: Real) -> float:
    if k < 1:
        return 0.0
    return float(-(p**k) / (k * np.log1p(-p)))


def negative_binomial_point_distribution(n: int, k: int, p: Real) -> float:
    """Probability of `k` failures before the `n`-th success."""
    if k < 0 or p == 0:
        return 0.0
    if p == 1:
        return 1.0 if k == 0 else 0.0
    return float(
        np.exp(
            gammaln(n + k)
            - gammaln(k + 1)
            - gammaln(n)
            + n * np.log(p)
            + k * np.log1p(-p)
        )
    )


def poisson_point_distribution(k: int, mu: Real) -> float:
    if k < 0:
        return 0.0
    if mu == 0:
        return 1.0 if k == 0 else 0.0
    return float(np.exp(k * np.log(mu) - mu - gammaln(k + 1)))
