"""Orthogonal polynomials of a discrete variable.

The discrete Chebyshev and Krawtchouk families are orthogonal on a finite
set of points, so only finitely many degrees are defined. Their evaluators
return 0 for larger degrees and clamp sequence and series requests to the
largest valid degree. Charlier polynomials are orthogonal on the whole
set of natural numbers, with Poisson weights, and have no such bound.
"""

from __future__ import annotations
import numpy as np

from ..tools import InvalidParameter
from ..typing import Real
from .family import RecurrenceFamily, Recurrence
from ..precision import EXTENDED, ONE, TWO


def _as_size(N: int, name: str) -> int:
    if isinstance(N, (bool, np.bool_)) or not isinstance(N, (int, np.integer)):
        raise TypeError(f"Support size {name} must be an integer, got {N!r}")
    return int(N)


class DiscreteChebyshev(RecurrenceFamily):
    r"""
    Discrete Chebyshev (Gram) polynomials :math:`t_n(x)` on {0, ..., N-1}.

    .. math::
       (k+1) t_{k+1}(x) = (2k+1)(2x-N+1) t_k(x) - k(N^2-k^2) t_{k-1}(x).

    Only the degrees 0 ... N-1 are defined.
    """

    name = "discrete_chebyshev_t"

    def __init__(self, N: int, check_args: bool = False):
        self.N = _as_size(N, "N")
        super().__init__(check_args)

    @property
    def max_degree(self) -> int:
        return self.N - 1

    def validate(self) -> None:
        if self.N < 1:
            raise InvalidParameter(self.name, "N", self.N, "N >= 1")

    def get_recurrence(self, k: int) -> Recurrence:
        N = EXTENDED(self.N)
        k_plus_1 = EXTENDED(k + 1)
        two_k_plus_1 = EXTENDED(2 * k + 1)
        α_k = 2 * two_k_plus_1 / k_plus_1
        β_k = -two_k_plus_1 * (N - 1) / k_plus_1
        γ_k = EXTENDED(k) * (N * N - EXTENDED(k) * k) / k_plus_1
        return (α_k, β_k, γ_k)

    def seeds(self, x):
        return ONE, TWO * x - EXTENDED(self.N - 1)

    def __repr__(self) -> str:
        return f"DiscreteChebyshev(N={self.N})"


class Krawtchouk(RecurrenceFamily):
    r"""
    Krawtchouk polynomials :math:`K_n(x; p, N)` on {0, ..., N}.

    Orthogonal with respect to the binomial distribution of parameters
    p and N, in the monic normalization

    .. math::
       (k+1) K_{k+1}(x) = (x - k - p(N-2k)) K_k(x) - (N-k+1) p (1-p) K_{k-1}(x).

    Only the degrees 0 ... N are defined.
    """

    name = "krawtchouk_k"

    def __init__(self, p: Real, N: int, check_args: bool = False):
        self.p = EXTENDED(p)
        self.N = _as_size(N, "N")
        super().__init__(check_args)

    @property
    def max_degree(self) -> int:
        return self.N

    def validate(self) -> None:
        if not (0 < self.p < 1):
            raise InvalidParameter(self.name, "p", float(self.p), "0 < p < 1")
        if self.N < 0:
            raise InvalidParameter(self.name, "N", self.N, "N >= 0")

    def get_recurrence(self, k: int) -> Recurrence:
        p, N = self.p, self.N
        k_plus_1 = EXTENDED(k + 1)
        α_k = ONE / k_plus_1
        β_k = -(k + p * (N - 2 * k)) / k_plus_1
        γ_k = EXTENDED(N - k + 1) * p * (ONE - p) / k_plus_1
        return (α_k, β_k, γ_k)

    def seeds(self, x):
        return ONE, x - self.N * self.p

    def __repr__(self) -> str:
        return f"Krawtchouk(p={float(self.p)}, N={self.N})"


class Charlier(RecurrenceFamily):
    r"""
    Charlier polynomials :math:`C_n(x; a)`, orthogonal for the Poisson weights.

    .. math::
       a C_{k+1}(x) = (k + a - x) C_k(x) - k C_{k-1}(x), \quad a > 0.
    """

    name = "charlier_c"

    def __init__(self, a: Real, check_args: bool = False):
        self.a = EXTENDED(a)
        super().__init__(check_args)

    def validate(self) -> None:
        if not self.a > 0:
            raise InvalidParameter(self.name, "a", float(self.a), "a > 0")

    def get_recurrence(self, k: int) -> Recurrence:
        a = self.a
        return (-ONE / a, (k + a) / a, EXTENDED(k) / a)

    def seeds(self, x):
        return ONE, (self.a - x) / self.a

    def __repr__(self) -> str:
        return f"Charlier(a={float(self.a)})"
