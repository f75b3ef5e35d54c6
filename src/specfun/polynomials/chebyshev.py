from __future__ import annotations
import numpy as np
from abc import abstractmethod
from typing import Optional

from .family import RecurrenceFamily, Recurrence
from ..typing import Extended
from ..precision import EXTENDED, ZERO, ONE, TWO, HALF

_FOUR = EXTENDED(4)


def _alternating(n: int, value) -> Extended:
    """Return (-1)^n * value."""
    value = EXTENDED(value)
    return value if n % 2 == 0 else -value


class ChebyshevFamily(RecurrenceFamily):
    r"""
    Common base of the four kinds of Chebyshev polynomials on :math:`[-1, 1]`.

    All kinds share the recurrence

    .. math::
       P_{k+1}(t) = 2t P_k(t) - P_{k-1}(t),

    and differ only in the seed P_1(t). Each kind has an explicit
    trigonometric representation in terms of :math:`θ = \arccos t`, used for
    interior points when the degree exceeds :attr:`crossover`, and closed
    formulas at the endpoints :math:`t = \pm 1`.

    Parameters
    ----------
    crossover : int, optional
        Degree above which the trigonometric form replaces the recurrence.
        Defaults to the class attribute of each kind.
    check_args : bool, default = False
        Unused; the Chebyshev families have no shape parameters.
    """

    crossover: int = 6

    def __init__(self, crossover: Optional[int] = None, check_args: bool = False):
        if crossover is not None:
            self.crossover = crossover
        super().__init__(check_args)

    def argument(self, x: Extended) -> Extended:
        """Map the evaluation point to the canonical variable t in [-1, 1]."""
        return x

    def get_recurrence(self, k: int) -> Recurrence:
        """Chebyshev recurrence, identical for all degrees."""
        _ = k
        return (TWO, ZERO, ONE)

    def seeds(self, x: Extended) -> tuple[Extended, Extended]:
        return ONE, self.first(self.argument(x))

    @abstractmethod
    def first(self, t: Extended) -> Extended:
        """P_1 as a function of the canonical variable."""
        ...

    @abstractmethod
    def at_one(self, n: int) -> Extended: ...

    @abstractmethod
    def at_minus_one(self, n: int) -> Extended: ...

    @abstractmethod
    def trigonometric(self, t: Extended, n: int) -> Extended: ...

    def closed_form(self, x: Extended, n: int) -> Optional[Extended]:
        t = self.argument(x)
        if t == ONE:
            return self.at_one(n)
        if t == -ONE:
            return self.at_minus_one(n)
        if n > self.crossover and abs(t) < ONE:
            return self.trigonometric(t, n)
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(crossover={self.crossover})"


class ChebyshevT(ChebyshevFamily):
    """Chebyshev polynomials of the first kind, T_n(cos θ) = cos(nθ)."""

    name = "chebyshev_t"
    crossover = 6

    def first(self, t):
        return t

    def at_one(self, n):
        return ONE

    def at_minus_one(self, n):
        return _alternating(n, ONE)

    def trigonometric(self, t, n):
        return np.cos(EXTENDED(n) * np.arccos(t))


class ChebyshevU(ChebyshevFamily):
    """Chebyshev polynomials of the second kind, U_n(cos θ) = sin((n+1)θ)/sin θ."""

    name = "chebyshev_u"
    crossover = 8

    def first(self, t):
        return TWO * t

    def at_one(self, n):
        return EXTENDED(n + 1)

    def at_minus_one(self, n):
        return _alternating(n, n + 1)

    def trigonometric(self, t, n):
        θ = np.arccos(t)
        sin_θ = np.sin(θ)
        m = EXTENDED(n + 1)
        if sin_θ != ZERO:
            return np.sin(m * θ) / sin_θ
        return m * np.cos(m * θ) / t


class ChebyshevV(ChebyshevFamily):
    """Chebyshev polynomials of the third kind, V_n(cos θ) = cos((n+½)θ)/cos(θ/2)."""

    name = "chebyshev_v"
    crossover = 8

    def first(self, t):
        return TWO * t - ONE

    def at_one(self, n):
        return ONE

    def at_minus_one(self, n):
        return _alternating(n, 2 * n + 1)

    def trigonometric(self, t, n):
        θ = np.arccos(t)
        if np.sin(θ * HALF) == ONE:
            return self.at_minus_one(n)
        return np.cos((EXTENDED(n) + HALF) * θ) / np.cos(θ * HALF)


class ChebyshevW(ChebyshevFamily):
    """Chebyshev polynomials of the fourth kind, W_n(cos θ) = sin((n+½)θ)/sin(θ/2)."""

    name = "chebyshev_w"
    crossover = 8

    def first(self, t):
        return TWO * t + ONE

    def at_one(self, n):
        return EXTENDED(2 * n + 1)

    def at_minus_one(self, n):
        return _alternating(n, ONE)

    def trigonometric(self, t, n):
        θ = np.arccos(t)
        if np.cos(θ * HALF) == ONE:
            return self.at_one(n)
        return np.sin((EXTENDED(n) + HALF) * θ) / np.sin(θ * HALF)


class ShiftedChebyshev:
    """Mixin that moves a Chebyshev kind from [-1, 1] to [0, 1] via t = 2x - 1.

    The shifted recurrence reads P*_{k+1}(x) = (4x - 2) P*_k(x) - P*_{k-1}(x),
    and the endpoint formulas apply at x = 1 and x = 0.
    """

    def argument(self, x: Extended) -> Extended:
        return x + x - ONE

    def get_recurrence(self, k: int) -> Recurrence:
        _ = k
        return (_FOUR, -TWO, ONE)


class ShiftedChebyshevT(ShiftedChebyshev, ChebyshevT):
    """Shifted Chebyshev polynomials of the first kind, T*_n(x) = T_n(2x - 1)."""

    name = "shifted_chebyshev_t"
    crossover = 6


class ShiftedChebyshevU(ShiftedChebyshev, ChebyshevU):
    """Shifted Chebyshev polynomials of the second kind, U*_n(x) = U_n(2x - 1)."""

    name = "shifted_chebyshev_u"
    crossover = 6


class ShiftedChebyshevV(ShiftedChebyshev, ChebyshevV):
    """Shifted Chebyshev polynomials of the third kind, V*_n(x) = V_n(2x - 1)."""

    name = "shifted_chebyshev_v"
    crossover = 6


class ShiftedChebyshevW(ShiftedChebyshev, ChebyshevW):
    """Shifted Chebyshev polynomials of the fourth kind, W*_n(x) = W_n(2x - 1)."""

    name = "shifted_chebyshev_w"
    crossover = 4
