"""Single-value evaluators, one per polynomial family.

Each function builds the corresponding :class:`RecurrenceFamily` and
returns ``family.evaluate(x, n)``: a double, saturated to ``±MAX_FLOAT`` on
overflow, and 0 for negative degrees. Arrays of points are accepted.
"""

from __future__ import annotations
from typing import Any

from ..typing import Degree, Real, RealOrArray, Vector
from .family import RecurrenceFamily
from .chebyshev import (
    ChebyshevT,
    ChebyshevU,
    ChebyshevV,
    ChebyshevW,
    ShiftedChebyshevT,
    ShiftedChebyshevU,
    ShiftedChebyshevV,
    ShiftedChebyshevW,
)
from .legendre import Legendre, ShiftedLegendre
from .jacobi import Jacobi, Gegenbauer
from .hermite import Hermite, HermiteE
from .laguerre import Laguerre
from .discrete import DiscreteChebyshev, Krawtchouk, Charlier

FAMILIES: dict[str, type[RecurrenceFamily]] = {
    cls.name: cls
    for cls in (
        ChebyshevT,
        ChebyshevU,
        ChebyshevV,
        ChebyshevW,
        ShiftedChebyshevT,
        ShiftedChebyshevU,
        ShiftedChebyshevV,
        ShiftedChebyshevW,
        Legendre,
        ShiftedLegendre,
        Jacobi,
        Gegenbauer,
        Hermite,
        HermiteE,
        Laguerre,
        DiscreteChebyshev,
        Krawtchouk,
        Charlier,
    )
}
"""Polynomial families indexed by their name."""


def make_family(name: str, **params: Any) -> RecurrenceFamily:
    """Build the family called `name` with the given shape parameters.

    Examples
    --------
    .. code-block:: python

        P = make_family("jacobi_p", alpha=0.5, beta=1.5)
        values = P.sequence(0.3, 10)
    """
    try:
        cls = FAMILIES[name]
    except KeyError:
        raise ValueError(f"Unknown polynomial family {name!r}") from None
    return cls(**params)


def chebyshev_t(x: RealOrArray, n: Degree) -> float | Vector:
    return ChebyshevT().evaluate(x, n)


def chebyshev_u(x: RealOrArray, n: Degree) -> float | Vector:
    return ChebyshevU().evaluate(x, n)


def chebyshev_v(x: RealOrArray, n: Degree) -> float | Vector:
    return ChebyshevV().evaluate(x, n)


def chebyshev_w(x: RealOrArray, n: Degree) -> float | Vector:
    return ChebyshevW().evaluate(x, n)


def shifted_chebyshev_t(x: RealOrArray, n: Degree) -> float | Vector:
    return ShiftedChebyshevT().evaluate(x, n)


def shifted_chebyshev_u(x: RealOrArray, n: Degree) -> float | Vector:
    return ShiftedChebyshevU().evaluate(x, n)


def shifted_chebyshev_v(x: RealOrArray, n: Degree) -> float | Vector:
    return ShiftedChebyshevV().evaluate(x, n)


def shifted_chebyshev_w(x: RealOrArray, n: Degree) -> float | Vector:
    return ShiftedChebyshevW().evaluate(x, n)


def legendre_p(x: RealOrArray, n: Degree) -> float | Vector:
    return Legendre().evaluate(x, n)


def shifted_legendre_p(x: RealOrArray, n: Degree) -> float | Vector:
    return ShiftedLegendre().evaluate(x, n)


def jacobi_p(x: RealOrArray, alpha: Real, beta: Real, n: Degree) -> float | Vector:
    return Jacobi(alpha, beta).evaluate(x, n)


def gegenbauer_c(x: RealOrArray, alpha: Real, n: Degree) -> float | Vector:
    return Gegenbauer(alpha).evaluate(x, n)


def hermite_h(x: RealOrArray, n: Degree) -> float | Vector:
    return Hermite().evaluate(x, n)


def hermite_he(x: RealOrArray, n: Degree) -> float | Vector:
    return HermiteE().evaluate(x, n)


def laguerre_l(x: RealOrArray, n: Degree, alpha: Real = 0.0) -> float | Vector:
    return Laguerre(alpha).evaluate(x, n)


def discrete_chebyshev_t(x: RealOrArray, N: int, n: Degree) -> float | Vector:
    return DiscreteChebyshev(N).evaluate(x, n)


def krawtchouk_k(x: RealOrArray, p: Real, N: int, n: Degree) -> float | Vector:
    return Krawtchouk(p, N).evaluate(x, n)


def charlier_c(x: RealOrArray, a: Real, n: Degree) -> float | Vector:
    return Charlier(a).evaluate(x, n)
