from __future__ import annotations
from typing import Optional

from ..tools import InvalidParameter
from ..typing import Extended, Real
from .family import RecurrenceFamily, Recurrence
from ..precision import EXTENDED, ZERO, ONE


class Laguerre(RecurrenceFamily):
    r"""
    Generalized Laguerre polynomials :math:`L^{(α)}_n(x)`.

    Orthogonal on :math:`[0, \infty)` with weight :math:`x^α e^{-x}`, for
    :math:`α > -1`. The default :math:`α = 0` gives the ordinary Laguerre
    polynomials, which satisfy :math:`L_n(0) = 1` exactly.

    .. math::
       (k+1) L_{k+1}(x) = (2k+1+α-x) L_k(x) - (k+α) L_{k-1}(x).
    """

    name = "laguerre_l"

    def __init__(self, alpha: Real = 0.0, check_args: bool = False):
        self.alpha = EXTENDED(alpha)
        super().__init__(check_args)

    def validate(self) -> None:
        if not self.alpha > -1:
            raise InvalidParameter(self.name, "alpha", float(self.alpha), "alpha > -1")

    def get_recurrence(self, k: int) -> Recurrence:
        α = self.alpha
        k_plus_1 = EXTENDED(k + 1)
        α_k = -ONE / k_plus_1
        β_k = (2 * k + 1 + α) / k_plus_1
        γ_k = (k + α) / k_plus_1
        return (α_k, β_k, γ_k)

    def seeds(self, x):
        return ONE, self.alpha + ONE - x

    def closed_form(self, x, n) -> Optional[Extended]:
        if x == ZERO and self.alpha == ZERO:
            return ONE
        return None

    def __repr__(self) -> str:
        return f"Laguerre(alpha={float(self.alpha)})"
