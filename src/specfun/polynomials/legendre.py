from __future__ import annotations
import numpy as np
from typing import Optional

from .family import RecurrenceFamily, Recurrence
from ..typing import Extended
from ..precision import EXTENDED, ZERO, ONE


class Legendre(RecurrenceFamily):
    r"""
    Legendre polynomials :math:`P_n(x)`.

    The Legendre polynomials are orthogonal on :math:`[-1, 1]` with unit
    weight. They satisfy Bonnet's recursion

    .. math::
       (k+1) P_{k+1}(x) = (2k+1) x P_k(x) - k P_{k-1}(x),

    and take the values :math:`P_n(1) = 1`, :math:`P_n(-1) = (-1)^n`, which
    are returned without walking the recurrence.
    """

    name = "legendre_p"

    def argument(self, x: Extended) -> Extended:
        return x

    def get_recurrence(self, k: int) -> Recurrence:
        """Bonnet's recursion normalized to a unit coefficient for P_{k+1}."""
        k_plus_1 = EXTENDED(k + 1)
        α_k = EXTENDED(2 * k + 1) / k_plus_1
        β_k = ZERO
        γ_k = EXTENDED(k) / k_plus_1
        return (α_k, β_k, γ_k)

    def seeds(self, x):
        return ONE, self.argument(x)

    def closed_form(self, x, n) -> Optional[Extended]:
        t = self.argument(x)
        if t == ONE:
            return ONE
        if t == -ONE:
            return ONE if n % 2 == 0 else -ONE
        return None


class ShiftedLegendre(Legendre):
    """Shifted Legendre polynomials P*_n(x) = P_n(2x - 1), orthogonal on [0, 1]."""

    name = "shifted_legendre_p"

    def argument(self, x):
        return x + x - ONE

    def get_recurrence(self, k: int) -> Recurrence:
        k_plus_1 = EXTENDED(k + 1)
        two_k_plus_1 = EXTENDED(2 * k + 1)
        α_k = 2 * two_k_plus_1 / k_plus_1
        β_k = -two_k_plus_1 / k_plus_1
        γ_k = EXTENDED(k) / k_plus_1
        return (α_k, β_k, γ_k)
