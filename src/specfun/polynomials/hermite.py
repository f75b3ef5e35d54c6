from __future__ import annotations

from .family import RecurrenceFamily, Recurrence
from ..precision import EXTENDED, ZERO, ONE, TWO


class Hermite(RecurrenceFamily):
    """Physicists' Hermite polynomials, H_{k+1}(x) = 2x H_k(x) - 2k H_{k-1}(x)."""

    name = "hermite_h"

    def get_recurrence(self, k: int) -> Recurrence:
        return (TWO, ZERO, EXTENDED(2 * k))

    def seeds(self, x):
        return ONE, TWO * x


class HermiteE(RecurrenceFamily):
    """Probabilists' Hermite polynomials, He_{k+1}(x) = x He_k(x) - k He_{k-1}(x)."""

    name = "hermite_he"

    def get_recurrence(self, k: int) -> Recurrence:
        return (ONE, ZERO, EXTENDED(k))

    def seeds(self, x):
        return ONE, x
