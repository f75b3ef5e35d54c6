"""Extended-precision policy shared by the evaluators.

Every recurrence runs in :data:`EXTENDED` arithmetic (``numpy.longdouble``,
80-bit on x86 Linux). Public routines narrow the result with :func:`narrow`,
which saturates at the largest finite double instead of returning infinity.
On platforms where ``longdouble`` is an alias of ``float64`` the policy
degrades to double precision with the same saturation rule.
"""

from __future__ import annotations
import numpy as np
from numpy.typing import NDArray

from .typing import Real

EXTENDED = np.longdouble

MAX_FLOAT: float = float(np.finfo(np.float64).max)
"""Largest finite double, returned in place of an overflow."""

ZERO = EXTENDED(0)
ONE = EXTENDED(1)
TWO = EXTENDED(2)
HALF = EXTENDED(0.5)
PI = np.arccos(-ONE)
PI_2 = PI / TWO
EPSILON = np.finfo(EXTENDED).eps


def narrow(value: Real) -> float:
    """Convert an extended-precision value to a double.

    NaN propagates unchanged. Any value whose magnitude is not strictly below
    :data:`MAX_FLOAT` is clamped to ``±MAX_FLOAT`` with the sign of `value`.
    """
    if np.isnan(value):
        return float("nan")
    if abs(value) < MAX_FLOAT:
        return float(value)
    return MAX_FLOAT if value > 0 else -MAX_FLOAT


def narrow_array(values: NDArray) -> NDArray:
    """Element-wise version of :func:`narrow`, returning ``float64`` data."""
    values = np.asarray(values)
    with np.errstate(over="ignore", invalid="ignore"):
        output = values.astype(np.float64)
        saturated = ~(np.abs(values) < MAX_FLOAT) & ~np.isnan(values)
        output[saturated] = np.where(values[saturated] > 0, MAX_FLOAT, -MAX_FLOAT)
    return output
