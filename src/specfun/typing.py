from __future__ import annotations
import numpy as np
from numpy.typing import NDArray, ArrayLike
from typing import TypeAlias

Real: TypeAlias = float | int | np.floating | np.integer
"""A real scalar accepted by the evaluators."""

Extended: TypeAlias = np.longdouble
"""Internal floating point type used to protect recurrences from round-off."""

Degree: TypeAlias = int | np.integer
"""Polynomial degree. Negative values are accepted and yield zero."""

Vector: TypeAlias = NDArray
"""A one-dimensional :class:`numpy.ndarray`."""

VectorLike: TypeAlias = ArrayLike
"""Any Python type that can be coerced to `Vector` type."""

RealOrArray: TypeAlias = Real | NDArray
"""Either a scalar argument or an array of arguments."""
