from __future__ import annotations
import numpy as np
from abc import ABC, abstractmethod
from typing import Optional

from ..typing import Degree, Extended, Real, RealOrArray, Vector, VectorLike
from ..tools import InsufficientCapacity, make_logger
from ..precision import EXTENDED, ZERO, narrow, narrow_array

Recurrence = tuple[Extended, Extended, Extended]


class RecurrenceFamily(ABC):
    """Abstract base class for families of orthogonal polynomials {P_k(x)}.

    A family is defined by two seed polynomials P_0(x), P_1(x) and by the
    three-term recurrence

    .. math::
        P_{k+1}(x) = (α_k x + β_k) P_k(x) - γ_k P_{k-1}(x), \\quad k \\geq 1.

    Subclasses must provide:

    - the recurrence coefficients (α_k, β_k, γ_k), through :meth:`get_recurrence`,

    - the seed values (P_0(x), P_1(x)), through :meth:`seeds`.

    They may also provide a :meth:`closed_form` for arguments or degrees where
    an explicit formula is safer than the recurrence, a finite
    :attr:`max_degree` for families with finite support, and a
    :meth:`validate` method that checks the shape parameters.

    On top of this description the class implements three evaluators, each
    in an extended precision version (returning ``numpy.longdouble`` values)
    and a public version that narrows the result to a double, saturating at
    ``±MAX_FLOAT`` on overflow:

    - :meth:`evaluate` computes a single value P_n(x),

    - :meth:`sequence` computes P_0(x), ..., P_{max_n}(x) in one pass,

    - :meth:`series` evaluates Σ_k a_k P_k(x) with Clenshaw's algorithm.

    Parameters
    ----------
    check_args : bool, default = False
        If True, call :meth:`validate` and raise :class:`InvalidParameter`
        when the shape parameters lie outside the family's domain. Otherwise
        invalid parameters propagate as NaN or infinite values.
    """

    name: str = ""

    def __init__(self, check_args: bool = False):
        if check_args:
            self.validate()

    @abstractmethod
    def get_recurrence(self, k: int) -> Recurrence:
        """
        Return the three-term recurrence coefficients (α_k, β_k, γ_k) for
        P_{k+1}(x) = (α_k x + β_k) P_k(x) - γ_k P_{k-1}(x), with k >= 1.
        """
        ...

    @abstractmethod
    def seeds(self, x: Extended) -> tuple[Extended, Extended]:
        """Return the pair (P_0(x), P_1(x)) that starts the recurrence."""
        ...

    def closed_form(self, x: Extended, n: int) -> Optional[Extended]:
        """Return P_n(x) by an explicit formula, or None to use the recurrence."""
        return None

    @property
    def max_degree(self) -> Optional[int]:
        """Largest degree of a finite-support family, or None if unbounded."""
        return None

    def validate(self) -> None:
        """Raise :class:`InvalidParameter` if the shape parameters are invalid."""
        pass

    def degree_bound(self, n: int) -> int:
        """Clamp the degree `n` to the family's maximum degree."""
        top = self.max_degree
        if top is not None and n > top:
            make_logger(2)(f"{self}: degree {n} clamped to {top}")
            return top
        return n

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def evaluate_extended(self, x: Real, n: Degree) -> Extended:
        """Extended precision value of P_n(x), without saturation."""
        n = _as_degree(n, "n")
        if n < 0:
            return ZERO
        top = self.max_degree
        if top is not None and n > top:
            return ZERO
        x = EXTENDED(x)
        with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
            value = self.closed_form(x, n)
            if value is not None:
                return EXTENDED(value)
            P_k_minus_1, P_k = self.seeds(x)
            if n == 0:
                return P_k_minus_1
            for k in range(1, n):
                α_k, β_k, γ_k = self.get_recurrence(k)
                P_k_minus_1, P_k = P_k, (α_k * x + β_k) * P_k - γ_k * P_k_minus_1
        return P_k

    def evaluate(self, x: RealOrArray, n: Degree) -> float | Vector:
        """Value of P_n(x), narrowed to a double.

        Parameters
        ----------
        x : float | numpy.ndarray
            Evaluation point, or an array of points evaluated element-wise.
        n : int
            Degree. Negative degrees, and degrees beyond :attr:`max_degree`,
            yield 0.

        Returns
        -------
        float | numpy.ndarray
            P_n(x), saturated to ``±MAX_FLOAT`` if it exceeds the double range.
        """
        if np.ndim(x):
            return _map(lambda v: self.evaluate_extended(v, n), x)
        return narrow(self.evaluate_extended(x, n))

    def sequence_extended(
        self, x: Real, max_n: Degree, out: Optional[Vector] = None
    ) -> Vector:
        """Extended precision values P_0(x), ..., P_{max_n}(x).

        If `out` is given, it must be able to hold every degree that is
        computed, and entries past the family's degree bound are left
        untouched. Otherwise a new ``longdouble`` array of size ``max_n + 1``
        is returned, with zeros past the degree bound.
        """
        max_n = _as_degree(max_n, "max_n")
        if max_n < 0:
            return np.zeros(0, dtype=EXTENDED) if out is None else out
        top = self.degree_bound(max_n)
        if out is None:
            out = np.zeros(max_n + 1, dtype=EXTENDED)
        elif len(out) < top + 1:
            raise InsufficientCapacity("Output buffer", top + 1, len(out))
        if top < 0:
            return out
        x = EXTENDED(x)
        logger = make_logger(3)
        with np.errstate(over="ignore", invalid="ignore"):
            P_k_minus_1, P_k = self.seeds(x)
            out[0] = P_k_minus_1
            if top >= 1:
                out[1] = P_k
            for k in range(1, top):
                α_k, β_k, γ_k = self.get_recurrence(k)
                P_k_minus_1, P_k = P_k, (α_k * x + β_k) * P_k - γ_k * P_k_minus_1
                out[k + 1] = P_k
                logger(f"{self} sequence step {k + 1}/{top}, value={P_k}")
        logger.close()
        return out

    def sequence(
        self, x: Real, max_n: Degree, out: Optional[Vector] = None
    ) -> Vector:
        """Values P_0(x), ..., P_{max_n}(x) computed in a single pass.

        Parameters
        ----------
        x : float
            Evaluation point.
        max_n : int
            Highest degree. A negative value leaves `out` untouched. For
            finite-support families it is clamped to :attr:`max_degree`.
        out : numpy.ndarray, optional
            Caller-owned buffer. Only the entries 0 ... min(max_n, max_degree)
            are written.

        Returns
        -------
        numpy.ndarray
            The buffer `out`, or a new ``float64`` array of size ``max_n + 1``.

        Raises
        ------
        InsufficientCapacity
            If `out` is shorter than the number of computed degrees.
        """
        max_n = _as_degree(max_n, "max_n")
        if max_n < 0:
            return np.zeros(0) if out is None else out
        top = self.degree_bound(max_n)
        if out is None:
            out = np.zeros(max_n + 1)
        elif len(out) < top + 1:
            raise InsufficientCapacity("Output buffer", top + 1, len(out))
        values = self.sequence_extended(x, top)
        out[: top + 1] = narrow_array(values)
        return out

    def series_extended(
        self, x: Real, coeffs: VectorLike, degree: Optional[Degree] = None
    ) -> Extended:
        """Extended precision value of Σ_{k=0}^{degree} a_k P_k(x)."""
        a = np.asarray(coeffs, dtype=EXTENDED)
        degree = len(a) - 1 if degree is None else _as_degree(degree, "degree")
        if degree < 0:
            return ZERO
        if len(a) < degree + 1:
            raise InsufficientCapacity("Coefficient vector", degree + 1, len(a))
        degree = self.degree_bound(degree)
        if degree < 0:
            return ZERO
        x = EXTENDED(x)
        logger = make_logger(3)
        with np.errstate(over="ignore", invalid="ignore"):
            P_0, P_1 = self.seeds(x)
            if degree == 0:
                return a[0] * P_0
            # Clenshaw recurrence:
            # y_k = a_k + (α_k x + β_k) y_{k+1} - γ_{k+1} y_{k+2}, k = degree..1
            # f = P_0 (a_0 - γ_1 y_2) + P_1 y_1
            y_k = y_k_plus_1 = ZERO
            γ_k_plus_1 = ZERO
            for k in range(degree, 0, -1):
                y_k_plus_1, y_k_plus_2 = y_k, y_k_plus_1
                α_k, β_k, γ_k = self.get_recurrence(k)
                y_k = a[k] + (α_k * x + β_k) * y_k_plus_1 - γ_k_plus_1 * y_k_plus_2
                γ_k_plus_1 = γ_k
                logger(f"{self} Clenshaw step {degree - k + 1}/{degree}, y={y_k}")
            result = P_0 * (a[0] - γ_k_plus_1 * y_k_plus_1) + P_1 * y_k
        logger.close()
        return result

    def series(
        self, x: RealOrArray, coeffs: VectorLike, degree: Optional[Degree] = None
    ) -> float | Vector:
        """Evaluate the expansion Σ_{k=0}^{degree} a_k P_k(x) by Clenshaw's method.

        Parameters
        ----------
        x : float | numpy.ndarray
            Evaluation point, or an array of points evaluated element-wise.
        coeffs : VectorLike
            Coefficients a_0, ..., a_degree of the expansion.
        degree : int, optional
            Degree of the expansion. Defaults to ``len(coeffs) - 1``. A
            negative degree yields 0. For finite-support families it is
            clamped to :attr:`max_degree`.

        Returns
        -------
        float | numpy.ndarray
            The value of the expansion, saturated to ``±MAX_FLOAT``.
        """
        if np.ndim(x):
            return _map(lambda v: self.series_extended(v, coeffs, degree), x)
        return narrow(self.series_extended(x, coeffs, degree))


def _as_degree(n: Degree, name: str) -> int:
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"Degree {name} must be an integer, got {n!r}")
    return int(n)


def _map(function, x: VectorLike) -> Vector:
    x = np.asarray(x)
    values = np.array([function(v) for v in x.reshape(-1)], dtype=EXTENDED)
    return narrow_array(values).reshape(x.shape)
