"""
Exponential integrals.

- Ein(x) = ∫_0^x (1 - e^{-t}) / t dt, the entire exponential integral,

- E_n(x) = ∫_1^∞ e^{-xt} / t^n dt, the generalized exponential integral,

- α_n(x) = ∫_1^∞ t^n e^{-xt} dt,

- β_n(x) = ∫_{-1}^1 t^n e^{-xt} dt.

Values that diverge are returned as ``MAX_FLOAT``. The exponential integral
Ei is taken from :func:`scipy.special.expi`; all other arithmetic is carried
out in extended precision.
"""

from __future__ import annotations
import numpy as np
from scipy.special import expi  # type: ignore

from .precision import EXTENDED, MAX_FLOAT, ZERO, ONE, TWO, EPSILON
from .tools import make_logger
from .typing import Extended, Real, Vector

EULER_GAMMA = EXTENDED(np.euler_gamma)


def _ei(x: Extended) -> Extended:
    return EXTENDED(expi(float(x)))


def exponential_integral_ein(x: Real) -> float:
    """Ein(x) = γ + ln|x| - Ei(-x), with Ein(0) = 0."""
    if x == 0:
        return 0.0
    xx = EXTENDED(x)
    return float(EULER_GAMMA + np.log(abs(xx)) - _ei(-xx))


def exponential_integral_en(x: Real, n: int) -> float:
    """Generalized exponential integral E_n(x) for x >= 0 and n >= 0.

    Uses a power series for x <= 1 and a continued fraction otherwise, or
    whenever x + n >= 20. E_n diverges for x < 0, and for x = 0 when n < 2;
    ``MAX_FLOAT`` is returned in those cases.
    """
    if x < 0:
        return MAX_FLOAT
    if x == 0:
        return MAX_FLOAT if n < 2 else 1.0 / (n - 1)
    xx = EXTENDED(x)
    exp_x = np.exp(-xx)
    if n == 0:
        return float(exp_x / xx)
    if n == 1:
        return float(-_ei(-xx))
    if xx + n >= 20 or xx > 1:
        return float(_continued_fraction_en(xx, n, exp_x))
    return float(_power_series_en(xx, n))


def _power_series_en(x: Extended, n: int) -> Extended:
    # E_n(x) = (-x)^{n-1}/(n-1)! (ψ(n) - ln x) - Σ_{i≠n-1} (-x)^i / (i! (i-n+1))
    xn = ONE
    factorial = ONE
    psi_n = -EULER_GAMMA
    term = ONE / (1 - n)
    total = term
    for i in range(1, n - 1):
        factorial *= i
        psi_n += ONE / i
        xn *= -x
        term = xn / (factorial * (i - n + 1))
        total += term
    factorial *= n - 1
    psi_n += ONE / (n - 1)
    xn *= -x
    total = xn * (-np.log(x) + psi_n) / factorial - total
    previous = total
    i = n
    while True:
        factorial *= i
        xn *= -x
        term = xn / (factorial * (i - n + 1))
        total -= term
        if abs(term) <= EPSILON * abs(previous):
            break
        previous = total
        i += 1
    return total


def _continued_fraction_en(x: Extended, n: int, exp_x: Extended) -> Extended:
    # Modified Lentz evaluation of e^{-x} / (x + n - 1·n / (x + n + 2 - ...)).
    A_m1, A_0 = ONE, ZERO
    B_m1, B_0 = ZERO, ONE
    a = exp_x
    b = x + n
    A_p1 = b * A_0 + a * A_m1
    B_p1 = b * B_0 + a * B_m1
    eps = 10 * EPSILON
    j = 1
    logger = make_logger(3)
    while abs(A_p1 * B_0 - A_0 * B_p1) > eps * abs(A_0 * B_p1):
        if abs(B_p1) > ONE:
            A_m1, A_0 = A_0 / B_p1, A_p1 / B_p1
            B_m1, B_0 = B_0 / B_p1, ONE
        else:
            A_m1, A_0 = A_0, A_p1
            B_m1, B_0 = B_0, B_p1
        a = EXTENDED(-j * (n + j - 1))
        b += TWO
        A_p1 = b * A_0 + a * A_m1
        B_p1 = b * B_0 + a * B_m1
        j += 1
    logger(f"E_{n}({x}) continued fraction used {j} terms")
    logger.close()
    return A_p1 / B_p1


def _alpha_step(a: Extended, a0: Extended, x: Extended, m: int) -> Extended:
    # α_m = (m/x) α_{m-1} + α_0, evaluated as 1 / (x/m · 1/(α_{m-1} + x/m α_0))
    # when m > x to avoid amplifying the error of α_{m-1}.
    if m <= x:
        return (m / x) * a + a0
    xm = x / m
    return ONE / (xm * (ONE / (a + xm * a0)))


def exponential_integral_alpha_n_sequence(x: Real, max_n: int) -> Vector:
    """Return the array α_0(x), ..., α_{max_n}(x).

    All entries are ``MAX_FLOAT`` when x <= 0, where the integrals diverge.
    """
    values = np.zeros(max(max_n + 1, 0))
    if max_n < 0:
        return values
    if x <= 0:
        values[:] = MAX_FLOAT
        return values
    xx = EXTENDED(x)
    a0 = np.exp(-xx) / xx
    a = a0
    values[0] = float(a0)
    for m in range(1, max_n + 1):
        a = _alpha_step(a, a0, xx, m)
        values[m] = float(a)
    return values


def exponential_integral_alpha_n(x: Real, n: int) -> float:
    """α_n(x) = ∫_1^∞ t^n e^{-xt} dt, or ``MAX_FLOAT`` for x <= 0."""
    if x <= 0:
        return MAX_FLOAT
    return float(exponential_integral_alpha_n_sequence(x, n)[n])


# (n, x) pairs: β_n uses its power series when n <= N and |x| <= X.
_BETA_SERIES_THRESHOLDS = (
    (4, 0.1),
    (5, 0.4),
    (6, 0.6),
    (7, 1.0),
    (8, 1.4),
    (9, 1.7),
    (10, 2.4),
)


def exponential_integral_beta_n(x: Real, n: int) -> float:
    """β_n(x) = ∫_{-1}^1 t^n e^{-xt} dt.

    Small arguments, where the upward recursion loses accuracy, are evaluated
    by a power series; the crossover grows with n, and for n > 10 the power
    series is always used.
    """
    if x == 0:
        return 2.0 / (n + 1) if n % 2 == 0 else 0.0
    xx = EXTENDED(x)
    if n == 0:
        return float(TWO * np.sinh(xx) / xx)
    for top, threshold in _BETA_SERIES_THRESHOLDS:
        if n <= top:
            if abs(x) <= threshold:
                return float(_beta_n_power_series(xx, n))
            return float(_beta_n_recursion(xx, n))
    return float(_beta_n_power_series(xx, n))


def _beta_n_recursion(x: Extended, n: int) -> Extended:
    # β_m = (m/x) β_{m-1} + c_m, with c_m = -2cosh(x)/x for odd m and
    # 2sinh(x)/x for even m.
    s = TWO * np.sinh(x) / x
    c = -TWO * np.cosh(x) / x
    b = s
    for m in range(1, n + 1):
        c_m = c if m % 2 else s
        if x > m:
            b = (m / x) * b + c_m
        else:
            xm = x / m
            b = ONE / (xm * (ONE / (b + xm * c_m)))
    return b


def _beta_n_power_series(x: Extended, n: int) -> Extended:
    # β_n(x) = 2 Σ_j x^{2j} / ((2j)! (n+2j+1)) for even n and
    # -2 Σ_j x^{2j+1} / ((2j+1)! (n+2j+2)) for odd n.
    x2 = x * x
    np1 = EXTENDED(n + 1)
    factorial = ONE
    if n % 2 == 0:
        xn = ONE
        y = ZERO
        total = xn / np1
    else:
        xn = x
        y = ONE
        total = xn / (np1 + ONE)
    previous = ZERO
    while abs(total - previous) > EPSILON * abs(previous):
        previous = total
        y += ONE
        factorial *= y
        y += ONE
        factorial *= y
        xn *= x2
        total += xn / (factorial * (np1 + y))
    return total + total if n % 2 == 0 else -(total + total)
