from __future__ import annotations

from ..tools import InvalidParameter
from ..typing import Real
from .family import RecurrenceFamily, Recurrence
from ..precision import EXTENDED, ONE, TWO


class Jacobi(RecurrenceFamily):
    r"""
    Jacobi polynomials :math:`P^{(α,β)}_n(x)`.

    Orthogonal on :math:`[-1, 1]` with weight :math:`(1-x)^α (1+x)^β`, for
    :math:`α, β > -1`. The recurrence coefficients are only requested for
    :math:`k \geq 1`, which avoids the removable singularities at
    :math:`k = 0` when :math:`α + β \in \{0, -1\}`.

    Parameters
    ----------
    alpha, beta : float
        Shape parameters α and β.
    check_args : bool, default = False
        Raise :class:`InvalidParameter` unless α > -1 and β > -1.
    """

    name = "jacobi_p"

    def __init__(self, alpha: Real, beta: Real, check_args: bool = False):
        self.alpha = EXTENDED(alpha)
        self.beta = EXTENDED(beta)
        super().__init__(check_args)

    def validate(self) -> None:
        if not self.alpha > -1:
            raise InvalidParameter(self.name, "alpha", float(self.alpha), "alpha > -1")
        if not self.beta > -1:
            raise InvalidParameter(self.name, "beta", float(self.beta), "beta > -1")

    def get_recurrence(self, k: int) -> Recurrence:
        α, β = self.alpha, self.beta
        g = α + β
        two_k_g = EXTENDED(2 * k) + g
        d = 2 * EXTENDED(k + 1) * (EXTENDED(k + 1) + g) * two_k_g
        α_k = (two_k_g + 1) * (two_k_g + 2) * two_k_g / d
        β_k = (two_k_g + 1) * (α * α - β * β) / d
        γ_k = 2 * (k + α) * (k + β) * (two_k_g + 2) / d
        return (α_k, β_k, γ_k)

    def seeds(self, x):
        α, β = self.alpha, self.beta
        return ONE, ((α + β + TWO) * x + (α - β)) / TWO

    def __repr__(self) -> str:
        return f"Jacobi(alpha={float(self.alpha)}, beta={float(self.beta)})"


class Gegenbauer(RecurrenceFamily):
    r"""
    Gegenbauer (ultraspherical) polynomials :math:`C^{(λ)}_n(x)`.

    Orthogonal on :math:`[-1, 1]` with weight :math:`(1-x^2)^{λ-1/2}`, for
    :math:`λ > -1/2`, and generated by

    .. math::
       (k+1) C_{k+1}(x) = 2(k+λ) x C_k(x) - (k+2λ-1) C_{k-1}(x).
    """

    name = "gegenbauer_c"

    def __init__(self, alpha: Real, check_args: bool = False):
        self.alpha = EXTENDED(alpha)
        super().__init__(check_args)

    def validate(self) -> None:
        if not self.alpha > -0.5:
            raise InvalidParameter(
                self.name, "alpha", float(self.alpha), "alpha > -1/2"
            )

    def get_recurrence(self, k: int) -> Recurrence:
        λ = self.alpha
        k_plus_1 = EXTENDED(k + 1)
        α_k = 2 * (k + λ) / k_plus_1
        γ_k = (k + 2 * λ - 1) / k_plus_1
        return (α_k, EXTENDED(0), γ_k)

    def seeds(self, x):
        return ONE, TWO * self.alpha * x

    def __repr__(self) -> str:
        return f"Gegenbauer(alpha={float(self.alpha)})"
