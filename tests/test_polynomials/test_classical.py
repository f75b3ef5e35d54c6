import numpy as np
from numpy.polynomial import hermite, hermite_e, laguerre, legendre
from scipy.special import (  # type: ignore
    eval_gegenbauer,
    eval_genlaguerre,
    eval_jacobi,
    eval_sh_legendre,
)
from specfun.polynomials import (
    Legendre,
    ShiftedLegendre,
    Jacobi,
    Gegenbauer,
    Hermite,
    HermiteE,
    Laguerre,
    legendre_p,
    jacobi_p,
    gegenbauer_c,
    hermite_h,
    laguerre_l,
)
from specfun.tools import InvalidParameter
from ..tools import TestCase


def unit(n: int) -> list[float]:
    return [0.0] * n + [1.0]


class TestLegendre(TestCase):
    def test_matches_numpy_legval(self):
        for x in self.random_points(-1, 1):
            for n in range(0, 30):
                self.assertSimilar(legendre_p(x, n), legendre.legval(x, unit(n)))

    def test_shifted_matches_scipy(self):
        for x in self.random_points(0, 1):
            for n in range(0, 30):
                self.assertSimilar(
                    ShiftedLegendre().evaluate(x, n), eval_sh_legendre(n, x), atol=1e-13
                )

    def test_series_matches_numpy_legval(self):
        coeffs = self.rng.normal(size=20)
        for x in self.random_points(-1, 1):
            self.assertSimilar(Legendre().series(x, coeffs), legendre.legval(x, coeffs))


class TestJacobi(TestCase):
    parameters = [(0.5, -0.3), (0.0, 0.0), (2.0, 1.5), (-0.7, 3.0)]

    def test_matches_scipy(self):
        for alpha, beta in self.parameters:
            for x in self.random_points(-1, 1):
                for n in range(0, 20):
                    self.assertSimilar(
                        jacobi_p(x, alpha, beta, n),
                        eval_jacobi(n, alpha, beta, x),
                        atol=1e-12,
                    )

    def test_reduces_to_legendre(self):
        for x in self.random_points(-1, 1):
            for n in range(0, 20):
                self.assertSimilar(
                    Jacobi(0.0, 0.0).evaluate(x, n), Legendre().evaluate(x, n)
                )

    def test_gegenbauer_matches_scipy(self):
        for alpha in [0.25, 1.0, 2.5]:
            for x in self.random_points(-1, 1):
                for n in range(0, 20):
                    self.assertSimilar(
                        gegenbauer_c(x, alpha, n),
                        eval_gegenbauer(n, alpha, x),
                        atol=1e-12,
                    )

    def test_invalid_parameters_are_rejected_on_request(self):
        with self.assertRaises(InvalidParameter):
            Jacobi(-1.0, 0.5, check_args=True)
        with self.assertRaises(InvalidParameter):
            Jacobi(0.5, -2.0, check_args=True)
        with self.assertRaises(InvalidParameter):
            Gegenbauer(-0.5, check_args=True)
        Jacobi(-1.0, 0.5)


class TestHermite(TestCase):
    def test_physicists_matches_numpy(self):
        for x in self.random_points(-3, 3):
            for n in range(0, 25):
                self.assertSimilar(hermite_h(x, n), hermite.hermval(x, unit(n)))

    def test_probabilists_matches_numpy(self):
        for x in self.random_points(-3, 3):
            for n in range(0, 25):
                self.assertSimilar(
                    HermiteE().evaluate(x, n), hermite_e.hermeval(x, unit(n))
                )

    def test_series(self):
        coeffs = self.rng.normal(size=15)
        for x in self.random_points(-2, 2):
            self.assertSimilar(Hermite().series(x, coeffs), hermite.hermval(x, coeffs))
            self.assertSimilar(
                HermiteE().series(x, coeffs), hermite_e.hermeval(x, coeffs)
            )

    def test_parity(self):
        for x in self.random_points(0, 2):
            for n in range(0, 15):
                self.assertSimilar(
                    Hermite().evaluate(-x, n), (-1) ** n * Hermite().evaluate(x, n)
                )


class TestLaguerre(TestCase):
    def test_matches_numpy_lagval(self):
        for x in self.random_points(0, 10):
            for n in range(0, 25):
                self.assertSimilar(
                    laguerre_l(x, n), laguerre.lagval(x, unit(n)), atol=1e-11
                )

    def test_generalized_matches_scipy(self):
        for alpha in [0.5, 2.0, -0.5]:
            for x in self.random_points(0, 10):
                for n in range(0, 20):
                    self.assertSimilar(
                        laguerre_l(x, n, alpha),
                        eval_genlaguerre(n, alpha, x),
                        atol=1e-10,
                    )

    def test_series(self):
        coeffs = self.rng.normal(size=15)
        for x in self.random_points(0, 5):
            self.assertSimilar(
                Laguerre().series(x, coeffs), laguerre.lagval(x, coeffs), atol=1e-12
            )

    def test_invalid_alpha_is_rejected_on_request(self):
        with self.assertRaises(InvalidParameter):
            Laguerre(-1.5, check_args=True)
        self.assertTrue(np.isfinite(Laguerre(-1.5).evaluate(1.0, 3)))
