import numpy as np
from scipy.special import binom, factorial  # type: ignore
from specfun.polynomials import (
    DiscreteChebyshev,
    Krawtchouk,
    Charlier,
    discrete_chebyshev_t,
    krawtchouk_k,
    charlier_c,
)
from specfun.tools import InvalidParameter
from ..tools import TestCase


class TestDiscreteChebyshev(TestCase):
    def test_low_degrees(self):
        N = 6
        for x in [0.0, 1.0, 2.5, 5.0]:
            t_1 = 2 * x - (N - 1)
            t_2 = 6 * x * x - 6 * (N - 1) * x + (N - 1) * (N - 2)
            self.assertEqual(discrete_chebyshev_t(x, N, 0), 1.0)
            self.assertSimilar(discrete_chebyshev_t(x, N, 1), t_1)
            self.assertSimilar(discrete_chebyshev_t(x, N, 2), t_2)

    def test_orthogonality_on_grid(self):
        N = 7
        family = DiscreteChebyshev(N)
        values = np.array([family.sequence(float(x), N - 1) for x in range(N)])
        gram = values.T @ values
        off_diagonal = gram - np.diag(np.diag(gram))
        self.assertSimilar(off_diagonal, np.zeros((N, N)), atol=1e-8 * np.max(gram))

    def test_max_degree(self):
        self.assertEqual(DiscreteChebyshev(5).max_degree, 4)

    def test_size_must_be_integer(self):
        with self.assertRaises(TypeError):
            DiscreteChebyshev(5.0)  # type: ignore
        with self.assertRaises(InvalidParameter):
            DiscreteChebyshev(0, check_args=True)


class TestKrawtchouk(TestCase):
    def test_low_degrees(self):
        p, N = 0.3, 8
        for x in [0.0, 1.0, 3.0, 8.0]:
            K_1 = x - N * p
            K_2 = ((x - 1 - p * (N - 2)) * K_1 - N * p * (1 - p)) / 2
            self.assertSimilar(krawtchouk_k(x, p, N, 1), K_1)
            self.assertSimilar(krawtchouk_k(x, p, N, 2), K_2)

    def test_orthogonality_with_binomial_weights(self):
        p, N = 0.35, 9
        family = Krawtchouk(p, N)
        x = np.arange(N + 1)
        weights = binom(N, x) * p**x * (1 - p) ** (N - x)
        values = np.array([family.sequence(float(xi), N) for xi in x])
        gram = values.T @ (weights[:, np.newaxis] * values)
        off_diagonal = gram - np.diag(np.diag(gram))
        self.assertSimilar(off_diagonal, np.zeros_like(gram), atol=1e-10 * np.max(gram))

    def test_degree_beyond_support(self):
        self.assertEqual(krawtchouk_k(2.0, 0.5, 4, 5), 0.0)
        self.assertEqual(Krawtchouk(0.5, 4).max_degree, 4)

    def test_probability_is_validated_on_request(self):
        with self.assertRaises(InvalidParameter):
            Krawtchouk(1.5, 4, check_args=True)
        with self.assertRaises(InvalidParameter):
            Krawtchouk(0.0, 4, check_args=True)


class TestCharlier(TestCase):
    def test_low_degrees(self):
        a = 1.5
        for x in [0.0, 1.0, 2.0, 4.5]:
            C_1 = 1 - x / a
            C_2 = ((1 + a - x) * C_1 - 1) / a
            self.assertSimilar(charlier_c(x, a, 1), C_1)
            self.assertSimilar(charlier_c(x, a, 2), C_2)

    def test_orthogonality_with_poisson_weights(self):
        a, max_n = 2.0, 5
        family = Charlier(a)
        x = np.arange(80)
        weights = np.exp(-a) * a**x / factorial(x)
        values = np.array([family.sequence(float(xi), max_n) for xi in x])
        gram = values.T @ (weights[:, np.newaxis] * values)
        # Σ_x w(x) C_m(x) C_n(x) = n! / a^n δ_mn
        n = np.arange(max_n + 1)
        self.assertSimilar(gram, np.diag(factorial(n) / a**n), atol=1e-10)

    def test_parameter_is_validated_on_request(self):
        with self.assertRaises(InvalidParameter):
            Charlier(0.0, check_args=True)
        with self.assertRaises(InvalidParameter):
            Charlier(-1.0, check_args=True)
