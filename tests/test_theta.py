import numpy as np
from scipy.special import ellipj, ellipk  # type: ignore
from specfun.theta import (
    ThetaValues,
    theta_functions,
    theta_functions_at_zero,
    jacobian_theta_functions,
    jacobian_theta_functions_at_zero,
    neville_theta_functions,
    theta_function_derivatives,
    jacobian_theta_function_derivatives,
    neville_theta_function_derivatives,
)
from .tools import TestCase


def theta_series(z: float, q: float, terms: int = 200) -> tuple[float, ...]:
    n = np.arange(terms)
    sign = (-1.0) ** n
    half = q ** ((n + 0.5) ** 2)
    whole = q ** (n[1:] ** 2)
    return (
        2 * np.sum(sign * half * np.sin((2 * n + 1) * z)),
        2 * np.sum(half * np.cos((2 * n + 1) * z)),
        1 + 2 * np.sum(whole * np.cos(2 * n[1:] * z)),
        1 + 2 * np.sum(sign[1:] * whole * np.cos(2 * n[1:] * z)),
    )


class TestThetaFunctions(TestCase):
    def test_jacobian_theta_matches_q_series(self):
        for q in [0.01, 0.2, 0.5, 0.9]:
            for z in [-2.0, 0.3, 1.1, 4.0]:
                with self.subTest(q=q, z=z):
                    self.assertSimilar(
                        jacobian_theta_functions(z, q).astuple(),
                        theta_series(z, q),
                        rtol=1e-12,
                        atol=1e-13,
                    )

    def test_jacobi_identity_for_theta_constants(self):
        for q in [0.05, 0.3, 0.7]:
            θ = jacobian_theta_functions_at_zero(q)
            self.assertEqual(θ.theta_1, 0.0)
            self.assertSimilar(θ.theta_3**4, θ.theta_2**4 + θ.theta_4**4, rtol=1e-13)

    def test_periodicity(self):
        for x in [0.1, 0.5, 2.0]:
            for ν in [0.2, 0.65, -0.3]:
                θ = theta_functions(ν, x)
                shifted = theta_functions(ν + 1, x)
                self.assertSimilar(shifted.theta_1, -θ.theta_1, atol=1e-14)
                self.assertSimilar(shifted.theta_2, -θ.theta_2, atol=1e-14)
                self.assertSimilar(shifted.theta_3, θ.theta_3, atol=1e-14)
                self.assertSimilar(shifted.theta_4, θ.theta_4, atol=1e-14)

    def test_series_agree_at_crossover(self):
        x = 1 / np.pi
        for ν in [0.0, 0.15, 0.5, 0.8]:
            below = theta_functions(ν, x * (1 - 1e-12)).astuple()
            above = theta_functions(ν, x * (1 + 1e-12)).astuple()
            self.assertSimilar(below, above, rtol=1e-10, atol=1e-12)

    def test_at_zero(self):
        θ = theta_functions_at_zero(0.4)
        self.assertIsInstance(θ, ThetaValues)
        self.assertEqual(θ.theta_1, 0.0)
        self.assertSimilar(θ.theta_3, theta_functions(0.0, 0.4).theta_3)

    def test_vanishing_nome(self):
        self.assertEqual(jacobian_theta_functions(0.7, 0.0).astuple(), (0.0, 0.0, 1.0, 1.0))
        self.assertEqual(jacobian_theta_functions_at_zero(0.0).astuple(), (0.0, 0.0, 1.0, 1.0))


class TestNevilleThetaFunctions(TestCase):
    def test_ratios_give_jacobi_functions(self):
        for k in [0.3, 0.7, 0.95]:
            m = k * k
            K, Kp = ellipk(m), ellipk(1 - m)
            for u in [0.2, 0.9, 2.5]:
                with self.subTest(k=k, u=u):
                    θs, θc, θd, θn = neville_theta_functions(u, k, K, K / Kp)
                    sn, cn, dn, _ = ellipj(u, m)
                    self.assertSimilar(
                        (θs / θn, θc / θn, θd / θn), (sn, cn, dn), rtol=1e-12, atol=1e-13
                    )

    def test_zero_modulus(self):
        u = 0.4
        self.assertSimilar(
            neville_theta_functions(u, 0.0, np.pi / 2, 0.0),
            (np.sin(u), np.cos(u), 1.0, 1.0),
        )


def central_difference(function, x: float, h: float = 1e-5) -> np.ndarray:
    return (np.asarray(function(x + h)) - np.asarray(function(x - h))) / (2 * h)


class TestThetaDerivatives(TestCase):
    def test_derivatives_match_central_difference(self):
        for x in [0.05, 0.2, 0.5, 2.0]:
            for ν in [-0.7, 0.15, 0.6, 1.3, 2.45]:
                with self.subTest(x=x, ν=ν):
                    self.assertSimilar(
                        theta_function_derivatives(ν, x).astuple(),
                        central_difference(lambda v: theta_functions(v, x).astuple(), ν),
                        rtol=1e-6,
                        atol=1e-7,
                    )

    def test_derivatives_agree_at_crossover(self):
        x = 1 / np.pi
        for ν in [0.1, 0.5, 0.85]:
            below = theta_function_derivatives(ν, x * (1 - 1e-12)).astuple()
            above = theta_function_derivatives(ν, x * (1 + 1e-12)).astuple()
            self.assertSimilar(below, above, rtol=1e-10, atol=1e-12)

    def test_derivatives_vanish_at_symmetry_points(self):
        θ = theta_function_derivatives(0.0, 0.4)
        self.assertIsInstance(θ, ThetaValues)
        self.assertSimilar((θ.theta_2, θ.theta_3, θ.theta_4), (0.0, 0.0, 0.0), atol=1e-14)

    def test_jacobian_derivatives_match_central_difference(self):
        for q in [0.1, 0.5, 0.8]:
            for z in [-2.0, 0.3, 1.1, 4.0]:
                with self.subTest(q=q, z=z):
                    self.assertSimilar(
                        jacobian_theta_function_derivatives(z, q).astuple(),
                        central_difference(
                            lambda v: jacobian_theta_functions(v, q).astuple(), z
                        ),
                        rtol=1e-6,
                        atol=1e-7,
                    )

    def test_jacobian_derivatives_vanishing_nome(self):
        self.assertEqual(
            jacobian_theta_function_derivatives(0.7, 0.0).astuple(), (0.0, 0.0, 0.0, 0.0)
        )

    def test_neville_derivatives_match_central_difference(self):
        for k in [0.3, 0.7, 0.95]:
            m = k * k
            K, Kp = ellipk(m), ellipk(1 - m)
            for u in [0.2, 0.9, 2.5]:
                with self.subTest(k=k, u=u):
                    self.assertSimilar(
                        neville_theta_function_derivatives(u, k, K, K / Kp),
                        central_difference(
                            lambda v: neville_theta_functions(v, k, K, K / Kp), u
                        ),
                        rtol=1e-6,
                        atol=1e-7,
                    )

    def test_neville_derivatives_give_derivative_of_sn(self):
        k = 0.6
        m = k * k
        K, Kp = ellipk(m), ellipk(1 - m)
        for u in [0.3, 1.2, 2.0]:
            θs, _, _, θn = neville_theta_functions(u, k, K, K / Kp)
            dθs, _, _, dθn = neville_theta_function_derivatives(u, k, K, K / Kp)
            _, cn, dn, _ = ellipj(u, m)
            self.assertSimilar((dθs * θn - θs * dθn) / θn**2, cn * dn, rtol=1e-12)

    def test_neville_derivatives_zero_modulus(self):
        u = 0.4
        self.assertSimilar(
            neville_theta_function_derivatives(u, 0.0, np.pi / 2, 0.0),
            (np.cos(u), -np.sin(u), 0.0, 0.0),
        )
