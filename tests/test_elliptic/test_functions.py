import numpy as np
from scipy.special import ellipj, ellipk  # type: ignore
from specfun.precision import MAX_FLOAT
from specfun.elliptic import (
    jacobi_am,
    jacobi_sn_cn_dn,
    jacobi_sn,
    jacobi_cn,
    jacobi_dn,
    jacobi_cs_ds_ns,
    jacobi_sc_dc_nc,
    jacobi_sd_cd_nd,
    inverse_jacobi_sn,
    inverse_jacobi_cn,
    inverse_jacobi_dn,
    legendre_elliptic_integral_first_kind,
    nome,
)
from ..tools import TestCase


class TestJacobiFunctions(TestCase):
    def test_match_scipy(self):
        for m in [0.1, 0.5, 0.9, 0.999]:
            for u in [-2.3, -0.4, 0.0, 0.7, 1.5, 4.2]:
                with self.subTest(m=m, u=u):
                    sn, cn, dn, ph = ellipj(u, m)
                    self.assertSimilar(jacobi_sn_cn_dn(u, m, "m"), (sn, cn, dn), atol=1e-14)
                    self.assertSimilar(jacobi_am(u, m, "m"), ph, atol=1e-14)

    def test_degenerate_parameters(self):
        u = 0.8
        self.assertSimilar(jacobi_sn_cn_dn(u, 0.0), (np.sin(u), np.cos(u), 1.0))
        sech = 1.0 / np.cosh(u)
        self.assertSimilar(jacobi_sn_cn_dn(u, 1.0), (np.tanh(u), sech, sech))
        self.assertEqual(jacobi_am(u, 0.0), u)
        self.assertSimilar(jacobi_am(u, 1.0), 2 * np.arctan(np.exp(u)) - np.pi / 2)

    def test_identities_outside_unit_interval(self):
        for m in [-4.0, -0.5, 1.7, 3.0]:
            for u in [0.15, 0.4, 0.9]:
                with self.subTest(m=m, u=u):
                    sn, cn, dn = jacobi_sn_cn_dn(u, m, "m")
                    self.assertSimilar(sn * sn + cn * cn, 1.0, rtol=1e-13)
                    self.assertSimilar(dn * dn + m * sn * sn, 1.0, rtol=1e-13)
                    self.assertSimilar(jacobi_sn(u, m, "m"), sn)

    def test_sn_inverts_first_kind_integral(self):
        for k in [0.3, 0.8]:
            for φ in [0.2, 0.9, 1.3]:
                u = legendre_elliptic_integral_first_kind(φ, k)
                self.assertSimilar(jacobi_sn(u, k), np.sin(φ), atol=1e-14)
                self.assertSimilar(jacobi_cn(u, k), np.cos(φ), atol=1e-14)
                self.assertSimilar(
                    jacobi_dn(u, k), np.sqrt(1 - k * k * np.sin(φ) ** 2), atol=1e-14
                )

    def test_ratios(self):
        u, k = 0.6, 0.7
        sn, cn, dn = jacobi_sn_cn_dn(u, k)
        self.assertSimilar(jacobi_cs_ds_ns(u, k), (cn / sn, dn / sn, 1 / sn))
        self.assertSimilar(jacobi_sc_dc_nc(u, k), (sn / cn, dn / cn, 1 / cn))
        self.assertSimilar(jacobi_sd_cd_nd(u, k), (sn / dn, cn / dn, 1 / dn))

    def test_ratios_saturate_at_poles(self):
        self.assertEqual(jacobi_cs_ds_ns(0.0, 0.5), (MAX_FLOAT, MAX_FLOAT, MAX_FLOAT))


class TestInverseJacobiFunctions(TestCase):
    def test_round_trip_inside_unit_interval(self):
        for m in [0.2, 0.6, 0.95]:
            K = ellipk(m)
            for u in [0.1 * K, 0.5 * K, 0.9 * K]:
                with self.subTest(m=m, u=u):
                    sn, cn, dn, _ = ellipj(u, m)
                    self.assertSimilar(inverse_jacobi_sn(sn, m, "m"), u, rtol=1e-12)
                    self.assertSimilar(inverse_jacobi_cn(cn, m, "m"), u, rtol=1e-12)
                    self.assertSimilar(inverse_jacobi_dn(dn, m, "m"), u, rtol=1e-10)
            u = 1.5 * K
            _, cn, _, _ = ellipj(u, m)
            self.assertSimilar(inverse_jacobi_cn(cn, m, "m"), u, rtol=1e-12)

    def test_round_trip_outside_unit_interval(self):
        for m in [-2.0, -0.4, 2.25]:
            for u in [0.2, 0.45]:
                with self.subTest(m=m, u=u):
                    sn, cn, dn = jacobi_sn_cn_dn(u, m, "m")
                    self.assertSimilar(inverse_jacobi_sn(sn, m, "m"), u, rtol=1e-11)
                    self.assertSimilar(inverse_jacobi_cn(cn, m, "m"), u, rtol=1e-9)
                    self.assertSimilar(inverse_jacobi_dn(dn, m, "m"), u, rtol=1e-9)

    def test_degenerate_parameters(self):
        self.assertSimilar(inverse_jacobi_sn(0.4, 0.0), np.arcsin(0.4))
        self.assertSimilar(inverse_jacobi_cn(0.4, 0.0), np.arccos(0.4))
        self.assertSimilar(inverse_jacobi_sn(0.4, 1.0), np.arctanh(0.4))
        self.assertEqual(inverse_jacobi_sn(1.0, 1.0), MAX_FLOAT)
        self.assertEqual(inverse_jacobi_sn(-1.0, 1.0), -MAX_FLOAT)
        self.assertEqual(inverse_jacobi_cn(0.0, 1.0), MAX_FLOAT)


class TestNome(TestCase):
    def test_matches_definition(self):
        for k in [0.1, 0.5, 0.9]:
            m = k * k
            expected = np.exp(-np.pi * ellipk(1 - m) / ellipk(m))
            self.assertSimilar(nome(k), expected, rtol=1e-13)

    def test_special_values(self):
        self.assertEqual(nome(0.0), 0.0)
        self.assertEqual(nome(1.0), 1.0)
        self.assertEqual(nome(-1.5), 1.0)
