from .integrals import (
    EllipticIntegrals,
    modulus_and_parameter,
    complete_elliptic_integrals,
    complete_elliptic_integral_first_kind,
    complete_elliptic_integral_second_kind,
    legendre_elliptic_integrals,
    legendre_elliptic_integral_first_kind,
    legendre_elliptic_integral_second_kind,
    jacobi_zeta,
    heuman_lambda,
)
from .functions import (
    jacobi_am,
    jacobi_sn_cn_dn,
    jacobi_cs_ds_ns,
    jacobi_sc_dc_nc,
    jacobi_sd_cd_nd,
    jacobi_sn,
    jacobi_cn,
    jacobi_dn,
    inverse_jacobi_sn,
    inverse_jacobi_cn,
    inverse_jacobi_dn,
    nome,
)

__all__ = [
    "EllipticIntegrals",
    "modulus_and_parameter",
    "complete_elliptic_integrals",
    "complete_elliptic_integral_first_kind",
    "complete_elliptic_integral_second_kind",
    "legendre_elliptic_integrals",
    "legendre_elliptic_integral_first_kind",
    "legendre_elliptic_integral_second_kind",
    "jacobi_zeta",
    "heuman_lambda",
    "jacobi_am",
    "jacobi_sn_cn_dn",
    "jacobi_cs_ds_ns",
    "jacobi_sc_dc_nc",
    "jacobi_sd_cd_nd",
    "jacobi_sn",
    "jacobi_cn",
    "jacobi_dn",
    "inverse_jacobi_sn",
    "inverse_jacobi_cn",
    "inverse_jacobi_dn",
    "nome",
]
