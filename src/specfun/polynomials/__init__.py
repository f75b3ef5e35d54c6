"""
Orthogonal polynomial families evaluated through three-term recurrences.

Every family is a :class:`RecurrenceFamily` that supplies its recurrence
coefficients and seeds. The base class provides single values, sequences
of values and Clenshaw series, both in extended precision and in a public
double precision form that saturates on overflow.
"""

from ..precision import EXTENDED, MAX_FLOAT, narrow, narrow_array
from .family import RecurrenceFamily
from .chebyshev import (
    ChebyshevFamily,
    ChebyshevT,
    ChebyshevU,
    ChebyshevV,
    ChebyshevW,
    ShiftedChebyshevT,
    ShiftedChebyshevU,
    ShiftedChebyshevV,
    ShiftedChebyshevW,
)
from .legendre import Legendre, ShiftedLegendre
from .jacobi import Jacobi, Gegenbauer
from .hermite import Hermite, HermiteE
from .laguerre import Laguerre
from .discrete import DiscreteChebyshev, Krawtchouk, Charlier
from .functions import (
    FAMILIES,
    make_family,
    chebyshev_t,
    chebyshev_u,
    chebyshev_v,
    chebyshev_w,
    shifted_chebyshev_t,
    shifted_chebyshev_u,
    shifted_chebyshev_v,
    shifted_chebyshev_w,
    legendre_p,
    shifted_legendre_p,
    jacobi_p,
    gegenbauer_c,
    hermite_h,
    hermite_he,
    laguerre_l,
    discrete_chebyshev_t,
    krawtchouk_k,
    charlier_c,
)

__all__ = [
    "EXTENDED",
    "MAX_FLOAT",
    "narrow",
    "narrow_array",
    "RecurrenceFamily",
    "ChebyshevFamily",
    "ChebyshevT",
    "ChebyshevU",
    "ChebyshevV",
    "ChebyshevW",
    "ShiftedChebyshevT",
    "ShiftedChebyshevU",
    "ShiftedChebyshevV",
    "ShiftedChebyshevW",
    "Legendre",
    "ShiftedLegendre",
    "Jacobi",
    "Gegenbauer",
    "Hermite",
    "HermiteE",
    "Laguerre",
    "DiscreteChebyshev",
    "Krawtchouk",
    "Charlier",
    "FAMILIES",
    "make_family",
    "chebyshev_t",
    "chebyshev_u",
    "chebyshev_v",
    "chebyshev_w",
    "shifted_chebyshev_t",
    "shifted_chebyshev_u",
    "shifted_chebyshev_v",
    "shifted_chebyshev_w",
    "legendre_p",
    "shifted_legendre_p",
    "jacobi_p",
    "gegenbauer_c",
    "hermite_h",
    "hermite_he",
    "laguerre_l",
    "discrete_chebyshev_t",
    "krawtchouk_k",
    "charlier_c",
]
