from . import (
    version,
    tools,
    precision,
    polynomials,
    elliptic,
    expint,
    theta,
    probability,
)

__all__ = [
    "version",
    "tools",
    "precision",
    "polynomials",
    "elliptic",
    "expint",
    "theta",
    "probability",
]
