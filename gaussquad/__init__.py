"""Gaussquad - composite Gauss-Legendre quadrature with automatic refinement."""

__version__ = "0.1.0"

from .integrands import accepts_tensors, inverse_sqrt_quartic, pointwise
from .quadrature import (
    GAUSS_LEGENDRE_6,
    IntegrationConfig,
    IntegrationResult,
    integrate,
    integrate_to_tolerance,
)

__all__ = [
    "GAUSS_LEGENDRE_6",
    "IntegrationConfig",
    "IntegrationResult",
    "accepts_tensors",
    "integrate",
    "integrate_to_tolerance",
    "inverse_sqrt_quartic",
    "pointwise",
]
