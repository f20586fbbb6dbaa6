"""Composite Gauss-Legendre quadrature with automatic refinement.

- Quadrature rules on [-1, 1], including the fixed 6-point table
- Composite evaluation over equal-width subintervals
- A doubling refinement loop stopped by a relative tolerance
- Typed errors for bad input, non-convergence and zero estimates
"""

from .composite import CompositeGaussLegendre, Integrand, evaluate
from .config import MAX_REFINEMENTS, IntegrationConfig
from .convergence import (
    IntegrationResult,
    RefinementDriver,
    integrate,
    integrate_to_tolerance,
)
from .exceptions import (
    InvalidIntervalError,
    InvalidToleranceError,
    NonConvergenceError,
    QuadratureError,
    ZeroEstimateError,
)
from .rule import GAUSS_LEGENDRE_6, QuadratureRule, gauss_legendre_rule

__all__ = [
    "GAUSS_LEGENDRE_6",
    "MAX_REFINEMENTS",
    "CompositeGaussLegendre",
    "Integrand",
    "IntegrationConfig",
    "IntegrationResult",
    "InvalidIntervalError",
    "InvalidToleranceError",
    "NonConvergenceError",
    "QuadratureError",
    "QuadratureRule",
    "RefinementDriver",
    "ZeroEstimateError",
    "evaluate",
    "gauss_legendre_rule",
    "integrate",
    "integrate_to_tolerance",
]
