"""Configuration for tolerance-driven composite quadrature.

Classes:
    IntegrationConfig: Integration request and refinement limits
"""

import math
from dataclasses import dataclass

from .exceptions import InvalidIntervalError, InvalidToleranceError

ZERO_ESTIMATE_POLICIES = ("absolute", "raise")

# 2**24 subintervals of 6 float64 points is about 800 MB per pass
MAX_REFINEMENTS = 24


@dataclass(frozen=True)
class IntegrationConfig:
    """Configuration for an integration request.

    Attributes:
        lower: Lower integration bound
        upper: Upper integration bound, must exceed ``lower``
        tolerance: Target relative change between successive estimates
        max_refinements: Maximum number of subinterval doublings, so at most
            ``2 ** max_refinements`` subintervals are used, at most
            ``MAX_REFINEMENTS``
        zero_estimate: What to do when the previous estimate is exactly zero
            and the current one is not ("absolute" or "raise")
        track_history: Whether to record every estimate and step error
    """

    lower: float = 0.0
    upper: float = 2.0
    tolerance: float = 1e-6
    max_refinements: int = 20
    zero_estimate: str = "absolute"
    track_history: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization."""
        if not (
            self.lower < self.upper
            and math.isfinite(self.lower)
            and math.isfinite(self.upper)
        ):
            raise InvalidIntervalError(self.lower, self.upper)
        if not (self.tolerance > 0 and math.isfinite(self.tolerance)):
            raise InvalidToleranceError(self.tolerance)
        if not 0 < self.max_refinements <= MAX_REFINEMENTS:
            raise ValueError(
                f"max_refinements must be in [1, {MAX_REFINEMENTS}], "
                f"got {self.max_refinements}"
            )
        if self.zero_estimate not in ZERO_ESTIMATE_POLICIES:
            raise ValueError(
                f"zero_estimate must be one of {ZERO_ESTIMATE_POLICIES}, "
                f"got {self.zero_estimate}"
            )

    @property
    def domain(self) -> tuple[float, float]:
        return self.lower, self.upper

    @property
    def max_subintervals(self) -> int:
        return 2**self.max_refinements
