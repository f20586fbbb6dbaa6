"""Exceptions raised by the quadrature routines.

Every error derives from :class:`QuadratureError` and from the builtin that
best describes it, so callers can catch either.
"""


class QuadratureError(Exception):
    """Base class for quadrature failures."""

    pass


class InvalidIntervalError(QuadratureError, ValueError):
    """Integration bounds are not finite or do not satisfy ``lower < upper``."""

    def __init__(self, lower: float, upper: float):
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Invalid interval ({lower}, {upper}), lower must be < upper "
            "and both bounds finite"
        )


class InvalidToleranceError(QuadratureError, ValueError):
    """Requested relative tolerance is not a positive finite number."""

    def __init__(self, tolerance: float):
        self.tolerance = tolerance
        super().__init__(f"tolerance must be positive and finite, got {tolerance}")


class ZeroEstimateError(QuadratureError, ArithmeticError):
    """Relative change is undefined because the previous estimate is zero."""

    def __init__(self, subintervals: int, estimate: float):
        self.subintervals = subintervals
        self.estimate = estimate
        super().__init__(
            f"Previous estimate is zero at {subintervals // 2} subintervals, "
            f"relative error undefined (current estimate {estimate!r})"
        )


class NonConvergenceError(QuadratureError, RuntimeError):
    """Refinement cap reached before the tolerance was met.

    Attributes:
        estimate: Last computed estimate
        error: Last computed step error
        subintervals: Subinterval count of the last estimate
    """

    def __init__(self, estimate: float, error: float, subintervals: int, tolerance: float):
        self.estimate = estimate
        self.error = error
        self.subintervals = subintervals
        self.tolerance = tolerance
        super().__init__(
            f"Could not achieve tolerance {tolerance:e} within {subintervals} "
            f"subintervals (last error {error:e}, last estimate {estimate!r})"
        )
