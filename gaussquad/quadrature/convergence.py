"""Tolerance-driven refinement of composite Gauss-Legendre estimates.

The driver starts from a single subinterval and doubles the subinterval
count on every pass. The relative change between consecutive estimates,

    ε(n) = |I(n) - I(n/2)| / |I(n/2)|

serves as the error proxy, since the true integral is unknown. The loop
stops as soon as ε(n) <= tolerance. At least one doubling always happens,
so a result never rests on the n = 1 estimate alone.

When the previous estimate is exactly zero the ratio is undefined:

- both estimates zero: converged with error 0
- otherwise, with ``zero_estimate="absolute"``: the absolute change
  |I(n) - I(n/2)| is used for that step
- otherwise, with ``zero_estimate="raise"``: ZeroEstimateError

Classes:
    IntegrationResult: Final estimate and convergence information
    RefinementDriver: Doubling loop bound to a configuration and rule

Functions:
    integrate_to_tolerance: Run the doubling loop on explicit bounds
    integrate: Library entry point accepting tensor or scalar integrands
"""

import logging
from dataclasses import dataclass

from ..integrands import accepts_tensors, pointwise
from .composite import CompositeGaussLegendre, Integrand
from .config import IntegrationConfig
from .exceptions import NonConvergenceError, ZeroEstimateError
from .rule import GAUSS_LEGENDRE_6, QuadratureRule

logger = logging.getLogger(__name__)


@dataclass
class IntegrationResult:
    """Result of a tolerance-driven integration.

    Attributes:
        value: Final integral estimate
        achieved_relative_error: Change between the last two estimates,
            relative unless ``criterion`` is "absolute"
        subintervals_used: Subinterval count of the final estimate
        num_refinements: Number of doublings performed
        criterion: "relative", or "absolute" when the last step had a zero
            previous estimate
        estimate_history: Optional list of every estimate, starting at n = 1
        error_history: Optional list of every step error
    """

    value: float
    achieved_relative_error: float
    subintervals_used: int
    num_refinements: int
    criterion: str = "relative"
    estimate_history: list[float] | None = None
    error_history: list[float] | None = None


class RefinementDriver:
    """Doubling refinement loop for composite Gauss-Legendre quadrature.

    Attributes:
        config: Integration bounds, tolerance and limits
        composite: Composite rule bound to the configured domain
    """

    def __init__(
        self,
        config: IntegrationConfig | None = None,
        rule: QuadratureRule = GAUSS_LEGENDRE_6,
    ):
        self.config = config if config is not None else IntegrationConfig()
        self.composite = CompositeGaussLegendre(self.config.domain, rule)

    def step_error(self, previous: float, current: float, n: int) -> tuple[float, str]:
        """Error measure between consecutive estimates.

        Args:
            previous: Estimate with n / 2 subintervals
            current: Estimate with n subintervals
            n: Current subinterval count

        Returns:
            Tuple of (error, criterion)

        Raises:
            ZeroEstimateError: If previous is zero, current is not, and the
                policy is "raise"
        """
        delta = abs(current - previous)
        if previous != 0.0:
            return delta / abs(previous), "relative"
        if current == 0.0:
            return 0.0, "relative"
        if self.config.zero_estimate == "raise":
            raise ZeroEstimateError(n, current)

        logger.warning(
            "Previous estimate is zero at n=%d, using absolute change %e",
            n // 2,
            delta,
        )
        return delta, "absolute"

    def run(self, func: Integrand) -> IntegrationResult:
        """Integrate ``func`` until successive estimates agree.

        Args:
            func: Elementwise integrand

        Returns:
            IntegrationResult with the final estimate

        Raises:
            NonConvergenceError: If max_refinements doublings do not reach
                the tolerance
            ZeroEstimateError: See ``step_error``
        """
        config = self.config
        n = 1
        previous = self.composite.evaluate(func, n)

        estimate_history = [previous] if config.track_history else None
        error_history: list[float] | None = [] if config.track_history else None

        current = previous
        error = float("inf")
        for refinement in range(1, config.max_refinements + 1):
            n *= 2
            current = self.composite.evaluate(func, n)
            error, criterion = self.step_error(previous, current, n)
            previous = current

            if estimate_history is not None and error_history is not None:
                estimate_history.append(current)
                error_history.append(error)
            logger.debug("n=%d estimate=%r error=%e", n, current, error)

            if error <= config.tolerance:
                logger.debug(
                    "Converged after %d refinements with %d subintervals",
                    refinement,
                    n,
                )
                return IntegrationResult(
                    value=current,
                    achieved_relative_error=error,
                    subintervals_used=n,
                    num_refinements=refinement,
                    criterion=criterion,
                    estimate_history=estimate_history,
                    error_history=error_history,
                )

        raise NonConvergenceError(current, error, n, config.tolerance)


def integrate_to_tolerance(
    func: Integrand,
    a: float,
    b: float,
    target_rel_err: float,
    rule: QuadratureRule = GAUSS_LEGENDRE_6,
    **options,
) -> IntegrationResult:
    """Integrate ``func`` over [a, b] by doubling until the tolerance is met.

    Args:
        func: Elementwise integrand
        a: Lower bound
        b: Upper bound
        target_rel_err: Required relative change between successive estimates
        rule: Base rule on [-1, 1]
        **options: Remaining IntegrationConfig fields (max_refinements,
            zero_estimate, track_history)

    Returns:
        IntegrationResult

    Raises:
        InvalidIntervalError: If a >= b
        InvalidToleranceError: If target_rel_err is not positive and finite
        NonConvergenceError: If the refinement cap is reached
        ZeroEstimateError: If a zero previous estimate occurs under the
            "raise" policy

    Example:
        >>> result = integrate_to_tolerance(lambda x: x**2, 0.0, 3.0, 1e-10)
        >>> round(result.value, 10), result.subintervals_used
        (9.0, 2)
    """
    config = IntegrationConfig(lower=a, upper=b, tolerance=target_rel_err, **options)
    return RefinementDriver(config, rule).run(func)


def integrate(
    func: Integrand,
    a: float,
    b: float,
    tol: float,
    *,
    vectorized: bool | None = None,
    rule: QuadratureRule = GAUSS_LEGENDRE_6,
    **options,
) -> IntegrationResult:
    """Integrate ``func`` over [a, b] to relative tolerance ``tol``.

    Both tensor integrands (``torch.exp``) and scalar ones (``math.exp``,
    plain ``float -> float`` lambdas) are accepted. Unless ``vectorized``
    says otherwise, ``func`` is tried once on a small tensor at the domain
    midpoint and wrapped with :func:`pointwise` if that fails.

    Args:
        func: Integrand on tensors or on Python floats
        a: Lower bound
        b: Upper bound
        tol: Target relative error
        vectorized: True if ``func`` accepts tensors, False if it only
            accepts floats, None to detect
        rule: Base rule on [-1, 1]
        **options: Remaining IntegrationConfig fields

    Returns:
        IntegrationResult

    Example:
        >>> import math
        >>> result = integrate(lambda x: 1 / math.sqrt(1 + x**4), 0, 2, 1e-6)
        >>> round(result.value, 6)
        1.357121
    """
    config = IntegrationConfig(lower=a, upper=b, tolerance=tol, **options)

    if vectorized is None:
        vectorized = accepts_tensors(func, sum(config.domain) / 2)
        if not vectorized:
            logger.debug("Integrand rejected tensor input, evaluating pointwise")
    if not vectorized:
        func = pointwise(func)
    return RefinementDriver(config, rule).run(func)
