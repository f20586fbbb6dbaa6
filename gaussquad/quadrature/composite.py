"""Composite Gauss-Legendre quadrature over equal-width subintervals.

The base rule on [-1, 1] is mapped onto each of ``n`` subintervals of width
``h = (b - a) / n`` and the contributions are summed:

    b             n-1  k
    ∫ f(x) dx ≈ h/2 Σ   Σ  w_j f(m_i + h/2 t_j),    m_i = a + (i + 1/2) h
    a             i=0 j=1

All ``n * k`` evaluation points are handed to the integrand in a single
call as a tensor of shape (n, k), so integrands should be elementwise
torch functions.

Classes:
    CompositeGaussLegendre: Composite rule bound to a fixed domain

Functions:
    evaluate: One-shot composite estimate
"""

from collections.abc import Callable

import math

import torch
from torch import Tensor

from .exceptions import InvalidIntervalError
from .rule import GAUSS_LEGENDRE_6, QuadratureRule

Integrand = Callable[[Tensor], Tensor | float]


class CompositeGaussLegendre:
    """Composite Gauss-Legendre rule on a fixed domain.

    Attributes:
        domain: Integration bounds as (lower, upper)
        rule: Base rule applied on every subinterval
        dtype: Floating point type of all evaluation points
    """

    def __init__(
        self,
        domain: tuple[float, float] = (0.0, 1.0),
        rule: QuadratureRule = GAUSS_LEGENDRE_6,
        dtype: torch.dtype = torch.float64,
    ):
        """Initialize the composite rule.

        Args:
            domain: Integration domain as (lower, upper)
            rule: Base rule on [-1, 1]
            dtype: Floating point type used for points and accumulation

        Raises:
            InvalidIntervalError: If lower >= upper or a bound is not finite
        """
        lower, upper = domain
        if not (lower < upper and math.isfinite(lower) and math.isfinite(upper)):
            raise InvalidIntervalError(lower, upper)

        self.domain = (float(lower), float(upper))
        self.rule = rule
        self.dtype = dtype
        self._cache_rule()

    def _cache_rule(self) -> None:
        """Convert the base rule to tensors once."""
        self.nodes, self.weights = self.rule.as_tensors(dtype=self.dtype)

    def _subinterval_points(self, n: int) -> tuple[Tensor, float]:
        """Map the rule nodes onto each subinterval, returning (points, h)."""
        if not isinstance(n, int) or isinstance(n, bool) or n < 1:
            raise ValueError(f"n must be a positive subinterval count, got {n!r}")

        a, b = self.domain
        h = (b - a) / n
        midpoints = a + (torch.arange(n, dtype=self.dtype) + 0.5) * h
        points = midpoints[:, None] + (h / 2) * self.nodes[None, :]
        return points, h

    def get_quadrature_points(self, n: int) -> tuple[Tensor, Tensor]:
        """Return evaluation points and scaled weights for ``n`` subintervals.

        Args:
            n: Number of equal-width subintervals

        Returns:
            Tuple of (points, weights), both of shape (n, len(rule)). The
            weights include the h/2 Jacobian factor, so
            ``(func(points) * weights).sum()`` is the composite estimate.

        Raises:
            ValueError: If n < 1
        """
        points, h = self._subinterval_points(n)
        weights = (h / 2) * self.weights.expand(n, -1)
        return points, weights

    def evaluate(self, func: Integrand, n: int) -> float:
        """Estimate the integral of ``func`` using ``n`` subintervals.

        Args:
            func: Elementwise integrand; constant return values are broadcast
            n: Number of equal-width subintervals

        Returns:
            Integral estimate as a Python float

        Example:
            >>> composite = CompositeGaussLegendre((0.0, 1.0))
            >>> round(composite.evaluate(lambda x: x**3, 1), 12)
            0.25
        """
        points, h = self._subinterval_points(n)

        values = torch.as_tensor(func(points), dtype=self.dtype)
        values = torch.broadcast_to(values, points.shape)

        # Weighted sum per subinterval, then over subintervals, then Jacobian
        total = (values @ self.weights).sum()
        return (h / 2) * total.item()


def evaluate(
    func: Integrand,
    a: float,
    b: float,
    n: int,
    rule: QuadratureRule = GAUSS_LEGENDRE_6,
) -> float:
    """Composite Gauss-Legendre estimate of ∫_a^b func(x) dx.

    Args:
        func: Elementwise integrand
        a: Lower bound
        b: Upper bound, must exceed ``a``
        n: Number of equal-width subintervals
        rule: Base rule on [-1, 1]

    Returns:
        Integral estimate

    Raises:
        InvalidIntervalError: If a >= b
        ValueError: If n < 1
    """
    return CompositeGaussLegendre((a, b), rule).evaluate(func, n)
