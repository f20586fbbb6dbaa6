"""Gauss-Legendre quadrature rules on the reference interval [-1, 1].

Classes:
    QuadratureRule: Immutable set of (weight, node) pairs

Functions:
    gauss_legendre_rule: Compute an n-point Gauss-Legendre rule

Constants:
    GAUSS_LEGENDRE_6: The 6-point rule, exact for polynomials up to degree 11
"""

from collections.abc import Iterator
from dataclasses import dataclass

import torch
from torch import Tensor


@dataclass(frozen=True)
class QuadratureRule:
    """Quadrature rule on [-1, 1].

    Attributes:
        nodes: Evaluation points in [-1, 1], ascending
        weights: Weights matching ``nodes``, summing to 2
    """

    nodes: tuple[float, ...]
    weights: tuple[float, ...]

    def __post_init__(self) -> None:
        """Validate that nodes and weights describe a rule on [-1, 1]."""
        if len(self.nodes) != len(self.weights):
            raise ValueError(
                f"nodes and weights must have equal length, got "
                f"{len(self.nodes)} and {len(self.weights)}"
            )
        if not self.nodes:
            raise ValueError("rule must have at least one node")
        if any(abs(t) > 1.0 for t in self.nodes):
            raise ValueError(f"nodes must lie in [-1, 1], got {self.nodes}")

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def degree(self) -> int:
        """Highest polynomial degree integrated exactly."""
        return 2 * len(self.nodes) - 1

    def pairs(self) -> Iterator[tuple[float, float]]:
        """Yield ``(weight, node)`` pairs in node order."""
        yield from zip(self.weights, self.nodes, strict=True)

    def as_tensors(
        self, dtype: torch.dtype = torch.float64, device: torch.device | None = None
    ) -> tuple[Tensor, Tensor]:
        """Return ``(nodes, weights)`` as fresh 1-D tensors."""
        nodes = torch.tensor(self.nodes, dtype=dtype, device=device)
        weights = torch.tensor(self.weights, dtype=dtype, device=device)
        return nodes, weights


GAUSS_LEGENDRE_6 = QuadratureRule(
    nodes=(
        -0.932469514203152,
        -0.661209386466265,
        -0.238619186083197,
        0.238619186083197,
        0.661209386466265,
        0.932469514203152,
    ),
    weights=(
        0.171324492379170,
        0.360761573048139,
        0.467913934572691,
        0.467913934572691,
        0.360761573048139,
        0.171324492379170,
    ),
)


def gauss_legendre_rule(num_points: int) -> QuadratureRule:
    """Compute an n-point Gauss-Legendre rule with the Golub-Welsch method.

    The nodes are the eigenvalues of the symmetric tridiagonal Jacobi matrix
    of the Legendre polynomials, whose off-diagonal entries are
    β_j = j / sqrt(4j² - 1). The weights are 2 * (first eigenvector
    component)².

    Args:
        num_points: Number of nodes

    Returns:
        Rule exact for polynomials up to degree 2 * num_points - 1

    Raises:
        ValueError: If num_points <= 0

    Example:
        >>> rule = gauss_legendre_rule(3)
        >>> round(rule.weights[1], 12)  # 8/9
        0.888888888889
    """
    if num_points <= 0:
        raise ValueError(f"num_points must be positive, got {num_points}")
    if num_points == 1:
        return QuadratureRule(nodes=(0.0,), weights=(2.0,))

    j = torch.arange(1, num_points, dtype=torch.float64)
    beta = j / torch.sqrt(4 * j * j - 1)
    jacobi_matrix = torch.diag(beta, 1) + torch.diag(beta, -1)

    # eigh returns eigenvalues in ascending order
    eigenvals, eigenvecs = torch.linalg.eigh(jacobi_matrix)
    weights = 2 * eigenvecs[0, :] ** 2

    # Clamp roundoff so the nodes stay inside the reference interval
    nodes = eigenvals.clamp(-1.0, 1.0)
    return QuadratureRule(nodes=tuple(nodes.tolist()), weights=tuple(weights.tolist()))
