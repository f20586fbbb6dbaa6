"""Pytest configuration and shared fixtures."""

# Add project root to path for imports
import sys
from pathlib import Path

import pytest
import torch

sys.path.insert(0, str(Path(__file__).parent.parent))

# ∫_0^2 dx / sqrt(1 + x⁴) = Γ(1/4)² / (4√π) - ∫_2^∞ dx / sqrt(1 + x⁴)
REFERENCE_INTEGRAL = 1.35712111409191
REFERENCE_INTEGRAL_ATOL = 1e-10
MACHINE_TOLERANCE = 1e-14


@pytest.fixture
def quartic():
    """The default integrand 1 / sqrt(1 + x⁴)."""
    return lambda x: 1.0 / torch.sqrt(1.0 + x**4)


@pytest.fixture
def polynomial_cases():
    """Polynomials over [0, 1] with their exact integrals."""
    return [
        (lambda x: torch.ones_like(x), 1.0),
        (lambda x: x, 0.5),
        (lambda x: x**2, 1.0 / 3.0),
        (lambda x: x**5 - 2 * x**3, 1.0 / 6.0 - 0.5),
        (lambda x: x**11, 1.0 / 12.0),
    ]
