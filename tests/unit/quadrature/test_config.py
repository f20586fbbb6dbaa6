"""Unit tests for IntegrationConfig and the exception hierarchy."""

import dataclasses
import math

import pytest

from gaussquad.quadrature.config import MAX_REFINEMENTS, IntegrationConfig
from gaussquad.quadrature.exceptions import (
    InvalidIntervalError,
    InvalidToleranceError,
    NonConvergenceError,
    QuadratureError,
    ZeroEstimateError,
)


class TestIntegrationConfig:
    """Tests for IntegrationConfig validation and defaults."""

    def test_defaults(self):
        """Test defaults describe the [0, 2] request."""
        config = IntegrationConfig()
        assert config.domain == (0.0, 2.0)
        assert config.tolerance == 1e-6
        assert config.max_refinements == 20
        assert config.max_subintervals == 2**20
        assert config.zero_estimate == "absolute"
        assert config.track_history is False

    def test_frozen(self):
        """Test the configuration is immutable."""
        config = IntegrationConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.tolerance = 1.0  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("lower", "upper"),
        [
            (1.0, 1.0),
            (2.0, 0.0),
            (math.nan, 1.0),
            (0.0, math.nan),
            (0.0, math.inf),
            (-math.inf, 1.0),
            (-math.inf, math.inf),
        ],
    )
    def test_invalid_interval(self, lower, upper):
        """Test InvalidIntervalError unless both bounds are finite and lower < upper."""
        with pytest.raises(InvalidIntervalError, match="lower must be < upper") as info:
            IntegrationConfig(lower=lower, upper=upper)
        assert info.value.upper == upper or math.isnan(upper)

    @pytest.mark.parametrize("tolerance", [0.0, -1e-6, math.inf, math.nan])
    def test_invalid_tolerance(self, tolerance):
        """Test InvalidToleranceError for non-positive or non-finite tolerance."""
        with pytest.raises(InvalidToleranceError, match="tolerance must be positive"):
            IntegrationConfig(tolerance=tolerance)

    @pytest.mark.parametrize("max_refinements", [0, -3, MAX_REFINEMENTS + 1, 40])
    def test_invalid_max_refinements(self, max_refinements):
        """Test ValueError for max_refinements outside [1, MAX_REFINEMENTS]."""
        with pytest.raises(
            ValueError, match=rf"max_refinements must be in \[1, 24\], got {max_refinements}"
        ):
            IntegrationConfig(max_refinements=max_refinements)

    def test_max_refinements_ceiling_accepted(self):
        """Test the largest allowed refinement count is valid."""
        config = IntegrationConfig(max_refinements=MAX_REFINEMENTS)
        assert config.max_subintervals == 2**MAX_REFINEMENTS

    def test_invalid_zero_estimate_policy(self):
        """Test ValueError for an unknown zero_estimate policy."""
        with pytest.raises(ValueError, match="zero_estimate must be one of"):
            IntegrationConfig(zero_estimate="ignore")

    def test_custom_values(self):
        """Test a fully custom configuration."""
        config = IntegrationConfig(
            lower=-1.0,
            upper=1.0,
            tolerance=1e-9,
            max_refinements=5,
            zero_estimate="raise",
            track_history=True,
        )
        assert config.domain == (-1.0, 1.0)
        assert config.max_subintervals == 32


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_bad_input_errors_are_value_errors(self):
        """Test input errors are both QuadratureError and ValueError."""
        for error in (InvalidIntervalError(1.0, 0.0), InvalidToleranceError(0.0)):
            assert isinstance(error, QuadratureError)
            assert isinstance(error, ValueError)

    def test_zero_estimate_error_is_arithmetic(self):
        """Test ZeroEstimateError is an ArithmeticError with context."""
        error = ZeroEstimateError(4, 0.25)
        assert isinstance(error, QuadratureError)
        assert isinstance(error, ArithmeticError)
        assert error.subintervals == 4
        assert "zero at 2 subintervals" in str(error)

    def test_non_convergence_error_is_runtime(self):
        """Test NonConvergenceError carries the last estimate."""
        error = NonConvergenceError(1.5, 1e-3, 64, 1e-12)
        assert isinstance(error, QuadratureError)
        assert isinstance(error, RuntimeError)
        assert error.estimate == 1.5
        assert error.subintervals == 64
        assert "within 64 subintervals" in str(error)

    def test_categories_are_distinct(self):
        """Test bad input, non-convergence and zero estimates are distinguishable."""
        assert not issubclass(NonConvergenceError, ValueError)
        assert not issubclass(ZeroEstimateError, ValueError)
        assert not issubclass(InvalidIntervalError, RuntimeError)
        assert not issubclass(ZeroEstimateError, RuntimeError)
