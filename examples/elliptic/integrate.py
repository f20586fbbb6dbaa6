#!/usr/bin/env python3
"""Integrate 1/sqrt(1 + x^4) over [0, 2] to a requested relative accuracy.

Override any field from the command line, e.g.:

    python integrate.py tolerance=1e-9
    python integrate.py lower=-1 upper=3 track_history=true
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parents[2]))

import hydra
from omegaconf import DictConfig

from gaussquad import IntegrationConfig, inverse_sqrt_quartic
from gaussquad.quadrature import QuadratureError, RefinementDriver

logger = logging.getLogger(__name__)


def build_config(cfg: DictConfig) -> IntegrationConfig:
    """Create the integration request from the hydra config."""
    return IntegrationConfig(
        lower=float(cfg.lower),
        upper=float(cfg.upper),
        tolerance=float(cfg.tolerance),
        max_refinements=int(cfg.max_refinements),
        zero_estimate=str(cfg.zero_estimate),
        track_history=bool(cfg.track_history),
    )


@hydra.main(version_base=None, config_path=".", config_name="config")
def main(cfg: DictConfig) -> None:
    """Run the refinement loop and report the estimate."""
    try:
        driver = RefinementDriver(build_config(cfg))
        result = driver.run(inverse_sqrt_quartic)
    except QuadratureError as e:
        logger.error(str(e))
        sys.exit(1)

    if result.error_history is not None:
        n = 1
        for estimate, error in zip(
            result.estimate_history[1:], result.error_history, strict=True
        ):
            n *= 2
            logger.info(f"n={n:8d} estimate={estimate:.15f} error={error:.3e}")

    print(f"Integral value: {result.value}")
    print(f"Integration accuracy: {result.achieved_relative_error:e}")
    print(f"Subintervals: {result.subintervals_used}")


if __name__ == "__main__":
    main()
