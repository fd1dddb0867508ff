# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Portfolio risk simulation: Value-at-Risk, Conditional VaR and Sharpe ratio
from correlated asset returns.
"""

from dataclasses import dataclass
import logging
import math
from typing import Sequence

import numpy as np

from .analyzer import analyze_results
from .config import SimulationConfig
from .distributions import UniformSource
from .linalg import MatrixLike
from .results import PortfolioRiskResult
from .return_generator import CorrelatedReturnGenerator

logger = logging.getLogger(__name__)

# Portfolio runs always report a 95% interval, whatever the config says
PORTFOLIO_CONFIDENCE_LEVEL = 0.95
VAR_PERCENTILE = 5


@dataclass(frozen=True)
class Asset:
    """Return assumptions and weight of one portfolio component.

    Attributes:
        expected_return: Expected return per period as decimal (e.g., 0.05)
        volatility: Standard deviation of the return as decimal (e.g., 0.10)
        weight: Portfolio weight of this asset
    """
    expected_return: float
    volatility: float
    weight: float

    def __post_init__(self):
        if self.volatility < 0:
            raise ValueError(f"Volatility cannot be negative: {self.volatility}")


def simulate_portfolio_risk(rng: UniformSource,
                            assets: Sequence[Asset],
                            correlation_matrix: MatrixLike,
                            config: SimulationConfig) -> PortfolioRiskResult:
    """Simulate weighted portfolio returns and derive tail-risk measures.

    Args:
        rng: Uniform source driving every draw
        assets: Portfolio components, in correlation matrix order
        correlation_matrix: Correlation between asset returns
        config: Only `iterations` is used; the interval is always 95%

    Returns:
        PortfolioRiskResult. `clamped_pivots` is non-empty when the
        correlation matrix was not positive semi-definite.

    Raises:
        ValueError: If there are no assets or their count does not match the matrix
    """
    if len(assets) == 0:
        raise ValueError("At least one asset is required")

    generator = CorrelatedReturnGenerator(
        rng,
        [a.expected_return for a in assets],
        [a.volatility for a in assets],
        correlation_matrix,
    )
    weights = np.array([a.weight for a in assets], dtype=float)

    logger.debug("Simulating portfolio of %d assets over %d iterations",
                 len(assets), config.iterations)

    samples = []
    for _ in range(config.iterations):
        returns = generator.generate_returns()
        samples.append(float(np.dot(weights, returns)))

    result = analyze_results(samples, PORTFOLIO_CONFIDENCE_LEVEL)

    value_at_risk = result.percentiles[VAR_PERCENTILE]

    tail = result.samples[result.samples <= value_at_risk]
    conditional_var = float(np.mean(tail)) if len(tail) > 0 else math.nan

    # Zero risk-free rate
    sharpe_ratio = result.mean / result.std_dev if result.std_dev > 0 else math.nan

    logger.debug("Portfolio VaR=%.6f CVaR=%.6f Sharpe=%.4f",
                 value_at_risk, conditional_var, sharpe_ratio)

    return PortfolioRiskResult(
        **result._base_fields(),
        value_at_risk=value_at_risk,
        conditional_var=conditional_var,
        sharpe_ratio=sharpe_ratio,
        clamped_pivots=generator.clamped_pivots,
    )
