# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Monte Carlo simulation module for probabilistic health forecasting.

This module provides a seedable random generator, distribution samplers,
result analysis, correlated sampling via Cholesky decomposition, portfolio
tail-risk simulation, bootstrap resampling and Metropolis-Hastings MCMC.
"""

from .config import SimulationConfig
from .rng import LinearCongruentialGenerator
from .distributions import (
    UniformSource,
    normal_sample,
    log_normal_sample,
    uniform_sample,
    exponential_sample,
    triangular_sample,
)
from .linalg import cholesky_decomposition, matrix_vector_multiply
from .results import (
    ConfidenceInterval, Histogram, PercentileTable, SimulationResult, PortfolioRiskResult, MCMCResult,
)
from .analyzer import analyze_results, create_histogram, PERCENTILE_LEVELS
from .return_generator import CorrelatedReturnGenerator, generate_correlated_returns
from .portfolio import Asset, simulate_portfolio_risk
from .resampling import bootstrap
from .mcmc import metropolis_hastings
from .simulator import MonteCarloSimulation, simulate

__all__ = [
    'SimulationConfig',
    'LinearCongruentialGenerator',
    'UniformSource',
    'normal_sample',
    'log_normal_sample',
    'uniform_sample',
    'exponential_sample',
    'triangular_sample',
    'cholesky_decomposition',
    'matrix_vector_multiply',
    'ConfidenceInterval',
    'Histogram',
    'PercentileTable',
    'SimulationResult',
    'PortfolioRiskResult',
    'MCMCResult',
    'analyze_results',
    'create_histogram',
    'PERCENTILE_LEVELS',
    'CorrelatedReturnGenerator',
    'generate_correlated_returns',
    'Asset',
    'simulate_portfolio_risk',
    'bootstrap',
    'metropolis_hastings',
    'MonteCarloSimulation',
    'simulate',
]
