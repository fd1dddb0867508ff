# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Vitals Model

Probabilistic simulation engine behind the biometric dashboard's forecast
and risk views.

Example usage:
    from vitals_model import MonteCarloSimulation, SimulationConfig

    mc = MonteCarloSimulation(seed=12345)
    result = mc.simulate(lambda: mc.normal_sample(75, 10),
                         SimulationConfig(iterations=10000))
    print(result.get_percentile_df())
"""

# Monte Carlo Simulation
from .montecarlo import (
    MonteCarloSimulation,
    SimulationConfig,
    SimulationResult,
    PortfolioRiskResult,
    MCMCResult,
    Asset,
    CorrelatedReturnGenerator,
    LinearCongruentialGenerator,
)

# Version
from .__meta__ import __version__

__all__ = [
    # Monte Carlo
    'MonteCarloSimulation', 'SimulationConfig', 'SimulationResult',
    'PortfolioRiskResult', 'MCMCResult', 'Asset',
    'CorrelatedReturnGenerator', 'LinearCongruentialGenerator',
    # Version
    '__version__',
]
