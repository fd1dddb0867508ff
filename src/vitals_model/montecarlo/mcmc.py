# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Metropolis-Hastings sampler for a one-dimensional target density.

The target only needs to be known up to a normalizing constant. No burn-in
is discarded: every step, accepted or not, is appended to the chain, and
callers that need a warm-up period should trim `samples` themselves.
"""

import logging
import math
from typing import Callable

from .analyzer import analyze_results
from .config import SimulationConfig
from .distributions import UniformSource, normal_sample
from .results import MCMCResult

logger = logging.getLogger(__name__)

MCMC_CONFIDENCE_LEVEL = 0.95
# Stand-in denominator when the current state has zero density
ZERO_DENSITY_EPSILON = 1e-10


def _evaluate_density(target_density: Callable[[float], float], x: float) -> float:
    density = float(target_density(x))
    if not math.isfinite(density) or density < 0:
        raise ValueError(
            f"target_density must return a finite non-negative value, got {density} at x={x}"
        )
    return density


def metropolis_hastings(rng: UniformSource,
                        target_density: Callable[[float], float],
                        proposal_std_dev: float,
                        initial_value: float,
                        config: SimulationConfig) -> MCMCResult:
    """Run a random-walk Metropolis-Hastings chain.

    Args:
        rng: Uniform source for proposals and acceptance draws
        target_density: Unnormalized density of the target distribution
        proposal_std_dev: Standard deviation of the Gaussian random-walk step.
                          Zero is allowed and yields a chain that never moves.
        initial_value: Starting state of the chain
        config: Number of steps in `iterations`; the interval is always 95%

    Returns:
        MCMCResult of the full chain with the acceptance rate

    Raises:
        ValueError: If proposal_std_dev is negative or target_density returns
                    a NaN, infinite or negative value
    """
    if proposal_std_dev < 0:
        raise ValueError(f"proposal_std_dev cannot be negative: {proposal_std_dev}")

    current = float(initial_value)
    accepted = 0
    chain = []

    for _ in range(config.iterations):
        proposal = current + normal_sample(rng, 0.0, proposal_std_dev)

        current_density = _evaluate_density(target_density, current)
        proposal_density = _evaluate_density(target_density, proposal)
        accept_prob = min(1.0, proposal_density / (current_density or ZERO_DENSITY_EPSILON))

        if rng.next_uniform() < accept_prob:
            current = proposal
            accepted += 1

        chain.append(current)

    acceptance_rate = accepted / config.iterations
    logger.debug("MCMC finished %d steps, acceptance rate %.3f",
                 config.iterations, acceptance_rate)

    result = analyze_results(chain, MCMC_CONFIDENCE_LEVEL)
    return MCMCResult(**result._base_fields(), acceptance_rate=acceptance_rate)
