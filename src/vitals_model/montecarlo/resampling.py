# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Non-parametric bootstrap of an arbitrary statistic."""

import logging
from typing import Callable, Sequence

import numpy as np

from .analyzer import analyze_results
from .config import SimulationConfig
from .distributions import UniformSource
from .results import SimulationResult

logger = logging.getLogger(__name__)

BOOTSTRAP_CONFIDENCE_LEVEL = 0.95


def bootstrap(rng: UniformSource,
              data: Sequence[float],
              statistic: Callable[[np.ndarray], float],
              config: SimulationConfig) -> SimulationResult:
    """Estimate the sampling distribution of `statistic` over `data`.

    Each repetition draws len(data) indices uniformly with replacement,
    applies `statistic` to the resampled array and records the scalar.

    Args:
        rng: Uniform source driving index selection
        data: Observed values
        statistic: Function mapping a 1D array to a scalar (e.g. np.mean)
        config: Only `iterations` is used; the interval is always 95%

    Raises:
        ValueError: If data is empty
    """
    values = np.asarray(data, dtype=float).ravel()
    n = len(values)
    if n == 0:
        raise ValueError("Cannot bootstrap an empty data set")

    logger.debug("Bootstrapping %d observations, %d repetitions", n, config.iterations)

    estimates = []
    for _ in range(config.iterations):
        indices = [int(rng.next_uniform() * n) for _ in range(n)]
        estimates.append(float(statistic(values[indices])))

    return analyze_results(estimates, BOOTSTRAP_CONFIDENCE_LEVEL)
