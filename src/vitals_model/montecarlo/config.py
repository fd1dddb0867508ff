# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Configuration for Monte Carlo simulations."""

from dataclasses import dataclass
from typing import Optional

DEFAULT_CONFIDENCE_LEVEL = 0.95


@dataclass(frozen=True)
class SimulationConfig:
    """Configuration for a single simulation run.

    Attributes:
        iterations: Number of draws (or bootstrap repetitions / MCMC steps).
            Must be at least 1. Default 1000.
        confidence_level: Width of the reported confidence interval, strictly
            between 0 and 1. Default 0.95.
        seed: Optional seed used by `MonteCarloSimulation.from_config`.
    """
    iterations: int = 1000
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL
    seed: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int):
            raise TypeError(
                f"iterations must be int, got {type(self.iterations).__name__}"
            )
        if self.iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {self.iterations}")

        if isinstance(self.confidence_level, bool) or \
                not isinstance(self.confidence_level, (int, float)):
            raise TypeError("confidence_level must be numeric")
        if not 0.0 < self.confidence_level < 1.0:
            raise ValueError(
                f"confidence_level must be between 0 and 1 (exclusive), "
                f"got {self.confidence_level}"
            )

        if self.seed is not None and (isinstance(self.seed, bool) or
                                      not isinstance(self.seed, int)):
            raise TypeError("seed must be int or None")
