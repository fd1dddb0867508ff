# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Distribution samplers built on a uniform random source.

Every sampler takes the uniform source explicitly as its first argument, so
independent simulation streams never share hidden state.
"""

import math
from typing import Protocol, runtime_checkable

# Floor for the first Box-Muller uniform; ln(0) is undefined
MIN_UNIFORM = 1e-300


@runtime_checkable
class UniformSource(Protocol):
    """Anything that can produce uniform values in [0, 1)."""

    def next_uniform(self) -> float:
        """Return the next uniform value in [0, 1)."""
        ...


def _check_std_dev(std_dev: float, name: str = "std_dev") -> None:
    if not math.isfinite(std_dev) or std_dev < 0:
        raise ValueError(f"{name} must be a finite non-negative number, got {std_dev}")


def normal_sample(rng: UniformSource, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """Draw from Normal(mean, std_dev) using the Box-Muller transform.

    Consumes exactly two uniforms per call.
    """
    _check_std_dev(std_dev)
    u1 = max(rng.next_uniform(), MIN_UNIFORM)
    u2 = rng.next_uniform()
    z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
    return mean + std_dev * z


def log_normal_sample(rng: UniformSource, mu: float, sigma: float) -> float:
    """Draw exp(X) with X ~ Normal(mu, sigma)."""
    _check_std_dev(sigma, "sigma")
    return math.exp(normal_sample(rng, mu, sigma))


def uniform_sample(rng: UniformSource, min_value: float, max_value: float) -> float:
    """Draw from Uniform[min_value, max_value)."""
    if max_value < min_value:
        raise ValueError(f"max_value ({max_value}) must be >= min_value ({min_value})")
    return min_value + (max_value - min_value) * rng.next_uniform()


def exponential_sample(rng: UniformSource, rate: float) -> float:
    """Draw from Exponential(rate) by inverse CDF."""
    if not rate > 0:
        raise ValueError(f"rate must be positive, got {rate}")
    return -math.log(1.0 - rng.next_uniform()) / rate


def triangular_sample(rng: UniformSource, min_value: float, mode: float,
                      max_value: float) -> float:
    """Draw from Triangular(min_value, mode, max_value) by inverse CDF.

    Raises:
        ValueError: Unless min_value <= mode <= max_value and min_value < max_value
    """
    if not min_value <= mode <= max_value or min_value == max_value:
        raise ValueError(
            f"triangular bounds require min <= mode <= max and min < max, "
            f"got ({min_value}, {mode}, {max_value})"
        )
    u = rng.next_uniform()
    span = max_value - min_value
    split = (mode - min_value) / span

    if u < split:
        return min_value + math.sqrt(u * span * (mode - min_value))
    return max_value - math.sqrt((1.0 - u) * span * (max_value - mode))
