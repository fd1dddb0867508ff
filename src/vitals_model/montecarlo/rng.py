# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Seedable uniform random number generator for Monte Carlo simulation.

The generator is a linear congruential generator (LCG). It is fast and fully
reproducible, but it is NOT cryptographically secure and must never be used
for tokens, secrets or anything security related.
"""

import time
from typing import Optional

# glibc-style LCG constants
LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2 ** 31


class LinearCongruentialGenerator:
    """Deterministic uniform generator: state = (state * A + C) mod M.

    Python integers are arbitrary precision, so `state * A` never overflows
    and the output sequence is identical on every platform for a given seed.

    Example:
        >>> rng = LinearCongruentialGenerator(seed=42)
        >>> u = rng.next_uniform()
        >>> 0.0 <= u < 1.0
        True
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the generator.

        Args:
            seed: Integer seed. If None, the current time in milliseconds is
                  used; the chosen value is available as `seed`.

        Raises:
            TypeError: If seed is not an integer
        """
        if seed is None:
            seed = time.time_ns() // 1_000_000
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be an int or None, got {type(seed).__name__}")
        self._seed = seed
        self._state = seed

    @property
    def seed(self) -> int:
        """Seed this generator was created with."""
        return self._seed

    @property
    def state(self) -> int:
        """Current internal state."""
        return self._state

    def next_uniform(self) -> float:
        """Advance the state and return a uniform value in [0, 1)."""
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self._state / LCG_MODULUS

    # Alias matching the engine's public random() method
    random = next_uniform

    def __repr__(self) -> str:
        return f"LinearCongruentialGenerator(seed={self._seed}, state={self._state})"
