# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Correlated return generator.

This module generates correlated normal returns using Cholesky decomposition
of a correlation matrix (not a covariance matrix). Each variable is then
scaled by its own mean and standard deviation.
"""

from typing import List, Sequence, Tuple

import numpy as np

from .distributions import UniformSource, normal_sample
from .linalg import MatrixLike, as_square_matrix, cholesky_decomposition, matrix_vector_multiply


def validate_correlation_matrix(matrix: MatrixLike) -> np.ndarray:
    """Check the structural properties of a correlation matrix.

    Positive semi-definiteness is deliberately not checked here; see
    `cholesky_decomposition`.

    Raises:
        ValueError: If the matrix is not square, not symmetric, has a diagonal
                    other than 1.0 or entries outside [-1, 1]
    """
    corr = as_square_matrix(matrix, "correlation matrix")

    if not np.allclose(corr, corr.T):
        raise ValueError("Correlation matrix must be symmetric")

    if not np.allclose(np.diag(corr), 1.0):
        raise ValueError("Correlation matrix diagonal must be 1.0")

    if np.any(np.abs(corr) > 1.0 + 1e-12):
        raise ValueError("Correlation matrix entries must be within [-1, 1]")

    return corr


class CorrelatedReturnGenerator:
    """Generates correlated normal draws for a fixed set of variables.

    The Cholesky factor is computed once at construction. Every call to
    `generate_returns` consumes one standard normal per variable from the
    shared uniform source, in variable order.

    Example:
        >>> rng = LinearCongruentialGenerator(seed=7)
        >>> corr = [[1.0, 0.7], [0.7, 1.0]]
        >>> gen = CorrelatedReturnGenerator(rng, [0.08, 0.06], [0.15, 0.10], corr)
        >>> returns = gen.generate_returns()
        >>> print(returns)  # e.g. [0.12, 0.04]
    """

    def __init__(self,
                 rng: UniformSource,
                 means: Sequence[float],
                 std_devs: Sequence[float],
                 correlation_matrix: MatrixLike):
        """Initialize the generator.

        Args:
            rng: Uniform source shared with the rest of the simulation
            means: Mean of each variable
            std_devs: Standard deviation of each variable
            correlation_matrix: NxN correlation matrix in the same order

        Raises:
            ValueError: If dimensions disagree, a standard deviation is negative
                        or the correlation matrix is malformed
        """
        self.rng = rng
        self.means = np.asarray(means, dtype=float)
        self.std_devs = np.asarray(std_devs, dtype=float)
        self.correlation_matrix = validate_correlation_matrix(correlation_matrix)

        n = self.correlation_matrix.shape[0]
        if self.means.shape != (n,) or self.std_devs.shape != (n,):
            raise ValueError(
                f"means ({self.means.shape}) and std_devs ({self.std_devs.shape}) "
                f"must both have length {n} to match the correlation matrix"
            )
        if not np.isfinite(self.means).all():
            raise ValueError("means must be finite")
        if not np.isfinite(self.std_devs).all() or np.any(self.std_devs < 0):
            raise ValueError(f"std_devs must be finite and non-negative: {self.std_devs}")

        # L such that L @ L^T = correlation_matrix (clamped if not PSD)
        self._cholesky, clamped = cholesky_decomposition(self.correlation_matrix)
        self.clamped_pivots: Tuple[int, ...] = tuple(clamped)

    @property
    def cholesky_factor(self) -> np.ndarray:
        """Copy of the lower triangular factor applied to each standard normal draw."""
        return self._cholesky.copy()

    @property
    def correlation_degraded(self) -> bool:
        """True if Cholesky had to clamp pivots for this matrix."""
        return len(self.clamped_pivots) > 0

    def generate_returns(self) -> np.ndarray:
        """Generate one correlated draw for every variable."""
        uncorrelated_z = [normal_sample(self.rng, 0.0, 1.0) for _ in range(len(self.means))]

        # z_corr = L @ z_uncorr
        correlated_z = matrix_vector_multiply(self._cholesky, uncorrelated_z)

        return self.means + self.std_devs * correlated_z

    def generate_multi_period_returns(self, num_periods: int) -> List[np.ndarray]:
        """Generate several consecutive periods of correlated returns.

        Args:
            num_periods: Number of periods to generate

        Returns:
            List of per-period return arrays
        """
        if num_periods < 0:
            raise ValueError(f"num_periods cannot be negative: {num_periods}")
        return [self.generate_returns() for _ in range(num_periods)]


def generate_correlated_returns(rng: UniformSource,
                                means: Sequence[float],
                                std_devs: Sequence[float],
                                correlation_matrix: MatrixLike) -> np.ndarray:
    """Draw a single vector of correlated returns.

    The factor is rebuilt on every call and the clamp diagnostic is only
    logged. Callers that need to detect a correlation matrix that is not
    positive semi-definite, or that draw repeatedly, should build a
    `CorrelatedReturnGenerator` and check `correlation_degraded`.
    """
    return CorrelatedReturnGenerator(rng, means, std_devs, correlation_matrix).generate_returns()
