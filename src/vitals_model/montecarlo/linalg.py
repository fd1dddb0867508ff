# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Small dense linear algebra helpers for correlated sampling.

`numpy.linalg.cholesky` rejects matrices that are not positive definite. The
engine instead needs a factorization that degrades gracefully: negative
pivots are clamped to zero and reported back to the caller.
"""

import logging
from typing import List, Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

MatrixLike = Union[np.ndarray, Sequence[Sequence[float]]]

# Pivots more negative than this are reported as a loss of fidelity.
# Smaller negatives are floating point noise from singular PSD input.
CLAMP_TOLERANCE = 1e-10


def as_square_matrix(matrix: MatrixLike, name: str = "matrix") -> np.ndarray:
    """Convert input to a float ndarray and check it is square and finite.

    Raises:
        ValueError: If the input is not a non-empty, finite, square 2D matrix
    """
    try:
        arr = np.array(matrix, dtype=float)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a rectangular numeric 2D array") from e

    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"{name} must be square, got shape {arr.shape}")
    if arr.shape[0] == 0:
        raise ValueError(f"{name} must not be empty")
    if not np.isfinite(arr).all():
        raise ValueError(f"{name} contains NaN or infinite values")
    return arr


def cholesky_decomposition(matrix: MatrixLike) -> Tuple[np.ndarray, List[int]]:
    """Lower triangular L with L @ L.T == matrix for positive definite input.

    For input that is not positive semi-definite the quantity under the
    square root of a diagonal pivot can go negative. It is clamped to zero
    instead of failing, which keeps sampling alive at the cost of no longer
    reproducing the requested correlations exactly.

    Args:
        matrix: Square symmetric matrix (normally a correlation matrix)

    Returns:
        Tuple of:
        - L: lower triangular factor
        - clamped: indices of the diagonal pivots that had to be clamped
    """
    a = as_square_matrix(matrix)
    n = a.shape[0]
    lower = np.zeros((n, n))
    clamped = []

    for i in range(n):
        for j in range(i + 1):
            s = float(np.dot(lower[i, :j], lower[j, :j]))

            if i == j:
                pivot = a[i, i] - s
                if pivot < -CLAMP_TOLERANCE:
                    clamped.append(i)
                lower[i, j] = np.sqrt(max(0.0, pivot))
            else:
                # A zero pivot leaves the column unscaled
                lower[i, j] = (a[i, j] - s) / (lower[j, j] or 1.0)

    if clamped:
        logger.warning(
            "Matrix is not positive semi-definite; clamped %d Cholesky pivot(s) "
            "at indices %s. Sampled correlations will not match the input.",
            len(clamped), clamped
        )

    return lower, clamped


def matrix_vector_multiply(matrix: MatrixLike, vector: Sequence[float]) -> np.ndarray:
    """Return matrix @ vector after checking dimensions agree.

    Raises:
        ValueError: If the matrix is not square or the vector length differs
    """
    a = as_square_matrix(matrix)
    v = np.asarray(vector, dtype=float)
    if v.ndim != 1 or v.shape[0] != a.shape[1]:
        raise ValueError(
            f"vector of shape {v.shape} does not match matrix of shape {a.shape}"
        )
    return a @ v
