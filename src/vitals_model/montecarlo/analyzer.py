# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Turns a raw sample array into a SimulationResult.

Variance here is the population variance (divide by n). Other statistics
code in the dashboard uses the sample variance (n - 1); the two are kept
separate on purpose and should not be unified from this module.
"""

import math
from typing import Sequence

import numpy as np

from .results import ConfidenceInterval, Histogram, PercentileTable, SimulationResult

PERCENTILE_LEVELS = (5, 10, 25, 50, 75, 90, 95, 99)
DEFAULT_HISTOGRAM_BINS = 20


def _clamp_index(index: int, n: int) -> int:
    return max(0, min(n - 1, index))


def create_histogram(samples: Sequence[float],
                     num_bins: int = DEFAULT_HISTOGRAM_BINS) -> Histogram:
    """Build an equal-width histogram spanning [min, max].

    Samples may be in any order. The maximum value lands in the last bin.
    If every sample is equal the bin width is zero and all samples are
    counted in the first bin.
    """
    if num_bins < 1:
        raise ValueError(f"num_bins must be at least 1, got {num_bins}")

    values = np.asarray(samples, dtype=float).ravel()
    if len(values) == 0:
        raise ValueError("Cannot build a histogram from an empty sample set")

    lo = float(np.min(values))
    hi = float(np.max(values))
    bin_width = (hi - lo) / num_bins

    bins = tuple(lo + i * bin_width for i in range(num_bins))

    if bin_width > 0:
        indices = np.floor((values - lo) / bin_width).astype(int)
        indices = np.clip(indices, 0, num_bins - 1)
    else:
        indices = np.zeros(len(values), dtype=int)

    counts = np.bincount(indices, minlength=num_bins)
    return Histogram(bins=bins, counts=tuple(int(c) for c in counts), bin_width=bin_width)


def analyze_results(samples: Sequence[float], confidence_level: float) -> SimulationResult:
    """Compute summary statistics for a set of samples.

    Args:
        samples: Raw draws in any order
        confidence_level: Confidence interval width, strictly between 0 and 1

    Returns:
        SimulationResult holding a sorted, read-only copy of the samples

    Raises:
        ValueError: If samples is empty or contains non-finite values, or the
                    confidence level is outside (0, 1)
    """
    if not 0.0 < confidence_level < 1.0:
        raise ValueError(
            f"confidence_level must be between 0 and 1 (exclusive), got {confidence_level}"
        )

    sorted_samples = np.sort(np.asarray(samples, dtype=float).ravel())
    n = len(sorted_samples)
    if n == 0:
        raise ValueError("Cannot analyze an empty sample set")
    if not np.isfinite(sorted_samples).all():
        raise ValueError("Samples contain NaN or infinite values")
    sorted_samples.setflags(write=False)

    mean = float(np.mean(sorted_samples))
    if n % 2 == 0:
        median = float((sorted_samples[n // 2 - 1] + sorted_samples[n // 2]) / 2)
    else:
        median = float(sorted_samples[n // 2])

    variance = float(np.mean((sorted_samples - mean) ** 2))
    std_dev = math.sqrt(variance)

    percentiles = {}
    for p in PERCENTILE_LEVELS:
        index = math.ceil((p / 100) * n) - 1
        percentiles[p] = float(sorted_samples[_clamp_index(index, n)])

    tail = (1 - confidence_level) / 2
    lower_index = _clamp_index(math.floor(tail * n), n)
    upper_index = _clamp_index(math.ceil((1 - tail) * n) - 1, n)
    # Tiny levels round tail to 0.5; the interval must still contain the median
    lower_index = min(lower_index, (n - 1) // 2)
    upper_index = max(upper_index, n // 2)
    confidence_interval = ConfidenceInterval(
        lower=float(sorted_samples[lower_index]),
        upper=float(sorted_samples[upper_index]),
    )

    return SimulationResult(
        mean=mean,
        median=median,
        std_dev=std_dev,
        variance=variance,
        min=float(sorted_samples[0]),
        max=float(sorted_samples[-1]),
        percentiles=PercentileTable(percentiles),
        confidence_interval=confidence_interval,
        histogram=create_histogram(sorted_samples),
        samples=sorted_samples,
    )
