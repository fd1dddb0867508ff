# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Monte Carlo simulation result value objects.

Results are frozen snapshots: the sorted sample array is read-only and the
percentile table is a read-only mapping, so a result never changes after
it is returned, whatever the engine does next.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, Tuple
import math

import numpy as np
import pandas as pd


class PercentileTable(Mapping):
    """Read-only mapping of percentile level to value.

    Unlike a mapping proxy it can be pickled and deep-copied, so results can
    be cached or sent to another process.
    """

    def __init__(self, values: Dict[int, float]):
        self._values = dict(values)

    def __getitem__(self, level: int) -> float:
        return self._values[level]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PercentileTable({self._values!r})"


@dataclass(frozen=True)
class ConfidenceInterval:
    """Lower and upper bound of an empirical confidence interval."""
    lower: float
    upper: float


@dataclass(frozen=True)
class Histogram:
    """Equal-width histogram over [min, max].

    Attributes:
        bins: Left edge of each bin
        counts: Number of samples in each bin; sums to the sample count
        bin_width: Width shared by every bin (0.0 when all samples are equal)
    """
    bins: Tuple[float, ...]
    counts: Tuple[int, ...]
    bin_width: float

    @property
    def total(self) -> int:
        return sum(self.counts)


@dataclass(frozen=True)
class SimulationResult:
    """Summary statistics of one simulated distribution.

    Example:
        >>> result = engine.simulate(lambda: engine.normal_sample(75, 10))
        >>> print(f"Median: {result.median:.1f}")
        >>> print(result.get_percentile_df())
    """
    mean: float
    median: float
    std_dev: float
    variance: float
    min: float
    max: float
    percentiles: PercentileTable = field(compare=False)
    confidence_interval: ConfidenceInterval
    histogram: Histogram
    samples: np.ndarray = field(compare=False, repr=False)

    @property
    def num_samples(self) -> int:
        return len(self.samples)

    def probability_above(self, threshold: float) -> float:
        """Fraction of samples greater than or equal to threshold.

        Args:
            threshold: Value to compare each sample against

        Returns:
            Probability as decimal (0.0 to 1.0)
        """
        return float(np.count_nonzero(self.samples >= threshold)) / self.num_samples

    def get_statistics(self) -> Dict[str, float]:
        """Get summary statistics as a flat dict.

        Returns:
            Dict with mean, median, std, variance, min, max, percentile values
            (p5 ... p99) and the confidence interval bounds
        """
        stats = {
            'mean': self.mean,
            'median': self.median,
            'std': self.std_dev,
            'variance': self.variance,
            'min': self.min,
            'max': self.max,
        }
        for level, value in self.percentiles.items():
            stats[f'p{level}'] = value
        stats['ci_lower'] = self.confidence_interval.lower
        stats['ci_upper'] = self.confidence_interval.upper
        return stats

    def get_percentile_df(self) -> pd.DataFrame:
        """Get the percentile table as a DataFrame indexed by percentile level."""
        df = pd.DataFrame({
            'percentile': list(self.percentiles.keys()),
            'value': list(self.percentiles.values()),
        })
        return df.set_index('percentile')

    def get_histogram_df(self) -> pd.DataFrame:
        """Get the histogram as a DataFrame with bin_start, bin_end and count columns."""
        starts = list(self.histogram.bins)
        return pd.DataFrame({
            'bin_start': starts,
            'bin_end': [start + self.histogram.bin_width for start in starts],
            'count': list(self.histogram.counts),
        })

    def _base_fields(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(SimulationResult)}


@dataclass(frozen=True)
class PortfolioRiskResult(SimulationResult):
    """Portfolio return distribution with tail-risk measures.

    Attributes:
        value_at_risk: 5th percentile of portfolio returns
        conditional_var: Mean of returns at or below value_at_risk (NaN if none)
        sharpe_ratio: mean / std_dev with a zero risk-free rate (NaN if std_dev is 0)
        clamped_pivots: Cholesky pivots clamped because the correlation matrix
                        was not positive semi-definite
    """
    value_at_risk: float = math.nan
    conditional_var: float = math.nan
    sharpe_ratio: float = math.nan
    clamped_pivots: Tuple[int, ...] = ()

    @property
    def correlation_degraded(self) -> bool:
        """True if the sampled correlations are known to differ from the input."""
        return len(self.clamped_pivots) > 0

    def get_statistics(self) -> Dict[str, float]:
        stats = super().get_statistics()
        stats['value_at_risk'] = self.value_at_risk
        stats['conditional_var'] = self.conditional_var
        stats['sharpe_ratio'] = self.sharpe_ratio
        return stats


@dataclass(frozen=True)
class MCMCResult(SimulationResult):
    """Analyzed Markov chain plus the fraction of accepted proposals."""
    acceptance_rate: float = 0.0

    def get_statistics(self) -> Dict[str, float]:
        stats = super().get_statistics()
        stats['acceptance_rate'] = self.acceptance_rate
        return stats
