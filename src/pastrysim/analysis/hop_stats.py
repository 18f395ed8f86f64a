"""
Per-size hop statistics.

A measurement at one network size is a series of trials; each trial routes
a batch of random pairs and contributes its mean hop count. The size is
summarized by the mean and sample standard deviation of those trial means.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from pastrysim.core.errors import ConfigurationError


@dataclass
class HopStatistics:
    """Hop-count summary for one network size."""

    node_count: int
    trial_means: np.ndarray
    mean: float
    stddev: float

    @property
    def n_trials(self) -> int:
        return len(self.trial_means)


def summarize_trials(node_count: int, trial_means) -> HopStatistics:
    """
    Summarize the per-trial mean hop counts of one network size.

    Args:
        node_count: Network size the trials were run on
        trial_means: Mean hop count of each trial

    Returns:
        HopStatistics (stddev uses ddof=1, and is 0.0 for a single trial)
    """
    means = np.asarray(trial_means, dtype=np.float64)
    if means.ndim != 1 or len(means) == 0:
        raise ConfigurationError("need at least one trial mean")

    stddev = float(means.std(ddof=1)) if len(means) > 1 else 0.0
    return HopStatistics(
        node_count=node_count,
        trial_means=means,
        mean=float(means.mean()),
        stddev=stddev,
    )


def hop_histogram(hops) -> tuple[np.ndarray, np.ndarray]:
    """
    Empirical distribution of hop counts.

    Returns:
        (values, fractions) - distinct hop counts and the fraction of routes
        that took each
    """
    hops = np.asarray(hops, dtype=np.int64)
    if len(hops) == 0:
        return np.array([], dtype=np.int64), np.array([], dtype=np.float64)
    values, counts = np.unique(hops, return_counts=True)
    return values, counts / counts.sum()
