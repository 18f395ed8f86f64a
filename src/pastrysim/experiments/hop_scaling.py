"""
Hop-count scaling sweep.

For each network size N in [lower_bound, upper_bound] (every `step` nodes):
- Build one RoutingSimulator from the sweep seed
- Run `trials` trials, each routing `pairs_per_trial` random pairs
- Record the mean hop count of every trial

Each size is then summarized by the mean and standard deviation of its trial
means, and the sizes are fitted to H = a + b·log10(N).

One generator, seeded once, draws the random pairs for the whole sweep, so
a SweepConfig always reproduces the same numbers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from pastrysim.core.errors import ConfigurationError
from pastrysim.core.simulator import RoutingSimulator, SimulatorConfig
from pastrysim.analysis.hop_stats import HopStatistics, summarize_trials
from pastrysim.analysis.regression import LogLinearFit, fit_log_linear

logger = logging.getLogger(__name__)


@dataclass
class SweepConfig:
    """Configuration for a hop-count scaling sweep."""

    lower_bound: int  # Smallest network size
    upper_bound: int  # Largest network size (inclusive)
    step: int = 1  # Increment between network sizes
    trials: int = 10  # Trials per network size
    seed: int = 42  # Seeds both the identifier spaces and the pair generator
    pairs_per_trial: int | None = None  # Routes per trial (default: trials)

    def __post_init__(self):
        for name in ("lower_bound", "upper_bound", "step", "trials"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if self.upper_bound < self.lower_bound:
            raise ConfigurationError(
                f"upper_bound ({self.upper_bound}) is below lower_bound ({self.lower_bound})"
            )
        if self.pairs_per_trial is None:
            self.pairs_per_trial = self.trials
        elif (
            isinstance(self.pairs_per_trial, bool)
            or not isinstance(self.pairs_per_trial, int)
            or self.pairs_per_trial <= 0
        ):
            raise ConfigurationError(
                f"pairs_per_trial must be a positive integer, got {self.pairs_per_trial!r}"
            )

    @property
    def node_counts(self) -> list[int]:
        """Network sizes visited by the sweep."""
        return list(range(self.lower_bound, self.upper_bound + 1, self.step))

    @property
    def largest_node_count(self) -> int:
        """Largest size actually swept (upper_bound may fall between steps)."""
        return self.node_counts[-1]


@dataclass
class SweepResult:
    """Per-size statistics plus the scaling fit."""

    config: SweepConfig
    statistics: list[HopStatistics] = field(default_factory=list)
    fit: LogLinearFit | None = None  # None when fewer than 3 sizes were measured

    @property
    def node_counts(self) -> np.ndarray:
        return np.array([s.node_count for s in self.statistics], dtype=np.int64)

    @property
    def mean_hops(self) -> np.ndarray:
        return np.array([s.mean for s in self.statistics], dtype=np.float64)

    @property
    def stddevs(self) -> np.ndarray:
        return np.array([s.stddev for s in self.statistics], dtype=np.float64)

    def format_table(self) -> str:
        """Nodes/Mean/Stddev table, followed by the fit when available."""
        lines = [
            "\tAverage Hops H",
            "_" * 37,
            "",
            "Nodes\tMean\t\tStddev",
        ]
        for s in self.statistics:
            lines.append(f"{s.node_count}\t{s.mean:f}\t{s.stddev:f}")
        if self.fit is not None:
            lines.append(self.fit.describe())
        return "\n".join(lines)


def measure_network(
    simulator: RoutingSimulator,
    rng: np.random.Generator,
    trials: int,
    pairs_per_trial: int,
) -> HopStatistics:
    """
    Run repeated random-pair trials on one simulator.

    Args:
        simulator: Simulator for the network size being measured
        rng: Generator for the random (source, destination) pairs
        trials: Number of trials
        pairs_per_trial: Routes averaged within each trial

    Returns:
        HopStatistics over the per-trial mean hop counts
    """
    trial_means = np.empty(trials, dtype=np.float64)
    for t in range(trials):
        trial_means[t] = simulator.hop_counts(rng, pairs_per_trial).mean()
    return summarize_trials(simulator.node_count, trial_means)


def run_sweep(config: SweepConfig) -> SweepResult:
    """
    Measure mean hop counts across network sizes and fit the scaling law.

    Args:
        config: Sweep configuration

    Returns:
        SweepResult with one HopStatistics per size and the log-linear fit
    """
    rng = np.random.default_rng(config.seed)
    result = SweepResult(config=config)

    logger.info(
        "sweeping N=%d..%d step %d (%d trials x %d pairs)",
        config.lower_bound, config.upper_bound, config.step,
        config.trials, config.pairs_per_trial,
    )

    for n in config.node_counts:
        simulator = RoutingSimulator(SimulatorConfig(node_count=n, seed=config.seed))
        stats = measure_network(simulator, rng, config.trials, config.pairs_per_trial)
        result.statistics.append(stats)
        logger.debug("N=%d mean=%.4f stddev=%.4f", n, stats.mean, stats.stddev)

    if len(result.statistics) >= 3:
        result.fit = fit_log_linear(result.node_counts, result.mean_hops, result.stddevs)
        logger.info("fit: a=%.3f b=%.3f chi2=%.4f", result.fit.a, result.fit.b, result.fit.chi2)
    else:
        logger.warning("only %d network sizes measured; skipping fit", len(result.statistics))

    return result
