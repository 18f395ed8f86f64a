"""Unit tests for the hop-count scaling sweep."""

import logging

import numpy as np
import pytest

from pastrysim.core import RoutingSimulator
from pastrysim.core.errors import ConfigurationError
from pastrysim.experiments.hop_scaling import SweepConfig, SweepResult, measure_network, run_sweep


@pytest.fixture
def small_sweep_config():
    """Five sizes, five trials of five routes each."""
    return SweepConfig(lower_bound=20, upper_bound=100, step=20, trials=5, seed=42)


class TestSweepConfig:
    """Tests for SweepConfig."""

    def test_defaults(self):
        cfg = SweepConfig(lower_bound=10, upper_bound=50)
        assert cfg.step == 1
        assert cfg.trials == 10
        assert cfg.seed == 42
        assert cfg.pairs_per_trial == 10  # follows trials

    def test_explicit_pairs_per_trial(self):
        cfg = SweepConfig(lower_bound=10, upper_bound=50, trials=4, pairs_per_trial=100)
        assert cfg.pairs_per_trial == 100

    def test_node_counts_inclusive(self):
        cfg = SweepConfig(lower_bound=100, upper_bound=500, step=100)
        assert cfg.node_counts == [100, 200, 300, 400, 500]

    def test_node_counts_uneven_step(self):
        cfg = SweepConfig(lower_bound=10, upper_bound=35, step=10)
        assert cfg.node_counts == [10, 20, 30]

    def test_largest_node_count(self):
        assert SweepConfig(lower_bound=10, upper_bound=35, step=10).largest_node_count == 30
        assert SweepConfig(lower_bound=10, upper_bound=30, step=10).largest_node_count == 30
        assert SweepConfig(lower_bound=10, upper_bound=10).largest_node_count == 10

    @pytest.mark.parametrize(
        "kwargs",
        [
            dict(lower_bound=0, upper_bound=10),
            dict(lower_bound=10, upper_bound=5),
            dict(lower_bound=10, upper_bound=20, step=0),
            dict(lower_bound=10, upper_bound=20, trials=-1),
            dict(lower_bound=10, upper_bound=20, pairs_per_trial=0),
            dict(lower_bound=10, upper_bound=20, pairs_per_trial=2.5),
            dict(lower_bound=10, upper_bound=20, pairs_per_trial=True),
            dict(lower_bound=1.5, upper_bound=20),
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            SweepConfig(**kwargs)


class TestMeasureNetwork:
    """Tests for measuring a single network size."""

    def test_trial_count(self, rng):
        sim = RoutingSimulator.construct(100, seed=3)
        stats = measure_network(sim, rng, trials=4, pairs_per_trial=25)
        assert stats.node_count == 100
        assert stats.n_trials == 4
        assert stats.mean > 0
        assert stats.stddev >= 0

    def test_reproducible(self):
        sim = RoutingSimulator.construct(100, seed=3)
        a = measure_network(sim, np.random.default_rng(1), trials=3, pairs_per_trial=20)
        b = measure_network(sim, np.random.default_rng(1), trials=3, pairs_per_trial=20)
        assert np.array_equal(a.trial_means, b.trial_means)


class TestRunSweep:
    """Tests for full sweeps."""

    def test_one_statistic_per_size(self, small_sweep_config):
        result = run_sweep(small_sweep_config)
        assert isinstance(result, SweepResult)
        assert list(result.node_counts) == [20, 40, 60, 80, 100]
        assert result.mean_hops.shape == (5,)
        assert result.stddevs.shape == (5,)

    def test_mean_hops_in_plausible_range(self, small_sweep_config):
        result = run_sweep(small_sweep_config)
        assert np.all(result.mean_hops >= 0)
        assert np.all(result.mean_hops < 10)

    def test_fit_present(self, small_sweep_config):
        result = run_sweep(small_sweep_config)
        assert result.fit is not None
        assert result.fit.n_points == 5

    def test_deterministic(self, small_sweep_config):
        a = run_sweep(small_sweep_config)
        b = run_sweep(SweepConfig(lower_bound=20, upper_bound=100, step=20, trials=5, seed=42))
        assert np.array_equal(a.mean_hops, b.mean_hops)
        assert np.array_equal(a.stddevs, b.stddevs)

    def test_too_few_sizes_skips_fit(self, caplog):
        cfg = SweepConfig(lower_bound=20, upper_bound=40, step=20, trials=3)
        with caplog.at_level(logging.WARNING, logger="pastrysim.experiments.hop_scaling"):
            result = run_sweep(cfg)
        assert result.fit is None
        assert "skipping fit" in caplog.text

    def test_hops_grow_with_size(self):
        cfg = SweepConfig(lower_bound=20, upper_bound=2020, step=1000, trials=10, seed=5)
        result = run_sweep(cfg)
        assert result.mean_hops[-1] > result.mean_hops[0]
        assert result.fit.b > 0

    def test_format_table(self, small_sweep_config):
        result = run_sweep(small_sweep_config)
        table = result.format_table()
        lines = table.splitlines()
        assert "Nodes\tMean\t\tStddev" in lines
        assert any(line.startswith("20\t") for line in lines)
        assert "H = a + b log N" in table
