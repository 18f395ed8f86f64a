"""Unit tests for hop-count plots."""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from pastrysim.experiments.hop_scaling import SweepConfig, run_sweep
from pastrysim.viz.hops import (
    plot_hop_histogram,
    plot_hops_linear,
    plot_hops_log,
    plot_sweep_summary,
    save_figure,
)


@pytest.fixture(scope="module")
def sweep_result():
    return run_sweep(SweepConfig(lower_bound=20, upper_bound=220, step=50, trials=4, seed=1))


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestSweepPlots:
    """Tests for sweep plots."""

    def test_log_plot_axes(self, sweep_result):
        fig, ax = plot_hops_log(sweep_result)
        assert ax.get_xscale() == "log"
        assert ax.get_ylim() == (1, 10)
        assert "Trials = 4" in ax.get_title()

    def test_log_plot_draws_fit(self, sweep_result):
        _, ax = plot_hops_log(sweep_result, errorbars=False)
        labels = [line.get_label() for line in ax.get_lines()]
        assert any(label.startswith("H = ") for label in labels)

    def test_linear_plot_reference_curve(self, sweep_result):
        _, ax = plot_hops_linear(sweep_result)
        assert ax.get_xscale() == "linear"
        labels = [line.get_label() for line in ax.get_lines()]
        assert "log10(N)" in labels

    def test_existing_axes_reused(self, sweep_result):
        fig, ax = plt.subplots()
        fig2, ax2 = plot_hops_linear(sweep_result, ax=ax)
        assert fig2 is fig
        assert ax2 is ax

    def test_summary_has_two_panels(self, sweep_result):
        fig, axes = plot_sweep_summary(sweep_result)
        assert len(axes) == 2


class TestHistogram:
    """Tests for the hop distribution plot."""

    def test_bars(self):
        fig, ax = plot_hop_histogram(np.array([1, 2, 2, 3]), node_count=50)
        assert len(ax.patches) == 3
        assert "N = 50" in ax.get_title()


def test_save_figure(tmp_path, sweep_result):
    fig, _ = plot_hops_log(sweep_result)
    path = tmp_path / "hops.png"
    save_figure(fig, path)
    assert path.exists()
    assert path.stat().st_size > 0
