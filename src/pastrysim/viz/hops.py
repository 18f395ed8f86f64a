"""
Plots of measured hop counts.

- Mean hops vs N on a logarithmic axis, with the fitted a + b·log10(N) line
- Mean hops vs N on linear axes, against the log10(N) reference curve
- Hop-count distribution at a single network size

All plots use matplotlib and return (fig, ax) so callers can compose them.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from pastrysim.analysis.hop_stats import hop_histogram

if TYPE_CHECKING:
    from pastrysim.experiments.hop_scaling import SweepResult


COLOR_DATA = "black"
COLOR_FIT = "red"
COLOR_REFERENCE = "tab:blue"

# Mean hop counts stay within this range for all practical network sizes
HOPS_YLIM = (1, 10)


def _get_axes(ax: Axes | None, figsize: tuple[float, float]) -> tuple[Figure, Axes]:
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure
    return fig, ax


def plot_hops_log(
    result: "SweepResult",
    title: str | None = None,
    ax: Axes | None = None,
    errorbars: bool = True,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """
    Plot mean hops against network size on a log10 x-axis.

    The fitted law is a straight line on this axis.

    Args:
        result: SweepResult from run_sweep
        title: Plot title (defaults to one naming the trial count)
        ax: Existing axes (creates new figure if None)
        errorbars: Draw ±1 stddev error bars

    Returns:
        (fig, ax) tuple
    """
    fig, ax = _get_axes(ax, figsize)
    n = result.node_counts
    h = result.mean_hops

    if errorbars:
        ax.errorbar(n, h, yerr=result.stddevs, fmt="o", color=COLOR_DATA,
                    markersize=4, capsize=2, label="mean hops")
    else:
        ax.plot(n, h, "o", color=COLOR_DATA, markersize=4, label="mean hops")

    if result.fit is not None and len(n) > 0:
        n_line = np.geomspace(n.min(), n.max(), 100)
        ax.plot(n_line, result.fit.predict(n_line), color=COLOR_FIT, linewidth=1.5,
                label=f"H = {result.fit.a:.2f} + {result.fit.b:.2f} log N")

    ax.set_xscale("log")
    ax.set_ylim(*HOPS_YLIM)
    ax.set_xlabel("Number of nodes, N")
    ax.set_ylabel("Mean number of hops, H")
    ax.set_title(title or f"Pastry Hops (Log) : Trials = {result.config.trials}")
    ax.grid(True, which="both", alpha=0.3)
    ax.legend()

    return fig, ax


def plot_hops_linear(
    result: "SweepResult",
    title: str | None = None,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """Plot mean hops against N on linear axes with the log10(N) reference."""
    fig, ax = _get_axes(ax, figsize)
    n = result.node_counts

    ax.plot(n, result.mean_hops, "o", color=COLOR_FIT, markersize=4, label="mean hops")
    if len(n) > 0:
        ax.plot(n, np.log10(n), color=COLOR_REFERENCE, linewidth=1.5, label="log10(N)")
        if n.min() < n.max():
            ax.set_xlim(n.min(), n.max())

    ax.set_ylim(*HOPS_YLIM)
    ax.set_xlabel("Number of nodes, N")
    ax.set_ylabel("Mean number of hops")
    ax.set_title(title or f"Pastry Hops (Linear) : Trials = {result.config.trials}")
    ax.grid(True, alpha=0.3)
    ax.legend()

    return fig, ax


def plot_hop_histogram(
    hops,
    node_count: int | None = None,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (7, 5),
) -> tuple[Figure, Axes]:
    """
    Bar chart of the fraction of routes taking each hop count.

    Args:
        hops: Hop counts from RoutingSimulator.hop_counts
        node_count: Network size, shown in the title if given
        ax: Existing axes (creates new figure if None)

    Returns:
        (fig, ax) tuple
    """
    fig, ax = _get_axes(ax, figsize)
    values, fractions = hop_histogram(hops)

    ax.bar(values, fractions, width=0.8, color=COLOR_REFERENCE, edgecolor="black")
    ax.set_xlabel("Hops")
    ax.set_ylabel("Fraction of routes")
    title = "Hop-count distribution"
    if node_count is not None:
        title += f" (N = {node_count})"
    ax.set_title(title)
    ax.grid(True, axis="y", alpha=0.3)

    return fig, ax


def plot_sweep_summary(
    result: "SweepResult",
    figsize: tuple[float, float] = (14, 5),
) -> tuple[Figure, np.ndarray]:
    """Log-scale and linear sweep plots side by side."""
    fig, axes = plt.subplots(1, 2, figsize=figsize)
    plot_hops_log(result, ax=axes[0])
    plot_hops_linear(result, ax=axes[1])
    fig.tight_layout()
    return fig, axes


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
