"""
Visualization utilities.

- Mean hops vs network size (log and linear axes)
- Hop-count distributions
"""

from pastrysim.viz.hops import (
    plot_hops_log,
    plot_hops_linear,
    plot_hop_histogram,
    plot_sweep_summary,
    save_figure,
)

__all__ = [
    "plot_hops_log",
    "plot_hops_linear",
    "plot_hop_histogram",
    "plot_sweep_summary",
    "save_figure",
]
