"""
Analysis layer: statistics derived from routed hop counts.

IMPORTANT: This is NOT seen by the simulator. One-way derivation only.

- HopStatistics: mean and spread of hop counts at one network size
- hop_histogram: empirical hop-count distribution
- fit_log_linear: fit of mean hops to a + b·log10(N)
"""

from pastrysim.analysis.hop_stats import HopStatistics, summarize_trials, hop_histogram
from pastrysim.analysis.regression import LogLinearFit, fit_log_linear

__all__ = [
    "HopStatistics",
    "summarize_trials",
    "hop_histogram",
    "LogLinearFit",
    "fit_log_linear",
]
