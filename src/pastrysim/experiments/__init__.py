"""
Experiment harness: setup and run standard experiments.

- Hop-count scaling sweep across network sizes (run_sweep)
"""

from pastrysim.experiments.hop_scaling import SweepConfig, SweepResult, measure_network, run_sweep

__all__ = [
    "SweepConfig",
    "SweepResult",
    "measure_network",
    "run_sweep",
]
