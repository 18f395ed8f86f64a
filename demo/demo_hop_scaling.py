#!/usr/bin/env python3
"""
Demo: mean Pastry hop count vs network size.

Sweeps network sizes from LOWER to UPPER in steps of STEP, routes
TRIALS x TRIALS random pairs per size, prints the hop table and the
H = a + b·log10(N) fit, and saves log-scale and linear plots.

Run with: poetry run python demo/demo_hop_scaling.py 100 2000 42 20 100

Expected runtime: seconds for a few thousand nodes.
"""

import argparse
import logging
import time
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from pastrysim.core import ConfigurationError, RoutingSimulator
from pastrysim.experiments import SweepConfig, run_sweep
from pastrysim.viz import plot_hops_log, plot_hops_linear, plot_hop_histogram, save_figure


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Pastry routing hop-count sweep",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("lower_bound", type=int, help="smallest network size")
    parser.add_argument("upper_bound", type=int, help="largest network size")
    parser.add_argument("seed", type=int, help="PRNG seed for reproducibility")
    parser.add_argument("trials", type=int, help="trials per size (and routes per trial)")
    parser.add_argument("step", type=int, help="increment between network sizes")
    parser.add_argument("--output-dir", type=Path, default=Path("output/demo_hop_scaling"))
    parser.add_argument("--no-plots", action="store_true", help="only print the table")
    parser.add_argument("--verbose", action="store_true", help="log per-size progress")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = SweepConfig(
            lower_bound=args.lower_bound,
            upper_bound=args.upper_bound,
            step=args.step,
            trials=args.trials,
            seed=args.seed,
        )
    except ConfigurationError as exc:
        raise SystemExit(f"error: {exc}")

    print("=" * 60)
    print("  Pastry Routing: Mean Hops vs Network Size")
    print("=" * 60)
    print(f"  Sizes: {config.lower_bound}..{config.upper_bound} step {config.step}")
    print(f"  Trials: {config.trials} x {config.pairs_per_trial} routes, seed {config.seed}")
    print()

    t0 = time.time()
    result = run_sweep(config)
    elapsed = time.time() - t0

    print(result.format_table())
    print(f"\nTotal computation time: {elapsed:.1f}s")

    if args.no_plots:
        return

    output_dir = args.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    fig, _ = plot_hops_log(result)
    save_figure(fig, output_dir / "hops_log.png")
    plt.close(fig)
    print(f"  Saved: {output_dir / 'hops_log.png'}")

    fig, _ = plot_hops_linear(result)
    save_figure(fig, output_dir / "hops_linear.png")
    plt.close(fig)
    print(f"  Saved: {output_dir / 'hops_linear.png'}")

    # Distribution at the largest swept size
    largest = RoutingSimulator.construct(config.largest_node_count, config.seed)
    hops = largest.hop_counts(np.random.default_rng(config.seed), 10 * config.trials ** 2)
    fig, _ = plot_hop_histogram(hops, node_count=largest.node_count)
    save_figure(fig, output_dir / "hops_distribution.png")
    plt.close(fig)
    print(f"  Saved: {output_dir / 'hops_distribution.png'}")


if __name__ == "__main__":
    main()
