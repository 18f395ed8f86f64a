"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def counter_space():
    """Reference ring: MD5 of counters 101..120, sorted."""
    from pastrysim.core import IdentifierSpace
    return IdentifierSpace.from_counter(100, 20)


@pytest.fixture
def stepped_space():
    """20 nodes whose identifiers start 10, 11, ..., 23 (hex) then zeros."""
    from pastrysim.core import IdentifierSpace
    return IdentifierSpace((0x10 + i) << 120 for i in range(20))


@pytest.fixture
def small_simulator():
    """Seeded 200-node simulator."""
    from pastrysim.core import RoutingSimulator
    return RoutingSimulator.construct(200, seed=42)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
