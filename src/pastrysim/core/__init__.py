"""
Core routing primitives.

This layer knows NOTHING about statistics, regression or plotting.
It only knows:
- The sorted ring of node identifiers (IdentifierSpace)
- Ring index arithmetic
- Leaf-set shortcuts and prefix-matching hops (RoutingSimulator)

Everything here is deterministic for a given (node_count, seed).
"""

from pastrysim.core.errors import (
    PastrySimError,
    ConfigurationError,
    DigestUnavailable,
    InvalidIndex,
    RouteLookupFailed,
)
from pastrysim.core.ring import ID_BITS, ID_HEX_DIGITS, mod, ring_distance, to_hex, shared_prefix_length
from pastrysim.core.identifier_space import IdentifierSpace, counter_identifier
from pastrysim.core.simulator import LEAF_SET_SIZE, RoutingSimulator, RouteTrace, SimulatorConfig

__all__ = [
    "PastrySimError",
    "ConfigurationError",
    "DigestUnavailable",
    "InvalidIndex",
    "RouteLookupFailed",
    "ID_BITS",
    "ID_HEX_DIGITS",
    "mod",
    "ring_distance",
    "to_hex",
    "shared_prefix_length",
    "IdentifierSpace",
    "counter_identifier",
    "LEAF_SET_SIZE",
    "RoutingSimulator",
    "RouteTrace",
    "SimulatorConfig",
]
