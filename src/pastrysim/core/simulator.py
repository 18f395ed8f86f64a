"""
RoutingSimulator: hop counts for Pastry-style prefix routing.

Instead of maintaining per-node routing tables and leaf sets, the simulator
works on the globally known sorted identifier ring:

- Leaf set: a node reaches every node within leaf_set_size/2 ring positions
  on either side in one hop.
- Routing table: otherwise the next hop is the first node, scanning from the
  current node toward the destination, whose identifier shares the
  destination's first prefix_len hex digits.

The prefix length grows by one on every hop whether or not the chosen node
matches more digits than required. This models how Pastry converges one
digit per hop.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field

import numpy as np

from pastrysim.core.errors import ConfigurationError, InvalidIndex, RouteLookupFailed
from pastrysim.core.identifier_space import IdentifierSpace, validate_node_count
from pastrysim.core.ring import ID_HEX_DIGITS, mod, ring_distance

# Nodes per leaf set (half on each side of the owner)
LEAF_SET_SIZE = 16


@dataclass
class SimulatorConfig:
    """Configuration for a RoutingSimulator."""

    node_count: int
    seed: int | None = None  # None: only valid with an explicit IdentifierSpace
    leaf_set_size: int = LEAF_SET_SIZE

    def __post_init__(self):
        self.node_count = validate_node_count(self.node_count)
        if (
            isinstance(self.leaf_set_size, bool)
            or not isinstance(self.leaf_set_size, int)
            or self.leaf_set_size < 2
            or self.leaf_set_size % 2
        ):
            raise ConfigurationError(
                f"leaf_set_size must be a positive even integer, got {self.leaf_set_size!r}"
            )

    @property
    def leaf_radius(self) -> int:
        """Ring positions covered by the leaf set on each side."""
        return self.leaf_set_size // 2


@dataclass(frozen=True)
class RouteTrace:
    """Indices visited by one route, one entry per hop."""

    source: int
    destination: int
    path: tuple[int, ...] = field(default=())

    @property
    def hops(self) -> int:
        return len(self.path)


class RoutingSimulator:
    """
    Simulated Pastry overlay over one immutable IdentifierSpace.

    The scan direction is chosen once per route from the initial source and
    destination. Every prefix match lands between the current node and the
    destination (the destination itself always matches), so the direction
    never needs to change during a route.
    """

    def __init__(self, config: SimulatorConfig, space: IdentifierSpace | None = None):
        self.config = config

        if space is None:
            if config.seed is None:
                raise ConfigurationError("a seed is required to build the identifier space")
            space = IdentifierSpace.build(config.node_count, config.seed)
        elif len(space) != config.node_count:
            raise ConfigurationError(
                f"identifier space has {len(space)} nodes, config expects {config.node_count}"
            )

        self.space = space

    @classmethod
    def construct(cls, node_count: int, seed: int) -> "RoutingSimulator":
        """Build a simulator for node_count nodes from a seed."""
        return cls(SimulatorConfig(node_count=node_count, seed=seed))

    @classmethod
    def from_space(
        cls, space: IdentifierSpace, leaf_set_size: int = LEAF_SET_SIZE
    ) -> "RoutingSimulator":
        """Wrap an existing identifier space."""
        return cls(SimulatorConfig(len(space), leaf_set_size=leaf_set_size), space=space)

    @property
    def node_count(self) -> int:
        return self.config.node_count

    @property
    def leaf_set_size(self) -> int:
        return self.config.leaf_set_size

    def _check_index(self, index) -> int:
        if isinstance(index, bool):
            raise InvalidIndex(index, self.node_count)
        try:
            value = operator.index(index)
        except TypeError:
            raise InvalidIndex(index, self.node_count) from None
        if not 0 <= value < self.node_count:
            raise InvalidIndex(index, self.node_count)
        return value

    # === Leaf set ===

    def in_leaf_set(self, source: int, destination: int) -> bool:
        """True if destination is within leaf radius of source (excluding source)."""
        distance = ring_distance(source, destination, self.node_count)
        return 1 <= distance <= self.config.leaf_radius

    def leaf_set(self, index: int) -> tuple[int, ...]:
        """Sorted ring indices in the leaf set of the node at index."""
        index = self._check_index(index)
        n = self.node_count
        members = set()
        for k in range(1, self.config.leaf_radius + 1):
            members.add(mod(index + k, n))
            members.add(mod(index - k, n))
        members.discard(index)
        return tuple(sorted(members))

    # === Routing table lookup ===

    def _prefix_match(self, target_hex: str, prefix_len: int, start: int, step: int) -> int | None:
        """
        First index from start (inclusive) toward the array bound whose
        identifier starts with target_hex[:prefix_len].
        """
        prefix = target_hex[:prefix_len]
        bound = self.node_count if step > 0 else -1
        for i in range(start, bound, step):
            if self.space.hex_id(i).startswith(prefix):
                return i
        return None

    def trace(self, source: int, destination: int) -> RouteTrace:
        """
        Route from source to destination and record every hop.

        Args:
            source: Ring index of the sending node
            destination: Ring index of the receiving node

        Returns:
            RouteTrace whose path ends at destination

        Raises:
            InvalidIndex: an index lies outside [0, node_count)
            RouteLookupFailed: the prefix scan cannot make progress
        """
        source = self._check_index(source)
        destination = self._check_index(destination)
        if source == destination:
            return RouteTrace(source, destination)

        step = -1 if source > destination else 1
        target_hex = self.space.hex_id(destination)

        path: list[int] = []
        current = source
        prefix_len = 0

        while current != destination:
            prefix_len += 1

            if self.in_leaf_set(current, destination):
                current = destination
            else:
                nxt = self._prefix_match(target_hex, prefix_len, current, step)
                if nxt is None:
                    raise RouteLookupFailed(source, destination, len(path), prefix_len)
                if nxt == current and prefix_len >= ID_HEX_DIGITS:
                    # Full-width match on the current node: duplicate identifier
                    raise RouteLookupFailed(
                        source, destination, len(path), prefix_len,
                        reason=f"node {current} has the destination's identifier",
                    )
                current = nxt

            path.append(current)

        return RouteTrace(source, destination, tuple(path))

    def route(self, source: int, destination: int) -> int:
        """Number of overlay hops from source to destination."""
        return self.trace(source, destination).hops

    # === Random trials ===

    def run_trial(self, rng: np.random.Generator) -> int:
        """Route one random (source, destination) pair drawn from rng."""
        source = int(rng.integers(self.node_count))
        destination = int(rng.integers(self.node_count))
        return self.route(source, destination)

    def hop_counts(self, rng: np.random.Generator, n_pairs: int) -> np.ndarray:
        """Hop counts for n_pairs random pairs, drawn pair by pair from rng."""
        if isinstance(n_pairs, bool):
            raise ConfigurationError(f"n_pairs must be an integer, got {n_pairs!r}")
        try:
            n_pairs = operator.index(n_pairs)
        except TypeError:
            raise ConfigurationError(f"n_pairs must be an integer, got {n_pairs!r}") from None
        if n_pairs < 0:
            raise ConfigurationError(f"n_pairs must be non-negative, got {n_pairs}")
        return np.fromiter(
            (self.run_trial(rng) for _ in range(n_pairs)),
            dtype=np.int64,
            count=n_pairs,
        )

    def __repr__(self) -> str:
        return (
            f"RoutingSimulator(node_count={self.node_count}, "
            f"leaf_set_size={self.leaf_set_size})"
        )
