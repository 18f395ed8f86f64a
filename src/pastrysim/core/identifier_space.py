"""
IdentifierSpace: the sorted ring of synthetic node identifiers.

Identifiers are built the way a Pastry node would derive its nodeId from a
hash: a counter value is written as a decimal string, hashed with MD5, and
the digest is read as a signed big-endian integer whose absolute value is
the 128-bit identifier. Collisions are possible in principle and are not
checked.

The space is immutable once built. Index i is the i-th smallest
identifier, and index arithmetic wraps modulo the node count.
"""

from __future__ import annotations

import hashlib
import operator
from typing import Iterable, Iterator

import numpy as np

from pastrysim.core.errors import ConfigurationError, DigestUnavailable
from pastrysim.core.ring import MAX_ID, to_hex

DIGEST_ALGORITHM = "md5"

# Initial counter is drawn uniformly from [0, COUNTER_RANGE)
COUNTER_RANGE = 100


def validate_node_count(node_count) -> int:
    """Return node_count as an int, rejecting non-integers and values <= 0."""
    if isinstance(node_count, bool):
        raise ConfigurationError(f"node_count must be an integer, got {node_count!r}")
    try:
        value = operator.index(node_count)
    except TypeError:
        raise ConfigurationError(
            f"node_count must be an integer, got {node_count!r}"
        ) from None
    if value <= 0:
        raise ConfigurationError(f"node_count must be positive, got {value}")
    return value


def _new_digest():
    try:
        return hashlib.new(DIGEST_ALGORITHM)
    except (ValueError, AttributeError) as exc:
        raise DigestUnavailable(
            f"hash algorithm {DIGEST_ALGORITHM!r} is not available"
        ) from exc


def counter_identifier(counter: int) -> int:
    """
    Identifier derived from a single counter value.

    The digest bytes are interpreted as a two's-complement big-endian
    integer and the absolute value is taken, so the result always fits in
    128 bits.
    """
    digest = _new_digest()
    digest.update(str(counter).encode("ascii"))
    return abs(int.from_bytes(digest.digest(), "big", signed=True))


class IdentifierSpace:
    """
    Immutable, ascending sequence of node identifiers.

    Usually created with ``build(node_count, seed)``. ``from_counter`` and
    the plain constructor exist for fixtures and hand-made rings.
    """

    def __init__(self, identifiers: Iterable[int]):
        ids = tuple(sorted(int(i) for i in identifiers))
        if not ids:
            raise ConfigurationError("identifier space needs at least one node")
        if ids[0] < 0 or ids[-1] >= MAX_ID:
            raise ConfigurationError("identifiers must lie in [0, 2**128)")

        self._ids = ids
        # Rendered once; the prefix scan compares these strings
        self._hex = tuple(to_hex(i) for i in ids)

    @classmethod
    def build(cls, node_count: int, seed: int) -> "IdentifierSpace":
        """
        Build a space of node_count identifiers from a seed.

        Args:
            node_count: Number of nodes (must be positive)
            seed: Seed for the generator that picks the first counter value

        Returns:
            IdentifierSpace with node_count sorted identifiers
        """
        node_count = validate_node_count(node_count)
        rng = np.random.default_rng(seed)
        start = int(rng.integers(0, COUNTER_RANGE))
        return cls.from_counter(start, node_count)

    @classmethod
    def from_counter(cls, start: int, node_count: int) -> "IdentifierSpace":
        """Identifiers for counter values start+1 .. start+node_count."""
        node_count = validate_node_count(node_count)
        # Fail before hashing anything if the digest is missing
        _new_digest()
        return cls(counter_identifier(start + k) for k in range(1, node_count + 1))

    @property
    def identifiers(self) -> tuple[int, ...]:
        return self._ids

    @property
    def node_count(self) -> int:
        return len(self._ids)

    def hex_id(self, index: int) -> str:
        """32-digit lowercase hex rendering of the identifier at index."""
        return self._hex[index]

    def __len__(self) -> int:
        return len(self._ids)

    def __getitem__(self, index: int) -> int:
        return self._ids[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentifierSpace):
            return NotImplemented
        return self._ids == other._ids

    def __hash__(self) -> int:
        return hash(self._ids)

    def __repr__(self) -> str:
        return f"IdentifierSpace(node_count={len(self._ids)})"
