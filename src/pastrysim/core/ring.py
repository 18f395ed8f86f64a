"""
Ring arithmetic over the sorted identifier sequence.

Node positions are indices into a sorted array that is treated as a ring,
so all position arithmetic wraps modulo the node count. Identifiers are
128-bit integers rendered as fixed-width lowercase hex for prefix
comparison.
"""

from __future__ import annotations

from pastrysim.core.errors import ConfigurationError

# Identifier width
ID_BITS = 128
ID_HEX_DIGITS = ID_BITS // 4
MAX_ID = 2 ** ID_BITS


def mod(x: int, n: int) -> int:
    """
    Return x mod n in [0, n), also for negative x.

    >>> mod(-1, 5)
    4
    """
    if n <= 0:
        raise ConfigurationError(f"ring size must be positive, got {n}")
    return x % n


def ring_distance(a: int, b: int, n: int) -> int:
    """Shortest number of ring steps between positions a and b."""
    forward = mod(b - a, n)
    return min(forward, n - forward)


def to_hex(identifier: int) -> str:
    """Render an identifier as 32 lowercase hex digits."""
    return format(identifier, f"0{ID_HEX_DIGITS}x")


def shared_prefix_length(a: str, b: str) -> int:
    """Number of leading hex digits two rendered identifiers share."""
    length = 0
    for x, y in zip(a, b):
        if x != y:
            break
        length += 1
    return length
