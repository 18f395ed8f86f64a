"""
pastrysim exception hierarchy.

Shared by the core, analysis and experiment layers so every module raises
and catches the same types. Each error also derives from the closest
builtin so callers that only know ``ValueError``/``IndexError`` still work.
"""

from __future__ import annotations


class PastrySimError(Exception):
    """Base for all pastrysim-specific errors."""


class ConfigurationError(PastrySimError, ValueError):
    """Raised when construction or sweep parameters are invalid.

    Invalid values are rejected, never clamped.
    """


class DigestUnavailable(PastrySimError, RuntimeError):
    """Raised when hashlib cannot provide the identifier digest (MD5)."""


class InvalidIndex(PastrySimError, IndexError):
    """A route endpoint lies outside ``[0, node_count)``."""

    def __init__(self, index: object, node_count: int):
        self.index = index
        self.node_count = node_count
        super().__init__(f"index {index!r} outside ring of {node_count} nodes")


class RouteLookupFailed(PastrySimError, LookupError):
    """
    The simulated routing-table lookup could not make progress.

    Carries the partial state of the route so callers can inspect how far
    it got before the scan gave up.
    """

    def __init__(
        self,
        source: int,
        destination: int,
        hops: int,
        prefix_len: int,
        reason: str = "no prefix match before ring bound",
    ):
        self.source = source
        self.destination = destination
        self.hops = hops
        self.prefix_len = prefix_len
        super().__init__(
            f"route {source} -> {destination} failed after {hops} hops "
            f"(prefix length {prefix_len}): {reason}"
        )
