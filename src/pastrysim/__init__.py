"""
pastrysim: Pastry Routing Hop-Count Simulator

Estimates how many overlay hops a Pastry-style prefix-routed peer-to-peer
network needs to deliver a message, as a function of network size.

Core concepts:
- Node identifiers are 128-bit MD5 digests laid out on a sorted ring
- A leaf set reaches the 8 nearest nodes on each side in one hop
- Otherwise each hop matches one more hex digit of the destination
- Mean hop counts grow like a + b·log10(N)
"""

__version__ = "0.1.0"
