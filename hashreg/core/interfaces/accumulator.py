"""
Streaming hash accumulator protocol.

hashreg never computes a digest itself. Every provider hands back an object
from some hash library; this protocol is the part of those objects the
registry and CLI rely on. hashlib, pycryptodome and blake3 objects all
satisfy it without adaptation.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Accumulator(Protocol):
    """Stateful object that consumes bytes and produces a fixed-size digest."""

    digest_size: int

    def update(self, data: bytes, /) -> object:
        """Feed more bytes into the computation."""
        ...

    def digest(self) -> bytes:
        """Return the digest of everything fed so far."""
        ...

    def hexdigest(self) -> str:
        """Return digest() as lowercase hex."""
        ...
