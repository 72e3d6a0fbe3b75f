"""Verifiable Merkle logs and maps with inclusion and consistency proofs."""

__version__ = "0.1.0"
__all__ = ["digest", "protowire", "grep", "log", "map"]