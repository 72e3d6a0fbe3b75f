"""Immutable sparse Merkle map with inclusion proofs."""

__all__ = ["hashes", "path", "proof", "tree", "map", "proof_bundle"]