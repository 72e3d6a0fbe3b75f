"""Append-only Merkle log with inclusion and consistency proofs."""

__all__ = ["node", "core", "proof", "vec_log", "stack_log", "sparse_data", "proof_bundle"]