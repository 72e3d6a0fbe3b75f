"""Hashing rules for the leaves and branches of a sparse Merkle map."""

from __future__ import annotations

from typing import Any

from ..digest import DEFAULT_ALGORITHM, Hash

_LEAF_PREFIX = 0xFF
_BOTH_CHILDREN = 0b11
_LEFT_CHILD = 0b10
_RIGHT_CHILD = 0b01
_NO_CHILDREN = 0b00


def hash_leaf(key: Any, value: Any, algorithm: str = DEFAULT_ALGORITHM) -> Hash:
    """The hash of a leaf: H(0xff || H(key) || value)."""
    key_hash = Hash.of(key, algorithm)
    return Hash.of((_LEAF_PREFIX, key_hash, value), algorithm)


def hash_branch(
    lhs: Hash | None, rhs: Hash | None, algorithm: str = DEFAULT_ALGORITHM
) -> Hash:
    """The hash of a branch, prefixed by a bit field of which children exist."""
    if lhs is not None and rhs is not None:
        return Hash.of((_BOTH_CHILDREN, lhs, rhs), algorithm)
    if lhs is not None:
        return Hash.of((_LEFT_CHILD, lhs), algorithm)
    if rhs is not None:
        return Hash.of((_RIGHT_CHILD, rhs), algorithm)
    return Hash.of(_NO_CHILDREN, algorithm)