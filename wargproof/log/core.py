"""Hashing rules and the builder interface shared by verifiable logs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..digest import DEFAULT_ALGORITHM, Hash
from .node import Node

_LEAF_PREFIX = 0
_BRANCH_PREFIX = 1


def hash_empty(algorithm: str = DEFAULT_ALGORITHM) -> Hash:
    """The hash of an empty tree."""
    return Hash.of((), algorithm)


def hash_leaf(data: Any, algorithm: str = DEFAULT_ALGORITHM) -> Hash:
    """The hash of a leaf holding ``data``: H(0x00 || data)."""
    return Hash.of((_LEAF_PREFIX, data), algorithm)


def hash_branch(left: Any, right: Any, algorithm: str = DEFAULT_ALGORITHM) -> Hash:
    """The hash of a branch over two children: H(0x01 || left || right)."""
    return Hash.of((_BRANCH_PREFIX, left, right), algorithm)


@dataclass(frozen=True, order=True)
class Checkpoint:
    """A point in the history of a log: its root hash and its length."""

    root: Hash
    length: int


class LogBuilder(ABC):
    """A log that entries can be appended to and checkpointed."""

    @abstractmethod
    def checkpoint(self) -> Checkpoint:
        """The root hash and length of the log as it stands."""

    @abstractmethod
    def push(self, entry: Any) -> Node:
        """Append an entry and return the leaf node that holds it."""