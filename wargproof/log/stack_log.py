"""A log builder that keeps only a stack of balanced roots."""

from __future__ import annotations

from functools import reduce
from typing import Any

from ..digest import DEFAULT_ALGORITHM, Hash
from .core import Checkpoint, LogBuilder, hash_branch, hash_empty, hash_leaf
from .node import Node


class StackLog(LogBuilder):
    """A log builder which maintains a stack of balanced roots."""

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        self._empty = hash_empty(algorithm)
        self.algorithm = algorithm
        self._stack: list[tuple[Node, Hash]] = []
        self._length = 0

    def length(self) -> int:
        """The number of entries in the log."""
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def checkpoint(self) -> Checkpoint:
        if self._stack:
            root = reduce(
                lambda later, earlier: hash_branch(earlier, later, self.algorithm),
                (digest for _, digest in reversed(self._stack)),
            )
        else:
            root = self._empty
        return Checkpoint(root, self._length)

    def push(self, entry: Any) -> Node:
        node = Node(self._length * 2)
        self._length += 1
        self._stack.append((node, hash_leaf(entry, self.algorithm)))
        self._reduce()
        return node

    def _reduce(self) -> None:
        while len(self._stack) >= 2:
            top_node, top_hash = self._stack[-1]
            second_node, second_hash = self._stack[-2]
            if top_node.height() != second_node.height():
                return
            merged = (top_node.parent(), hash_branch(second_hash, top_hash, self.algorithm))
            del self._stack[-2:]
            self._stack.append(merged)