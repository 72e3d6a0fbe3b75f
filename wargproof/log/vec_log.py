"""A verifiable log whose node hashes are stored contiguously by index."""

from __future__ import annotations

from functools import reduce
from typing import Any

from ..digest import DEFAULT_ALGORITHM, Hash
from .core import Checkpoint, LogBuilder, hash_branch, hash_empty, hash_leaf
from .node import Node, Side
from .proof import LogData


class VecLog(LogBuilder, LogData):
    """A log keeping every node hash in one list, laid out in in-order numbering."""

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        self._empty = hash_empty(algorithm)
        self.algorithm = algorithm
        self._length = 0
        self._tree: list[Hash] = []

    def __len__(self) -> int:
        return self._length

    def tree(self) -> tuple[Hash, ...]:
        """All node hashes, indexed by node index."""
        return tuple(self._tree)

    def root_at(self, length: int) -> Hash | None:
        """The root of the log when it held ``length`` entries, if it ever did."""
        if length > self._length:
            return None
        broots = [self._tree[node.index] for node in Node.broots_for_len(length)]
        if not broots:
            return self._empty
        return reduce(
            lambda later, earlier: hash_branch(earlier, later, self.algorithm),
            reversed(broots),
        )

    def checkpoint(self) -> Checkpoint:
        root = self.root_at(self._length)
        assert root is not None
        return Checkpoint(root, self._length)

    def push(self, entry: Any) -> Node:
        leaf_digest = hash_leaf(entry, self.algorithm)
        self._length += 1

        if self._length != 1:
            self._tree.append(self._empty)
        leaf_node = Node(len(self._tree))
        self._tree.append(leaf_digest)

        current_digest = leaf_digest
        current_node = leaf_node
        while current_node.side() is Side.RIGHT:
            sibling = current_node.left_sibling()
            current_node = current_node.parent()
            current_digest = hash_branch(
                self._tree[sibling.index], current_digest, self.algorithm
            )
            self._tree[current_node.index] = current_digest

        return leaf_node

    def has_hash(self, node: Node) -> bool:
        return node.index < len(self._tree)

    def hash_for(self, node: Node) -> Hash | None:
        if node.index < len(self._tree):
            return self._tree[node.index]
        return None