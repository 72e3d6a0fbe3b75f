"""An immutable key/value map backed by a sparse Merkle tree."""

from __future__ import annotations

from typing import Any, Iterable

from ..digest import DEFAULT_ALGORITHM, Hash
from .hashes import hash_leaf
from .path import Path
from .proof import MapProof
from .tree import Fork, Link, insert_node, prove_node


class Map:
    """A persistent map whose entries can be proven present against its root.

    Every insertion returns a new map and leaves the original unchanged. The
    bits of H(key) give the path from the root to the key's leaf, and only the
    nodes that are needed are ever created.
    """

    __slots__ = ("_link", "_len", "algorithm")

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        self.algorithm = algorithm
        self._link = Link.from_node(Fork(algorithm=algorithm))
        self._len = 0

    @classmethod
    def _derive(cls, link: Link, length: int, algorithm: str) -> Map:
        derived = cls.__new__(cls)
        derived.algorithm = algorithm
        derived._link = link
        derived._len = length
        return derived

    def root(self) -> Hash:
        """The hash of the root, which identifies the map and its contents."""
        return self._link.hash

    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def prove(self, key: Any) -> MapProof | None:
        """A proof that ``key`` is present, or ``None`` if it is absent."""
        return prove_node(self._link.node, Path(key, self.algorithm))

    def insert(self, key: Any, value: Any) -> Map:
        """A new map with ``key`` set to ``value``, replacing any earlier value."""
        path = Path(key, self.algorithm)
        leaf = hash_leaf(key, value, self.algorithm)
        node, is_new = insert_node(self._link.node, path, leaf)
        return Map._derive(Link.from_node(node), self._len + int(is_new), self.algorithm)

    def extend(self, items: Iterable[tuple[Any, Any]]) -> Map:
        """A new map with every key/value pair inserted in order."""
        here = self
        for key, value in items:
            here = here.insert(key, value)
        return here

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return self.root() == other.root()

    def __hash__(self) -> int:
        return hash(self.root())

    def __repr__(self) -> str:
        return f"Map({self.root()})"