"""Log hash data holding only selected nodes."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable

from ..digest import DEFAULT_ALGORITHM, Hash
from .node import Node
from .proof import LogData


class SparseLogData(LogData):
    """Hashes for a subset of the nodes of a log, looked up by binary search."""

    def __init__(
        self,
        entries: Iterable[tuple[Node, Hash]] = (),
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> None:
        pairs = sorted(entries, key=lambda pair: pair[0])
        self.algorithm = algorithm
        self._nodes = [node for node, _ in pairs]
        self._hashes = [digest for _, digest in pairs]

    def __len__(self) -> int:
        return len(self._nodes)

    def _position(self, node: Node) -> int | None:
        position = bisect_left(self._nodes, node)
        if position < len(self._nodes) and self._nodes[position] == node:
            return position
        return None

    def has_hash(self, node: Node) -> bool:
        return self._position(node) is not None

    def hash_for(self, node: Node) -> Hash | None:
        position = self._position(node)
        return None if position is None else self._hashes[position]