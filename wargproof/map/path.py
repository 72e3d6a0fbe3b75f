"""The path through a sparse Merkle map given by the bits of a key's hash."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator

from ..digest import DEFAULT_ALGORITHM, Hash


class Side(Enum):
    """A direction to descend in the tree."""

    LEFT = 0
    RIGHT = 1

    def opposite(self) -> Side:
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class Path:
    """Iterates the bits of H(key), most significant first, as sides.

    It can be consumed from both ends; ``len`` gives the sides still left.
    """

    def __init__(self, key: Any, algorithm: str = DEFAULT_ALGORITHM) -> None:
        self._digest = Hash.of(key, algorithm).digest
        self._lhs = 0
        self._rhs = len(self._digest) * 8

    def _get(self, at: int) -> Side:
        byte = self._digest[at // 8]
        return Side((byte >> (7 - at % 8)) & 1)

    def __iter__(self) -> Path:
        return self

    def __next__(self) -> Side:
        if self._lhs == self._rhs:
            raise StopIteration
        self._lhs += 1
        return self._get(self._lhs - 1)

    def next_back(self) -> Side | None:
        """Take the last remaining side, or ``None`` when none is left."""
        if self._lhs == self._rhs:
            return None
        self._rhs -= 1
        return self._get(self._rhs)

    def __reversed__(self) -> Iterator[Side]:
        while (side := self.next_back()) is not None:
            yield side

    def __len__(self) -> int:
        return self._rhs - self._lhs