"""Binary in-order interval numbering of nodes in a log tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Which side of its parent a node is on."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, order=True)
class Node:
    """A node in the tree, identified by its in-order index."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"node index must be non-negative, got {self.index}")

    def height(self) -> int:
        """Number of trailing one bits in the index; leaves have height 0."""
        return (~self.index & (self.index + 1)).bit_length() - 1

    def _delta(self) -> int:
        return 1 << self.height()

    def side(self) -> Side:
        return Side.RIGHT if (self.index >> (self.height() + 1)) & 1 else Side.LEFT

    def left_sibling(self) -> Node:
        if self.side() is not Side.RIGHT:
            raise ValueError(f"node {self.index} is not a right-side node")
        return Node(self.index - 2 * self._delta())

    def right_sibling(self) -> Node:
        if self.side() is not Side.LEFT:
            raise ValueError(f"node {self.index} is not a left-side node")
        return Node(self.index + 2 * self._delta())

    def sibling(self) -> Node:
        return self.right_sibling() if self.side() is Side.LEFT else self.left_sibling()

    def parent(self) -> Node:
        if self.side() is Side.LEFT:
            return Node(self.index + self._delta())
        return Node(self.index - self._delta())

    def children(self) -> tuple[Node, Node]:
        if self.height() == 0:
            raise ValueError(f"leaf node {self.index} has no children")
        child_delta = self._delta() // 2
        return Node(self.index - child_delta), Node(self.index + child_delta)

    def rightmost_descendent(self) -> Node:
        return Node(self.index + self._delta() - 1)

    def leftmost_descendent(self) -> Node:
        return Node(self.index - (self._delta() - 1))

    def exists_at_length(self, length: int) -> bool:
        """Whether a log with ``length`` entries contains this node."""
        return self.rightmost_descendent().index // 2 < length

    def next_node_with_height(self, height: int) -> Node:
        """The first node after this one with the given (not greater) height."""
        if self.height() < height:
            raise ValueError(
                "the next node must not be taller than the node it follows"
            )
        first = Node.first_node_with_height(height)
        return Node(first.index + self.rightmost_descendent().index + 2)

    @staticmethod
    def first_node_with_height(height: int) -> Node:
        return Node((1 << height) - 1)

    @staticmethod
    def broots_for_len(length: int) -> list[Node]:
        """The balanced roots of a log holding ``length`` leaves, tallest first."""
        if length < 0:
            raise ValueError(f"log length must be non-negative, got {length}")
        heights = [bit for bit in range(length.bit_length()) if (length >> bit) & 1]
        broots: list[Node] = []
        for height in reversed(heights):
            if broots:
                broots.append(broots[-1].next_node_with_height(height))
            else:
                broots.append(Node.first_node_with_height(height))
        return broots