"""Nodes of a persistent sparse Merkle tree and the recursions over them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Union

from ..digest import DEFAULT_ALGORITHM, Hash
from .hashes import hash_branch
from .path import Path, Side
from .proof import MapProof


@dataclass(frozen=True)
class Leaf:
    """A leaf holding the hash of one key/value entry."""

    digest: Hash

    def hash(self) -> Hash:
        return self.digest


@dataclass(eq=False)
class Fork:
    """A branch with an optional link on each side."""

    left: Link | None = None
    right: Link | None = None
    algorithm: str = DEFAULT_ALGORITHM

    def hash(self) -> Hash:
        lhs = None if self.left is None else self.left.hash
        rhs = None if self.right is None else self.right.hash
        return hash_branch(lhs, rhs, self.algorithm)

    def __getitem__(self, side: Side) -> Link | None:
        return self.left if side is Side.LEFT else self.right

    def __setitem__(self, side: Side, link: Link | None) -> None:
        if side is Side.LEFT:
            self.left = link
        else:
            self.right = link

    def copy(self) -> Fork:
        return dataclasses.replace(self)


MapNode = Union[Leaf, Fork]


@dataclass(frozen=True, eq=False)
class Link:
    """A node together with its cached hash."""

    hash: Hash
    node: MapNode

    @classmethod
    def from_node(cls, node: MapNode) -> Link:
        return cls(node.hash(), node)


def prove_node(node: MapNode, path: Path) -> MapProof | None:
    """Follow ``path`` from ``node`` and return the proof for the leaf it reaches."""
    side = next(path, None)
    if side is not None and isinstance(node, Fork):
        child = node[side]
        if child is None:
            return None
        proof = prove_node(child.node, path)
        if proof is None:
            return None
        peer = node[side.opposite()]
        proof.push(None if peer is None else peer.hash)
        return proof
    if side is None and isinstance(node, Leaf):
        return MapProof([], node.digest.algorithm)
    return None


def insert_node(node: MapNode, path: Path, leaf: Hash) -> tuple[MapNode, bool]:
    """Store ``leaf`` at the end of ``path``, leaving ``node`` untouched.

    Returns the node that replaces ``node`` and whether the entry is new.
    """
    side = next(path, None)
    if side is None:
        return Leaf(leaf), isinstance(node, Fork)
    if not isinstance(node, Fork):
        raise ValueError("a leaf was reached before the end of the path")

    fork = node.copy()
    link = fork[side]
    child: MapNode = link.node if link is not None else Fork(algorithm=fork.algorithm)
    new_child, is_new = insert_node(child, path, leaf)
    fork[side] = Link.from_node(new_child)
    return fork, is_new