"""Inclusion and consistency proofs over in-order log trees."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import reduce
from typing import Any

from ..digest import DEFAULT_ALGORITHM, Hash
from .core import hash_branch, hash_leaf
from .node import Node


class InclusionProofError(Exception):
    """An inclusion proof could not be evaluated."""


class LeafTooNew(InclusionProofError):
    """The leaf is too new to be present at the given log length."""

    def __init__(self, message: str = "leaf newer than when it should be included"):
        super().__init__(message)


class InclusionHashNotKnown(InclusionProofError):
    """A hash needed to evaluate the proof is not available."""

    def __init__(self, message: str = "required hash for proof is not available"):
        super().__init__(message)


class ConsistencyProofError(Exception):
    """A consistency proof could not be evaluated."""


class PointsOutOfOrder(ConsistencyProofError):
    """The old length is greater than the new length."""

    def __init__(
        self, message: str = "tries to prove later value comes before earlier"
    ):
        super().__init__(message)


class ConsistencyHashNotKnown(ConsistencyProofError):
    """A hash needed to evaluate the proof is not available."""

    def __init__(
        self, message: str = "a hash needed for evaluation was not available"
    ):
        super().__init__(message)


class InclusionFailed(ConsistencyProofError):
    """One of the constituent inclusion proofs failed."""

    def __init__(self, inner: InclusionProofError):
        super().__init__("constituent inclusion proof failed")
        self.inner = inner


class DivergingRoots(ConsistencyProofError):
    """Two constituent inclusion proofs produced different roots."""

    def __init__(
        self,
        message: str = "constituent inclusion proofs diverge produce different roots",
    ):
        super().__init__(message)


class LogData(ABC):
    """A collection of node hashes of a log."""

    algorithm: str = DEFAULT_ALGORITHM

    @abstractmethod
    def has_hash(self, node: Node) -> bool:
        """Whether the hash for ``node`` is known."""

    @abstractmethod
    def hash_for(self, node: Node) -> Hash | None:
        """The hash for ``node``, or ``None`` if it is not known."""

    def prove_inclusion(self, leaf: Node, log_length: int) -> InclusionProof:
        return InclusionProof(leaf, log_length, self.algorithm)

    def prove_consistency(self, old_length: int, new_length: int) -> ConsistencyProof:
        return ConsistencyProof(old_length, new_length, self.algorithm)


@dataclass(frozen=True)
class InclusionProofWalk:
    """The nodes visited when verifying an inclusion proof.

    The walk first climbs from the leaf to its balanced root, then visits the
    lower balanced roots from the smallest upwards, then the upper balanced
    roots from the nearest to the tallest.
    """

    nodes: tuple[Node, ...]
    initial_walk_len: int
    lower_broots: int
    upper_broots: int

    def initial_walk(self) -> tuple[Node, ...]:
        return self.nodes[: self.initial_walk_len]

    def lower_broot_walk(self) -> tuple[Node, ...]:
        start = self.initial_walk_len
        return self.nodes[start : start + self.lower_broots]

    def upper_broot_walk(self) -> tuple[Node, ...]:
        start = self.initial_walk_len + self.lower_broots
        return self.nodes[start : start + self.upper_broots]


def _combine(first: tuple[Node, Hash], second: tuple[Node, Hash]) -> tuple[Node, Hash]:
    if first[0].index < second[0].index:
        lhs, rhs = first[1], second[1]
    else:
        lhs, rhs = second[1], first[1]
    return second[0], hash_branch(lhs, rhs, lhs.algorithm)


@dataclass(frozen=True)
class InclusionProof:
    """A proof that a leaf is present in a log of a given length."""

    leaf: Node
    log_length: int
    algorithm: str = DEFAULT_ALGORITHM

    def walk(self) -> InclusionProofWalk:
        """The nodes whose hashes are needed to evaluate this proof."""
        broots = Node.broots_for_len(self.log_length)
        current = self.leaf
        if not current.exists_at_length(self.log_length):
            raise LeafTooNew()

        nodes: list[Node] = []
        while current not in broots:
            nodes.append(current.sibling())
            current = current.parent()
        initial_walk_len = len(nodes)

        index = broots.index(current)
        lower = broots[index + 1 :]
        upper = broots[:index]
        nodes.extend(reversed(lower))
        nodes.extend(reversed(upper))

        return InclusionProofWalk(tuple(nodes), initial_walk_len, len(lower), len(upper))

    def evaluate_value(self, hashes: LogData, value: Any) -> Hash:
        """The root obtained when the leaf holds ``value``."""
        return self.evaluate_hash(hashes, hash_leaf(value, self.algorithm))

    def evaluate_hash(self, hashes: LogData, hash: Hash) -> Hash:
        """The root obtained when the leaf has hash ``hash``."""
        walk = self.walk()
        if not all(hashes.has_hash(node) for node in walk.nodes):
            raise InclusionHashNotKnown()

        def known(nodes: tuple[Node, ...]) -> list[tuple[Node, Hash]]:
            pairs = []
            for node in nodes:
                found = hashes.hash_for(node)
                if found is None:
                    raise InclusionHashNotKnown()
                pairs.append((node, found))
            return pairs

        current = reduce(_combine, known(walk.initial_walk()), (self.leaf, hash))
        lower = known(walk.lower_broot_walk())
        if lower:
            current = _combine(current, reduce(_combine, lower))
        current = reduce(_combine, known(walk.upper_broot_walk()), current)
        return current[1]


@dataclass(frozen=True)
class ConsistencyProof:
    """A proof that a log at ``old_length`` is a prefix of it at ``new_length``."""

    old_length: int
    new_length: int
    algorithm: str = DEFAULT_ALGORITHM

    def inclusions(self) -> list[InclusionProof]:
        """One inclusion proof per balanced root of the old log."""
        if self.old_length > self.new_length:
            raise PointsOutOfOrder()
        return [
            InclusionProof(broot, self.new_length, self.algorithm)
            for broot in Node.broots_for_len(self.old_length)
        ]

    def evaluate(self, hashes: LogData) -> tuple[Hash, Hash]:
        """Return the old root and the new root that the proof establishes."""
        old_broots: list[Hash] = []
        new_root: Hash | None = None

        for inclusion in self.inclusions():
            leaf_hash = hashes.hash_for(inclusion.leaf)
            if leaf_hash is None:
                raise ConsistencyHashNotKnown()
            old_broots.append(leaf_hash)
            try:
                found = inclusion.evaluate_hash(hashes, leaf_hash)
            except InclusionProofError as exc:
                raise InclusionFailed(exc) from exc
            if new_root is None:
                new_root = found
            elif new_root != found:
                raise DivergingRoots()

        if new_root is None:
            raise ConsistencyProofError("cannot prove consistency from an empty log")

        old_root = reduce(
            lambda new, old: hash_branch(old, new, self.algorithm),
            reversed(old_broots),
        )
        return old_root, new_root