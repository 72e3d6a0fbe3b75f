"""Inclusion proofs for entries of a sparse Merkle map."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain, repeat
from typing import Any

from ..digest import DEFAULT_ALGORITHM, Hash
from .hashes import hash_branch, hash_leaf
from .path import Path, Side


@dataclass
class MapProof:
    """The peers from a leaf up to the root, bottom first.

    Leading absent peers at the bottom of the tree are omitted, since the
    full length of a proof is fixed by the digest size.
    """

    peers: list[Hash | None] = field(default_factory=list)
    algorithm: str = DEFAULT_ALGORITHM

    def push(self, peer: Hash | None) -> None:
        """Append the next peer up the tree, dropping leading absent peers."""
        if self.peers or peer is not None:
            self.peers.append(peer)

    def __len__(self) -> int:
        return len(self.peers)

    def evaluate(self, key: Any, value: Any) -> Hash:
        """The root obtained when ``key`` maps to ``value``."""
        path = Path(key, self.algorithm)
        missing = len(path) - len(self.peers)
        if missing < 0:
            raise ValueError(
                f"proof has {len(self.peers)} peers but the path has only {len(path)} steps"
            )
        peers = chain(repeat(None, missing), self.peers)

        digest = hash_leaf(key, value, self.algorithm)
        for side, peer in zip(reversed(path), peers):
            if side is Side.LEFT:
                digest = hash_branch(digest, peer, self.algorithm)
            else:
                digest = hash_branch(peer, digest, self.algorithm)
        return digest