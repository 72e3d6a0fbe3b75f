"""Bundles of map inclusion proofs and their wire encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..digest import DEFAULT_ALGORITHM
from ..protowire import MapInclusionProofMessage, MapProofBundleMessage, OptionalHash
from .proof import MapProof


@dataclass(frozen=True)
class MapProofBundle:
    """A collection of map inclusion proofs."""

    proofs: tuple[MapProof, ...]
    algorithm: str = DEFAULT_ALGORITHM

    @classmethod
    def bundle(cls, proofs: Iterable[MapProof]) -> MapProofBundle:
        """Bundle inclusion proofs together."""
        collected = tuple(proofs)
        algorithm = collected[0].algorithm if collected else DEFAULT_ALGORITHM
        return cls(collected, algorithm)

    def unbundle(self) -> list[MapProof]:
        """Split the bundle into its inclusion proofs."""
        return list(self.proofs)

    def encode(self) -> bytes:
        """The protocol-buffer encoding of the bundle."""
        return MapProofBundleMessage(
            proofs=[
                MapInclusionProofMessage(
                    hashes=[OptionalHash.from_hash(peer) for peer in proof.peers]
                )
                for proof in self.proofs
            ]
        ).to_bytes()

    @classmethod
    def decode(cls, data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> MapProofBundle:
        """Parse a bundle from its protocol-buffer encoding."""
        message = MapProofBundleMessage.from_bytes(data)
        proofs = tuple(
            MapProof([peer.to_hash(algorithm) for peer in proof.hashes], algorithm)
            for proof in message.proofs
        )
        return cls(proofs, algorithm)