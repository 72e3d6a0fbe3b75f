"""Bundles of log proofs together with the hashes needed to check them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..digest import DEFAULT_ALGORITHM, Hash
from ..protowire import HashEntry, LogProofBundleMessage
from .node import Node
from .proof import ConsistencyProof, InclusionProof, LogData
from .sparse_data import SparseLogData


@dataclass(frozen=True)
class LogProofBundle:
    """Consistency and inclusion proofs against one log length, with their hashes."""

    log_length: int
    consistent_lengths: tuple[int, ...]
    included_indices: tuple[Node, ...]
    hashes: tuple[tuple[Node, Hash], ...]
    algorithm: str = DEFAULT_ALGORITHM

    @classmethod
    def bundle(
        cls,
        consistency_proofs: Iterable[ConsistencyProof],
        inclusion_proofs: Iterable[InclusionProof],
        data: LogData,
    ) -> LogProofBundle:
        """Bundle proofs that all target the same log length."""
        log_length: int | None = None
        needed: set[Node] = set()

        def check_length(proof: InclusionProof) -> None:
            nonlocal log_length
            if log_length is None:
                log_length = proof.log_length
            elif log_length != proof.log_length:
                raise ValueError("Bundle must contain proofs for the same root")

        consistent_lengths = []
        for consistency in consistency_proofs:
            consistent_lengths.append(consistency.old_length)
            for inclusion in consistency.inclusions():
                check_length(inclusion)
                needed.update(inclusion.walk().nodes)
                # The old root is rebuilt from the leaf of each inclusion proof.
                needed.add(inclusion.leaf)

        included_indices = []
        for inclusion in inclusion_proofs:
            included_indices.append(inclusion.leaf)
            check_length(inclusion)
            needed.update(inclusion.walk().nodes)

        hashes = []
        for node in sorted(needed):
            found = data.hash_for(node)
            if found is None:
                raise ValueError("Necessary hash not found")
            hashes.append((node, found))

        if log_length is None:
            raise ValueError("A bundle can not be made from no proofs")

        return cls(
            log_length,
            tuple(consistent_lengths),
            tuple(included_indices),
            tuple(hashes),
            data.algorithm,
        )

    def unbundle(
        self,
    ) -> tuple[SparseLogData, list[ConsistencyProof], list[InclusionProof]]:
        """Split the bundle into its hash data and its proofs."""
        data = SparseLogData(self.hashes, self.algorithm)
        consistency = [
            ConsistencyProof(length, self.log_length, self.algorithm)
            for length in self.consistent_lengths
        ]
        inclusion = [
            InclusionProof(node, self.log_length, self.algorithm)
            for node in self.included_indices
        ]
        return data, consistency, inclusion

    def encode(self) -> bytes:
        """The protocol-buffer encoding of the bundle."""
        return LogProofBundleMessage(
            log_length=self.log_length,
            consistent_lengths=list(self.consistent_lengths),
            included_indices=[node.index for node in self.included_indices],
            hashes=[HashEntry(node.index, digest.digest) for node, digest in self.hashes],
        ).to_bytes()

    @classmethod
    def decode(cls, data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> LogProofBundle:
        """Parse a bundle from its protocol-buffer encoding."""
        message = LogProofBundleMessage.from_bytes(data)
        return cls(
            message.log_length,
            tuple(message.consistent_lengths),
            tuple(Node(index) for index in message.included_indices),
            tuple(
                (Node(entry.index), Hash.from_bytes(entry.hash, algorithm))
                for entry in message.hashes
            ),
            algorithm,
        )