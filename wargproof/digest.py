"""Content digests and the canonical byte encoding they are computed over."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any

DEFAULT_ALGORITHM = "sha256"


def _digest_size(algorithm: str) -> int:
    try:
        hasher = hashlib.new(algorithm)
    except (ValueError, TypeError) as exc:
        raise ValueError(f"unsupported hash algorithm `{algorithm}`") from exc
    if hasher.digest_size == 0:
        raise ValueError(f"unsupported hash algorithm `{algorithm}`")
    return hasher.digest_size


def visit_bytes(value: Any) -> bytes:
    """Return the canonical byte sequence that a value contributes to a digest.

    ``None`` and empty tuples contribute nothing, integers contribute a single
    byte, strings their UTF-8 encoding, byte strings themselves, hashes their
    digest bytes, and tuples or lists the concatenation of their elements.
    """
    if value is None:
        return b""
    if isinstance(value, Hash):
        return value.digest
    if isinstance(value, bool):
        raise TypeError("booleans have no byte encoding")
    if isinstance(value, int):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"integer {value} does not fit in a single byte")
        return bytes((value,))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (tuple, list)):
        return b"".join(visit_bytes(item) for item in value)
    raise TypeError(f"cannot encode value of type {type(value).__name__}")


@dataclass(frozen=True, order=True)
class Hash:
    """A digest together with the name of the algorithm that produced it."""

    algorithm: str
    digest: bytes

    def __post_init__(self) -> None:
        size = _digest_size(self.algorithm)
        if not isinstance(self.digest, bytes):
            object.__setattr__(self, "digest", bytes(self.digest))
        if len(self.digest) != size:
            raise ValueError(
                f"{self.algorithm} digest must be {size} bytes, got {len(self.digest)}"
            )

    @classmethod
    def of(cls, value: Any, algorithm: str = DEFAULT_ALGORITHM) -> Hash:
        """Hash the canonical byte encoding of ``value``."""
        _digest_size(algorithm)
        hasher = hashlib.new(algorithm)
        hasher.update(visit_bytes(value))
        return cls(algorithm, hasher.digest())

    @classmethod
    def from_bytes(cls, data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> Hash:
        """Wrap raw digest bytes, checking their length against the algorithm."""
        return cls(algorithm, bytes(data))

    def __len__(self) -> int:
        return len(self.digest)

    def __bytes__(self) -> bytes:
        return self.digest

    def hex(self) -> str:
        return self.digest.hex()

    def __str__(self) -> str:
        return f"{self.algorithm}:{self.digest.hex()}"