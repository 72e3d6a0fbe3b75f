"""Protocol-buffer wire messages for log and map proof bundles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .digest import DEFAULT_ALGORITHM, Hash

_VARINT = 0
_I64 = 1
_LEN = 2
_I32 = 5

_UINT32_MAX = 0xFFFFFFFF
_UINT64_MASK = (1 << 64) - 1


class DecodeError(ValueError):
    """Raised when bytes are not a valid encoding of the expected message."""


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while True:
        bits = value & 0x7F
        value >>= 7
        if value:
            out.append(bits | 0x80)
        else:
            out.append(bits)
            return bytes(out)


def _key(number: int, wire: int) -> bytes:
    return _encode_varint(number << 3 | wire)


def _len_field(number: int, payload: bytes) -> bytes:
    return _key(number, _LEN) + _encode_varint(len(payload)) + payload


def _check_uint32(name: str, value: int) -> int:
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"{name} {value} does not fit in an unsigned 32-bit integer")
    return value


def _uint32_field(number: int, value: int, name: str) -> bytes:
    _check_uint32(name, value)
    return _key(number, _VARINT) + _encode_varint(value) if value else b""


def _packed_uint32(number: int, values: list[int], name: str) -> bytes:
    if not values:
        return b""
    payload = b"".join(_encode_varint(_check_uint32(name, v)) for v in values)
    return _len_field(number, payload)


def _read_varint(data: bytes, pos: int) -> tuple[int, int]:
    result = 0
    for shift in range(0, 70, 7):
        if pos >= len(data):
            raise DecodeError("truncated varint")
        byte = data[pos]
        pos += 1
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return result & _UINT64_MASK, pos
    raise DecodeError("varint is too long")


def _fields(data: bytes) -> Iterator[tuple[int, int, int | bytes]]:
    pos = 0
    while pos < len(data):
        key, pos = _read_varint(data, pos)
        number, wire = key >> 3, key & 7
        if number == 0:
            raise DecodeError("field number zero is invalid")
        value: int | bytes
        if wire == _VARINT:
            value, pos = _read_varint(data, pos)
        elif wire in (_I64, _I32):
            width = 8 if wire == _I64 else 4
            if pos + width > len(data):
                raise DecodeError("truncated fixed-width field")
            value = int.from_bytes(data[pos : pos + width], "little")
            pos += width
        elif wire == _LEN:
            length, pos = _read_varint(data, pos)
            end = pos + length
            if end > len(data):
                raise DecodeError("length-delimited field overruns the buffer")
            value = bytes(data[pos:end])
            pos = end
        else:
            raise DecodeError(f"unsupported wire type {wire}")
        yield number, wire, value


def _expect(number: int, wire: int, expected: int) -> None:
    if wire != expected:
        raise DecodeError(f"field {number} has wire type {wire}, expected {expected}")


def _uint32s(number: int, wire: int, value: int | bytes) -> list[int]:
    if wire == _VARINT:
        assert isinstance(value, int)
        return [value & _UINT32_MAX]
    if wire == _LEN:
        assert isinstance(value, bytes)
        values = []
        pos = 0
        while pos < len(value):
            item, pos = _read_varint(value, pos)
            values.append(item & _UINT32_MAX)
        return values
    raise DecodeError(f"field {number} has wire type {wire}, expected a varint")


@dataclass
class OptionalHash:
    """A digest that may be absent."""

    hash: bytes | None = None

    @classmethod
    def from_hash(cls, hash: Hash | None) -> OptionalHash:
        return cls(None if hash is None else hash.digest)

    def to_hash(self, algorithm: str = DEFAULT_ALGORITHM) -> Hash | None:
        if self.hash is None:
            return None
        return Hash.from_bytes(self.hash, algorithm)

    def _encode(self) -> bytes:
        return b"" if self.hash is None else _len_field(1, self.hash)

    @classmethod
    def _decode(cls, data: bytes) -> OptionalHash:
        message = cls()
        for number, wire, value in _fields(data):
            if number == 1:
                _expect(number, wire, _LEN)
                message.hash = value  # type: ignore[assignment]
        return message


@dataclass
class HashEntry:
    """A log node index paired with its digest bytes."""

    index: int = 0
    hash: bytes = b""

    def _encode(self) -> bytes:
        out = _uint32_field(1, self.index, "index")
        if self.hash:
            out += _len_field(2, self.hash)
        return out

    @classmethod
    def _decode(cls, data: bytes) -> HashEntry:
        message = cls()
        for number, wire, value in _fields(data):
            if number == 1:
                _expect(number, wire, _VARINT)
                message.index = value & _UINT32_MAX  # type: ignore[operator]
            elif number == 2:
                _expect(number, wire, _LEN)
                message.hash = value  # type: ignore[assignment]
        return message


@dataclass
class LogProofBundleMessage:
    """Wire form of a bundle of log consistency and inclusion proofs."""

    log_length: int = 0
    consistent_lengths: list[int] = field(default_factory=list)
    included_indices: list[int] = field(default_factory=list)
    hashes: list[HashEntry] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        parts = [
            _uint32_field(1, self.log_length, "log_length"),
            _packed_uint32(2, self.consistent_lengths, "consistent length"),
            _packed_uint32(3, self.included_indices, "included index"),
        ]
        parts.extend(_len_field(4, entry._encode()) for entry in self.hashes)
        return b"".join(parts)

    @classmethod
    def from_bytes(cls, data: bytes) -> LogProofBundleMessage:
        message = cls()
        for number, wire, value in _fields(bytes(data)):
            if number == 1:
                _expect(number, wire, _VARINT)
                message.log_length = value & _UINT32_MAX  # type: ignore[operator]
            elif number == 2:
                message.consistent_lengths.extend(_uint32s(number, wire, value))
            elif number == 3:
                message.included_indices.extend(_uint32s(number, wire, value))
            elif number == 4:
                _expect(number, wire, _LEN)
                message.hashes.append(HashEntry._decode(value))  # type: ignore[arg-type]
        return message


@dataclass
class MapInclusionProofMessage:
    """Wire form of one map inclusion proof: its list of optional peers."""

    hashes: list[OptionalHash] = field(default_factory=list)

    def _encode(self) -> bytes:
        return b"".join(_len_field(1, peer._encode()) for peer in self.hashes)

    @classmethod
    def _decode(cls, data: bytes) -> MapInclusionProofMessage:
        message = cls()
        for number, wire, value in _fields(data):
            if number == 1:
                _expect(number, wire, _LEN)
                message.hashes.append(OptionalHash._decode(value))  # type: ignore[arg-type]
        return message


@dataclass
class MapProofBundleMessage:
    """Wire form of a bundle of map inclusion proofs."""

    proofs: list[MapInclusionProofMessage] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return b"".join(_len_field(1, proof._encode()) for proof in self.proofs)

    @classmethod
    def from_bytes(cls, data: bytes) -> MapProofBundleMessage:
        message = cls()
        for number, wire, value in _fields(bytes(data)):
            if number == 1:
                _expect(number, wire, _LEN)
                message.proofs.append(
                    MapInclusionProofMessage._decode(value)  # type: ignore[arg-type]
                )
        return message