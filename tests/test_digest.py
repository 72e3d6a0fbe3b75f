import hashlib

import pytest

from wargproof.digest import Hash, visit_bytes


def test_visit_bytes_scalars():
    assert visit_bytes(None) == b""
    assert visit_bytes(()) == b""
    assert visit_bytes(0) == b"\x00"
    assert visit_bytes(255) == b"\xff"
    assert visit_bytes("foo") == b"foo"
    assert visit_bytes(b"bar") == b"bar"
    assert visit_bytes(bytearray(b"baz")) == b"baz"


def test_visit_bytes_tuple_concatenates():
    inner = Hash.of("foo")
    assert visit_bytes((1, "ab", inner)) == b"\x01ab" + inner.digest
    assert visit_bytes([0, [1, 2]]) == b"\x00\x01\x02"


def test_visit_bytes_rejects_large_int():
    with pytest.raises(ValueError):
        visit_bytes(256)
    with pytest.raises(ValueError):
        visit_bytes(-1)


def test_visit_bytes_rejects_unknown_type():
    with pytest.raises(TypeError):
        visit_bytes(object())
    with pytest.raises(TypeError):
        visit_bytes(True)


def test_empty_hash_is_known_constant():
    assert Hash.of(()).hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_hash_matches_hashlib():
    assert Hash.of("foo").digest == hashlib.sha256(b"foo").digest()
    assert Hash.of((0, "x")).digest == hashlib.sha256(b"\x00x").digest()


def test_equal_encodings_give_equal_hashes():
    assert Hash.of("foo") == Hash.of(b"foo")
    assert Hash.of(("f", "oo")) == Hash.of("foo")
    assert Hash.of("foo") != Hash.of("bar")


def test_len_and_str():
    h = Hash.of("foo")
    assert len(h) == 32
    assert str(h) == f"sha256:{h.digest.hex()}"
    assert bytes(h) == h.digest


def test_other_algorithm():
    h = Hash.of("foo", "sha512")
    assert len(h) == hashlib.new("sha512").digest_size
    assert h.algorithm == "sha512"
    assert h != Hash.of("foo")


def test_from_bytes_round_trip():
    h = Hash.of("foo")
    assert Hash.from_bytes(h.digest) == h


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        Hash.from_bytes(b"\x00" * 31)


def test_unsupported_algorithm():
    with pytest.raises(ValueError):
        Hash.of("foo", "no-such-digest")


def test_hashes_are_ordered_and_hashable():
    a, b = Hash.of("a"), Hash.of("b")
    ordered = sorted([b, a])
    assert ordered[0] <= ordered[1]
    assert len({a, b, Hash.of("a")}) == 2