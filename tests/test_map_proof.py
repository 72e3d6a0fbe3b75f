import pytest

from wargproof.digest import Hash
from wargproof.map.hashes import hash_leaf
from wargproof.map.path import Path
from wargproof.map.proof import MapProof
from wargproof.map.tree import Fork, insert_node, prove_node


def build(items):
    node = Fork()
    for key, value in items:
        node, _ = insert_node(node, Path(key), hash_leaf(key, value))
    return node


def test_proof_evaluate():
    tree = build([("foo", b"bar"), ("baz", b"bat")])
    root = tree.hash()
    proof = prove_node(tree, Path("baz"))
    assert proof.evaluate("baz", b"bat") == root
    assert proof.evaluate("other", b"bar") != root


def test_single_entry_proof_is_empty_and_evaluates():
    tree = build([("foo", "bar")])
    proof = prove_node(tree, Path("foo"))
    assert len(proof) == 0
    assert proof.evaluate("foo", "bar") == tree.hash()
    assert proof.evaluate("foo", "qux") != tree.hash()


def test_push_drops_leading_absent_peers():
    proof = MapProof()
    proof.push(None)
    proof.push(None)
    assert len(proof) == 0
    peer = Hash.of("peer")
    proof.push(peer)
    proof.push(None)
    assert proof.peers == [peer, None]


def test_too_many_peers_is_rejected():
    proof = MapProof([None] * 257)
    with pytest.raises(ValueError):
        proof.evaluate("foo", "bar")


def test_proofs_for_every_entry_agree_on_root():
    items = [(f"key{i}", f"value{i}") for i in range(8)]
    tree = build(items)
    for key, value in items:
        assert prove_node(tree, Path(key)).evaluate(key, value) == tree.hash()