import pytest

from wargproof.log.node import Node
from wargproof.log.sparse_data import SparseLogData
from wargproof.log.vec_log import VecLog

ITEMS = [100, 102, 104, 106, 108, 110, 112]


@pytest.fixture
def log():
    vec_log = VecLog()
    for item in ITEMS:
        vec_log.push(item)
    return vec_log


def test_lookup_of_present_and_missing_nodes(log):
    nodes = [Node(0), Node(3), Node(9)]
    sparse = SparseLogData([(node, log.hash_for(node)) for node in nodes])
    for node in nodes:
        assert sparse.has_hash(node)
        assert sparse.hash_for(node) == log.hash_for(node)
    assert not sparse.has_hash(Node(2))
    assert sparse.hash_for(Node(2)) is None
    assert sparse.hash_for(Node(100)) is None


def test_unsorted_entries_are_found(log):
    nodes = [Node(12), Node(1), Node(4)]
    sparse = SparseLogData([(node, log.hash_for(node)) for node in nodes])
    assert len(sparse) == len(nodes)
    for node in nodes:
        assert sparse.hash_for(node) == log.hash_for(node)


def test_empty_data_has_nothing():
    sparse = SparseLogData()
    assert len(sparse) == 0
    assert not sparse.has_hash(Node(0))
    assert sparse.hash_for(Node(0)) is None


def test_inclusion_proof_evaluates_on_sparse_data(log):
    proof = log.prove_inclusion(Node(6), len(ITEMS))
    walk = proof.walk()
    sparse = SparseLogData([(node, log.hash_for(node)) for node in walk.nodes])
    assert proof.evaluate_value(sparse, 106) == log.checkpoint().root


def test_prove_inclusion_uses_algorithm():
    sparse = SparseLogData(algorithm="sha512")
    proof = sparse.prove_inclusion(Node(0), 1)
    assert proof.algorithm == "sha512"
    assert proof.leaf == Node(0)
    assert proof.log_length == 1