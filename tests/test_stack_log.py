from wargproof.log.core import hash_empty, hash_leaf
from wargproof.log.node import Node
from wargproof.log.stack_log import StackLog
from wargproof.log.vec_log import VecLog

DATA = [
    "93", "67", "30", "37", "23", "75", "57", "89", "76", "42", "9", "14", "40",
    "59", "26", "66", "77", "38", "47", "34", "8", "81", "101", "102", "103",
]


def test_matches_vec_log():
    vec_log = VecLog()
    stack_log = StackLog()
    for leaf in DATA:
        vec_log.push(leaf)
        stack_log.push(leaf)
        assert vec_log.checkpoint() == stack_log.checkpoint()


def test_push_returns_leaf_nodes():
    log = StackLog()
    nodes = [log.push(item) for item in DATA[:5]]
    assert nodes == [Node(0), Node(2), Node(4), Node(6), Node(8)]


def test_length_and_is_empty():
    log = StackLog()
    assert log.is_empty()
    assert log.length() == 0
    log.push("x")
    log.push("y")
    assert not log.is_empty()
    assert log.length() == 2


def test_empty_checkpoint():
    checkpoint = StackLog().checkpoint()
    assert checkpoint.root == hash_empty()
    assert checkpoint.length == 0


def test_single_entry_root_is_leaf_hash():
    log = StackLog()
    log.push("only")
    assert log.checkpoint().root == hash_leaf("only")


def test_matches_vec_log_with_bytes_and_other_algorithm():
    vec_log = VecLog("sha512")
    stack_log = StackLog("sha512")
    for i in range(130):
        item = i.to_bytes(32, "big")
        vec_log.push(item)
        stack_log.push(item)
    assert stack_log.checkpoint() == vec_log.checkpoint()
    assert stack_log.checkpoint().root.algorithm == "sha512"