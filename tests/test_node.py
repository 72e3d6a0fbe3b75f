import pytest

from wargproof.log.node import Node, Side


@pytest.mark.parametrize(
    "index,height",
    [
        (0, 0), (1, 1), (2, 0), (3, 2), (4, 0), (5, 1), (6, 0), (7, 3),
        (8, 0), (9, 1), (10, 0), (11, 2), (12, 0), (13, 1), (14, 0),
    ],
)
def test_node_height(index, height):
    assert Node(index).height() == height


L, R = Side.LEFT, Side.RIGHT


@pytest.mark.parametrize(
    "index,side",
    [
        (0, L), (1, L), (2, R), (3, L), (4, L), (5, R), (6, R), (7, L),
        (8, L), (9, L), (10, R), (11, R), (12, L), (13, R), (14, R),
    ],
)
def test_node_side(index, side):
    assert Node(index).side() is side


def test_node_siblings():
    right = {0: 2, 1: 5, 3: 11, 4: 6, 7: 23, 8: 10, 9: 13, 12: 14}
    left = {2: 0, 5: 1, 6: 4, 10: 8, 11: 3, 13: 9, 14: 12}
    for index, expected in right.items():
        assert Node(index).right_sibling() == Node(expected)
        assert Node(index).sibling() == Node(expected)
    for index, expected in left.items():
        assert Node(index).left_sibling() == Node(expected)
        assert Node(index).sibling() == Node(expected)


def test_wrong_sibling_raises():
    with pytest.raises(ValueError):
        Node(0).left_sibling()
    with pytest.raises(ValueError):
        Node(2).right_sibling()


def test_node_parents():
    parents = {
        0: 1, 1: 3, 2: 1, 3: 7, 4: 5, 5: 3, 6: 5, 7: 15,
        8: 9, 9: 11, 10: 9, 11: 7, 12: 13, 13: 11, 14: 13,
    }
    for index, expected in parents.items():
        assert Node(index).parent() == Node(expected)


def test_node_children():
    cases = {1: (0, 2), 3: (1, 5), 5: (4, 6), 7: (3, 11), 9: (8, 10), 11: (9, 13), 13: (12, 14)}
    for index, (lhs, rhs) in cases.items():
        assert Node(index).children() == (Node(lhs), Node(rhs))


def test_leaf_has_no_children():
    with pytest.raises(ValueError):
        Node(4).children()


def test_rightmost_descendent():
    cases = {1: 2, 3: 6, 5: 6, 7: 14, 9: 10, 11: 14, 13: 14}
    for index, expected in cases.items():
        assert Node(index).rightmost_descendent() == Node(expected)


def test_leftmost_descendent_of_first_nodes_is_first_leaf():
    for height in range(6):
        assert Node.first_node_with_height(height).leftmost_descendent() == Node(0)
    assert Node(11).leftmost_descendent() == Node(8)


def test_node_existence():
    cases = [(1, 2), (3, 4), (5, 4), (7, 8), (9, 6), (11, 8), (13, 8)]
    for index, min_len in cases:
        node = Node(index)
        for length in range(9):
            assert node.exists_at_length(length) == (length >= min_len), (index, length)


def test_first_nodes():
    first_0 = Node.first_node_with_height(0)
    assert first_0 == Node(0)
    assert first_0.next_node_with_height(0) == Node(2)

    first_1 = Node.first_node_with_height(1)
    assert first_1 == Node(1)
    assert first_1.next_node_with_height(0) == Node(4)
    assert first_1.next_node_with_height(1) == Node(5)

    first_2 = Node.first_node_with_height(2)
    assert first_2 == Node(3)
    assert first_2.next_node_with_height(0) == Node(8)
    assert first_2.next_node_with_height(1) == Node(9)
    assert first_2.next_node_with_height(2) == Node(11)

    first_3 = Node.first_node_with_height(3)
    assert first_3 == Node(7)
    assert first_3.next_node_with_height(0) == Node(16)
    assert first_3.next_node_with_height(1) == Node(17)
    assert first_3.next_node_with_height(2) == Node(19)
    assert first_3.next_node_with_height(3) == Node(23)

    assert Node.first_node_with_height(4) == Node(15)


def test_next_node_taller_raises():
    with pytest.raises(ValueError):
        Node(0).next_node_with_height(1)


def test_broots():
    assert Node.broots_for_len(0) == []
    assert Node.broots_for_len(1) == [Node(0)]
    assert Node.broots_for_len(2) == [Node(1)]
    assert Node.broots_for_len(3) == [Node(1), Node(4)]
    assert Node.broots_for_len(4) == [Node(3)]
    assert Node.broots_for_len(5) == [Node(3), Node(8)]
    assert Node.broots_for_len(6) == [Node(3), Node(9)]
    assert Node.broots_for_len(7) == [Node(3), Node(9), Node(12)]
    assert Node.broots_for_len(8) == [Node(7)]


def test_broots_negative_length():
    with pytest.raises(ValueError):
        Node.broots_for_len(-1)


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        Node(-1)


def test_nodes_order_by_index():
    assert sorted([Node(5), Node(1), Node(3)]) == [Node(1), Node(3), Node(5)]