import pytest

from arbortools.node import Node, from_level_order


def test_node_children_default_to_none():
    node = Node(7)
    assert node.value == 7
    assert node.left is None and node.right is None


def test_nodes_compare_by_identity():
    first = Node(3)
    second = Node(3)
    nodes = [first, second]
    assert nodes.index(second) == 1
    assert nodes.index(first) == 0
    assert nodes.count(first) == 1


def test_from_level_order_complete_tree():
    root = from_level_order([1, 2, 3, 4, 5])
    assert root.value == 1
    assert root.left.value == 2
    assert root.right.value == 3
    assert root.left.left.value == 4
    assert root.left.right.value == 5
    assert root.right.left is None and root.right.right is None


def test_from_level_order_with_gaps():
    root = from_level_order([10, 5, 20, None, 9, 15])
    assert root.left.left is None
    assert root.left.right.value == 9
    assert root.right.left.value == 15
    assert root.right.right is None


def test_gap_nodes_do_not_consume_children():
    root = from_level_order([1, 2, 3, 4, 5, 7, 8, None, None, 6, None, None, None, 9, 10])
    assert root.left.right.left.value == 6
    assert root.right.right.left.value == 9
    assert root.right.right.right.value == 10
    assert root.right.left.left is None


def test_from_level_order_empty_inputs():
    assert from_level_order([]) is None
    assert from_level_order([None]) is None
    assert from_level_order([None, None]) is None


def test_trailing_gaps_are_ignored():
    root = from_level_order([1, None, 2, None, None])
    assert root.left is None
    assert root.right.value == 2


def test_orphan_values_raise():
    with pytest.raises(ValueError):
        from_level_order([None, 1])
    with pytest.raises(ValueError):
        from_level_order([1, None, None, 2])


def test_accepts_any_iterable():
    root = from_level_order(iter(["a", "b"]))
    assert root.value == "a"
    assert root.left.value == "b"