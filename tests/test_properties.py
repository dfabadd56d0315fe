import copy

import pytest

from arbortools.node import Node, from_level_order
from arbortools.properties import (
    are_identical,
    are_identical_by_traversals,
    are_identical_level_order,
    count_single_valued_subtrees,
    diameter,
    has_children_sum_property,
    is_balanced,
    is_subtree,
    is_sum_tree,
    is_sum_tree_naive,
    is_symmetric,
    largest_bst_size,
    mirror,
    preorder_with_markers,
)
from arbortools.traversal import height, inorder, level_order


def unbalanced_tree():
    return from_level_order([1, 2, 3, None, None, 4, 5, None, None, None, 7])


def sum_tree():
    return from_level_order([26, 10, 3, 4, 6, 3])


def wide_tree():
    return Node(
        1,
        Node(2),
        Node(
            3,
            Node(4, Node(6, None, Node(10, Node(12))), Node(7)),
            Node(5, Node(8, Node(11, None, Node(14))), Node(9)),
        ),
    )


def test_balanced_examples():
    assert not is_balanced(unbalanced_tree())
    assert is_balanced(from_level_order([1, 2, 3, 4, 5, 6, 7]))
    assert is_balanced(None)


def test_sum_tree_example_and_failure():
    assert is_sum_tree(sum_tree())
    assert not is_sum_tree(from_level_order([26, 10, 3, 4, 6, 3, 5]))


@pytest.mark.parametrize(
    "values",
    [
        [26, 10, 3, 4, 6, 3],
        [26, 10, 3, 4, 6, 3, 5],
        [1],
        [],
        [6, 3, 3],
        [7, 3, 3],
        [18, 4, 5, 2, 2, None, 5],
    ],
)
def test_sum_tree_variants_agree(values):
    tree = from_level_order(values)
    assert is_sum_tree(tree) == is_sum_tree_naive(tree)


def test_children_sum_property():
    assert not has_children_sum_property(from_level_order([10, 8, 2, 3]))
    assert has_children_sum_property(from_level_order([10, 8, 2, 3, 5]))
    assert has_children_sum_property(None)


def test_symmetric_example():
    tree = from_level_order([1, 2, 2, 3, 4, 4, 3])
    assert is_symmetric(tree)
    assert not is_symmetric(from_level_order([1, 2, 2, 3, 4, 3, 4]))


def test_mirror_reverses_inorder_and_is_involution():
    tree = from_level_order([1, 2, 3, 4, 5, 6, 7])
    before = inorder(tree)
    original = copy.deepcopy(tree)
    mirrored = mirror(tree)
    assert mirrored is tree
    assert inorder(mirrored) == before[::-1]
    assert are_identical(mirror(mirrored), original)


def test_mirror_of_symmetric_tree_is_unchanged():
    tree = from_level_order([1, 2, 2, 3, 4, 4, 3])
    original = copy.deepcopy(tree)
    assert are_identical(mirror(tree), original)


def test_diameter_worked_example():
    assert diameter(wide_tree()) == 9


def test_diameter_invariants():
    tree = wide_tree()
    assert diameter(tree) >= height(tree)
    assert diameter(mirror(copy.deepcopy(tree))) == diameter(tree)
    assert diameter(None) == height(None)


def test_single_valued_subtree_count():
    tree = from_level_order([5, 4, 5, 4, 4, 5])
    assert count_single_valued_subtrees(tree) == 5


def test_single_valued_whole_tree_counts_every_node():
    tree = from_level_order([7, 7, 7, 7, 7, 7, 7])
    assert count_single_valued_subtrees(tree) == len(inorder(tree))


def test_identical_copies():
    tree = wide_tree()
    other = copy.deepcopy(tree)
    assert are_identical(tree, other)
    assert are_identical_level_order(tree, other)
    assert are_identical_by_traversals(tree, other)
    assert preorder_with_markers(tree) == preorder_with_markers(other)


def test_different_trees_detected():
    first = from_level_order([1, 2, 3])
    second = from_level_order([1, 2, 4])
    assert not are_identical(first, second)
    assert not are_identical_level_order(first, second)
    assert not are_identical_by_traversals(first, second)
    assert preorder_with_markers(first) != preorder_with_markers(second)


def test_level_order_comparison_ignores_sides():
    left_child = Node(1, Node(2))
    right_child = Node(1, None, Node(2))
    assert are_identical_level_order(left_child, right_child)
    assert not are_identical(left_child, right_child)
    assert preorder_with_markers(left_child) != preorder_with_markers(right_child)


def test_empty_trees_compare():
    assert are_identical(None, None)
    assert are_identical_level_order(None, None)
    assert not are_identical_level_order(Node(1), None)
    assert not are_identical(None, Node(1))


def test_preorder_with_markers_length_invariant():
    tree = wide_tree()
    markers = preorder_with_markers(tree)
    count = len(inorder(tree))
    assert len(markers) == 2 * count + 1
    assert markers.count(None) == count + 1
    assert preorder_with_markers(None) == []


def test_is_subtree():
    tree = from_level_order([3, 4, 5, 1, 2])
    assert is_subtree(tree, from_level_order([4, 1, 2]))
    assert not is_subtree(tree, from_level_order([4, 1]))
    assert not is_subtree(None, Node(1))
    assert is_subtree(tree, copy.deepcopy(tree))


def test_largest_bst_worked_example():
    tree = from_level_order([50, 30, 60, 5, 20, 45, 70, None, None, None, None, None, None, 65, 80])
    assert largest_bst_size(tree) == 5


def test_largest_bst_of_whole_bst_is_node_count():
    tree = from_level_order([8, 4, 12, 2, 6, 10, 14])
    assert largest_bst_size(tree) == len(level_order(tree)[0] + level_order(tree)[1] + level_order(tree)[2])
    assert largest_bst_size(None) == len(inorder(None))