"""Structural checks and measurements on binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import zip_longest
from typing import Any

from .node import Node
from .traversal import inorder, postorder, preorder


def _is_leaf(node: Node) -> bool:
    return node.left is None and node.right is None


def _balanced_height(node: Node | None) -> int | None:
    """Height of a balanced subtree, or ``None`` once an imbalance is found."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Node | None) -> bool:
    """True when every node's subtree heights differ by at most one."""
    return _balanced_height(root) is not None


def _sum_if_sum_tree(node: Node | None) -> Any | None:
    """Total of a subtree that is a sum tree, or ``None`` when it is not."""
    if node is None:
        return 0
    if _is_leaf(node):
        return node.value
    left = _sum_if_sum_tree(node.left)
    if left is None:
        return None
    right = _sum_if_sum_tree(node.right)
    if right is None:
        return None
    if left + right != node.value:
        return None
    return left + right + node.value


def is_sum_tree(root: Node | None) -> bool:
    """True when each inner node equals the sum of all values below it.

    Leaves and the empty tree qualify.  Runs in a single post-order pass.
    """
    return _sum_if_sum_tree(root) is not None


def _subtree_total(node: Node | None) -> Any:
    if node is None:
        return 0
    return _subtree_total(node.left) + node.value + _subtree_total(node.right)


def is_sum_tree_naive(root: Node | None) -> bool:
    """Same check as :func:`is_sum_tree`, recomputing subtree sums at each node."""
    if root is None or _is_leaf(root):
        return True
    if _subtree_total(root.left) + _subtree_total(root.right) != root.value:
        return False
    return is_sum_tree_naive(root.left) and is_sum_tree_naive(root.right)


def has_children_sum_property(root: Node | None) -> bool:
    """True when each inner node equals the sum of its direct children's values."""
    if root is None or _is_leaf(root):
        return True
    children = [child.value for child in (root.left, root.right) if child is not None]
    if sum(children) != root.value:
        return False
    return has_children_sum_property(root.left) and has_children_sum_property(root.right)


def _mirrors(first: Node | None, second: Node | None) -> bool:
    if first is None and second is None:
        return True
    if first is None or second is None or first.value != second.value:
        return False
    return _mirrors(first.left, second.right) and _mirrors(first.right, second.left)


def is_symmetric(root: Node | None) -> bool:
    """True when the tree is its own mirror image."""
    return _mirrors(root, root)


def mirror(root: Node | None) -> Node | None:
    """Swap left and right children throughout the tree, in place; returns the root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        mirror(root.left)
        mirror(root.right)
    return root


def diameter(root: Node | None) -> int:
    """Number of nodes on the longest path between any two nodes; 0 when empty."""
    best = 0

    def height(node: Node | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right + 1)
        return max(left, right) + 1

    height(root)
    return best


def count_single_valued_subtrees(root: Node | None) -> int:
    """Number of subtrees whose nodes all carry the same value."""
    count = 0

    def uniform(node: Node | None) -> bool:
        nonlocal count
        if node is None:
            return True
        left = uniform(node.left)
        right = uniform(node.right)
        if not (left and right):
            return False
        for child in (node.left, node.right):
            if child is not None and child.value != node.value:
                return False
        count += 1
        return True

    uniform(root)
    return count


def are_identical(first: Node | None, second: Node | None) -> bool:
    """True when both trees have the same shape and the same values."""
    if first is None and second is None:
        return True
    if first is None or second is None or first.value != second.value:
        return False
    return are_identical(first.left, second.left) and are_identical(first.right, second.right)


def _breadth_first(root: Node) -> Iterator[Any]:
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def are_identical_level_order(first: Node | None, second: Node | None) -> bool:
    """Compare both trees' values in breadth-first order.

    Only the sequence of values is compared, so trees whose nodes sit on
    different sides but read the same level by level are reported equal.
    """
    if first is None or second is None:
        return first is None and second is None
    missing = object()
    return all(
        a == b
        for a, b in zip_longest(_breadth_first(first), _breadth_first(second), fillvalue=missing)
    )


def are_identical_by_traversals(first: Node | None, second: Node | None) -> bool:
    """True when in-order, pre-order and post-order listings all agree."""
    return (
        inorder(first) == inorder(second)
        and preorder(first) == preorder(second)
        and postorder(first) == postorder(second)
    )


def preorder_with_markers(root: Node | None) -> list[Any]:
    """Pre-order values with ``None`` standing for each missing child.

    The listing determines the tree uniquely; an empty tree gives ``[]``.
    """
    result: list[Any] = []

    def visit(node: Node) -> None:
        result.append(node.value)
        for child in (node.left, node.right):
            if child is None:
                result.append(None)
            else:
                visit(child)

    if root is not None:
        visit(root)
    return result


def is_subtree(root: Node | None, candidate: Node | None) -> bool:
    """True when some node of ``root`` heads a subtree identical to ``candidate``."""
    if root is None:
        return False
    if are_identical(root, candidate):
        return True
    return is_subtree(root.left, candidate) or is_subtree(root.right, candidate)


def largest_bst_size(root: Node | None) -> int:
    """Node count of the largest subtree that is a binary search tree."""

    def summary(node: Node | None) -> tuple[bool, Any, Any, int]:
        # (is_bst, minimum, maximum, best size found); None bounds mean "empty".
        if node is None:
            return True, None, None, 0
        if _is_leaf(node):
            return True, node.value, node.value, 1
        left_ok, left_min, left_max, left_best = summary(node.left)
        right_ok, right_min, right_max, right_best = summary(node.right)
        if (
            left_ok
            and right_ok
            and (left_max is None or left_max < node.value)
            and (right_min is None or right_min > node.value)
        ):
            low = node.value if left_min is None else left_min
            high = node.value if right_max is None else right_max
            return True, low, high, left_best + right_best + 1
        return False, None, None, max(left_best, right_best)

    return summary(root)[3]