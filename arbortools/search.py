"""Searching binary trees: ancestors, paths, distances and order statistics."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from itertools import islice, pairwise
from math import gcd
from typing import Any

from .node import Node
from .traversal import level_order


def contains(root: Node | None, value: Any) -> bool:
    """True when some node of the tree carries ``value``."""
    if root is None:
        return False
    return root.value == value or contains(root.left, value) or contains(root.right, value)


def _lca(node: Node | None, first: Any, second: Any) -> Node | None:
    if node is None:
        return None
    if node.value == first or node.value == second:
        return node
    left = _lca(node.left, first, second)
    right = _lca(node.right, first, second)
    if left is not None and right is not None:
        return node
    return left if left is not None else right


def _require_present(root: Node | None, *values: Any) -> None:
    for value in values:
        if not contains(root, value):
            raise ValueError(f"value {value!r} is not in the tree")


def lowest_common_ancestor(root: Node | None, first: Any, second: Any) -> Node:
    """The deepest node having both values in its subtree, found in one pass.

    Raises ``ValueError`` when either value is absent.
    """
    _require_present(root, first, second)
    ancestor = _lca(root, first, second)
    assert ancestor is not None
    return ancestor


def find_path(root: Node | None, value: Any) -> list[Any]:
    """Values from the root down to the first node holding ``value``; ``[]`` if absent."""
    path: list[Any] = []

    def walk(node: Node | None) -> bool:
        if node is None:
            return False
        path.append(node.value)
        if node.value == value or walk(node.left) or walk(node.right):
            return True
        path.pop()
        return False

    walk(root)
    return path


def lca_by_paths(root: Node | None, first: Any, second: Any) -> Any:
    """Value of the lowest common ancestor, found by comparing root paths.

    Raises ``ValueError`` when either value is absent.
    """
    first_path = find_path(root, first)
    second_path = find_path(root, second)
    if not first_path or not second_path:
        raise ValueError("both values must be present in the tree")
    common = None
    for a, b in zip(first_path, second_path):
        if a != b:
            break
        common = a
    return common


def depth_of(root: Node | None, value: Any) -> int:
    """Number of edges from the root to the shallowest node holding ``value``.

    Raises ``ValueError`` when the value is absent.
    """
    for depth, values in enumerate(level_order(root)):
        if value in values:
            return depth
    raise ValueError(f"value {value!r} is not in the tree")


def distance_between(root: Node | None, first: Any, second: Any) -> int:
    """Number of edges on the path between the nodes holding the two values."""
    ancestor = lowest_common_ancestor(root, first, second)
    return (
        depth_of(root, first)
        + depth_of(root, second)
        - 2 * depth_of(root, ancestor.value)
    )


def leaf_values(root: Node | None) -> list[Any]:
    """Values of the leaves in breadth-first order."""
    if root is None:
        return []
    leaves: list[Any] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None and node.right is None:
            leaves.append(node.value)
            continue
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return leaves


def max_root_to_leaf_sum(root: Node | None) -> Any:
    """Largest sum of values along a path from the root to a leaf.

    Raises ``ValueError`` for an empty tree.
    """
    if root is None:
        raise ValueError("an empty tree has no root-to-leaf path")

    def best(node: Node) -> Any:
        children = [child for child in (node.left, node.right) if child is not None]
        if not children:
            return node.value
        return node.value + max(best(child) for child in children)

    return best(root)


def max_sibling_gcd(root: Node | None) -> int:
    """Largest GCD of the values of two siblings; 0 when no node has two children."""
    result = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is not None and node.right is not None:
            result = max(result, gcd(node.left.value, node.right.value))
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return result


def max_sibling_gcd_from_pairs(pairs: Iterable[tuple[int, int]]) -> int:
    """Largest GCD of two siblings given ``(parent, child)`` edges; 0 without siblings."""
    children: dict[int, list[int]] = {}
    for parent, child in pairs:
        children.setdefault(parent, []).append(child)
    return max(
        (gcd(a, b) for kids in children.values() for a, b in pairwise(kids)),
        default=0,
    )


def _inorder_nodes(root: Node | None, descending: bool = False) -> Iterator[Node]:
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.right if descending else current.left
        current = stack.pop()
        yield current
        current = current.left if descending else current.right


def inorder_successor(root: Node | None, node: Node | None) -> Node | None:
    """The node visited right after ``node`` in order, or ``None`` if it is last.

    Raises ``ValueError`` when ``node`` does not belong to the tree.
    """
    if node is None:
        return None
    nodes = _inorder_nodes(root)
    for candidate in nodes:
        if candidate is node:
            return next(nodes, None)
    raise ValueError("node is not part of the tree")


def _kth(root: Node | None, k: int, descending: bool) -> Any:
    if k < 1:
        raise ValueError("k must be at least 1")
    found = next(islice(_inorder_nodes(root, descending), k - 1, None), None)
    if found is None:
        raise ValueError("k exceeds the number of nodes")
    return found.value


def kth_largest(root: Node | None, k: int) -> Any:
    """The k-th largest value of a binary search tree (1-based)."""
    return _kth(root, k, descending=True)


def kth_smallest(root: Node | None, k: int) -> Any:
    """The k-th smallest value of a binary search tree (1-based)."""
    return _kth(root, k, descending=False)


def has_pair_with_sum(root: Node | None, target: Any) -> bool:
    """True when two nodes of a binary search tree sum to ``target``.

    Walks inwards from both ends of the sorted order at once.
    """
    if root is None:
        return False
    ascending = _inorder_nodes(root)
    descending = _inorder_nodes(root, descending=True)
    low = next(ascending).value
    high = next(descending).value
    while low < high:
        total = low + high
        if total == target:
            return True
        if total > target:
            high = next(descending).value
        else:
            low = next(ascending).value
    return False