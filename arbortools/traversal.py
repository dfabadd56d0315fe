"""Depth-first and breadth-first traversals of binary trees."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from typing import Any

from .node import Node


def _inorder(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: Node | None) -> list[Any]:
    """Values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: Node | None) -> list[Any]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: Node | None) -> list[Any]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def inorder_iterative(root: Node | None) -> list[Any]:
    """In-order traversal using an explicit stack."""
    result: list[Any] = []
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.value)
        current = current.right
    return result


def preorder_iterative(root: Node | None) -> list[Any]:
    """Pre-order traversal using an explicit stack."""
    if root is None:
        return []
    result: list[Any] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder_iterative(root: Node | None) -> list[Any]:
    """Post-order traversal using two stacks."""
    if root is None:
        return []
    pending = [root]
    visited: list[Node] = []
    while pending:
        node = pending.pop()
        visited.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.value for node in reversed(visited)]


def _levels(root: Node | None) -> Iterator[list[Node]]:
    if root is None:
        return
    queue = deque([root])
    while queue:
        level = list(queue)
        queue.clear()
        for node in level:
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        yield level


def level_order(root: Node | None) -> list[list[Any]]:
    """Values grouped by depth, each level left to right."""
    return [[node.value for node in level] for level in _levels(root)]


def zigzag_level_order(root: Node | None) -> list[list[Any]]:
    """Levels alternating left-to-right and right-to-left, starting left-to-right."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]


def zigzag_traversal(root: Node | None) -> list[Any]:
    """The zigzag levels flattened into one sequence."""
    return [value for level in zigzag_level_order(root) for value in level]


def vertical_order(root: Node | None) -> list[list[Any]]:
    """Columns by horizontal distance, leftmost first, each in pre-order."""
    columns: defaultdict[int, list[Any]] = defaultdict(list)

    def visit(node: Node | None, distance: int) -> None:
        if node is None:
            return
        columns[distance].append(node.value)
        visit(node.left, distance - 1)
        visit(node.right, distance + 1)

    visit(root, 0)
    return [columns[distance] for distance in sorted(columns)]


def _is_leaf(node: Node) -> bool:
    return node.left is None and node.right is None


def _left_boundary(node: Node | None, out: list[Any]) -> None:
    while node is not None and not _is_leaf(node):
        out.append(node.value)
        node = node.left if node.left is not None else node.right


def _right_boundary(node: Node | None, out: list[Any]) -> None:
    upward: list[Any] = []
    while node is not None and not _is_leaf(node):
        upward.append(node.value)
        node = node.right if node.right is not None else node.left
    out.extend(reversed(upward))


def _leaves(node: Node | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _leaves(node.left)
    if _is_leaf(node):
        yield node.value
    yield from _leaves(node.right)


def boundary(root: Node | None) -> list[Any]:
    """Anticlockwise boundary: root, left edge, leaves, right edge bottom-up."""
    if root is None:
        return []
    result = [root.value]
    _left_boundary(root.left, result)
    result.extend(_leaves(root.left))
    result.extend(_leaves(root.right))
    _right_boundary(root.right, result)
    return result


def zigzag_extremes(root: Node | None) -> list[Any]:
    """One end of each level: rightmost on even depths, leftmost on odd depths."""
    return [
        values[-1] if depth % 2 == 0 else values[0]
        for depth, values in enumerate(level_order(root))
    ]


def height(root: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def height_iterative(root: Node | None) -> int:
    """Number of levels counted breadth-first; -1 for an empty tree."""
    if root is None:
        return -1
    return sum(1 for _ in _levels(root))