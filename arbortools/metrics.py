"""Breadth-first measurements and rewrites of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Any

from .node import Node
from .traversal import inorder, level_order


def edge_height(root: Node | None) -> int:
    """Edges on the longest root-to-leaf path; 0 for a single node, -1 when empty."""
    if root is None:
        return -1
    return 1 + max(edge_height(root.left), edge_height(root.right))


def level_depth(root: Node | None) -> int:
    """Depth of the deepest level counted breadth-first; -1 for an empty tree."""
    return len(level_order(root)) - 1


def largest_per_level(root: Node | None) -> list[Any]:
    """The largest value on each level, from the root downwards."""
    return [max(values) for values in level_order(root)]


def mirror_level_order(root: Node | None) -> Node | None:
    """Swap every node's children in place, breadth-first; returns the root."""
    if root is None:
        return None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        node.left, node.right = node.right, node.left
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return root


def is_symmetric_iterative(root: Node | None) -> bool:
    """True when the tree is its own mirror image, checked with an explicit stack."""
    stack: list[tuple[Node | None, Node | None]] = [(root, root)]
    while stack:
        first, second = stack.pop()
        if first is None and second is None:
            continue
        if first is None or second is None or first.value != second.value:
            return False
        stack.append((first.left, second.right))
        stack.append((first.right, second.left))
    return True


def same_shape_level_order(first: Node | None, second: Node | None) -> bool:
    """True when both trees match in values and child placement, level by level.

    Either tree being empty counts as a mismatch.
    """
    if first is None or second is None:
        return False
    queue: deque[tuple[Node, Node]] = deque([(first, second)])
    while queue:
        a, b = queue.popleft()
        if a.value != b.value:
            return False
        if (a.left is None) != (b.left is None) or (a.right is None) != (b.right is None):
            return False
        if a.left is not None and b.left is not None:
            queue.append((a.left, b.left))
        if a.right is not None and b.right is not None:
            queue.append((a.right, b.right))
    return True


def circular_inorder(root: Node | None) -> Node | None:
    """A circular doubly linked list of fresh nodes holding the in-order values.

    ``right`` points to the next node and ``left`` to the previous one; the
    last node links back to the head.  Returns the head, or ``None`` when
    the tree is empty.  The tree itself is left untouched.
    """
    nodes = [Node(value) for value in inorder(root)]
    if not nodes:
        return None
    for current, following in zip(nodes, nodes[1:] + nodes[:1]):
        current.right = following
        following.left = current
    return nodes[0]