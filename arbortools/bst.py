"""Binary search tree operations: insertion, deletion, validation and rewrites."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from .node import Node


def insert(root: Node | None, value: Any) -> Node:
    """Insert ``value`` recursively and return the root; duplicates are ignored."""
    if root is None:
        return Node(value)
    if root.value < value:
        root.right = insert(root.right, value)
    elif root.value > value:
        root.left = insert(root.left, value)
    return root


def insert_iterative(root: Node | None, value: Any) -> Node:
    """Insert ``value`` by walking down from the root; duplicates are ignored."""
    if root is None:
        return Node(value)
    current = root
    while True:
        if current.value < value:
            if current.right is None:
                current.right = Node(value)
                return root
            current = current.right
        elif current.value > value:
            if current.left is None:
                current.left = Node(value)
                return root
            current = current.left
        else:
            return root


def find_min(root: Node | None) -> Node | None:
    """The leftmost node of the tree, or ``None`` for an empty tree."""
    if root is None:
        return None
    node = root
    while node.left is not None:
        node = node.left
    return node


def delete(root: Node | None, value: Any) -> Node | None:
    """Remove ``value`` and return the new root; the tree is unchanged if absent.

    A node with two children takes the value of its in-order successor,
    which is then removed from the right subtree.
    """
    if root is None:
        return None
    if root.value < value:
        root.right = delete(root.right, value)
        return root
    if root.value > value:
        root.left = delete(root.left, value)
        return root
    if root.left is None:
        return root.right
    if root.right is None:
        return root.left
    successor = find_min(root.right)
    assert successor is not None
    root.value = successor.value
    root.right = delete(root.right, successor.value)
    return root


def validate_bst(root: Node | None) -> bool:
    """True when every node is strictly greater than its left subtree and less than its right."""

    def check(node: Node | None, low: Any, high: Any) -> bool:
        if node is None:
            return True
        if low is not None and not node.value > low:
            return False
        if high is not None and not node.value < high:
            return False
        return check(node.left, low, node.value) and check(node.right, node.value, high)

    return check(root, None, None)


def sorted_to_bst(values: Iterable[Any]) -> Node | None:
    """Build a height-balanced tree from sorted values, rooting each part at its middle."""
    items = list(values)

    def build(part: Sequence[Any]) -> Node | None:
        if not part:
            return None
        mid = len(part) // 2
        return Node(part[mid], build(part[:mid]), build(part[mid + 1:]))

    return build(items)


def greater_sum_tree(root: Node | None) -> Node | None:
    """Replace each value, in place, with the sum of all greater values; returns the root."""
    total = 0
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.right
        current = stack.pop()
        original = current.value
        current.value = total
        total += original
        current = current.left
    return root


def trim_to_range(root: Node | None, low: Any, high: Any) -> Node | None:
    """Drop every node whose value lies outside ``[low, high]``; returns the new root."""
    if root is None:
        return None
    root.left = trim_to_range(root.left, low, high)
    root.right = trim_to_range(root.right, low, high)
    if root.value < low:
        return root.right
    if root.value > high:
        return root.left
    return root