"""Building binary trees from arrays, traversals and incremental edits."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any

from .node import Node

DEFAULT_MODULUS = 1_000_000_007


def tree_from_parent_array(parents: Iterable[int]) -> Node | None:
    """Build a tree whose node ``i`` has parent ``parents[i]``; ``-1`` marks the root.

    Node values are their indices.  A parent's first child (by index) goes
    to the left, the second to the right.  Raises ``ValueError`` when there
    is no root or several, when a parent index is out of range, when a node
    gets more than two children, or when some nodes cannot be reached
    from the root.
    """
    links = list(parents)
    if not links:
        return None
    nodes = [Node(index) for index in range(len(links))]
    root: Node | None = None

    for child, parent in enumerate(links):
        if parent == -1:
            if root is not None:
                raise ValueError("parent array has more than one root")
            root = nodes[child]
            continue
        if not 0 <= parent < len(nodes) or parent == child:
            raise ValueError(f"invalid parent {parent!r} for node {child}")
        holder = nodes[parent]
        if holder.left is None:
            holder.left = nodes[child]
        elif holder.right is None:
            holder.right = nodes[child]
        else:
            raise ValueError(f"node {parent} has more than two children")

    if root is None:
        raise ValueError("parent array has no root")

    reached = 0
    stack = [root]
    while stack:
        node = stack.pop()
        reached += 1
        stack.extend(child for child in (node.left, node.right) if child is not None)
    if reached != len(nodes):
        raise ValueError("parent array contains nodes unreachable from the root")
    return root


def can_represent_bst(preorder: Iterable[Any]) -> bool:
    """True when the sequence could be the pre-order listing of a binary search tree."""
    lower: Any = None
    stack: list[Any] = []
    for value in preorder:
        if lower is not None and value < lower:
            return False
        while stack and value > stack[-1]:
            lower = stack.pop()
        stack.append(value)
    return True


def bst_from_preorder(preorder: Iterable[Any]) -> Node | None:
    """Rebuild a binary search tree of distinct values from its pre-order listing.

    Raises ``ValueError`` when the listing is not the pre-order of such a tree.
    """
    values = list(preorder)
    position = 0

    def build(low: Any, high: Any) -> Node | None:
        nonlocal position
        if position >= len(values):
            return None
        value = values[position]
        if (low is not None and value <= low) or (high is not None and value >= high):
            return None
        position += 1
        node = Node(value)
        node.left = build(low, value)
        node.right = build(value, high)
        return node

    root = build(None, None)
    if position != len(values):
        raise ValueError("sequence is not the pre-order listing of a binary search tree")
    return root


def tree_from_inorder_preorder(inorder: Iterable[Any], preorder: Iterable[Any]) -> Node | None:
    """Rebuild a tree of distinct values from its in-order and pre-order listings.

    Raises ``ValueError`` when the listings differ in length, repeat a value,
    or do not describe the same tree.
    """
    in_values = list(inorder)
    pre_values = list(preorder)
    if len(in_values) != len(pre_values):
        raise ValueError("in-order and pre-order listings differ in length")

    position: dict[Any, int] = {}
    for index, value in enumerate(in_values):
        if value in position:
            raise ValueError(f"value {value!r} appears more than once")
        position[value] = index

    upcoming = iter(pre_values)

    def build(start: int, end: int) -> Node | None:
        if start > end:
            return None
        value = next(upcoming)
        try:
            index = position[value]
        except KeyError:
            raise ValueError(f"value {value!r} is missing from the in-order listing") from None
        if not start <= index <= end:
            raise ValueError("in-order and pre-order listings are inconsistent")
        node = Node(value)
        node.left = build(start, index - 1)
        node.right = build(index + 1, end)
        return node

    return build(0, len(in_values) - 1)


def insert_level_order(root: Node | None, value: Any) -> Node:
    """Attach ``value`` at the first free child slot in breadth-first order.

    Returns the root, which is a new node when the tree was empty.
    """
    if root is None:
        return Node(value)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = Node(value)
            return root
        queue.append(node.left)
        if node.right is None:
            node.right = Node(value)
            return root
        queue.append(node.right)
    return root


def delete_level_order(root: Node | None, value: Any) -> Node | None:
    """Remove ``value`` by overwriting it with the deepest, rightmost node's value.

    The last matching node in breadth-first order is the one replaced, and
    the deepest rightmost node is then detached.  The tree is unchanged
    when ``value`` is absent; deleting the only node gives ``None``.
    """
    if root is None:
        return None
    key: Node | None = None
    last = root
    last_parent: Node | None = None
    queue: deque[tuple[Node, Node | None]] = deque([(root, None)])
    while queue:
        node, parent = queue.popleft()
        if node.value == value:
            key = node
        last, last_parent = node, parent
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, node))

    if key is None:
        return root
    if last_parent is None:
        return None
    key.value = last.value
    if last_parent.right is last:
        last_parent.right = None
    else:
        last_parent.left = None
    return root


def count_unique_bsts(n: int, modulus: int = DEFAULT_MODULUS) -> int:
    """Number of structurally distinct BSTs on ``n`` keys (the Catalan number), mod ``modulus``."""
    if n < 0:
        raise ValueError("number of keys must be non-negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    counts = [1]
    for size in range(1, n + 1):
        counts.append(
            sum(counts[left] * counts[size - 1 - left] for left in range(size)) % modulus
        )
    return counts[n] % modulus