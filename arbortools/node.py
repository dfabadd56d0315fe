"""Binary tree node and a builder from level-order listings."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A binary tree node holding a value and optional left/right children.

    Nodes compare by identity, so a node can be located inside a tree
    even when other nodes carry the same value.
    """

    value: Any
    left: Node | None = None
    right: Node | None = None


def from_level_order(values: Iterable[Any]) -> Node | None:
    """Build a tree from a level-order listing where ``None`` marks a gap.

    Children are assigned left then right to each present node in
    breadth-first order; gaps have no children of their own.  An empty
    listing, or one starting with ``None``, yields ``None``.  Raises
    ``ValueError`` when values remain that no present node can parent.
    """
    items = iter(values)
    try:
        first = next(items)
    except StopIteration:
        return None

    remaining = list(items)
    if first is None:
        if any(item is not None for item in remaining):
            raise ValueError("values follow an empty root and have no parent")
        return None

    root = Node(first)
    parents: deque[Node] = deque([root])
    pending = deque(remaining)

    while pending:
        if not parents:
            if any(item is not None for item in pending):
                raise ValueError("level-order listing has values without a parent")
            break
        parent = parents.popleft()
        for side in ("left", "right"):
            if not pending:
                break
            item = pending.popleft()
            if item is not None:
                child = Node(item)
                setattr(parent, side, child)
                parents.append(child)
    return root