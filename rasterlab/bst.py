"""A minimal binary search tree of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Node:
    """A tree node: smaller values go left, greater values go right."""

    data: int
    left: Optional[Node] = None
    right: Optional[Node] = None


def add(node: Optional[Node], data: int) -> Node:
    """Insert ``data`` below ``node`` and return the subtree root.

    Passing ``None`` creates a new one-node tree. Values already present
    are left alone.
    """
    if node is None:
        return Node(data)
    if data < node.data:
        node.left = add(node.left, data)
    elif data > node.data:
        node.right = add(node.right, data)
    return node


def contains(node: Optional[Node], data: int) -> bool:
    """Return whether ``data`` is stored in the tree rooted at ``node``."""
    while node is not None:
        if data == node.data:
            return True
        node = node.left if data < node.data else node.right
    return False