"""Anticlockwise boundary traversal of a binary tree."""

from __future__ import annotations

from typing import Optional

from treealgos.tree import Node


def is_leaf(node: Node) -> bool:
    """True if ``node`` has no children."""
    return node.left is None and node.right is None


def left_boundary(root: Node) -> list[int]:
    """Non-leaf nodes on the left edge below ``root``, top to bottom."""
    result: list[int] = []
    node = root.left
    while node is not None:
        if not is_leaf(node):
            result.append(node.data)
        node = node.left if node.left is not None else node.right
    return result


def leaves(root: Optional[Node]) -> list[int]:
    """All leaves, from left to right."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if is_leaf(node):
            result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def right_boundary(root: Node) -> list[int]:
    """Non-leaf nodes on the right edge below ``root``, bottom to top."""
    result: list[int] = []
    node = root.right
    while node is not None:
        if not is_leaf(node):
            result.append(node.data)
        node = node.right if node.right is not None else node.left
    result.reverse()
    return result


def boundary_traversal(root: Optional[Node]) -> list[int]:
    """Root, left edge, leaves, then right edge reversed: the tree's perimeter."""
    if root is None:
        return []
    if is_leaf(root):
        return [root.data]
    return [root.data] + left_boundary(root) + leaves(root) + right_boundary(root)