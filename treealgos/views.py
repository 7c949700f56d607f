"""Views of a binary tree seen from the bottom, top, left and right."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from treealgos.tree import Node


def _by_column(root: Optional[Node]) -> Iterator[tuple[Node, int]]:
    """Yield nodes in level order with their horizontal distance from the root."""
    queue = deque([(root, 0)] if root is not None else [])
    while queue:
        node, line = queue.popleft()
        yield node, line
        if node.left is not None:
            queue.append((node.left, line - 1))
        if node.right is not None:
            queue.append((node.right, line + 1))


def _by_level(root: Optional[Node]) -> Iterator[tuple[Node, int]]:
    """Yield nodes in level order with their depth, the root being at depth 0."""
    queue = deque([(root, 0)] if root is not None else [])
    while queue:
        node, level = queue.popleft()
        yield node, level
        if node.left is not None:
            queue.append((node.left, level + 1))
        if node.right is not None:
            queue.append((node.right, level + 1))


def bottom_view(root: Optional[Node]) -> list[int]:
    """Last node met in level order on each vertical line, from left to right."""
    lines: dict[int, int] = {}
    for node, line in _by_column(root):
        lines[line] = node.data
    return [lines[line] for line in sorted(lines)]


def top_view(root: Optional[Node]) -> list[int]:
    """First node met in level order on each vertical line, from left to right."""
    lines: dict[int, int] = {}
    for node, line in _by_column(root):
        lines.setdefault(line, node.data)
    return [lines[line] for line in sorted(lines)]


def left_view(root: Optional[Node]) -> list[int]:
    """Leftmost node of each level, from the root down."""
    levels: dict[int, int] = {}
    for node, level in _by_level(root):
        levels.setdefault(level, node.data)
    return [levels[level] for level in sorted(levels)]


def right_view(root: Optional[Node]) -> list[int]:
    """Rightmost node of each level, from the root down."""
    levels: dict[int, int] = {}
    for node, level in _by_level(root):
        levels[level] = node.data
    return [levels[level] for level in sorted(levels)]


def _first_per_level(root: Optional[Node], right_first: bool) -> list[int]:
    result: list[int] = []

    def visit(node: Optional[Node], level: int) -> None:
        if node is None:
            return
        if level == len(result):
            result.append(node.data)
        first, second = (node.right, node.left) if right_first else (node.left, node.right)
        visit(first, level + 1)
        visit(second, level + 1)

    visit(root, 0)
    return result


def left_view_recursive(root: Optional[Node]) -> list[int]:
    """Left view found by a preorder walk that visits left children first."""
    return _first_per_level(root, right_first=False)


def right_view_recursive(root: Optional[Node]) -> list[int]:
    """Right view found by a preorder walk that visits right children first."""
    return _first_per_level(root, right_first=True)