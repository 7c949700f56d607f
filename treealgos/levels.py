"""Vertical and zig-zag level traversals of binary trees."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from typing import Optional

from treealgos.tree import Node


def _with_coordinates(root: Optional[Node]) -> Iterator[tuple[Node, int, int]]:
    """Yield nodes in level order with their vertical line and level."""
    queue = deque([(root, 0, 0)] if root is not None else [])
    while queue:
        node, vertical, level = queue.popleft()
        yield node, vertical, level
        if node.left is not None:
            queue.append((node.left, vertical - 1, level + 1))
        if node.right is not None:
            queue.append((node.right, vertical + 1, level + 1))


def _columns(root: Optional[Node]) -> dict[int, dict[int, list[int]]]:
    columns: dict[int, dict[int, list[int]]] = defaultdict(lambda: defaultdict(list))
    for node, vertical, level in _with_coordinates(root):
        columns[vertical][level].append(node.data)
    return columns


def vertical_traversal(root: Optional[Node]) -> list[list[int]]:
    """One list per vertical line, left to right.

    Within a line nodes come level by level; nodes sharing a level are sorted.
    """
    columns = _columns(root)
    return [
        [value for level in sorted(columns[v]) for value in sorted(columns[v][level])]
        for v in sorted(columns)
    ]


def vertical_traversal_in_order(root: Optional[Node]) -> list[int]:
    """Vertical lines left to right, flattened, keeping level-order within a level."""
    columns = _columns(root)
    return [
        value
        for v in sorted(columns)
        for level in sorted(columns[v])
        for value in columns[v][level]
    ]


def _levels(root: Optional[Node]) -> Iterator[list[int]]:
    """Yield the values of each level, left to right."""
    queue = deque([root] if root is not None else [])
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        yield level


def zigzag_levels(root: Optional[Node]) -> list[list[int]]:
    """Levels alternating left-to-right and right-to-left, starting left-to-right."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(_levels(root))
    ]


def zigzag_level_order(root: Optional[Node]) -> list[int]:
    """The zig-zag levels flattened into one list."""
    return [value for level in zigzag_levels(root) for value in level]