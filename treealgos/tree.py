"""Binary tree nodes, depth measures and a text renderer."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def height(root: Optional[Node]) -> int:
    """Number of levels in the tree rooted at ``root``."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def max_depth(root: Optional[Node]) -> int:
    """Maximum depth of the tree, computed recursively."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def max_depth_iterative(root: Optional[Node]) -> int:
    """Maximum depth of the tree, computed level by level."""
    if root is None:
        return 0
    depth = 0
    queue = deque([root])
    while queue:
        depth += 1
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
    return depth


def _half(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return int(value / 2)


def _spaces(width: int) -> str:
    return " " * max(width, 0)


def _branch_line(branch_len, node_space_len, start_len, level):
    parts = []
    for i, (left, right) in enumerate(zip(level[0::2], level[1::2])):
        pad = start_len - 1 if i == 0 else node_space_len - 2
        parts.append(_spaces(pad))
        parts.append("/" if left is not None else " ")
        parts.append(_spaces(2 * branch_len + 2))
        parts.append("\\" if right is not None else " ")
    return "".join(parts)


def _node_line(branch_len, node_space_len, start_len, level):
    parts = []
    for i, node in enumerate(level):
        parts.append(_spaces(start_len if i == 0 else node_space_len))
        left_fill = "_" if node is not None and node.left is not None else " "
        right_fill = "_" if node is not None and node.right is not None else " "
        text = str(node.data) if node is not None else ""
        parts.append(text.rjust(branch_len + 2, left_fill))
        parts.append(right_fill * max(branch_len, 0))
    return "".join(parts)


def _leaf_line(indent_space, spacing, level):
    parts = []
    for i, node in enumerate(level):
        width = indent_space + 2 if i == 0 else 2 * spacing + 2
        text = str(node.data) if node is not None else ""
        parts.append(text.rjust(width))
    return "".join(parts)


def render_pretty(root: Optional[Node], indent_space: int = 0) -> str:
    """Draw the tree as text, one line per row, ending with a newline."""
    h = height(root)
    if h == 0:
        return "\n" + _spaces(indent_space + 2) + "\n"

    branch_len = 2 * ((1 << h) - 1) - 3 * (1 << (h - 1))
    node_space_len = 2 + 2 * (1 << h)
    start_len = branch_len + 3 + indent_space

    level: list[Optional[Node]] = [root]
    lines = []
    for _ in range(1, h):
        lines.append(_branch_line(branch_len, node_space_len, start_len, level))
        branch_len = _half(branch_len) - 1
        node_space_len = node_space_len // 2 + 1
        start_len = branch_len + 3 + indent_space
        lines.append(_node_line(branch_len, node_space_len, start_len, level))
        level = [
            child
            for node in level
            for child in ((node.left, node.right) if node is not None else (None, None))
        ]
    lines.append(_branch_line(branch_len, node_space_len, start_len, level))
    lines.append(_leaf_line(indent_space, 1, level))
    return "\n".join(lines) + "\n"


def print_pretty(root: Optional[Node], indent_space: int = 0) -> None:
    """Print the drawing made by :func:`render_pretty`."""
    print(render_pretty(root, indent_space), end="")