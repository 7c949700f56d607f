"""General trees stored as first-child / next-sibling nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class GeneralNode:
    """A node of a general tree: its key, first child and next sibling."""

    key: int = 0
    left_child: Optional["GeneralNode"] = None
    right_sib: Optional["GeneralNode"] = None

    def children(self) -> Iterator["GeneralNode"]:
        """Yield the children from left to right."""
        child = self.left_child
        while child is not None:
            yield child
            child = child.right_sib


def general_height(root: Optional[GeneralNode]) -> int:
    """Number of levels in the tree rooted at ``root`` (siblings of root ignored)."""
    if root is None:
        return 0
    return 1 + max((general_height(child) for child in root.children()), default=0)


def general_levels(root: Optional[GeneralNode]) -> list[list[int]]:
    """Keys of the tree grouped by level, each level from left to right."""
    if root is None:
        return []
    levels: list[list[int]] = []
    queue = deque([(root, 0)])
    while queue:
        node, level = queue.popleft()
        if level == len(levels):
            levels.append([])
        levels[level].append(node.key)
        queue.extend((child, level + 1) for child in node.children())
    return levels


def render_general(root: Optional[GeneralNode]) -> str:
    """One line per level, each key followed by a space."""
    return "".join(
        "".join(f"{key} " for key in level) + "\n" for level in general_levels(root)
    )


def siblings_non_decreasing(node: Optional[GeneralNode]) -> bool:
    """True if keys never decrease along the sibling chain starting at ``node``."""
    while node is not None and node.right_sib is not None:
        if node.right_sib.key < node.key:
            return False
        node = node.right_sib
    return True


def is_non_decreasing(root: Optional[GeneralNode]) -> bool:
    """True if every node's children have non-decreasing keys from left to right."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        sibling = node.right_sib
        if sibling is not None:
            if sibling.key < node.key:
                return False
            stack.append(sibling)
        if node.left_child is not None:
            stack.append(node.left_child)
    return True