"""Structural comparisons of binary trees."""

from __future__ import annotations

from typing import Optional

from treealgos.tree import Node


def is_mirror(left: Optional[Node], right: Optional[Node]) -> bool:
    """True if ``right`` is the mirror image of ``left``, values included."""
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    if left.data != right.data:
        return False
    return is_mirror(left.left, right.right) and is_mirror(left.right, right.left)


def is_symmetric(root: Optional[Node]) -> bool:
    """True if the tree is a mirror image of itself around its root."""
    if root is None:
        return True
    return is_mirror(root.left, root.right)


def are_identical(first: Optional[Node], second: Optional[Node]) -> bool:
    """True if both trees have the same shape and the same values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.data == second.data
        and are_identical(first.left, second.left)
        and are_identical(first.right, second.right)
    )