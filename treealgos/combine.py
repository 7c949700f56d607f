"""Operations that combine two binary trees node by node."""

from __future__ import annotations

from typing import Optional

from treealgos.tree import Node


def subtract_trees(target: Optional[Node], other: Optional[Node]) -> None:
    """Subtract ``other``'s values from ``target``'s at matching positions, in place.

    Positions present in only one of the trees are left untouched.
    """
    stack = [(target, other)]
    while stack:
        first, second = stack.pop()
        if first is None or second is None:
            continue
        first.data -= second.data
        stack.append((first.right, second.right))
        stack.append((first.left, second.left))