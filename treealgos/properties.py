"""Balance, diameter and maximum path sum of binary trees."""

from __future__ import annotations

from typing import Optional

from treealgos.tree import Node, max_depth


def is_balanced(root: Optional[Node]) -> bool:
    """True if at every node the subtree heights differ by at most one.

    Measures subtree heights again at every node.
    """
    if root is None:
        return True
    if abs(max_depth(root.left) - max_depth(root.right)) > 1:
        return False
    return is_balanced(root.left) and is_balanced(root.right)


def balanced_height(root: Optional[Node]) -> int:
    """Height of the tree if it is balanced, otherwise -1, in a single pass."""
    if root is None:
        return 0
    left = balanced_height(root.left)
    if left == -1:
        return -1
    right = balanced_height(root.right)
    if right == -1:
        return -1
    if abs(left - right) > 1:
        return -1
    return 1 + max(left, right)


def is_balanced_fast(root: Optional[Node]) -> bool:
    """Same answer as :func:`is_balanced`, computed in linear time."""
    return balanced_height(root) >= 0


def diameter(root: Optional[Node]) -> int:
    """Number of edges on the longest path between two nodes.

    Measures subtree heights again at every node.
    """
    if root is None:
        return 0
    through_root = max_depth(root.left) + max_depth(root.right)
    return max(through_root, diameter(root.left), diameter(root.right))


def diameter_fast(root: Optional[Node]) -> int:
    """Same answer as :func:`diameter`, computed in linear time."""
    best = 0

    def depth(node: Optional[Node]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    depth(root)
    return best


def max_path_sum(root: Optional[Node]) -> int:
    """Largest sum of values along any path between two nodes.

    Raises ValueError for an empty tree, which has no path.
    """
    if root is None:
        raise ValueError("an empty tree has no path")
    best: Optional[int] = None

    def gain(node: Optional[Node]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        total = left + right + node.data
        if best is None or total > best:
            best = total
        return node.data + max(left, right)

    gain(root)
    assert best is not None
    return best