"""Paths from the root of a binary tree to its nodes and leaves."""

from __future__ import annotations

from collections import deque
from typing import Optional

from treealgos.tree import Node


def _format_path(values: list[int]) -> str:
    return "->".join(str(value) for value in values)


def root_to_node_path(root: Optional[Node], dest: Optional[Node]) -> list[int]:
    """Values from ``root`` down to ``dest``, found breadth-first.

    Returns an empty list if either node is missing or ``dest`` is not in the tree.
    """
    if root is None or dest is None:
        return []
    parent: dict[Node, Optional[Node]] = {root: None}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node is dest:
            path: list[int] = []
            current: Optional[Node] = node
            while current is not None:
                path.append(current.data)
                current = parent[current]
            path.reverse()
            return path
        for child in (node.left, node.right):
            if child is not None:
                parent[child] = node
                queue.append(child)
    return []


def _collect_path(node: Optional[Node], dest: Node, path: list[int]) -> bool:
    if node is None:
        return False
    path.append(node.data)
    if node is dest:
        return True
    if _collect_path(node.left, dest, path) or _collect_path(node.right, dest, path):
        return True
    path.pop()
    return False


def root_to_node_path_recursive(root: Optional[Node], dest: Optional[Node]) -> list[int]:
    """Values from ``root`` down to ``dest``, found depth-first.

    Returns an empty list if either node is missing or ``dest`` is not in the tree.
    """
    path: list[int] = []
    if dest is None:
        return path
    _collect_path(root, dest, path)
    return path


def root_to_node_path_string(root: Optional[Node], dest: Optional[Node]) -> str:
    """The path to ``dest`` written as ``"a->b->c"``, or ``""`` if there is none."""
    return _format_path(root_to_node_path_recursive(root, dest))


def find_leaves(root: Optional[Node]) -> list[Node]:
    """Leaf nodes from left to right."""
    if root is None:
        return []
    if root.left is None and root.right is None:
        return [root]
    return find_leaves(root.left) + find_leaves(root.right)


def binary_tree_paths_naive(root: Optional[Node]) -> list[str]:
    """Every root-to-leaf path as a string, searching from the root for each leaf."""
    return [root_to_node_path_string(root, leaf) for leaf in find_leaves(root)]


def binary_tree_paths(root: Optional[Node]) -> list[str]:
    """Every root-to-leaf path as a string, left to right, in a single walk."""
    paths: list[str] = []

    def walk(node: Optional[Node], prefix: str) -> None:
        if node is None:
            return
        text = prefix + str(node.data)
        if node.left is None and node.right is None:
            paths.append(text)
            return
        walk(node.left, text + "->")
        walk(node.right, text + "->")

    walk(root, "")
    return paths