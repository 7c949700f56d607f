"""Depth-first and breadth-first traversals of binary trees."""

from __future__ import annotations

from collections import deque
from typing import NamedTuple, Optional

from treealgos.tree import Node


class Orders(NamedTuple):
    """The three depth-first orders of one tree."""

    preorder: list[int]
    inorder: list[int]
    postorder: list[int]


def inorder(root: Optional[Node]) -> list[int]:
    """Values in left-root-right order, computed recursively."""
    if root is None:
        return []
    return inorder(root.left) + [root.data] + inorder(root.right)


def preorder(root: Optional[Node]) -> list[int]:
    """Values in root-left-right order, computed recursively."""
    if root is None:
        return []
    return [root.data] + preorder(root.left) + preorder(root.right)


def postorder(root: Optional[Node]) -> list[int]:
    """Values in left-right-root order, computed recursively."""
    if root is None:
        return []
    return postorder(root.left) + postorder(root.right) + [root.data]


def iterative_preorder(root: Optional[Node]) -> list[int]:
    """Preorder using an explicit stack."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def iterative_inorder(root: Optional[Node]) -> list[int]:
    """Inorder using an explicit stack."""
    result: list[int] = []
    stack: list[Node] = []
    current = root
    while True:
        if current is not None:
            stack.append(current)
            current = current.left
        elif stack:
            current = stack.pop()
            result.append(current.data)
            current = current.right
        else:
            return result


def iterative_postorder_two_stacks(root: Optional[Node]) -> list[int]:
    """Postorder using two stacks."""
    if root is None:
        return []
    stack = [root]
    output: list[Node] = []
    while stack:
        node = stack.pop()
        output.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return [node.data for node in reversed(output)]


def iterative_postorder_one_stack(root: Optional[Node]) -> list[int]:
    """Postorder using a single stack and the last visited node."""
    result: list[int] = []
    stack: list[Node] = []
    last_visited: Optional[Node] = None
    current = root
    while stack or current is not None:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        peek = stack[-1]
        if peek.right is not None and last_visited is not peek.right:
            current = peek.right
        else:
            result.append(peek.data)
            last_visited = stack.pop()
    return result


def level_order(root: Optional[Node]) -> list[int]:
    """Values level by level, each level from left to right."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def all_orders(root: Optional[Node]) -> Orders:
    """Preorder, inorder and postorder gathered in one stack-driven pass."""
    pre: list[int] = []
    ino: list[int] = []
    post: list[int] = []
    stack = [(root, 1)] if root is not None else []
    while stack:
        node, state = stack.pop()
        if state == 1:
            pre.append(node.data)
            stack.append((node, 2))
            if node.left is not None:
                stack.append((node.left, 1))
        elif state == 2:
            ino.append(node.data)
            stack.append((node, 3))
            if node.right is not None:
                stack.append((node.right, 1))
        else:
            post.append(node.data)
    return Orders(pre, ino, post)