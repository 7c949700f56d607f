import pytest

from treealgos.boundary import (
    boundary_traversal,
    is_leaf,
    leaves,
    left_boundary,
    right_boundary,
)
from treealgos.traversals import inorder
from treealgos.tree import Node


def example_tree():
    root = Node(1, Node(2, Node(4), Node(5)), Node(3, Node(6), Node(7)))
    root.left.left.left = Node(8)
    root.right.left.right = Node(9)
    return root


def mirror(node):
    if node is None:
        return None
    return Node(node.data, mirror(node.right), mirror(node.left))


def leaf_values_inorder(node):
    if node is None:
        return []
    if node.left is None and node.right is None:
        return [node.data]
    return leaf_values_inorder(node.left) + leaf_values_inorder(node.right)


def test_boundary_example():
    assert boundary_traversal(example_tree()) == [1, 2, 4, 8, 5, 9, 7, 3]


def test_boundary_is_concatenation_of_parts():
    root = example_tree()
    parts = [root.data] + left_boundary(root) + leaves(root) + right_boundary(root)
    assert boundary_traversal(root) == parts


def test_leaves_follow_left_to_right_order():
    root = example_tree()
    assert leaves(root) == leaf_values_inorder(root)
    values = inorder(root)
    found = leaves(root)
    assert [values.index(v) for v in found] == sorted(values.index(v) for v in found)


def test_right_boundary_mirrors_left_boundary():
    root = example_tree()
    assert right_boundary(mirror(root)) == list(reversed(left_boundary(root)))
    assert left_boundary(mirror(root)) == list(reversed(right_boundary(root)))


def test_boundaries_exclude_leaves():
    root = example_tree()
    leaf_set = set(leaves(root))
    assert leaf_set.isdisjoint(left_boundary(root))
    assert leaf_set.isdisjoint(right_boundary(root))


def test_single_node_not_repeated():
    assert boundary_traversal(Node(5)) == [5]


def test_empty_tree():
    assert boundary_traversal(None) == []
    assert leaves(None) == []


def test_left_chain_uses_right_child_when_left_missing():
    root = Node(1, Node(2, None, Node(3, Node(4), None)), None)
    assert left_boundary(root) == [2, 3]
    assert right_boundary(root) == []
    assert boundary_traversal(root) == [1, 2, 3, 4]


@pytest.mark.parametrize(
    "node, expected",
    [
        (Node(1), True),
        (Node(1, Node(2)), False),
        (Node(1, None, Node(2)), False),
    ],
)
def test_is_leaf(node, expected):
    assert is_leaf(node) is expected