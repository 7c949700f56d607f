from treealgos.levels import (
    vertical_traversal,
    vertical_traversal_in_order,
    zigzag_level_order,
    zigzag_levels,
)
from treealgos.traversals import level_order
from treealgos.tree import Node


def example_tree():
    root = Node(1, Node(2, Node(4), Node(5)), Node(3, Node(6), Node(7)))
    root.left.left.left = Node(8)
    root.right.left.right = Node(9)
    return root


def complete_tree(levels):
    """Complete tree whose nodes are numbered 1.. in level order."""
    def build(i):
        if i >= 2 ** levels:
            return None
        return Node(i, build(2 * i), build(2 * i + 1))

    return build(1)


def test_vertical_traversal_example():
    assert vertical_traversal(example_tree()) == [[8], [4], [2], [1, 5, 6], [3, 9], [7]]


def test_vertical_in_order_matches_flattened_when_no_ties_out_of_order():
    root = example_tree()
    flat = [v for column in vertical_traversal(root) for v in column]
    assert vertical_traversal_in_order(root) == flat


def test_vertical_contains_every_node_once():
    root = example_tree()
    flat = [v for column in vertical_traversal(root) for v in column]
    assert sorted(flat) == sorted(level_order(root))
    assert sorted(vertical_traversal_in_order(root)) == sorted(level_order(root))


def test_vertical_sorts_ties_but_in_order_keeps_tree_order():
    root = Node(1, Node(2, None, Node(9)), Node(3, Node(5), None))
    middle = vertical_traversal(root)[1]
    assert middle == [1, 5, 9]
    in_order = vertical_traversal_in_order(root)
    assert in_order.index(9) < in_order.index(5)


def test_vertical_keeps_duplicates():
    root = Node(1, Node(2, None, Node(9)), Node(3, Node(9), None))
    assert vertical_traversal(root)[1] == [1, 9, 9]


def test_empty_tree():
    assert vertical_traversal(None) == []
    assert vertical_traversal_in_order(None) == []
    assert zigzag_level_order(None) == []
    assert zigzag_levels(None) == []


def test_single_node():
    root = Node(42)
    assert vertical_traversal(root) == [[42]]
    assert zigzag_levels(root) == [[42]]
    assert zigzag_level_order(root) == [42]


def test_zigzag_complete_seven():
    assert zigzag_level_order(complete_tree(3)) == [1, 3, 2, 4, 5, 6, 7]


def test_zigzag_source_tree_one():
    root = Node(10, Node(2, Node(4), Node(5)), Node(3, Node(6), Node(-7)))
    assert zigzag_level_order(root) == [10, 3, 2, 4, 5, 6, -7]


def test_zigzag_levels_alternate_direction():
    root = complete_tree(4)
    levels = zigzag_levels(root)
    assert len(levels) == 4
    for depth, level in enumerate(levels):
        expected = list(range(2 ** depth, 2 ** (depth + 1)))
        assert level == (expected if depth % 2 == 0 else expected[::-1])


def test_zigzag_flat_is_concatenation_of_levels():
    root = complete_tree(4)
    assert zigzag_level_order(root) == [v for level in zigzag_levels(root) for v in level]