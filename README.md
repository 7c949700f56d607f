# treealgos

A small library of tree algorithms on plain Python objects: traversals,
views, root-to-node paths, structural checks on binary trees, a general
(first-child / next-sibling) tree, and array-based max-heap helpers.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Building a tree

Binary trees are made of `treealgos.tree.Node` objects, each with `data`,
`left` and `right`. Nodes compare by identity, so two nodes holding the same
value are still different nodes.

```python
from treealgos.tree import Node, height, print_pretty

root = Node(1)
root.left = Node(2)
root.right = Node(3)
root.left.left = Node(4)
root.left.right = Node(5)

print(height(root))        # 3
print_pretty(root, 0)      # draws the tree in the terminal
```

`render_pretty(root, indent_space)` returns the same drawing as a string.

## Modules

- `treealgos.tree`: `Node`, `height`, `max_depth`, `max_depth_iterative`,
  `render_pretty`, `print_pretty`.
- `treealgos.traversals`: recursive `inorder`, `preorder`, `postorder`;
  stack-based `iterative_preorder`, `iterative_inorder`,
  `iterative_postorder_two_stacks`, `iterative_postorder_one_stack`;
  breadth-first `level_order`; and `all_orders`, which collects preorder,
  inorder and postorder in one pass and returns them as a named tuple with
  fields `preorder`, `inorder` and `postorder`.
- `treealgos.views`: `top_view`, `bottom_view` (one value per vertical line,
  left to right), `left_view`, `right_view` (one value per level, top down),
  and the recursive `left_view_recursive`, `right_view_recursive`.
- `treealgos.levels`: `vertical_traversal` (one list per vertical line,
  values sharing a level sorted), `vertical_traversal_in_order` (flattened,
  keeping level order within a level), `zigzag_levels` and
  `zigzag_level_order`.
- `treealgos.boundary`: `boundary_traversal` (root, left edge, leaves, right
  edge bottom-up) and its parts `is_leaf`, `left_boundary`, `leaves`,
  `right_boundary`.
- `treealgos.properties`: `is_balanced`, `balanced_height` (height, or -1 if
  unbalanced), `is_balanced_fast`, `diameter`, `diameter_fast` (edges on the
  longest path), and `max_path_sum`, which raises `ValueError` for an empty
  tree.
- `treealgos.paths`: `root_to_node_path`, `root_to_node_path_recursive`,
  `root_to_node_path_string` (`"1->2->4"`), `find_leaves`,
  `binary_tree_paths` and `binary_tree_paths_naive`. A destination that is
  not in the tree gives an empty path.
- `treealgos.comparison`: `is_symmetric`, `is_mirror`, `are_identical`.
- `treealgos.combine`: `subtract_trees(target, other)` subtracts `other`'s
  values from `target`'s at matching positions, in place.
- `treealgos.general_tree`: `GeneralNode` (`key`, `left_child`, `right_sib`,
  and a `children()` iterator), `general_height`, `general_levels`,
  `render_general`, `siblings_non_decreasing` and `is_non_decreasing`, which
  checks that every node's children have non-decreasing keys from left to
  right.
- `treealgos.heaps`: `max_heapify(heap, index, heap_size)` and
  `merge_heaps(h1, h2)`, which copies `h2` into `h1` after its first
  `len(h2)` slots and rebuilds `h1` in place as one max-heap of
  `2 * len(h2)` elements; it raises `ValueError` if `h1` is too short.
- `treealgos.frequencies`: `has_duplicate_frequencies`,
  `has_duplicate_frequencies_hashed` and
  `has_duplicate_frequencies_bounded(values, distinct)` tell whether two
  distinct values occur the same number of times; the bounded form raises
  `ValueError` if `distinct` is negative or more distinct values occur.

```python
from treealgos.traversals import all_orders, inorder, level_order
from treealgos.views import top_view

print(inorder(root))              # [4, 2, 5, 1, 3]
print(level_order(root))          # [1, 2, 3, 4, 5]
print(top_view(root))             # [4, 2, 1, 3]
print(all_orders(root).preorder)  # [1, 2, 4, 5, 3]
```

## What it does not do

This is a library only: there is no command-line program, and trees are
built in code rather than read from files. `merge_heaps` leaves a max-heap,
not a sorted array.

## Running the tests

```
pip install .[test]
pytest
```