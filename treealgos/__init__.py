"""Binary-tree, general-tree, max-heap and value-frequency algorithms."""

__version__ = "0.1.0"

__all__ = [
    "boundary",
    "combine",
    "comparison",
    "frequencies",
    "general_tree",
    "heaps",
    "levels",
    "paths",
    "properties",
    "traversals",
    "tree",
    "views",
]