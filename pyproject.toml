[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treealgos"
version = "0.1.0"
description = "Binary-tree, general-tree and max-heap algorithms: traversals, views, paths, structural checks and a heap merge."
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "general tree", "traversal", "heap", "algorithms", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["treealgos"]

[tool.pytest.ini_options]
addopts = "-ra"
