[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafuri"
version = "0.1.0"
description = "General trees, binary search trees, spanning trees, shortest paths and other small graph algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "tree",
    "binary-search-tree",
    "dijkstra",
    "prim",
    "kruskal",
    "spanning-tree",
    "traversal",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grafuri-child-sibling = "grafuri.child_sibling:main"
grafuri-parent-tree = "grafuri.parent_tree:main"
grafuri-bst = "grafuri.bst:main"
grafuri-transform = "grafuri.binary_transform:main"
grafuri-network = "grafuri.spanning:main_network"
grafuri-fence = "grafuri.spanning:main_fence"
grafuri-complement = "grafuri.complement:main"
grafuri-factory = "grafuri.shortest:main_factory"
grafuri-towns = "grafuri.shortest:main_towns"
grafuri-paths = "grafuri.paths:main"
grafuri-friends = "grafuri.friends:main"

[tool.hatch.build.targets.wheel]
packages = ["grafuri"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
