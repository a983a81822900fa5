"""Tree and graph algorithms: tree tables and traversals, binary search trees, spanning trees, shortest paths and more."""

__version__ = "0.1.0"