"""Turning a first-child / right-sibling tree into a binary tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from grafuri.child_sibling import ChildSiblingTree, read_tree


@dataclass
class BinaryTreeNode:
    """A binary node: left is the first child, right the next sibling."""

    key: int
    left: Optional[BinaryTreeNode] = None
    right: Optional[BinaryTreeNode] = None


def transform(tree: ChildSiblingTree, ref: int) -> Optional[BinaryTreeNode]:
    """Binary tree rooted at ref; None when ref is 0."""
    if ref == 0:
        return None
    return BinaryTreeNode(
        key=tree.node_key(ref),
        left=transform(tree, tree.first_child(ref)),
        right=transform(tree, tree.right_sibling(ref)),
    )


def pre_order(root: Optional[BinaryTreeNode]) -> list[int]:
    """Keys in node, left, right order."""
    result = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        result.append(node.key)
        stack.extend(child for child in (node.right, node.left) if child)
    return result


def _join(keys: Iterable[int], separator: str) -> str:
    return "".join(f"{key}{separator}" for key in keys)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Turn a first-child/right-sibling tree into a binary tree.")
    parser.add_argument("file", help="file of 'key first_child right_sibling' triples")
    args = parser.parse_args(argv)
    try:
        tree = read_tree(args.file)
    except OSError:
        print("Eroare deschidere fisier", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    root = transform(tree, tree.root())
    binary_keys = pre_order(root)
    sys.stdout.write(
        "\n"
        + tree.format_table()
        + "\nPreorder: \n"
        + _join(tree.pre_order(), ", ")
        + _join(binary_keys, " ")
        + "\nPreorderBin: \n"
        + _join(binary_keys, " ")
    )
    return 0