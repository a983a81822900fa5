"""Binary search trees of integers, with duplicates ignored."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

_INT = re.compile(r"[+-]?\d+")


@dataclass
class BinaryNode:
    data: int
    left: Optional[BinaryNode] = None
    right: Optional[BinaryNode] = None


def insert(root: Optional[BinaryNode], value: int) -> BinaryNode:
    """Insert value and return the (possibly new) root; equal values are ignored."""
    if root is None:
        return BinaryNode(value)
    node = root
    while value != node.data:
        if value < node.data:
            if node.left is None:
                node.left = BinaryNode(value)
                break
            node = node.left
        else:
            if node.right is None:
                node.right = BinaryNode(value)
                break
            node = node.right
    return root


def build_tree(values: Iterable[int]) -> Optional[BinaryNode]:
    root = None
    for value in values:
        root = insert(root, value)
    return root


def pre_order(root: Optional[BinaryNode]) -> list[int]:
    result = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        stack.extend(child for child in (node.right, node.left) if child)
    return result


def in_order(root: Optional[BinaryNode]) -> list[int]:
    result = []
    stack: list[BinaryNode] = []
    node = root
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def post_order(root: Optional[BinaryNode]) -> list[int]:
    result = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        stack.extend(child for child in (node.left, node.right) if child)
    result.reverse()
    return result


def format_tree(root: Optional[BinaryNode]) -> str:
    """The three traversals, one per line, or a note that the tree is empty."""
    if root is None:
        return "Arbore gol\n"

    def line(label: str, values: list[int]) -> str:
        return label + "".join(f"{value} " for value in values) + "\n"

    return (
        line("Parcurgere inOrdine: ", in_order(root))
        + line("Parcurgere preOrdine: ", pre_order(root))
        + line("Parcurgere postOrdine: ", post_order(root))
    )


def _scan_ints(text: str) -> Iterator[int]:
    for token in text.split():
        match = _INT.match(token)
        if match is None:
            return
        yield int(match.group())
        if match.end() != len(token):
            return


def read_values(path) -> list[int]:
    """Integers from the start of a text file, up to the first non-integer."""
    with open(path, encoding="utf-8") as handle:
        return list(_scan_ints(handle.read()))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build a binary search tree and print its traversals.")
    parser.add_argument("file", help="file of whitespace-separated integers")
    args = parser.parse_args(argv)
    try:
        values = read_values(args.file)
    except OSError:
        print("Eroare deschidere fisier", file=sys.stderr)
        return 1
    sys.stdout.write(format_tree(build_tree(values)))
    return 0