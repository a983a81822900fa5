"""General trees stored as a first-child / right-sibling table."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

MAX_NODES = 100
_BYTE_LIMIT = 256
_SEPARATOR = "-" * 36
_INT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class ChildSiblingNode:
    """One table row: references to the first child and right sibling, and a key."""

    first_child: int = 0
    right_sibling: int = 0
    key: int = 0


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value < _BYTE_LIMIT:
        raise ValueError(f"{name} must be in 0..{_BYTE_LIMIT - 1}, got {value}")


class ChildSiblingTree:
    """A tree whose nodes are addressed by 1-based references; 0 means "none"."""

    def __init__(self) -> None:
        self._nodes: list[ChildSiblingNode] = [ChildSiblingNode()]

    def __len__(self) -> int:
        return len(self._nodes) - 1

    def insert(self, first_child: int, right_sibling: int, key: int) -> int:
        """Append a node and return its reference."""
        _check_byte("first_child", first_child)
        _check_byte("right_sibling", right_sibling)
        _check_byte("key", key)
        if len(self._nodes) >= MAX_NODES:
            raise ValueError(f"tree is full ({MAX_NODES - 1} nodes)")
        self._nodes.append(ChildSiblingNode(first_child, right_sibling, key))
        return len(self)

    def _node(self, ref: int) -> ChildSiblingNode:
        if not 0 <= ref < MAX_NODES:
            raise IndexError(f"node reference {ref} out of range")
        if ref > len(self):
            return ChildSiblingNode()
        return self._nodes[ref]

    def root(self) -> int:
        """Reference of the root, or 0 for an empty tree."""
        return 1 if len(self) else 0

    def node_key(self, ref: int) -> int:
        """Key of a node; 0 for references past the end of the tree."""
        if ref > len(self):
            return 0
        return self._node(ref).key

    def first_child(self, ref: int) -> int:
        return self._node(ref).first_child

    def right_sibling(self, ref: int) -> int:
        return self._node(ref).right_sibling

    def find_index(self, key: int, first_child: int) -> int:
        """Reference of the first node with this key and first child, or 0."""
        for index, node in enumerate(self._nodes):
            if node.key == key and node.first_child == first_child:
                return index
        return 0

    def _children(self, ref: int) -> Iterator[int]:
        child = self.first_child(ref)
        if not child:
            return
        yield child
        while child := self.right_sibling(child):
            yield child

    def _pre(self, ref: int) -> Iterator[int]:
        yield self.node_key(ref)
        for child in self._children(ref):
            yield from self._pre(child)

    def _in(self, ref: int) -> Iterator[int]:
        children = list(self._children(ref))
        if not children:
            yield self.node_key(ref)
            return
        yield from self._in(children[0])
        yield self.node_key(ref)
        for child in children[1:]:
            yield from self._in(child)

    def _post(self, ref: int) -> Iterator[int]:
        for child in self._children(ref):
            yield from self._post(child)
        yield self.node_key(ref)

    def pre_order(self) -> list[int]:
        return list(self._pre(self.root())) if len(self) else []

    def in_order(self) -> list[int]:
        return list(self._in(self.root())) if len(self) else []

    def post_order(self) -> list[int]:
        return list(self._post(self.root())) if len(self) else []

    def format_table(self) -> str:
        """The node table, one column per slot including the sentinel slot 0."""
        rows = (
            ("Index:        ", range(len(self._nodes))),
            ("Key:          ", (node.key for node in self._nodes)),
            ("Prim_fiu:     ", (node.first_child for node in self._nodes)),
            ("Frate_dreapta:", (node.right_sibling for node in self._nodes)),
        )
        lines = [label + "".join(f"{value:10d} " for value in values) for label, values in rows]
        lines.append(_SEPARATOR)
        return "\n".join(lines)


def _scan_ints(text: str) -> Iterator[int]:
    for token in text.split():
        match = _INT.match(token)
        if match is None:
            return
        yield int(match.group())
        if match.end() != len(token):
            return


def read_tree(path) -> ChildSiblingTree:
    """Read "key first_child right_sibling" triples from a text file."""
    with open(path, encoding="utf-8") as handle:
        values = [value % _BYTE_LIMIT for value in _scan_ints(handle.read())]
    tree = ChildSiblingTree()
    stream = iter(values)
    for key, child, sibling in zip(stream, stream, stream):
        tree.insert(child, sibling, key)
    return tree


def _join_keys(keys: Iterable[int]) -> str:
    return "".join(f"{key}, " for key in keys)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print a first-child/right-sibling tree.")
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
    sys.stdout.write(
        "\n"
        + tree.format_table()
        + "\nPreorder: \n"
        + _join_keys(tree.pre_order())
        + "\nInorder: \n"
        + _join_keys(tree.in_order())
        + "\nPostorder: \n"
        + _join_keys(tree.post_order())
    )
    return 0