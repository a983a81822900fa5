"""General trees stored as a parent-pointer table."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

MAX_NODES = 100
_BYTE_LIMIT = 256
_SEPARATOR = "-" * 36
_INT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class ParentNode:
    """One table row: the parent reference and the key."""

    parent: int = 0
    key: int = 0

    @property
    def is_blank(self) -> bool:
        return self.parent == 0 and self.key == 0

    @property
    def is_linked(self) -> bool:
        return self.parent != 0 and self.key != 0


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value < _BYTE_LIMIT:
        raise ValueError(f"{name} must be in 0..{_BYTE_LIMIT - 1}, got {value}")


class ParentTree:
    """A tree whose nodes are addressed by 1-based references; 0 means "none"."""

    def __init__(self) -> None:
        self._nodes: list[ParentNode] = [ParentNode()]

    def __len__(self) -> int:
        return len(self._nodes) - 1

    def insert(self, parent: int, key: int) -> int:
        """Append a node and return its reference."""
        _check_byte("parent", parent)
        _check_byte("key", key)
        if len(self._nodes) >= MAX_NODES:
            raise ValueError(f"tree is full ({MAX_NODES - 1} nodes)")
        self._nodes.append(ParentNode(parent, key))
        return len(self)

    def node(self, ref: int) -> ParentNode:
        """The row at a reference; an empty row past the end of the tree."""
        if not 0 <= ref < MAX_NODES:
            raise IndexError(f"node reference {ref} out of range")
        if ref > len(self):
            return ParentNode()
        return self._nodes[ref]

    def root(self) -> int:
        return 1 if len(self) else 0

    def parent(self, ref: int) -> int:
        return self.node(ref).parent

    def node_key(self, ref: int) -> int:
        if ref > len(self):
            return 0
        return self.node(ref).key

    def first_child(self, ref: int) -> int:
        """Lowest reference whose parent is ref, or 0."""
        if not ref:
            return 0
        for index, node in enumerate(self._nodes[1:], start=1):
            if node.parent == ref:
                return index
        return 0

    def right_sibling(self, ref: int) -> int:
        """Next reference after ref sharing its parent, or 0."""
        if not ref:
            return 0
        parent = self.node(ref).parent
        for index, node in enumerate(self._nodes[ref + 1:], start=ref + 1):
            if node.parent == parent:
                return index
        return 0

    def find_index(self, key: int, parent: int) -> int:
        for index, node in enumerate(self._nodes):
            if node.key == key and node.parent == parent:
                return index
        return 0

    def delete(self, ref: int) -> None:
        """Remove a node and its direct children, compacting the table.

        Raises ValueError, leaving the tree unchanged, when a remaining row
        has exactly one of its parent and key equal to 0, since such a row
        cannot be compacted.
        """
        if not 1 <= ref <= len(self):
            raise IndexError(f"node reference {ref} out of range")
        nodes = list(self._nodes)
        nodes[ref] = ParentNode()
        for index in range(ref, len(nodes)):
            if nodes[index].parent == ref:
                nodes[index] = ParentNode()

        index = ref
        while index < len(nodes):
            current = nodes[index]
            if current.is_blank:
                del nodes[index]
                nodes[index:] = [
                    replace(moved, parent=moved.parent - 1) if moved.parent > index else moved
                    for moved in nodes[index:]
                ]
            elif current.is_linked:
                index += 1
            else:
                raise ValueError(f"cannot compact tree at node {index}: {current}")
        self._nodes = nodes

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
            ("Index: ", range(len(self._nodes))),
            ("Key:   ", (node.key for node in self._nodes)),
            ("Parent:", (node.parent for node in self._nodes)),
        )
        lines = [label + "".join(f"{value:5d} " for value in values) for label, values in rows]
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


def read_tree(path) -> ParentTree:
    """Read "key parent" pairs from a text file."""
    with open(path, encoding="utf-8") as handle:
        values = [value % _BYTE_LIMIT for value in _scan_ints(handle.read())]
    tree = ParentTree()
    stream = iter(values)
    for key, parent in zip(stream, stream):
        tree.insert(parent, key)
    return tree


def _join_keys(keys: Iterable[int]) -> str:
    return "".join(f"{key}, " for key in keys)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print a parent-pointer tree.")
    parser.add_argument("file", help="file of 'key parent' pairs")
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