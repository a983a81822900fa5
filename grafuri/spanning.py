"""Minimum spanning trees (Prim and Kruskal) on adjacency matrices."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional

INFINITY = 9999
MAX_VERTICES = 30
_INT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Edge:
    u: int
    v: int
    cost: int


def _scan_ints(text: str) -> Iterator[int]:
    for token in text.split():
        match = _INT.match(token)
        if match is None:
            return
        yield int(match.group())
        if match.end() != len(token):
            return


def read_graph(path) -> list[list[int]]:
    """Read a vertex count and "a b cost" triples into a symmetric matrix."""
    with open(path, encoding="utf-8") as handle:
        values = list(_scan_ints(handle.read()))
    if not values:
        raise ValueError("missing vertex count")
    n = values[0]
    if not 0 <= n <= MAX_VERTICES:
        raise ValueError(f"vertex count must be in 0..{MAX_VERTICES}, got {n}")
    matrix = [[0] * n for _ in range(n)]
    stream = iter(values[1:])
    for a, b, cost in zip(stream, stream, stream):
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge {a} - {b} has a vertex outside 0..{n - 1}")
        matrix[a][b] = cost
        matrix[b][a] = cost
    return matrix


def most_connected(matrix: list[list[int]]) -> Optional[tuple[int, int]]:
    """(vertex, degree) of the first vertex with the highest degree, or None."""
    degrees = [sum(1 for cost in row if cost) for row in matrix]
    if not degrees:
        return None
    best = max(degrees)
    return degrees.index(best), best


def _cheapest(matrix: list[list[int]], allowed: Callable[[int, int], bool]) -> Optional[Edge]:
    best: Optional[Edge] = None
    for i, row in enumerate(matrix):
        for j, cost in enumerate(row):
            limit = best.cost if best else INFINITY
            if cost and cost < limit and allowed(i, j):
                best = Edge(i, j, cost)
    return best


def prim(matrix: list[list[int]]) -> list[Edge]:
    """Spanning tree edges grown from vertex 0, in the order chosen."""
    in_tree = [False] * len(matrix)
    if in_tree:
        in_tree[0] = True
    edges = []
    for _ in range(len(matrix) - 1):
        edge = _cheapest(matrix, lambda i, j: in_tree[i] and not in_tree[j])
        if edge is None:
            break
        in_tree[edge.v] = True
        edges.append(edge)
    return edges


def kruskal(matrix: list[list[int]]) -> list[Edge]:
    """Spanning forest edges, cheapest first, joining distinct components."""
    labels = list(range(len(matrix)))
    edges = []
    for _ in range(len(matrix) - 1):
        edge = _cheapest(matrix, lambda i, j: labels[i] != labels[j])
        if edge is None:
            break
        old, new = labels[edge.v], labels[edge.u]
        labels = [new if label == old else label for label in labels]
        edges.append(edge)
    return edges


def fence_posts(total_length: int) -> int:
    """Posts needed for a fence of this length with one post every 100 units."""
    if total_length % 100 == 0:
        return total_length // 100 + 1
    return total_length // 100 + 2


def _load(argv, description: str) -> Optional[list[list[int]]]:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("file", nargs="?", default="input.txt", help="graph file")
    args = parser.parse_args(argv)
    try:
        return read_graph(args.file)
    except OSError:
        print("Eroare la deschidere fisier", file=sys.stderr)
    except ValueError as error:
        print(error, file=sys.stderr)
    return None


def main_network(argv=None) -> int:
    matrix = _load(argv, "Spanning trees of a computer network.")
    if matrix is None:
        return 1
    hub = most_connected(matrix)
    if hub is not None:
        print(f"Calculatorul {hub[0]} are cele mai multe conexiuni")
    print("Prim")
    for edge in prim(matrix):
        print(f"Muchia {edge.u} - {edge.v}, cost {edge.cost}")
    print("Kruskal")
    for edge in kruskal(matrix):
        print(f"Muchia {edge.u} - {edge.v}, cost {edge.cost}")
    return 0


def main_fence(argv=None) -> int:
    matrix = _load(argv, "Cheapest fence joining every region.")
    if matrix is None:
        return 1
    total = 0
    for edge in kruskal(matrix):
        print(f"Gard de la {edge.u} la {edge.v}, cost {edge.cost}")
        total += edge.cost
    print(f"Numar total de stalpi: {fence_posts(total)}")
    return 0