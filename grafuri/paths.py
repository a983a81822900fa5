"""All strictly increasing paths between two vertices of a tournament graph."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator


def increasing_paths(n: int, start: int, end: int) -> Iterator[list[int]]:
    """Paths start -> ... -> end through increasing vertices, in depth-first order."""
    if start >= end or start < 0 or end >= n:
        raise ValueError("trebuie x < y si in intervalul [0, n-1]")

    def walk(path: list[int]) -> Iterator[list[int]]:
        current = path[-1]
        if current == end:
            yield list(path)
            return
        for following in range(current + 1, end + 1):
            path.append(following)
            yield from walk(path)
            path.pop()

    return walk([start])


def _ask(value, prompt: str) -> int:
    return value if value is not None else int(input(prompt))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="List increasing paths between two vertices.")
    parser.add_argument("n", type=int, nargs="?", help="number of vertices")
    parser.add_argument("start", type=int, nargs="?", help="start vertex")
    parser.add_argument("end", type=int, nargs="?", help="end vertex")
    args = parser.parse_args(argv)
    try:
        n = _ask(args.n, "Numar noduri (n): ")
        start = _ask(args.start, "Nod de start (x): ")
        end = _ask(args.end, "Nod de final (y): ")
        paths = increasing_paths(n, start, end)
    except ValueError:
        print("Valori invalide: trebuie x < y si in intervalul [0, n-1]")
        return 1
    print(f"Drumuri de la {start} la {end}:")
    for path in paths:
        print(" -> ".join(str(vertex) for vertex in path))
    return 0