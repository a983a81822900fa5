"""Complement of a graph given by its adjacency matrix."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator

_INT = re.compile(r"[+-]?\d+")


def complement(matrix: list[list[int]]) -> list[list[int]]:
    """Flip every off-diagonal entry (x becomes 1 - x); the diagonal is kept."""
    return [
        [value if i == j else 1 - value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def _scan_ints(text: str) -> Iterator[int]:
    for token in text.split():
        match = _INT.match(token)
        if match is None:
            return
        yield int(match.group())
        if match.end() != len(token):
            return


def read_matrix(path) -> list[list[int]]:
    """Read n followed by an n-by-n matrix."""
    with open(path, encoding="utf-8") as handle:
        values = list(_scan_ints(handle.read()))
    if not values or values[0] < 0:
        raise ValueError("missing or invalid matrix size")
    n = values[0]
    cells = values[1:1 + n * n]
    if len(cells) < n * n:
        raise ValueError(f"expected {n * n} matrix entries, got {len(cells)}")
    return [cells[row * n:(row + 1) * n] for row in range(n)]


def format_matrix(matrix: list[list[int]]) -> str:
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print the complement of a graph.")
    parser.add_argument("file", nargs="?", default="input.txt", help="matrix file")
    args = parser.parse_args(argv)
    try:
        matrix = read_matrix(args.file)
    except OSError:
        print("Eroare deschidere fisier", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    sys.stdout.write(format_matrix(complement(matrix)))
    return 0