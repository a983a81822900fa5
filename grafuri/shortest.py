"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from typing import Optional

UNREACHABLE = 9999
MAX_VERTICES = 30
_INT = re.compile(r"[+-]?\d+")


def _scan_ints(text: str) -> Iterator[int]:
    for token in text.split():
        match = _INT.match(token)
        if match is None:
            return
        yield int(match.group())
        if match.end() != len(token):
            return


def read_weighted(path, directed=True, header_fields=1) -> tuple[tuple[int, ...], list[list[int]]]:
    """Read header integers (the first is the vertex count) and "a b cost" triples."""
    with open(path, encoding="utf-8") as handle:
        values = list(_scan_ints(handle.read()))
    if len(values) < header_fields or header_fields < 1:
        raise ValueError(f"expected {header_fields} header values")
    header = tuple(values[:header_fields])
    n = header[0]
    if not 0 <= n <= MAX_VERTICES:
        raise ValueError(f"vertex count must be in 0..{MAX_VERTICES}, got {n}")
    matrix = [[0] * n for _ in range(n)]
    stream = iter(values[header_fields:])
    for a, b, cost in zip(stream, stream, stream):
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge {a} - {b} has a vertex outside 0..{n - 1}")
        matrix[a][b] = cost
        if not directed:
            matrix[b][a] = cost
    return header, matrix


def _check_start(matrix: list[list[int]], start: int) -> None:
    if not 0 <= start < len(matrix):
        raise IndexError(f"start vertex {start} out of range")


def _closest(dist: list[int], visited: list[bool]) -> Optional[int]:
    candidates = [(d, v) for v, d in enumerate(dist) if not visited[v] and d < UNREACHABLE]
    return min(candidates)[1] if candidates else None


def dijkstra(matrix: list[list[int]], start: int = 0) -> list[int]:
    """Distances from start; UNREACHABLE where there is no path."""
    _check_start(matrix, start)
    n = len(matrix)
    dist = [UNREACHABLE] * n
    dist[start] = 0
    visited = [False] * n
    for _ in range(n - 1):
        u = _closest(dist, visited)
        if u is None:
            break
        visited[u] = True
        for v, weight in enumerate(matrix[u]):
            if not visited[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def dijkstra_with_wait(
    matrix: list[list[int]], wait: int, start: int = 0
) -> tuple[list[int], list[Optional[int]]]:
    """Distances and predecessors when every stop after the start costs wait extra."""
    _check_start(matrix, start)
    n = len(matrix)
    dist = [UNREACHABLE] * n
    pred: list[Optional[int]] = [None] * n
    dist[start] = 0
    visited = [False] * n
    for _ in range(n - 1):
        u = _closest(dist, visited)
        if u is None:
            break
        visited[u] = True
        for v, weight in enumerate(matrix[u]):
            if visited[v] or weight <= 0:
                continue
            total = dist[u] + weight + (wait if u != start else 0)
            if total < dist[v]:
                dist[v] = total
                pred[v] = u
    return dist, pred


def path_to(predecessors: list[Optional[int]], destination: int) -> list[int]:
    """Vertices from the root of the predecessor chain to destination."""
    path = [destination]
    while (previous := predecessors[path[-1]]) is not None:
        path.append(previous)
    path.reverse()
    return path


def _parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("file", nargs="?", default="input.txt", help="graph file")
    return parser


def main_factory(argv=None) -> int:
    args = _parser("Cheapest route from the first factory to the last.").parse_args(argv)
    try:
        (n,), matrix = read_weighted(args.file, directed=True, header_fields=1)
    except OSError:
        print("Eroare la deschidere fisier", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    if n < 1:
        print("graph has no vertices", file=sys.stderr)
        return 1
    dist = dijkstra(matrix, 0)
    print(f"Costul de la fabrica 1 la fabrica {n} este {dist[n - 1]}")
    return 0


def main_towns(argv=None) -> int:
    args = _parser("Routes from the first town with a waiting time at each stop.").parse_args(argv)
    try:
        (n, wait), matrix = read_weighted(args.file, directed=False, header_fields=2)
    except OSError:
        print("Eroare la deschidere fisier", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    if n < 1:
        return 0
    dist, pred = dijkstra_with_wait(matrix, wait, 0)
    for town in range(1, n):
        if dist[town] == UNREACHABLE:
            print("Nu exista drum")
            continue
        route = " -> ".join(f"L{v + 1}" for v in path_to(pred, town))
        print(f"Drum de la L1 la L{town + 1}: {route} cu costul {dist[town]}")
    return 0