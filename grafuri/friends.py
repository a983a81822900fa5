"""Friend suggestions from friends of friends in a small social network."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field

_INT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Person:
    name: str
    gender: int
    residence: str = ""


@dataclass
class Network:
    """People and the friendships between them, as index pairs in reading order."""

    people: list[Person]
    friendships: list[tuple[int, int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        for a, b in self.friendships:
            if not (0 <= a < len(self.people) and 0 <= b < len(self.people)):
                raise ValueError(f"friendship {a} - {b} refers to an unknown person")


def _scan_ints(text: str) -> Iterator[int]:
    for token in text.split():
        match = _INT.match(token)
        if match is None:
            return
        yield int(match.group())
        if match.end() != len(token):
            return


def _parse_person(line: str) -> Person:
    parts = line.split(maxsplit=2)
    if len(parts) < 2:
        raise ValueError(f"invalid person line: {line!r}")
    try:
        gender = int(parts[1])
    except ValueError:
        raise ValueError(f"invalid gender in line: {line!r}") from None
    return Person(parts[0], gender, parts[2].rstrip() if len(parts) > 2 else "")


def read_network(path) -> Network:
    """Read a count, one "name gender residence" line per person, then index pairs.

    Pairs naming an unknown person are skipped.
    """
    with open(path, encoding="utf-8") as handle:
        text = handle.read().lstrip()
    match = _INT.match(text)
    if match is None:
        raise ValueError("missing number of people")
    n = int(match.group())
    lines = text[match.end():].lstrip().split("\n")
    if n < 0 or len(lines) < n:
        raise ValueError(f"expected {n} people")
    people = [_parse_person(line) for line in lines[:n]]
    stream = iter(_scan_ints("\n".join(lines[n:])))
    friendships = [(a, b) for a, b in zip(stream, stream) if 0 <= a < n and 0 <= b < n]
    return Network(people, friendships)


def suggest_friends(network: Network, user: int, limit: int = 3) -> list[int]:
    """Friends of the user's friends who are not yet friends, at most limit of them."""
    count = len(network.people)
    if not 0 <= user < count:
        raise IndexError(f"user {user} out of range")
    neighbours: list[set[int]] = [set() for _ in range(count)]
    for a, b in network.friendships:
        neighbours[a].add(b)
        neighbours[b].add(a)
    direct = neighbours[user]
    suggestions: list[int] = []
    for friend in sorted(direct):
        for candidate in sorted(neighbours[friend]):
            if candidate != user and candidate not in direct and candidate not in suggestions:
                suggestions.append(candidate)
                if len(suggestions) == limit:
                    return suggestions
    return suggestions


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Suggest friends of friends.")
    parser.add_argument("file", nargs="?", default="input.txt", help="network file")
    parser.add_argument("--user", type=int, default=1, help="index of the user")
    args = parser.parse_args(argv)
    try:
        network = read_network(args.file)
    except OSError:
        print("Eroare la deschiderea fisierului", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    people = network.people
    print("\nRelatii de prietenie:")
    for a, b in network.friendships:
        print(f"{people[a].name} - {people[b].name}")
    print()
    try:
        suggestions = suggest_friends(network, args.user)
    except IndexError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"Sugestii pentru {people[args.user].name}:")
    for index in suggestions:
        print(f"- {people[index].name} (index {index})")
    if not suggestions:
        print("Nicio sugestie gasita.")
    return 0