"""Day 1: distances and similarity between two location lists."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Sequence

from advent24.inputs import DEFAULT_INPUT, read_input


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split lines of two whitespace-separated integers into two columns."""
    left: list[int] = []
    right: list[int] = []
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"line {number}: expected two numbers, got {line!r}")
        a, b = (int(field) for field in fields)
        left.append(a)
        right.append(b)
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum the distances between the lists' values paired in sorted order."""
    if len(left) != len(right):
        raise ValueError("lists must have the same length")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum each left value times how often it occurs in the right list."""
    occurrences = Counter(right)
    return sum(abs(value * occurrences[value]) for value in left)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    left, right = parse_lists(read_input(path))
    print(total_distance(left, right))
    print(similarity_score(left, right))


if __name__ == "__main__":
    main()