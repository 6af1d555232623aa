"""Day 8: antinodes of antennas sharing a frequency."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from itertools import combinations

from advent24.inputs import DEFAULT_INPUT, read_input

_NOT_ANTENNAS = frozenset(".#/")

Point = tuple[int, int]


def parse_antennas(text: str) -> tuple[dict[str, list[Point]], int, int]:
    """Return antenna positions by frequency, and the map's height and width.

    Positions are ``(row, col)`` pairs in row-major order; blank lines are skipped.
    """
    rows = [line for line in text.split("\n") if line.strip()]
    if not rows:
        raise ValueError("the map is empty")
    antennas: dict[str, list[Point]] = {}
    for row, line in enumerate(rows):
        for col, char in enumerate(line):
            if char not in _NOT_ANTENNAS:
                antennas.setdefault(char, []).append((row, col))
    return antennas, len(rows), len(rows[0])


def _pairs(antennas: dict[str, list[Point]]) -> Iterator[tuple[Point, Point]]:
    for positions in antennas.values():
        yield from combinations(positions, 2)


def _inside(point: Point, row_limit: int, col_limit: int) -> bool:
    row, col = point
    return 0 <= row < row_limit and 0 <= col < col_limit


def antinodes(text: str) -> set[Point]:
    """Points twice as far from one antenna of a pair as from the other."""
    antennas, height, _width = parse_antennas(text)
    found: set[Point] = set()
    for (r1, c1), (r2, c2) in _pairs(antennas):
        dr, dc = r1 - r2, c1 - c2
        for candidate in ((r1 + dr, c1 + dc), (r2 - dr, c2 - dc)):
            # Both axes are bounded by the map height.
            if _inside(candidate, height, height):
                found.add(candidate)
    return found


def harmonic_antinodes(text: str) -> set[Point]:
    """Every in-bounds point in line with a pair, at whole multiples of their gap."""
    antennas, height, width = parse_antennas(text)
    found: set[Point] = set()
    for (r1, c1), (r2, c2) in _pairs(antennas):
        dr, dc = r1 - r2, c1 - c2
        for (row, col), sign in (((r1, c1), 1), ((r2, c2), -1)):
            # Rows are bounded by the width and columns by the height.
            while _inside((row, col), width, height):
                found.add((row, col))
                row, col = row + sign * dr, col + sign * dc
    return found


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    text = read_input(path)
    print(len(antinodes(text)))
    print(len(harmonic_antinodes(text)))


if __name__ == "__main__":
    main()