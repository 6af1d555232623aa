"""Day 10: hiking trails on a topographic map."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

from advent24.inputs import DEFAULT_INPUT, read_input

PEAK = 9
TRAILHEAD = 0
# Right, down, left, up.
_NEIGHBOURS = ((0, 1), (1, 0), (0, -1), (-1, 0))

Grid = Sequence[Sequence[int]]
Point = tuple[int, int]


def parse_topography(text: str) -> list[list[int]]:
    """Parse rows of height digits."""
    grid: list[list[int]] = []
    for line in text.strip().split("\n"):
        row = line.strip()
        if not row.isdigit() or not row.isascii():
            raise ValueError(f"row must hold only digits: {row!r}")
        grid.append([int(char) for char in row])
    return grid


def trailheads(grid: Grid) -> list[Point]:
    """Return the positions of height 0 in row-major order."""
    return [
        (row, col)
        for row, line in enumerate(grid)
        for col, height in enumerate(line)
        if height == TRAILHEAD
    ]


def _inside(grid: Grid, row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[0])


def _peak_arrivals(grid: Grid, start: Point) -> Iterator[Point]:
    """Yield a peak once for every uphill trail from ``start`` that reaches it."""
    stack = [start]
    while stack:
        row, col = stack.pop()
        height = grid[row][col]
        for dr, dc in _NEIGHBOURS:
            nr, nc = row + dr, col + dc
            if not _inside(grid, nr, nc) or grid[nr][nc] != height + 1:
                continue
            if grid[nr][nc] == PEAK:
                yield (nr, nc)
            else:
                stack.append((nr, nc))


def trailhead_score(grid: Grid, start: Point) -> int:
    """Count the distinct peaks reachable from ``start`` by steps of +1."""
    return len(set(_peak_arrivals(grid, start)))


def trailhead_rating(grid: Grid, start: Point) -> int:
    """Count the distinct uphill trails from ``start`` that end on a peak."""
    return sum(1 for _ in _peak_arrivals(grid, start))


def total_score(grid: Grid) -> int:
    """Sum the scores of all trailheads."""
    return sum(trailhead_score(grid, start) for start in trailheads(grid))


def total_rating(grid: Grid) -> int:
    """Sum the ratings of all trailheads."""
    return sum(trailhead_rating(grid, start) for start in trailheads(grid))


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    grid = parse_topography(read_input(path))
    print(total_score(grid))
    print(total_rating(grid))


if __name__ == "__main__":
    main()