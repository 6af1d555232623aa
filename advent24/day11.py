"""Day 11: stones that change every time you blink."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Mapping

from advent24.inputs import DEFAULT_INPUT, read_input

FIRST_BLINKS = 25
SECOND_BLINKS = 75
MULTIPLIER = 2024


def parse_stones(text: str) -> list[str]:
    """Return the engraved numbers, as written, separated by single spaces."""
    return [field.strip() for field in text.strip().split(" ")]


def _change(stone: str) -> list[str]:
    if stone == "0":
        return ["1"]
    if len(stone) % 2 == 0:
        half = len(stone) // 2
        return [stone[:half], str(int(stone[half:]))]
    return [str(int(stone) * MULTIPLIER)]


def blink(stones: Iterable[str]) -> list[str]:
    """Return the row of stones after one blink, order kept."""
    return [new for stone in stones for new in _change(stone)]


def blink_counts(counts: Mapping[str, int]) -> dict[str, int]:
    """Blink once over stones given as a count per engraving."""
    result: Counter[str] = Counter()
    for stone, count in counts.items():
        for new in _change(stone):
            result[new] += count
    return dict(result)


def count_stones(stones: Iterable[str], blinks: int) -> int:
    """Count the stones after blinking ``blinks`` times."""
    counts: Mapping[str, int] = Counter(stones)
    for _ in range(blinks):
        counts = blink_counts(counts)
    return sum(counts.values())


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    stones = parse_stones(read_input(path))
    for blinks in (FIRST_BLINKS, SECOND_BLINKS):
        print(f"after {blinks}  stones {count_stones(stones, blinks)}")


if __name__ == "__main__":
    main()