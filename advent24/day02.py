"""Day 2: safety of reactor level reports."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence

from advent24.inputs import read_input

DEFAULT_REPORTS = "input_san.txt"
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_reports(text: str) -> dict[str, list[int]]:
    """Parse ``name = [a, b, ...]`` lines; other lines and bad numbers are skipped."""
    reports: dict[str, list[int]] = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if not sep:
            continue
        fields = (field.strip() for field in value.strip().strip("[]").split(","))
        reports[key.strip()] = [int(f) for f in fields if _INTEGER.fullmatch(f)]
    return reports


def is_safe(levels: Sequence[int]) -> bool:
    """True when levels strictly rise or strictly fall by steps of 1 to 3."""
    steps = [b - a for a, b in zip(levels, levels[1:])]
    return all(1 <= s <= 3 for s in steps) or all(-3 <= s <= -1 for s in steps)


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """True when the report is safe, or becomes safe with one level removed."""
    if is_safe(levels):
        return True
    return any(
        is_safe([*levels[:skip], *levels[skip + 1:]]) for skip in range(len(levels))
    )


def count_safe(reports: Iterable[Sequence[int]], dampener: bool = False) -> int:
    """Count the safe reports, optionally tolerating one bad level each."""
    judge = is_safe_with_dampener if dampener else is_safe
    return sum(1 for levels in reports if judge(levels))


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_REPORTS
    reports = list(parse_reports(read_input(path)).values())
    print(count_safe(reports))
    print(count_safe(reports, dampener=True))


if __name__ == "__main__":
    main()