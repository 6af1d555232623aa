"""Day 5: checking and fixing the page order of print updates."""

from __future__ import annotations

import re
import sys
from collections.abc import Mapping, Sequence

from advent24.inputs import DEFAULT_INPUT, read_input

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Maps a page to the pages that must be printed before it.
Rules = Mapping[int, Sequence[int]]


def _parse_update(line: str) -> list[int]:
    fields = (field.strip() for field in line.split(","))
    return [int(field) for field in fields if _INTEGER.fullmatch(field)]


def parse_rules(text: str) -> dict[int, list[int]]:
    """Parse ``a|b`` lines into a map from ``b`` to the pages before it."""
    rules: dict[int, list[int]] = {}
    for line in text.split("\n"):
        fields = line.split("|")
        if len(fields) < 2:
            raise ValueError(f"malformed ordering rule: {line!r}")
        before, after = int(fields[0].strip()), int(fields[1].strip())
        rules.setdefault(after, []).append(before)
    return rules


def parse_manual(text: str) -> tuple[dict[int, list[int]], list[list[int]]]:
    """Split the input into ordering rules and non-empty page updates."""
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("input needs a rules section and an updates section")
    updates = [_parse_update(line) for line in sections[1].split("\n")]
    return parse_rules(sections[0]), [update for update in updates if update]


def is_ordered(update: Sequence[int], rules: Rules) -> bool:
    """True when no page is followed by a page that must precede it."""
    for index, page in enumerate(update):
        before = rules.get(page)
        if before and any(later in before for later in update[index:]):
            return False
    return True


def reorder(update: Sequence[int], rules: Rules) -> list[int]:
    """Return the update's pages in an order that satisfies the rules."""
    pages = set(update)
    graph = {
        page: [before for before in rules.get(page, ()) if before in pages]
        for page in update
    }
    visited: set[int] = set()
    in_progress: set[int] = set()
    order: list[int] = []

    def visit(page: int) -> bool:
        if page in in_progress:
            return False
        if page not in visited:
            in_progress.add(page)
            if not all(visit(before) for before in graph[page]):
                return False
            in_progress.discard(page)
            visited.add(page)
            order.append(page)
        return True

    for page in update:
        if page not in visited:
            visit(page)
    return order


def sum_correct_middles(text: str) -> int:
    """Sum the middle pages of the updates that are already in order."""
    rules, updates = parse_manual(text)
    return sum(u[len(u) // 2] for u in updates if is_ordered(u, rules))


def sum_fixed_middles(text: str) -> int:
    """Sum the middle pages of the out-of-order updates once reordered."""
    rules, updates = parse_manual(text)
    total = 0
    for update in updates:
        if is_ordered(update, rules):
            continue
        fixed = reorder(update, rules)
        if fixed:
            total += fixed[(len(fixed) - 1) // 2]
    return total


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    text = read_input(path)
    print(sum_correct_middles(text))
    print(sum_fixed_middles(text))


if __name__ == "__main__":
    main()