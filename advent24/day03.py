"""Day 3: summing ``mul(a,b)`` instructions in corrupted memory."""

from __future__ import annotations

import re
import sys

from advent24.inputs import DEFAULT_INPUT, read_input

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_INSTRUCTION = re.compile(r"mul\(([0-9]+),([0-9]+)\)|do\(\)|don't\(\)")


def sum_multiplications(text: str) -> int:
    """Sum the products of every well-formed ``mul(a,b)``."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def sum_enabled_multiplications(text: str) -> int:
    """Sum products, honouring ``do()`` and ``don't()`` switches."""
    total = 0
    enabled = True
    for match in _INSTRUCTION.finditer(text):
        instruction = match.group(0)
        if instruction == "do()":
            enabled = True
        elif instruction == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    text = read_input(path)
    print(sum_multiplications(text))
    print(sum_enabled_multiplications(text))


if __name__ == "__main__":
    main()