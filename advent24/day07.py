"""Day 7: operators that make calibration equations true."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterable, Sequence
from itertools import product

from advent24.inputs import DEFAULT_INPUT, read_input

ADD = "+"
MULTIPLY = "*"
CONCATENATE = "||"
BASIC_OPERATORS = (ADD, MULTIPLY)
ALL_OPERATORS = (ADD, MULTIPLY, CONCATENATE)

Equation = tuple[int, list[int]]


def concat(left: int, right: int) -> int:
    """Join the decimal digits of two numbers into one number."""
    return int(f"{left}{right}")


_APPLY: dict[str, Callable[[int, int], int]] = {
    ADD: operator.add,
    MULTIPLY: operator.mul,
    CONCATENATE: concat,
}


def parse_equations(text: str) -> list[Equation]:
    """Parse ``target: n1 n2 ...`` lines, skipping empty ones."""
    equations: list[Equation] = []
    for line in text.split("\n"):
        if not line:
            continue
        parts = line.split(":")
        if len(parts) < 2:
            raise ValueError(f"malformed equation: {line!r}")
        target = int(parts[0].strip())
        numbers = [int(field) for field in parts[1].split(" ") if field]
        equations.append((target, numbers))
    return equations


def evaluate(numbers: Sequence[int], operators: Sequence[str]) -> int:
    """Apply the operators strictly left to right."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    if len(operators) != len(numbers) - 1:
        raise ValueError("need exactly one operator between each pair of numbers")
    result = numbers[0]
    for op, value in zip(operators, numbers[1:]):
        try:
            apply = _APPLY[op]
        except KeyError:
            raise ValueError(f"unknown operator: {op!r}") from None
        result = apply(result, value)
    return result


def _expression(numbers: Sequence[int], operators: Sequence[str]) -> str:
    parts = [str(numbers[0])]
    for op, value in zip(operators, numbers[1:]):
        parts += [op, str(value)]
    return " ".join(parts)


def solutions(
    target: int, numbers: Sequence[int], operators: Sequence[str] = BASIC_OPERATORS
) -> list[str]:
    """Return every operator placement, as text, that evaluates to ``target``."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    return [
        _expression(numbers, ops)
        for ops in product(operators, repeat=len(numbers) - 1)
        if evaluate(numbers, ops) == target
    ]


def calibration_total(
    equations: Iterable[Equation], operators: Sequence[str] = BASIC_OPERATORS
) -> int:
    """Sum the targets of the equations that some placement makes true."""
    return sum(
        target for target, numbers in equations if solutions(target, numbers, operators)
    )


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    equations = parse_equations(read_input(path))
    print(calibration_total(equations, BASIC_OPERATORS))
    print(calibration_total(equations, ALL_OPERATORS))


if __name__ == "__main__":
    main()