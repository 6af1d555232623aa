import pytest

from advent24.day07 import (
    ALL_OPERATORS,
    BASIC_OPERATORS,
    calibration_total,
    concat,
    evaluate,
    main,
    parse_equations,
    solutions,
)

EXAMPLE = (
    "190: 10 19\n3267: 81 40 27\n83: 17 5\n156: 15 6\n7290: 6 8 6 15\n"
    "161011: 16 10 13\n192: 17 8 14\n21037: 9 7 18 13\n292: 11 6 16 20"
)


def test_parse_equations_skips_empty_lines():
    assert parse_equations("190: 10 19\n\n83: 17 5\n") == [
        (190, [10, 19]),
        (83, [17, 5]),
    ]


def test_parse_equations_without_colon_raises():
    with pytest.raises(ValueError):
        parse_equations("190 10 19")


def test_concat_joins_digits():
    assert concat(12, 345) == 12345


def test_evaluate_left_to_right():
    assert evaluate([81, 40, 27], ["+", "*"]) == 3267


def test_evaluate_with_concatenation():
    assert evaluate([6, 8, 6, 15], ["*", "||", "*"]) == 7290


def test_evaluate_single_number():
    assert evaluate([190], []) == 190


def test_evaluate_wrong_operator_count_raises():
    with pytest.raises(ValueError):
        evaluate([1, 2, 3], ["+"])


def test_evaluate_unknown_operator_raises():
    with pytest.raises(ValueError):
        evaluate([1, 2], ["-"])


def test_evaluate_empty_raises():
    with pytest.raises(ValueError):
        evaluate([], [])


def test_solutions_in_generation_order():
    assert solutions(3267, [81, 40, 27]) == ["81 + 40 * 27", "81 * 40 + 27"]


def test_solutions_none_found():
    assert solutions(83, [17, 5]) == []


def test_solutions_need_concatenation():
    assert solutions(7290, [6, 8, 6, 15], BASIC_OPERATORS) == []
    assert solutions(7290, [6, 8, 6, 15], ALL_OPERATORS) == ["6 * 8 || 6 * 15"]


def test_solutions_empty_numbers_raises():
    with pytest.raises(ValueError):
        solutions(1, [])


def test_example_totals():
    equations = parse_equations(EXAMPLE)
    assert calibration_total(equations) == 3749
    assert calibration_total(equations, ALL_OPERATORS) == 11387


def test_more_operators_never_lower_total():
    equations = parse_equations(EXAMPLE)
    assert calibration_total(equations, ALL_OPERATORS) >= calibration_total(
        equations, BASIC_OPERATORS
    )


def test_main_prints_both_totals(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    main([str(path)])
    assert capsys.readouterr().out == "3749\n11387\n"