import pytest

from advent24.day08 import antinodes, harmonic_antinodes, main, parse_antennas

EXAMPLE = (
    "............\n........0...\n.....0......\n.......0....\n"
    "....0.......\n......A.....\n............\n............\n"
    "........A...\n.........A..\n............\n............\n"
)
DIAGONAL = "a...\n.a..\n....\n....\n"


def test_parse_antennas():
    assert parse_antennas("a.\n.b\n") == ({"a": [(0, 0)], "b": [(1, 1)]}, 2, 2)


def test_parse_antennas_ignores_walls_and_dots():
    antennas, height, width = parse_antennas("#.\n.#")
    assert antennas == {}
    assert (height, width) == (2, 2)


def test_parse_antennas_empty_raises():
    with pytest.raises(ValueError):
        parse_antennas("\n \n")


def test_example_counts():
    assert len(antinodes(EXAMPLE)) == 14
    assert len(harmonic_antinodes(EXAMPLE)) == 34


def test_diagonal_pair_antinode():
    assert antinodes(DIAGONAL) == {(2, 2)}


def test_harmonics_include_the_antennas_themselves():
    found = harmonic_antinodes(DIAGONAL)
    assert {(0, 0), (1, 1)} <= found


def test_simple_antinodes_are_harmonic_on_square_map():
    assert antinodes(EXAMPLE) <= harmonic_antinodes(EXAMPLE)


def test_lone_antenna_has_no_antinodes():
    assert antinodes("..\n.a") == set()
    assert harmonic_antinodes("..\n.a") == set()


def test_antinodes_stay_on_map():
    antennas, height, width = parse_antennas(EXAMPLE)
    for row, col in harmonic_antinodes(EXAMPLE):
        assert 0 <= row < height and 0 <= col < width


def test_main_prints_both_counts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    main([str(path)])
    assert capsys.readouterr().out == "14\n34\n"