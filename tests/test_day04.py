from advent24.day04 import count_x_mas, count_xmas, main, parse_grid

SAMPLE = (
    "MMMSXXMASM\nMSAMXMSMSA\nAMXSXMAAMM\nMSAMASMSMX\nXMASAMXAMM\n"
    "XXAMMXXAMA\nSMSMSASXSS\nSAXAMASAAA\nMAMMMXMMMM\nMXMXAXMASX"
)


def _rotate(grid):
    width = len(grid[0])
    return ["".join(row[i] for row in reversed(grid)) for i in range(width)]


def test_parse_grid_rows():
    grid = parse_grid(SAMPLE)
    assert len(grid) == 10
    assert grid[0] == "MMMSXXMASM"


def test_sample_xmas():
    assert count_xmas(parse_grid(SAMPLE)) == 18


def test_sample_x_mas():
    assert count_x_mas(parse_grid(SAMPLE)) == 9


def test_single_word_both_ways():
    assert count_xmas(parse_grid("XMAS")) == count_xmas(parse_grid("SAMX")) == 1


def test_trailing_newline_changes_nothing():
    plain = parse_grid(SAMPLE)
    trailing = parse_grid(SAMPLE + "\n")
    assert count_xmas(trailing) == count_xmas(plain)
    assert count_x_mas(trailing) == count_x_mas(plain)


def test_counts_survive_rotation():
    grid = parse_grid(SAMPLE)
    rotated = _rotate(grid)
    assert count_xmas(rotated) == count_xmas(grid)
    assert count_x_mas(rotated) == count_x_mas(grid)


def test_counts_survive_transpose():
    grid = parse_grid(SAMPLE)
    transposed = ["".join(row[i] for row in grid) for i in range(len(grid[0]))]
    assert count_xmas(transposed) == count_xmas(grid)
    assert count_x_mas(transposed) == count_x_mas(grid)


def test_empty_grid_has_nothing():
    assert count_xmas(parse_grid("")) == 0
    assert count_x_mas(parse_grid("")) == 0


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    main([str(path)])
    grid = parse_grid(SAMPLE)
    expected = [str(count_xmas(grid)), str(count_x_mas(grid))]
    assert capsys.readouterr().out.split() == expected