# advent24

Solvers for days 1 to 11 of a 2024 advent-style puzzle calendar. Each day is
its own module of small functions that take the puzzle text (or values parsed
from it) and return the answers. Each day also has a command that reads a
puzzle input file and prints the answers to both parts.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Each day has a command. Give it the path of your puzzle input file:

```
advent24-day01 input.txt
advent24-day02 input.txt
advent24-day03 input.txt
advent24-day04 input.txt
advent24-day05 input.txt
advent24-day06 input.txt
advent24-day07 input.txt
advent24-day08 input.txt
advent24-day09 input.txt
advent24-day10 input.txt
advent24-day11 input.txt
```

If you leave out the path, the command reads `input.txt` from the current
directory. The one exception is `advent24-day02`, which reads `input_san.txt`.

Each command prints the part one answer and then the part two answer on
separate lines. `advent24-day11` prints them as `after 25  stones N` and
`after 75  stones N`.

## Input formats

- **day01**: one pair of whitespace-separated integers per line. Blank lines
  are skipped, and any other line raises `ValueError`.
- **day02**: one report per line, written as `name = [a, b, c, ...]`. Lines
  without `=` are skipped, and so are fields that are not integers.
- **day05**: ordering rules as `a|b` lines, then a blank line, then updates as
  comma-separated page numbers.
- **day07**: `target: n1 n2 ...` lines.
- The other days take the puzzle's grid, digit string or number list as
  given.

## Library use

Every module can also be used directly:

```python
from advent24 import day03, day07, day11

day03.sum_multiplications(
    "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
)
# 161

equations = day07.parse_equations("190: 10 19\n3267: 81 40 27\n")
day07.calibration_total(equations, day07.BASIC_OPERATORS)
# 3457
day07.solutions(190, [10, 19])
# ['10 * 19']

day11.count_stones(day11.parse_stones("125 17"), 25)
```

Input files are read with `advent24.inputs.read_input(path)`, which returns
the file's text decoded as UTF-8.

## What each day covers

| Module  | Part one                                          | Part two                                               |
|---------|---------------------------------------------------|--------------------------------------------------------|
| `day01` | `total_distance` between the sorted lists         | `similarity_score`                                     |
| `day02` | `count_safe` with `is_safe`                       | `count_safe(..., dampener=True)` with `is_safe_with_dampener` |
| `day03` | `sum_multiplications`                             | `sum_enabled_multiplications` (honours `do()` / `don't()`) |
| `day04` | `count_xmas` in all eight directions              | `count_x_mas` crosses                                  |
| `day05` | `sum_correct_middles` of updates in `is_ordered` order | `sum_fixed_middles` after `reorder`               |
| `day06` | `count_visited` by the patrolling guard           | `count_loop_positions` for one new obstruction         |
| `day07` | `calibration_total` with `BASIC_OPERATORS` (`+`, `*`) | `calibration_total` with `ALL_OPERATORS` (adds `\|\|` concatenation) |
| `day08` | `antinodes`                                       | `harmonic_antinodes`                                   |
| `day09` | `compact_blocks` then `checksum`                  | `compact_files` then `checksum`                        |
| `day10` | `total_score` of the trailheads                   | `total_rating`                                         |
| `day11` | `count_stones` after 25 blinks                    | `count_stones` after 75 blinks                         |

Some other public helpers:

- `day06`: `parse_room`, `find_guard`, `patrol`, `loops`, `Direction`, `Guard`.
  `patrol` raises `ValueError` if the guard never leaves the map.
- `day07`: `evaluate` applies operators strictly left to right, `concat` joins
  two numbers' digits, and `solutions` lists every operator placement that hits
  the target.
- `day09`: `parse_disk_map` and `expand` turn the dense map into blocks. A free
  block is `None`.
- `day10`: `parse_topography`, `trailheads`, `trailhead_score`,
  `trailhead_rating`.
- `day11`: `blink` works on the full row of stones, and `blink_counts` works on
  a count per engraving.

## Limitations

- No puzzle inputs come with the package. You must supply your own files.
- There is no single command that runs every day. Run each day's command on
  its own.
- `day08` checks bounds differently in each part. `antinodes` bounds both
  rows and columns by the map's height. `harmonic_antinodes` bounds rows by the
  width and columns by the height. On square maps the two rules agree.