# aoc2025

Solutions to the first six puzzles of Advent of Code 2025, as a small Python
library and a command-line tool. It has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

The `aoc2025` command solves both parts of one day and prints the answers:

```
aoc2025 4
aoc2025 4 --input my-input.txt
aoc2025 4 -i - < my-input.txt
```

- `day` (required): the day to solve, 1 to 6.
- `-i`, `--input`: the input file, or `-` to read standard input. Without it
  the command reads `input/2025/dayNN.txt` (for example
  `input/2025/day04.txt`) relative to the current directory.

Trailing line breaks are removed from the input before it is solved. The
output looks like:

```
day04 part 1: 13
day04 part 2: 43
```

If the input file cannot be read, the command prints a message to standard
error and exits with status 1. `aoc2025 --help` lists the arguments.

## Library

Each day is a module with its own solution functions:

| Module            | Functions                                                       |
|-------------------|-----------------------------------------------------------------|
| `aoc2025.day01`   | `part_1(text)`, `part_2(text)`                                  |
| `aoc2025.day02`   | `generate(text)`, `part_1(ranges)`, `part_2(ranges)`            |
| `aoc2025.day03`   | `part_1(text)`, `part_2(text)`                                  |
| `aoc2025.day04`   | `parse(text)`, `part_1(grid)`, `part_2(grid)`, `Warehouse`      |
| `aoc2025.day05`   | `parse(text)`, `part_1(text)`, `part_2_brute(parsed)`, `part_2_optimized(text)` |
| `aoc2025.day06`   | `part_1(text)`, `part_2(text)`                                  |

Day 2 and day 4 take parsed input: first call `day02.generate` or
`day04.parse` on the puzzle text, then pass the result to the parts.
`day05.part_2_brute` takes the result of `day05.parse`; it gives the same
answer as `day05.part_2_optimized` but walks every identifier in every range.

```python
from aoc2025 import day01, day04

rotations = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82"
print(day01.part_1(rotations))  # 3
print(day01.part_2(rotations))  # 6

grid = day04.parse("..@@.\n@@@.@\n.@.@.")
print(day04.part_1(grid))
```

Malformed input raises `ValueError`, for example a range without a `-` in
day 2 or day 5, or a character other than `@` and `.` in a day 4 map.

`aoc2025.shared.Grid` is a small two-dimensional grid stored row by row and
indexed by `(x, y)`. Its `count_all_neighbours(x, y, neighbour_kind)` counts
the up to eight surrounding cells equal to a given value.

To run a day from code, call `aoc2025.cli.run_day(day, text)` with the day
number and the puzzle input; it returns the answers to both parts as a tuple
and raises `ValueError` for a day that has no solution.

## What it does not do

Only days 1 to 6 are solved. The package does not download puzzle inputs or
submit answers, and it has no timing or benchmarking of the solutions.