# adventdays

Solvers for nine daily programming puzzles. Each day reads a plain-text
puzzle input and prints the answers to both of its parts.

| Day | Module               | Puzzle |
|-----|----------------------|--------|
| 1   | `adventdays.day01`   | Distance and similarity of two number lists |
| 2   | `adventdays.day02`   | Safe reports, with and without a dampener |
| 3   | `adventdays.day03`   | Summing `mul(a,b)` instructions, honouring `do()` / `don't()` |
| 4   | `adventdays.day04`   | Counting `XMAS` and X-shaped `MAS` in a letter grid |
| 5   | `adventdays.day05`   | Validating and reordering print-queue updates |
| 6   | `adventdays.day06`   | A guard's patrol and the spots that trap it in a loop |
| 7   | `adventdays.day07`   | Equations solvable with `+`, `*` and concatenation |
| 8   | `adventdays.day08`   | Antinodes of antenna pairs, simple and resonant |
| 9   | `adventdays.day09`   | Compacting a disk block by block and file by file |

## Installation

```
pip install .
```

## Command line

```
adventdays DAY [INPUT]
```

`DAY` is a day number from 1 to 9. `INPUT` is the puzzle input file and
defaults to `input.txt` in the current directory. For example:

```
adventdays 7 puzzles/day07.txt
```

The answers to both parts are printed to standard output. Some days print
more: day 4 and day 6 show the grid first, and day 8 shows the map and a
picture of the antinodes for each part. Days 6, 8 and 9 also report how
long they took on standard error.

If the input file cannot be opened, the command stops with a
`No input: ...` message and a non-zero exit status. A day number outside
1–9 is rejected with a usage error.

## As a library

Each day module has `part_one(lines)` and `part_two(lines)`, which take the
input as a list of lines and return the answer as an integer:

```python
from adventdays.util import read_lines
from adventdays import day01

lines = read_lines("input.txt")
print(day01.part_one(lines), day01.part_two(lines))
```

The building blocks can be used directly as well, among them:

- `day01.parse_lists`, `total_distance`, `similarity_score`
- `day02.parse_reports(lines, dampened)`, `is_unsafe`, `is_unsafe_with_dampener`
- `day03.parse_instructions`, `enabled_sections`, `total_product`
- `day04.xmas_search(matrix)`
- `day05.load_manuals` returning a `ManualUpdate` with `validate`,
  `find_violation`, `correct_updates`, `wrong_updates` and `fix`
- `day06.GuardMap` with `walk`, `visited` and `looping_spots`
- `day07.parse_equations`, `can_solve(equation, concatenate)`, `sum_solvable`
- `day08.AntennaMap` with `antinodes(resonant)`, `render` and
  `render_antinodes`; `possible_pairs`
- `day09.Disk` with `compact_blocks`, `compact_files`, `checksum` and `render`

Shared helpers are in `adventdays.util`: `read_lines`, `silent_atoi`
(a strict integer parser that raises `ValueError`), `sum_slice`,
`product_slice`, `reverse_string`, `remove_spaces`, the `Direction` enum of
the eight compass directions, and `StringsMatrix`, a character grid with
`render`, `in_matrix`, `word_search` and `search_direction`.

Malformed input raises `ValueError`.

## What it does not do

The package only solves puzzle inputs that are already on disk. It does not
download inputs or submit answers.

## Tests

```
pip install .[test]
pytest
```