# aocsolve

Solutions to Advent of Code puzzles as a plain Python library, with no
dependencies outside the standard library.

Covered days:

- 2015: days 1–7 (`aocsolve.y2015_day01` … `aocsolve.y2015_day07`)
- 2021: days 1–9 and 11–17 (`aocsolve.y2021_day01` … `aocsolve.y2021_day09`,
  `aocsolve.y2021_day11` … `aocsolve.y2021_day17`)

Every day module exposes the same three functions:

- `parse_input(text)`: turns the raw puzzle input into a structured value
- `part_one(parsed)`: the answer to the first half of the puzzle
- `part_two(parsed)`: the answer to the second half

Malformed input raises `ValueError`.

## Installation

```
pip install .
```

## Usage

```python
from aocsolve import y2021_day06

counts = y2021_day06.parse_input("3,4,3,1,2")
print(y2021_day06.part_one(counts))   # 5934
print(y2021_day06.part_two(counts))   # 26984457539
```

```python
from aocsolve import y2015_day01

directions = y2015_day01.parse_input("()())")
print(y2015_day01.part_one(directions))   # -1
print(y2015_day01.part_two(directions))   # 5
```

Some modules also expose the building blocks of their solution, for example
`y2015_day07.Circuit` (a memoising wire evaluator with `signal` and
`override`), `y2021_day16.parse_packet` with `BitReader`, and
`y2021_day13.fold` with `render`, which draws the folded paper as text.

The 2021 day 2 solutions print the final position and depth to standard error
as well as returning the answer.

## What it does not do

- There is no command-line program: the package does not find, read or run
  puzzle input files. Read the input yourself and pass its text to
  `parse_input`.
- 2021 day 10 and days after 17 are not included.

## Running the tests

```
pip install .[test]
pytest
```