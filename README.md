# aoc23

Solutions to the 2023 Advent of Code puzzles. Every day is a module in
`aoc23.days` (`p01` to `p25`, plus the `p00` template) with a `solve_1` and a
`solve_2` function. Each takes the puzzle input as a string and returns the
answer to that part.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running a day

Each day has its own command, named after its module:

```
aoc23-p01
aoc23-p17
aoc23-p25
```

The commands take no options besides `--help`. A command looks for the
nearest directory named `aoc23`, starting from the current working directory
and going up through its parents. It then reads the puzzle input from the
`input` directory inside it, from a file named after the day (for example
`input/p01`). Both answers are printed in this shape:

```

Problem 1:
<answer to part one>

Problem 2:
<answer to part two>
```

If no `aoc23` directory is found, or the input file is missing, the command
stops with `FileNotFoundError`.

## Using the solvers from Python

```python
from aoc23.days import p01

example = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet"
print(p01.solve_1(example))  # 142
```

Some days expose helpers that are also useful on their own:

- `aoc23.days.p11.solve_expanded(text, factor)` sums galaxy distances for any
  expansion factor.
- `aoc23.days.p24.solve_1(text, least, most)` counts crossings inside a
  custom test area.
- `aoc23.days.p17.min_heat_loss(text, min_run, max_run)` takes any run-length
  limits.
- `aoc23.days.p21.Garden.parse(text).reachable(steps)` counts plots for any
  number of steps.

Grid neighbours used across several days are in `aoc23.coord`:
`adjacent_cardinal`, `adjacent_diagonal` and `adjacent_all`. Each takes a
`(row, col)` pair. With `unsigned=True`, neighbours that have a negative
component are dropped.

To run solvers of your own the same way the commands do, use
`aoc23.problem`. `solve(problem, name)` takes a `Problem` subclass, and
`auto_solve(first, second, name)` takes two plain functions. Both read the
input through `aoc23.input.read_input(name)` and print the answers.

## What it does not do

- It does not download puzzle inputs; put them in the `input` directory
  yourself.
- Part two of days 21 and 24 is not solved. Those solvers read the input and
  answer 0. Day 25 has no second part, and it also answers 0.
- `p00` is an empty template that answers 0 for both parts.