"""Step counter: garden plots reachable in a number of steps."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from aoc23.coord import adjacent_cardinal
from aoc23.problem import auto_solve

NAME = "p21"

_STEPS = 64


@dataclass(frozen=True)
class Garden:
    """A bounded garden with rocks and a starting plot."""

    width: int
    height: int
    rocks: frozenset
    start: tuple = (0, 0)

    @classmethod
    def parse(cls, text):
        width = height = 0
        rocks = set()
        start = (0, 0)
        for row, line in enumerate(text.splitlines()):
            for col, ch in enumerate(line):
                width = max(width, col + 1)
                height = max(height, row + 1)
                if ch == "#":
                    rocks.add((row, col))
                elif ch == "S":
                    start = (row, col)
        return cls(width, height, frozenset(rocks), start)

    def _open(self, cell):
        row, col = cell
        return 0 <= row < self.height and 0 <= col < self.width and cell not in self.rocks

    def reachable(self, steps):
        """Return how many plots can be ended on after exactly ``steps`` steps."""
        locations = {self.start}
        for _ in range(steps):
            locations = {
                neighbour
                for cell in locations
                for neighbour in adjacent_cardinal(cell)
                if self._open(neighbour)
            }
        return len(locations)


def solve_1(text):
    return Garden.parse(text).reachable(_STEPS)


def solve_2(text):
    """Part two is unsolved: the garden is read and zero plots are reported."""
    Garden.parse(text)
    return 0


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Step counter.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)