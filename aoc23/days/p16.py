"""The floor will be lava: beams through mirrors and splitters."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum

from aoc23.problem import auto_solve

NAME = "p16"

_TILES = frozenset(".\\/-|")


class Direction(Enum):
    N = "N"
    E = "E"
    S = "S"
    W = "W"


_BACK_MIRROR = {
    Direction.N: Direction.W,
    Direction.E: Direction.S,
    Direction.S: Direction.E,
    Direction.W: Direction.N,
}
_FORWARD_MIRROR = {
    Direction.N: Direction.E,
    Direction.E: Direction.N,
    Direction.S: Direction.W,
    Direction.W: Direction.S,
}


@dataclass(frozen=True)
class Grid:
    """A contraption of mirrors and splitters."""

    rows: tuple

    @classmethod
    def parse(cls, text):
        rows = tuple(text.splitlines())
        for line in rows:
            unknown = set(line) - _TILES
            if unknown:
                raise ValueError(f"unknown tile {sorted(unknown)[0]!r}")
        return cls(rows)

    def _move(self, row, col, direction):
        if direction is Direction.N:
            return None if row == 0 else (row - 1, col, direction)
        if direction is Direction.E:
            return None if col == len(self.rows[row]) - 1 else (row, col + 1, direction)
        if direction is Direction.S:
            return None if row == len(self.rows) - 1 else (row + 1, col, direction)
        return None if col == 0 else (row, col - 1, direction)

    def _headings(self, tile, direction):
        if tile == "\\":
            return (_BACK_MIRROR[direction],)
        if tile == "/":
            return (_FORWARD_MIRROR[direction],)
        if tile == "-" and direction in (Direction.N, Direction.S):
            return (Direction.E, Direction.W)
        if tile == "|" and direction in (Direction.E, Direction.W):
            return (Direction.N, Direction.S)
        return (direction,)

    def _propagate(self, beam):
        row, col, direction = beam
        for heading in self._headings(self.rows[row][col], direction):
            moved = self._move(row, col, heading)
            if moved is not None:
                yield moved

    def energized(self, row, col, direction):
        """Return how many tiles a beam entering at ``(row, col)`` lights up."""
        start = (row, col, direction)
        seen = {start}
        frontier = [start]
        while frontier:
            following = []
            for beam in frontier:
                for nxt in self._propagate(beam):
                    if nxt not in seen:
                        seen.add(nxt)
                        following.append(nxt)
            frontier = following
        return len({(r, c) for r, c, _ in seen})


def solve_1(text):
    return Grid.parse(text).energized(0, 0, Direction.E)


def solve_2(text):
    grid = Grid.parse(text)
    height = len(grid.rows)
    width = len(grid.rows[0])
    starts = [
        *((r, 0, Direction.E) for r in range(height)),
        *((r, len(grid.rows[r]) - 1, Direction.W) for r in range(height)),
        *((0, c, Direction.S) for c in range(width)),
        *((height - 1, c, Direction.N) for c in range(width)),
    ]
    return max(grid.energized(*start) for start in starts)


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Lava beams.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)