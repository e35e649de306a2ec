"""Pipe maze: loop length and enclosed area."""

from __future__ import annotations

import argparse
from enum import Enum
from itertools import count

from aoc23.coord import adjacent_cardinal
from aoc23.problem import auto_solve

NAME = "p10"


class Direction(Enum):
    N = "N"
    E = "E"
    S = "S"
    W = "W"


_LEFT = {Direction.N: Direction.W, Direction.E: Direction.N, Direction.S: Direction.E, Direction.W: Direction.S}
_RIGHT = {Direction.N: Direction.E, Direction.E: Direction.S, Direction.S: Direction.W, Direction.W: Direction.N}

_PIPES = {
    "|": (Direction.N, Direction.S),
    "-": (Direction.E, Direction.W),
    "7": (Direction.W, Direction.S),
    "F": (Direction.E, Direction.S),
    "L": (Direction.E, Direction.N),
    "J": (Direction.W, Direction.N),
}


def _inside(grid, cell):
    row, col = cell
    return row < len(grid) and col < len(grid[row])


def _move(cell, direction):
    row, col = cell
    if direction is Direction.N:
        return (row - 1, col) if row > 0 else None
    if direction is Direction.E:
        return (row, col + 1)
    if direction is Direction.S:
        return (row + 1, col)
    return (row, col - 1) if col > 0 else None


def _directions(grid, cell):
    return _PIPES.get(grid[cell[0]][cell[1]], ())


def _connections(grid, cell):
    if not _inside(grid, cell):
        return []
    return [n for n in (_move(cell, d) for d in _directions(grid, cell)) if n is not None]


def _start(grid):
    for row, line in enumerate(grid):
        col = line.find("S")
        if col >= 0:
            return row, col
    raise ValueError("no start tile in grid")


def _go_for_walk(grid, start, heading):
    current = start
    lefts, rights, path = set(), set(), set()
    for length in count(1):
        path.add(current)
        for side, marks in ((_LEFT[heading], lefts), (_RIGHT[heading], rights)):
            beside = _move(current, side)
            if beside is not None:
                marks.add(beside)
                ahead = _move(beside, heading)
                if ahead is not None:
                    marks.add(ahead)
        following = _move(current, heading)
        if following is None or not _inside(grid, following):
            return None
        if following == start:
            return length, path, lefts, rights
        next_heading = next(
            (
                d
                for d in _directions(grid, following)
                if (target := _move(following, d)) is not None and target != current
            ),
            None,
        )
        if next_heading is None:
            return None
        current, heading = following, next_heading
    return None


def _expand(grid, path, group):
    current = set(group)
    while True:
        size = len(current)
        grown = set(current)
        for cell in current:
            neighbours = adjacent_cardinal(cell, unsigned=True)
            if len(neighbours) != 4:
                return None
            for neighbour in neighbours:
                if not _inside(grid, neighbour):
                    return None
                if neighbour not in path:
                    grown.add(neighbour)
        if len(grown) == size:
            return size
        current = grown


def walk(grid):
    """Return the farthest loop distance and the number of enclosed tiles."""
    start = _start(grid)
    for heading in Direction:
        first = _move(start, heading)
        if first is None or start not in _connections(grid, first):
            continue
        result = _go_for_walk(grid, start, heading)
        if result is None:
            continue
        distance, path, lefts, rights = result
        left_area = _expand(grid, path, {c for c in lefts - path if _inside(grid, c)})
        right_area = _expand(grid, path, {c for c in rights - path if _inside(grid, c)})
        if (left_area is None) == (right_area is None):
            raise ValueError("cannot tell the inside of the loop from the outside")
        return (distance + 1) // 2, left_area if left_area is not None else right_area
    raise ValueError("no loop through the start tile")


def _grid(text):
    return text.splitlines()


def solve_1(text):
    return walk(_grid(text))[0]


def solve_2(text):
    return walk(_grid(text))[1]


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Pipe maze.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)