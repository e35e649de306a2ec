"""Clumsy crucible: least heat loss with run-length limits."""

from __future__ import annotations

import argparse
import heapq

from aoc23.problem import auto_solve

NAME = "p17"

_DIRECTIONS = ("N", "E", "S", "W")
_OPPOSITE = {"N": "S", "E": "W", "S": "N", "W": "E"}
_ORDER = {d: i for i, d in enumerate(_DIRECTIONS)}


def _move(cells, row, col, direction):
    if direction == "N":
        return None if row == 0 else (row - 1, col)
    if direction == "E":
        return None if col == len(cells[row]) - 1 else (row, col + 1)
    if direction == "S":
        return None if row == len(cells) - 1 else (row + 1, col)
    return None if col == 0 else (row, col - 1)


def min_heat_loss(text, min_run, max_run):
    """Return the least heat lost from the top left to the bottom right block.

    The crucible moves at most ``max_run`` blocks in a line, and must have moved
    at least ``min_run`` in a line before it may turn or stop. Raises
    ``ValueError`` if the goal cannot be reached.
    """
    cells = [[int(ch) for ch in line] for line in text.splitlines()]
    goal_row = len(cells) - 1
    queue = []

    def push(cost, row, col, direction, run):
        heapq.heappush(queue, (cost, -row, -col, -_ORDER[direction], -run, direction))

    push(0, 0, 0, "S", 0)
    push(0, 0, 0, "E", 0)
    visited = set()
    while queue:
        cost, neg_row, neg_col, _, neg_run, direction = heapq.heappop(queue)
        row, col, run = -neg_row, -neg_col, -neg_run
        if row == goal_row and col == len(cells[row]) - 1 and run >= min_run:
            return cost
        state = (row, col, direction, run)
        if state in visited:
            continue
        visited.add(state)
        for heading in _DIRECTIONS:
            if heading == _OPPOSITE[direction]:
                continue
            if heading != direction and run < min_run:
                continue
            new_run = run + 1 if heading == direction else 1
            if new_run > max_run:
                continue
            position = _move(cells, row, col, heading)
            if position is None:
                continue
            n_row, n_col = position
            if (n_row, n_col, heading, new_run) in visited:
                continue
            push(cost + cells[n_row][n_col], n_row, n_col, heading, new_run)
    raise ValueError("the bottom right block cannot be reached")


def solve_1(text):
    return min_heat_loss(text, 0, 3)


def solve_2(text):
    return min_heat_loss(text, 4, 10)


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Clumsy crucible.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)