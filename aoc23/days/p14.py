"""Parabolic reflector dish: rolling rocks."""

from __future__ import annotations

import argparse
from itertools import count

from aoc23.problem import auto_solve

NAME = "p14"

_CYCLES = 1_000_000_000


def parse_field(text):
    """Return the platform as a tuple of row strings."""
    return tuple(text.splitlines())


def rotate_clockwise(field):
    """Rotate the field a quarter turn clockwise."""
    return tuple("".join(column) for column in zip(*reversed(field)))


def roll_to_zero(run):
    """Roll every round rock in ``run`` towards index zero until it meets ``#``."""

    def packed(segment):
        rocks = segment.count("O")
        return "O" * rocks + "." * (len(segment) - rocks)

    return "#".join(packed(segment) for segment in "".join(run).split("#"))


def _roll_all(field):
    return tuple(roll_to_zero(row) for row in field)


def spin_cycle(field):
    """Roll and rotate four times: one full spin cycle."""
    for _ in range(4):
        field = rotate_clockwise(_roll_all(field))
    return field


def row_weight(run):
    """Return the load of a row whose heavy end is index zero."""
    return sum(len(run) - index for index, ch in enumerate(run) if ch == "O")


def weight(field):
    """Return the total load of the field."""
    return sum(row_weight(row) for row in field)


def _tilted_view(text):
    field = parse_field(text)
    for _ in range(3):
        field = rotate_clockwise(field)
    return field


def solve_1(text):
    return weight(_roll_all(_tilted_view(text)))


def solve_2(text):
    field = _tilted_view(text)
    seen = {}
    history = []
    for step in count():
        if field in seen:
            first = seen[field]
            remainder = (_CYCLES - first) % (step - first)
            return weight(history[first + remainder])
        seen[field] = step
        history.append(field)
        field = spin_cycle(field)
    raise AssertionError("unreachable")


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Parabolic reflector dish.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)