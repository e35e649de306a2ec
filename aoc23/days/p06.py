"""Boat races."""

from __future__ import annotations

import argparse
from math import isqrt, prod

from aoc23.problem import auto_solve

NAME = "p06"


def _numbers(line):
    return [int(token) for token in line.strip().split(" ")[1:] if token]


def _joined_number(line):
    return int("".join(line.split(":", 1)[1].split()))


def find_lower_upper(time, distance):
    """Return the shortest and longest hold times that beat ``distance``.

    Raises ``ValueError`` unless at least two hold times win.
    """

    def wins(hold):
        return (time - hold) * hold > distance

    discriminant = time * time - 4 * distance
    if discriminant < 0:
        raise ValueError(f"no hold time beats {distance} in {time}")
    lower = max(0, (time - isqrt(discriminant)) // 2 - 1)
    while lower <= time and not wins(lower):
        lower += 1
    upper = time - lower
    if lower >= upper:
        raise ValueError(f"fewer than two hold times beat {distance} in {time}")
    return lower, upper


def _ways(time, distance):
    lower, upper = find_lower_upper(time, distance)
    return upper - lower + 1


def solve_1(text):
    time_line, distance_line = text.split("\n", 1)
    return prod(
        _ways(time, distance)
        for time, distance in zip(_numbers(time_line), _numbers(distance_line))
    )


def solve_2(text):
    time_line, distance_line = text.split("\n", 1)
    return _ways(_joined_number(time_line), _joined_number(distance_line))


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Boat races.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)