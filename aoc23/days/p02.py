"""Cube conundrum."""

from __future__ import annotations

import argparse
from math import prod

from aoc23.problem import auto_solve

NAME = "p02"

_LIMITS = {"red": 12, "green": 13, "blue": 14}


def _colour_is_possible(draw):
    count, colour = draw.split(" ", 1)
    try:
        limit = _LIMITS[colour]
    except KeyError:
        raise ValueError(f"unknown colour {colour!r}") from None
    return int(count) <= limit


def _round_is_possible(game_round):
    return all(_colour_is_possible(draw) for draw in game_round.split(", "))


def id_if_possible(line):
    """Return the game id if every draw fits the bag, else zero."""
    label, rest = line.split(": ", 1)
    if all(_round_is_possible(r) for r in rest.split("; ")):
        return int(label.split(" ", 1)[1])
    return 0


def _colour_power(draws, colour):
    return max((int(d.split(" ", 1)[0]) for d in draws if d.endswith(colour)), default=0)


def power(line):
    """Return the product of the fewest cubes of each colour the game needs."""
    _, rest = line.split(": ", 1)
    draws = [draw for game_round in rest.split("; ") for draw in game_round.split(", ")]
    return prod(_colour_power(draws, colour) for colour in ("red", "blue", "green"))


def solve_1(text):
    return sum(id_if_possible(line) for line in text.splitlines())


def solve_2(text):
    return sum(power(line) for line in text.splitlines())


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Cube conundrum.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)