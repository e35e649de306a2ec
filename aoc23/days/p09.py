"""Mirage maintenance: extrapolating sequences."""

from __future__ import annotations

import argparse
from itertools import pairwise

from aoc23.problem import auto_solve

NAME = "p09"


def extrapolate(values):
    """Return the next value of ``values`` by repeated differencing."""
    total = 0
    current = list(values)
    while any(current):
        total += current[-1]
        current = [b - a for a, b in pairwise(current)]
    return total


def _sequences(text):
    return [[int(token) for token in line.split(" ")] for line in text.splitlines()]


def solve_1(text):
    return sum(extrapolate(seq) for seq in _sequences(text))


def solve_2(text):
    return sum(extrapolate(seq[::-1]) for seq in _sequences(text))


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Sequence extrapolation.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)