"""Cosmic expansion: galaxy distances."""

from __future__ import annotations

import argparse
from bisect import bisect_left
from itertools import combinations

from aoc23.problem import auto_solve

NAME = "p11"


def manhattan_distance(a, b):
    """Return the taxicab distance between two coordinates."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def solve_expanded(text, factor):
    """Sum pairwise galaxy distances with empty rows and columns ``factor`` wide."""
    rows = text.splitlines()
    galaxies = [(r, c) for r, line in enumerate(rows) for c, ch in enumerate(line) if ch == "#"]
    empty_rows = [r for r, line in enumerate(rows) if "#" not in line]
    width = len(rows[0]) if rows else 0
    empty_cols = [c for c in range(width) if all(line[c] != "#" for line in rows)]
    extra = factor - 1
    expanded = [
        (r + extra * bisect_left(empty_rows, r), c + extra * bisect_left(empty_cols, c))
        for r, c in galaxies
    ]
    return sum(manhattan_distance(a, b) for a, b in combinations(expanded, 2))


def solve_1(text):
    return solve_expanded(text, 2)


def solve_2(text):
    return solve_expanded(text, 1_000_000)


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Cosmic expansion.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)