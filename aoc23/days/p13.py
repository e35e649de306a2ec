"""Point of incidence: mirrors in fields of ash and rock."""

from __future__ import annotations

import argparse

from aoc23.problem import auto_solve

NAME = "p13"


def _reflects_with_errors(field, left, errors):
    span = min(left, len(field) - left)
    mismatches = sum(
        a != b
        for offset in range(span)
        for a, b in zip(field[left - offset - 1], field[left + offset])
    )
    return mismatches == errors


def _row_score(field, errors):
    return sum(
        left for left in range(1, len(field)) if _reflects_with_errors(field, left, errors)
    )


def reflect_score(block, errors):
    """Score the reflection line of one pattern that has exactly ``errors`` smudges.

    A horizontal line scores a hundred times the rows above it; otherwise a
    vertical line scores the columns to its left. Raises ``ValueError`` when
    neither exists.
    """
    field = [tuple(ch == "." for ch in line) for line in block.splitlines()]
    score = _row_score(field, errors)
    if score != 0:
        return score * 100
    transposed = [tuple(column) for column in zip(*field)]
    score = _row_score(transposed, errors)
    if score == 0:
        raise ValueError("pattern has no line of reflection")
    return score


def solve_1(text):
    return sum(reflect_score(block, 0) for block in text.split("\n\n"))


def solve_2(text):
    return sum(reflect_score(block, 1) for block in text.split("\n\n"))


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Point of incidence.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)