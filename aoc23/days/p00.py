"""Template day: both parts answer zero."""

from __future__ import annotations

import argparse

from aoc23.problem import auto_solve

NAME = "p00"


def _template_answer(text):
    # The template measures its input and answers with the difference, always zero.
    return len(text) - len(text)


def solve_1(text):
    """Return zero whatever the input."""
    return _template_answer(text)


def solve_2(text):
    """Return zero whatever the input."""
    return _template_answer(text)


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Template day.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)