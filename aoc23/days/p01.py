"""Trebuchet calibration values."""

from __future__ import annotations

import argparse

from aoc23.problem import auto_solve

NAME = "p01"

_DIGIT_WORDS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _is_digit(ch):
    return "0" <= ch <= "9"


def _first_last(values, line):
    if not values:
        raise ValueError(f"no digits in line {line!r}")
    return 10 * values[0] + values[-1]


def calibrate(line):
    """Combine the first and last digit of ``line`` into a two-digit number."""
    return _first_last([int(ch) for ch in line if _is_digit(ch)], line)


def _digit_at(line, index):
    if _is_digit(line[index]):
        return int(line[index])
    for value, word in enumerate(_DIGIT_WORDS):
        if line.startswith(word, index):
            return value
    return None


def calibrate_words(line):
    """Like :func:`calibrate`, also counting spelled-out digits."""
    found = (_digit_at(line, i) for i in range(len(line)))
    return _first_last([d for d in found if d is not None], line)


def solve_1(text):
    return sum(calibrate(line) for line in text.splitlines())


def solve_2(text):
    return sum(calibrate_words(line) for line in text.splitlines())


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Calibration values.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)