"""Gear ratios."""

from __future__ import annotations

import argparse

from aoc23.coord import adjacent_all
from aoc23.problem import auto_solve

NAME = "p03"


def _is_digit(ch):
    return "0" <= ch <= "9"


def find_number(line, start):
    """Return ``(begin, end)`` of the first digit run at or after ``start``."""
    begin = next((i for i in range(start, len(line)) if _is_digit(line[i])), None)
    if begin is None:
        return None
    end = next((j for j in range(begin, len(line)) if not _is_digit(line[j])), len(line))
    return begin, end


def line_numbers(line, row):
    """Return each number on ``line`` with the cells it covers."""
    found = []
    cursor = 0
    while (span := find_number(line, cursor)) is not None:
        begin, end = span
        found.append((int(line[begin:end]), [(row, col) for col in range(begin, end)]))
        cursor = end + 1
    return found


def numbers(text):
    """Return every number of the schematic with the cells it covers."""
    return [
        number
        for row, line in enumerate(text.splitlines())
        for number in line_numbers(line, row)
    ]


def pieces(text):
    """Return ``(symbol, row, col)`` for every symbol in the schematic."""
    return [
        (ch, row, col)
        for row, line in enumerate(text.splitlines())
        for col, ch in enumerate(line)
        if not _is_digit(ch) and ch != "."
    ]


def solve_1(text):
    locations = {(row, col) for _, row, col in pieces(text)}
    return sum(
        value
        for value, cells in numbers(text)
        if any(
            neighbour in locations
            for cell in cells
            for neighbour in adjacent_all(cell, unsigned=True)
        )
    )


def solve_2(text):
    gears = {(row, col): [] for ch, row, col in pieces(text) if ch == "*"}
    for value, cells in numbers(text):
        touched = dict.fromkeys(
            neighbour for cell in cells for neighbour in adjacent_all(cell, unsigned=True)
        )
        for neighbour in touched:
            if neighbour in gears:
                gears[neighbour].append(value)
    return sum(vals[0] * vals[1] for vals in gears.values() if len(vals) == 2)


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Gear ratios.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)