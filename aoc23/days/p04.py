"""Scratchcards."""

from __future__ import annotations

import argparse

from aoc23.problem import auto_solve

NAME = "p04"


def _to_numbers(field):
    return [int(token) for token in field.split()]


def winning_count(line):
    """Return how many of the card's numbers are winning numbers."""
    wins, guesses = line.split(": ", 1)[1].split(" | ", 1)
    winning = set(_to_numbers(wins))
    return sum(1 for guess in _to_numbers(guesses) if guess in winning)


def card_score(line):
    """Return the card's points: zero, or doubling from one per match."""
    count = winning_count(line)
    return 0 if count == 0 else 2 ** (count - 1)


def solve_1(text):
    return sum(card_score(line) for line in text.splitlines())


def solve_2(text):
    matches = [winning_count(line) for line in text.splitlines()]
    copies = [1] * len(matches)
    for index, count in enumerate(matches):
        for following in range(index + 1, index + 1 + count):
            copies[following] += copies[index]
    return sum(copies)


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Scratchcards.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)