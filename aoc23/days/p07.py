"""Camel cards."""

from __future__ import annotations

import argparse
from collections import Counter

from aoc23.problem import auto_solve

NAME = "p07"

_CARD_ORDER = "23456789TJQKA"
_JACK = _CARD_ORDER.index("J")


def card_values(hand):
    """Return the rank of each of the first five cards of ``hand``."""
    values = []
    for card in hand[:5]:
        rank = _CARD_ORDER.find(card)
        if rank < 0:
            raise ValueError(f"unknown card {card!r}")
        values.append(rank)
    if len(values) != 5:
        raise ValueError(f"hand {hand!r} has fewer than five cards")
    return values


def joker_values(values):
    """Re-rank cards so that jacks become the weakest card, zero."""
    return [0 if v == _JACK else v + 1 if v < _JACK else v for v in values]


def _type_from(top, second):
    if top == 5:
        return 6
    if top == 4:
        return 5
    if top == 3:
        return 4 if second == 2 else 3
    if top == 2:
        return 2 if second == 2 else 1
    return 0


def hand_type(values):
    """Return the strength of the hand's type, from 0 (high card) to 6."""
    counts = sorted(Counter(values).values(), reverse=True) + [0]
    return _type_from(counts[0], counts[1])


def joker_hand_type(values):
    """Like :func:`hand_type`, with cards of rank zero acting as jokers."""
    counts = Counter(values)
    jokers = counts.pop(0, 0)
    rest = sorted(counts.values(), reverse=True) + [0, 0]
    return _type_from(rest[0] + jokers, rest[1])


def hand_score(values):
    """Return the hand read as a base-13 number, first card most significant."""
    score = 0
    for value in values:
        score = score * 13 + value
    return score


def _winnings(text, rank_values, typer):
    hands = []
    for line in text.splitlines():
        hand, bid = line.split(" ", 1)
        values = rank_values(card_values(hand))
        hands.append((typer(values), hand_score(values), int(bid)))
    hands.sort(key=lambda entry: (entry[0], entry[1]))
    return sum(rank * bid for rank, (_, _, bid) in enumerate(hands, start=1))


def solve_1(text):
    return _winnings(text, list, hand_type)


def solve_2(text):
    return _winnings(text, joker_values, joker_hand_type)


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Camel cards.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)