"""Lavaduct lagoon: area enclosed by a dig plan."""

from __future__ import annotations

import argparse

from aoc23.problem import auto_solve

NAME = "p18"

_STEPS = {"U": (-1, 0), "R": (0, 1), "D": (1, 0), "L": (0, -1)}
_HEX_DIRECTIONS = {"0": "R", "1": "D", "2": "L", "3": "U"}


def parse_plain(line):
    """Return the direction letter and length written plainly on ``line``."""
    direction, rest = line.split(" ", 1)
    length, _ = rest.split(" ", 1)
    letter = direction[:1]
    if letter not in _STEPS:
        raise ValueError(f"unknown direction {direction!r}")
    return letter, int(length)


def parse_hex(line):
    """Return the direction and length encoded in the colour code of ``line``."""
    _, rest = line.split("#", 1)
    if len(rest) < 6:
        raise ValueError(f"colour code too short in {line!r}")
    try:
        direction = _HEX_DIRECTIONS[rest[5]]
    except KeyError:
        raise ValueError(f"unknown direction digit {rest[5]!r}") from None
    return direction, int(rest[:5], 16)


def resweep(segments, nxt):
    """Combine the covered ``(start, length)`` segments with the edge ``nxt``.

    An edge overlapping a segment end cuts or extends it; an edge touching two
    segments joins them; an edge inside a segment splits it.
    """
    events = sorted(
        point
        for start, length in [nxt, *segments]
        for point in (start, start + length - 1)
    )
    result = []
    on = False
    current = None
    for event in events:
        if event == current:
            if not on:
                current = result.pop()[0]
        else:
            if on:
                result.append((current, event - current + 1))
            current = event
        on = not on
    return result


def _breadth(segments):
    return sum(length for _, length in segments)


def dig_area(text, parser):
    """Return the number of cubic metres dug out by the plan in ``text``."""
    row, col = 0, 0
    horizontal = []
    for direction, length in map(parser, text.splitlines()):
        d_row, d_col = _STEPS[direction]
        nxt = (row + d_row * length, col + d_col * length)
        if direction == "R":
            horizontal.append(((row, col), length + 1))
        elif direction == "L":
            horizontal.append((nxt, length + 1))
        row, col = nxt
    sweepline = None
    segments = []
    total = 0
    for (edge_row, edge_col), edge_len in sorted(horizontal, reverse=True):
        before = _breadth(segments)
        if sweepline is None or edge_row < sweepline:
            if sweepline is not None:
                total += before * (sweepline - edge_row)
            sweepline = edge_row
        segments = resweep(segments, (edge_col, edge_len))
        total += max(before - _breadth(segments), 0)
    return total + _breadth(segments)


def solve_1(text):
    return dig_area(text, parse_plain)


def solve_2(text):
    return dig_area(text, parse_hex)


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Lavaduct lagoon.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)