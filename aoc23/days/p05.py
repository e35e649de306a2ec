"""Seed to location almanac, with seeds held as ranges."""

from __future__ import annotations

import argparse

from aoc23.problem import auto_solve

NAME = "p05"


def parse_seeds(text):
    """Return each listed seed as a range of length one."""
    return [(int(token), 1) for token in text.split(": ", 1)[1].split(" ")]


def range_seeds(text):
    """Return the seed list read as ``(start, length)`` pairs."""
    values = [start for start, _ in parse_seeds(text)]
    return list(zip(values[::2], values[1::2]))


def shift(seed, ranges):
    """Map one seed range through ``ranges`` sorted by source start."""
    start, length = seed
    mapped = []
    for dest, src, size in ranges:
        if start >= src + size:
            continue
        if src >= start + length:
            break
        if src > start:
            taken = src - start
            mapped.append((start, taken))
            start = src
            length -= taken
        offset = start - src
        run = min(length, size - offset)
        mapped.append((dest + offset, run))
        start += run
        length -= run
    if length > 0:
        mapped.append((start, length))
    return mapped


def apply(seeds, block):
    """Map every seed range through the map described by ``block``."""
    ranges = sorted(
        (tuple(int(v) for v in line.split(" ", 2)) for line in block.splitlines()[1:]),
        key=lambda entry: entry[1],
    )
    return [piece for seed in seeds for piece in shift(seed, ranges)]


def _lowest_location(text, reader):
    first, *blocks = text.split("\n\n")
    seeds = reader(first)
    for block in blocks:
        seeds = apply(seeds, block)
    return min(start for start, _ in seeds)


def solve_1(text):
    return _lowest_location(text, parse_seeds)


def solve_2(text):
    return _lowest_location(text, range_seeds)


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Seed almanac.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)