"""Hot springs: counting damaged-spring arrangements."""

from __future__ import annotations

import argparse

from aoc23.problem import auto_solve

NAME = "p12"


def parse_record(line):
    """Return the spring pattern and the list of damaged group sizes."""
    pattern, groups = line.split(" ", 1)
    return pattern, [int(g) for g in groups.split(",")]


def unfold(pattern, groups):
    """Repeat the record five times, joining patterns with ``?``."""
    return "?".join([pattern] * 5), list(groups) * 5


def count_configs(pattern, groups):
    """Return how many ways ``groups`` of damaged springs fit ``pattern``."""
    pat = pattern + "."
    size = len(pat)
    table = [[0] * (size + 1) for _ in range(len(groups) + 1)]
    table[0][0] = 1
    for index, ch in enumerate(pat):
        if ch == "#":
            break
        table[0][index + 1] = 1
    for group_index, group in enumerate(groups):
        before_row = table[group_index]
        after_row = table[group_index + 1]
        for begin in range(size - group):
            before = before_row[begin]
            if before == 0:
                continue
            end = begin + group
            if pat[end] == "#" or "." in pat[begin:end]:
                continue
            for write in range(end, size):
                if pat[write] == "#":
                    break
                after_row[write + 1] += before
    return table[len(groups)][size]


def solve_1(text):
    return sum(count_configs(*parse_record(line)) for line in text.splitlines())


def solve_2(text):
    return sum(count_configs(*unfold(*parse_record(line))) for line in text.splitlines())


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Hot springs.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)