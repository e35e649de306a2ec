"""Haunted wasteland: walking a left/right network."""

from __future__ import annotations

import argparse
from itertools import count, product
from math import lcm

from aoc23.problem import auto_solve

NAME = "p08"

_TURNS = {"L": 0, "R": 1}


def parse_network(text):
    """Return the turn sequence (0 for left, 1 for right) and the node map."""
    head, body = text.split("\n\n", 1)
    try:
        sequence = tuple(_TURNS[ch] for ch in head)
    except KeyError as exc:
        raise ValueError(f"unknown turn {exc.args[0]!r}") from None
    network = {}
    for line in body.splitlines():
        node, targets = line.split(" = ", 1)
        left, right = targets[1:-1].split(", ", 1)
        network[node] = (left, right)
    return sequence, network


def run_ends(start, network, sequence):
    """Return the step counts at which a walk from ``start`` reaches a Z node,
    up to the point where the walk starts repeating."""
    seen = set()
    current = start
    found = []
    for steps in count():
        state = (steps % len(sequence), current)
        if state in seen:
            return found
        seen.add(state)
        current = network[current][sequence[state[0]]]
        if current.endswith("Z"):
            found.append(steps + 1)
    return found


def solve_1(text):
    sequence, network = parse_network(text)
    current = "AAA"
    steps = 0
    while current != "ZZZ":
        current = network[current][sequence[steps % len(sequence)]]
        steps += 1
    return steps


def solve_2(text):
    sequence, network = parse_network(text)
    runs = [run_ends(node, network, sequence) for node in network if node.endswith("A")]
    best = min((lcm(*choice) for choice in product(*runs)), default=None)
    if best is None:
        raise ValueError("some starting node never reaches a Z node")
    return best


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Haunted wasteland.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)