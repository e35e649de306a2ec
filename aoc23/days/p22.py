"""Sand slabs: settling falling bricks and counting chain reactions."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace
from itertools import product

from aoc23.problem import auto_solve

NAME = "p22"


@dataclass(frozen=True)
class Brick:
    """A brick spanning inclusive ``(low, high)`` ranges on each axis."""

    x: tuple
    y: tuple
    z: tuple

    def footprint(self):
        """Yield every ``(x, y)`` cell the brick covers from above."""
        return product(range(self.x[0], self.x[1] + 1), range(self.y[0], self.y[1] + 1))

    def lowered_to(self, bottom):
        """Return the brick moved so that its lowest cube sits at ``bottom``."""
        return replace(self, z=(bottom, bottom + self.z[1] - self.z[0]))


def _point(text):
    x, y, z = (int(v) for v in text.split(","))
    return x, y, z


def parse_brick(line):
    """Parse ``x,y,z~x,y,z`` into a brick with ordered ranges."""
    left, right = line.split("~", 1)
    a, b = _point(left), _point(right)
    low_high = [(min(p, q), max(p, q)) for p, q in zip(a, b)]
    return Brick(*low_high)


def settle(bricks):
    """Drop the bricks, lowest first, until each rests on the ground or another.

    Returns the settled bricks in dropping order and, for each, the frozen set
    of indices of the bricks directly beneath it that hold it up.
    """
    ordered = sorted(bricks, key=lambda brick: brick.z[0])
    floor = {}
    settled = []
    supports = []
    for index, brick in enumerate(ordered):
        below = [floor.get(cell, (0, index)) for cell in brick.footprint()]
        lowest = max(height for height, _ in below)
        holders = frozenset(
            holder for height, holder in below if height == lowest and holder != index
        )
        dropped = brick.lowered_to(lowest + 1)
        for cell in dropped.footprint():
            floor[cell] = (dropped.z[1], index)
        settled.append(dropped)
        supports.append(holders)
    return settled, supports


def _parse(text):
    return [parse_brick(line) for line in text.splitlines()]


def solve_1(text):
    bricks, supports = settle(_parse(text))
    sole_supporters = {next(iter(holders)) for holders in supports if len(holders) == 1}
    return len(bricks) - len(sole_supporters)


def solve_2(text):
    bricks, supports = settle(_parse(text))
    carried = [[] for _ in bricks]
    for index, holders in enumerate(supports):
        for holder in holders:
            carried[holder].append(index)
    total = 0
    for removed in range(len(bricks)):
        falling = {removed}
        pending = [removed]
        while pending:
            current = pending.pop()
            for above in carried[current]:
                if above not in falling and supports[above] <= falling:
                    falling.add(above)
                    pending.append(above)
        total += len(falling) - 1
    return total


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Sand slabs.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)