"""Never tell me the odds: crossing hailstone paths."""

from __future__ import annotations

import argparse
from fractions import Fraction
from itertools import combinations_with_replacement

from aoc23.problem import auto_solve

NAME = "p24"

LEAST = 200_000_000_000_000
MOST = 400_000_000_000_000


def _triple(text):
    x, y, z = (int(v.strip()) for v in text.split(","))
    return x, y, z


def parse_hail(line):
    """Return the ``((px, py, pz), (vx, vy, vz))`` of one hailstone."""
    position, velocity = line.split("@", 1)
    return _triple(position), _triple(velocity)


def _solve_simultaneous(a, b, c, d, p, q):
    denominator = a * d - b * c
    if denominator == 0:
        return None
    return Fraction(p * d - b * q, denominator), Fraction(q * a - p * c, denominator)


def intersects(a, b, least, most):
    """Return whether the paths of ``a`` and ``b`` cross, in the future, inside the test area.

    Only x and y are considered; the area spans ``least`` to ``most`` on both axes.
    """
    (pxa, pya, _), (vxa, vya, _) = a
    (pxb, pyb, _), (vxb, vyb, _) = b
    times = _solve_simultaneous(vxa, -vxb, vya, -vyb, pxb - pxa, pyb - pya)
    if times is None:
        return False
    ta, tb = times
    if ta < 0 or tb < 0:
        return False
    x = ta * vxa + pxa
    y = ta * vya + pya
    return least <= x <= most and least <= y <= most


def solve_1(text, least=LEAST, most=MOST):
    hail = [parse_hail(line) for line in text.splitlines()]
    return sum(
        1 for a, b in combinations_with_replacement(hail, 2) if intersects(a, b, least, most)
    )


def solve_2(text):
    """Part two is unsolved: the hailstones are read and zero is reported."""
    for line in text.splitlines():
        parse_hail(line)
    return 0


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Hailstone paths.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)