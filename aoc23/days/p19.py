"""Aplenty: sorting parts through workflows."""

from __future__ import annotations

import argparse
from math import prod

from aoc23.problem import auto_solve

NAME = "p19"

_FIELDS = {"x": 0, "m": 1, "a": 2, "s": 3}
_ACCEPT = "A"
_REJECT = "R"
_START = "in"
_FULL_RANGE = (1, 4000)


def _parse_field(name):
    try:
        return _FIELDS[name]
    except KeyError:
        raise ValueError(f"unknown field {name!r}") from None


def _parse_rule(piece):
    condition, sep, destination = piece.partition(":")
    if not sep:
        return None, piece
    if "<" in condition:
        field, value = condition.split("<", 1)
        return (_parse_field(field), "<", int(value)), destination
    if ">" not in condition:
        raise ValueError(f"rule {piece!r} has no comparison")
    field, value = condition.split(">", 1)
    return (_parse_field(field), ">", int(value)), destination


def parse_rules(text):
    """Return each workflow name mapped to its ordered ``(condition, destination)`` rules.

    A condition is ``(field index, "<" or ">", value)``, or ``None`` for a fallback.
    """
    rules = {}
    for line in text.splitlines():
        name, body = line.split("{", 1)
        rules[name] = [_parse_rule(piece) for piece in body[:-1].split(",")]
    return rules


def parse_part(line):
    """Return the ``(x, m, a, s)`` ratings of a part."""
    values = [int(item.split("=", 1)[1]) for item in line[1:-1].split(",")]
    if len(values) < 4:
        raise ValueError(f"part {line!r} has fewer than four ratings")
    return tuple(values[:4])


def _rule(rules, name, index):
    try:
        return rules[name][index]
    except (KeyError, IndexError):
        raise ValueError(f"workflow {name!r} has no rule {index}") from None


def _holds(condition, part):
    field, op, value = condition
    return part[field] < value if op == "<" else part[field] > value


def accepts(rules, part):
    """Return whether ``part`` ends up accepted, starting at workflow ``in``."""
    name, index = _START, 0
    while True:
        condition, destination = _rule(rules, name, index)
        if condition is not None and not _holds(condition, part):
            index += 1
            continue
        if destination == _ACCEPT:
            return True
        if destination == _REJECT:
            return False
        name, index = destination, 0


def _with(bounds, field, bound):
    return bounds[:field] + (bound,) + bounds[field + 1 :]


def _send(rules, destination, bounds):
    if destination == _ACCEPT:
        return prod(high - low + 1 for low, high in bounds)
    if destination == _REJECT:
        return 0
    return _combinations(rules, destination, 0, bounds)


def _combinations(rules, name, index, bounds):
    condition, destination = _rule(rules, name, index)
    if condition is None:
        return _send(rules, destination, bounds)
    field, op, pivot = condition
    low, high = bounds[field]
    if op == "<":
        passed, failed = (low, min(high, pivot - 1)), (max(low, pivot), high)
    else:
        passed, failed = (max(low, pivot + 1), high), (low, min(high, pivot))
    total = 0
    if passed[0] <= passed[1]:
        total += _send(rules, destination, _with(bounds, field, passed))
    if failed[0] <= failed[1]:
        total += _combinations(rules, name, index + 1, _with(bounds, field, failed))
    return total


def count_combinations(rules):
    """Return how many rating combinations from 1 to 4000 are accepted."""
    return _combinations(rules, _START, 0, (_FULL_RANGE,) * 4)


def solve_1(text):
    rule_text, part_text = text.split("\n\n", 1)
    rules = parse_rules(rule_text)
    parts = (parse_part(line) for line in part_text.splitlines())
    return sum(sum(part) for part in parts if accepts(rules, part))


def solve_2(text):
    rule_text, _ = text.split("\n\n", 1)
    return count_combinations(parse_rules(rule_text))


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Part workflows.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)