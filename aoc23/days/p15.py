"""Lens library: the HASH algorithm and its boxes."""

from __future__ import annotations

import argparse

from aoc23.problem import auto_solve

NAME = "p15"


def hash_string(text):
    """Return the HASH value of ``text``, ignoring newlines."""
    current = 0
    for byte in text.encode():
        if byte == ord("\n"):
            continue
        current = (current + byte) * 17 % 256
    return current


def _parse_step(step):
    label, sep, value = step.partition("=")
    if sep:
        return label, int(value)
    label, sep, _ = step.partition("-")
    if not sep:
        raise ValueError(f"step {step!r} is neither an insert nor a removal")
    return label, None


def solve_1(text):
    return sum(hash_string(step) for step in text.split(","))


def solve_2(text):
    boxes = [{} for _ in range(256)]
    steps = (step for line in text.split("\n") for step in line.split(",") if step)
    for step in steps:
        label, focal = _parse_step(step)
        box = boxes[hash_string(label)]
        if focal is None:
            box.pop(label, None)
        else:
            box[label] = focal
    return sum(
        box_number * slot * focal
        for box_number, box in enumerate(boxes, start=1)
        for slot, focal in enumerate(box.values(), start=1)
    )


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Lens library.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)