"""Pulse propagation through flip-flops and conjunctions."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from itertools import count

from aoc23.problem import auto_solve

NAME = "p20"

_BROADCASTER = "broadcaster"
_PRESSES = 1000


class Pulse(Enum):
    HIGH = "high"
    LOW = "low"

    def inverted(self):
        return Pulse.LOW if self is Pulse.HIGH else Pulse.HIGH


class _Kind(Enum):
    BROADCAST = "broadcast"
    FLIP_FLOP = "flip-flop"
    CONJUNCTION = "conjunction"


@dataclass
class _Module:
    kind: _Kind
    targets: list
    level: Pulse = Pulse.LOW
    memory: dict = field(default_factory=dict)

    def receive(self, origin, pulse):
        """Update the module's state and return the pulse it sends, if any."""
        if self.kind is _Kind.BROADCAST:
            return pulse
        if self.kind is _Kind.FLIP_FLOP:
            if pulse is Pulse.HIGH:
                return None
            self.level = self.level.inverted()
            return self.level
        self.memory[origin] = pulse
        if all(p is Pulse.HIGH for p in self.memory.values()):
            return Pulse.LOW
        return Pulse.HIGH


def _parse_module(spec):
    if spec == _BROADCASTER:
        return _Kind.BROADCAST, spec
    if spec.startswith("%"):
        return _Kind.FLIP_FLOP, spec[1:]
    return _Kind.CONJUNCTION, spec[1:]


class Network:
    """A network of modules wired to a broadcaster and a button."""

    def __init__(self, modules):
        if _BROADCASTER not in modules:
            raise ValueError("network has no broadcaster")
        self.modules = modules

    @classmethod
    def parse(cls, text):
        modules = {}
        for line in text.splitlines():
            spec, targets = line.split(" -> ", 1)
            kind, name = _parse_module(spec)
            modules[name] = _Module(kind, [t.strip() for t in targets.split(",")])
        for name, module in modules.items():
            for target in module.targets:
                receiver = modules.get(target)
                if receiver is not None and receiver.kind is _Kind.CONJUNCTION:
                    receiver.memory[name] = Pulse.LOW
        return cls(modules)

    def _pulses(self):
        queue = deque([(_BROADCASTER, Pulse.LOW, _BROADCASTER)])
        while queue:
            origin, pulse, target = queue.popleft()
            yield origin, pulse, target
            module = self.modules.get(target)
            if module is None:
                continue
            sent = module.receive(origin, pulse)
            if sent is not None:
                queue.extend((target, sent, dst) for dst in module.targets)

    def press(self):
        """Press the button once; return the counts of low and high pulses."""
        lows = highs = 0
        for _, pulse, _ in self._pulses():
            if pulse is Pulse.HIGH:
                highs += 1
            else:
                lows += 1
        return lows, highs

    def press_until_low_output(self):
        """Press once; return whether a low pulse reached a module not in the network."""
        return any(
            pulse is Pulse.LOW and target not in self.modules
            for _, pulse, target in self._pulses()
        )


def solve_1(text):
    network = Network.parse(text)
    total_low = total_high = 0
    for _ in range(_PRESSES):
        lows, highs = network.press()
        total_low += lows
        total_high += highs
    return total_low * total_high


def solve_2(text):
    network = Network.parse(text)
    for presses in count(1):
        if network.press_until_low_output():
            return presses
    raise AssertionError("unreachable")


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Pulse propagation.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)