"""The shape of a two-part puzzle and how it is run."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

from aoc23.input import read_input


class Problem(ABC):
    """A puzzle with two parts, each solved from the same input text."""

    @abstractmethod
    def solve_1(self, text):
        """Return the answer to part one."""

    @abstractmethod
    def solve_2(self, text):
        """Return the answer to part two."""


@dataclass(frozen=True)
class _FunctionProblem(Problem):
    first: Callable[[str], Any]
    second: Callable[[str], Any]

    def solve_1(self, text):
        return self.first(text)

    def solve_2(self, text):
        return self.second(text)


def format_answers(first, second):
    """Render both answers as the report printed by :func:`solve`."""
    return f"\nProblem 1:\n{first}\n\nProblem 2:\n{second}\n"


def solve(problem, name):
    """Solve both parts against the input called ``name`` and print them."""
    text = read_input(name)
    first = problem.solve_1(text)
    second = problem.solve_2(text)
    print(format_answers(first, second), end="")
    return first, second


def auto_solve(first, second, name):
    """Like :func:`solve`, with each part given as a plain function."""
    return solve(_FunctionProblem(first, second), name)