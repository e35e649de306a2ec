"""Solvers and shared helpers for the 2023 Advent of Code puzzles."""

__version__ = "0.1.0"