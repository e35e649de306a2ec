"""Locating and reading puzzle inputs."""

from __future__ import annotations

from pathlib import Path

PROJECT_DIR_NAME = "aoc23"


def find_project_dir(start=None):
    """Return the nearest directory named ``aoc23`` at or above ``start``.

    ``start`` defaults to the current working directory.
    """
    origin = Path(start if start is not None else Path.cwd()).resolve()
    for candidate in (origin, *origin.parents):
        if candidate.is_dir() and candidate.name == PROJECT_DIR_NAME:
            return candidate
    raise FileNotFoundError(f"no {PROJECT_DIR_NAME!r} directory above {origin}")


def read_input(name, start=None):
    """Read ``input/<name>`` from the project directory."""
    path = find_project_dir(start) / "input" / name
    return path.read_text(encoding="utf-8")