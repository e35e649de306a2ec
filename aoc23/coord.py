"""Neighbourhoods of grid coordinates."""

from __future__ import annotations

_CARDINAL_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_DIAGONAL_STEPS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def _neighbours(coord, steps, unsigned):
    row, col = coord
    for d_row, d_col in steps:
        candidate = (row + d_row, col + d_col)
        if unsigned and (candidate[0] < 0 or candidate[1] < 0):
            continue
        yield candidate


def adjacent_cardinal(coord, unsigned=False):
    """Return the up to four orthogonal neighbours of ``coord``.

    With ``unsigned`` set, neighbours with a negative component are dropped.
    """
    return list(_neighbours(coord, _CARDINAL_STEPS, unsigned))


def adjacent_diagonal(coord, unsigned=False):
    """Return the up to four diagonal neighbours of ``coord``."""
    return list(_neighbours(coord, _DIAGONAL_STEPS, unsigned))


def adjacent_all(coord, unsigned=False):
    """Return the cardinal neighbours followed by the diagonal ones."""
    return adjacent_cardinal(coord, unsigned) + adjacent_diagonal(coord, unsigned)