import pytest

from aoc23.days.p13 import reflect_score, solve_1, solve_2

FIRST = """#.##..##.
..#.##.#.
##......#
##......#
..#.##.#.
..##..##.
#.#.##.#."""

SECOND = """#...##..#
#....#..#
..##..###
#####.##.
#####.##.
..##..###
#....#..#"""

TEST_INPUT = FIRST + "\n\n" + SECOND


def test_solve_1():
    assert solve_1(TEST_INPUT) == 405


def test_solve_2():
    assert solve_2(TEST_INPUT) == 400


def test_vertical_reflection():
    assert reflect_score(FIRST, 0) == 5


def test_horizontal_reflection():
    assert reflect_score(SECOND, 0) == 400


def test_smudged_reflection_moves_line():
    assert reflect_score(FIRST, 1) == 300
    assert reflect_score(SECOND, 1) == 100


def test_no_reflection_raises():
    with pytest.raises(ValueError):
        reflect_score("#.\n..", 0)