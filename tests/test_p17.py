import pytest

from aoc23.days.p17 import min_heat_loss, solve_1, solve_2

TEST_INPUT = """2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533"""

STRAIGHT_INPUT = """111111111111
999999999991
999999999991
999999999991
999999999991"""


def test_solve_1():
    assert solve_1(TEST_INPUT) == 102


def test_solve_2():
    assert solve_2(TEST_INPUT) == 94


def test_solve_2_long_straights():
    assert solve_2(STRAIGHT_INPUT) == 71


def test_simple_row():
    assert min_heat_loss("123", 0, 3) == 5


def test_run_limit_makes_row_unreachable():
    with pytest.raises(ValueError):
        min_heat_loss("11111", 0, 3)


def test_non_digit_raises():
    with pytest.raises(ValueError):
        min_heat_loss("1a\n11", 0, 3)