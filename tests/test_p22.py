import pytest

from aoc23.days.p22 import Brick, parse_brick, settle, solve_1, solve_2

TEST_INPUT = """1,0,1~1,2,1
0,0,2~2,0,2
0,2,3~2,2,3
0,0,4~0,2,4
2,0,5~2,2,5
0,1,6~2,1,6
1,1,8~1,1,9"""


def test_solve_1():
    assert solve_1(TEST_INPUT) == 5


def test_solve_2():
    assert solve_2(TEST_INPUT) == 7


def test_parse_brick_orders_endpoints():
    assert parse_brick("2,5,9~0,5,3") == Brick((0, 2), (5, 5), (3, 9))


def test_parse_brick_rejects_short_point():
    with pytest.raises(ValueError):
        parse_brick("1,2~3,4,5")


def test_settle_supports():
    bricks = [parse_brick(line) for line in TEST_INPUT.splitlines()]
    settled, supports = settle(bricks)
    assert supports[0] == frozenset()
    assert supports[1] == frozenset({0})
    assert supports[2] == frozenset({0})
    assert supports[3] == frozenset({1, 2})
    assert settled[1].z == (2, 2)
    assert settled[6].z == (5, 6)


def test_settle_keeps_height():
    settled, _ = settle([Brick((0, 0), (0, 0), (10, 12))])
    assert settled == [Brick((0, 0), (0, 0), (1, 3))]