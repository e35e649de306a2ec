import pytest

from aoc23.days.p15 import hash_string, solve_1, solve_2

TEST_INPUT = "rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7"


def test_solve_1():
    assert solve_1(TEST_INPUT) == 1320


def test_solve_2():
    assert solve_2(TEST_INPUT) == 145


def test_hash_string():
    assert hash_string("HASH") == 52


def test_hash_ignores_newlines():
    assert hash_string("HA\nSH") == 52


def test_trailing_newline_ignored():
    assert solve_2(TEST_INPUT + "\n") == 145


def test_bad_step_raises():
    with pytest.raises(ValueError):
        solve_2("ab")