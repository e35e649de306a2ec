import pytest

from aoc23.days.p02 import id_if_possible, power, solve_1, solve_2

TEST_INPUT = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"""


def test_1():
    assert solve_1(TEST_INPUT) == 8


def test_2():
    assert solve_2(TEST_INPUT) == 2286


def test_possible_and_impossible_games():
    lines = TEST_INPUT.splitlines()
    assert id_if_possible(lines[0]) == 1
    assert id_if_possible(lines[2]) == 0


def test_power_of_first_game():
    assert power(TEST_INPUT.splitlines()[0]) == 48


def test_missing_colour_gives_zero_power():
    assert power("Game 9: 3 red, 2 blue") == 0


def test_unknown_colour_raises():
    with pytest.raises(ValueError):
        id_if_possible("Game 1: 3 purple")