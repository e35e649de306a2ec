import pytest

from aoc23.days.p20 import Network, Pulse, solve_1, solve_2

TEST_INPUT = """broadcaster -> a, b, c
%a -> b
%b -> c
%c -> inv
&inv -> a"""

SECOND_INPUT = """broadcaster -> a
%a -> inv, con
&inv -> b
%b -> con
&con -> output"""


def test_solve_1():
    assert solve_1(TEST_INPUT) == 32000000


def test_solve_1_with_unknown_output():
    assert solve_1(SECOND_INPUT) == 11687500


def test_single_press_counts():
    assert Network.parse(TEST_INPUT).press() == (8, 4)


def test_solve_2_direct_output():
    assert solve_2("broadcaster -> rx") == 1


def test_solve_2_through_flip_flop():
    assert solve_2("broadcaster -> a\n%a -> rx") == 2


def test_press_until_low_output_false_when_only_high_reaches():
    network = Network.parse("broadcaster -> a\n%a -> rx")
    assert network.press_until_low_output() is False
    assert network.press_until_low_output() is True


def test_pulse_inverted():
    assert Pulse.HIGH.inverted() is Pulse.LOW
    assert Pulse.LOW.inverted() is Pulse.HIGH


def test_missing_broadcaster_raises():
    with pytest.raises(ValueError):
        Network.parse("%a -> b")