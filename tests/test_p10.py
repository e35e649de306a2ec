import pytest

from aoc23.days.p10 import solve_1, solve_2, walk

SQUARE = [".....", ".S-7.", ".|.|.", ".L-J.", "....."]

TANGLED = ["7-F7-", ".FJ|7", "SJLL7", "|F--J", "LJ.LJ"]

SIMPLE_ENCLOSURE = [
    "...........", ".S-------7.", ".|F-----7|.",
    ".||.....||.", ".||.....||.", ".|L-7.F-J|.",
    ".|..|.|..|.", ".L--J.L--J.", "...........",
]

LARGER_ENCLOSURE = [
    ".F----7F7F7F7F-7....", ".|F--7||||||||FJ....",
    ".||.FJ||||||||L7....", "FJL7L7LJLJ||LJ.L-7..",
    "L--J.L7...LJS7F-7L7.", "....F-J..F7FJ|L7L7L7",
    "....L7.F7||L7|.L7L7|", ".....|FJLJ|FJ|F7|.LJ",
    "....FJL-7.||.||||...", "....L---J.LJ.LJLJ...",
]

JUNK_ENCLOSURE = [
    "FF7FSF7F7F7F7F7F---7", "L|LJ||||||||||||F--J",
    "FL-7LJLJ||||||LJL-77", "F--JF--7||LJLJ7F7FJ-",
    "L---JF-JLJ.||-FJLJJ7", "|F|F-JF---7F7-L7L|7|",
    "|FFJF7L7F-JF7|JL---7", "7-L-JL7||F7|L7F-7F7|",
    "L.L7LFJ|||||FJL7||LJ", "L7JLJL-JLJLJL--JLJ.L",
]


def _text(rows):
    return "\n".join(rows)


def test_farthest_point():
    assert solve_1(_text(SQUARE)) == 4
    assert solve_1(_text(TANGLED)) == 8


def test_enclosed_simple():
    assert solve_2(_text(SIMPLE_ENCLOSURE)) == 4


def test_enclosed_larger():
    assert solve_2(_text(LARGER_ENCLOSURE)) == 8


def test_enclosed_with_junk():
    assert solve_2(_text(JUNK_ENCLOSURE)) == 10


def test_walk_small_loop():
    assert walk(SQUARE) == (4, 1)


def test_walk_without_loop_raises():
    with pytest.raises(ValueError):
        walk(["S"])


def test_walk_without_start_raises():
    with pytest.raises(ValueError):
        walk(["..", ".."])