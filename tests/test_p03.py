from aoc23.days.p03 import find_number, line_numbers, numbers, pieces, solve_1, solve_2

TEST_INPUT = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598.."""


def test_find_number():
    assert find_number("467..114..", 0) == (0, 3)
    assert find_number("467..114..", 4) == (5, 8)
    assert find_number("..", 0) is None
    assert find_number("", 0) is None
    assert find_number("5", 0) == (0, 1)


def test_1():
    assert solve_1(TEST_INPUT) == 4361


def test_2():
    assert solve_2(TEST_INPUT) == 467835


def test_line_numbers():
    assert line_numbers("467..114..", 0) == [
        (467, [(0, 0), (0, 1), (0, 2)]),
        (114, [(0, 5), (0, 6), (0, 7)]),
    ]


def test_numbers_cover_every_digit():
    digits = sum(ch.isdigit() for ch in TEST_INPUT)
    assert sum(len(cells) for _, cells in numbers(TEST_INPUT)) == digits


def test_pieces_finds_symbols():
    assert sorted(ch for ch, _, _ in pieces(TEST_INPUT)) == sorted("*#*+$*")
    assert ("#", 3, 6) in pieces(TEST_INPUT)