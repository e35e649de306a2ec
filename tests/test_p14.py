from aoc23.days.p14 import (
    parse_field,
    roll_to_zero,
    rotate_clockwise,
    row_weight,
    solve_1,
    solve_2,
    spin_cycle,
    weight,
)

TEST_INPUT = """O....#....
O.OO#....#
.....##...
OO.#O....O
.O.....O#.
O.#..O.#.#
..O..#O..O
.......O..
#....###..
#OO..#...."""


def test_solve_1():
    assert solve_1(TEST_INPUT) == 136


def test_solve_2():
    assert solve_2(TEST_INPUT) == 64


def test_roll():
    assert roll_to_zero("OOO#...#.O###O.") == "OOO#...#O.###O."


def test_row_weight():
    assert row_weight(".O.") == 2


def test_rotate_clockwise():
    assert rotate_clockwise(("ab", "cd")) == ("ca", "db")


def test_four_rotations_restore_field():
    field = parse_field(TEST_INPUT)
    rotated = field
    for _ in range(4):
        rotated = rotate_clockwise(rotated)
    assert rotated == field


def test_spin_cycle_keeps_rock_count():
    field = parse_field(TEST_INPUT)
    spun = spin_cycle(field)
    assert sum(row.count("O") for row in spun) == sum(row.count("O") for row in field)
    assert sum(row.count("#") for row in spun) == sum(row.count("#") for row in field)


def test_weight_sums_rows():
    assert weight(("O.", ".O")) == 3