from aoc23.days.p21 import Garden, solve_2

TEST_INPUT = """...........
.....###.#.
.###.##..#.
..#.#...#..
....#.#....
.##..S####.
.##..#...#.
.......##..
.##.#.####.
.##..##.##.
..........."""


def test_reachable_six_steps():
    assert Garden.parse(TEST_INPUT).reachable(6) == 16


def test_solve_2():
    assert solve_2(TEST_INPUT) == 0


def test_parse_dimensions_and_start():
    garden = Garden.parse(TEST_INPUT)
    assert (garden.width, garden.height, garden.start) == (11, 11, (5, 5))
    assert (1, 5) in garden.rocks


def test_zero_steps_is_start_only():
    assert Garden.parse(TEST_INPUT).reachable(0) == 1


def test_one_step_in_open_corner():
    assert Garden.parse("S..\n...\n...").reachable(1) == 2