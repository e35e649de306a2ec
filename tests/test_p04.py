from aoc23.days.p04 import card_score, solve_1, solve_2, winning_count

TEST_INPUT = """Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11"""


def test_1():
    assert solve_1(TEST_INPUT) == 13


def test_2():
    assert solve_2(TEST_INPUT) == 30


def test_counts_and_scores():
    lines = TEST_INPUT.splitlines()
    assert winning_count(lines[0]) == 4
    assert card_score(lines[0]) == 8
    assert winning_count(lines[5]) == 0
    assert card_score(lines[5]) == 0


def test_total_cards_at_least_originals():
    assert solve_2(TEST_INPUT) >= len(TEST_INPUT.splitlines())