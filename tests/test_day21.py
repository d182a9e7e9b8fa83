import pytest

from aocdays.day21 import (
    count_infinite_reachable,
    count_reachable,
    distances,
    parse_board,
    part1,
)

EXAMPLE = [
    "...........",
    ".....###.#.",
    ".###.##..#.",
    "..#.#...#..",
    "....#.#....",
    ".##..S####.",
    ".##..#...#.",
    ".......##..",
    ".##.#.####.",
    ".####..#...",
    "...........",
]

OPEN = ["....."] * 5


def test_parse_board_marks_rocks():
    board = parse_board([".#", "S."])
    assert board == ((False, True), (False, False))


def test_distances_from_start():
    board = parse_board([".#.", "...", "..."])
    dists = distances(board, (0, 0))
    assert dists[0][0] == 0
    assert dists[1][0] == 1
    assert dists[0][1] == -1
    assert dists[0][2] == dists[1][2] + 1


def test_distances_unreachable_cell():
    board = parse_board([".#.", "#..", "..."])
    dists = distances(board, (0, 0))
    assert dists[2][2] == -1
    assert dists[1][1] == -1


def test_distances_start_outside_board():
    with pytest.raises(ValueError):
        distances(parse_board(OPEN), (7, 0))


def test_example_six_steps():
    assert count_reachable(parse_board(EXAMPLE), 6) == 16


def test_part1_with_steps():
    assert part1(EXAMPLE, 6) == 16


def test_zero_steps_is_start_only():
    assert count_reachable(parse_board(EXAMPLE), 0) == 1


def test_reachable_never_exceeds_plots():
    board = parse_board(EXAMPLE)
    plots = sum(not cell for row in board for cell in row)
    assert count_reachable(board, 64) <= plots


def test_infinite_requires_square():
    with pytest.raises(ValueError):
        count_infinite_reachable(parse_board(["...", "..."]), 11)


def test_infinite_grows_with_steps():
    board = parse_board(OPEN)
    smaller = count_infinite_reachable(board, 101)
    larger = count_infinite_reachable(board, 111)
    assert larger > smaller