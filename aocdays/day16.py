"""Light beams bouncing through a grid of mirrors and splitters."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum

from aocdays.utils import read_lines

Board = tuple[tuple["Tile", ...], ...]


class Tile(Enum):
    EMPTY = "."
    SLASH_RIGHT = "/"
    SLASH_LEFT = "\\"
    VERTICAL = "|"
    HORIZONTAL = "-"


class Direction(Enum):
    """A heading, valued by its (row, column) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


_SLASH_RIGHT_TURN = {
    Direction.RIGHT: Direction.UP,
    Direction.LEFT: Direction.DOWN,
    Direction.UP: Direction.RIGHT,
    Direction.DOWN: Direction.LEFT,
}

_SLASH_LEFT_TURN = {
    Direction.RIGHT: Direction.DOWN,
    Direction.LEFT: Direction.UP,
    Direction.UP: Direction.LEFT,
    Direction.DOWN: Direction.RIGHT,
}

_HORIZONTAL = {Direction.LEFT, Direction.RIGHT}


def parse_board(lines: Sequence[str]) -> Board:
    """Turn the puzzle lines into a grid of tiles."""
    try:
        return tuple(tuple(Tile(char) for char in line) for line in lines)
    except ValueError as exc:
        raise ValueError("Unknown board element") from exc


def energized_count(board: Board, row: int, col: int, direction: Direction) -> int:
    """Count the tiles a beam entering at (row, col) heading ``direction`` passes."""
    n_rows = len(board)
    n_cols = len(board[0]) if board else 0
    visited: set[tuple[int, int, Direction]] = set()
    beams = [(row, col, direction)]

    while beams:
        i, j, heading = beams.pop()
        while 0 <= i < n_rows and 0 <= j < n_cols:
            if (i, j, heading) in visited:
                break
            visited.add((i, j, heading))

            tile = board[i][j]
            if tile is Tile.SLASH_RIGHT:
                heading = _SLASH_RIGHT_TURN[heading]
            elif tile is Tile.SLASH_LEFT:
                heading = _SLASH_LEFT_TURN[heading]
            elif tile is Tile.VERTICAL and heading in _HORIZONTAL:
                heading = Direction.DOWN
                beams.append((i - 1, j, Direction.UP))
            elif tile is Tile.HORIZONTAL and heading not in _HORIZONTAL:
                heading = Direction.RIGHT
                beams.append((i, j - 1, Direction.LEFT))

            d_row, d_col = heading.value
            i += d_row
            j += d_col

    return len({(i, j) for i, j, _ in visited})


def part1(lines: Sequence[str]) -> int:
    """Energized tiles for a beam entering the top-left corner heading right."""
    return energized_count(parse_board(lines), 0, 0, Direction.RIGHT)


def part2(lines: Sequence[str]) -> int:
    """Largest energized count over every beam entering from an edge."""
    board = parse_board(lines)
    n_rows = len(board)
    n_cols = len(board[0]) if board else 0
    starts = [
        *((i, 0, Direction.RIGHT) for i in range(n_rows)),
        *((i, n_cols - 1, Direction.LEFT) for i in range(n_rows)),
        *((0, j, Direction.DOWN) for j in range(n_cols)),
        *((n_rows - 1, j, Direction.UP) for j in range(n_cols)),
    ]
    return max(energized_count(board, *start) for start in starts)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count energized tiles.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    lines = read_lines(args.input)
    print(part1(lines))
    print(part2(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())