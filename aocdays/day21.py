"""Garden plots a gardener can reach in an exact number of steps."""

from __future__ import annotations

import argparse
import math
from collections import deque
from collections.abc import Sequence

from aocdays.utils import read_lines

STEPS = 64
INFINITE_STEPS = 26501365

Board = tuple[tuple[bool, ...], ...]
Position = tuple[int, int]

_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))


def parse_board(lines: Sequence[str]) -> Board:
    """Turn the puzzle lines into a grid where ``True`` marks a rock."""
    return tuple(tuple(char == "#" for char in line) for line in lines)


def distances(board: Board, start: Position) -> list[list[int]]:
    """Shortest step counts from ``start`` to every cell, -1 where unreachable."""
    n_rows = len(board)
    n_cols = len(board[0]) if board else 0
    result = [[-1] * n_cols for _ in range(n_rows)]
    row, col = start
    if not (0 <= row < n_rows and 0 <= col < n_cols):
        raise ValueError(f"Start {start} lies outside the board")

    result[row][col] = 0
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        dist = result[row][col] + 1
        for d_row, d_col in _MOVES:
            new_row, new_col = row + d_row, col + d_col
            if (
                0 <= new_row < n_rows
                and 0 <= new_col < n_cols
                and not board[new_row][new_col]
                and result[new_row][new_col] < 0
            ):
                result[new_row][new_col] = dist
                queue.append((new_row, new_col))
    return result


def count_reachable(board: Board, steps: int) -> int:
    """Plots reachable in exactly ``steps`` steps from the centre of the board."""
    if not board or not board[0]:
        raise ValueError("Board is empty")
    start = (len(board) // 2, len(board[0]) // 2)
    parity = steps % 2
    return sum(
        1
        for row in distances(board, start)
        for dist in row
        if 0 <= dist <= steps and dist % 2 == parity
    )


def count_infinite_reachable(board: Board, steps: int) -> int:
    """Plots reachable in ``steps`` steps on an endlessly repeated square board.

    Relies on the board being square with the centre row and column and the
    border free of rocks, so each repeated copy is entered from the middle of
    an edge or from a corner. The counting of the repeated copies assumes an
    odd number of steps large enough to cover the original board.
    """
    size = len(board)
    if size == 0 or any(len(row) != size for row in board):
        raise ValueError("Board must be a non-empty square")
    half = math.ceil(size / 2)
    parity = steps % 2

    total = sum(
        1
        for row in distances(board, (half - 1, half - 1))
        for dist in row
        if dist >= 0 and dist % 2 == parity
    )

    straight_starts = (
        (0, half - 1),
        (half - 1, 0),
        (size - 1, half - 1),
        (half - 1, size - 1),
    )
    for start in straight_starts:
        for row in distances(board, start):
            for dist in row:
                if dist < 0:
                    continue
                limit = (steps - half - dist) // size
                if dist % 2 == 0:
                    total += (limit + 1) // 2
                else:
                    total += 1 + limit // 2

    corner_starts = ((0, 0), (0, size - 1), (size - 1, 0), (size - 1, size - 1))
    for start in corner_starts:
        for row in distances(board, start):
            for dist in row:
                if dist < 0:
                    continue
                limit = (steps - dist) // size
                if dist % 2 == 0:
                    half_count = limit // 2
                    total += half_count * (half_count + 1)
                else:
                    half_count = (limit + 1) // 2
                    total += half_count * half_count

    return total


def part1(lines: Sequence[str], steps: int = STEPS) -> int:
    return count_reachable(parse_board(lines), steps)


def part2(lines: Sequence[str], steps: int = INFINITE_STEPS) -> int:
    return count_infinite_reachable(parse_board(lines), steps)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count reachable garden plots.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    lines = read_lines(args.input)
    print(part1(lines))
    print(part2(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())