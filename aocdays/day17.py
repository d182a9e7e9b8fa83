"""Least heat loss for a crucible that must turn within limited straight runs."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Sequence
from enum import Enum
from itertools import count

from aocdays.utils import read_lines

Grid = tuple[tuple[int, ...], ...]
State = tuple[int, int, int, "Direction"]


class Direction(Enum):
    """A heading, valued by its (row, column) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


_TURNS = {
    Direction.UP: (Direction.LEFT, Direction.RIGHT),
    Direction.DOWN: (Direction.LEFT, Direction.RIGHT),
    Direction.LEFT: (Direction.DOWN, Direction.UP),
    Direction.RIGHT: (Direction.DOWN, Direction.UP),
}


def parse_grid(lines: Sequence[str]) -> Grid:
    """Turn the puzzle lines into a grid of single-digit heat losses."""
    try:
        return tuple(tuple(int(char) for char in line) for line in lines)
    except ValueError as exc:
        raise ValueError("Grid cells must be digits") from exc


def min_heat_loss(grid: Grid, min_steps: int, max_steps: int) -> int:
    """Least heat lost going from the top-left to the bottom-right cell.

    The crucible moves at most ``max_steps`` cells in a line and must have
    moved at least ``min_steps`` in a line before turning or stopping.
    With a minimum run of one, the search starts on the origin as if already
    one step into its run; otherwise it starts one step into each of the two
    possible first moves. Returns -1 when the goal cannot be reached.
    """
    n_rows = len(grid)
    n_cols = len(grid[0]) if grid else 0
    if n_rows == 0 or n_cols == 0:
        raise ValueError("Grid is empty")

    if min_steps <= 1:
        starts: list[tuple[int, State]] = [
            (0, (0, 0, 1, Direction.DOWN)),
            (0, (0, 0, 1, Direction.RIGHT)),
        ]
    else:
        if n_rows < 2 or n_cols < 2:
            raise ValueError("Grid must be at least 2x2")
        starts = [
            (grid[1][0], (1, 0, 1, Direction.DOWN)),
            (grid[0][1], (0, 1, 1, Direction.RIGHT)),
        ]

    order = count()
    considered: set[State] = {state for _, state in starts}
    queue = [(heat, next(order), state) for heat, state in starts]
    heapq.heapify(queue)

    while queue:
        heat, _, (row, col, steps, heading) = heapq.heappop(queue)
        if row == n_rows - 1 and col == n_cols - 1 and steps >= min_steps:
            return heat

        d_row, d_col = heading.value
        candidates = [(row + d_row, col + d_col, steps + 1, heading)]
        for turn in _TURNS[heading]:
            t_row, t_col = turn.value
            candidates.append((row + t_row, col + t_col, 1, turn))

        for candidate in candidates:
            c_row, c_col, c_steps, _ = candidate
            if c_steps > max_steps or (c_steps == 1 and steps < min_steps):
                continue
            if not (0 <= c_row < n_rows and 0 <= c_col < n_cols):
                continue
            if candidate in considered:
                continue
            considered.add(candidate)
            heapq.heappush(queue, (heat + grid[c_row][c_col], next(order), candidate))

    return -1


def part1(lines: Sequence[str]) -> int:
    """Least heat loss for a crucible moving at most three cells in a line."""
    return min_heat_loss(parse_grid(lines), 1, 3)


def part2(lines: Sequence[str]) -> int:
    """Least heat loss for an ultra crucible: runs of four to ten cells."""
    return min_heat_loss(parse_grid(lines), 4, 10)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the least heat loss.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    lines = read_lines(args.input)
    print(part1(lines))
    print(part2(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())