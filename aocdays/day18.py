"""Area enclosed by a dug trench loop, via the shoelace formula and Pick's theorem."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import pairwise

from aocdays.utils import read_lines, split_string

Point = tuple[int, int]

_STEPS = {"R": (1, 0), "L": (-1, 0), "D": (0, 1), "U": (0, -1)}
_HEX_DIRECTIONS = {"0": "R", "1": "D", "2": "L", "3": "U"}


def fill_area(vertices: Sequence[Point]) -> int:
    """Cells covered by the loop and its interior.

    The first and last vertex must be the same point, closing the loop.
    """
    double_area = 0
    boundary = 0
    for (x1, y1), (x2, y2) in pairwise(vertices):
        double_area += (x1 - x2) * (y1 + y2)
        boundary += abs(x1 - x2) + abs(y1 - y2)
    double_interior = abs(double_area) + 2 - boundary
    return double_interior // 2 + boundary


def _trace(moves: Iterable[tuple[str, int]]) -> list[Point]:
    x, y = 0, 0
    points = [(x, y)]
    for direction, steps in moves:
        try:
            dx, dy = _STEPS[direction]
        except KeyError as exc:
            raise ValueError(f"Unknown direction: {direction!r}") from exc
        x += dx * steps
        y += dy * steps
        points.append((x, y))
    return points


def parse_plan(lines: Sequence[str]) -> list[Point]:
    """Vertices of the loop described by the direction and step columns."""

    def moves() -> Iterable[tuple[str, int]]:
        for line in lines:
            parts = split_string(line, " ")
            yield parts[0], int(parts[1])

    return _trace(moves())


def parse_hex_plan(lines: Sequence[str]) -> list[Point]:
    """Vertices of the loop encoded in the colour column, e.g. ``(#70c710)``."""

    def moves() -> Iterable[tuple[str, int]]:
        for line in lines:
            code = split_string(line, " ")[2]
            steps = int(code[2:7], 16)
            digit = code[7]
            if digit not in _HEX_DIRECTIONS:
                raise ValueError(f"Unknown direction digit: {digit!r}")
            yield _HEX_DIRECTIONS[digit], steps

    return _trace(moves())


def part1(lines: Sequence[str]) -> int:
    return fill_area(parse_plan(lines))


def part2(lines: Sequence[str]) -> int:
    return fill_area(parse_hex_plan(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute the lagoon size.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    lines = read_lines(args.input)
    print(part1(lines))
    print(part2(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())