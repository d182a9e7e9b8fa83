"""Hailstone trajectories: crossing paths and the rock that hits them all."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations

import numpy as np

from aocdays.utils import read_lines, split_string, trim

LOWER_LIMIT = 200000000000000.0
UPPER_LIMIT = 400000000000000.0

Vector = tuple[float, float, float]


@dataclass(frozen=True)
class Hailstone:
    position: Vector
    velocity: Vector


def _vector(text: str) -> Vector:
    parts = [trim(part) for part in split_string(text, ",")]
    if len(parts) != 3:
        raise ValueError(f"Expected three coordinates: {text!r}")
    x, y, z = (float(part) for part in parts)
    return (x, y, z)


def parse_hailstones(lines: Sequence[str]) -> list[Hailstone]:
    """Parse lines such as ``19, 13, 30 @ -2, 1, -2``."""
    stones = []
    for line in lines:
        if not trim(line):
            continue
        parts = split_string(line, "@")
        if len(parts) != 2:
            raise ValueError(f"Malformed hailstone: {line!r}")
        stones.append(Hailstone(_vector(parts[0]), _vector(parts[1])))
    return stones


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _line(stone: Hailstone) -> tuple[float, float]:
    px, py, _ = stone.position
    vx, vy, _ = stone.velocity
    if vx == 0:
        raise ValueError("Hailstones moving only along y are not supported")
    slope = vy / vx
    return slope, py - slope * px


def count_intersections(
    stones: Sequence[Hailstone], lower: float, upper: float
) -> int:
    """Pairs whose future xy paths cross strictly inside the test area."""
    lines = [(stone, *_line(stone)) for stone in stones]
    total = 0
    for (first, k_i, y0_i), (second, k_j, y0_j) in combinations(lines, 2):
        if k_i == k_j:
            continue
        int_x = (y0_i - y0_j) / (k_j - k_i)
        int_y = y0_i + k_i * int_x
        inside = lower < int_x < upper and lower < int_y < upper
        ahead = (
            _sign(first.velocity[0]) * (int_x - first.position[0]) >= 0
            and _sign(second.velocity[0]) * (int_x - second.position[0]) >= 0
        )
        if inside and ahead:
            total += 1
    return total


def _cross_matrix(vec: np.ndarray) -> np.ndarray:
    """The matrix ``M`` such that ``M @ b`` equals ``vec x b``."""
    x, y, z = vec
    return np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])


def rock_position(stones: Sequence[Hailstone]) -> tuple[Vector, Vector]:
    """Position and velocity of a rock that hits every hailstone.

    Uses the first three hailstones: for each one the offset and relative
    velocity to the rock are parallel, which gives six linear equations.
    """
    if len(stones) < 3:
        raise ValueError("At least three hailstones are needed")
    p = [np.array(stone.position, dtype=float) for stone in stones[:3]]
    v = [np.array(stone.velocity, dtype=float) for stone in stones[:3]]

    rhs = np.concatenate(
        [np.cross(p[0], v[0]) - np.cross(p[i], v[i]) for i in (1, 2)]
    )
    coeffs = np.block(
        [
            [_cross_matrix(p[1] - p[0]), _cross_matrix(v[1] - v[0])],
            [_cross_matrix(p[2] - p[0]), _cross_matrix(v[2] - v[0])],
        ]
    )
    try:
        solution = np.linalg.solve(coeffs, rhs)
    except np.linalg.LinAlgError as exc:
        raise ValueError("Hailstones do not determine a unique rock") from exc

    velocity = tuple(float(-value) for value in solution[:3])
    position = tuple(float(value) for value in solution[3:])
    return position, velocity  # type: ignore[return-value]


def part1(
    lines: Sequence[str], lower: float = LOWER_LIMIT, upper: float = UPPER_LIMIT
) -> int:
    return count_intersections(parse_hailstones(lines), lower, upper)


def part2(lines: Sequence[str]) -> int:
    """Sum of the coordinates of the rock's starting position."""
    position, _ = rock_position(parse_hailstones(lines))
    return round(sum(position))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyse hailstone paths.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    lines = read_lines(args.input)
    print(part1(lines))
    print(part2(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())