"""Falling sand bricks: which ones can be removed and how many fall in a chain."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace

from aocdays.utils import read_lines, split_string, trim

SupportGraph = tuple[list[set[int]], list[set[int]]]


@dataclass(frozen=True)
class Position:
    x: int
    y: int
    z: int


@dataclass(frozen=True)
class Brick:
    """A straight brick spanning ``start`` to ``end``, both ends included.

    Every coordinate of ``end`` is expected to be at least that of ``start``.
    """

    start: Position
    end: Position

    @property
    def height(self) -> int:
        return 1 + self.end.z - self.start.z

    def footprint(self) -> Iterator[tuple[int, int]]:
        """The (x, y) cells the brick covers when seen from above."""
        if self.start.x < self.end.x:
            return ((x, self.start.y) for x in range(self.start.x, self.end.x + 1))
        return ((self.start.x, y) for y in range(self.start.y, self.end.y + 1))

    def overlaps(self, other: Brick) -> bool:
        """Whether the two bricks share a cell when seen from above."""
        return (
            self.start.y <= other.end.y
            and other.start.y <= self.end.y
            and self.start.x <= other.end.x
            and other.start.x <= self.end.x
        )


def _position(text: str) -> Position:
    parts = [trim(part) for part in split_string(text, ",")]
    if len(parts) != 3:
        raise ValueError(f"Expected three coordinates: {text!r}")
    x, y, z = (int(part) for part in parts)
    return Position(x, y, z)


def parse_bricks(lines: Sequence[str]) -> list[Brick]:
    """Parse lines such as ``1,0,1~1,2,1``."""
    bricks = []
    for line in lines:
        if not trim(line):
            continue
        parts = split_string(line, "~")
        if len(parts) != 2:
            raise ValueError(f"Malformed brick: {line!r}")
        bricks.append(Brick(_position(parts[0]), _position(parts[1])))
    return bricks


def settle(bricks: Sequence[Brick]) -> list[Brick]:
    """Let every brick fall as far as it can; lowest bricks first.

    The result is ordered by the bricks' original starting heights.
    """
    next_free: dict[tuple[int, int], int] = {}
    settled = []
    for brick in sorted(bricks, key=lambda b: b.start.z):
        cells = list(brick.footprint())
        base = max(next_free.get(cell, 1) for cell in cells)
        height = brick.height
        for cell in cells:
            next_free[cell] = base + height
        settled.append(
            Brick(replace(brick.start, z=base), replace(brick.end, z=base + height - 1))
        )
    return settled


def support_graph(bricks: Sequence[Brick]) -> SupportGraph:
    """For settled bricks: the bricks each one holds up, and those holding it up."""
    by_top: dict[int, list[int]] = {}
    for index, brick in enumerate(bricks):
        by_top.setdefault(brick.end.z, []).append(index)

    supports: list[set[int]] = [set() for _ in bricks]
    supported_by: list[set[int]] = [set() for _ in bricks]
    for index, brick in enumerate(bricks):
        for below in by_top.get(brick.start.z - 1, ()):
            if brick.overlaps(bricks[below]):
                supported_by[index].add(below)
                supports[below].add(index)
    return supports, supported_by


def part1(lines: Sequence[str]) -> int:
    """Bricks that can be removed without any other brick falling."""
    supports, supported_by = support_graph(settle(parse_bricks(lines)))
    return sum(
        1
        for held in supports
        if all(len(supported_by[above]) != 1 for above in held)
    )


def part2(lines: Sequence[str]) -> int:
    """Sum, over every brick, of the other bricks that fall when it is removed."""
    supports, supported_by = support_graph(settle(parse_bricks(lines)))
    count = len(supports)
    full_cache: list[set[int] | None] = [None] * count
    partial_cache: list[set[int]] = [set() for _ in range(count)]
    total = 0

    # Higher bricks come later and have fewer dependants, so go top down.
    for index in reversed(range(count)):
        falling = {index}
        blocked = {index}
        queue = deque(supports[index])
        while queue:
            other = queue.popleft()
            cached = full_cache[other]
            if not supported_by[other] <= falling:
                blocked.add(other)
            elif cached is not None:
                falling |= cached
                queue.extend(partial_cache[other])
            else:
                falling.add(other)
                queue.extend(supports[other])

        blocked -= falling
        full_cache[index] = falling
        partial_cache[index] = blocked
        total += len(falling) - 1

    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyse falling bricks.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    lines = read_lines(args.input)
    print(part1(lines))
    print(part2(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())