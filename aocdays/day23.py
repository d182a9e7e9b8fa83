"""Longest hike through a forest map, with and without obeying the slopes."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence

from aocdays.utils import read_lines

Grid = tuple[str, ...]
Node = tuple[int, int]
Delta = tuple[int, int]

START: Node = (0, 1)
FOREST = "#"

_TILES = frozenset("#.<>^v")

# Each move in the order it is tried, with the slope that blocks it.
_MOVES: tuple[tuple[Delta, str], ...] = (
    ((0, -1), ">"),
    ((0, 1), "<"),
    ((-1, 0), "v"),
    ((1, 0), "^"),
)


def parse_map(lines: Sequence[str]) -> Grid:
    """Validate the puzzle lines and return them as a grid of rows."""
    grid = tuple(line for line in lines if line)
    for line in grid:
        unknown = set(line) - _TILES
        if unknown:
            raise ValueError(f"Unknown character: {sorted(unknown)[0]!r}")
    if len(grid) < 2 or any(len(line) < 3 for line in grid):
        raise ValueError("Map must have at least two rows of three cells")
    return grid


def _is_open(grid: Grid, row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] != FOREST


def _segments(grid: Grid, respect_slopes: bool) -> Iterator[tuple[Node, Node, int, bool]]:
    """Walk every corridor from the start.

    Yields ``(from_node, to_node, distance, reached_end)`` for each corridor
    that ends in a junction or in the last row. Dead ends are dropped and each
    junction is explored only once.
    """
    end_row = len(grid) - 1
    known = {START}
    queue: deque[tuple[Node, Node, int, Delta]] = deque([((1, 1), START, 1, (-1, 0))])

    while queue:
        pos, last, dist, back = queue.popleft()
        row, col = pos
        if row == end_row:
            yield last, pos, dist, True
            continue

        moves = [
            (delta, slope)
            for delta, slope in _MOVES
            if delta != back and _is_open(grid, row + delta[0], col + delta[1])
        ]
        if len(moves) > 1:
            yield last, pos, dist, False
            if pos in known:
                continue
            known.add(pos)
            last, dist = pos, 0

        for (d_row, d_col), slope in moves:
            n_row, n_col = row + d_row, col + d_col
            if respect_slopes and grid[n_row][n_col] == slope:
                continue
            queue.append(((n_row, n_col), last, dist + 1, (-d_row, -d_col)))


def build_slope_graph(grid: Grid) -> dict[Node, list[tuple[Node, int]]]:
    """Directed graph of junctions, where slopes may only be walked downhill."""
    graph: dict[Node, list[tuple[Node, int]]] = {START: []}
    for last, pos, dist, reached_end in _segments(grid, respect_slopes=True):
        graph.setdefault(last, []).append((pos, dist))
        if not reached_end:
            graph.setdefault(pos, [])
    return graph


def build_graph(grid: Grid) -> dict[Node, dict[Node, int]]:
    """Undirected graph of junctions, treating slopes as plain path."""
    graph: dict[Node, dict[Node, int]] = {START: {}}
    for last, pos, dist, reached_end in _segments(grid, respect_slopes=False):
        graph.setdefault(last, {}).setdefault(pos, dist)
        if not reached_end:
            graph.setdefault(pos, {}).setdefault(last, dist)
    return graph


def longest_slope_path(grid: Grid) -> int:
    """Longest hike to the last row obeying slopes; 0 if none exists."""
    graph = build_slope_graph(grid)
    end_row = len(grid) - 1
    memo: dict[Node, int | None] = {}
    active: set[Node] = set()

    def best(node: Node) -> int | None:
        if node[0] == end_row:
            return 0
        if node in memo:
            return memo[node]
        if node in active:
            raise ValueError("Slope graph contains a cycle")
        active.add(node)
        result: int | None = None
        for neighbor, dist in graph.get(node, ()):
            rest = best(neighbor)
            if rest is not None and (result is None or dist + rest > result):
                result = dist + rest
        active.discard(node)
        memo[node] = result
        return result

    length = best(START)
    return 0 if length is None else length


def longest_path(grid: Grid) -> int:
    """Longest hike to the last row visiting no junction twice; 0 if none."""
    graph = build_graph(grid)
    end_row = len(grid) - 1
    nodes = list(
        dict.fromkeys([*graph, *(nb for edges in graph.values() for nb in edges)])
    )
    index = {node: i for i, node in enumerate(nodes)}
    adjacency = [
        [(index[nb], dist) for nb, dist in graph.get(node, {}).items()] for node in nodes
    ]
    is_end = [node[0] == end_row for node in nodes]

    best = 0
    start = index[START]
    stack = [(start, 1 << start, 0)]
    while stack:
        current, seen, dist = stack.pop()
        if is_end[current]:
            best = max(best, dist)
            continue
        for neighbor, step in adjacency[current]:
            bit = 1 << neighbor
            if not seen & bit:
                stack.append((neighbor, seen | bit, dist + step))
    return best


def part1(lines: Sequence[str]) -> int:
    return longest_slope_path(parse_map(lines))


def part2(lines: Sequence[str]) -> int:
    return longest_path(parse_map(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the longest hike.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    lines = read_lines(args.input)
    print(part1(lines))
    print(part2(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())