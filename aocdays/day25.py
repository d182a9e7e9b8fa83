"""Splitting a wiring graph in two by its minimum cut (Stoer-Wagner)."""

from __future__ import annotations

import argparse
from collections.abc import MutableMapping, Sequence

from aocdays.utils import read_lines, split_string, trim

Graph = dict[int, dict[int, int]]


def node_key(name: str) -> int:
    """Integer key of a component name, a base-31 polynomial of its characters."""
    result = 0
    weight = 1
    for char in name:
        result += ord(char) * weight
        weight *= 31
    return result


def parse_graph(lines: Sequence[str]) -> Graph:
    """Build the undirected unit-weight graph from lines such as ``jqt: rhn xhk``."""
    graph: Graph = {}
    for line in lines:
        if not trim(line):
            continue
        parts = split_string(line, ":")
        if len(parts) != 2:
            raise ValueError(f"Malformed line: {line!r}")
        node = node_key(parts[0])
        for name in split_string(trim(parts[1]), " "):
            other = node_key(name)
            graph.setdefault(node, {})[other] = 1
            graph.setdefault(other, {})[node] = 1
    return graph


def min_cut_phase(
    graph: Graph, sizes: MutableMapping[int, int]
) -> tuple[int, int]:
    """Run one phase: return the cut-of-the-phase and the size of the last node.

    The last two nodes added are merged in ``graph`` and ``sizes``.
    """
    remaining = list(graph)
    first = remaining[0]
    weights = {node: 0 for node in remaining[1:]}
    for neighbor, cost in graph[first].items():
        if neighbor in weights:
            weights[neighbor] += cost

    last_node = first
    last2_node = first
    max_cut = 0
    while weights:
        max_node = max(weights, key=weights.__getitem__)
        max_cut = weights.pop(max_node)
        for neighbor, cost in graph[max_node].items():
            if neighbor in weights:
                weights[neighbor] += cost
        last2_node, last_node = last_node, max_node

    last_size = sizes[last_node]

    common = (set(graph[last_node]) | set(graph[last2_node])) - {last_node, last2_node}
    for neighbor in common:
        edges = graph[neighbor]
        new_cost = edges.get(last_node, 0) + edges.get(last2_node, 0)
        edges[last_node] = new_cost
        graph[last_node][neighbor] = new_cost
        edges.pop(last2_node, None)

    del graph[last2_node]
    graph[last_node].pop(last2_node, None)
    sizes[last_node] += sizes.pop(last2_node)

    return max_cut, last_size


def partition_product(graph: Graph) -> int:
    """Product of the sizes of the two groups separated by a minimum cut."""
    if not graph:
        raise ValueError("Graph is empty")
    work = {node: dict(edges) for node, edges in graph.items()}
    sizes = {node: 1 for node in work}
    full_size = len(work)
    min_cut = full_size * full_size
    partition_size = 0
    while len(work) > 1:
        cut, size = min_cut_phase(work, sizes)
        if cut < min_cut:
            min_cut = cut
            partition_size = size
    return (full_size - partition_size) * partition_size


def part1(lines: Sequence[str]) -> int:
    return partition_product(parse_graph(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Split the wiring graph.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    print(part1(read_lines(args.input)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())