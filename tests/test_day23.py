import pytest

from aocdays.day23 import (
    START,
    build_graph,
    build_slope_graph,
    longest_path,
    longest_slope_path,
    main,
    parse_map,
    part1,
    part2,
)

EXAMPLE = [
    "#.#####################",
    "#.......#########...###",
    "#######.#########.#.###",
    "###.....#.>.>.###.#.###",
    "###v#####.#v#.###.#.###",
    "###.>...#.#.#.....#...#",
    "###v###.#.#.#########.#",
    "###...#.#.#.......#...#",
    "#####.#.#.#######.#.###",
    "#.....#.#.#.......#...#",
    "#.#####.#.#.#########v#",
    "#.#...#...#...###...>.#",
    "#.#.#v#######v###.###v#",
    "#...#.>.#...>.>.#.###.#",
    "#####v#.#.###v#.#.###.#",
    "#.....#...#...#.#.#...#",
    "#.#########.###.#.#.###",
    "#...###...#...#...#.###",
    "###.###.#.###v#####v###",
    "#...#...#.#.>.>.#.>.###",
    "#.###.###.#.###.#.#v###",
    "#.....###...###...#...#",
    "#####################.#",
]

CORRIDOR = [
    "#.###",
    "#.###",
    "#...#",
    "###.#",
]

BLOCKED = [
    "#.#",
    "#.#",
    "#^#",
    "#.#",
]


def _open_cells(lines):
    return sum(1 for line in lines for char in line if char != "#")


def test_part1_example():
    assert part1(EXAMPLE) == 94


def test_part2_example():
    assert part2(EXAMPLE) == 154


def test_ignoring_slopes_never_shortens_the_hike():
    grid = parse_map(EXAMPLE)
    assert longest_path(grid) >= longest_slope_path(grid)


def test_single_corridor_walks_every_cell():
    grid = parse_map(CORRIDOR)
    expected = _open_cells(CORRIDOR) - 1
    assert longest_slope_path(grid) == expected
    assert longest_path(grid) == expected


def test_uphill_slope_blocks_only_slope_respecting_hike():
    grid = parse_map(BLOCKED)
    assert longest_slope_path(grid) == 0
    assert longest_path(grid) == _open_cells(BLOCKED) - 1


def test_parse_map_rejects_unknown_character():
    with pytest.raises(ValueError):
        parse_map(["#.#", "#x#", "#.#"])


def test_parse_map_rejects_too_small_map():
    with pytest.raises(ValueError):
        parse_map(["#.#"])


def test_parse_map_keeps_rows():
    assert parse_map(CORRIDOR) == tuple(CORRIDOR)


def test_slope_graph_edges_lead_to_nodes_or_exit():
    grid = parse_map(EXAMPLE)
    graph = build_slope_graph(grid)
    last_row = len(grid) - 1
    assert START in graph
    for edges in graph.values():
        for target, dist in edges:
            assert dist > 0
            assert target in graph or target[0] == last_row


def test_slope_graph_reaches_exit():
    grid = parse_map(EXAMPLE)
    graph = build_slope_graph(grid)
    last_row = len(grid) - 1
    exits = {t for edges in graph.values() for t, _ in edges if t[0] == last_row}
    assert exits == {(last_row, len(grid[0]) - 2)}


def test_undirected_graph_is_symmetric_between_junctions():
    grid = parse_map(EXAMPLE)
    graph = build_graph(grid)
    last_row = len(grid) - 1
    for node, edges in graph.items():
        for target, dist in edges.items():
            if node == START or target[0] == last_row:
                continue
            assert graph[target][node] == dist


def test_undirected_graph_has_more_edges_than_slope_graph():
    grid = parse_map(EXAMPLE)
    directed = sum(len(edges) for edges in build_slope_graph(grid).values())
    undirected = sum(len(edges) for edges in build_graph(grid).values())
    assert undirected > directed


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(CORRIDOR) + "\n")
    assert main([str(path)]) == 0
    expected = _open_cells(CORRIDOR) - 1
    assert capsys.readouterr().out.split() == [str(expected), str(expected)]