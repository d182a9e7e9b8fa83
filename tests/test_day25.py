import pytest

from aocdays.day25 import (
    min_cut_phase,
    node_key,
    parse_graph,
    part1,
    partition_product,
)

EXAMPLE = [
    "jqt: rhn xhk nvd",
    "rsh: frs pzl lsr",
    "xhk: hfx",
    "cmg: qnr nvd lhk bvb",
    "rhn: xhk bvb hfx",
    "bvb: xhk hfx",
    "pzl: lsr hfx nvd",
    "qnr: nvd",
    "ntq: jqt hfx bvb xhk",
    "nvd: lhk",
    "lsr: lhk",
    "rzs: qnr cmg lsr rsh",
    "frs: qnr lhk lsr",
]


def test_node_key_distinguishes_names():
    names = {"jqt", "rhn", "xhk", "nvd", "qtj"}
    assert len({node_key(name) for name in names}) == len(names)


def test_node_key_empty_name():
    assert node_key("") == 0


def test_parse_graph_is_symmetric():
    graph = parse_graph(EXAMPLE)
    assert len(graph) == 15
    for node, edges in graph.items():
        for other, cost in edges.items():
            assert cost == 1
            assert graph[other][node] == 1


def test_parse_graph_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_graph(["abc def"])


def test_min_cut_phase_merges_two_nodes():
    graph = {1: {2: 1}, 2: {1: 1}}
    sizes = {1: 1, 2: 1}
    cut, size = min_cut_phase(graph, sizes)
    assert (cut, size) == (1, 1)
    assert len(graph) == 1
    assert sum(sizes.values()) == 2


def test_min_cut_phase_shrinks_graph():
    graph = parse_graph(EXAMPLE)
    sizes = {node: 1 for node in graph}
    min_cut_phase(graph, sizes)
    assert len(graph) == 14
    assert sum(sizes.values()) == 15
    for node, edges in graph.items():
        for other, cost in edges.items():
            assert graph[other][node] == cost


def test_example_answer():
    assert part1(EXAMPLE) == 54


def test_partition_product_leaves_input_untouched():
    graph = parse_graph(EXAMPLE)
    before = {node: dict(edges) for node, edges in graph.items()}
    partition_product(graph)
    assert graph == before


def test_two_triangles_joined_by_bridge():
    lines = ["aa: bb cc", "bb: cc", "dd: ee ff", "ee: ff", "cc: dd"]
    assert part1(lines) == 9


def test_empty_graph_rejected():
    with pytest.raises(ValueError):
        partition_product({})