import pytest

from aoc23.days.p25 import max_flow, parse_graph, solve_1, solve_2

TEST_INPUT = """jqt: rhn xhk nvd
rsh: frs pzl lsr
xhk: hfx
cmg: qnr nvd lhk bvb
rhn: xhk bvb hfx
bvb: xhk hfx
pzl: lsr hfx nvd
qnr: nvd
ntq: jqt hfx bvb xhk
nvd: lhk
lsr: lhk
rzs: qnr cmg lsr rsh
frs: qnr lhk lsr"""


def test_solve_1():
    assert solve_1(TEST_INPUT) == 54


def test_solve_2():
    assert solve_2(TEST_INPUT) == 0


def test_parse_graph():
    assert parse_graph("a: b c") == {"a": {"b": 1, "c": 1}, "b": {"a": 1}, "c": {"a": 1}}


def test_parse_graph_counts_repeated_wires():
    graph = parse_graph("a: b\nb: a")
    assert graph["a"]["b"] == 2
    assert graph["b"]["a"] == 2


def test_max_flow_triangle():
    graph = parse_graph("a: b c\nb: c")
    assert max_flow(graph, "a", "b") == 2


def test_max_flow_disconnected():
    graph = parse_graph("a: b\nc: d")
    assert max_flow(graph, "a", "d") == 0


def test_max_flow_same_node():
    with pytest.raises(ValueError):
        max_flow(parse_graph("a: b"), "a", "a")


def test_solve_1_empty():
    with pytest.raises(ValueError):
        solve_1("")