"""Snowverload: splitting the wiring in two by cutting three wires."""

from __future__ import annotations

import argparse
from collections import deque

from aoc23.problem import auto_solve

NAME = "p25"

_CUT_SIZE = 3


def parse_graph(text):
    """Return ``{component: {neighbour: wire count}}`` in order of first mention.

    Every wire is counted in both directions.
    """
    graph = {}
    for line in text.splitlines():
        source, targets = line.split(":", 1)
        graph.setdefault(source, {})
        for target in targets.split():
            graph.setdefault(target, {})
            graph[source][target] = graph[source].get(target, 0) + 1
            graph[target][source] = graph[target].get(source, 0) + 1
    return graph


def _augmenting_path(residual, source, sink):
    parents = {source: None}
    queue = deque([source])
    while queue and sink not in parents:
        node = queue.popleft()
        for neighbour, capacity in residual[node].items():
            if capacity > 0 and neighbour not in parents:
                parents[neighbour] = node
                queue.append(neighbour)
    if sink not in parents:
        return None
    path = []
    node = sink
    while parents[node] is not None:
        path.append((parents[node], node))
        node = parents[node]
    return path


def max_flow(graph, source, sink):
    """Return the maximum flow from ``source`` to ``sink`` through ``graph``'s capacities."""
    if source == sink:
        raise ValueError("source and sink must differ")
    residual = {node: dict(edges) for node, edges in graph.items()}
    for node, edges in graph.items():
        for target in edges:
            residual.setdefault(target, {}).setdefault(node, 0)
    flow = 0
    while (path := _augmenting_path(residual, source, sink)) is not None:
        bottleneck = min(residual[u][v] for u, v in path)
        for u, v in path:
            residual[u][v] -= bottleneck
            residual[v][u] += bottleneck
        flow += bottleneck
    return flow


def solve_1(text):
    graph = parse_graph(text)
    if not graph:
        raise ValueError("no components in input")
    source, *others = graph
    cut = sum(1 for target in others if max_flow(graph, source, target) == _CUT_SIZE)
    return cut * (len(others) - cut + 1)


def solve_2(text):
    """There is no second part: the wiring is read and zero is reported."""
    parse_graph(text)
    return 0


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="Snowverload.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)