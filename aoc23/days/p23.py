"""A long walk: the longest path through the forest trails."""

from __future__ import annotations

import argparse

from aoc23.coord import adjacent_cardinal
from aoc23.problem import auto_solve

NAME = "p23"

_SLOPES = {">": (0, 1), "<": (0, -1), "^": (-1, 0), "v": (1, 0)}


def _link(graph, source, target):
    graph.setdefault(source, {})[target] = 1


def build_graph(text, slopes):
    """Return the trail map as ``{cell: {neighbour: distance}}``.

    With ``slopes`` set, slope tiles lead only downhill; otherwise they are
    ordinary path.
    """
    grid = text.splitlines()
    graph = {}
    for row, line in enumerate(grid):
        for col, ch in enumerate(line):
            if ch == "#":
                continue
            if slopes and ch in _SLOPES:
                d_row, d_col = _SLOPES[ch]
                _link(graph, (row, col), (row + d_row, col + d_col))
            elif not slopes or ch == ".":
                for n_row, n_col in adjacent_cardinal((row, col), unsigned=True):
                    if n_row < len(grid) and n_col < len(grid[n_row]) and grid[n_row][n_col] != "#":
                        _link(graph, (row, col), (n_row, n_col))
    return graph


def _try_simplify(graph, node):
    edges = graph[node]
    if len(edges) != 2:
        return
    first, second = edges
    if node not in graph[first] or node not in graph[second]:
        return
    distance = edges[first] + edges[second]
    del graph[first][node]
    graph[first][second] = distance
    del graph[second][node]
    graph[second][first] = distance
    del graph[node]


def simplify(graph):
    """Collapse corridor cells with two two-way links into weighted edges, in place."""
    while True:
        size = len(graph)
        for node in list(graph):
            _try_simplify(graph, node)
        if len(graph) == size:
            return graph


def longest_walk(graph):
    """Return the longest walk from the top node to the bottom node visiting no node twice."""
    start = min(graph, key=lambda node: node[0])
    end = max(graph, key=lambda node: node[0])
    longest = 0
    stack = [(start, 0, iter(graph[start].items()))]
    visited = {start}
    while stack:
        node, distance, edges = stack.pop()
        if node == end:
            visited.discard(node)
            longest = max(longest, distance)
            continue
        step = next(edges, None)
        if step is None:
            visited.discard(node)
            continue
        stack.append((node, distance, edges))
        target, length = step
        if target in visited:
            continue
        visited.add(target)
        stack.append((target, distance + length, iter(graph[target].items())))
    return longest


def solve_1(text):
    return longest_walk(simplify(build_graph(text, slopes=True)))


def solve_2(text):
    return longest_walk(simplify(build_graph(text, slopes=False)))


def main(argv=None):
    argparse.ArgumentParser(prog=NAME, description="A long walk.").parse_args(argv)
    auto_solve(solve_1, solve_2, NAME)