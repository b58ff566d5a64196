"""Shared graphs for the graph-layer tests."""
from __future__ import annotations

import pytest

from chordalkit.graph.store import Graph


def cycle(n: int) -> Graph:
    """Chordless cycle 1 - 2 - ... - n - 1."""
    return Graph.undirected(
        range(1, n + 1), [(i, i % n + 1) for i in range(1, n + 1)]
    )


def grid(rows: int, cols: int) -> Graph:
    """rows x cols grid; node (r, c) has id r * cols + c + 1."""
    def nid(r: int, c: int) -> int:
        return r * cols + c + 1

    edges = []
    for r in range(rows):
        for c in range(cols):
            if c + 1 < cols:
                edges.append((nid(r, c), nid(r, c + 1)))
            if r + 1 < rows:
                edges.append((nid(r, c), nid(r + 1, c)))
    return Graph.undirected(range(1, rows * cols + 1), edges)


def one_way(nodes, edges) -> Graph:
    """Graph whose edges are stored in one direction only."""
    g = Graph()
    for n in nodes:
        g.insert_node(n)
    for src, dst in edges:
        g.insert_edge(src, dst)
    return g


@pytest.fixture
def empty_graph() -> Graph:
    return Graph()


@pytest.fixture
def path5() -> Graph:
    """1 - 2 - 3 - 4 - 5"""
    return Graph.undirected(range(1, 6), [(1, 2), (2, 3), (3, 4), (4, 5)])


@pytest.fixture
def star() -> Graph:
    """Centre 0 joined to leaves 1..4, leaves inserted first."""
    return Graph.undirected([1, 2, 3, 4, 0], [(0, i) for i in range(1, 5)])


@pytest.fixture
def square() -> Graph:
    """4-cycle 1 - 2 - 3 - 4 - 1 without a chord."""
    return cycle(4)


@pytest.fixture
def square_with_chord() -> Graph:
    """4-cycle plus diagonal 2 - 4, inserted so 2 and 4 come last."""
    return Graph.undirected(
        [1, 3, 2, 4], [(1, 2), (2, 3), (3, 4), (4, 1), (2, 4)]
    )


@pytest.fixture
def k4() -> Graph:
    return Graph.undirected(
        range(1, 5), [(u, v) for u in range(1, 5) for v in range(u + 1, 5)]
    )


@pytest.fixture
def labelled() -> Graph:
    """Triangle with node and edge labels (some unhashable)."""
    return Graph.undirected(
        [(1, "alice"), (2, {"role": "bob"}), (3, ["carol"])],
        [(1, 2, "knows"), (2, 3, 0.5), (1, 3, {"since": 2019})],
    )


@pytest.fixture
def make_cycle():
    return cycle


@pytest.fixture
def make_grid():
    return grid


@pytest.fixture
def make_one_way():
    return one_way
