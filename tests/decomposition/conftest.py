"""Shared graphs for tree-decomposition tests."""
from __future__ import annotations

import pytest

from chordalkit.graph.store import Graph


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
    return Graph.undirected(range(1, 5), [(1, 2), (2, 3), (3, 4), (4, 1)])


@pytest.fixture
def square_with_chord() -> Graph:
    """4-cycle plus diagonal 2 - 4, inserted so 2 and 4 come last."""
    return Graph.undirected(
        [1, 3, 2, 4], [(1, 2), (2, 3), (3, 4), (4, 1), (2, 4)]
    )


@pytest.fixture
def grid3() -> Graph:
    """3 x 3 grid, ids 1..9 row by row."""
    edges = []
    for r in range(3):
        for c in range(3):
            n = 3 * r + c + 1
            if c < 2:
                edges.append((n, n + 1))
            if r < 2:
                edges.append((n, n + 3))
    return Graph.undirected(range(1, 10), edges)


@pytest.fixture
def two_components() -> Graph:
    """Triangle 1-2-3 and edge 4-5, plus isolated node 6."""
    return Graph.undirected(range(1, 7), [(1, 2), (2, 3), (1, 3), (4, 5)])
