"""Tests for chordal graph recognition."""
from __future__ import annotations

import pytest

from chordalkit.graph.ordering import maximum_cardinality_order
from chordalkit.graph.recognition import (
    is_chordal,
    is_clique,
    is_perfect_elimination_order,
)
from chordalkit.graph.store import Graph


def _pairs(*edges: tuple[int, int]) -> set[frozenset[int]]:
    return {frozenset(e) for e in edges}


class TestIsClique:
    def test_empty_and_singleton(self) -> None:
        assert is_clique([], set())
        assert is_clique([4], set())

    def test_triangle(self) -> None:
        assert is_clique([1, 2, 3], _pairs((1, 2), (2, 3), (3, 1)))

    def test_missing_pair(self) -> None:
        assert not is_clique([1, 2, 3], _pairs((1, 2), (2, 3)))

    def test_duplicates_ignored(self) -> None:
        assert is_clique([1, 1, 2], _pairs((1, 2)))


class TestIsChordal:
    def test_empty_graph(self, empty_graph: Graph) -> None:
        assert is_chordal(empty_graph)

    def test_square_without_chord(self, square: Graph) -> None:
        assert not is_chordal(square)
        assert not is_chordal(square, maximum_cardinality_order(square))

    def test_square_with_chord(self, square_with_chord: Graph) -> None:
        assert is_chordal(square_with_chord)

    def test_adding_chord_to_square(self, square: Graph) -> None:
        square.insert_undirected_edge(1, 3)
        # node 1 goes first by default, and its later neighbors 2 and 4 are not joined
        assert not is_chordal(square)
        assert is_chordal(square, maximum_cardinality_order(square))

    def test_complete_and_trees(self, k4: Graph, path5: Graph, star: Graph) -> None:
        for g in (k4, path5, star):
            assert is_chordal(g)

    def test_long_cycles(self, make_cycle) -> None:
        for n in (4, 5, 6, 7):
            g = make_cycle(n)
            assert not is_chordal(g, maximum_cardinality_order(g))

    def test_grid(self, make_grid) -> None:
        g = make_grid(3, 3)
        assert not is_chordal(g, maximum_cardinality_order(g))

    def test_order_matters(self, path5: Graph) -> None:
        """The path is chordal, but not every order shows it."""
        assert not is_chordal(path5, [3, 1, 2, 4, 5])
        assert is_chordal(path5, maximum_cardinality_order(path5))

    def test_does_not_mutate(self, square: Graph) -> None:
        before = square.copy()
        is_chordal(square)
        assert square == before


class TestIsPerfectEliminationOrder:
    def test_square_with_chord(self, square_with_chord: Graph) -> None:
        assert is_perfect_elimination_order(square_with_chord, [1, 3, 2, 4])
        assert not is_perfect_elimination_order(square_with_chord, [2, 1, 3, 4])

    def test_order_must_not_name_extra_ids(self, path5: Graph) -> None:
        with pytest.raises(ValueError, match="left after"):
            is_perfect_elimination_order(path5, [1, 2, 3, 4, 5, 99])


class TestOneWayEdges:
    """Edges inserted with insert_edge count as joins in both directions."""

    def test_in_edges_are_later_neighbors(self, make_one_way) -> None:
        # 1 only has in-edges; its later neighbors 2 and 3 are not joined
        g = make_one_way([1, 2, 3], [(2, 1), (3, 1)])
        assert not is_perfect_elimination_order(g, [1, 2, 3])
        assert is_perfect_elimination_order(g, [2, 1, 3])

    def test_one_way_triangle(self, make_one_way) -> None:
        g = make_one_way([1, 2, 3], [(2, 1), (3, 1), (3, 2)])
        assert is_chordal(g)
        assert is_chordal(g, maximum_cardinality_order(g))
