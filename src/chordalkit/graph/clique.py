"""Maximum clique from an elimination order.

For every context c the set {node(c)} | later-neighbors(c) is a
candidate clique, counting edges in either direction; the largest
candidate wins.  In a perfect elimination order every candidate really
is a clique and every maximal clique shows up as one of them, so the
answer is exact (this is why chordal graphs have a polynomial
maximum-clique algorithm).

Under any other order the candidates need not be cliques at all.  The
size is then only a bound: the earliest member of a maximum clique sees
the rest as later neighbors, so max_clique_size never drops below the
clique number, but it can overshoot it.  Pass a perfect elimination order
(e.g. ordering.maximum_cardinality_order on a chordal graph) when an
exact answer matters.
"""
from __future__ import annotations

from typing import Sequence

from chordalkit.graph.elimination import eliminate
from chordalkit.graph.store import Graph
from chordalkit.types import Node, SelectionPolicy


def max_clique_size(
    graph: Graph, policy: SelectionPolicy | Sequence[Node] | None = None
) -> int:
    """Largest ``1 + |later neighbors|`` over all contexts; 0 for an empty graph.

    Exact only when *policy* yields a perfect elimination order.
    """
    best = 0
    for ctx, _ in eliminate(graph, policy):
        best = max(best, 1 + len(ctx.neighbor_nodes()))
    return best


def max_clique(
    graph: Graph, policy: SelectionPolicy | Sequence[Node] | None = None
) -> frozenset[Node]:
    """Node set of the first largest candidate clique.

    Same traversal and the same exactness caveat as max_clique_size.
    Ties keep the candidate seen first in elimination order.
    """
    best: frozenset[Node] = frozenset()
    for ctx, _ in eliminate(graph, policy):
        candidate = frozenset([ctx.node, *ctx.neighbor_nodes()])
        if len(candidate) > len(best):
            best = candidate
    return best
