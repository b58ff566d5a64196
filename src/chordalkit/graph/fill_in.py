"""Chordal completion by the elimination game.

Fix an elimination order on the input graph, then walk it: when a
vertex is eliminated, join every pair of its remaining neighbors that
is not already joined.  The edges added along the way are the fill-in
for that order, and the input plus its fill-in is chordal with the
order as a perfect elimination order.

The fill-in is minimal only relative to the order.  Different orders
give different fill-ins, and none of the orders available here is
guaranteed to reach the minimum fill-in of the graph.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from chordalkit.graph.elimination import FixedOrder, eliminate, elimination_order
from chordalkit.graph.store import Graph
from chordalkit.types import Label, Node, SelectionPolicy

log = logging.getLogger(__name__)


def add_clique(
    graph: Graph, nodes: Iterable[Node], label: Label = None
) -> list[tuple[Node, Node]]:
    """Make *nodes* a clique in *graph*, in place.

    Each node is joined to every node after it in the sequence unless
    the two are already adjacent.  Returns the pairs that were added.
    """
    members = list(dict.fromkeys(nodes))
    added: list[tuple[Node, Node]] = []
    for i, u in enumerate(members):
        for v in members[i + 1:]:
            if not graph.adjacent(u, v):
                graph.insert_undirected_edge(u, v, label)
                added.append((u, v))
    return added


def fill_in(
    graph: Graph,
    policy: SelectionPolicy | Sequence[Node] | None = None,
    label: Label = None,
) -> list[tuple[Node, Node]]:
    """Fill edges for the order *policy* picks on *graph*.

    The order is fixed on the original graph first, so a policy never
    sees the fill edges it causes.
    """
    order = elimination_order(graph, policy)
    added: list[tuple[Node, Node]] = []
    # the remainder is live, so edges added here shape later contexts
    for ctx, remainder in eliminate(graph, FixedOrder(order)):
        added.extend(add_clique(remainder, ctx.neighbor_nodes(), label))
    log.debug("Fill-in added %d edge(s)", len(added))
    return added


def chordal_completion(
    graph: Graph,
    policy: SelectionPolicy | Sequence[Node] | None = None,
    label: Label = None,
) -> Graph:
    """Return a copy of *graph* with the fill-in added as undirected edges.

    Node insertion order is preserved, so the default policy replays the
    same order on the result.  Fill edges carry *label*.
    """
    out = graph.copy()
    for u, v in fill_in(graph, policy, label):
        out.insert_undirected_edge(u, v, label)
    return out
