"""Chordal graph recognition by perfect-elimination-order checking.

A graph is chordal iff it has a perfect elimination order: an order in
which each vertex's later neighbors form a clique.  is_chordal checks
that property for the order the policy produces, against the edge set
captured before elimination starts.

A "yes" answer is always right.  A "no" answer is only conclusive when
the order is one that a chordal graph would pass, such as the one from
ordering.maximum_cardinality_order.  With the default oldest-node
policy a chordal graph built in an unlucky order is reported as not
chordal.  The policy stays an explicit argument for that reason.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from chordalkit.graph.elimination import eliminate
from chordalkit.graph.store import Graph
from chordalkit.types import EdgeSet, Node, SelectionPolicy

log = logging.getLogger(__name__)


def is_clique(nodes: Iterable[Node], edges: EdgeSet) -> bool:
    """True if every pair of distinct *nodes* is an unordered pair in *edges*."""
    members = list(dict.fromkeys(nodes))
    for i, u in enumerate(members):
        for v in members[i + 1:]:
            if frozenset((u, v)) not in edges:
                return False
    return True


def is_chordal(
    graph: Graph, policy: SelectionPolicy | Sequence[Node] | None = None
) -> bool:
    """True if *policy* eliminates *graph* in a perfect elimination order."""
    edges0 = graph.unordered_edges()
    for ctx, _ in eliminate(graph, policy):
        if not is_clique(ctx.neighbor_nodes(), edges0):
            log.debug("Successors of %r are not a clique", ctx.node)
            return False
    return True


def is_perfect_elimination_order(graph: Graph, order: Sequence[Node]) -> bool:
    """is_chordal under FixedOrder(*order*); the order must name every node once."""
    return is_chordal(graph, list(order))
