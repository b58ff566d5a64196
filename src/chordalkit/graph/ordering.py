"""Elimination-order heuristics.

None of these search for a treewidth-optimal order.  They are the
cheap, well-known choices:

  maximum_cardinality_order -- reverse of a maximum cardinality search
      (Tarjan & Yannakakis).  On a chordal graph the result is always a
      perfect elimination order, so it turns is_chordal into a sound
      test.  On other graphs it is just some order.
  min_degree -- selection policy: eliminate a node of fewest remaining
      neighbors.
  min_fill -- selection policy: eliminate the node whose remaining
      neighbors are missing the fewest edges among themselves.

Ties always go to the node inserted first, so results are reproducible.
"""
from __future__ import annotations

from chordalkit.graph.store import Graph
from chordalkit.types import Node


def maximum_cardinality_order(graph: Graph) -> list[Node]:
    """Return the reverse of a maximum cardinality search visit order.

    MCS repeatedly visits the unvisited node with the most visited
    neighbors.  Eliminating in the reverse of that sequence gives a
    perfect elimination order whenever *graph* is chordal.
    """
    weight: dict[Node, int] = {n: 0 for n in graph.nodes()}
    visited: list[Node] = []
    while weight:
        best = max(weight, key=lambda n: weight[n])
        visited.append(best)
        del weight[best]
        for nb in graph.neighbors(best):
            if nb in weight:
                weight[nb] += 1
    visited.reverse()
    return visited


def min_degree(remainder: Graph) -> Node:
    return min(remainder.nodes(), key=remainder.degree)


def _missing_pairs(remainder: Graph, node: Node) -> int:
    nbrs = remainder.neighbors(node)
    missing = 0
    for i, u in enumerate(nbrs):
        for v in nbrs[i + 1:]:
            if not remainder.adjacent(u, v):
                missing += 1
    return missing


def min_fill(remainder: Graph) -> Node:
    return min(remainder.nodes(), key=lambda n: _missing_pairs(remainder, n))
