"""Graph store and the elimination-order algorithms built on it."""

from chordalkit.graph.clique import max_clique, max_clique_size
from chordalkit.graph.elimination import (
    FixedOrder,
    as_policy,
    contexts,
    eliminate,
    elimination_order,
    first_node,
)
from chordalkit.graph.fill_in import add_clique, chordal_completion, fill_in
from chordalkit.graph.ordering import maximum_cardinality_order, min_degree, min_fill
from chordalkit.graph.recognition import (
    is_chordal,
    is_clique,
    is_perfect_elimination_order,
)
from chordalkit.graph.store import Context, Graph

__all__ = [
    "Context",
    "FixedOrder",
    "Graph",
    "add_clique",
    "as_policy",
    "chordal_completion",
    "contexts",
    "eliminate",
    "elimination_order",
    "fill_in",
    "first_node",
    "is_chordal",
    "is_clique",
    "is_perfect_elimination_order",
    "max_clique",
    "max_clique_size",
    "maximum_cardinality_order",
    "min_degree",
    "min_fill",
]
