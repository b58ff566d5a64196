"""Tree decomposition (clique tree) from an elimination order.

The construction runs once over a perfect elimination order of a
chordal graph.  A vertex v with later neighbors S needs a bag covering
{v} | S.  Bags built earlier that still list v as a not-yet-eliminated
member are "pending" on v; the first of their members to be eliminated
decides where they hang in the tree, so when v is eliminated they are
all linked under v's bag and stop being pending.

Two refinements keep the tree small:

  *  If a bag pending on v already contains {v} | S, v reuses it
     instead of getting a new bag (smallest bag id wins).  That is the
     same as building v's bag and contracting it into its child, which
     never breaks validity.
  *  A new bag starts as {v} and has each later neighbor inserted with
     TreeDecomposition.add_to_bag, registering the bag as pending on it.

A bag with nothing left pending is never linked and becomes a root, so
a disconnected graph yields one tree per component.

build_tree_decomposition accepts any graph: it fixes the order first,
adds the fill-in for that order, and runs the construction on the
completed graph, so the result is valid for the input graph as well.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from chordalkit.decomposition.tree import TreeDecomposition
from chordalkit.graph.elimination import FixedOrder, eliminate, elimination_order
from chordalkit.graph.fill_in import chordal_completion
from chordalkit.graph.recognition import is_perfect_elimination_order
from chordalkit.graph.store import Context, Graph
from chordalkit.types import BagId, Node, SelectionPolicy

log = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildState:
    """Mutable state of one decomposition run."""
    tree: TreeDecomposition
    next_bag_id: BagId
    owner: dict[Node, BagId] = field(default_factory=dict)     # node -> its bag
    pending: dict[Node, set[BagId]] = field(default_factory=dict)

    def allocate_bag_id(self) -> BagId:
        bag_id = self.next_bag_id
        self.next_bag_id += 1
        return bag_id


def init_state(graph: Graph) -> BuildState:
    """Fresh state: empty tree, an empty pending entry per node.

    Bag ids start above the largest node id.
    """
    state = BuildState(
        tree=TreeDecomposition(),
        next_bag_id=max(graph.nodes(), default=0) + 1,
    )
    for node in graph.nodes():
        state.pending[node] = set()
    return state


def _fresh_bag(state: BuildState, v: Node, later: list[Node]) -> BagId:
    bag_id = state.allocate_bag_id()
    state.tree.insert_bag(bag_id, [v])
    for x in later:
        state.tree.add_to_bag(bag_id, x)
        state.owner.setdefault(x, bag_id)
        state.pending[x].add(bag_id)
    log.debug("Bag %d created for %r: %s", bag_id, v, sorted(state.tree.bag(bag_id)))
    return bag_id


def step(state: BuildState, ctx: Context) -> BagId:
    """Place one eliminated vertex; return the id of the bag that covers it."""
    v = ctx.node
    later = ctx.neighbor_nodes()
    waiting = sorted(state.pending.pop(v, ()))

    bag_id: BagId | None = None
    if v in state.owner:
        needed = set(later)
        for candidate in waiting:
            if needed <= state.tree.bag(candidate):
                bag_id = candidate
                log.debug("Bag %d reused for %r", bag_id, v)
                break
    if bag_id is None:
        bag_id = _fresh_bag(state, v, later)
    state.owner[v] = bag_id

    for child in waiting:
        if child == bag_id:
            continue
        state.tree.link(child, bag_id)
        for x in state.tree.bag(child):
            if x in state.pending:
                state.pending[x].discard(child)
    return bag_id


def clique_tree(graph: Graph, order: Sequence[Node]) -> TreeDecomposition:
    """Tree decomposition of a chordal *graph* from its perfect elimination *order*.

    Raises ValueError if *order* is not a perfect elimination order of
    *graph*; complete the graph first (or use build_tree_decomposition).
    """
    order = list(order)
    if not is_perfect_elimination_order(graph, order):
        raise ValueError("Order is not a perfect elimination order of the graph")
    state = init_state(graph)
    for ctx, _ in eliminate(graph, FixedOrder(order)):
        step(state, ctx)
    log.debug("Clique tree: %r", state.tree)
    return state.tree


def build_tree_decomposition(
    graph: Graph, policy: SelectionPolicy | Sequence[Node] | None = None
) -> TreeDecomposition:
    """Tree decomposition of any *graph* along the order *policy* picks.

    The width is the largest bag the elimination game produces for that
    order, which depends heavily on the order.
    """
    order = elimination_order(graph, policy)
    completed = chordal_completion(graph, order)
    return clique_tree(completed, order)
