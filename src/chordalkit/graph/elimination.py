"""Elimination driver: repeated context extraction.

Every algorithm in chordalkit is a fold over the same loop:

  1.  Ask the selection policy which node to extract next.
  2.  Pop that node's context out of the remainder graph.
  3.  Hand (context, remainder) to the caller.
  4.  Stop once the remainder is empty.

Because a node's context only mentions nodes that are still in the
remainder, the neighbors of each context (Context.neighbor_nodes,
edges in either direction) are exactly those eliminated *after* it.
That is what turns "is the later-neighbor set a clique?" into a
perfect-elimination-order check.

The order matters for correctness, not only for the values produced:
the default policy just takes the oldest remaining node, which is only
a perfect elimination order if the graph was built in one.  Pass a
FixedOrder (or the result of ordering.maximum_cardinality_order) when
the answer has to be exact.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from chordalkit.errors import NodeNotFoundError
from chordalkit.graph.store import Context, Graph
from chordalkit.types import Node, SelectionPolicy

log = logging.getLogger(__name__)


def first_node(remainder: Graph) -> Node:
    """Arbitrary policy: the oldest node still in *remainder*."""
    return next(remainder.nodes())


class FixedOrder:
    """Policy that replays a caller-specified elimination order.

    Each call consumes one id.  An id that is no longer in the remainder
    (absent from the graph, or repeated) raises NodeNotFoundError; an
    order that runs out while nodes remain raises ValueError, and so
    does eliminate when ids are left over once the graph is empty.
    """

    __slots__ = ("_order", "_pos")

    def __init__(self, order: Iterable[Node]) -> None:
        self._order: list[Node] = list(order)
        self._pos = 0

    def __call__(self, remainder: Graph) -> Node:
        if self._pos >= len(self._order):
            raise ValueError(
                f"Elimination order exhausted with {remainder.node_count} "
                f"node(s) left"
            )
        node = self._order[self._pos]
        self._pos += 1
        if node not in remainder:
            raise NodeNotFoundError(node)
        return node

    @property
    def remaining(self) -> int:
        """Ids not yet consumed."""
        return len(self._order) - self._pos

    def __repr__(self) -> str:
        return f"FixedOrder({self._order!r})"


def as_policy(policy: SelectionPolicy | Sequence[Node] | None) -> SelectionPolicy:
    """Normalize *policy*: None means first_node, a sequence means FixedOrder."""
    if policy is None:
        return first_node
    if callable(policy):
        return policy
    return FixedOrder(policy)


def eliminate(
    graph: Graph, policy: SelectionPolicy | Sequence[Node] | None = None
) -> Iterator[tuple[Context, Graph]]:
    """Yield (context, remainder) once per node of *graph*.

    Works on a private copy, so *graph* itself is never modified.  The
    yielded remainder is live: it changes when the generator resumes, so
    copy it if it must outlive the current step.
    A FixedOrder with ids left over after the last node raises ValueError.
    """
    select = as_policy(policy)
    work = graph.copy()
    while not work.is_empty():
        node = select(work)
        ctx = work.pop_context(node)
        yield ctx, work
    if isinstance(select, FixedOrder) and select.remaining:
        raise ValueError(
            f"Elimination order has {select.remaining} id(s) left after "
            f"every node was eliminated"
        )


def contexts(
    graph: Graph, policy: SelectionPolicy | Sequence[Node] | None = None
) -> list[Context]:
    """All contexts of *graph* in elimination order."""
    return [ctx for ctx, _ in eliminate(graph, policy)]


def elimination_order(
    graph: Graph, policy: SelectionPolicy | Sequence[Node] | None = None
) -> list[Node]:
    """The node sequence *policy* produces on *graph*."""
    order = [ctx.node for ctx, _ in eliminate(graph, policy)]
    log.debug("Elimination order over %d node(s): %s", len(order), order)
    return order
