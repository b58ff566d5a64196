"""Tree decomposition: bags of graph nodes joined by parent/child links.

A tree decomposition of a graph G is valid when

  1.  every node of G is in at least one bag,
  2.  every edge of G has both endpoints together in some bag, and
  3.  for every node, the bags containing it form a connected subtree
      (the running intersection property).

Bag ids are assigned by whoever builds the decomposition.  The builder
in this package starts them above the largest node id so they never
collide with graph nodes.  A disconnected graph yields a forest with
one root per component, which is still valid under the three rules.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from chordalkit.errors import BagNotFoundError
from chordalkit.graph.store import Graph
from chordalkit.types import Bag, BagId, Node


@dataclass(slots=True)
class ValidationReport:
    """Violations found by TreeDecomposition.validate."""
    uncovered_nodes: list[Node] = field(default_factory=list)
    uncovered_edges: list[tuple[Node, Node]] = field(default_factory=list)
    disconnected_nodes: list[Node] = field(default_factory=list)  # rule 3

    @property
    def valid(self) -> bool:
        return not (self.uncovered_nodes or self.uncovered_edges or self.disconnected_nodes)


class TreeDecomposition:
    """Rooted forest of bags."""

    __slots__ = ("_bags", "_parent", "_children")

    def __init__(self) -> None:
        self._bags: dict[BagId, Bag] = {}
        self._parent: dict[BagId, BagId | None] = {}
        self._children: dict[BagId, list[BagId]] = {}

    # ---- mutation --------------------------------------------------------

    def insert_bag(self, bag_id: BagId, members: Iterable[Node] = ()) -> None:
        """Add a new root bag.  Raises ValueError if *bag_id* is taken."""
        if bag_id in self._bags:
            raise ValueError(f"Bag {bag_id!r} already exists")
        self._bags[bag_id] = frozenset(members)
        self._parent[bag_id] = None
        self._children[bag_id] = []

    def add_to_bag(self, bag_id: BagId, node: Node) -> None:
        """Replace bag *bag_id* with its union with {node}.

        Raises BagNotFoundError, leaving the tree untouched, if the bag
        does not exist.
        """
        try:
            current = self._bags[bag_id]
        except KeyError:
            raise BagNotFoundError(bag_id) from None
        self._bags[bag_id] = current | {node}

    def link(self, child: BagId, parent: BagId) -> None:
        """Make *parent* the parent of root bag *child*."""
        self._require(child)
        self._require(parent)
        if self._parent[child] is not None:
            raise ValueError(f"Bag {child!r} already has parent {self._parent[child]!r}")
        cur: BagId | None = parent
        while cur is not None:
            if cur == child:
                raise ValueError(f"Linking {child!r} under {parent!r} would form a cycle")
            cur = self._parent[cur]
        self._parent[child] = parent
        self._children[parent].append(child)

    def _require(self, bag_id: BagId) -> None:
        if bag_id not in self._bags:
            raise BagNotFoundError(bag_id)

    # ---- queries ---------------------------------------------------------

    def bag(self, bag_id: BagId) -> Bag:
        self._require(bag_id)
        return self._bags[bag_id]

    def bags(self) -> Iterator[tuple[BagId, Bag]]:
        return iter(self._bags.items())

    def parent(self, bag_id: BagId) -> BagId | None:
        self._require(bag_id)
        return self._parent[bag_id]

    def children(self, bag_id: BagId) -> list[BagId]:
        self._require(bag_id)
        return list(self._children[bag_id])

    def edges(self) -> list[tuple[BagId, BagId]]:
        """(parent, child) pairs."""
        return [(p, c) for c, p in self._parent.items() if p is not None]

    def roots(self) -> list[BagId]:
        return [b for b, p in self._parent.items() if p is None]

    def leaves(self) -> list[BagId]:
        return [b for b, kids in self._children.items() if not kids]

    def postorder(self) -> list[BagId]:
        """Every bag after all of its descendants, one tree at a time."""
        # iterative; deep decompositions would hit the recursion limit
        order: list[BagId] = []
        for root in self.roots():
            tree: list[BagId] = []
            stack = [root]
            while stack:
                b = stack.pop()
                tree.append(b)
                stack.extend(self._children[b])
            tree.reverse()
            order.extend(tree)
        return order

    @property
    def width(self) -> int:
        """Largest bag size minus one; -1 when there are no bags."""
        return max((len(b) for b in self._bags.values()), default=0) - 1

    @property
    def bag_count(self) -> int:
        return len(self._bags)

    def validate(self, graph: Graph) -> ValidationReport:
        """Check the three tree-decomposition rules against *graph* by brute force."""
        report = ValidationReport()
        holders: dict[Node, list[BagId]] = {n: [] for n in graph.nodes()}
        for bag_id, members in self._bags.items():
            for n in members:
                holders.setdefault(n, []).append(bag_id)

        for n in graph.nodes():
            if not holders[n]:
                report.uncovered_nodes.append(n)

        for edge in graph.unordered_edges():
            u, v = sorted(edge)
            if not any(u in b and v in b for b in self._bags.values()):
                report.uncovered_edges.append((u, v))
        report.uncovered_edges.sort()

        # in a forest, k bags induce a connected subtree iff they share k - 1 links
        for n, bag_ids in holders.items():
            if not bag_ids:
                continue
            inside = set(bag_ids)
            links = sum(1 for b in bag_ids if self._parent[b] in inside)
            if links != len(inside) - 1:
                report.disconnected_nodes.append(n)
        return report

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, bag_id: object) -> bool:
        return bag_id in self._bags

    def __len__(self) -> int:
        return self.bag_count

    def __repr__(self) -> str:
        return (
            f"TreeDecomposition(bags={self.bag_count}, width={self.width}, "
            f"roots={len(self.roots())})"
        )
