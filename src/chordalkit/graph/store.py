"""Labelled graph store with context extraction.

Every node carries a label and two adjacency lists of (label, neighbor)
pairs: predecessors (edges coming in) and successors (edges going out).
Undirected graphs store each edge in both directions, so the two lists
mirror each other.

The central operation is context extraction: pull one node out of the
graph together with its local view (predecessors, id, label,
successors) and leave a remainder without any edge touching that node.
Merging the context back in undoes the extraction exactly.  Every
algorithm in chordalkit is a fold over a sequence of such extractions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from chordalkit.errors import DuplicateEdgeError, DuplicateNodeError, NodeNotFoundError
from chordalkit.types import Adjacency, Label, Node


def _distinct(adj: Iterable[tuple[Label, Node]], skip: Node) -> list[Node]:
    seen: set[Node] = set()
    out: list[Node] = []
    for _, n in adj:
        if n != skip and n not in seen:
            seen.add(n)
            out.append(n)
    return out


def _same_items(a: list, b: list) -> bool:
    """Multiset equality for lists whose items may not be hashable."""
    if len(a) != len(b):
        return False
    rest = list(b)
    for item in a:
        try:
            rest.remove(item)
        except ValueError:
            return False
    return True


@dataclass(frozen=True, slots=True)
class Context:
    """Local view of one node at the moment it was extracted.

    Adjacency only mentions nodes that were still in the graph, so in an
    elimination sequence ``neighbor_nodes()`` are exactly the neighbors
    eliminated later, whichever way their edges point.
    """
    predecessors: Adjacency
    node: Node
    label: Label
    successors: Adjacency

    def successor_nodes(self) -> list[Node]:
        """Distinct successor ids in adjacency order."""
        return _distinct(self.successors, self.node)

    def predecessor_nodes(self) -> list[Node]:
        return _distinct(self.predecessors, self.node)

    def neighbor_nodes(self) -> list[Node]:
        """Distinct ids joined to the node in either direction, successors first."""
        return _distinct(self.successors + self.predecessors, self.node)


class Graph:
    """Labelled graph backed by per-node adjacency lists.

    Simple by default: a second edge between the same ordered pair of
    endpoints raises DuplicateEdgeError.  Pass ``multigraph=True`` to
    allow parallel edges.
    """

    __slots__ = ("_labels", "_succ", "_pred", "_multigraph")

    def __init__(self, multigraph: bool = False) -> None:
        self._labels: dict[Node, Label] = {}
        self._succ: dict[Node, list[tuple[Label, Node]]] = {}
        self._pred: dict[Node, list[tuple[Label, Node]]] = {}
        self._multigraph = multigraph

    @classmethod
    def undirected(
        cls,
        nodes: Iterable[Node | tuple[Node, Label]],
        edges: Iterable[tuple],
        multigraph: bool = False,
    ) -> Graph:
        """Build an undirected graph.

        *nodes* holds bare ids or ``(id, label)`` pairs; *edges* holds
        ``(u, v)`` or ``(u, v, label)`` tuples.
        """
        g = cls(multigraph=multigraph)
        for item in nodes:
            if isinstance(item, tuple):
                node, label = item
            else:
                node, label = item, None
            g.insert_node(node, label)
        for edge in edges:
            if len(edge) == 2:
                u, v = edge
                label = None
            else:
                u, v, label = edge
            g.insert_undirected_edge(u, v, label)
        return g

    @property
    def multigraph(self) -> bool:
        return self._multigraph

    # ---- mutation --------------------------------------------------------

    def insert_node(self, node: Node, label: Label = None) -> None:
        """Add *node* with *label*.  Raises DuplicateNodeError if present."""
        if node in self._labels:
            raise DuplicateNodeError(node)
        self._labels[node] = label
        self._succ[node] = []
        self._pred[node] = []

    def insert_edge(self, src: Node, dst: Node, label: Label = None) -> None:
        """Add a directed edge src -> dst.

        Both endpoints must exist.  Raises DuplicateEdgeError if the edge
        is already present and the graph is not a multigraph.
        """
        self._check_edge(src, dst)
        self._link(src, dst, label)

    def insert_undirected_edge(self, u: Node, v: Node, label: Label = None) -> None:
        """Add u -> v and v -> u.  Nothing is inserted if either check fails."""
        self._check_edge(u, v)
        self._check_edge(v, u)
        self._link(u, v, label)
        self._link(v, u, label)

    def pop_context(self, node: Node) -> Context:
        """Remove *node* in place and return its context."""
        self._require(node)
        label = self._labels.pop(node)
        preds = self._pred.pop(node)
        succs = self._succ.pop(node)
        for src in {src for _, src in preds}:
            self._succ[src] = [(l, d) for l, d in self._succ[src] if d != node]
        for dst in {dst for _, dst in succs}:
            self._pred[dst] = [(l, s) for l, s in self._pred[dst] if s != node]
        return Context(tuple(preds), node, label, tuple(succs))

    def extract_context(self, node: Node) -> tuple[Context, Graph]:
        """Return the context of *node* and a new remainder graph.

        The receiver is left untouched.
        """
        remainder = self.copy()
        return remainder.pop_context(node), remainder

    def merge_context(self, context: Context) -> None:
        """Re-insert a previously extracted context.

        Every neighbor named by the context must already be present.
        """
        if context.node in self._labels:
            raise DuplicateNodeError(context.node)
        for _, n in context.predecessors + context.successors:
            self._require(n)
        self.insert_node(context.node, context.label)
        for label, src in context.predecessors:
            self._link(src, context.node, label)
        for label, dst in context.successors:
            self._link(context.node, dst, label)

    def _check_edge(self, src: Node, dst: Node) -> None:
        self._require(src)
        self._require(dst)
        if src == dst:
            raise ValueError(f"Self-loop on {src!r} is not supported")
        if not self._multigraph and self.edge_exists(src, dst):
            raise DuplicateEdgeError(src, dst)

    def _link(self, src: Node, dst: Node, label: Label) -> None:
        self._succ[src].append((label, dst))
        self._pred[dst].append((label, src))

    def _require(self, node: Node) -> None:
        if node not in self._labels:
            raise NodeNotFoundError(node)

    # ---- queries ---------------------------------------------------------

    def label_of(self, node: Node) -> Label:
        self._require(node)
        return self._labels[node]

    def edge_exists(self, src: Node, dst: Node) -> bool:
        return src in self._succ and any(d == dst for _, d in self._succ[src])

    def adjacent(self, u: Node, v: Node) -> bool:
        """True if an edge joins *u* and *v* in either direction."""
        return self.edge_exists(u, v) or self.edge_exists(v, u)

    def successors(self, node: Node) -> list[Node]:
        self._require(node)
        return _distinct(self._succ[node], node)

    def predecessors(self, node: Node) -> list[Node]:
        self._require(node)
        return _distinct(self._pred[node], node)

    def neighbors(self, node: Node) -> list[Node]:
        """Distinct ids adjacent to *node* in either direction."""
        self._require(node)
        return _distinct(self._succ[node] + self._pred[node], node)

    def degree(self, node: Node) -> int:
        return len(self.neighbors(node))

    def nodes(self) -> Iterator[Node]:
        """Node ids in insertion order."""
        return iter(self._labels)

    def labelled_nodes(self) -> Iterator[tuple[Node, Label]]:
        return iter(self._labels.items())

    def edges(self) -> Iterator[tuple[Node, Node, Label]]:
        for src, adj in self._succ.items():
            for label, dst in adj:
                yield src, dst, label

    def unordered_edges(self) -> set[frozenset[Node]]:
        """Edge set with direction and labels dropped."""
        return {frozenset((src, dst)) for src, dst, _ in self.edges()}

    def is_empty(self) -> bool:
        return not self._labels

    def copy(self) -> Graph:
        g = Graph(multigraph=self._multigraph)
        g._labels = dict(self._labels)
        g._succ = {n: list(adj) for n, adj in self._succ.items()}
        g._pred = {n: list(adj) for n, adj in self._pred.items()}
        return g

    @property
    def node_count(self) -> int:
        return len(self._labels)

    @property
    def edge_count(self) -> int:
        """Stored directed edges; an undirected edge counts twice."""
        return sum(len(adj) for adj in self._succ.values())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: object) -> bool:
        return node in self._labels

    def __len__(self) -> int:
        return self.node_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        if self._labels != other._labels:
            return False
        return all(_same_items(adj, other._succ[n]) for n, adj in self._succ.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
