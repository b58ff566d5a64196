"""Error taxonomy.

Lookups on absent ids raise NodeNotFoundError, insertion conflicts raise
DuplicateNodeError / DuplicateEdgeError, and BagNotFoundError signals a
corrupted tree-decomposition build.  All share ChordalKitError so callers
can catch the whole family at once.
"""
from __future__ import annotations


class ChordalKitError(Exception):
    """Base class for every error raised by chordalkit."""


class NodeNotFoundError(ChordalKitError, KeyError):
    """Raised when an operation names a node that is not in the graph."""

    def __init__(self, node: int) -> None:
        self.node = node
        super().__init__(f"Node {node!r} not found")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class DuplicateNodeError(ChordalKitError):
    """Raised when inserting a node id that already exists."""

    def __init__(self, node: int) -> None:
        self.node = node
        super().__init__(f"Node {node!r} already exists")


class DuplicateEdgeError(ChordalKitError):
    """Raised when inserting an edge into a simple graph that already has it."""

    def __init__(self, src: int, dst: int) -> None:
        self.src = src
        self.dst = dst
        super().__init__(f"Edge {src!r} -> {dst!r} already exists")


class BagNotFoundError(ChordalKitError):
    """Raised when a tree decomposition is asked to mutate an unknown bag.

    During a build this means the build state is corrupt; it is not a
    condition callers are expected to recover from.
    """

    def __init__(self, bag_id: int) -> None:
        self.bag_id = bag_id
        super().__init__(f"Bag {bag_id!r} not found")
