"""Shared type aliases used across the package."""
from __future__ import annotations

from typing import Any, Callable, TypeAlias

Node: TypeAlias = int
BagId: TypeAlias = int
Label: TypeAlias = Any
Adjacency: TypeAlias = tuple[tuple[Label, Node], ...]
Bag: TypeAlias = frozenset[Node]
EdgeSet: TypeAlias = set[frozenset[Node]]
# receives the remainder graph, returns the node to extract next
SelectionPolicy: TypeAlias = Callable[[Any], Node]
