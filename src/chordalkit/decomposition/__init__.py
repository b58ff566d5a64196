"""Tree decompositions built from elimination orders."""

from chordalkit.decomposition.builder import (
    BuildState,
    build_tree_decomposition,
    clique_tree,
)
from chordalkit.decomposition.tree import TreeDecomposition, ValidationReport

__all__ = [
    "BuildState",
    "TreeDecomposition",
    "ValidationReport",
    "build_tree_decomposition",
    "clique_tree",
]
