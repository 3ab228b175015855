"""Core tree model for scanned directory snapshots."""

from .tree import SortOption, enrich_with_sizes, filter_tree, iter_nodes, sort_tree
from .types import FileNode, NodeKind

__all__ = [
    "FileNode",
    "NodeKind",
    "SortOption",
    "enrich_with_sizes",
    "filter_tree",
    "iter_nodes",
    "sort_tree",
]
