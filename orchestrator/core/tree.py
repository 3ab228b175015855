"""
Helpers for working with FileNode trees.

All helpers return new trees; the input tree is never mutated.
"""

from enum import Enum
from typing import Iterator, Optional, Tuple

from .types import FileNode


class SortOption(str, Enum):
    """Sort orders for tree listings."""

    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    SIZE_ASC = "size-asc"
    SIZE_DESC = "size-desc"


def enrich_with_sizes(node: FileNode) -> FileNode:
    """
    Recompute folder sizes bottom-up.

    A folder's size becomes the sum of its children's sizes, which equals the
    sum of all descendant file sizes. File sizes and truncated folders are
    left untouched and a missing size counts as zero.

    Args:
        node: Root of the tree

    Returns:
        New tree with folder sizes filled in
    """
    if not node.is_folder or node.truncated:
        return node.model_copy()

    children = [enrich_with_sizes(child) for child in node.child_nodes]
    size = sum(child.size_kb or 0 for child in children)
    return node.model_copy(update={"children": children, "size_kb": size})


def _sort_key(option: SortOption):
    if option in (SortOption.NAME_ASC, SortOption.NAME_DESC):
        return lambda n: n.name.casefold()
    return lambda n: (n.size_kb or 0, n.name.casefold())


def sort_tree(node: FileNode, option: SortOption = SortOption.NAME_ASC) -> FileNode:
    """
    Sort every folder's children recursively.

    Size orders break ties by name, ascending in both directions.
    """
    if not node.child_nodes:
        return node

    option = SortOption(option)
    if option == SortOption.SIZE_DESC:
        ordered = sorted(
            node.child_nodes, key=lambda n: (-(n.size_kb or 0), n.name.casefold())
        )
    else:
        ordered = sorted(
            node.child_nodes,
            key=_sort_key(option),
            reverse=option == SortOption.NAME_DESC,
        )

    children = [sort_tree(child, option) for child in ordered]
    return node.model_copy(update={"children": children})


def filter_tree(node: FileNode, query: str) -> Optional[FileNode]:
    """
    Keep only the parts of a tree whose names contain ``query``.

    A matching node is kept whole. A non-matching folder survives with just
    its matching descendants.

    Args:
        node: Root of the tree
        query: Case-insensitive substring

    Returns:
        Filtered tree, or None when nothing matches
    """
    if query.lower() in node.name.lower():
        return node

    children = [
        filtered
        for filtered in (filter_tree(child, query) for child in node.child_nodes)
        if filtered is not None
    ]
    if children:
        return node.model_copy(update={"children": children})
    return None


def iter_nodes(node: FileNode, prefix: str = "") -> Iterator[Tuple[str, FileNode]]:
    """Yield ``(relative_path, node)`` pairs below ``node`` in pre-order."""
    for child in node.child_nodes:
        path = f"{prefix}/{child.name}" if prefix else child.name
        yield path, child
        yield from iter_nodes(child, path)
