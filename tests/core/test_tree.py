"""Tests for tree helpers."""

from orchestrator.core.tree import (
    SortOption,
    enrich_with_sizes,
    filter_tree,
    iter_nodes,
    sort_tree,
)
from orchestrator.core.types import FileNode, NodeKind


def _file(name: str, size=None) -> FileNode:
    return FileNode(name=name, kind=NodeKind.FILE, size_kb=size)


def _folder(name: str, *children: FileNode, size=None) -> FileNode:
    return FileNode(
        name=name, kind=NodeKind.FOLDER, children=list(children), size_kb=size
    )


def _tree() -> FileNode:
    return _folder(
        "root",
        _file("b.txt", 10),
        _folder("docs", _file("a.pdf", 5), _file("unknown.bin"), size=999),
        _folder("empty"),
        _file("A.md", 10),
    )


class TestEnrichWithSizes:
    """Test folder size aggregation."""

    def test_folder_sizes_are_sums(self):
        """Test that folder sizes equal descendant file sizes."""
        enriched = enrich_with_sizes(_tree())

        docs = enriched.children[1]
        assert docs.size_kb == 5
        assert enriched.children[2].size_kb == 0
        assert enriched.size_kb == 25

    def test_stale_folder_size_is_replaced(self):
        """Test that a stored folder size is not authoritative."""
        enriched = enrich_with_sizes(_tree())

        assert enriched.children[1].size_kb != 999

    def test_file_sizes_untouched(self):
        """Test that file sizes are never recomputed."""
        enriched = enrich_with_sizes(_tree())

        assert enriched.children[0].size_kb == 10
        assert enriched.children[1].children[1].size_kb is None

    def test_idempotent(self):
        """Test that enriching twice gives the same tree."""
        once = enrich_with_sizes(_tree())
        twice = enrich_with_sizes(once)

        assert once == twice

    def test_input_not_mutated(self):
        """Test that the input tree is left alone."""
        tree = _tree()

        enrich_with_sizes(tree)

        assert tree.size_kb is None
        assert tree.children[1].size_kb == 999

    def test_truncated_folder_keeps_unknown_children(self):
        """Test that unread folders are not turned into empty ones."""
        unread = FileNode(name="deep", kind=NodeKind.FOLDER, truncated=True)
        root = _folder("root", unread, _file("a.txt", size=3))

        enriched = enrich_with_sizes(root)

        assert enriched.children[0].children is None
        assert enriched.children[0].truncated is True
        assert enriched.size_kb == 3

    def test_sample_workspace_total(self, sample_workspace):
        """Test aggregation on the sample workspace."""
        enriched = enrich_with_sizes(sample_workspace)

        unsorted = enriched.children[0]
        assert unsorted.size_kb == 2 + 54000 + 4500


class TestSortTree:
    """Test recursive sorting."""

    def test_name_ascending(self):
        """Test case-insensitive name sort."""
        names = [c.name for c in sort_tree(_tree(), SortOption.NAME_ASC).children]

        assert names == ["A.md", "b.txt", "docs", "empty"]

    def test_name_descending(self):
        """Test reverse name sort."""
        names = [c.name for c in sort_tree(_tree(), SortOption.NAME_DESC).children]

        assert names == ["empty", "docs", "b.txt", "A.md"]

    def test_size_descending_ties_by_name(self):
        """Test that equal sizes fall back to name order."""
        tree = sort_tree(enrich_with_sizes(_tree()), SortOption.SIZE_DESC)

        assert [c.name for c in tree.children] == ["A.md", "b.txt", "docs", "empty"]

    def test_size_ascending(self):
        """Test ascending size sort."""
        tree = sort_tree(enrich_with_sizes(_tree()), SortOption.SIZE_ASC)

        assert [c.name for c in tree.children] == ["empty", "docs", "A.md", "b.txt"]

    def test_sorts_recursively(self):
        """Test that nested folders are sorted too."""
        tree = sort_tree(_tree(), "name-desc")

        docs = tree.children[1]
        assert [c.name for c in docs.children] == ["unknown.bin", "a.pdf"]


class TestFilterTree:
    """Test name filtering."""

    def test_matching_folder_kept_whole(self):
        """Test that a matching folder keeps all its children."""
        result = filter_tree(_tree(), "DOCS")

        docs = result.children[0]
        assert docs.name == "docs"
        assert len(docs.children) == 2

    def test_keeps_path_to_match(self):
        """Test that ancestors of a match survive with only matching children."""
        result = filter_tree(_tree(), "a.pdf")

        assert [c.name for c in result.children] == ["docs"]
        assert [c.name for c in result.children[0].children] == ["a.pdf"]

    def test_no_match(self):
        """Test that nothing matching returns None."""
        assert filter_tree(_tree(), "zzz") is None


class TestIterNodes:
    """Test tree iteration."""

    def test_pre_order_paths(self):
        """Test relative paths in pre-order."""
        paths = [path for path, _ in iter_nodes(_tree())]

        assert paths == ["b.txt", "docs", "docs/a.pdf", "docs/unknown.bin", "empty", "A.md"]
