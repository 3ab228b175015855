"""Filesystem scanning into FileNode trees."""

from .tree_scanner import DEFAULT_MAX_DEPTH, ScanStatistics, TreeScanner, scan_directory

__all__ = ["DEFAULT_MAX_DEPTH", "ScanStatistics", "TreeScanner", "scan_directory"]
