"""
Directory tree scanner.

Walks a real directory and builds the FileNode snapshot the classification
engine works on. Traversal is depth limited and tracks visited directories so
symlink loops terminate. Entries that cannot be read are skipped with a
warning instead of aborting the scan. Folders at the depth limit, and
folders that could not be listed, come back with ``truncated`` set and no
children.
"""

import logging
import math
import os
import time
from pathlib import Path
from typing import List, Optional, Set, Union

from pydantic import BaseModel

from ..core.types import FileNode, NodeKind

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 5
SECONDS_PER_DAY = 60 * 60 * 24
SKIPPED_NAMES = frozenset({"System Volume Information"})


class ScanStatistics(BaseModel):
    """Counters collected during a scan."""

    files: int = 0
    folders: int = 0
    skipped: int = 0
    truncated: int = 0
    errors: int = 0


class TreeScanner:
    """Build FileNode trees from the filesystem."""

    def __init__(
        self, max_depth: int = DEFAULT_MAX_DEPTH, now: Optional[float] = None
    ):
        """
        Initialize the scanner.

        Args:
            max_depth: Entries at this depth or deeper are not scanned
            now: Reference timestamp for ages, defaults to the current time
        """
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.max_depth = max_depth
        self.now = now
        self.stats = ScanStatistics()
        self._visited: Set[str] = set()

    def scan(self, path: Union[str, Path]) -> FileNode:
        """
        Scan a directory (or single file).

        Args:
            path: Path to scan

        Returns:
            Root node named after the scanned path

        Raises:
            FileNotFoundError: If the path does not exist
        """
        root_path = Path(path)
        if not root_path.exists():
            raise FileNotFoundError(f"Path not found: {root_path}")

        self.stats = ScanStatistics()
        self._visited = set()
        reference = self.now if self.now is not None else time.time()

        logger.info(f"Scanning {root_path} (max depth {self.max_depth})")
        node = self._scan_entry(root_path, 0, reference)
        if node is None:
            raise PermissionError(f"Could not read {root_path}")

        logger.info(
            f"Scan complete: {self.stats.files} files, {self.stats.folders} folders, "
            f"{self.stats.skipped} skipped, {self.stats.errors} errors"
        )
        return node.model_copy(update={"name": str(root_path)})

    def _scan_entry(self, path: Path, depth: int, now: float) -> Optional[FileNode]:
        if depth >= self.max_depth:
            return None

        try:
            stat = path.stat()
        except OSError as e:
            logger.warning(f"Skipping {path}: {e}")
            self.stats.errors += 1
            return None

        age_days = self._age_days(stat.st_mtime, now)

        if not path.is_dir():
            self.stats.files += 1
            return FileNode(
                name=path.name,
                kind=NodeKind.FILE,
                size_kb=round(stat.st_size / 1024),
                age_days=age_days,
            )

        real_path = os.path.realpath(path)
        if real_path in self._visited:
            logger.warning(f"Skipping {path}: already visited (symlink loop)")
            self.stats.skipped += 1
            return None
        self._visited.add(real_path)

        self.stats.folders += 1
        children = None
        if depth + 1 < self.max_depth:
            children = self._scan_children(path, depth, now)

        if children is None:
            # Contents unknown, which is not the same as empty
            self.stats.truncated += 1
            return FileNode(
                name=path.name,
                kind=NodeKind.FOLDER,
                age_days=age_days,
                truncated=True,
            )

        return FileNode(
            name=path.name,
            kind=NodeKind.FOLDER,
            children=children,
            size_kb=sum(child.size_kb or 0 for child in children),
            age_days=age_days,
        )

    def _scan_children(
        self, path: Path, depth: int, now: float
    ) -> Optional[List[FileNode]]:
        try:
            entries = sorted(os.listdir(path))
        except OSError as e:
            logger.warning(f"Cannot list {path}: {e}")
            self.stats.errors += 1
            return None

        children = []
        for name in entries:
            if name.startswith("$") or name in SKIPPED_NAMES:
                self.stats.skipped += 1
                continue

            child = self._scan_entry(path / name, depth + 1, now)
            if child is not None:
                children.append(child)
        return children

    @staticmethod
    def _age_days(mtime: float, now: float) -> int:
        return max(0, math.floor((now - mtime) / SECONDS_PER_DAY))


def scan_directory(
    path: Union[str, Path], max_depth: int = DEFAULT_MAX_DEPTH
) -> FileNode:
    """Scan ``path`` with a fresh TreeScanner."""
    return TreeScanner(max_depth=max_depth).scan(path)
