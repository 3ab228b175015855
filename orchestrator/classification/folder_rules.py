"""
Structural and attribute rules for folders.

Order matters: the empty check runs before everything else, and the
``.dotnet`` rule must precede the generic dotfile rule it overlaps with.
"""

from dataclasses import dataclass
from typing import Callable, Collection, Optional

from ..core.types import FileNode
from .categories import Category, ClassificationResult
from .rules import ComputedReason, Reason, StaticReason

TEMP_MIN_AGE_DAYS = 30
STALE_MIN_AGE_DAYS = 365


@dataclass(frozen=True)
class FolderRule:
    """Predicate over a folder node bound to a category."""

    check: Callable[[FileNode], bool]
    category: Category
    reason: Reason


def _age(node: FileNode) -> int:
    # Unknown age counts as brand new
    return node.age_days or 0


def _is_empty(node: FileNode) -> bool:
    return len(node.child_nodes) == 0


def _is_old_temp(node: FileNode) -> bool:
    return "temp" in node.name and _age(node) > TEMP_MIN_AGE_DAYS


def _is_stale(node: FileNode) -> bool:
    return _age(node) > STALE_MIN_AGE_DAYS and not node.name.startswith(".")


FOLDER_RULES = (
    FolderRule(_is_empty, Category.VACUUM_EMPTY, StaticReason("Empty Folder")),
    FolderRule(_is_old_temp, Category.VACUUM_TEMP, StaticReason("Old Temp Folder")),
    FolderRule(
        _is_stale,
        Category.ARCHIVE_STALE,
        ComputedReason(lambda node: f"Inactive ({node.age_days}d)"),
    ),
    FolderRule(
        lambda node: node.name == ".dotnet",
        Category.SDK_DOTNET,
        StaticReason(".NET SDK"),
    ),
    FolderRule(
        lambda node: node.name.startswith("."),
        Category.CONFIG_DOTFILE,
        StaticReason("Config Folder"),
    ),
)


def match_folder_rules(
    node: FileNode, skip: Collection[Category] = ()
) -> Optional[ClassificationResult]:
    """
    Apply the folder rules in order; files never match.

    Rules for a category in ``skip`` are passed over, so the next rule in
    line still gets its chance.
    """
    if not node.is_folder:
        return None

    for rule in FOLDER_RULES:
        if rule.category in skip:
            continue
        if rule.check(node):
            return ClassificationResult.for_category(
                rule.category, rule.reason.render(node)
            )
    return None
