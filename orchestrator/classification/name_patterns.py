"""Name-based rules for sensitive and well-known documents."""

import re
from dataclasses import dataclass
from typing import Optional, Pattern

from ..core.types import FileNode
from .categories import Category, ClassificationResult


@dataclass(frozen=True)
class NamePattern:
    """Case-insensitive substring pattern bound to a category."""

    pattern: Pattern[str]
    category: Category
    reason: str


def _pattern(text: str, category: Category, reason: str) -> NamePattern:
    return NamePattern(re.compile(text, re.IGNORECASE), category, reason)


NAME_PATTERNS = (
    _pattern("invoice", Category.PRIVATE_FINANCIAL, "Financial Document"),
    _pattern("receipt", Category.PRIVATE_FINANCIAL, "Financial Document"),
    _pattern("tax", Category.PRIVATE_FINANCIAL, "Tax Document"),
    _pattern("nda", Category.PRIVATE_LEGAL, "Legal Document"),
    _pattern("contract", Category.PRIVATE_LEGAL, "Legal Document"),
    _pattern("blood", Category.PRIVATE_MEDICAL, "Medical Record"),
    _pattern("medical", Category.PRIVATE_MEDICAL, "Medical Record"),
    _pattern("passport", Category.PRIVATE_IDENTITY, "ID Document"),
    _pattern("screenshot", Category.MEDIA_IMAGE, "Screenshot"),
    _pattern("export", Category.DOC_OFFICE, "Export"),
    _pattern("cheatsheet", Category.DOC_TEXT, "Reference"),
    _pattern("book", Category.DOC_PDF, "Book"),
)


def match_name_patterns(node: FileNode) -> Optional[ClassificationResult]:
    """Return the first pattern found anywhere in the node's name."""
    for rule in NAME_PATTERNS:
        if rule.pattern.search(node.name):
            return ClassificationResult.for_category(rule.category, rule.reason)
    return None
