"""
Rule-based classification of files and folders.

The engine composes four ordered stages:

1. Project detection (folders, from direct children)
2. Folder rules (emptiness, staleness, dotfile folders)
3. Name patterns (files and folders)
4. Extensions (files only)
"""

from .categories import (
    CATEGORY_TABLE,
    VACUUM_TARGET,
    Category,
    CategoryConfig,
    ClassificationResult,
    get_category_config,
)
from .engine import classify

__all__ = [
    "CATEGORY_TABLE",
    "VACUUM_TARGET",
    "Category",
    "CategoryConfig",
    "ClassificationResult",
    "classify",
    "get_category_config",
]
