"""
Shared utilities for The Orchestrator.

Logging setup and filesystem path helpers used by the scanner, the API and
the CLI.
"""

from .logging_utils import format_kb, setup_logging
from .paths import (
    list_drives,
    list_folders,
    quick_folders,
    resolve_home_directory,
    top_level_entry,
    validate_depth,
    validate_path,
)

__all__ = [
    "format_kb",
    "setup_logging",
    "list_drives",
    "list_folders",
    "quick_folders",
    "resolve_home_directory",
    "top_level_entry",
    "validate_depth",
    "validate_path",
]
