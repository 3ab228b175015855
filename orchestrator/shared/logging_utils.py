"""Logging and formatting helpers."""

import logging
from typing import Optional


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to WARNING
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def format_kb(size_kb: Optional[int]) -> str:
    """
    Format a size given in kilobytes.

    Args:
        size_kb: Size in KB, None counts as zero

    Returns:
        Formatted string (e.g., "1.5 MB")
    """
    size = float(size_kb or 0)
    for unit in ["KB", "MB", "GB"]:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} TB"
