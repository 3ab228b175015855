"""
Path helpers for the filesystem-facing parts of the application.
"""

import logging
import os
import string
import sys
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


def validate_path(raw_path: Optional[str]) -> Path:
    """
    Validate a user supplied path and resolve it.

    Args:
        raw_path: Path string from a request or the command line

    Returns:
        Resolved absolute path

    Raises:
        ValueError: If the path is empty, contains ``..`` segments or is a
            network share on Windows
    """
    if not raw_path or not isinstance(raw_path, str):
        raise ValueError("Invalid path")

    parts = raw_path.replace("\\", "/").split("/")
    if ".." in parts:
        raise ValueError("Directory traversal detected")

    if sys.platform == "win32" and raw_path.startswith("\\\\"):
        raise ValueError("Network paths are not allowed")

    return Path(raw_path).expanduser().resolve()


def validate_depth(depth: object, default: int = 3, maximum: int = 10) -> int:
    """
    Clamp a requested scan depth to a safe value.

    Anything that is not an integer between 1 and ``maximum`` falls back to
    ``default``.
    """
    try:
        parsed = int(depth)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return default
    if parsed < 1 or parsed > maximum:
        return default
    return parsed


def resolve_home_directory() -> Path:
    """Get the user's home directory, preferring USERPROFILE then HOME."""
    home = os.environ.get("USERPROFILE") or os.environ.get("HOME")
    if home:
        return Path(home)
    return Path.home()


def list_folders(directory: Path) -> List[Dict[str, str]]:
    """
    List the sub-folders of a directory.

    Raises:
        FileNotFoundError: If the directory does not exist
        PermissionError: If the directory cannot be read
    """
    folders = []
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                if entry.is_dir():
                    folders.append({"name": entry.name, "path": entry.path})
            except OSError as e:
                logger.warning(f"Skipping {entry.path}: {e}")
    return sorted(folders, key=lambda f: f["name"].lower())


def list_drives() -> List[Dict[str, str]]:
    """List available drive letters on Windows, or the root elsewhere."""
    if sys.platform != "win32":
        return [{"name": "/", "path": "/", "type": "root"}]

    drives = []
    for letter in string.ascii_uppercase:
        drive_path = f"{letter}:\\"
        if os.path.exists(drive_path):
            drives.append({"name": f"{letter}:", "path": drive_path, "type": "drive"})
    return drives


def quick_folders(home: Optional[Path] = None) -> List[Dict[str, str]]:
    """Common folders below the home directory for quick access."""
    home = home or resolve_home_directory()
    if sys.platform == "win32":
        names = ["Desktop", "Documents", "Downloads", "Pictures", "Videos", "Music"]
        folders = []
    else:
        names = ["Desktop", "Documents", "Downloads"]
        folders = [{"name": "Home", "path": str(home)}]

    folders.extend({"name": name, "path": str(home / name)} for name in names)
    return folders


def top_level_entry(base: Path, path: Path) -> Optional[str]:
    """
    Name of the entry directly below ``base`` that contains ``path``.

    Returns None when ``path`` is ``base`` itself or lies outside it.
    """
    try:
        relative = path.resolve().relative_to(base.resolve())
    except ValueError:
        return None
    return relative.parts[0] if relative.parts else None
