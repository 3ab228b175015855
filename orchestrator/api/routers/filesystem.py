"""Filesystem browsing and scanning endpoints."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from ...config import settings
from ...core.tree import enrich_with_sizes, filter_tree, iter_nodes, sort_tree
from ...scanner import TreeScanner
from ...shared.paths import (
    list_drives,
    list_folders,
    quick_folders,
    resolve_home_directory,
    validate_depth,
    validate_path,
)
from ..schemas import PathRequest, ScanRequest, dump_tree

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["filesystem"])


@router.get("/user-home")
def user_home() -> Dict[str, str]:
    """Get the user's home directory."""
    return {"path": str(resolve_home_directory())}


@router.get("/drives")
def drives() -> Dict[str, Any]:
    """List drives (Windows) or the filesystem root."""
    return {"drives": list_drives()}


@router.get("/quick-folders")
def quick_access_folders() -> Dict[str, Any]:
    """List common folders below the home directory."""
    return {"folders": quick_folders()}


@router.post("/list-folders")
def folders(request: PathRequest) -> Dict[str, Any]:
    """List the sub-folders of a directory."""
    if not request.path:
        raise HTTPException(status_code=400, detail="Path is required")

    try:
        directory = validate_path(request.path)
        return {"folders": list_folders(directory)}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Directory not found")
    except PermissionError:
        raise HTTPException(status_code=403, detail="Access denied")
    except NotADirectoryError:
        raise HTTPException(status_code=400, detail="Not a directory")


@router.post("/scan")
def scan(request: ScanRequest) -> Dict[str, Any]:
    """
    Scan a directory into a FileNode tree.

    With ``sort`` every folder's children are ordered. With ``query`` only
    the matching parts below the root are kept, and the relative paths of
    the matching entries are listed under ``matches``.
    """
    if not request.path:
        raise HTTPException(status_code=400, detail="Path is required")

    try:
        path = validate_path(request.path)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    depth = validate_depth(
        request.max_depth,
        default=settings.default_scan_depth,
        maximum=settings.max_scan_depth,
    )
    logger.info(f"Scanning directory: {path} with depth: {depth}")

    try:
        root = TreeScanner(max_depth=depth).scan(path)
    except FileNotFoundError:
        raise HTTPException(
            status_code=404, detail="Directory not found or inaccessible"
        )
    except PermissionError:
        raise HTTPException(status_code=403, detail="Access denied")

    scanned_at = datetime.now(timezone.utc).isoformat()
    if request.sort is not None:
        root = sort_tree(enrich_with_sizes(root), request.sort)

    if not request.query:
        return {"root": dump_tree(root), "scannedAt": scanned_at}

    kept = [filter_tree(child, request.query) for child in root.child_nodes]
    filtered = root.model_copy(
        update={"children": [child for child in kept if child is not None]}
    )
    query = request.query.lower()
    matches = [
        entry for entry, node in iter_nodes(filtered) if query in node.name.lower()
    ]
    return {"root": dump_tree(filtered), "matches": matches, "scannedAt": scanned_at}
