"""Classification, planning and execution endpoints."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from ...classification import classify
from ...config import settings
from ...core.tree import enrich_with_sizes
from ...organization import MoveExecutor, plan_moves, summarize_plan
from ...scanner import TreeScanner
from ...shared.paths import top_level_entry, validate_depth, validate_path
from ..schemas import (
    ClassifyRequest,
    ClassifyResponse,
    ExecuteRequest,
    ExecuteResponse,
    ExecuteSummary,
    PlanRequest,
    dump_tree,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["organize"])


@router.post("/classify", response_model=ClassifyResponse)
def classify_node(request: ClassifyRequest) -> ClassifyResponse:
    """Classify a single node."""
    return ClassifyResponse(result=classify(request.node, request.children))


@router.post("/plan")
def plan(request: PlanRequest) -> Dict[str, Any]:
    """
    Scan a directory and propose moves for it.

    When ``destinationRoot`` lies inside the scanned directory, the entry
    holding it is left out of the plan.
    """
    if not request.path:
        raise HTTPException(status_code=400, detail="Path is required")

    try:
        path = validate_path(request.path)
        destination = (
            validate_path(request.destination_root)
            if request.destination_root
            else None
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    depth = validate_depth(
        request.max_depth,
        default=settings.default_scan_depth,
        maximum=settings.max_scan_depth,
    )

    try:
        root = enrich_with_sizes(TreeScanner(max_depth=depth).scan(path))
    except FileNotFoundError:
        raise HTTPException(
            status_code=404, detail="Directory not found or inaccessible"
        )
    except PermissionError:
        raise HTTPException(status_code=403, detail="Access denied")

    reserved = []
    if destination is not None:
        entry = top_level_entry(path, destination)
        if entry:
            reserved.append(entry)
    moves = plan_moves(root, reserved_names=reserved)
    return {
        "root": dump_tree(root),
        "moves": [move.model_dump(mode="json") for move in moves],
        "summary": summarize_plan(moves),
    }


@router.post("/execute", response_model=ExecuteResponse, response_model_by_alias=True)
def execute(request: ExecuteRequest) -> ExecuteResponse:
    """Execute a list of planned moves."""
    if request.moves is None:
        raise HTTPException(status_code=400, detail="moves array is required")
    if not request.base_path:
        raise HTTPException(status_code=400, detail="basePath is required")

    try:
        base_path = validate_path(request.base_path)
        destination = (
            validate_path(request.destination_root)
            if request.destination_root
            else None
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not base_path.is_dir():
        raise HTTPException(status_code=404, detail="basePath not found")

    for move in request.moves:
        if ".." in move.source.replace("\\", "/").split("/"):
            raise HTTPException(status_code=400, detail="Directory traversal detected")

    executor = MoveExecutor(base_path, destination)
    result = executor.execute(request.moves, dry_run=request.dry_run)

    return ExecuteResponse(
        success=result.failed == 0,
        dry_run=result.dry_run,
        results=result.outcomes,
        errors=result.errors,
        summary=ExecuteSummary(
            total=result.total,
            succeeded=result.moved + result.deleted + result.skipped,
            failed=result.failed,
        ),
    )
