"""Request and response models for the HTTP API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..classification import ClassificationResult
from ..core.tree import SortOption
from ..core.types import FileNode
from ..organization import ActionOutcome, MoveAction


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class PathRequest(CamelModel):
    path: Optional[str] = None


class ScanRequest(CamelModel):
    path: Optional[str] = None
    max_depth: Optional[int] = Field(default=None, alias="maxDepth")
    query: Optional[str] = None
    sort: Optional[SortOption] = None


class PlanRequest(CamelModel):
    path: Optional[str] = None
    max_depth: Optional[int] = Field(default=None, alias="maxDepth")
    destination_root: Optional[str] = Field(default=None, alias="destinationRoot")


class ClassifyRequest(CamelModel):
    node: FileNode
    children: Optional[List[FileNode]] = None


class ClassifyResponse(CamelModel):
    result: Optional[ClassificationResult] = None


class ExecuteRequest(CamelModel):
    base_path: Optional[str] = Field(default=None, alias="basePath")
    destination_root: Optional[str] = Field(default=None, alias="destinationRoot")
    moves: Optional[List[MoveAction]] = None
    dry_run: bool = Field(default=False, alias="dryRun")


class ExecuteSummary(CamelModel):
    total: int
    succeeded: int
    failed: int


class ExecuteResponse(CamelModel):
    success: bool
    dry_run: bool = Field(alias="dryRun")
    results: List[ActionOutcome]
    errors: List[str]
    summary: ExecuteSummary


def dump_tree(node: FileNode) -> Dict[str, Any]:
    """Serialize a tree in its wire format."""
    return node.model_dump(mode="json", by_alias=True, exclude_defaults=True)
