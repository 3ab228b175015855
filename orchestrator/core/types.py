"""
Type definitions for scanned directory trees.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    """Kind of filesystem entry."""

    FILE = "file"
    FOLDER = "folder"


class FileNode(BaseModel):
    """
    One filesystem entry as scanned.

    Serialized with the aliases ``type``, ``age`` and ``size`` so trees
    round-trip with the JSON produced by the scan endpoint.

    ``truncated`` marks a folder whose contents were never read, either
    because the scan depth ran out or because listing it failed. Its
    ``children`` are unknown, not empty.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    kind: NodeKind = Field(alias="type")
    children: Optional[List["FileNode"]] = None
    age_days: Optional[int] = Field(default=None, ge=0, alias="age")
    size_kb: Optional[int] = Field(default=None, ge=0, alias="size")
    truncated: bool = False

    @property
    def is_folder(self) -> bool:
        return self.kind == NodeKind.FOLDER

    @property
    def is_file(self) -> bool:
        return self.kind == NodeKind.FILE

    @property
    def child_nodes(self) -> List["FileNode"]:
        """Children of this node, empty when absent."""
        return self.children or []

    @property
    def extension(self) -> Optional[str]:
        """Lowercased extension from the last dot, or None without a dot."""
        index = self.name.rfind(".")
        if index == -1:
            return None
        return self.name[index:].lower()


FileNode.model_rebuild()
