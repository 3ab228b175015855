"""
Project detection from a folder's direct children.

Detectors only look at the names (and for Unity, the kind) of immediate
children. They never recurse into grandchildren.
"""

from dataclasses import dataclass
from typing import Callable, FrozenSet, Optional, Sequence

from ..core.types import FileNode
from .categories import Category, ClassificationResult

ChildCheck = Callable[[Sequence[FileNode]], bool]

PYTHON_MARKERS: FrozenSet[str] = frozenset(
    {"requirements.txt", "setup.py", "pyproject.toml", "Pipfile"}
)


@dataclass(frozen=True)
class ProjectDetector:
    """A named signature check over a folder's children."""

    name: str
    check: ChildCheck
    category: Category

    def matches(self, node: FileNode, children: Sequence[FileNode]) -> bool:
        if not node.is_folder:
            return False
        return self.check(children)


def has_child(*names: str) -> ChildCheck:
    """Check that any child is named one of ``names``."""
    wanted = frozenset(names)
    return lambda children: any(child.name in wanted for child in children)


def _is_unity_project(children: Sequence[FileNode]) -> bool:
    has_assets = any(
        child.name == "Assets" and child.is_folder for child in children
    )
    has_settings = any(child.name == "ProjectSettings" for child in children)
    return has_assets and has_settings


PROJECT_DETECTORS = (
    ProjectDetector("Git Repository", has_child(".git"), Category.PROJECT_GIT),
    ProjectDetector(
        "Node.js Project", has_child("package.json"), Category.PROJECT_NODE
    ),
    ProjectDetector(
        "Python Project", has_child(*PYTHON_MARKERS), Category.PROJECT_PYTHON
    ),
    ProjectDetector("Unity Project", _is_unity_project, Category.PROJECT_UNITY),
    ProjectDetector("Rust Project", has_child("Cargo.toml"), Category.PROJECT_RUST),
    ProjectDetector("Go Project", has_child("go.mod"), Category.PROJECT_GO),
    ProjectDetector(
        "Java Project", has_child("pom.xml", "build.gradle"), Category.PROJECT_JAVA
    ),
)


def detect_project(
    node: FileNode, children: Optional[Sequence[FileNode]] = None
) -> Optional[ClassificationResult]:
    """
    Identify the project ecosystem rooted at ``node``.

    Args:
        node: Node to inspect
        children: Direct children of the node; None is treated as empty

    Returns:
        Result of the first matching detector, or None
    """
    children = children or ()
    for detector in PROJECT_DETECTORS:
        if detector.matches(node, children):
            return ClassificationResult.for_category(detector.category, detector.name)
    return None
