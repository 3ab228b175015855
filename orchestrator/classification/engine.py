"""
Classification engine.

Runs the four matcher stages in a fixed order and returns the first result.
The engine holds no state and performs no I/O, so it can be called from any
number of threads at once.
"""

import logging
from typing import Collection, Optional, Sequence

from ..core.types import FileNode
from .categories import Category, ClassificationResult
from .extensions import match_extension
from .folder_rules import match_folder_rules
from .name_patterns import match_name_patterns
from .project_detectors import detect_project

logger = logging.getLogger(__name__)

STAGES = (
    ("project", lambda node, children, skip: detect_project(node, children)),
    ("folder", lambda node, children, skip: match_folder_rules(node, skip)),
    ("name", lambda node, children, skip: match_name_patterns(node)),
    ("extension", lambda node, children, skip: match_extension(node)),
)


def classify(
    node: FileNode,
    children: Optional[Sequence[FileNode]] = None,
    skip: Collection[Category] = (),
) -> Optional[ClassificationResult]:
    """
    Classify a node.

    Stages are tried in order (project detection, folder rules, name
    patterns, extensions) and the first match wins.

    Args:
        node: Node to classify
        children: Direct children of the node; defaults to ``node.children``
        skip: Categories that must not be returned; matching continues with
            the next rule instead

    Returns:
        Classification result, or None if no rule applies
    """
    if children is None:
        children = node.child_nodes

    for stage, matcher in STAGES:
        result = matcher(node, children, skip)
        if result is not None and result.category not in skip:
            logger.debug(
                f"{node.name}: {result.category.value} via {stage} ({result.reason})"
            )
            return result
    return None
