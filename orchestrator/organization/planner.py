"""
Move planning.

Walks a scanned tree top-down, classifies every node and turns the results
into MoveActions. Context that a per-node classifier cannot see, such as
whether a file sits in the unsorted drop folder, is handled here.
"""

import logging
from collections import Counter
from typing import Dict, FrozenSet, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from ..classification import (
    CATEGORY_TABLE,
    VACUUM_TARGET,
    Category,
    ClassificationResult,
    classify,
)
from ..config import settings
from ..core.types import FileNode, NodeKind

logger = logging.getLogger(__name__)


class MoveAction(BaseModel):
    """A planned move (or deletion) of one node."""

    model_config = ConfigDict(use_enum_values=True)

    source: str
    name: str
    kind: NodeKind
    target: str
    reason: str
    category: Optional[Category] = None
    size_kb: Optional[int] = None

    @property
    def is_vacuum(self) -> bool:
        return self.target == VACUUM_TARGET


def taxonomy_roots(inbox_target: Optional[str] = None) -> FrozenSet[str]:
    """Top-level folder names the taxonomy files things into."""
    targets = [config.target_path for config in CATEGORY_TABLE.values()]
    targets.append(inbox_target or settings.inbox_target)
    return frozenset(
        target.split("/")[0] for target in targets if target != VACUUM_TARGET
    )


def _action(path: str, node: FileNode, target: str, reason: str, category=None):
    return MoveAction(
        source=path,
        name=node.name,
        kind=node.kind,
        target=target,
        reason=reason,
        category=category,
        size_kb=node.size_kb,
    )


class MovePlanner:
    """Build a move plan for a scanned tree."""

    def __init__(
        self,
        unsorted_root_name: Optional[str] = None,
        inbox_target: Optional[str] = None,
        reserved_names: Optional[Iterable[str]] = None,
    ):
        """
        Initialize the planner.

        Args:
            unsorted_root_name: Drop folder whose leftovers go to the inbox
            inbox_target: Target for unclassified entries in the drop folder
            reserved_names: Extra top-level entries to leave alone, on top of
                the taxonomy roots
        """
        self.unsorted_root_name = unsorted_root_name or settings.unsorted_root_name
        self.inbox_target = inbox_target or settings.inbox_target
        self.reserved_names = taxonomy_roots(self.inbox_target) | frozenset(
            reserved_names or ()
        )

    def plan(self, root: FileNode) -> List[MoveAction]:
        """
        Plan moves for every node below ``root``.

        Args:
            root: Scanned tree; the root itself is never moved

        Returns:
            Ordered list of actions, safe to execute front to back
        """
        actions: List[MoveAction] = []
        self._plan_children(root, "", actions)
        logger.info(f"Planned {len(actions)} actions")
        return actions

    @staticmethod
    def _classify(node: FileNode) -> Optional[ClassificationResult]:
        if node.truncated:
            # Unread contents are unknown, not empty
            return classify(node, skip=(Category.VACUUM_EMPTY,))
        return classify(node)

    def _plan_children(
        self, parent: FileNode, prefix: str, actions: List[MoveAction]
    ) -> None:
        in_unsorted = parent.name == self.unsorted_root_name and bool(prefix)

        for node in parent.child_nodes:
            path = f"{prefix}/{node.name}" if prefix else node.name

            if not prefix and node.name in self.reserved_names:
                logger.debug(f"{path}: already filed, skipping")
                continue

            if node.is_folder and node.name == self.unsorted_root_name:
                if node.truncated:
                    logger.warning(f"{path}: contents unknown, not cleaning up")
                    continue
                # Contents first so the cleanup runs after they have moved out
                self._plan_children(node, path, actions)
                actions.append(_action(path, node, VACUUM_TARGET, "Cleanup"))
                continue

            result = self._classify(node)
            if result is not None:
                action = _action(
                    path, node, result.target_path, result.reason, result.category
                )
                actions.append(action)
                # Classified folders move as a unit
                continue

            if in_unsorted:
                # Unclassified folders go to the inbox whole
                actions.append(_action(path, node, self.inbox_target, "Inbox Item"))
            elif node.is_folder and node.child_nodes:
                self._plan_children(node, path, actions)


def plan_moves(
    root: FileNode,
    unsorted_root_name: Optional[str] = None,
    inbox_target: Optional[str] = None,
    reserved_names: Optional[Iterable[str]] = None,
) -> List[MoveAction]:
    """Plan moves for ``root`` with a one-off MovePlanner."""
    return MovePlanner(unsorted_root_name, inbox_target, reserved_names).plan(root)


def summarize_plan(actions: List[MoveAction]) -> Dict[str, int]:
    """Count planned actions per target."""
    return dict(Counter(action.target for action in actions))
