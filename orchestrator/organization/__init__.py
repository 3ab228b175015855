"""
Organization module for planning and executing moves.

The planner turns a classified tree into MoveActions; the executor applies
them to the filesystem with collision renaming and dry-run support.
"""

from .executor import (
    ActionOutcome,
    ExecutionResult,
    ExecutionStatus,
    MoveExecutor,
    resolve_collision,
)
from .planner import (
    MoveAction,
    MovePlanner,
    plan_moves,
    summarize_plan,
    taxonomy_roots,
)

__all__ = [
    "ActionOutcome",
    "ExecutionResult",
    "ExecutionStatus",
    "MoveExecutor",
    "resolve_collision",
    "MoveAction",
    "MovePlanner",
    "plan_moves",
    "summarize_plan",
    "taxonomy_roots",
]
