"""
Move executor.

Applies a move plan to the filesystem one action at a time. Collision
renaming probes candidate names in the destination directory, so actions are
never run in parallel.

Only stale temp folders are deleted recursively. Every other VACUUM folder is
removed with ``rmdir`` and fails if anything is still inside it.
"""

import logging
import shutil
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Set, Union

from pydantic import BaseModel, Field
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeRemainingColumn,
)

from ..classification import Category
from .planner import MoveAction

logger = logging.getLogger(__name__)

MAX_COLLISION_SUFFIX = 9999


class ExecutionStatus(str, Enum):
    """Outcome of a single action."""

    MOVED = "moved"
    DELETED = "deleted"
    SKIPPED = "skipped"
    FAILED = "failed"


class ActionOutcome(BaseModel):
    """What happened to one planned action."""

    source_path: str
    status: ExecutionStatus
    target_path: Optional[str] = None
    error: Optional[str] = None


class ExecutionResult(BaseModel):
    """Result of executing a move plan."""

    total: int = 0
    moved: int = 0
    deleted: int = 0
    skipped: int = 0
    failed: int = 0
    dry_run: bool = False
    outcomes: List[ActionOutcome] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)


def resolve_collision(target_path: Path) -> Path:
    """
    Find a free path by appending `` (1)``, `` (2)``, ... to the stem.

    Args:
        target_path: Desired destination

    Returns:
        ``target_path`` itself if free, otherwise the first free variant

    Raises:
        ValueError: If no free name is found
    """
    if not target_path.exists():
        return target_path

    stem = target_path.stem
    suffix = target_path.suffix
    parent = target_path.parent

    for counter in range(1, MAX_COLLISION_SUFFIX + 1):
        candidate = parent / f"{stem} ({counter}){suffix}"
        if not candidate.exists():
            return candidate

    raise ValueError(f"Too many naming conflicts for {target_path}")


class MoveExecutor:
    """Execute MoveActions against a directory tree."""

    def __init__(
        self,
        base_path: Union[str, Path],
        destination_root: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize the executor.

        Args:
            base_path: Directory the action sources are relative to
            destination_root: Root of the taxonomy, defaults to ``base_path``
        """
        self.base_path = Path(base_path)
        self.destination_root = Path(destination_root or base_path)
        # Sources moved or deleted so far in the current run
        self._vacated: Set[Path] = set()

    def execute(
        self,
        actions: Sequence[MoveAction],
        dry_run: bool = False,
        show_progress: bool = False,
    ) -> ExecutionResult:
        """
        Execute a move plan.

        Args:
            actions: Planned actions, applied in order
            dry_run: If True, report what would happen without touching files
            show_progress: Render a rich progress bar

        Returns:
            Execution result with per-action outcomes
        """
        logger.info(
            f"Executing {len(actions)} actions ({'DRY RUN' if dry_run else 'LIVE'})"
        )
        result = ExecutionResult(total=len(actions), dry_run=dry_run)
        self._vacated = set()

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TimeRemainingColumn(),
            disable=not show_progress,
        ) as progress:
            task = progress.add_task("Organizing...", total=len(actions))

            for action in actions:
                try:
                    outcome = self._apply(action, dry_run)
                except Exception as e:
                    logger.error(f"Error processing {action.source}: {e}")
                    outcome = ActionOutcome(
                        source_path=action.source,
                        status=ExecutionStatus.FAILED,
                        error=str(e),
                    )
                    result.errors.append(f"{action.source}: {e}")

                if outcome.status == ExecutionStatus.MOVED:
                    result.moved += 1
                elif outcome.status == ExecutionStatus.DELETED:
                    result.deleted += 1
                elif outcome.status == ExecutionStatus.SKIPPED:
                    result.skipped += 1
                else:
                    result.failed += 1
                result.outcomes.append(outcome)

                progress.advance(task)

        return result

    def _delete(self, source: Path, action: MoveAction, dry_run: bool) -> None:
        recursive = action.category == Category.VACUUM_TEMP
        is_dir = source.is_dir() and not source.is_symlink()
        if is_dir and not recursive:
            remaining = [p for p in source.iterdir() if p not in self._vacated]
            if remaining:
                raise OSError(f"Directory not empty: {source}")

        if dry_run:
            logger.info(f"[DRY RUN] Would delete {source}")
            self._vacated.add(source)
            return

        if is_dir and recursive:
            shutil.rmtree(source)
        elif is_dir:
            source.rmdir()
        else:
            source.unlink()
        logger.info(f"Deleted {source}")
        self._vacated.add(source)

    def _apply(self, action: MoveAction, dry_run: bool) -> ActionOutcome:
        source = self.base_path / action.source
        if not source.exists() and not source.is_symlink():
            raise FileNotFoundError(f"Source not found: {source}")

        if action.is_vacuum:
            self._delete(source, action, dry_run)
            return ActionOutcome(
                source_path=str(source), status=ExecutionStatus.DELETED
            )

        destination = self.destination_root / action.target / action.name
        if source.resolve() == destination.resolve():
            logger.debug(f"{source} is already in place")
            return ActionOutcome(
                source_path=str(source),
                status=ExecutionStatus.SKIPPED,
                target_path=str(destination),
            )

        target = resolve_collision(destination)
        if dry_run:
            logger.info(f"[DRY RUN] Would move {source} → {target}")
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(source), str(target))
            logger.info(f"Moved {source} → {target}")
        self._vacated.add(source)

        return ActionOutcome(
            source_path=str(source),
            status=ExecutionStatus.MOVED,
            target_path=str(target),
        )
