"""
CLI command for organizing a directory.

Scans a directory, classifies its contents and moves them into the
taxonomy.
"""

import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.table import Table

from ..config import settings
from ..core.tree import enrich_with_sizes
from ..organization import (
    ExecutionResult,
    MoveAction,
    MoveExecutor,
    plan_moves,
    summarize_plan,
)
from ..scanner import TreeScanner
from ..shared import format_kb, setup_logging, top_level_entry, validate_depth

console = Console()


@click.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--depth",
    type=int,
    default=None,
    help="Maximum scan depth (1-10)",
)
@click.option(
    "--destination",
    type=click.Path(file_okay=False),
    default=None,
    help="Root of the organized taxonomy (default: PATH)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Preview changes without executing (RECOMMENDED FIRST)",
)
@click.option(
    "-y",
    "--yes",
    is_flag=True,
    default=False,
    help="Do not ask for confirmation before executing",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Verbose output",
)
def organize(
    path: str,
    depth: Optional[int],
    destination: Optional[str],
    dry_run: bool,
    yes: bool,
    verbose: bool,
) -> None:
    """
    Organize the contents of PATH into the workspace taxonomy.

    \b
    Examples:
        # DRY RUN (preview changes - always do this first!)
        orchestrator-organize ~/Desktop --dry-run

        # Move into a separate taxonomy root
        orchestrator-organize ~/Desktop --destination ~/Workspace

    \b
    Taxonomy:
        00_Inbox/      Unsorted downloads and desktop clutter
        01_Build/      Software projects
        02_Studio/     SDKs, config folders and tools
        03_Library/    Documents and notes
        04_Private/    Financial, legal, medical and identity documents
        05_Stage/      Media
        99_Archives/   Inactive folders
        VACUUM         Empty and stale temp folders (deleted)
    """
    setup_logging(verbose=verbose, quiet=not verbose)

    root_dir = Path(path)
    scan_depth = validate_depth(
        depth, default=settings.default_scan_depth, maximum=settings.max_scan_depth
    )

    try:
        root = enrich_with_sizes(TreeScanner(max_depth=scan_depth).scan(root_dir))
        # A destination inside PATH must not be organized into itself
        reserved = []
        if destination:
            entry = top_level_entry(root_dir, Path(destination))
            if entry:
                reserved.append(entry)
        moves = plan_moves(root, reserved_names=reserved)

        console.print("\n[cyan]Organization Configuration:[/cyan]")
        console.print(f"  Source: {root_dir}")
        console.print(f"  Destination: {destination or root_dir}")
        console.print(f"  Scan depth: {scan_depth}")
        console.print(f"  Dry run: {'YES' if dry_run else 'NO'}")

        if not moves:
            console.print("\n[green]✓ Nothing to organize[/green]")
            return

        _display_plan(moves)

        if dry_run:
            console.print(
                "\n[yellow]⚠ DRY RUN MODE - No files will be modified[/yellow]"
            )
        elif not yes:
            deletions = sum(1 for move in moves if move.is_vacuum)
            if deletions:
                console.print(
                    f"\n[red]⚠ WARNING: {deletions} item(s) will be deleted![/red]"
                )
            if not click.confirm("Continue?"):
                console.print("[yellow]Cancelled[/yellow]")
                return

        executor = MoveExecutor(root_dir, destination)
        result = executor.execute(moves, dry_run=dry_run, show_progress=True)
        _display_result(result)

        if result.failed:
            sys.exit(1)

    except (OSError, ValueError) as e:
        console.print(f"\n[red]✗ Error: {e}[/red]")
        if verbose:
            console.print_exception()
        sys.exit(1)


def _display_plan(moves: List[MoveAction]) -> None:
    """Display proposed moves."""
    table = Table(title="Proposed Moves")
    table.add_column("Item", style="cyan")
    table.add_column("Target", style="green")
    table.add_column("Reason")
    table.add_column("Size", justify="right")

    for move in moves:
        target = "[red]VACUUM[/red]" if move.is_vacuum else move.target
        table.add_row(move.source, target, move.reason, format_kb(move.size_kb))

    console.print(table)

    summary = summarize_plan(moves)
    console.print(
        "[dim]"
        + ", ".join(f"{target}: {count}" for target, count in sorted(summary.items()))
        + "[/dim]"
    )


def _display_result(result: ExecutionResult) -> None:
    """Display execution result."""
    console.print("\n[green]✓ Organization complete![/green]\n")

    table = Table(title="Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Total actions", str(result.total))
    table.add_row("Moved", str(result.moved))
    table.add_row("Deleted", str(result.deleted))
    table.add_row("Already in place", str(result.skipped))
    table.add_row("Failed", str(result.failed))

    console.print(table)

    if result.dry_run:
        console.print("\n[yellow]This was a DRY RUN - no files were modified[/yellow]")
        console.print("Run without --dry-run to execute the organization.")

    if result.errors:
        console.print("\n[red]Errors:[/red]")
        for error in result.errors[:10]:  # Show first 10
            console.print(f"  [red]• {error}[/red]")
        if len(result.errors) > 10:
            console.print(f"  [dim]... and {len(result.errors) - 10} more[/dim]")


if __name__ == "__main__":
    organize()
