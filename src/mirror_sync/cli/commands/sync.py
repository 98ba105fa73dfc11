"""Command module for mirror-sync sync operations."""

import asyncio
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.tree import Tree

from mirror_sync.cli.app import app
from mirror_sync.config import config
from mirror_sync.models import SyncReport
from mirror_sync.sync import SyncService

console = Console()


def display_sync_summary(report: SyncReport):
    """Display a one-line summary of sync changes."""
    if report.scan_error:
        console.print(f"[red]Scan failed, nothing synced:[/red] {report.scan_error}")
        return

    if report.total == 0:
        console.print("[green]Everything up to date[/green]")
        return

    # Format as: "Synced X files (A copied, B deleted, C failed)"
    changes = []
    if report.copied:
        changes.append(f"[green]{report.copied} copied[/green]")
    if report.deleted:
        changes.append(f"[red]{report.deleted} deleted[/red]")
    if report.failures:
        changes.append(f"[bold red]{len(report.failures)} failed[/bold red]")

    console.print(f"Synced {report.copied + report.deleted} files ({', '.join(changes)})")


def display_detailed_sync_results(report: SyncReport):
    """Display detailed sync results with trees."""
    if report.scan_error:
        console.print(f"\n[red]Scan failed, nothing synced:[/red] {report.scan_error}")
        return

    if report.total == 0:
        console.print("\n[green]Everything up to date[/green]")
        return

    console.print("\n[bold]Sync Results[/bold]")

    failed = {outcome.task.source for outcome in report.failures}
    tree = Tree("[bold]Destination[/bold]")
    copied = [dst for src, dst in report.to_copy.items() if src not in failed]
    if copied:
        branch = tree.add("[green]Copied[/green]")
        for path in sorted(copied):
            branch.add(f"[green]{path}[/green]")
    deleted = [path for path in report.to_delete if path not in failed]
    if deleted:
        branch = tree.add("[red]Deleted[/red]")
        for path in sorted(deleted):
            branch.add(f"[red]{path}[/red]")
    if report.failures:
        branch = tree.add("[bold red]Failed[/bold red]")
        for outcome in sorted(report.failures, key=lambda o: o.task.source):
            branch.add(f"[bold red]{outcome.task.source}[/bold red]: {outcome.error}")
    if report.pruned:
        branch = tree.add("[dim]Pruned[/dim]")
        for path in sorted(report.pruned):
            branch.add(f"[dim]{path}[/dim]")
    console.print(tree)


async def run_sync(source: Path, dest: Path, workers: int, verbose: bool = False) -> SyncReport:
    """Run sync operation."""
    sync_service = SyncService(workers=workers, buffer_size=config.buffer_size)
    report = await sync_service.sync(source, dest)

    # Display results
    if verbose:
        display_detailed_sync_results(report)
    else:
        display_sync_summary(report)
    return report


@app.command()
def sync(
    source: str = typer.Option(
        ...,
        "--source",
        "-s",
        help="Full path of the source folder.",
    ),
    dest: str = typer.Option(
        ...,
        "--dest",
        "-d",
        help="Full path of the destination folder.",
    ),
    workers: int = typer.Option(
        config.workers,
        "--workers",
        "-w",
        min=1,
        help="Number of workers per pipeline.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed sync information.",
    ),
) -> None:
    """Mirror the source folder into the destination folder."""
    if not source.strip() or not dest.strip():
        raise typer.BadParameter("source folder or destination folder can't be empty")

    try:
        report = asyncio.run(run_sync(Path(source), Path(dest), workers, verbose))
    except Exception as e:
        logger.exception("Sync failed")
        typer.echo(f"Error during sync: {e}", err=True)
        raise typer.Exit(1)

    if not report.success:
        typer.echo("sync completed but there are some errors, check error logs", err=True)
        raise typer.Exit(1)
