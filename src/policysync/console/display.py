"""Display components for console output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.table import Table


if TYPE_CHECKING:
    from rich.console import Console

    from policysync.core.models import ManufacturerEntry, RunStatus, SyncResult


def print_sync_result(console: Console, result: SyncResult) -> None:
    """Print per-manufacturer outcomes and the run totals."""
    table = Table(title="Sync Results", border_style="blue")
    table.add_column("Manufacturer", style="bold")
    table.add_column("Status", width=10)
    table.add_column("Rules", justify="right", width=6)
    table.add_column("Error", style="dim", overflow="fold")
    for detail in result.details:
        if detail.failed:
            status = "[red]error[/red]"
        elif detail.updated:
            status = "[green]updated[/green]"
        else:
            status = "[dim]unchanged[/dim]"
        rules = str(detail.rules_count) if detail.rules_count is not None else "-"
        table.add_row(detail.id, status, rules, detail.error or "")
    console.print()
    console.print(table)

    summary = Table(title="Summary", border_style="blue")
    summary.add_column("Metric", style="bold")
    summary.add_column("Value", justify="right")
    summary.add_row("Manufacturers", str(result.total_manufacturers))
    summary.add_row("Updated", str(result.updated))
    summary.add_row("Unchanged", str(result.unchanged))
    summary.add_row("Errors", str(len(result.failed)))
    console.print(summary)


def print_registry(console: Console, entries: list[ManufacturerEntry]) -> None:
    """Print the manufacturer registry."""
    table = Table(title=f"Registry ({len(entries)} manufacturers)", border_style="blue")
    table.add_column("ID", style="bold")
    table.add_column("Policy URL", style="dim")
    for entry in entries:
        table.add_row(entry.id, entry.source_url)
    console.print(table)


def print_run_status(console: Console, status: RunStatus | None, snapshots: list[str]) -> None:
    """Print the last run status and the stored snapshots."""
    if status is None:
        console.print("  [yellow]⚠[/yellow] No sync has been run yet")
        return
    updates = ", ".join(status.updates) if status.updates else "none"
    console.print(
        Panel(
            f"[bold]Last run:[/bold] {status.last_run}\n"
            f"[bold]Updated:[/bold] {updates}\n"
            f"[bold]Snapshots:[/bold] {len(snapshots)}",
            title="Last Run",
            border_style="blue",
        )
    )
