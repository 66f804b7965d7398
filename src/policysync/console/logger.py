"""Rich console logging for the sync run."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from policysync.console.display import print_registry, print_run_status, print_sync_result


if TYPE_CHECKING:
    from collections.abc import Iterator

    from policysync.core.models import ManufacturerEntry, RunStatus, SyncDetail, SyncResult


class SyncConsole:
    """Rich console interface for sync progress and results."""

    def __init__(self, verbose: bool = False) -> None:
        self.console = Console()
        self.verbose = verbose

    def setup_logging(self, level: str = "INFO", stderr: bool = False) -> None:
        log_console = Console(stderr=True) if stderr else self.console
        logging.basicConfig(
            level=level if self.verbose else "WARNING",
            format="%(message)s",
            handlers=[
                RichHandler(
                    console=log_console, rich_tracebacks=True, show_time=False, show_path=False
                )
            ],
            force=True,
        )

    def print_header(self, manufacturer_count: int, output_dir: str) -> None:
        header = Text()
        header.append("policysync", style="bold blue")
        header.append(" - 340B Manufacturer Policy Sync\n\n", style="dim")
        header.append("Manufacturers: ", style="bold")
        header.append(f"{manufacturer_count}\n", style="green")
        header.append("Output: ", style="bold")
        header.append(str(output_dir), style="dim")
        self.console.print(Panel(header, border_style="blue"))
        self.console.print()

    @contextmanager
    def sync_progress(self) -> Iterator[Progress]:
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            expand=False,
        )
        with progress:
            yield progress

    def print_detail(self, detail: SyncDetail) -> None:
        if detail.failed:
            self.console.print(f"  [red]✗[/red] {detail.id} [dim]{detail.error}[/dim]")
        elif detail.updated:
            self.console.print(f"  [green]✓[/green] {detail.id} [dim]updated, {detail.rules_count} rules[/dim]")
        else:
            self.console.print(f"  [dim]=[/dim] {detail.id} [dim]unchanged[/dim]")

    def print_sync_result(self, result: SyncResult) -> None:
        print_sync_result(self.console, result)

    def print_registry(self, entries: list[ManufacturerEntry]) -> None:
        print_registry(self.console, entries)

    def print_run_status(self, status: RunStatus | None, snapshots: list[str]) -> None:
        print_run_status(self.console, status, snapshots)

    def print_success(self, updated: int, output_dir: str) -> None:
        self.console.print()
        self.console.print(
            Panel(
                f"[green]✓ Sync complete![/green]\n\n"
                f"[bold]Updated:[/bold] {updated}\n[bold]Output:[/bold] {output_dir}",
                title="[green]Complete[/green]",
                border_style="green",
            )
        )

    def print_error(self, error: str) -> None:
        self.console.print()
        self.console.print(
            Panel(f"[red]{error}[/red]", title="[red]Error[/red]", border_style="red")
        )
