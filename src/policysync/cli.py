"""Command-line interface for policysync."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import TYPE_CHECKING

from policysync.config.registry import load_registry, select_entries
from policysync.config.settings import Settings
from policysync.console.logger import SyncConsole
from policysync.orchestrator.sync import PolicySync
from policysync.storage.snapshots import SnapshotStore


if TYPE_CHECKING:
    from policysync.core.models import SyncDetail, SyncResult


console = SyncConsole()


async def run_sync(
    output_dir: str | None = None,
    registry_file: str | None = None,
    only: list[str] | None = None,
    mock: bool = False,
    as_json: bool = False,
) -> SyncResult:
    """Run one sync pass and print the outcome."""
    settings = Settings()
    if output_dir:
        settings.sync.output_dir = output_dir
    if registry_file:
        settings.sync.registry_file = registry_file
    console.setup_logging(settings.log_level, stderr=as_json)

    registry = load_registry(settings.sync.registry_file)
    if only:
        registry = select_entries(registry, only)
    sync = PolicySync(settings, mock=mock, registry=registry)

    if as_json:
        result = await sync.run()
        console.console.print_json(data=result.to_output())
        return result

    console.print_header(len(registry), settings.sync.output_dir)
    if mock:
        console.console.print("[yellow]Running in MOCK mode (no LLM API calls)[/yellow]\n")

    with console.sync_progress() as progress:
        task = progress.add_task("Syncing policies...", total=len(registry))

        def on_detail(detail: SyncDetail) -> None:
            console.print_detail(detail)
            progress.update(task, advance=1)

        result = await sync.run(on_detail=on_detail)

    console.print_sync_result(result)
    console.print_success(result.updated, settings.sync.output_dir)
    return result


def show_registry(registry_file: str | None = None) -> None:
    settings = Settings()
    console.print_registry(load_registry(registry_file or settings.sync.registry_file))


def show_status(output_dir: str | None = None) -> None:
    settings = Settings()
    store = SnapshotStore(output_dir or settings.sync.output_dir)
    console.print_run_status(store.read_status(), store.list_snapshots())


def main() -> None:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="policysync", description="Sync 340B manufacturer policy rules to CSV"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show log output")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sync_cmd = subparsers.add_parser("sync", help="Download policies and update rule CSVs")
    sync_cmd.add_argument("--output-dir", "-o", help="Output directory for CSVs and run status")
    sync_cmd.add_argument("--registry", help="JSON file mapping manufacturer id to policy URL")
    sync_cmd.add_argument(
        "--only", nargs="+", metavar="ID", help="Sync only these manufacturer ids"
    )
    sync_cmd.add_argument("--mock", action="store_true", help="Use mock LLM for testing")
    sync_cmd.add_argument("--json", action="store_true", help="Print the result as JSON")

    list_cmd = subparsers.add_parser("list", help="Show the manufacturer registry")
    list_cmd.add_argument("--registry", help="JSON file mapping manufacturer id to policy URL")

    status_cmd = subparsers.add_parser("status", help="Show the last run status")
    status_cmd.add_argument("--output-dir", "-o", help="Output directory")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    console.verbose = args.verbose
    try:
        if args.command == "sync":
            asyncio.run(
                run_sync(args.output_dir, args.registry, args.only, args.mock, args.json)
            )
        elif args.command == "list":
            show_registry(args.registry)
        elif args.command == "status":
            show_status(args.output_dir)
    except KeyboardInterrupt:
        console.console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
