# arz/cli/runner.py

"""Headless snapshot run: load lookup, scrape, assemble, write."""

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from arz.config.settings import Settings
from arz.models.price_record import Snapshot
from arz.parsing.names import LookupTableError, NameLookupTable
from arz.services.snapshot_assembler import (
    assemble_snapshot,
    serialize_snapshot,
)
from arz.services.snapshot_orchestrator import SnapshotOrchestrator
from arz.storage.file_manager import FileManager, SnapshotWriteError

logger = logging.getLogger("arz.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(snapshot: Snapshot) -> None:
    """Render a Rich table of the snapshot records to stdout."""
    table = Table(
        title=f"Prices at {snapshot.generated_at}",
        show_lines=False,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Code", style="bold")
    table.add_column("Name")
    table.add_column("English", style="magenta")
    table.add_column("Price", justify="right", style="green")

    for idx, r in enumerate(snapshot.records, 1):
        table.add_row(
            str(idx),
            r.code,
            r.local_name,
            r.display_name,
            f"{r.price:,.2f}" if r.price > 0 else "—",
        )

    Console().print(table)


async def run_snapshot(
    output_path: Path | None = None,
    lookup_path: Path | None = None,
    show_table: bool = False,
    to_stdout: bool = False,
) -> int:
    """Build and write one snapshot; return an exit code (0=ok, 1=fatal)."""
    lookup_file = lookup_path or Settings.LOOKUP_PATH
    try:
        lookup = NameLookupTable.from_file(lookup_file)
    except LookupTableError as exc:
        logger.critical("Startup failed: %s", exc, exc_info=True)
        _err.print(f"[red]{escape(str(exc))}[/red]")
        return 1

    labels = ", ".join(s["label"] for s in Settings.SOURCES)
    _err.print(f"[bold]Fetching:[/bold] [dim]{labels}[/dim]")

    orchestrator = SnapshotOrchestrator(lookup)
    result = await orchestrator.collect()

    for source_id, error_msg in result.errors.items():
        _err.print(f"[red]Error {source_id}: {escape(error_msg)}[/red]")

    snapshot = assemble_snapshot(result)

    file_manager = FileManager(output_path)
    try:
        path = file_manager.save_snapshot(snapshot)
    except SnapshotWriteError as exc:
        logger.critical("Write failed: %s", exc, exc_info=True)
        _err.print(f"[red]{escape(str(exc))}[/red]")
        return 1

    counts = ", ".join(
        f"{len(result.records.get(sid, []))} {sid}"
        for sid in Settings.SOURCE_ORDER
    )
    _err.print(
        f"[green]✓ {path.name} written with {len(snapshot.records)}"
        f" records ({counts})[/green]"
    )

    if show_table:
        _print_table(snapshot)
    if to_stdout:
        sys.stdout.write(serialize_snapshot(snapshot))
        sys.stdout.write("\n")

    return 0
