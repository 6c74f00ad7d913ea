"""statuscheck validate - Parse a diagnostics file."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from status_check.cli.options import DiagnosticsFileArgument
from status_check.utils.diagnostics_parser import ENTRY_KINDS, DiagnosticsFileError, load_diagnostics

console = Console()


def validate(
    diagnostics_file: Path = DiagnosticsFileArgument,
) -> None:
    """Validate a diagnostics file and count its entries by severity."""
    try:
        entries = load_diagnostics(diagnostics_file)
    except DiagnosticsFileError as e:
        console.print(f"[red]Invalid:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    counts = Counter(entry.kind for entry in entries)
    table = Table(title=str(diagnostics_file))
    table.add_column("Severity", style="cyan")
    table.add_column("Count", justify="right", style="bold")
    for kind in sorted(ENTRY_KINDS):
        table.add_row(kind, str(counts.get(kind, 0)))
    console.print(table)
    console.print(f"{len(entries)} entries OK")
