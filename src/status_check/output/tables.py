"""Rich table builders for run summaries."""

from __future__ import annotations

from rich.table import Table

from status_check.core.run_result import RunResult
from status_check.output.themes import styled_conclusion, styled_severity


def annotation_table(result: RunResult) -> Table:
    table = Table(title=f"{result.tool_name} Diagnostics", expand=True)
    table.add_column("Level", no_wrap=True)
    table.add_column("Path", style="cyan", no_wrap=True)
    table.add_column("Lines", justify="right", style="dim", no_wrap=True)
    table.add_column("Message", max_width=80)

    for a in result.annotations:
        lines = str(a.start_line) if a.start_line == a.end_line else f"{a.start_line}-{a.end_line}"
        table.add_row(styled_severity(a.annotation_level), a.path, lines, a.message)
    return table


def summary_line(result: RunResult) -> str:
    counts = result.counts()
    parts = [
        f"{styled_severity(level)}: {count}"
        for level, count in counts.items()
        if count
    ]
    detail = ", ".join(parts) if parts else "[green]no diagnostics[/green]"
    return f"{result.tool_name} {styled_conclusion(result.success)} ({detail})"
