"""Console lines in the format the GitHub Actions log viewer understands."""

from __future__ import annotations

import os

from rich.console import Console

from status_check.models.diagnostic import Diagnostic
from status_check.utils.paths import normalize_path


class ConsoleReporter:
    """Writes one line per diagnostic to standard output.

    The line shape is parsed by CI log viewers, so it goes straight to the
    console's stream without rich rendering (no tab expansion, wrapping or
    markup).
    """

    def __init__(
        self,
        tool_name: str,
        repo_root: str | os.PathLike[str],
        console: Console | None = None,
    ):
        self.tool_name = tool_name
        self.repo_root = repo_root
        self.console = console or Console()

    def format_line(self, glyph: str, d: Diagnostic) -> str:
        path = normalize_path(d.file, self.repo_root)
        return f"{glyph}{self.tool_name}-{d.id}::file={path},line={d.start_line}::{d.message}"

    def write_line(self, glyph: str, d: Diagnostic) -> None:
        self.write_text(self.format_line(glyph, d))

    def write_text(self, text: str) -> None:
        stream = self.console.file
        stream.write(text + "\n")
        stream.flush()
