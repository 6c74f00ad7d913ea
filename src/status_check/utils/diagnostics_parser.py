"""Parse diagnostics files produced by upstream checks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from status_check.models.diagnostic import Diagnostic

# Severities accepted in a diagnostics file, in addition to the annotation levels.
CONSOLE = "console"
FATAL = "fatal"
ENTRY_KINDS: frozenset[str] = frozenset({CONSOLE, "notice", "warning", "failure", FATAL})


class DiagnosticsFileError(ValueError):
    pass


@dataclass
class ReportedEntry:
    kind: str
    diagnostic: Diagnostic


def single_line(message: str) -> str:
    """Collapse a multi-line message so it fits on one console line."""
    return " ".join(part.strip() for part in message.splitlines() if part.strip())


def parse_diagnostics(text: str) -> list[ReportedEntry]:
    """Parse a YAML or JSON document listing diagnostics.

    The document is either a list of entries or a mapping with a
    ``diagnostics`` list. Each entry carries the diagnostic fields plus an
    optional ``severity`` (default ``failure``).
    """
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DiagnosticsFileError(f"Invalid diagnostics document: {e}") from e
    if doc is None:
        return []
    if isinstance(doc, dict):
        doc = doc.get("diagnostics", []) or []
    if not isinstance(doc, list):
        raise DiagnosticsFileError("Diagnostics document must be a list of entries")

    entries: list[ReportedEntry] = []
    for i, raw in enumerate(doc, 1):
        entries.append(_parse_entry(i, raw))
    return entries


def load_diagnostics(path: Path) -> list[ReportedEntry]:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DiagnosticsFileError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise DiagnosticsFileError(f"Cannot read {path}: {e}") from e
    return parse_diagnostics(text)


def _parse_entry(index: int, raw: Any) -> ReportedEntry:
    if not isinstance(raw, dict):
        raise DiagnosticsFileError(f"Entry {index}: expected a mapping, got {type(raw).__name__}")
    kind = str(raw.get("severity", "failure")).lower()
    if kind not in ENTRY_KINDS:
        raise DiagnosticsFileError(
            f"Entry {index}: unknown severity {kind!r} (expected one of {', '.join(sorted(ENTRY_KINDS))})"
        )
    if "file" not in raw:
        raise DiagnosticsFileError(f"Entry {index}: missing 'file'")
    if "start_line" not in raw and "startLine" not in raw:
        raise DiagnosticsFileError(f"Entry {index}: missing 'start_line'")
    if not raw.get("id"):
        raise DiagnosticsFileError(f"Entry {index}: missing 'id'")
    fields = dict(raw)
    fields["message"] = single_line(str(raw.get("message", "")))
    try:
        diagnostic = Diagnostic.from_dict(fields)
    except (TypeError, ValueError) as e:
        raise DiagnosticsFileError(f"Entry {index}: {e}") from e
    return ReportedEntry(kind=kind, diagnostic=diagnostic)
