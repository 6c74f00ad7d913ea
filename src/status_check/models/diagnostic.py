"""Diagnostic and annotation models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from status_check.models import Severity


@dataclass(frozen=True)
class Diagnostic:
    """A single issue reported by an upstream check.

    Lines are 1-indexed and inclusive. ``file`` may be absolute or relative
    to the repository root; it is normalized against that root when
    written out.
    """

    file: str
    start_line: int
    end_line: int
    message: str
    id: str

    def __post_init__(self) -> None:
        if self.start_line < 1:
            raise ValueError(f"start_line must be >= 1, got {self.start_line}")
        if self.end_line < self.start_line:
            raise ValueError(
                f"end_line ({self.end_line}) must not precede start_line ({self.start_line})"
            )

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Diagnostic:
        raw_start = d.get("start_line", d.get("startLine"))
        if raw_start is None:
            raise ValueError("missing 'start_line'")
        if not d.get("id"):
            raise ValueError("missing 'id'")
        start = int(raw_start)
        end = int(d.get("end_line", d.get("endLine", start)))
        return cls(
            file=str(d["file"]),
            start_line=start,
            end_line=end,
            message=str(d.get("message", "")),
            id=str(d["id"]),
        )


@dataclass(frozen=True)
class Annotation:
    path: str
    start_line: int
    end_line: int
    annotation_level: Severity
    message: str

    @classmethod
    def from_diagnostic(cls, d: Diagnostic, level: Severity, path: str) -> Annotation:
        return cls(
            path=path,
            start_line=d.start_line,
            end_line=d.end_line,
            annotation_level=level,
            message=f"{d.id}::{d.message}",
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the shape GitHub expects in ``output.annotations``."""
        return {
            "path": self.path,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "annotation_level": self.annotation_level.value,
            "message": self.message,
        }
