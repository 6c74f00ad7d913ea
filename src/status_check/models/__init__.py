"""Data models for status-check."""

from __future__ import annotations

import enum


class Severity(enum.Enum):
    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"

    @property
    def glyph(self) -> str:
        """Prefix written before the tool name on the console line."""
        return _GLYPHS[self]

    @classmethod
    def from_str(cls, s: str) -> Severity:
        for member in cls:
            if member.value == s.lower():
                return member
        raise ValueError(f"Unknown severity: {s!r}")


_GLYPHS: dict[Severity, str] = {
    Severity.NOTICE: "",
    Severity.WARNING: "⚠️",
    Severity.FAILURE: "❌",
}
