"""Severity color maps."""

from status_check.models import Severity

SEVERITY_COLORS: dict[Severity, str] = {
    Severity.NOTICE: "blue",
    Severity.WARNING: "yellow",
    Severity.FAILURE: "red bold",
}


def styled_severity(severity: Severity) -> str:
    color = SEVERITY_COLORS.get(severity, "white")
    return f"[{color}]{severity.value}[/{color}]"


def styled_conclusion(success: bool) -> str:
    return "[green]success[/green]" if success else "[red bold]failure[/red bold]"
