from __future__ import annotations

from status_check.models import Severity
from status_check.models.diagnostic import Diagnostic


def test_failure_line_is_exact(reporter, buffer):
    d = Diagnostic("/repo/src/x.cs", 10, 12, "bad token", "E001")
    reporter.write_line(Severity.FAILURE.glyph, d)
    assert buffer.getvalue() == "❌Lint-E001::file=src/x.cs,line=10::bad token\n"


def test_notice_has_no_glyph(reporter, buffer):
    reporter.write_line(Severity.NOTICE.glyph, Diagnostic("/repo/a.md", 3, 3, "note", "N1"))
    assert buffer.getvalue() == "Lint-N1::file=a.md,line=3::note\n"


def test_warning_glyph(reporter, buffer):
    reporter.write_line(Severity.WARNING.glyph, Diagnostic("/repo/a.md", 3, 4, "careful", "W7"))
    assert buffer.getvalue() == "⚠️Lint-W7::file=a.md,line=3::careful\n"


def test_long_line_and_markup_not_altered(reporter, buffer):
    message = "[bold]not markup[/bold] :smile: " + "x" * 400
    reporter.write_line("", Diagnostic("/repo/a.md", 1, 1, message, "L"))
    assert buffer.getvalue() == f"Lint-L::file=a.md,line=1::{message}\n"


def test_default_console_writes_to_stdout(capsys):
    from status_check.output.console import ConsoleReporter

    ConsoleReporter("Lint", "/repo").write_line("❌", Diagnostic("/repo/src/x.cs", 10, 10, "bad token", "E001"))
    assert capsys.readouterr().out == "❌Lint-E001::file=src/x.cs,line=10::bad token\n"


def test_tabs_and_control_characters_pass_through(reporter, buffer):
    reporter.write_line("", Diagnostic("/repo/a.md", 1, 1, "col\tvalue\x07end", "T1"))
    assert buffer.getvalue() == "Lint-T1::file=a.md,line=1::col\tvalue\x07end\n"


def test_write_text_is_unrendered(reporter, buffer):
    reporter.write_text("[red]literal[/red]\tx")
    assert buffer.getvalue() == "[red]literal[/red]\tx\n"
