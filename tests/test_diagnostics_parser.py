from __future__ import annotations

import pytest

from status_check.utils.diagnostics_parser import (
    DiagnosticsFileError,
    load_diagnostics,
    parse_diagnostics,
    single_line,
)

YAML_DOC = """
diagnostics:
  - file: src/a.py
    start_line: 3
    end_line: 5
    message: unused import
    id: F401
    severity: warning
  - file: src/b.py
    startLine: 7
    message: syntax error
    id: E999
"""


def test_parse_yaml_mapping():
    entries = parse_diagnostics(YAML_DOC)
    assert [e.kind for e in entries] == ["warning", "failure"]
    first, second = (e.diagnostic for e in entries)
    assert (first.start_line, first.end_line) == (3, 5)
    assert (second.start_line, second.end_line) == (7, 7)


def test_parse_json_list():
    entries = parse_diagnostics('[{"file": "x", "start_line": 1, "message": "m", "id": "I", "severity": "Notice"}]')
    assert entries[0].kind == "notice"


def test_empty_document():
    assert parse_diagnostics("") == []


def test_multiline_message_collapsed():
    assert single_line("first\n  second\n\nthird") == "first second third"
    entries = parse_diagnostics('- {file: x, start_line: 1, id: I, message: "a\\nb"}')
    assert entries[0].diagnostic.message == "a b"


@pytest.mark.parametrize(
    "text, match",
    [
        ("- {file: x, severity: loud}", "unknown severity"),
        ("- {start_line: 1}", "missing 'file'"),
        ("- just a string", "expected a mapping"),
        ("- {file: x, start_line: 4, end_line: 2, id: I}", "Entry 1: end_line"),
        ("key: [unclosed", "Invalid diagnostics document"),
        ("42", "must be a list"),
    ],
)
def test_invalid_documents(text, match):
    with pytest.raises(DiagnosticsFileError, match=match):
        parse_diagnostics(text)


def test_load_from_file(tmp_path):
    path = tmp_path / "diags.yaml"
    path.write_text(YAML_DOC, encoding="utf-8")
    assert len(load_diagnostics(path)) == 2


@pytest.mark.parametrize(
    "text, match",
    [
        ("- {file: x, id: I}", "missing 'start_line'"),
        ("- {file: x, start_line: 2}", "missing 'id'"),
        ("- {file: x, start_line: 2, id: ''}", "missing 'id'"),
    ],
)
def test_required_fields(text, match):
    with pytest.raises(DiagnosticsFileError, match=match):
        parse_diagnostics(text)


def test_load_rejects_non_utf8(tmp_path):
    path = tmp_path / "diags.yaml"
    path.write_bytes(b"\xff\xfe")
    with pytest.raises(DiagnosticsFileError, match="not valid UTF-8"):
        load_diagnostics(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(DiagnosticsFileError, match="Cannot read"):
        load_diagnostics(tmp_path / "absent.yaml")
