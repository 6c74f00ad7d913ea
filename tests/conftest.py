from __future__ import annotations

import io
from typing import Any

import pytest
from rich.console import Console

from status_check.core.github_client import CheckRunForbidden
from status_check.core.run_result import RunResult
from status_check.models.check_run import CheckRunRequest
from status_check.output.console import ConsoleReporter


class FakeCheckRunClient:
    """Records create_check_run calls; optionally raises instead."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[tuple[str, str, CheckRunRequest]] = []

    def create_check_run(self, owner: str, repo: str, request: CheckRunRequest) -> Any:
        self.calls.append((owner, repo, request))
        if self.error is not None:
            raise self.error
        return {"id": 1}


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(buffer: io.StringIO) -> ConsoleReporter:
    console = Console(file=buffer, width=200, color_system=None)
    return ConsoleReporter("Lint", "/repo", console=console)


@pytest.fixture
def run_result(reporter: ConsoleReporter) -> RunResult:
    return RunResult("/repo", "Lint", reporter=reporter)


@pytest.fixture
def fake_client() -> FakeCheckRunClient:
    return FakeCheckRunClient()


@pytest.fixture
def forbidden_client() -> FakeCheckRunClient:
    return FakeCheckRunClient(error=CheckRunForbidden("octo", "widgets"))


@pytest.fixture
def make_client():
    return FakeCheckRunClient
