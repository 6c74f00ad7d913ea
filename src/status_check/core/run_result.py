"""Accumulates annotations and the overall outcome of a check run."""

from __future__ import annotations

import logging
import os
from collections import Counter

from status_check.models import Severity
from status_check.models.diagnostic import Annotation, Diagnostic
from status_check.output.console import ConsoleReporter
from status_check.utils.paths import normalize_path

logger = logging.getLogger(__name__)


class StatusCheckAborted(RuntimeError):
    """Raised by :meth:`RunResult.exit_on_failure` to stop further checks."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


class RunResult:
    """Everything one tool reports during a single run.

    Each logging call writes a console line immediately. Notices, warnings
    and failures are also kept as annotations, in call order, for the check
    run published at the end. ``success`` turns false on the first failure
    and stays false.
    """

    def __init__(
        self,
        repo_root: str | os.PathLike[str],
        tool_name: str,
        reporter: ConsoleReporter | None = None,
    ):
        self.repo_root = repo_root
        self.tool_name = tool_name
        self.reporter = reporter or ConsoleReporter(tool_name, repo_root)
        self._annotations: list[Annotation] = []
        self._success = True

    @property
    def success(self) -> bool:
        return self._success

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        return tuple(self._annotations)

    def counts(self) -> dict[Severity, int]:
        """Number of annotations per severity, zero-filled."""
        tally = Counter(a.annotation_level for a in self._annotations)
        return {s: tally.get(s, 0) for s in Severity}

    def log_console_only(self, d: Diagnostic) -> None:
        """Write the diagnostic to the console without annotating the PR."""
        self.reporter.write_line(Severity.NOTICE.glyph, d)

    def log_console_only_at(
        self, file: str, start_line: int, end_line: int, message: str, id: str,
    ) -> None:
        self.log_console_only(Diagnostic(file, start_line, end_line, message, id))

    def log_notice(self, d: Diagnostic) -> None:
        self._record(Severity.NOTICE, d)

    def log_warning(self, d: Diagnostic) -> None:
        """Record a warning. Warnings never change the conclusion."""
        self._record(Severity.WARNING, d)

    def log_failure(self, d: Diagnostic) -> None:
        """Record a failure and keep going.

        Use this rather than :meth:`exit_on_failure` whenever later checks
        can still run, so one CI run lists every problem.
        """
        self._record(Severity.FAILURE, d)
        self._success = False

    def log_failure_at(
        self, file: str, start_line: int, end_line: int, message: str, id: str,
    ) -> None:
        self.log_failure(Diagnostic(file, start_line, end_line, message, id))

    def exit_on_failure(self, d: Diagnostic) -> None:
        """Record a failure, then raise :class:`StatusCheckAborted`."""
        self.log_failure(d)
        raise StatusCheckAborted(d)

    def log(self, severity: Severity, d: Diagnostic) -> None:
        if severity is Severity.FAILURE:
            self.log_failure(d)
        elif severity is Severity.WARNING:
            self.log_warning(d)
        else:
            self.log_notice(d)

    def _record(self, severity: Severity, d: Diagnostic) -> None:
        self.reporter.write_line(severity.glyph, d)
        path = normalize_path(d.file, self.repo_root)
        self._annotations.append(Annotation.from_diagnostic(d, severity, path))
        logger.debug("%s %s %s:%d", self.tool_name, severity.value, path, d.start_line)
