"""statuscheck report - Log diagnostics and publish a check run."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from status_check.cli.logs import configure_logging
from status_check.cli.options import (
    DiagnosticsFileArgument,
    OutputOption,
    OwnerOption,
    RepoOption,
    RepoRootOption,
    RepositoryOption,
    ShaOption,
    TokenOption,
    ToolOption,
    VerboseOption,
)
from status_check.config.settings import Settings, split_repository
from status_check.core.github_client import Credentials, GitHubChecksClient
from status_check.core.publisher import build_check_run, publish
from status_check.core.run_result import RunResult, StatusCheckAborted
from status_check.models import Severity
from status_check.models.check_run import PublishOutcome
from status_check.output.formatters import output_run
from status_check.utils.diagnostics_parser import (
    CONSOLE,
    FATAL,
    DiagnosticsFileError,
    ReportedEntry,
    load_diagnostics,
)

logger = logging.getLogger(__name__)

console = Console(stderr=True)


def feed(result: RunResult, entries: list[ReportedEntry]) -> None:
    """Log entries in file order. Stops at the first fatal entry."""
    for entry in entries:
        if entry.kind == CONSOLE:
            result.log_console_only(entry.diagnostic)
        elif entry.kind == FATAL:
            result.exit_on_failure(entry.diagnostic)
        else:
            result.log(Severity.from_str(entry.kind), entry.diagnostic)


def _resolve_target(
    cfg: Settings, owner: str | None, repo: str | None, repository: str | None,
) -> tuple[str, str]:
    """Pick the target from --owner/--repo, then --repository, then $GITHUB_REPOSITORY."""
    if owner or repo:
        if not (owner and repo):
            raise typer.BadParameter("--owner and --repo must be given together", param_hint="--owner/--repo")
        return owner, repo
    try:
        if repository:
            return split_repository(repository)
        return cfg.owner_and_repo
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--repository") from e


def report(
    diagnostics_file: Path = DiagnosticsFileArgument,
    tool: str = ToolOption,
    repo_root: Optional[Path] = RepoRootOption,
    owner: Optional[str] = OwnerOption,
    repo: Optional[str] = RepoOption,
    repository: Optional[str] = RepositoryOption,
    sha: Optional[str] = ShaOption,
    token: Optional[str] = TokenOption,
    output: str = OutputOption,
    dry_run: bool = typer.Option(False, "--dry-run", help="Log and render the check run without posting it"),
    no_fail: bool = typer.Option(False, "--no-fail", help="Exit 0 even when failures were logged"),
    verbose: bool = VerboseOption,
) -> None:
    """Log each diagnostic, then post the run as one check run."""
    if verbose:
        configure_logging(verbose)
    cfg = Settings()
    try:
        entries = load_diagnostics(diagnostics_file)
    except DiagnosticsFileError as e:
        raise typer.BadParameter(str(e), param_hint="DIAGNOSTICS_FILE")

    head_sha = sha or cfg.head_sha
    if dry_run:
        owner, repo = owner or "", repo or ""
    else:
        owner, repo = _resolve_target(cfg, owner, repo, repository)
        if not head_sha:
            raise typer.BadParameter("No commit SHA given and $GITHUB_SHA is not set", param_hint="--sha")
        if not (token or cfg.token):
            raise typer.BadParameter("No token given and $GITHUB_TOKEN is not set", param_hint="--token")

    result = RunResult(repo_root or cfg.repo_root, tool)
    aborted: StatusCheckAborted | None = None
    try:
        feed(result, entries)
    except StatusCheckAborted as e:
        aborted = e
        logger.info("Stopped after fatal diagnostic %s", e.diagnostic.id)

    request = build_check_run(result, head_sha)
    output_run(result, request, output, owner=owner, repo=repo, out=console)

    if not dry_run:
        credentials = Credentials(
            token=token or cfg.token,
            client_name=cfg.client_name,
            client_version=cfg.client_version,
        )
        client = GitHubChecksClient(credentials, base_url=cfg.api_url)
        outcome = publish(result, client, owner, repo, head_sha)
        if outcome is PublishOutcome.PUBLISHED:
            console.print(f"Posted check run [bold]{escape(tool)}[/bold] to {owner}/{repo}")

    if aborted is not None:
        console.print(f"[red bold]Aborted:[/red bold] {escape(str(aborted))}")
        raise typer.Exit(code=1)
    if not result.success and not no_fail:
        raise typer.Exit(code=1)
