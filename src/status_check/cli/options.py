"""Shared CLI options."""

from __future__ import annotations

import typer

DiagnosticsFileArgument = typer.Argument(
    ..., exists=True, dir_okay=False, help="YAML or JSON diagnostics file",
)
OutputOption = typer.Option("table", "--output", "-o", help="Output format: table, json, yaml")
ToolOption = typer.Option(..., "--tool", "-t", help="Tool name shown on console lines and as the check run name")
RepoRootOption = typer.Option(
    None, "--repo-root", help="Repository root used to relativize paths (default: $GITHUB_WORKSPACE or cwd)",
)
OwnerOption = typer.Option(None, "--owner", help="Repository owner or organization (use with --repo)")
RepoOption = typer.Option(None, "--repo", help="Repository name (use with --owner)")
RepositoryOption = typer.Option(None, "--repository", "-r", help="Target repository as owner/repo (default: $GITHUB_REPOSITORY)")
ShaOption = typer.Option(None, "--sha", help="Head commit SHA (default: $GITHUB_SHA)")
TokenOption = typer.Option(None, "--token", help="API token (default: $STATUS_CHECK_TOKEN or $GITHUB_TOKEN)")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr")
