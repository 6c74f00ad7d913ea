"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

CLIENT_NAME = "status-check"
CLIENT_VERSION = "1.0.0"
DEFAULT_API_URL = "https://api.github.com"


def _default_token() -> str:
    """Return the API token from the environment.

    STATUS_CHECK_TOKEN wins over GITHUB_TOKEN so a job can post with a
    token other than the one Actions injects.
    """
    return os.environ.get("STATUS_CHECK_TOKEN", "") or os.environ.get("GITHUB_TOKEN", "")


def _default_repo_root() -> Path:
    workspace = os.environ.get("GITHUB_WORKSPACE", "")
    if workspace:
        return Path(workspace)
    return Path.cwd()


@dataclass
class Settings:
    token: str = field(default_factory=_default_token)
    repository: str = field(default_factory=lambda: os.environ.get("GITHUB_REPOSITORY", ""))
    head_sha: str = field(default_factory=lambda: os.environ.get("GITHUB_SHA", ""))
    repo_root: Path = field(default_factory=_default_repo_root)
    api_url: str = field(default_factory=lambda: os.environ.get("GITHUB_API_URL", "") or DEFAULT_API_URL)
    client_name: str = CLIENT_NAME
    client_version: str = CLIENT_VERSION

    @property
    def owner_and_repo(self) -> tuple[str, str]:
        return split_repository(self.repository)


def split_repository(repository: str) -> tuple[str, str]:
    """Split ``owner/repo`` into its two parts."""
    owner, sep, repo = repository.partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise ValueError(f"Expected repository as 'owner/repo', got {repository!r}")
    return owner, repo

