"""GitHub checks API wrapper."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from github import Auth, Github, GithubException, RateLimitExceededException

from status_check.config.settings import CLIENT_NAME, CLIENT_VERSION, DEFAULT_API_URL
from status_check.models.check_run import CheckRunRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    token: str
    client_name: str = CLIENT_NAME
    client_version: str = CLIENT_VERSION

    @property
    def user_agent(self) -> str:
        return f"{self.client_name}/{self.client_version}"

    def __repr__(self) -> str:
        return f"Credentials(token='***', client_name={self.client_name!r}, client_version={self.client_version!r})"


class CheckRunForbidden(Exception):
    """The token is not allowed to create check runs on the repository."""

    def __init__(self, owner: str, repo: str, cause: GithubException | None = None):
        super().__init__(f"Not permitted to create a check run on {owner}/{repo}: {cause}")
        self.owner = owner
        self.repo = repo
        self.cause = cause


class CheckRunClient(Protocol):
    def create_check_run(self, owner: str, repo: str, request: CheckRunRequest) -> Any: ...


class GitHubChecksClient:
    """Thin wrapper around PyGithub's check-run endpoint."""

    def __init__(self, credentials: Credentials, base_url: str = DEFAULT_API_URL):
        self.credentials = credentials
        self.base_url = base_url
        self._github: Github | None = None

    @property
    def github(self) -> Github:
        if self._github is None:
            self._github = Github(
                auth=Auth.Token(self.credentials.token),
                base_url=self.base_url,
                user_agent=self.credentials.user_agent,
            )
        return self._github

    def create_check_run(self, owner: str, repo: str, request: CheckRunRequest) -> Any:
        """Create a completed check run. Raises CheckRunForbidden on HTTP 403."""
        repository = self.github.get_repo(f"{owner}/{repo}", lazy=True)
        try:
            return repository.create_check_run(**request.to_dict())
        except RateLimitExceededException:
            raise
        except GithubException as e:
            if e.status == 403:
                raise CheckRunForbidden(owner, repo, e) from e
            raise
