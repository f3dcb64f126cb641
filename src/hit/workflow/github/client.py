"""GitHub issue lookups.

This intentionally wraps PyGithub to keep GitHub calls out of the workflow
commands and make tests easy: commands only ever see a ``Callable[[int], str]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests
from github import Auth, Github, GithubException
from github.Repository import Repository

from hit.workflow.errors import IssueLookupFailure, MalformedInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IssueSummary:
    """Minimal issue metadata fetched from GitHub."""

    repository: str
    number: int
    title: str


class GitHubClient:
    """Small wrapper around PyGithub for the issue reads hit needs."""

    def __init__(
        self,
        *,
        repository: str,
        token: str = "",
        base_url: str = "https://api.github.com",
        repo: Repository | None = None,
        github_api: Github | None = None,
    ) -> None:
        if not repository:
            raise ValueError("GitHub repository is required")

        self._repository_name = repository.strip().strip("/")

        if repo is not None:
            self._repo = repo
            self._github = None
            logger.debug("Using injected Repository instance")
            return

        if github_api is not None:
            self._github = github_api
        elif token:
            self._github = Github(
                auth=Auth.Token(token), base_url=base_url.rstrip("/"), retry=None
            )
        else:
            self._github = Github(base_url=base_url.rstrip("/"), retry=None)

        # Lazy: no request until an issue is actually read.
        self._repo = self._github.get_repo(self._repository_name, lazy=True)
        logger.debug("GitHub client ready", extra={"repo": self._repository_name})

    @property
    def repository(self) -> str:
        """Return the configured repository name ("owner/repo")."""

        return self._repository_name

    def get_issue(self, *, issue_number: int) -> IssueSummary:
        if issue_number <= 0:
            raise MalformedInput("issue_number must be a positive integer")

        logger.debug(
            "Fetching issue",
            extra={"repo": self._repository_name, "issue_number": issue_number},
        )
        try:
            issue = self._repo.get_issue(number=issue_number)
        except GithubException as e:
            raise IssueLookupFailure(
                f"Could not fetch issue #{issue_number} from {self._repository_name}: "
                f"{e.status} {_error_message(e)}"
            ) from e
        except requests.RequestException as e:
            raise IssueLookupFailure(
                f"Could not reach GitHub for issue #{issue_number} "
                f"({self._repository_name}): {e}"
            ) from e

        return IssueSummary(
            repository=self._repository_name,
            number=issue.number,
            title=issue.title or "",
        )

    def get_issue_title(self, issue_number: int) -> str:
        return self.get_issue(issue_number=issue_number).title

    def close(self) -> None:
        if self._github is not None:
            self._github.close()


def _error_message(error: GithubException) -> str:
    data = error.data
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message:
            return message
    return "request failed"
