"""Configuration for the hit CLI.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Nothing here is required: with no configuration at all, hit talks to
github.com anonymously and treats `master` as the default branch. The git
username is *not* a setting; it always comes from `git config user.login`.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HitSettings(BaseSettings):
    """Settings for the hit CLI.

    Environment variables:
    - HIT_GITHUB_TOKEN      (optional)
    - GITHUB_BASE_URL       (optional)
    - HIT_ISSUE_REPOSITORY  (optional)
    - HIT_DEFAULT_BRANCH    (optional)
    - HIT_REMOTE            (optional)
    - HIT_GIT_HOST          (optional)
    - HIT_ECHO_COMMANDS     (optional)
    - LOG_LEVEL             (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `HitSettings(_env_file=path_to_env)`.
    """

    github_token: str = Field(
        default="",
        validation_alias="HIT_GITHUB_TOKEN",
        description="GitHub token used for issue lookups (anonymous access when empty)",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_BASE_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )
    issue_repository: str | None = Field(
        default=None,
        validation_alias="HIT_ISSUE_REPOSITORY",
        description=(
            "Repository ('owner/repo') whose issues are looked up. "
            "Derived from the remote URL when unset."
        ),
    )

    default_branch: str = Field(
        default="master",
        validation_alias="HIT_DEFAULT_BRANCH",
        description="Branch used by hop/fresh/resolve when none is given",
    )
    remote: str = Field(
        default="origin",
        validation_alias="HIT_REMOTE",
        description="Remote that branches are fetched from and pushed to",
    )
    git_host: str = Field(
        default="github.com",
        validation_alias="HIT_GIT_HOST",
        description="Host used to build SSH clone URLs",
    )
    echo_commands: bool = Field(
        default=True,
        validation_alias="HIT_ECHO_COMMANDS",
        description="Print each git command before running it",
    )

    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("issue_repository")
    @classmethod
    def _check_issue_repository(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        parts = value.strip().strip("/").split("/")
        if len(parts) != 2 or not all(parts):
            raise ValueError("HIT_ISSUE_REPOSITORY must be in the form 'owner/repo'")
        return "/".join(parts)

    @field_validator("default_branch", "remote", "git_host")
    @classmethod
    def _require_non_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level
