"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from io import StringIO
from pathlib import Path

import pytest

from hit.workflow.commands import WorkflowCommands
from hit.workflow.errors import SubprocessFailure

_SETTINGS_ENV_VARS = (
    "HIT_GITHUB_TOKEN",
    "GITHUB_BASE_URL",
    "HIT_ISSUE_REPOSITORY",
    "HIT_DEFAULT_BRANCH",
    "HIT_REMOTE",
    "HIT_GIT_HOST",
    "HIT_ECHO_COMMANDS",
    "LOG_LEVEL",
)


class FakeGit:
    """Recording GitAdapter.

    ``outputs`` maps a space-joined argument string to the text `capture` returns;
    a missing key is a failed call. ``fail_on`` makes `run` fail for commands
    whose first argument matches.
    """

    def __init__(
        self,
        outputs: dict[str, str] | None = None,
        fail_on: set[str] | None = None,
    ) -> None:
        self.outputs = dict(outputs or {})
        self.fail_on = set(fail_on or ())
        self.runs: list[list[str]] = []
        self.captures: list[list[str]] = []

    def run(self, args: Sequence[str]) -> int:
        self.runs.append(list(args))
        if args and args[0] in self.fail_on:
            raise SubprocessFailure(args, 1)
        return 0

    def capture(self, args: Sequence[str]) -> str:
        self.captures.append(list(args))
        key = " ".join(args)
        if key not in self.outputs:
            raise SubprocessFailure(args, 1)
        return self.outputs[key]

    @property
    def calls(self) -> int:
        return len(self.runs) + len(self.captures)


CURRENT_BRANCH = "rev-parse --abbrev-ref HEAD"
USER_LOGIN = "config user.login"


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no hit settings in the environment."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def out() -> StringIO:
    return StringIO()


@pytest.fixture
def make_commands(out: StringIO):
    """Build WorkflowCommands around a FakeGit."""

    def _make(git: FakeGit, titles: dict[int, str] | None = None) -> WorkflowCommands:
        lookup = None
        if titles is not None:
            lookup = titles.__getitem__
        return WorkflowCommands(git=git, issue_title=lookup, out=out)

    return _make


@pytest.fixture
def fake_git():
    """Build a FakeGit, optionally positioned on a branch with a configured login."""

    def _make(
        branch: str | None = None,
        *,
        login: str | None = None,
        outputs: dict[str, str] | None = None,
        fail_on: set[str] | None = None,
    ) -> FakeGit:
        scripted = dict(outputs or {})
        if branch is not None:
            scripted[CURRENT_BRANCH] = branch
        if login is not None:
            scripted[USER_LOGIN] = login
        return FakeGit(scripted, fail_on=fail_on)

    return _make
