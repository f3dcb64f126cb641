"""Workflow commands: each one is a short, ordered sequence of git calls.

Every git call goes through a :class:`~hit.workflow.git.GitAdapter`, which raises
:class:`~hit.workflow.errors.SubprocessFailure` on a non-zero exit, so a failed
step always stops the rest of the command. The current branch and username are
read from git on every call; nothing is cached between commands.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from hit.workflow import naming, ui
from hit.workflow.errors import EmptyInput, MalformedInput, MissingConfig, SubprocessFailure
from hit.workflow.git import GitAdapter

logger = logging.getLogger(__name__)

DEFAULT_FIX_MESSAGE = "Fix after review"

IssueTitleLookup = Callable[[int], str]


class WorkflowCommands:
    """The hit command set, bound to a git adapter and an issue tracker."""

    def __init__(
        self,
        *,
        git: GitAdapter,
        issue_title: IssueTitleLookup | None = None,
        default_branch: str = "master",
        remote: str = "origin",
        git_host: str = "github.com",
        out: TextIO | None = None,
    ) -> None:
        self._git = git
        self._issue_title = issue_title
        self._default_branch = default_branch
        self._remote = remote
        self._git_host = git_host
        self._out = out

    def current_branch(self) -> str:
        args = ["rev-parse", "--abbrev-ref", "HEAD"]
        branch = self._git.capture(args)
        if not branch:
            raise SubprocessFailure(args, 0, reason="returned no branch name")
        return branch

    def username(self) -> str:
        """Return the login from the local git config (``user.login``)."""

        try:
            login = self._git.capture(["config", "user.login"])
        except SubprocessFailure as e:
            raise MissingConfig(
                "user.login is not specified (git config --global user.login <name>)"
            ) from e
        if not login:
            raise MissingConfig("user.login is not specified")
        return login

    def _branch_or_default(self, branch: str | None) -> str:
        if branch is None or not branch.strip():
            return self._default_branch
        return branch.strip()

    def hop(self, branch: str | None = None) -> None:
        """Switch to a branch (default branch if omitted) and rebase-pull it."""

        target = self._branch_or_default(branch)
        self._git.run(["checkout", target])
        self._git.run(["pull", "--rebase", "--prune"])

    def fresh(self, branch: str | None = None) -> None:
        """Rebase the current branch onto the latest remote ``branch``."""

        target = self._branch_or_default(branch)
        self._git.run(["fetch", self._remote, target])
        self._git.run(["rebase", f"{self._remote}/{target}"])

    def new(self, issue_number: int) -> str:
        """Create and switch to ``<login>/<issue>-<slug>``; return the branch name."""

        if issue_number <= 0:
            raise MalformedInput(f"Issue number must be positive, got {issue_number}")
        if self._issue_title is None:
            raise MissingConfig("No issue tracker is configured")

        login = self.username()
        title = self._issue_title(issue_number)
        branch = naming.make_branch_name(login, issue_number, title)
        logger.info("Creating branch", extra={"branch": branch, "issue_number": issue_number})
        self._git.run(["checkout", "-b", branch])
        return branch

    def commit(self, message: str, *, include_issue: bool = True) -> str:
        """Stage everything and commit; return the final commit message.

        With ``include_issue`` the message is linked to the issue encoded in the
        current branch name, if there is one.
        """

        msg = message.strip()
        if not msg:
            raise EmptyInput("Commit message cannot be empty")

        issue_number = None
        if include_issue:
            issue_number = naming.issue_from_branch(self.current_branch())

        final = naming.decorate_commit_message(msg, issue_number)
        self._git.run(["add", "."])
        self._git.run(["commit", "-m", final])
        return final

    def fix(self, message: str | None = None) -> None:
        self._git.run(["add", "."])
        self._git.run(["commit", "-m", message or DEFAULT_FIX_MESSAGE])
        self.push(force=False)

    def amend(self) -> None:
        self._git.run(["add", "."])
        self._git.run(["commit", "--amend", "--no-edit"])
        self.push(force=True)

    def push(self, *, force: bool = False) -> None:
        """Push the current branch, setting its upstream if absent."""

        args = ["push", "--set-upstream", self._remote, self.current_branch()]
        if force:
            args.append("--force")
        self._git.run(args)

    def sync(self) -> None:
        self._git.run(["pull", "--rebase", self._remote, self.current_branch()])

    def resolve(self, branch: str | None = None) -> bool:
        """Hop to ``branch`` and force-delete the branch we came from.

        Returns True when a branch was deleted. Nothing is deleted when the
        previous branch is the target itself.
        """

        target = self._branch_or_default(branch)
        previous = self.current_branch()
        self.hop(target)
        if previous == target:
            return False

        self._git.run(["branch", "-D", previous])
        logger.info("Deleted branch", extra={"branch": previous})
        return True

    def current(self) -> int | None:
        """Print the current branch; return its issue number, if any."""

        branch = self.current_branch()
        print(ui.current_branch_line(branch), file=self._out or sys.stdout)
        return naming.issue_from_branch(branch)

    def clone(self, spec: str) -> str:
        """Clone ``repo`` (current user's) or ``user/repo`` over SSH; return the URL."""

        owner, repo = naming.parse_clone_spec(spec)
        if owner is None:
            owner = self.username()
        url = naming.ssh_clone_url(owner, repo, host=self._git_host)
        self._git.run(["clone", url])
        return url
