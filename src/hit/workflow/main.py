"""CLI entrypoint for hit.

Each subcommand maps onto one :class:`~hit.workflow.commands.WorkflowCommands`
method. Exit codes: 0 on success, 1 on any workflow error, 2 on bad
configuration.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from hit import __version__
from hit.workflow import ui
from hit.workflow.commands import IssueTitleLookup, WorkflowCommands
from hit.workflow.config import HitSettings
from hit.workflow.errors import HitError
from hit.workflow.git import GitAdapter, SubprocessGit, remote_repository
from hit.workflow.github.client import GitHubClient
from hit.workflow.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hit",
        description="Shortcuts for everyday git + GitHub issue workflows",
    )
    parser.add_argument("--version", action="version", version=f"hit {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    hop = subparsers.add_parser("hop", help="Switch to a branch and rebase-pull it")
    hop.add_argument("branch", nargs="?", default=None, help="Branch name (default branch if omitted)")

    fresh = subparsers.add_parser(
        "fresh", help="Rebase the current branch onto the latest remote branch"
    )
    fresh.add_argument(
        "branch", nargs="?", default=None, help="Branch name (default branch if omitted)"
    )

    new = subparsers.add_parser("new", help="Create a branch for a GitHub issue")
    new.add_argument("issue_number", type=int, help="Issue number")

    commit = subparsers.add_parser("commit", help="Stage everything and commit")
    commit.add_argument("message", help="Commit message")
    commit.add_argument(
        "--no-issue",
        action="store_true",
        help="Do not link the commit to the issue from the branch name",
    )

    fix = subparsers.add_parser("fix", help="Stage, commit and push review fixes")
    fix.add_argument("message", nargs="?", default=None, help="Commit message")

    subparsers.add_parser("amend", help="Amend the last commit and force-push")

    push = subparsers.add_parser("push", help="Push the current branch")
    push.add_argument("--force", action="store_true", help="Force push")

    subparsers.add_parser("sync", help="Rebase-pull the current branch from the remote")

    resolve = subparsers.add_parser(
        "resolve", help="Hop to a branch and delete the branch you were on"
    )
    resolve.add_argument(
        "branch", nargs="?", default=None, help="Branch name (default branch if omitted)"
    )

    subparsers.add_parser("current", help="Show the current branch")

    clone = subparsers.add_parser("clone", help="Clone 'repo' or 'user/repo' from GitHub over SSH")
    clone.add_argument("spec", help="'repo' (your own) or 'user/repo'")

    return parser


def _github_issue_titles(settings: HitSettings, git: GitAdapter) -> IssueTitleLookup:
    def lookup(issue_number: int) -> str:
        repository = settings.issue_repository or remote_repository(git, settings.remote)
        github = GitHubClient(
            repository=repository,
            token=settings.github_token,
            base_url=settings.github_base_url,
        )
        try:
            return github.get_issue_title(issue_number)
        finally:
            github.close()

    return lookup


def build_commands(settings: HitSettings, git: GitAdapter | None = None) -> WorkflowCommands:
    git = git or SubprocessGit(echo=settings.echo_commands)
    return WorkflowCommands(
        git=git,
        issue_title=_github_issue_titles(settings, git),
        default_branch=settings.default_branch,
        remote=settings.remote,
        git_host=settings.git_host,
    )


def run_command(args: argparse.Namespace, commands: WorkflowCommands) -> int:
    if args.command == "hop":
        commands.hop(args.branch)
    elif args.command == "fresh":
        commands.fresh(args.branch)
    elif args.command == "new":
        commands.new(args.issue_number)
    elif args.command == "commit":
        commands.commit(args.message, include_issue=not args.no_issue)
    elif args.command == "fix":
        commands.fix(args.message)
    elif args.command == "amend":
        commands.amend()
    elif args.command == "push":
        commands.push(force=args.force)
    elif args.command == "sync":
        commands.sync()
    elif args.command == "resolve":
        commands.resolve(args.branch)
    elif args.command == "current":
        commands.current()
    elif args.command == "clone":
        commands.clone(args.spec)
    return 0


def main(argv: list[str] | None = None, *, git: GitAdapter | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = HitSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your environment or .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        return run_command(args, build_commands(settings, git))
    except HitError as e:
        logger.info("Command failed", extra={"command": args.command, "error": str(e)})
        ui.error_message(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
