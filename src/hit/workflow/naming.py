"""Text helpers for branch names, commit messages and repository identifiers.

Everything here is pure: no git calls, no network. Commands combine these
helpers with values fetched from git and the issue tracker.
"""

from __future__ import annotations

import re

from hit.workflow.errors import MalformedInput

SLUG_WORD_LIMIT = 5

_LEADING_DIGITS_RE = re.compile(r"[0-9]+")
_SSH_REMOTE_RE = re.compile(r"^(?:ssh://)?[^@/\s]+@[^:/\s]+[:/](?P<path>[^\s]+?)(?:\.git)?/?$")
_HTTP_REMOTE_RE = re.compile(r"^https?://[^/\s]+/(?P<path>[^\s]+?)(?:\.git)?/?$")


def make_slug(title: str, *, word_limit: int = SLUG_WORD_LIMIT) -> str:
    """Derive a short hyphen-joined description from an issue title.

    Only alphanumeric and whitespace characters survive; the first
    ``word_limit`` whitespace-separated words are joined with ``-``.

    >>> make_slug("Fix the login bug when session expires now")
    'Fix-the-login-bug-when'
    """

    kept = "".join(ch for ch in title if ch.isalnum() or ch.isspace())
    return "-".join(kept.split()[:word_limit])


def make_branch_name(username: str, issue_number: int, title: str) -> str:
    """Build ``<username>/<issue>-<slug>``."""

    return f"{username}/{issue_number}-{make_slug(title)}"


def issue_from_branch(branch: str) -> int | None:
    """Extract the issue number that follows the first ``/`` in a branch name.

    ``kowainik/42-short-description`` gives ``42``. Branches without a ``/``, or
    with a non-digit right after it, give ``None``.
    """

    _, sep, rest = branch.partition("/")
    if not sep:
        return None

    match = _LEADING_DIGITS_RE.match(rest)
    return int(match.group()) if match else None


def decorate_commit_message(message: str, issue_number: int | None) -> str:
    if issue_number is None:
        return message
    issue = f"#{issue_number}"
    return f"[{issue}] {message}\n\nResolves {issue}"


def parse_clone_spec(spec: str, default_owner: str | None = None) -> tuple[str | None, str]:
    """Split a clone argument into ``(owner, repo)``.

    ``repo`` yields ``(default_owner, repo)``; ``user/repo`` yields both parts.
    Anything else raises :class:`MalformedInput`.
    """

    parts = spec.strip().split("/")
    if len(parts) == 1 and parts[0]:
        return default_owner, parts[0]
    if len(parts) == 2 and all(parts):
        return parts[0], parts[1]
    raise MalformedInput(f"Incorrect name: {spec}. Use 'repo' or 'user/repo' formats")


def ssh_clone_url(owner: str, repo: str, *, host: str = "github.com") -> str:
    return f"git@{host}:{owner}/{repo}.git"


def repository_from_remote_url(url: str) -> str:
    """Return ``owner/repo`` for an SSH or HTTPS remote URL.

    Raises:
        MalformedInput: if the URL does not point at an ``owner/repo`` path.
    """

    url = url.strip()
    for pattern in (_HTTP_REMOTE_RE, _SSH_REMOTE_RE):
        match = pattern.match(url)
        if match is None:
            continue
        parts = match.group("path").strip("/").split("/")
        if len(parts) == 2 and all(parts):
            return "/".join(parts)
    raise MalformedInput(f"Cannot determine 'owner/repo' from remote URL: {url!r}")
