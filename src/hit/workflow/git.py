"""Adapter around the ``git`` executable.

Commands talk to git only through :class:`GitAdapter`, which keeps subprocess
calls out of the workflow logic and lets tests substitute a fake.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Sequence
from typing import Any, Protocol, TextIO

from hit.workflow import ui
from hit.workflow.errors import SubprocessFailure
from hit.workflow.naming import repository_from_remote_url

logger = logging.getLogger(__name__)


class GitAdapter(Protocol):
    """Minimal git surface used by the workflow commands."""

    def run(self, args: Sequence[str]) -> int:
        """Run ``git <args>`` with inherited stdio.

        Returns the exit status (always 0); raises SubprocessFailure otherwise.
        """
        ...

    def capture(self, args: Sequence[str]) -> str:
        """Run ``git <args>`` and return its stripped stdout.

        Raises SubprocessFailure on a non-zero exit.
        """
        ...


class SubprocessGit:
    """:class:`GitAdapter` backed by :func:`subprocess.run`.

    Mutating calls are echoed before they run so the user sees the exact
    sequence. stderr is never captured: git's own error output reaches the
    terminal unchanged.
    """

    def __init__(self, *, echo: bool = True, echo_stream: TextIO | None = None) -> None:
        self._echo = echo
        self._echo_stream = echo_stream

    def run(self, args: Sequence[str]) -> int:
        cmd = ["git", *args]
        if self._echo:
            print(ui.command_line(cmd), file=self._echo_stream or sys.stderr, flush=True)

        logger.debug("Running git command", extra={"git_args": list(args)})
        result = self._spawn(args, cmd)
        if result.returncode != 0:
            logger.info(
                "Git command failed",
                extra={"git_args": list(args), "returncode": result.returncode},
            )
            raise SubprocessFailure(args, result.returncode)
        return result.returncode

    def capture(self, args: Sequence[str]) -> str:
        logger.debug("Capturing git output", extra={"git_args": list(args)})
        # Branch names and config values are not guaranteed to be UTF-8.
        result = self._spawn(
            args,
            ["git", *args],
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        )
        if result.returncode != 0:
            raise SubprocessFailure(args, result.returncode)
        return result.stdout.strip()

    @staticmethod
    def _spawn(
        args: Sequence[str], cmd: list[str], **kwargs: Any
    ) -> subprocess.CompletedProcess[str]:
        try:
            return subprocess.run(cmd, check=False, **kwargs)
        except OSError as e:
            raise SubprocessFailure(args, 127, reason=f"could not start: {e}") from e


def remote_repository(git: GitAdapter, remote: str = "origin") -> str:
    """Return ``owner/repo`` for the URL of ``remote``."""

    url = git.capture(["remote", "get-url", remote])
    return repository_from_remote_url(url)
