"""Errors raised by workflow commands.

Every error is reported to the user by the CLI and turns into a non-zero exit.
"""

from __future__ import annotations

from collections.abc import Sequence


class HitError(Exception):
    """Base class for workflow failures."""


class EmptyInput(HitError):
    """A required piece of user input was blank."""


class MissingConfig(HitError):
    """Required local git configuration is absent."""


class MalformedInput(HitError):
    """User input does not have the expected shape."""


class IssueLookupFailure(HitError):
    """The issue tracker could not return the requested issue."""


class SubprocessFailure(HitError):
    """A git invocation exited non-zero or produced no required output."""

    def __init__(self, command: Sequence[str], returncode: int, reason: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.reason = reason

        shown = " ".join(["git", *self.command])
        if reason:
            message = f"'{shown}' {reason}"
        else:
            message = f"'{shown}' failed with exit code {returncode}"
        super().__init__(message)
