"""Diagnostic logging for hit.

Log records are JSON lines on stderr so they never mix with the branch names
and command echo the user reads. Context that hit attaches through ``extra``
(the git arguments, the branch, the issue being looked up) is lifted to top
level keys, so a failed run can be filtered with ``jq 'select(.returncode)'``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

# Keys hit passes via ``extra=``; anything else on a record is ignored.
CONTEXT_FIELDS: tuple[str, ...] = (
    "command",
    "git_args",
    "returncode",
    "branch",
    "repo",
    "issue_number",
    "error",
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value

        # Render the argv the way it was echoed to the terminal.
        if "git_args" in payload:
            payload["git"] = " ".join(["git", *map(str, payload["git_args"])])

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str, *, stream: TextIO | None = None) -> None:
    """Route hit's diagnostics to stderr at ``level`` (a validated level name)."""

    root = logging.getLogger()

    # main() may run more than once per process (tests); keep a single handler.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(JsonFormatter())

    root.addHandler(handler)
    root.setLevel(level.upper())

    # PyGithub logs every request at DEBUG; only surface its warnings.
    logging.getLogger("github").setLevel(max(root.level, logging.INFO))
    logging.getLogger("urllib3").setLevel(max(root.level, logging.WARNING))
