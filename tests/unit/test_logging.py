"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging
from io import StringIO

from hit.workflow.logging import JsonFormatter, configure_logging


def _record(msg: str, **context: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="hit.workflow.commands",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in context.items():
        setattr(record, key, value)
    return record


def test_json_formatter_lifts_context_fields() -> None:
    record = _record("Creating branch", branch="alice/1-x", issue_number=1)

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "hit.workflow.commands"
    assert payload["message"] == "Creating branch"
    assert payload["branch"] == "alice/1-x"
    assert payload["issue_number"] == 1
    assert "extra" not in payload


def test_json_formatter_renders_git_command() -> None:
    record = _record("Git command failed", git_args=["checkout", "nope"], returncode=1)

    payload = json.loads(JsonFormatter().format(record))

    assert payload["git_args"] == ["checkout", "nope"]
    assert payload["git"] == "git checkout nope"
    assert payload["returncode"] == 1


def test_json_formatter_ignores_unknown_attributes() -> None:
    record = _record("hello", unrelated="value")

    payload = json.loads(JsonFormatter().format(record))

    assert "unrelated" not in payload
    assert set(payload) == {"timestamp", "level", "logger", "message"}


def test_configure_logging_replaces_handlers() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    stream = StringIO()
    try:
        configure_logging("info", stream=StringIO())
        configure_logging("info", stream=stream)

        assert len(root.handlers) == 1
        logging.getLogger("hit.test").info(
            "Command failed", extra={"command": "hop", "error": "boom"}
        )

        line = json.loads(stream.getvalue().strip())
        assert line["message"] == "Command failed"
        assert line["command"] == "hop"
        assert line["error"] == "boom"
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
