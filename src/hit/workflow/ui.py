"""Terminal decorations for user-facing output."""

from __future__ import annotations

import sys
from typing import TextIO

BOLD = "\033[1m"
GREEN = "\033[32m"
RED = "\033[31m"
MAGENTA = "\033[35m"
RESET = "\033[0m"

ARROW = "→ "


def command_line(args: list[str]) -> str:
    return f"{MAGENTA}⚙  {' '.join(args)}{RESET}"


def current_branch_line(branch: str) -> str:
    return f"{ARROW}Current branch: {GREEN}{branch}{RESET}"


def error_message(message: str, *, stream: TextIO | None = None) -> None:
    print(f"{RED}{BOLD}✖ {message}{RESET}", file=stream or sys.stderr)

