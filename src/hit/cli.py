"""Console entrypoint for `hit` and `python -m hit`.

The CLI itself is implemented in `hit.workflow.main`.
"""

from __future__ import annotations

from hit.workflow.main import main

__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
