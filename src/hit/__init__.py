"""hit: shortcuts for everyday git + GitHub issue workflows.

Provides:
- a `hit` CLI wrapping common branch/commit/push sequences
- configuration loaded from the environment and `.env`
- structured logging
- GitHub issue title lookups for branch naming
"""

__version__ = "0.1.0"

from hit.workflow.config import HitSettings

__all__ = ["__version__", "HitSettings"]
