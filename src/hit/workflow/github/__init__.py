"""GitHub integration for issue lookups."""

from hit.workflow.github.client import GitHubClient, IssueSummary

__all__ = ["GitHubClient", "IssueSummary"]
