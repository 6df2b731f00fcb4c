"""GitHub data source module."""

from vendor_clients.sources.external.github.github import GitHubDataSource

__all__ = ["GitHubDataSource"]
