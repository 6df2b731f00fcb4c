"""GitHub Client with personal access token authentication using HTTPClient.

List endpoints are paged through the ``Link`` response header.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field  # type: ignore

from vendor_clients.config.settings import VendorSettings
from vendor_clients.sources.client.http.http_client import HTTPClient
from vendor_clients.sources.client.iclient import IClient

GITHUB_API_VERSION = "2022-11-28"


class GitHubRESTClient(HTTPClient):
    """GitHub REST client using a token as Bearer credentials.

    Args:
        token: Personal access token or installation token
        base_url: API host, e.g. https://github.example.com/api/v3 for GitHub Enterprise
        timeout: Request timeout in seconds
        follow_redirects: Whether to follow redirects
        transport: Optional httpx transport
    """

    GITHUB_API_BASE_URL = "https://api.github.com"

    def __init__(
        self,
        token: str,
        base_url: str = GITHUB_API_BASE_URL,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[Any] = None,
    ) -> None:
        super().__init__(
            token=token,
            token_type="Bearer",
            base_url=base_url,
            timeout=timeout,
            follow_redirects=follow_redirects,
            transport=transport,
            logger=logging.getLogger(__name__),
        )
        self.headers.update({
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        })


class GitHubConfig(BaseModel):
    """Configuration for GitHub REST client."""

    token: str = Field(..., description="GitHub access token")
    base_url: str = Field(GitHubRESTClient.GITHUB_API_BASE_URL, description="Base URL for GitHub API")
    timeout: float = Field(30.0, description="Request timeout in seconds")
    follow_redirects: bool = Field(True, description="Whether to follow redirects")

    def create_client(self, transport: Optional[Any] = None) -> GitHubRESTClient:
        """Create a GitHub REST client with this configuration."""
        return GitHubRESTClient(
            token=self.token,
            base_url=self.base_url,
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            transport=transport,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()


class GitHubClient(IClient):
    """Builder class for GitHub clients."""

    def __init__(self, client: GitHubRESTClient) -> None:
        self.client = client

    def get_client(self) -> GitHubRESTClient:
        """Return the underlying GitHub REST client."""
        return self.client

    @classmethod
    def build_with_config(cls, config: GitHubConfig, transport: Optional[Any] = None) -> "GitHubClient":
        """Build GitHubClient with configuration."""
        return cls(config.create_client(transport=transport))

    @classmethod
    def build_from_settings(
        cls,
        settings: VendorSettings,
        logger: Optional[logging.Logger] = None,
    ) -> "GitHubClient":
        """Build GitHubClient from environment settings.

        Raises:
            ValueError: If GITHUB_TOKEN is not set
        """
        logger = logger or logging.getLogger(__name__)
        if not settings.github.token:
            logger.error("Failed to build GitHub client: GITHUB_TOKEN is not set")
            raise ValueError("GitHub token is required")
        config = GitHubConfig(
            token=settings.github.token,
            base_url=settings.github.base_url,
            timeout=settings.http.timeout,
            follow_redirects=settings.http.follow_redirects,
        )
        return cls.build_with_config(config)
