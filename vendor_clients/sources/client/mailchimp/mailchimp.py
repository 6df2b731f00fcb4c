"""Mailchimp Client with Marketing API key authentication using HTTPClient.

API keys end with their data center (``<key>-us6``); requests must go to that
data center's host.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field  # type: ignore

from vendor_clients.config.settings import VendorSettings
from vendor_clients.sources.client.http.http_client import HTTPClient
from vendor_clients.sources.client.iclient import IClient

DEFAULT_SERVER_PREFIX = "us1"


def server_prefix_from_key(api_key: str) -> Optional[str]:
    """Data center suffix of a Mailchimp API key, or None if the key has none."""
    _, sep, prefix = api_key.rpartition("-")
    return prefix if sep and prefix else None


class MailchimpRESTClient(HTTPClient):
    """Mailchimp Marketing REST client.

    Args:
        api_key: Marketing API key
        server_prefix: Data center (``us6``); taken from the key when omitted
        timeout: Request timeout in seconds
        follow_redirects: Whether to follow redirects
        transport: Optional httpx transport
    """

    def __init__(
        self,
        api_key: str,
        server_prefix: Optional[str] = None,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[Any] = None,
    ) -> None:
        self.server_prefix = server_prefix or server_prefix_from_key(api_key) or DEFAULT_SERVER_PREFIX
        super().__init__(
            token=api_key,
            token_type="Bearer",
            base_url=f"https://{self.server_prefix}.api.mailchimp.com/3.0",
            timeout=timeout,
            follow_redirects=follow_redirects,
            transport=transport,
            logger=logging.getLogger(__name__),
        )
        self.headers["Accept"] = "application/json"


class MailchimpConfig(BaseModel):
    """Configuration for Mailchimp REST client."""

    api_key: str = Field(..., description="Mailchimp Marketing API key")
    server_prefix: Optional[str] = Field(None, description="Data center, e.g. us6")
    timeout: float = Field(30.0, description="Request timeout in seconds")
    follow_redirects: bool = Field(True, description="Whether to follow redirects")

    def create_client(self, transport: Optional[Any] = None) -> MailchimpRESTClient:
        """Create a Mailchimp REST client with this configuration."""
        return MailchimpRESTClient(
            api_key=self.api_key,
            server_prefix=self.server_prefix,
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            transport=transport,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()


class MailchimpClient(IClient):
    """Builder class for Mailchimp clients."""

    def __init__(self, client: MailchimpRESTClient) -> None:
        self.client = client

    def get_client(self) -> MailchimpRESTClient:
        """Return the underlying Mailchimp REST client."""
        return self.client

    @classmethod
    def build_with_config(cls, config: MailchimpConfig, transport: Optional[Any] = None) -> "MailchimpClient":
        """Build MailchimpClient with configuration."""
        return cls(config.create_client(transport=transport))

    @classmethod
    def build_from_settings(
        cls,
        settings: VendorSettings,
        logger: Optional[logging.Logger] = None,
    ) -> "MailchimpClient":
        """Build MailchimpClient from environment settings.

        Raises:
            ValueError: If MAILCHIMP_API_KEY is not set
        """
        logger = logger or logging.getLogger(__name__)
        if not settings.mailchimp.api_key:
            logger.error("Failed to build Mailchimp client: MAILCHIMP_API_KEY is not set")
            raise ValueError("Mailchimp API key is required")
        config = MailchimpConfig(
            api_key=settings.mailchimp.api_key,
            server_prefix=settings.mailchimp.server_prefix,
            timeout=settings.http.timeout,
            follow_redirects=settings.http.follow_redirects,
        )
        return cls.build_with_config(config)
