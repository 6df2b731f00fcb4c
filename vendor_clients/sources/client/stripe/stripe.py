"""Stripe Client with secret API key authentication using HTTPClient.

Stripe takes form-encoded request bodies and pages its list endpoints with a
``starting_after`` cursor.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field  # type: ignore

from vendor_clients.config.settings import HTTPSettings, VendorSettings
from vendor_clients.sources.client.http.http_client import HTTPClient
from vendor_clients.sources.client.iclient import IClient


class StripeRESTClient(HTTPClient):
    """Stripe REST client using a secret key as Bearer token.

    Args:
        api_key: Secret API key (``sk_...``)
        base_url: API host; paths carry the ``/v1`` prefix
        timeout: Request timeout in seconds
        follow_redirects: Whether to follow redirects
        transport: Optional httpx transport
    """

    STRIPE_API_BASE_URL = "https://api.stripe.com"

    def __init__(
        self,
        api_key: str,
        base_url: str = STRIPE_API_BASE_URL,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[Any] = None,
    ) -> None:
        super().__init__(
            token=api_key,
            token_type="Bearer",
            base_url=base_url,
            timeout=timeout,
            follow_redirects=follow_redirects,
            transport=transport,
            logger=logging.getLogger(__name__),
        )
        self.headers["Accept"] = "application/json"


class StripeConfig(BaseModel):
    """Configuration for Stripe REST client.

    Args:
        api_key: Secret API key
        base_url: API host (default: https://api.stripe.com)
        timeout: Request timeout in seconds
    """

    api_key: str = Field(..., description="Stripe secret API key")
    base_url: str = Field(StripeRESTClient.STRIPE_API_BASE_URL, description="Base URL for Stripe API")
    timeout: float = Field(30.0, description="Request timeout in seconds")
    follow_redirects: bool = Field(True, description="Whether to follow redirects")

    def create_client(self, transport: Optional[Any] = None) -> StripeRESTClient:
        """Create a Stripe REST client with this configuration."""
        return StripeRESTClient(
            api_key=self.api_key,
            base_url=self.base_url,
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            transport=transport,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()


class StripeClient(IClient):
    """Builder class for Stripe clients.

    Example:
        >>> client = StripeClient.build_with_config(StripeConfig(api_key="sk_test_..."))
        >>> data_source = StripeDataSource(client)
    """

    def __init__(self, client: StripeRESTClient) -> None:
        self.client = client

    def get_client(self) -> StripeRESTClient:
        """Return the underlying Stripe REST client."""
        return self.client

    @classmethod
    def build_with_config(cls, config: StripeConfig, transport: Optional[Any] = None) -> "StripeClient":
        """Build StripeClient with configuration.

        Args:
            config: Stripe configuration instance
            transport: Optional httpx transport

        Returns:
            StripeClient instance
        """
        return cls(config.create_client(transport=transport))

    @classmethod
    def build_from_settings(
        cls,
        settings: VendorSettings,
        logger: Optional[logging.Logger] = None,
    ) -> "StripeClient":
        """Build StripeClient from environment settings.

        Raises:
            ValueError: If STRIPE_API_KEY is not set
        """
        logger = logger or logging.getLogger(__name__)
        if not settings.stripe.api_key:
            logger.error("Failed to build Stripe client: STRIPE_API_KEY is not set")
            raise ValueError("Stripe API key is required")
        http: HTTPSettings = settings.http
        config = StripeConfig(
            api_key=settings.stripe.api_key,
            base_url=settings.stripe.base_url,
            timeout=http.timeout,
            follow_redirects=http.follow_redirects,
        )
        return cls.build_with_config(config)
