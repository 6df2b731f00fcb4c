"""Shopify Client with Admin API access token authentication using HTTPClient.

The token goes in the ``X-Shopify-Access-Token`` header rather than
``Authorization``. The base URL embeds the shop and the API version, and list
endpoints are paged through the ``Link`` response header.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field  # type: ignore

from vendor_clients.config.settings import VendorSettings
from vendor_clients.sources.client.http.http_client import HTTPClient
from vendor_clients.sources.client.iclient import IClient
from vendor_clients.utils.query import encode_path

DEFAULT_API_VERSION = "2024-01"


def shop_base_url(shop: str, api_version: str = DEFAULT_API_VERSION) -> str:
    """Admin API base URL for a shop name (``my-store``) or full myshopify domain."""
    shop = shop.strip().rstrip("/")
    if shop.startswith(("http://", "https://")):
        host = shop
    elif "." in shop:
        host = f"https://{shop}"
    else:
        host = f"https://{encode_path(shop)}.myshopify.com"
    return f"{host}/admin/api/{api_version}"


class ShopifyRESTClient(HTTPClient):
    """Shopify Admin REST client.

    Args:
        shop: Shop name (``my-store``), myshopify domain, or full URL
        access_token: Admin API access token
        api_version: Admin API version, e.g. 2024-01
        timeout: Request timeout in seconds
        follow_redirects: Whether to follow redirects
        transport: Optional httpx transport
    """

    def __init__(
        self,
        shop: str,
        access_token: str,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[Any] = None,
    ) -> None:
        # No Authorization header: Shopify reads the token from its own header
        super().__init__(
            token="",
            token_type="",
            base_url=shop_base_url(shop, api_version),
            timeout=timeout,
            follow_redirects=follow_redirects,
            transport=transport,
            logger=logging.getLogger(__name__),
        )
        self.shop = shop
        self.api_version = api_version
        self.headers = {
            "X-Shopify-Access-Token": access_token,
            "Accept": "application/json",
        }


class ShopifyConfig(BaseModel):
    """Configuration for Shopify REST client."""

    shop: str = Field(..., description="Shop name or myshopify domain")
    access_token: str = Field(..., description="Admin API access token")
    api_version: str = Field(DEFAULT_API_VERSION, description="Admin API version")
    timeout: float = Field(30.0, description="Request timeout in seconds")
    follow_redirects: bool = Field(True, description="Whether to follow redirects")

    def create_client(self, transport: Optional[Any] = None) -> ShopifyRESTClient:
        """Create a Shopify REST client with this configuration."""
        return ShopifyRESTClient(
            shop=self.shop,
            access_token=self.access_token,
            api_version=self.api_version,
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            transport=transport,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()


class ShopifyClient(IClient):
    """Builder class for Shopify clients."""

    def __init__(self, client: ShopifyRESTClient) -> None:
        self.client = client

    def get_client(self) -> ShopifyRESTClient:
        """Return the underlying Shopify REST client."""
        return self.client

    @classmethod
    def build_with_config(cls, config: ShopifyConfig, transport: Optional[Any] = None) -> "ShopifyClient":
        """Build ShopifyClient with configuration."""
        return cls(config.create_client(transport=transport))

    @classmethod
    def build_from_settings(
        cls,
        settings: VendorSettings,
        logger: Optional[logging.Logger] = None,
    ) -> "ShopifyClient":
        """Build ShopifyClient from environment settings.

        Raises:
            ValueError: If SHOPIFY_SHOP or SHOPIFY_ACCESS_TOKEN is not set
        """
        logger = logger or logging.getLogger(__name__)
        shopify = settings.shopify
        if not shopify.shop or not shopify.access_token:
            logger.error("Failed to build Shopify client: SHOPIFY_SHOP and SHOPIFY_ACCESS_TOKEN are required")
            raise ValueError("Shopify shop and access token are required")
        config = ShopifyConfig(
            shop=shopify.shop,
            access_token=shopify.access_token,
            api_version=shopify.api_version,
            timeout=settings.http.timeout,
            follow_redirects=settings.http.follow_redirects,
        )
        return cls.build_with_config(config)
