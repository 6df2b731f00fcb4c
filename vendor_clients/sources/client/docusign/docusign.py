"""DocuSign eSignature Client with OAuth access token authentication using HTTPClient.

Tokens are obtained outside this module (JWT grant, authorization code, ...);
the client only attaches them. Most eSignature endpoints are scoped to an
account, so the config carries a default account id.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field  # type: ignore

from vendor_clients.config.settings import VendorSettings
from vendor_clients.sources.client.http.http_client import HTTPClient
from vendor_clients.sources.client.iclient import IClient

DEMO_BASE_PATH = "https://demo.docusign.net/restapi"


class DocuSignRESTClient(HTTPClient):
    """DocuSign eSignature REST client.

    Args:
        access_token: OAuth access token
        account_id: Default account id for account-scoped endpoints
        base_path: REST base path, e.g. https://na3.docusign.net/restapi
        timeout: Request timeout in seconds
        follow_redirects: Whether to follow redirects
        transport: Optional httpx transport
    """

    def __init__(
        self,
        access_token: str,
        account_id: Optional[str] = None,
        base_path: str = DEMO_BASE_PATH,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[Any] = None,
    ) -> None:
        super().__init__(
            token=access_token,
            token_type="Bearer",
            base_url=base_path,
            timeout=timeout,
            follow_redirects=follow_redirects,
            transport=transport,
            logger=logging.getLogger(__name__),
        )
        self.account_id = account_id
        self.headers["Accept"] = "application/json"
        if "demo" in base_path:
            self.logger.warning("Using DocuSign demo environment. Switch to production before go-live.")

    def get_account_id(self) -> Optional[str]:
        return self.account_id


class DocuSignConfig(BaseModel):
    """Configuration for DocuSign REST client."""

    access_token: str = Field(..., description="OAuth access token")
    account_id: Optional[str] = Field(None, description="Default account id")
    base_path: str = Field(DEMO_BASE_PATH, description="REST API base path")
    timeout: float = Field(30.0, description="Request timeout in seconds")
    follow_redirects: bool = Field(True, description="Whether to follow redirects")

    def create_client(self, transport: Optional[Any] = None) -> DocuSignRESTClient:
        """Create a DocuSign REST client with this configuration."""
        return DocuSignRESTClient(
            access_token=self.access_token,
            account_id=self.account_id,
            base_path=self.base_path,
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            transport=transport,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()


class DocuSignClient(IClient):
    """Builder class for DocuSign clients."""

    def __init__(self, client: DocuSignRESTClient) -> None:
        self.client = client

    def get_client(self) -> DocuSignRESTClient:
        """Return the underlying DocuSign REST client."""
        return self.client

    @classmethod
    def build_with_config(cls, config: DocuSignConfig, transport: Optional[Any] = None) -> "DocuSignClient":
        """Build DocuSignClient with configuration."""
        return cls(config.create_client(transport=transport))

    @classmethod
    def build_from_settings(
        cls,
        settings: VendorSettings,
        logger: Optional[logging.Logger] = None,
    ) -> "DocuSignClient":
        """Build DocuSignClient from environment settings.

        Raises:
            ValueError: If DOCUSIGN_ACCESS_TOKEN is not set
        """
        logger = logger or logging.getLogger(__name__)
        if not settings.docusign.access_token:
            logger.error("Failed to build DocuSign client: DOCUSIGN_ACCESS_TOKEN is not set")
            raise ValueError("DocuSign access token is required")
        config = DocuSignConfig(
            access_token=settings.docusign.access_token,
            account_id=settings.docusign.account_id,
            base_path=settings.docusign.base_path,
            timeout=settings.http.timeout,
            follow_redirects=settings.http.follow_redirects,
        )
        return cls.build_with_config(config)
