"""
Client configuration settings.

Settings are read from environment variables (a ``.env`` file in the working
directory is loaded first) and fall back to the public API hosts of each vendor.
Credentials have no default: a vendor whose token is unset cannot be built from
settings.
"""

import os
from typing import Dict, Optional

from dotenv import find_dotenv, load_dotenv  # type: ignore
from pydantic import BaseModel, Field, field_validator  # type: ignore


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class HTTPSettings(BaseModel):
    """Transport settings shared by every vendor client."""

    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")


class StripeSettings(BaseModel):
    """Stripe credentials."""

    api_key: Optional[str] = Field(default=None, description="Secret API key")
    base_url: str = Field(default="https://api.stripe.com", description="API host")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure base URL doesn't end with trailing slash."""
        return v.rstrip("/")


class GitHubSettings(BaseModel):
    """GitHub credentials."""

    token: Optional[str] = Field(default=None, description="Personal access token")
    base_url: str = Field(default="https://api.github.com", description="API host")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure base URL doesn't end with trailing slash."""
        return v.rstrip("/")


class MailchimpSettings(BaseModel):
    """Mailchimp credentials."""

    api_key: Optional[str] = Field(default=None, description="Marketing API key")
    server_prefix: Optional[str] = Field(
        default=None, description="Data center, e.g. us1; derived from the API key when unset"
    )


class ShopifySettings(BaseModel):
    """Shopify credentials."""

    shop: Optional[str] = Field(default=None, description="Shop name, e.g. my-store")
    access_token: Optional[str] = Field(default=None, description="Admin API access token")
    api_version: str = Field(default="2024-01", description="Admin API version")


class DocuSignSettings(BaseModel):
    """DocuSign credentials."""

    access_token: Optional[str] = Field(default=None, description="OAuth access token")
    account_id: Optional[str] = Field(default=None, description="Default account id")
    base_path: str = Field(default="https://demo.docusign.net/restapi", description="API base path")

    @field_validator("base_path")
    @classmethod
    def validate_base_path(cls, v: str) -> str:
        """Ensure base path doesn't end with trailing slash."""
        return v.rstrip("/")


class VendorSettings(BaseModel):
    """
    Aggregated settings for all vendor clients.

    Use ``VendorSettings.from_env()`` (or ``get_settings()``) rather than
    constructing it directly in application code.
    """

    http: HTTPSettings = Field(default_factory=HTTPSettings)
    stripe: StripeSettings = Field(default_factory=StripeSettings)
    github: GitHubSettings = Field(default_factory=GitHubSettings)
    mailchimp: MailchimpSettings = Field(default_factory=MailchimpSettings)
    shopify: ShopifySettings = Field(default_factory=ShopifySettings)
    docusign: DocuSignSettings = Field(default_factory=DocuSignSettings)

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "VendorSettings":
        """
        Load settings from environment variables.

        Args:
            load_dotenv_file: Load a ``.env`` file into the environment first.
                Variables already set are not overridden.

        Returns:
            VendorSettings instance with values from environment
        """
        if load_dotenv_file:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        return cls(
            http=HTTPSettings(
                timeout=float(os.getenv("VENDOR_HTTP_TIMEOUT", "30.0")),
                follow_redirects=_env_bool("VENDOR_HTTP_FOLLOW_REDIRECTS", "true"),
            ),
            stripe=StripeSettings(
                api_key=os.getenv("STRIPE_API_KEY"),
                base_url=os.getenv("STRIPE_BASE_URL", "https://api.stripe.com"),
            ),
            github=GitHubSettings(
                token=os.getenv("GITHUB_TOKEN"),
                base_url=os.getenv("GITHUB_BASE_URL", "https://api.github.com"),
            ),
            mailchimp=MailchimpSettings(
                api_key=os.getenv("MAILCHIMP_API_KEY"),
                server_prefix=os.getenv("MAILCHIMP_SERVER_PREFIX"),
            ),
            shopify=ShopifySettings(
                shop=os.getenv("SHOPIFY_SHOP"),
                access_token=os.getenv("SHOPIFY_ACCESS_TOKEN"),
                api_version=os.getenv("SHOPIFY_API_VERSION", "2024-01"),
            ),
            docusign=DocuSignSettings(
                access_token=os.getenv("DOCUSIGN_ACCESS_TOKEN"),
                account_id=os.getenv("DOCUSIGN_ACCOUNT_ID"),
                base_path=os.getenv("DOCUSIGN_BASE_PATH", "https://demo.docusign.net/restapi"),
            ),
        )

    def to_dict(self) -> Dict:
        """
        Convert settings to dictionary.

        Returns:
            Dictionary representation of settings
        """
        return self.model_dump()


# Global settings instance
_settings: Optional[VendorSettings] = None


def get_settings() -> VendorSettings:
    """
    Get settings singleton.

    Returns:
        VendorSettings instance
    """
    global _settings
    if _settings is None:
        _settings = VendorSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
