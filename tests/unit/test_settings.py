"""
Tests for environment-driven settings and client builders.
"""

import pytest  # type: ignore

from vendor_clients.config.settings import VendorSettings, get_settings, reset_settings
from vendor_clients.sources.client.docusign.docusign import DocuSignClient
from vendor_clients.sources.client.github.github import GitHubClient
from vendor_clients.sources.client.mailchimp.mailchimp import MailchimpClient
from vendor_clients.sources.client.shopify.shopify import ShopifyClient
from vendor_clients.sources.client.stripe.stripe import StripeClient

VENDOR_ENV_VARS = [
    "VENDOR_HTTP_TIMEOUT",
    "VENDOR_HTTP_FOLLOW_REDIRECTS",
    "STRIPE_API_KEY",
    "STRIPE_BASE_URL",
    "GITHUB_TOKEN",
    "GITHUB_BASE_URL",
    "MAILCHIMP_API_KEY",
    "MAILCHIMP_SERVER_PREFIX",
    "SHOPIFY_SHOP",
    "SHOPIFY_ACCESS_TOKEN",
    "SHOPIFY_API_VERSION",
    "DOCUSIGN_ACCESS_TOKEN",
    "DOCUSIGN_ACCOUNT_ID",
    "DOCUSIGN_BASE_PATH",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in VENDOR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestVendorSettings:
    """Test loading settings from the environment."""

    def test_defaults(self, clean_env):
        settings = VendorSettings.from_env(load_dotenv_file=False)

        assert settings.http.timeout == 30.0
        assert settings.http.follow_redirects is True
        assert settings.stripe.api_key is None
        assert settings.stripe.base_url == "https://api.stripe.com"
        assert settings.github.base_url == "https://api.github.com"
        assert settings.shopify.api_version == "2024-01"
        assert settings.docusign.base_path == "https://demo.docusign.net/restapi"

    def test_reads_environment(self, clean_env):
        clean_env.setenv("VENDOR_HTTP_TIMEOUT", "5")
        clean_env.setenv("VENDOR_HTTP_FOLLOW_REDIRECTS", "false")
        clean_env.setenv("STRIPE_API_KEY", "sk_test_1")
        clean_env.setenv("GITHUB_BASE_URL", "https://github.example.com/api/v3/")
        clean_env.setenv("SHOPIFY_SHOP", "my-store")
        clean_env.setenv("SHOPIFY_API_VERSION", "2023-10")

        settings = VendorSettings.from_env(load_dotenv_file=False)

        assert settings.http.timeout == 5.0
        assert settings.http.follow_redirects is False
        assert settings.stripe.api_key == "sk_test_1"
        assert settings.github.base_url == "https://github.example.com/api/v3"
        assert settings.shopify.shop == "my-store"
        assert settings.shopify.api_version == "2023-10"

    def test_dotenv_file_is_loaded(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("GITHUB_TOKEN=ghp_from_dotenv\n")
        clean_env.chdir(tmp_path)

        settings = VendorSettings.from_env()

        assert settings.github.token == "ghp_from_dotenv"

    def test_singleton(self, clean_env):
        clean_env.setenv("STRIPE_API_KEY", "sk_first")
        first = get_settings()
        clean_env.setenv("STRIPE_API_KEY", "sk_second")

        assert get_settings() is first

        reset_settings()
        assert get_settings().stripe.api_key == "sk_second"


class TestBuildFromSettings:
    """Test building vendor clients from settings."""

    @pytest.mark.parametrize(
        "builder", [StripeClient, GitHubClient, MailchimpClient, ShopifyClient, DocuSignClient]
    )
    def test_missing_credentials_raise(self, builder):
        with pytest.raises(ValueError):
            builder.build_from_settings(VendorSettings())

    def test_stripe(self):
        settings = VendorSettings(stripe={"api_key": "sk_test_1"}, http={"timeout": 7})

        rest_client = StripeClient.build_from_settings(settings).get_client()

        assert rest_client.headers["Authorization"] == "Bearer sk_test_1"
        assert rest_client.get_base_url() == "https://api.stripe.com"
        assert rest_client.timeout == 7

    def test_github(self):
        settings = VendorSettings(github={"token": "ghp_1"})

        rest_client = GitHubClient.build_from_settings(settings).get_client()

        assert rest_client.headers["Authorization"] == "Bearer ghp_1"
        assert rest_client.headers["Accept"] == "application/vnd.github+json"

    def test_mailchimp_prefix_from_key(self):
        settings = VendorSettings(mailchimp={"api_key": "abc-us19"})

        rest_client = MailchimpClient.build_from_settings(settings).get_client()

        assert rest_client.get_base_url() == "https://us19.api.mailchimp.com/3.0"

    def test_mailchimp_explicit_prefix_wins(self):
        settings = VendorSettings(mailchimp={"api_key": "abc-us19", "server_prefix": "us2"})

        rest_client = MailchimpClient.build_from_settings(settings).get_client()

        assert rest_client.get_base_url() == "https://us2.api.mailchimp.com/3.0"

    def test_shopify(self):
        settings = VendorSettings(shopify={"shop": "my-store", "access_token": "shpat_1"})

        rest_client = ShopifyClient.build_from_settings(settings).get_client()

        assert rest_client.get_base_url() == "https://my-store.myshopify.com/admin/api/2024-01"
        assert rest_client.headers["X-Shopify-Access-Token"] == "shpat_1"
        assert "Authorization" not in rest_client.headers

    def test_docusign(self):
        settings = VendorSettings(docusign={"access_token": "ds_1", "account_id": "acct"})

        rest_client = DocuSignClient.build_from_settings(settings).get_client()

        assert rest_client.get_account_id() == "acct"
        assert rest_client.get_base_url() == "https://demo.docusign.net/restapi"
