"""
HTTP fixtures for vendor client tests.

Every client is built on a ``RecordingTransport`` so no request leaves the
process. Tests queue responses on ``transport`` and inspect
``transport.requests`` afterwards.
"""

from typing import AsyncGenerator

import pytest  # type: ignore

from tests.utils.mock_transport import RecordingTransport
from vendor_clients.sources.client.docusign.docusign import DocuSignClient, DocuSignConfig
from vendor_clients.sources.client.github.github import GitHubClient, GitHubConfig
from vendor_clients.sources.client.http.http_client import HTTPClient
from vendor_clients.sources.client.mailchimp.mailchimp import MailchimpClient, MailchimpConfig
from vendor_clients.sources.client.shopify.shopify import ShopifyClient, ShopifyConfig
from vendor_clients.sources.client.stripe.stripe import StripeClient, StripeConfig
from vendor_clients.sources.external.docusign.docusign import DocuSignDataSource
from vendor_clients.sources.external.github.github import GitHubDataSource
from vendor_clients.sources.external.mailchimp.mailchimp import MailchimpDataSource
from vendor_clients.sources.external.shopify.shopify import ShopifyDataSource
from vendor_clients.sources.external.stripe.stripe import StripeDataSource

DOCUSIGN_ACCOUNT_ID = "0a1b2c3d-acct"


@pytest.fixture(scope="function")
def transport() -> RecordingTransport:
    """Provide an empty recording transport."""
    return RecordingTransport()


@pytest.fixture(scope="function")
async def http_client(transport: RecordingTransport) -> AsyncGenerator[HTTPClient, None]:
    """
    Provide a bare HTTPClient against https://api.example.com.

    Yields:
        HTTPClient instance, closed after the test
    """
    client = HTTPClient(token="test-token", base_url="https://api.example.com", transport=transport)
    yield client
    await client.close()


@pytest.fixture(scope="function")
async def stripe(transport: RecordingTransport) -> AsyncGenerator[StripeDataSource, None]:
    client = StripeClient.build_with_config(StripeConfig(api_key="sk_test_123"), transport=transport)
    data_source = StripeDataSource(client)
    yield data_source
    await data_source.get_client().close()


@pytest.fixture(scope="function")
async def github(transport: RecordingTransport) -> AsyncGenerator[GitHubDataSource, None]:
    client = GitHubClient.build_with_config(GitHubConfig(token="ghp_test"), transport=transport)
    data_source = GitHubDataSource(client)
    yield data_source
    await data_source.get_client().close()


@pytest.fixture(scope="function")
async def shopify(transport: RecordingTransport) -> AsyncGenerator[ShopifyDataSource, None]:
    config = ShopifyConfig(shop="test-store", access_token="shpat_test", api_version="2024-01")
    data_source = ShopifyDataSource(ShopifyClient.build_with_config(config, transport=transport))
    yield data_source
    await data_source.get_client().close()


@pytest.fixture(scope="function")
async def mailchimp(transport: RecordingTransport) -> AsyncGenerator[MailchimpDataSource, None]:
    config = MailchimpConfig(api_key="abc123-us6")
    data_source = MailchimpDataSource(MailchimpClient.build_with_config(config, transport=transport))
    yield data_source
    await data_source.get_client().close()


@pytest.fixture(scope="function")
async def docusign(transport: RecordingTransport) -> AsyncGenerator[DocuSignDataSource, None]:
    config = DocuSignConfig(access_token="ds-token", account_id=DOCUSIGN_ACCOUNT_ID)
    data_source = DocuSignDataSource(DocuSignClient.build_with_config(config, transport=transport))
    yield data_source
    await data_source.get_client().close()
