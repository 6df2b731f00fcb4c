"""HTTP API clients for DocuSign, GitHub, Mailchimp, Shopify and Stripe."""

import logging

from vendor_clients.sources.client.errors import (
    DeserializationError,
    HTTPStatusError,
    MissingParameterError,
    PaginationError,
    StalledPaginationError,
    TransportError,
    VendorClientError,
)
from vendor_clients.sources.client.http.http_client import HTTPClient
from vendor_clients.sources.client.pagination import (
    Page,
    PaginationStrategy,
    build_cursor_url,
    fetch_all,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DeserializationError",
    "HTTPClient",
    "HTTPStatusError",
    "MissingParameterError",
    "Page",
    "PaginationError",
    "PaginationStrategy",
    "StalledPaginationError",
    "TransportError",
    "VendorClientError",
    "build_cursor_url",
    "fetch_all",
]
