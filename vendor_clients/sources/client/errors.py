"""Exceptions raised by the vendor clients.

Every failure surfaces as a ``VendorClientError`` subclass. Nothing is retried
or swallowed: the first failing request aborts the calling operation.
"""

from typing import Mapping, Optional


class VendorClientError(Exception):
    """Base exception for all vendor client errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class TransportError(VendorClientError):
    """Raised when the request never produced a response (connect error, timeout, protocol error)."""

    def __init__(self, method: str, url: str, original_error: Optional[Exception] = None) -> None:
        reason = type(original_error).__name__ if original_error else "unknown error"
        super().__init__(f"{method} {url} failed: {reason}", original_error)
        self.method = method
        self.url = url


class HTTPStatusError(VendorClientError):
    """Raised when the server answered with a non-success status code."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        headers: Optional[Mapping[str, str]] = None,
        url: Optional[str] = None,
    ) -> None:
        if body:
            message = f"HTTP {status_code}: {body[:200]}"
        else:
            message = f"HTTP {status_code}: empty response"
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.headers = dict(headers or {})
        self.url = url


class DeserializationError(VendorClientError):
    """Raised when a response body is not JSON or does not match the expected shape."""


class MissingParameterError(VendorClientError, ValueError):
    """Raised when a required path parameter is missing or empty."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required parameter: {name}")
        self.name = name


class PaginationError(VendorClientError):
    """Base exception for failures while collecting paginated results."""


class StalledPaginationError(PaginationError):
    """Raised when the server keeps reporting more pages but the cursor cannot advance."""

    def __init__(self, message: str, pages_fetched: int, cursor: Optional[str] = None) -> None:
        super().__init__(message)
        self.pages_fetched = pages_fetched
        self.cursor = cursor
