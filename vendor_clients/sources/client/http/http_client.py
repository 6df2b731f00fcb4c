import logging
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar
from urllib.parse import urlencode

import httpx  # type: ignore
from pydantic import TypeAdapter, ValidationError  # type: ignore

from vendor_clients.config.constants.http_status_code import HttpStatusCode
from vendor_clients.sources.client.errors import DeserializationError, TransportError
from vendor_clients.sources.client.http.http_request import HTTPRequest
from vendor_clients.sources.client.http.http_response import HTTPResponse
from vendor_clients.sources.client.iclient import IClient
from vendor_clients.sources.client.pagination import (
    DEFAULT_CURSOR_PARAM,
    Page,
    PaginationStrategy,
    fetch_all,
)
from vendor_clients.utils.query import build_query, flatten_form, safe_format_url

T = TypeVar("T")

BODY_SNIPPET_LENGTH = 200


class HTTPClient(IClient):
    """
    HTTP client with a static authentication header.

    Features:
    - Authorization header injection
    - Relative URLs resolved against the vendor base URL
    - JSON or form-encoded bodies, chosen from the request's Content-Type
    - Typed responses validated with pydantic
    - Failures raised as VendorClientError subclasses, never retried

    Args:
        token: Authentication token (empty string for no Authorization header)
        token_type: Token type for Authorization header (default: "Bearer")
        base_url: Base URL relative request paths are resolved against
        timeout: Request timeout in seconds (default: 30.0)
        follow_redirects: Whether to follow HTTP redirects (default: True)
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        logger: Optional logger instance
    """
    def __init__(
        self,
        token: str,
        token_type: str = "Bearer",
        base_url: str = "",
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        self.headers: Dict[str, str] = {}
        if token:
            self.headers["Authorization"] = f"{token_type} {token}".strip()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> "HTTPClient":
        """Get the client"""
        return self

    def get_base_url(self) -> str:
        """Get the base URL relative paths are resolved against"""
        return self.base_url

    def build_url(self, path: str, query: Optional[Mapping[str, Any]] = None) -> str:
        """Resolve a path against the base URL and append an encoded query string."""
        url = path if path.startswith(("http://", "https://")) else f"{self.base_url}{path}"
        params = build_query(query or {})
        if params:
            separator = "&" if "?" in url else "?"
            url = f"{url}{separator}{urlencode(params)}"
        return url

    async def _ensure_client(self) -> httpx.AsyncClient:
        """
        Ensure client is created and available.
        """
        if self.client is None:
            self.client = httpx.AsyncClient(
                transport=self.transport,
                timeout=self.timeout,
                follow_redirects=self.follow_redirects
            )
        return self.client

    async def execute(self, request: HTTPRequest, **kwargs) -> HTTPResponse:
        """Execute an HTTP request
        Args:
            request: The HTTP request to execute
            kwargs: Additional keyword arguments to pass to the request
        Returns:
            A HTTPResponse object containing the response from the server
        Raises:
            TransportError: If no response was received
        """
        url = request.url
        if request.path_params:
            url = safe_format_url(url, request.path_params)
        url = self.build_url(url)
        client = await self._ensure_client()

        # Merge client headers with request headers (request headers take precedence)
        merged_headers = {**self.headers, **request.headers}
        request_kwargs = {
            "params": request.query_params or None,
            "headers": merged_headers,
            **kwargs
        }

        if isinstance(request.body, dict) and request.is_form:
            request_kwargs["data"] = flatten_form(request.body)
        elif isinstance(request.body, (dict, list)):
            request_kwargs["json"] = request.body
        elif isinstance(request.body, bytes):
            request_kwargs["content"] = request.body

        self.logger.debug(f"{request.method} {url}")
        try:
            response = await client.request(request.method, url, **request_kwargs)
        except httpx.HTTPError as e:
            self.logger.debug(f"{request.method} {url} failed: {type(e).__name__}: {e}")
            raise TransportError(request.method, url, original_error=e) from e
        return HTTPResponse(response)

    async def send(
        self,
        method: str,
        path: str,
        *,
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        content_type: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HTTPResponse:
        """Execute a request and raise HTTPStatusError unless the status is 2xx."""
        request_headers = dict(headers or {})
        if content_type and body is not None:
            request_headers["Content-Type"] = content_type
        request = HTTPRequest(
            url=path,
            method=method,
            headers=request_headers,
            query_params=build_query(query or {}),
            body=body,
        )
        response = await self.execute(request)
        if not response.is_success:
            snippet = response.text()[:BODY_SNIPPET_LENGTH]
            self.logger.debug(f"{method} {path}: Status={response.status}, Response={snippet or 'Empty'}")
            response.raise_for_status()
        return response

    def parse(self, response: HTTPResponse, model: Any) -> Any:
        """Decode a JSON body and validate it against ``model``.

        Returns None for 204 and empty bodies, the raw JSON when model is None.

        Raises:
            DeserializationError: If the body is not JSON or does not validate
        """
        if response.status == HttpStatusCode.NO_CONTENT.value or not response.bytes():
            return None
        data = response.json()
        if model is None:
            return data
        try:
            return TypeAdapter(model).validate_python(data)
        except ValidationError as e:
            raise DeserializationError(
                f"Response from {response.url} does not match {getattr(model, '__name__', model)}",
                original_error=e,
            ) from e

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        content_type: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        model: Any = None,
    ) -> Any:
        """Execute a request and return its body validated against ``model``.

        Args:
            method: HTTP method
            path: Path relative to the base URL, or an absolute URL
            query: Optional query parameters; empty values are skipped
            body: Optional body (dict/list for JSON or form, bytes as-is)
            content_type: Content-Type of the body
            headers: Extra request headers
            model: Pydantic model or type the JSON body is validated against

        Returns:
            The validated body, the raw JSON when model is None, or None when
            the response has no body

        Raises:
            TransportError, HTTPStatusError, DeserializationError
        """
        response = await self.send(
            method, path, query=query, body=body, content_type=content_type, headers=headers
        )
        return self.parse(response, model)

    async def get_all_pages(
        self,
        path: str,
        item_model: Type[T],
        *,
        query: Optional[Mapping[str, Any]] = None,
        items_key: Optional[str] = None,
    ) -> List[T]:
        """Collect every page of a list endpoint by following ``Link: rel="next"`` headers.

        Args:
            path: List path or absolute URL
            item_model: Model each item is validated against
            query: Query parameters for the first request; next links carry their own
            items_key: Key of the item array when the body is an object envelope

        Returns:
            Items of all pages in fetch order
        """
        adapter = TypeAdapter(List[item_model])  # type: ignore[valid-type]
        items: List[T] = []
        url: Optional[str] = path
        page_query = query
        pages = 0
        while url:
            response = await self.send("GET", url, query=page_query)
            if response.status == HttpStatusCode.NO_CONTENT.value or not response.bytes():
                pages += 1
                break
            data = response.json()
            if items_key is not None:
                if not isinstance(data, dict):
                    raise DeserializationError(f"Expected an object with '{items_key}' from {response.url}")
                data = data.get(items_key, [])
            try:
                page_items = adapter.validate_python(data)
            except ValidationError as e:
                raise DeserializationError(
                    f"Page from {response.url} does not contain a list of {item_model.__name__}",
                    original_error=e,
                ) from e
            pages += 1
            if not page_items:
                break
            items.extend(page_items)
            url = response.next_link
            page_query = None
        self.logger.debug(f"Collected {len(items)} items from {path} in {pages} pages")
        return items

    async def list_all(
        self,
        path: str,
        item_model: Type[T],
        *,
        strategy: PaginationStrategy,
        query: Optional[Mapping[str, Any]] = None,
        page_model: Any = None,
        items_key: Optional[str] = None,
        cursor_param: str = DEFAULT_CURSOR_PARAM,
        max_pages: Optional[int] = None,
    ) -> List[T]:
        """Collect every item of a list endpoint using the endpoint's pagination strategy.

        ``LINK_HEADER`` delegates to :meth:`get_all_pages`. ``CURSOR`` requests
        ``page_model`` pages (anything with ``to_page()``) through
        :func:`fetch_all`.
        """
        if strategy is PaginationStrategy.LINK_HEADER:
            return await self.get_all_pages(path, item_model, query=query, items_key=items_key)

        if page_model is None:
            raise ValueError("page_model is required for cursor pagination")

        async def fetch_page(url: str, cursor: Optional[str]) -> Page[T]:
            page = await self.request("GET", url, model=page_model)
            if page is None:
                raise DeserializationError(f"Empty response for list page {url}")
            return page.to_page()

        return await fetch_all(
            self.build_url(path, query),
            fetch_page,
            cursor_param=cursor_param,
            max_pages=max_pages,
        )

    async def close(self) -> None:
        """Close the client"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry"""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit"""
        await self.close()
