"""
Pagination support shared by every vendor data source.

Two strategies exist side by side:

* Header-driven pagination (GitHub, Shopify): the transport follows the
  ``Link: <...>; rel="next"`` header itself, see ``HTTPClient.get_all_pages``.
* Cursor pagination (Stripe): implemented here. The key of the last item
  collected so far is sent as a cursor parameter (``starting_after``) on the
  next request, for as long as the server reports ``has_more``.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Awaitable,
    Callable,
    Generic,
    List,
    Optional,
    Protocol,
    TypeVar,
    runtime_checkable,
)

from vendor_clients.sources.client.errors import StalledPaginationError
from vendor_clients.utils.query import append_query_param

logger = logging.getLogger(__name__)

DEFAULT_CURSOR_PARAM = "starting_after"


@runtime_checkable
class CursorItem(Protocol):
    """An item that can name its own position in a cursor-paginated list."""

    def cursor_key(self) -> Optional[str]:
        ...


T = TypeVar("T", bound=CursorItem)


class PaginationStrategy(str, Enum):
    """How a list endpoint exposes its further pages."""

    LINK_HEADER = "link_header"
    CURSOR = "cursor"


@dataclass
class Page(Generic[T]):
    """
    One request/response worth of items.

    Attributes:
        items: Items of this page, in server order
        has_more: Whether the server reports further pages
    """

    items: List[T] = field(default_factory=list)
    has_more: bool = False


PageFetcher = Callable[[str, Optional[str]], Awaitable[Page[T]]]


def build_cursor_url(url: str, cursor_param: str, cursor: str) -> str:
    """Append the cursor parameter to the original list URL."""
    return append_query_param(url, cursor_param, cursor)


def _last_cursor(items: List[T]) -> Optional[str]:
    if not items:
        return None
    return items[-1].cursor_key() or None


async def fetch_all(
    url: str,
    fetch_page: PageFetcher[T],
    *,
    cursor_param: str = DEFAULT_CURSOR_PARAM,
    max_pages: Optional[int] = None,
) -> List[T]:
    """
    Fetch every page of a cursor-paginated list and merge the items.

    The first request goes to ``url`` unchanged. Each following request goes to
    ``url`` with one ``cursor_param=<cursor>`` pair appended, where the cursor is
    the key of the last item collected so far. Pages are fetched one at a time
    and concatenated in fetch order without de-duplication.

    Args:
        url: List URL, with or without a query string
        fetch_page: Performs one request for ``(url, cursor)``; cursor is None first
        cursor_param: Query parameter carrying the cursor
        max_pages: Optional cap on the number of requests

    Returns:
        All items of all pages

    Raises:
        StalledPaginationError: If more pages are reported but the cursor is
            missing or does not advance, or ``max_pages`` is exceeded
        VendorClientError: Whatever the page fetcher raised; no partial result
    """
    if max_pages is not None and max_pages < 1:
        raise ValueError(f"max_pages must be a positive integer, got: {max_pages}")

    page = await fetch_page(url, None)
    items: List[T] = list(page.items)
    has_more = page.has_more
    pages_fetched = 1
    previous_cursor: Optional[str] = None
    logger.debug(f"Fetched page 1 of {url}: {len(page.items)} items, has_more={has_more}")

    while has_more:
        cursor = _last_cursor(items)
        if cursor is None:
            logger.error(f"Pagination of {url} stalled after {pages_fetched} pages: no cursor available")
            raise StalledPaginationError(
                f"Server reported more results for {url} but no cursor could be derived",
                pages_fetched=pages_fetched,
            )
        if cursor == previous_cursor:
            logger.error(f"Pagination of {url} stalled after {pages_fetched} pages: cursor {cursor} did not advance")
            raise StalledPaginationError(
                f"Cursor {cursor} did not advance for {url}",
                pages_fetched=pages_fetched,
                cursor=cursor,
            )
        if max_pages is not None and pages_fetched >= max_pages:
            logger.error(f"Pagination of {url} stalled after {pages_fetched} pages: max_pages={max_pages} reached")
            raise StalledPaginationError(
                f"Gave up on {url} after {pages_fetched} pages (max_pages={max_pages})",
                pages_fetched=pages_fetched,
                cursor=cursor,
            )

        page = await fetch_page(build_cursor_url(url, cursor_param, cursor), cursor)
        pages_fetched += 1
        items.extend(page.items)
        has_more = page.has_more
        previous_cursor = cursor
        logger.debug(
            f"Fetched page {pages_fetched} of {url} after {cursor}: "
            f"{len(page.items)} items, has_more={has_more}"
        )

    return items
