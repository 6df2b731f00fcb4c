"""
Recording mock transport for vendor client tests.

Responses are queued per (method, path) and served in FIFO order; every request
the client sends is kept for assertions. A request nothing was queued for fails
the test.
"""

import json
from collections import defaultdict, deque
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple
from urllib.parse import parse_qsl

import httpx  # type: ignore


class RecordingTransport(httpx.MockTransport):
    """``httpx.MockTransport`` that serves queued responses and records requests."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: Dict[Tuple[str, str], Deque[Callable[[httpx.Request], httpx.Response]]] = defaultdict(deque)
        super().__init__(self._handle)

    def add(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
        content: Optional[bytes] = None,
    ) -> "RecordingTransport":
        """Queue a response for ``method path`` (path without query string)."""
        def respond(request: httpx.Request) -> httpx.Response:
            if json is not None:
                return httpx.Response(status_code, json=json, headers=headers)
            return httpx.Response(status_code, content=content or b"", headers=headers)

        self._responses[(method.upper(), path)].append(respond)
        return self

    def add_error(self, method: str, path: str, error: Callable[[httpx.Request], Exception]) -> "RecordingTransport":
        """Queue a transport failure, e.g. ``lambda r: httpx.ConnectError("refused", request=r)``."""
        def fail(request: httpx.Request) -> httpx.Response:
            raise error(request)

        self._responses[(method.upper(), path)].append(fail)
        return self

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._responses.get((request.method, request.url.path))
        if not queue:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return queue.popleft()(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def pending(self) -> int:
        """Number of queued responses nobody asked for."""
        return sum(len(q) for q in self._responses.values())


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content.decode("utf-8"))


def request_form(request: httpx.Request) -> Dict[str, str]:
    return dict(parse_qsl(request.content.decode("utf-8"), keep_blank_values=True))


def request_query(request: httpx.Request) -> List[Tuple[str, str]]:
    return list(request.url.params.multi_items())


def link_header(next_url: str) -> Dict[str, str]:
    return {"Link": f'<{next_url}>; rel="next"'}
