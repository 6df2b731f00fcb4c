import json
from typing import Any, Dict, Optional

import httpx  # type: ignore

from vendor_clients.config.constants.http_status_code import HttpStatusCode
from vendor_clients.sources.client.errors import DeserializationError, HTTPStatusError


class HTTPResponse:
    """Thin wrapper around ``httpx.Response``.

    Args:
        response: The httpx response to wrap
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status_code

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.response.headers)

    @property
    def url(self) -> str:
        try:
            return str(self.response.request.url)
        except RuntimeError:
            return ""

    @property
    def is_success(self) -> bool:
        return HttpStatusCode.OK.value <= self.status < HttpStatusCode.MULTIPLE_CHOICES.value

    @property
    def is_json(self) -> bool:
        content_type = self.response.headers.get("Content-Type", "").lower()
        return "json" in content_type

    @property
    def next_link(self) -> Optional[str]:
        """The ``rel="next"`` target of the Link header, if any."""
        next_rel = self.response.links.get("next")
        if not next_rel:
            return None
        return next_rel.get("url")

    def bytes(self) -> bytes:
        return self.response.content

    def text(self) -> str:
        return self.response.text

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            DeserializationError: If the body is not valid JSON
        """
        try:
            return self.response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DeserializationError(
                f"Response from {self.url} is not valid JSON", original_error=e
            ) from e

    def raise_for_status(self) -> None:
        """Raise ``HTTPStatusError`` unless the status is 2xx."""
        if not self.is_success:
            raise HTTPStatusError(
                status_code=self.status,
                body=self.text(),
                headers=self.headers,
                url=self.url,
            )
