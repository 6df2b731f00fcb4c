import json
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field  # type: ignore

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class HTTPRequest(BaseModel):
    """HTTP request
    Args:
        url: The URL of the request, absolute or relative to the client's base URL
        method: The HTTP method to use
        headers: The headers to send with the request
        body: The body of the request
        path_params: The path parameters to use
        query_params: The query parameters to use
    """
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(alias="uri")
    method: str = Field(default="GET")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Union[Dict[str, Any], List[Any], bytes, None] = None
    path_params: Dict[str, str] = Field(default_factory=dict, alias="path")
    query_params: Dict[str, str] = Field(default_factory=dict, alias="query")

    @property
    def content_type(self) -> Optional[str]:
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value
        return None

    @property
    def is_form(self) -> bool:
        return FORM_CONTENT_TYPE in (self.content_type or "").lower()

    def to_json(self) -> str:
        """
        Convert request to a JSON string.
        Bytes bodies are decoded as UTF-8.
        """
        data = self.model_dump()

        if isinstance(self.body, bytes):
            data["body"] = self.body.decode("utf-8", errors="replace")

        return json.dumps(data, indent=2)
