"""Helpers for assembling request URLs and query strings."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping, Union
from urllib.parse import quote

from vendor_clients.sources.client.errors import MissingParameterError

# Everything printable except space " # < > ? ` { } stays literal in a path segment.
PATH_SAFE_CHARS = "!$%&'()*+,-./:;=@[\\]^_|~"


def encode_path(value: Union[str, int]) -> str:
    """Percent-encode a value for use as a path segment.

    Control characters, non-ASCII characters and the characters that would end
    or confuse a path (space, quote, ``#``, ``<``, ``>``, ``?``, backtick and
    braces) are encoded. Other characters, ``/`` included, are left alone.
    """
    return quote(str(value), safe=PATH_SAFE_CHARS)


def safe_format_url(template: str, params: Mapping[str, Any]) -> str:
    """Substitute encoded path parameters into a URL template.

    Raises:
        MissingParameterError: If a placeholder has no value or an empty one
    """
    encoded: Dict[str, str] = {}
    for name, value in params.items():
        if value is None or value == "":
            raise MissingParameterError(name)
        encoded[name] = encode_path(value)
    try:
        return template.format(**encoded)
    except KeyError as e:
        raise MissingParameterError(str(e.args[0])) from e


def to_bool_str(value: Union[bool, str, int, float]) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower()
    return str(bool(value)).lower()


def serialize_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return to_bool_str(value)
    if isinstance(value, Enum):
        return serialize_value(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set)):
        return ",".join(serialize_value(v) for v in value)
    return str(value)


def is_empty(value: Any) -> bool:
    """True for values an optional query parameter should be left out for."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, set, dict)):
        return len(value) == 0
    return False


def build_query(params: Mapping[str, Any]) -> Dict[str, str]:
    """Build a query dict from optional parameters.

    Parameters that are ``None``, empty, zero or ``False`` are skipped; the
    rest are serialized to strings in the order given.
    """
    return {k: serialize_value(v) for k, v in params.items() if not is_empty(v)}


def append_query_param(url: str, name: str, value: str) -> str:
    """Append one ``name=value`` pair to a URL that may already carry a query string."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{quote(name, safe='[]')}={quote(value, safe='')}"


def flatten_form(data: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten a nested body into bracketed form fields.

    ``{"metadata": {"plan": "pro"}, "tags": ["a", "b"]}`` becomes
    ``{"metadata[plan]": "pro", "tags[0]": "a", "tags[1]": "b"}``. ``None``
    values are dropped.
    """
    fields: Dict[str, str] = {}
    for key, value in data.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if value is None:
            continue
        if isinstance(value, Mapping):
            fields.update(flatten_form(value, name))
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                if isinstance(item, Mapping):
                    fields.update(flatten_form(item, f"{name}[{index}]"))
                else:
                    fields[f"{name}[{index}]"] = serialize_value(item)
        else:
            fields[name] = serialize_value(value)
    return fields
