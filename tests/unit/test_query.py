"""
Tests for URL and query-string helpers.
"""

from datetime import date, datetime, timezone
from enum import Enum

import pytest  # type: ignore

from vendor_clients.sources.client.errors import MissingParameterError
from vendor_clients.utils.query import (
    append_query_param,
    build_query,
    encode_path,
    flatten_form,
    safe_format_url,
    serialize_value,
)


class State(str, Enum):
    OPEN = "open"


class TestEncodePath:
    """Test path segment percent-encoding."""

    @pytest.mark.parametrize(
        "raw,encoded",
        [
            ("cus_123", "cus_123"),
            ("a b", "a%20b"),
            ('say "hi"', "say%20%22hi%22"),
            ("issue#1", "issue%231"),
            ("<tag>", "%3Ctag%3E"),
            ("what?", "what%3F"),
            ("`cmd`", "%60cmd%60"),
            ("{id}", "%7Bid%7D"),
            ("tab\there", "tab%09here"),
            ("café", "caf%C3%A9"),
        ],
    )
    def test_encodes_reserved_characters(self, raw: str, encoded: str):
        assert encode_path(raw) == encoded

    def test_leaves_other_printable_characters(self):
        raw = "a/b:c@d!e$f&g'h(i)j*k+l,m;n=o|p~q[r]s^t%u"
        assert encode_path(raw) == raw

    def test_accepts_integers(self):
        assert encode_path(42) == "42"


class TestSafeFormatUrl:
    """Test path template substitution."""

    def test_substitutes_encoded_values(self):
        url = safe_format_url("/repos/{owner}/{repo}", {"owner": "octo cat", "repo": "hello?"})
        assert url == "/repos/octo%20cat/hello%3F"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_value_raises(self, value):
        with pytest.raises(MissingParameterError) as exc_info:
            safe_format_url("/v1/customers/{customer}", {"customer": value})
        assert exc_info.value.name == "customer"

    def test_missing_placeholder_value_raises(self):
        with pytest.raises(MissingParameterError) as exc_info:
            safe_format_url("/repos/{owner}/{repo}", {"owner": "octocat"})
        assert exc_info.value.name == "repo"

    def test_missing_parameter_is_a_value_error(self):
        with pytest.raises(ValueError):
            safe_format_url("/x/{id}", {"id": ""})


class TestBuildQuery:
    """Test optional query parameter assembly."""

    def test_skips_empty_values(self):
        query = build_query({
            "email": None,
            "ending_before": "",
            "limit": 0,
            "vip_only": False,
            "labels": [],
            "status": "open",
        })
        assert query == {"status": "open"}

    def test_keeps_declaration_order(self):
        query = build_query({"z": "1", "a": "2", "m": 3})
        assert list(query.items()) == [("z", "1"), ("a", "2"), ("m", "3")]

    def test_serializes_values(self):
        query = build_query({
            "limit": 10,
            "expand": True,
            "labels": ["bug", "ui"],
            "state": State.OPEN,
            "since": date(2024, 1, 31),
        })
        assert query == {
            "limit": "10",
            "expand": "true",
            "labels": "bug,ui",
            "state": "open",
            "since": "2024-01-31",
        }

    def test_serialize_datetime(self):
        value = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        assert serialize_value(value) == "2024-05-01T12:30:00+00:00"


class TestAppendQueryParam:
    """Test single parameter appends."""

    def test_starts_query_string(self):
        assert append_query_param("/v1/charges", "starting_after", "ch_1") == "/v1/charges?starting_after=ch_1"

    def test_extends_query_string(self):
        assert append_query_param("/v1/charges?limit=3", "starting_after", "ch_1") == (
            "/v1/charges?limit=3&starting_after=ch_1"
        )


class TestFlattenForm:
    """Test bracketed form encoding of nested bodies."""

    def test_nested_mapping_and_list(self):
        fields = flatten_form({
            "email": "jenny@example.com",
            "metadata": {"plan": "pro", "seats": 3},
            "preferred_locales": ["en", "fr"],
            "phone": None,
        })
        assert fields == {
            "email": "jenny@example.com",
            "metadata[plan]": "pro",
            "metadata[seats]": "3",
            "preferred_locales[0]": "en",
            "preferred_locales[1]": "fr",
        }

    def test_list_of_mappings(self):
        fields = flatten_form({"items": [{"price": "price_1", "quantity": 2}]})
        assert fields == {"items[0][price]": "price_1", "items[0][quantity]": "2"}

    def test_booleans_are_lowercase(self):
        assert flatten_form({"invoice_now": True}) == {"invoice_now": "true"}
