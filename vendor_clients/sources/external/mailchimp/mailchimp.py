"""
Mailchimp Marketing API DataSource

List endpoints page with ``count``/``offset`` and report ``total_items``;
callers page explicitly. Members are addressed by the MD5 hash of their
lower-cased email address, see ``subscriber_hash``.
"""

import hashlib
from typing import Any, Dict, Optional, Sequence

from vendor_clients.sources.client.http.http_request import JSON_CONTENT_TYPE
from vendor_clients.sources.client.mailchimp.mailchimp import MailchimpClient, MailchimpRESTClient
from vendor_clients.sources.external.mailchimp.models import Audience, Audiences, Member, Members, Ping
from vendor_clients.utils.query import safe_format_url


def subscriber_hash(email: str) -> str:
    """MD5 hex digest of the lower-cased email, Mailchimp's member id."""
    return hashlib.md5(email.lower().encode("utf-8"), usedforsecurity=False).hexdigest()


def _member_id(subscriber: str) -> str:
    return subscriber_hash(subscriber) if "@" in subscriber else subscriber


class MailchimpDataSource:
    """
    Mailchimp Marketing API Data Source.

    Args:
        client: MailchimpClient builder or a MailchimpRESTClient
    """

    def __init__(self, client: MailchimpClient | MailchimpRESTClient) -> None:
        self.client: MailchimpRESTClient = client.get_client()

    def get_client(self) -> MailchimpRESTClient:
        return self.client

    async def ping(self) -> Ping:
        """Health check.

        API Endpoint: GET /ping
        """
        return await self.client.request("GET", "/ping", model=Ping)

    # ========================================================================
    # AUDIENCES (LISTS)
    # ========================================================================

    async def list_audiences(
        self,
        fields: Optional[Sequence[str]] = None,
        exclude_fields: Optional[Sequence[str]] = None,
        count: int = 0,
        offset: int = 0,
        email: Optional[str] = None,
        sort_field: Optional[str] = None,
        sort_dir: Optional[str] = None,
    ) -> Audiences:
        """Get one page of audiences.

        API Endpoint: GET /lists

        Args:
            fields: Fields to return, dot notation for sub-objects
            exclude_fields: Fields to exclude
            count: Page size (server default 10, max 1000)
            offset: Number of records to skip
            email: Only audiences this address is subscribed to
            sort_field: ``date_created``
            sort_dir: ``ASC`` or ``DESC``
        """
        query = {
            "fields": fields,
            "exclude_fields": exclude_fields,
            "count": count,
            "offset": offset,
            "email": email,
            "sort_field": sort_field,
            "sort_dir": sort_dir,
        }
        return await self.client.request("GET", "/lists", query=query, model=Audiences)

    async def get_audience(self, list_id: str, fields: Optional[Sequence[str]] = None) -> Audience:
        """Get an audience.

        API Endpoint: GET /lists/{list_id}
        """
        path = safe_format_url("/lists/{list_id}", {"list_id": list_id})
        return await self.client.request("GET", path, query={"fields": fields}, model=Audience)

    async def create_audience(
        self,
        name: str,
        contact: Dict[str, Any],
        permission_reminder: str,
        campaign_defaults: Dict[str, Any],
        email_type_option: bool = False,
        **extra: Any,
    ) -> Audience:
        """Create an audience.

        API Endpoint: POST /lists
        """
        body = {
            "name": name,
            "contact": contact,
            "permission_reminder": permission_reminder,
            "campaign_defaults": campaign_defaults,
            "email_type_option": email_type_option,
            **extra,
        }
        return await self.client.request("POST", "/lists", body=body, content_type=JSON_CONTENT_TYPE, model=Audience)

    async def update_audience(self, list_id: str, **fields: Any) -> Audience:
        """Update audience settings.

        API Endpoint: PATCH /lists/{list_id}
        """
        path = safe_format_url("/lists/{list_id}", {"list_id": list_id})
        return await self.client.request(
            "PATCH", path, body=dict(fields), content_type=JSON_CONTENT_TYPE, model=Audience
        )

    async def delete_audience(self, list_id: str) -> None:
        """Delete an audience with its members and reports.

        API Endpoint: DELETE /lists/{list_id}
        """
        path = safe_format_url("/lists/{list_id}", {"list_id": list_id})
        await self.client.request("DELETE", path)

    # ========================================================================
    # MEMBERS
    # ========================================================================

    async def list_members(
        self,
        list_id: str,
        status: Optional[str] = None,
        fields: Optional[Sequence[str]] = None,
        count: int = 0,
        offset: int = 0,
        since_last_changed: Optional[str] = None,
        vip_only: bool = False,
    ) -> Members:
        """Get one page of audience members.

        API Endpoint: GET /lists/{list_id}/members
        """
        path = safe_format_url("/lists/{list_id}/members", {"list_id": list_id})
        query = {
            "fields": fields,
            "count": count,
            "offset": offset,
            "status": status,
            "since_last_changed": since_last_changed,
            "vip_only": vip_only,
        }
        return await self.client.request("GET", path, query=query, model=Members)

    async def get_member(self, list_id: str, subscriber: str) -> Member:
        """Get a member by email address or subscriber hash.

        API Endpoint: GET /lists/{list_id}/members/{subscriber_hash}
        """
        path = safe_format_url(
            "/lists/{list_id}/members/{subscriber_hash}",
            {"list_id": list_id, "subscriber_hash": _member_id(subscriber)},
        )
        return await self.client.request("GET", path, model=Member)

    async def add_member(
        self,
        list_id: str,
        email_address: str,
        status: str = "subscribed",
        merge_fields: Optional[Dict[str, Any]] = None,
        tags: Optional[Sequence[str]] = None,
        **extra: Any,
    ) -> Member:
        """Add a member to an audience.

        API Endpoint: POST /lists/{list_id}/members
        """
        path = safe_format_url("/lists/{list_id}/members", {"list_id": list_id})
        body: Dict[str, Any] = {"email_address": email_address, "status": status, **extra}
        if merge_fields:
            body["merge_fields"] = merge_fields
        if tags:
            body["tags"] = list(tags)
        return await self.client.request("POST", path, body=body, content_type=JSON_CONTENT_TYPE, model=Member)

    async def update_member(self, list_id: str, subscriber: str, **fields: Any) -> Member:
        """Update a member.

        API Endpoint: PATCH /lists/{list_id}/members/{subscriber_hash}
        """
        path = safe_format_url(
            "/lists/{list_id}/members/{subscriber_hash}",
            {"list_id": list_id, "subscriber_hash": _member_id(subscriber)},
        )
        return await self.client.request(
            "PATCH", path, body=dict(fields), content_type=JSON_CONTENT_TYPE, model=Member
        )

    async def archive_member(self, list_id: str, subscriber: str) -> None:
        """Archive a member. Archived members can be re-added later.

        API Endpoint: DELETE /lists/{list_id}/members/{subscriber_hash}
        """
        path = safe_format_url(
            "/lists/{list_id}/members/{subscriber_hash}",
            {"list_id": list_id, "subscriber_hash": _member_id(subscriber)},
        )
        await self.client.request("DELETE", path)
