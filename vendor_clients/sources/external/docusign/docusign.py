"""
DocuSign eSignature API DataSource

All endpoints are scoped to an account. Each method takes an optional
``account_id`` and falls back to the account configured on the client.
List endpoints page with ``count``/``start_position``.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Sequence, Union

from vendor_clients.sources.client.docusign.docusign import DocuSignClient, DocuSignRESTClient
from vendor_clients.sources.client.errors import MissingParameterError
from vendor_clients.sources.client.http.http_request import JSON_CONTENT_TYPE
from vendor_clients.sources.external.docusign.models import (
    Envelope,
    EnvelopeDefinition,
    EnvelopeDocumentsResult,
    EnvelopesInformation,
    EnvelopeSummary,
    EnvelopeTemplate,
    EnvelopeTemplateResults,
    EnvelopeUpdateSummary,
    User,
    UserInformationList,
)
from vendor_clients.utils.query import safe_format_url

API_VERSION = "v2.1"


class DocuSignDataSource:
    """Comprehensive data source for DocuSign eSignature.

    Attributes:
        client: DocuSignRESTClient used for API communication
    """

    def __init__(self, client: DocuSignClient | DocuSignRESTClient) -> None:
        self.client: DocuSignRESTClient = client.get_client()

    def get_client(self) -> DocuSignRESTClient:
        return self.client

    def _account_path(self, template: str, account_id: Optional[str], **params: Any) -> str:
        account = account_id or self.client.get_account_id()
        if not account:
            raise MissingParameterError("account_id")
        return safe_format_url(f"/{API_VERSION}/accounts/{{account_id}}{template}", {"account_id": account, **params})

    # ========================================================================
    # ENVELOPE OPERATIONS
    # ========================================================================

    async def list_envelope_status_changes(
        self,
        from_date: Optional[Union[str, datetime]] = None,
        to_date: Optional[Union[str, datetime]] = None,
        status: Optional[str] = None,
        envelope_ids: Optional[Sequence[str]] = None,
        folder_ids: Optional[Sequence[str]] = None,
        search_text: Optional[str] = None,
        count: int = 0,
        start_position: int = 0,
        order: Optional[str] = None,
        order_by: Optional[str] = None,
        account_id: Optional[str] = None,
    ) -> EnvelopesInformation:
        """Get envelope status changes. One of ``from_date``, ``envelope_ids`` or
        ``folder_ids`` is required by DocuSign.

        API Endpoint: GET /v2.1/accounts/{accountId}/envelopes

        Args:
            from_date: Only envelopes changed on or after this date
            to_date: Only envelopes changed before this date
            status: Comma separated statuses, e.g. ``sent,completed``
            envelope_ids: Specific envelope ids
            folder_ids: Folder ids to search
            search_text: Free text filter
            count: Page size
            start_position: Zero-based position of the first result
            order: ``asc`` or ``desc``
            order_by: Sort property, e.g. ``last_modified``
            account_id: Account to query instead of the configured one

        Returns:
            EnvelopesInformation: one page of envelopes
        """
        path = self._account_path("/envelopes", account_id)
        query = {
            "from_date": from_date,
            "to_date": to_date,
            "status": status,
            "envelope_ids": envelope_ids,
            "folder_ids": folder_ids,
            "search_text": search_text,
            "count": count,
            "start_position": start_position,
            "order": order,
            "order_by": order_by,
        }
        return await self.client.request("GET", path, query=query, model=EnvelopesInformation)

    async def get_envelope(
        self,
        envelope_id: str,
        include: Optional[Sequence[str]] = None,
        account_id: Optional[str] = None,
    ) -> Envelope:
        """Get the status of a single envelope.

        API Endpoint: GET /v2.1/accounts/{accountId}/envelopes/{envelopeId}
        """
        path = self._account_path("/envelopes/{envelope_id}", account_id, envelope_id=envelope_id)
        return await self.client.request("GET", path, query={"include": include}, model=Envelope)

    async def create_envelope(
        self,
        envelope: Union[EnvelopeDefinition, Dict[str, Any]],
        merge_roles_on_draft: bool = False,
        account_id: Optional[str] = None,
    ) -> EnvelopeSummary:
        """Create an envelope, sent immediately when its status is ``sent``.

        API Endpoint: POST /v2.1/accounts/{accountId}/envelopes
        """
        path = self._account_path("/envelopes", account_id)
        body = envelope.to_body() if isinstance(envelope, EnvelopeDefinition) else envelope
        return await self.client.request(
            "POST",
            path,
            query={"merge_roles_on_draft": merge_roles_on_draft},
            body=body,
            content_type=JSON_CONTENT_TYPE,
            model=EnvelopeSummary,
        )

    async def update_envelope(
        self,
        envelope_id: str,
        changes: Dict[str, Any],
        resend_envelope: bool = False,
        account_id: Optional[str] = None,
    ) -> EnvelopeUpdateSummary:
        """Update an envelope, e.g. ``{"status": "voided", "voidedReason": ...}``.

        API Endpoint: PUT /v2.1/accounts/{accountId}/envelopes/{envelopeId}
        """
        path = self._account_path("/envelopes/{envelope_id}", account_id, envelope_id=envelope_id)
        return await self.client.request(
            "PUT",
            path,
            query={"resend_envelope": resend_envelope},
            body=changes,
            content_type=JSON_CONTENT_TYPE,
            model=EnvelopeUpdateSummary,
        )

    async def list_envelope_documents(
        self,
        envelope_id: str,
        account_id: Optional[str] = None,
    ) -> EnvelopeDocumentsResult:
        """List the documents of an envelope.

        API Endpoint: GET /v2.1/accounts/{accountId}/envelopes/{envelopeId}/documents
        """
        path = self._account_path("/envelopes/{envelope_id}/documents", account_id, envelope_id=envelope_id)
        return await self.client.request("GET", path, model=EnvelopeDocumentsResult)

    # ========================================================================
    # USER OPERATIONS
    # ========================================================================

    async def list_users(
        self,
        email: Optional[str] = None,
        status: Optional[str] = None,
        count: int = 0,
        start_position: int = 0,
        account_id: Optional[str] = None,
    ) -> UserInformationList:
        """Retrieve one page of account users.

        API Endpoint: GET /v2.1/accounts/{accountId}/users
        """
        path = self._account_path("/users", account_id)
        query = {"email": email, "status": status, "count": count, "start_position": start_position}
        return await self.client.request("GET", path, query=query, model=UserInformationList)

    async def get_user(self, user_id: str, account_id: Optional[str] = None) -> User:
        """Get a user.

        API Endpoint: GET /v2.1/accounts/{accountId}/users/{userId}
        """
        path = self._account_path("/users/{user_id}", account_id, user_id=user_id)
        return await self.client.request("GET", path, model=User)

    # ========================================================================
    # TEMPLATE OPERATIONS
    # ========================================================================

    async def list_templates(
        self,
        search_text: Optional[str] = None,
        folder_ids: Optional[Sequence[str]] = None,
        count: int = 0,
        start_position: int = 0,
        account_id: Optional[str] = None,
    ) -> EnvelopeTemplateResults:
        """Retrieve one page of templates.

        API Endpoint: GET /v2.1/accounts/{accountId}/templates
        """
        path = self._account_path("/templates", account_id)
        query = {
            "search_text": search_text,
            "folder_ids": folder_ids,
            "count": count,
            "start_position": start_position,
        }
        return await self.client.request("GET", path, query=query, model=EnvelopeTemplateResults)

    async def get_template(self, template_id: str, account_id: Optional[str] = None) -> EnvelopeTemplate:
        """Get a template definition.

        API Endpoint: GET /v2.1/accounts/{accountId}/templates/{templateId}
        """
        path = self._account_path("/templates/{template_id}", account_id, template_id=template_id)
        return await self.client.request("GET", path, model=EnvelopeTemplate)

    async def delete_template(self, template_id: str, account_id: Optional[str] = None) -> None:
        """Delete a template.

        API Endpoint: DELETE /v2.1/accounts/{accountId}/templates/{templateId}
        """
        path = self._account_path("/templates/{template_id}", account_id, template_id=template_id)
        await self.client.request("DELETE", path)
