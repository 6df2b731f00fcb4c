from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field  # type: ignore
from pydantic.alias_generators import to_camel  # type: ignore

from vendor_clients.models.base import ApiModel


class DocuSignModel(ApiModel):
    """DocuSign uses camelCase on the wire; fields here are snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Signer(DocuSignModel):
    email: str
    name: str
    recipient_id: str
    routing_order: Optional[str] = None
    client_user_id: Optional[str] = None
    status: Optional[str] = None


class Recipients(DocuSignModel):
    signers: List[Signer] = Field(default_factory=list)
    recipient_count: Optional[str] = None


class Document(DocuSignModel):
    document_id: str
    name: Optional[str] = None
    file_extension: Optional[str] = None
    document_base64: Optional[str] = None
    order: Optional[str] = None


class EnvelopeDocument(DocuSignModel):
    document_id: str
    name: Optional[str] = None
    type: Optional[str] = None
    uri: Optional[str] = None
    order: Optional[str] = None
    pages: Optional[str] = None


class EnvelopeDocumentsResult(DocuSignModel):
    envelope_id: Optional[str] = None
    envelope_documents: List[EnvelopeDocument] = Field(default_factory=list)


class EnvelopeDefinition(DocuSignModel):
    email_subject: Optional[str] = None
    email_blurb: Optional[str] = None
    status: Optional[str] = None
    documents: Optional[List[Document]] = None
    recipients: Optional[Recipients] = None
    template_id: Optional[str] = None
    template_roles: Optional[List[Dict[str, Any]]] = None


class EnvelopeSummary(DocuSignModel):
    envelope_id: Optional[str] = None
    status: Optional[str] = None
    status_date_time: Optional[str] = None
    uri: Optional[str] = None


class EnvelopeUpdateSummary(DocuSignModel):
    envelope_id: Optional[str] = None
    error_details: Optional[Dict[str, Any]] = None


class Envelope(DocuSignModel):
    envelope_id: str
    status: Optional[str] = None
    email_subject: Optional[str] = None
    sender: Optional[Dict[str, Any]] = None
    recipients: Optional[Recipients] = None
    created_date_time: Optional[str] = None
    sent_date_time: Optional[str] = None
    completed_date_time: Optional[str] = None
    status_changed_date_time: Optional[str] = None


class EnvelopesInformation(DocuSignModel):
    envelopes: List[Envelope] = Field(default_factory=list)
    result_set_size: Optional[str] = None
    total_set_size: Optional[str] = None
    start_position: Optional[str] = None
    end_position: Optional[str] = None
    next_uri: Optional[str] = None


class User(DocuSignModel):
    user_id: str
    user_name: Optional[str] = None
    email: Optional[str] = None
    user_status: Optional[str] = None
    user_type: Optional[str] = None
    permission_profile_name: Optional[str] = None
    created_date_time: Optional[str] = None


class UserInformationList(DocuSignModel):
    users: List[User] = Field(default_factory=list)
    result_set_size: Optional[str] = None
    total_set_size: Optional[str] = None
    start_position: Optional[str] = None
    end_position: Optional[str] = None
    next_uri: Optional[str] = None


class EnvelopeTemplate(DocuSignModel):
    template_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    shared: Optional[str] = None
    owner: Optional[Dict[str, Any]] = None
    documents: Optional[List[Document]] = None
    recipients: Optional[Recipients] = None
    created: Optional[str] = None
    last_modified: Optional[str] = None


class EnvelopeTemplateResults(DocuSignModel):
    envelope_templates: List[EnvelopeTemplate] = Field(default_factory=list)
    result_set_size: Optional[str] = None
    total_set_size: Optional[str] = None
    start_position: Optional[str] = None
    end_position: Optional[str] = None
