from typing import Any, Dict, List, Optional

from pydantic import Field  # type: ignore

from vendor_clients.models.base import ApiModel


class Contact(ApiModel):
    company: str
    address1: str
    address2: Optional[str] = None
    city: str
    state: str
    zip: str
    country: str
    phone: Optional[str] = None


class CampaignDefaults(ApiModel):
    from_name: str
    from_email: str
    subject: str = ""
    language: str = "en"


class AudienceStats(ApiModel):
    member_count: int = 0
    unsubscribe_count: int = 0
    cleaned_count: int = 0
    campaign_count: int = 0


class Audience(ApiModel):
    id: str
    web_id: Optional[int] = None
    name: str
    contact: Optional[Contact] = None
    permission_reminder: Optional[str] = None
    campaign_defaults: Optional[CampaignDefaults] = None
    email_type_option: bool = False
    date_created: Optional[str] = None
    stats: Optional[AudienceStats] = None


class Audiences(ApiModel):
    lists: List[Audience] = Field(default_factory=list)
    total_items: int = 0


class Member(ApiModel):
    id: str
    email_address: str
    unique_email_id: Optional[str] = None
    status: str
    full_name: Optional[str] = None
    merge_fields: Dict[str, Any] = Field(default_factory=dict)
    interests: Dict[str, bool] = Field(default_factory=dict)
    language: Optional[str] = None
    vip: bool = False
    list_id: Optional[str] = None
    timestamp_signup: Optional[str] = None
    last_changed: Optional[str] = None


class Members(ApiModel):
    members: List[Member] = Field(default_factory=list)
    list_id: Optional[str] = None
    total_items: int = 0


class Ping(ApiModel):
    health_status: str
