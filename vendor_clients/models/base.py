from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field  # type: ignore

from vendor_clients.sources.client.pagination import Page

ItemT = TypeVar("ItemT")


class ApiModel(BaseModel):
    """Base for vendor response models. Unknown fields are kept, not dropped."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class IdentifiedModel(ApiModel):
    """A record with a string ``id`` usable as a pagination cursor."""

    id: Optional[str] = None

    def cursor_key(self) -> Optional[str]:
        return self.id or None


class CursorPage(ApiModel, Generic[ItemT]):
    """List envelope of cursor-paginated APIs: ``{"data": [...], "has_more": bool}``."""

    data: List[ItemT] = Field(default_factory=list)
    has_more: bool = False

    def to_page(self) -> Page[ItemT]:
        return Page(items=list(self.data), has_more=self.has_more)
