from vendor_clients.models.base import ApiModel, CursorPage, IdentifiedModel

__all__ = ["ApiModel", "CursorPage", "IdentifiedModel"]
