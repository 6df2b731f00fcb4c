"""DocuSign data source module."""

from vendor_clients.sources.external.docusign.docusign import DocuSignDataSource

__all__ = ["DocuSignDataSource"]
