from vendor_clients.sources.client.docusign.docusign import (
    DocuSignClient,
    DocuSignConfig,
    DocuSignRESTClient,
)

__all__ = ["DocuSignClient", "DocuSignConfig", "DocuSignRESTClient"]
