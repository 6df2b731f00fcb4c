from vendor_clients.sources.client.shopify.shopify import ShopifyClient, ShopifyConfig, ShopifyRESTClient

__all__ = ["ShopifyClient", "ShopifyConfig", "ShopifyRESTClient"]
