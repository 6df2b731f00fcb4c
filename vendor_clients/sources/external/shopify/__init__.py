"""Shopify data source module."""

from vendor_clients.sources.external.shopify.shopify import ShopifyDataSource

__all__ = ["ShopifyDataSource"]
