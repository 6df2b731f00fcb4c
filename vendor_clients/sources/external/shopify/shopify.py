"""
Shopify Admin API DataSource

Shopify wraps every payload in a resource key (``{"customer": {...}}``,
``{"orders": [...]}``); the methods here unwrap it. ``list_all_*`` methods
follow the ``Link`` header, which carries a ``page_info`` cursor.
"""

from typing import Any, Dict, List, Optional, Sequence

from vendor_clients.sources.client.http.http_request import JSON_CONTENT_TYPE
from vendor_clients.sources.client.pagination import PaginationStrategy
from vendor_clients.sources.client.shopify.shopify import ShopifyClient, ShopifyRESTClient
from vendor_clients.sources.external.shopify.models import (
    Count,
    Customer,
    CustomerEnvelope,
    CustomersEnvelope,
    Order,
    OrderEnvelope,
    OrdersEnvelope,
)
from vendor_clients.utils.query import safe_format_url


class ShopifyDataSource:
    """
    Shopify Admin API Data Source.

    Args:
        client: ShopifyClient builder or a ShopifyRESTClient
    """

    def __init__(self, client: ShopifyClient | ShopifyRESTClient) -> None:
        self.client: ShopifyRESTClient = client.get_client()

    def get_client(self) -> ShopifyRESTClient:
        return self.client

    # ========================================================================
    # CUSTOMERS
    # ========================================================================

    async def list_customers(
        self,
        ids: Optional[Sequence[int]] = None,
        since_id: int = 0,
        created_at_min: Optional[str] = None,
        created_at_max: Optional[str] = None,
        updated_at_min: Optional[str] = None,
        updated_at_max: Optional[str] = None,
        limit: int = 0,
        fields: Optional[Sequence[str]] = None,
    ) -> List[Customer]:
        """Retrieve one page of customers.

        API Endpoint: GET /customers.json
        """
        query = {
            "ids": ids,
            "since_id": since_id,
            "created_at_min": created_at_min,
            "created_at_max": created_at_max,
            "updated_at_min": updated_at_min,
            "updated_at_max": updated_at_max,
            "limit": limit,
            "fields": fields,
        }
        envelope = await self.client.request("GET", "/customers.json", query=query, model=CustomersEnvelope)
        return envelope.customers

    async def list_all_customers(
        self,
        created_at_min: Optional[str] = None,
        updated_at_min: Optional[str] = None,
        fields: Optional[Sequence[str]] = None,
    ) -> List[Customer]:
        """Retrieve every customer.

        API Endpoint: GET /customers.json (all pages)
        """
        query = {
            "created_at_min": created_at_min,
            "updated_at_min": updated_at_min,
            "limit": 250,
            "fields": fields,
        }
        return await self.client.list_all(
            "/customers.json",
            Customer,
            strategy=PaginationStrategy.LINK_HEADER,
            query=query,
            items_key="customers",
        )

    async def get_customer(self, customer_id: int, fields: Optional[Sequence[str]] = None) -> Customer:
        """Retrieve a single customer.

        API Endpoint: GET /customers/{customer_id}.json
        """
        path = safe_format_url("/customers/{customer_id}.json", {"customer_id": customer_id})
        envelope = await self.client.request("GET", path, query={"fields": fields}, model=CustomerEnvelope)
        return envelope.customer

    async def create_customer(self, customer: Dict[str, Any]) -> Customer:
        """Create a customer.

        API Endpoint: POST /customers.json

        Args:
            customer: Customer fields, e.g. ``{"first_name": ..., "email": ...}``
        """
        envelope = await self.client.request(
            "POST",
            "/customers.json",
            body={"customer": customer},
            content_type=JSON_CONTENT_TYPE,
            model=CustomerEnvelope,
        )
        return envelope.customer

    async def update_customer(self, customer_id: int, customer: Dict[str, Any]) -> Customer:
        """Update a customer.

        API Endpoint: PUT /customers/{customer_id}.json
        """
        path = safe_format_url("/customers/{customer_id}.json", {"customer_id": customer_id})
        envelope = await self.client.request(
            "PUT",
            path,
            body={"customer": {**customer, "id": customer_id}},
            content_type=JSON_CONTENT_TYPE,
            model=CustomerEnvelope,
        )
        return envelope.customer

    async def delete_customer(self, customer_id: int) -> None:
        """Delete a customer. Customers with orders cannot be deleted.

        API Endpoint: DELETE /customers/{customer_id}.json
        """
        path = safe_format_url("/customers/{customer_id}.json", {"customer_id": customer_id})
        await self.client.request("DELETE", path)

    # ========================================================================
    # ORDERS
    # ========================================================================

    async def list_orders(
        self,
        status: Optional[str] = None,
        financial_status: Optional[str] = None,
        fulfillment_status: Optional[str] = None,
        ids: Optional[Sequence[int]] = None,
        since_id: int = 0,
        created_at_min: Optional[str] = None,
        created_at_max: Optional[str] = None,
        updated_at_min: Optional[str] = None,
        limit: int = 0,
        fields: Optional[Sequence[str]] = None,
    ) -> List[Order]:
        """Retrieve one page of orders. Only open orders unless ``status`` says otherwise.

        API Endpoint: GET /orders.json
        """
        query = {
            "ids": ids,
            "status": status,
            "financial_status": financial_status,
            "fulfillment_status": fulfillment_status,
            "since_id": since_id,
            "created_at_min": created_at_min,
            "created_at_max": created_at_max,
            "updated_at_min": updated_at_min,
            "limit": limit,
            "fields": fields,
        }
        envelope = await self.client.request("GET", "/orders.json", query=query, model=OrdersEnvelope)
        return envelope.orders

    async def list_all_orders(
        self,
        status: Optional[str] = None,
        financial_status: Optional[str] = None,
        fulfillment_status: Optional[str] = None,
        created_at_min: Optional[str] = None,
        updated_at_min: Optional[str] = None,
        fields: Optional[Sequence[str]] = None,
    ) -> List[Order]:
        """Retrieve every order.

        API Endpoint: GET /orders.json (all pages)
        """
        query = {
            "status": status,
            "financial_status": financial_status,
            "fulfillment_status": fulfillment_status,
            "created_at_min": created_at_min,
            "updated_at_min": updated_at_min,
            "limit": 250,
            "fields": fields,
        }
        return await self.client.list_all(
            "/orders.json",
            Order,
            strategy=PaginationStrategy.LINK_HEADER,
            query=query,
            items_key="orders",
        )

    async def get_order(self, order_id: int, fields: Optional[Sequence[str]] = None) -> Order:
        """Retrieve a single order.

        API Endpoint: GET /orders/{order_id}.json
        """
        path = safe_format_url("/orders/{order_id}.json", {"order_id": order_id})
        envelope = await self.client.request("GET", path, query={"fields": fields}, model=OrderEnvelope)
        return envelope.order

    async def count_orders(
        self,
        status: Optional[str] = None,
        financial_status: Optional[str] = None,
        fulfillment_status: Optional[str] = None,
        created_at_min: Optional[str] = None,
        created_at_max: Optional[str] = None,
    ) -> int:
        """Count orders matching the filters.

        API Endpoint: GET /orders/count.json
        """
        query = {
            "status": status,
            "financial_status": financial_status,
            "fulfillment_status": fulfillment_status,
            "created_at_min": created_at_min,
            "created_at_max": created_at_max,
        }
        result = await self.client.request("GET", "/orders/count.json", query=query, model=Count)
        return result.count
