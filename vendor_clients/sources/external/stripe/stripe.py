"""
Stripe API DataSource

One async method per endpoint. ``list_*`` methods return a single page envelope;
``list_all_*`` methods follow the ``starting_after`` cursor until the server
reports no more results.
"""

from typing import Any, Dict, List, Optional

from vendor_clients.sources.client.http.http_request import FORM_CONTENT_TYPE
from vendor_clients.sources.client.pagination import PaginationStrategy
from vendor_clients.sources.client.stripe.stripe import StripeClient, StripeRESTClient
from vendor_clients.sources.external.stripe.models import (
    Charge,
    ChargeList,
    Customer,
    CustomerBalanceTransaction,
    CustomerBalanceTransactionList,
    CustomerList,
    DeletedObject,
    Invoice,
    InvoiceList,
    Subscription,
    SubscriptionList,
)
from vendor_clients.utils.query import safe_format_url


class StripeDataSource:
    """
    Stripe API Data Source.

    Args:
        client: StripeClient builder or a StripeRESTClient
    """

    def __init__(self, client: StripeClient | StripeRESTClient) -> None:
        self.client: StripeRESTClient = client.get_client()

    def get_client(self) -> StripeRESTClient:
        return self.client

    async def _list_all(self, path: str, item_model: Any, page_model: Any, query: Dict[str, Any]) -> List[Any]:
        return await self.client.list_all(
            path,
            item_model,
            strategy=PaginationStrategy.CURSOR,
            query=query,
            page_model=page_model,
        )

    # ========================================================================
    # CUSTOMERS
    # ========================================================================

    async def list_customers(
        self,
        email: Optional[str] = None,
        ending_before: Optional[str] = None,
        limit: int = 0,
        starting_after: Optional[str] = None,
        test_clock: Optional[str] = None,
    ) -> CustomerList:
        """List customers, newest first.

        API Endpoint: GET /v1/customers

        Args:
            email: Case-sensitive exact email filter
            ending_before: Cursor for the previous page
            limit: Page size between 1 and 100 (server default 10)
            starting_after: Cursor for the next page
            test_clock: Restrict to customers of a test clock

        Returns:
            CustomerList: one page of customers
        """
        query = {
            "email": email,
            "ending_before": ending_before,
            "limit": limit,
            "starting_after": starting_after,
            "test_clock": test_clock,
        }
        return await self.client.request("GET", "/v1/customers", query=query, model=CustomerList)

    async def list_all_customers(
        self,
        email: Optional[str] = None,
        test_clock: Optional[str] = None,
    ) -> List[Customer]:
        """List every customer by following the pagination cursor.

        API Endpoint: GET /v1/customers (all pages)
        """
        query = {"email": email, "test_clock": test_clock}
        return await self._list_all("/v1/customers", Customer, CustomerList, query)

    async def create_customer(
        self,
        email: Optional[str] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
        phone: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
        **extra: Any,
    ) -> Customer:
        """Create a customer.

        API Endpoint: POST /v1/customers

        Args:
            email: Customer email
            name: Full name or business name
            description: Free-form description
            phone: Phone number
            metadata: Key/value pairs, sent as ``metadata[key]`` form fields
            extra: Any other documented form parameter

        Returns:
            Customer: the created customer
        """
        body = {
            "email": email,
            "name": name,
            "description": description,
            "phone": phone,
            "metadata": metadata,
            **extra,
        }
        return await self.client.request(
            "POST", "/v1/customers", body=body, content_type=FORM_CONTENT_TYPE, model=Customer
        )

    async def get_customer(self, customer: str) -> Customer:
        """Retrieve a customer.

        API Endpoint: GET /v1/customers/{customer}
        """
        path = safe_format_url("/v1/customers/{customer}", {"customer": customer})
        return await self.client.request("GET", path, model=Customer)

    async def update_customer(self, customer: str, **fields: Any) -> Customer:
        """Update a customer; only the given fields change.

        API Endpoint: POST /v1/customers/{customer}
        """
        path = safe_format_url("/v1/customers/{customer}", {"customer": customer})
        return await self.client.request(
            "POST", path, body=dict(fields), content_type=FORM_CONTENT_TYPE, model=Customer
        )

    async def delete_customer(self, customer: str) -> DeletedObject:
        """Permanently delete a customer and cancel its subscriptions.

        API Endpoint: DELETE /v1/customers/{customer}
        """
        path = safe_format_url("/v1/customers/{customer}", {"customer": customer})
        return await self.client.request("DELETE", path, model=DeletedObject)

    # ========================================================================
    # CUSTOMER BALANCE TRANSACTIONS
    # ========================================================================

    async def list_customer_balance_transactions(
        self,
        customer: str,
        ending_before: Optional[str] = None,
        limit: int = 0,
        starting_after: Optional[str] = None,
    ) -> CustomerBalanceTransactionList:
        """List a customer's balance transactions.

        API Endpoint: GET /v1/customers/{customer}/balance_transactions
        """
        path = safe_format_url("/v1/customers/{customer}/balance_transactions", {"customer": customer})
        query = {"ending_before": ending_before, "limit": limit, "starting_after": starting_after}
        return await self.client.request("GET", path, query=query, model=CustomerBalanceTransactionList)

    async def list_all_customer_balance_transactions(self, customer: str) -> List[CustomerBalanceTransaction]:
        """List every balance transaction of a customer.

        API Endpoint: GET /v1/customers/{customer}/balance_transactions (all pages)
        """
        path = safe_format_url("/v1/customers/{customer}/balance_transactions", {"customer": customer})
        return await self._list_all(path, CustomerBalanceTransaction, CustomerBalanceTransactionList, {})

    # ========================================================================
    # CHARGES
    # ========================================================================

    async def list_charges(
        self,
        customer: Optional[str] = None,
        payment_intent: Optional[str] = None,
        transfer_group: Optional[str] = None,
        ending_before: Optional[str] = None,
        limit: int = 0,
        starting_after: Optional[str] = None,
    ) -> ChargeList:
        """List charges, newest first.

        API Endpoint: GET /v1/charges
        """
        query = {
            "customer": customer,
            "ending_before": ending_before,
            "limit": limit,
            "payment_intent": payment_intent,
            "starting_after": starting_after,
            "transfer_group": transfer_group,
        }
        return await self.client.request("GET", "/v1/charges", query=query, model=ChargeList)

    async def list_all_charges(
        self,
        customer: Optional[str] = None,
        payment_intent: Optional[str] = None,
        transfer_group: Optional[str] = None,
    ) -> List[Charge]:
        """List every charge.

        API Endpoint: GET /v1/charges (all pages)
        """
        query = {"customer": customer, "payment_intent": payment_intent, "transfer_group": transfer_group}
        return await self._list_all("/v1/charges", Charge, ChargeList, query)

    async def get_charge(self, charge: str) -> Charge:
        """Retrieve a charge.

        API Endpoint: GET /v1/charges/{charge}
        """
        path = safe_format_url("/v1/charges/{charge}", {"charge": charge})
        return await self.client.request("GET", path, model=Charge)

    # ========================================================================
    # INVOICES
    # ========================================================================

    async def list_invoices(
        self,
        customer: Optional[str] = None,
        status: Optional[str] = None,
        subscription: Optional[str] = None,
        collection_method: Optional[str] = None,
        ending_before: Optional[str] = None,
        limit: int = 0,
        starting_after: Optional[str] = None,
    ) -> InvoiceList:
        """List invoices, newest first.

        API Endpoint: GET /v1/invoices
        """
        query = {
            "collection_method": collection_method,
            "customer": customer,
            "ending_before": ending_before,
            "limit": limit,
            "starting_after": starting_after,
            "status": status,
            "subscription": subscription,
        }
        return await self.client.request("GET", "/v1/invoices", query=query, model=InvoiceList)

    async def list_all_invoices(
        self,
        customer: Optional[str] = None,
        status: Optional[str] = None,
        subscription: Optional[str] = None,
        collection_method: Optional[str] = None,
    ) -> List[Invoice]:
        """List every invoice.

        API Endpoint: GET /v1/invoices (all pages)
        """
        query = {
            "collection_method": collection_method,
            "customer": customer,
            "status": status,
            "subscription": subscription,
        }
        return await self._list_all("/v1/invoices", Invoice, InvoiceList, query)

    # ========================================================================
    # SUBSCRIPTIONS
    # ========================================================================

    async def list_subscriptions(
        self,
        customer: Optional[str] = None,
        price: Optional[str] = None,
        status: Optional[str] = None,
        ending_before: Optional[str] = None,
        limit: int = 0,
        starting_after: Optional[str] = None,
    ) -> SubscriptionList:
        """List subscriptions. Canceled ones are excluded unless ``status`` says otherwise.

        API Endpoint: GET /v1/subscriptions
        """
        query = {
            "customer": customer,
            "ending_before": ending_before,
            "limit": limit,
            "price": price,
            "starting_after": starting_after,
            "status": status,
        }
        return await self.client.request("GET", "/v1/subscriptions", query=query, model=SubscriptionList)

    async def list_all_subscriptions(
        self,
        customer: Optional[str] = None,
        price: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Subscription]:
        """List every subscription.

        API Endpoint: GET /v1/subscriptions (all pages)
        """
        query = {"customer": customer, "price": price, "status": status}
        return await self._list_all("/v1/subscriptions", Subscription, SubscriptionList, query)

    async def cancel_subscription(
        self,
        subscription_exposed_id: str,
        invoice_now: bool = False,
        prorate: bool = False,
    ) -> Subscription:
        """Cancel a subscription immediately.

        API Endpoint: DELETE /v1/subscriptions/{subscription_exposed_id}
        """
        path = safe_format_url(
            "/v1/subscriptions/{subscription_exposed_id}",
            {"subscription_exposed_id": subscription_exposed_id},
        )
        query = {"invoice_now": invoice_now, "prorate": prorate}
        return await self.client.request("DELETE", path, query=query, model=Subscription)
