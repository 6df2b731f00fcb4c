from typing import Any, Dict, List, Optional

from pydantic import Field  # type: ignore

from vendor_clients.models.base import ApiModel, CursorPage, IdentifiedModel


class Address(ApiModel):
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class Customer(IdentifiedModel):
    object: str = "customer"
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    description: Optional[str] = None
    address: Optional[Address] = None
    balance: int = 0
    currency: Optional[str] = None
    created: Optional[int] = None
    delinquent: Optional[bool] = None
    livemode: bool = False
    metadata: Dict[str, str] = Field(default_factory=dict)


class Charge(IdentifiedModel):
    object: str = "charge"
    amount: int = 0
    amount_captured: int = 0
    amount_refunded: int = 0
    currency: Optional[str] = None
    customer: Optional[str] = None
    description: Optional[str] = None
    paid: bool = False
    refunded: bool = False
    captured: bool = False
    status: Optional[str] = None
    payment_intent: Optional[str] = None
    receipt_email: Optional[str] = None
    created: Optional[int] = None
    livemode: bool = False
    metadata: Dict[str, str] = Field(default_factory=dict)


class Invoice(IdentifiedModel):
    object: str = "invoice"
    customer: Optional[str] = None
    subscription: Optional[str] = None
    status: Optional[str] = None
    number: Optional[str] = None
    currency: Optional[str] = None
    amount_due: int = 0
    amount_paid: int = 0
    amount_remaining: int = 0
    total: int = 0
    hosted_invoice_url: Optional[str] = None
    created: Optional[int] = None
    due_date: Optional[int] = None
    livemode: bool = False
    metadata: Dict[str, str] = Field(default_factory=dict)


class SubscriptionItem(IdentifiedModel):
    object: str = "subscription_item"
    price: Optional[Dict[str, Any]] = None
    quantity: Optional[int] = None


class Subscription(IdentifiedModel):
    object: str = "subscription"
    customer: Optional[str] = None
    status: Optional[str] = None
    items: CursorPage[SubscriptionItem] = Field(default_factory=CursorPage[SubscriptionItem])
    cancel_at_period_end: bool = False
    canceled_at: Optional[int] = None
    current_period_start: Optional[int] = None
    current_period_end: Optional[int] = None
    created: Optional[int] = None
    livemode: bool = False
    metadata: Dict[str, str] = Field(default_factory=dict)


class CustomerBalanceTransaction(IdentifiedModel):
    object: str = "customer_balance_transaction"
    amount: int = 0
    currency: Optional[str] = None
    customer: Optional[str] = None
    description: Optional[str] = None
    ending_balance: int = 0
    type: Optional[str] = None
    invoice: Optional[str] = None
    created: Optional[int] = None
    livemode: bool = False
    metadata: Dict[str, str] = Field(default_factory=dict)


class DeletedObject(IdentifiedModel):
    object: Optional[str] = None
    deleted: bool = True


class CustomerList(CursorPage[Customer]):
    object: str = "list"
    url: Optional[str] = None


class ChargeList(CursorPage[Charge]):
    object: str = "list"
    url: Optional[str] = None


class InvoiceList(CursorPage[Invoice]):
    object: str = "list"
    url: Optional[str] = None


class SubscriptionList(CursorPage[Subscription]):
    object: str = "list"
    url: Optional[str] = None


class CustomerBalanceTransactionList(CursorPage[CustomerBalanceTransaction]):
    object: str = "list"
    url: Optional[str] = None


__all__: List[str] = [
    "Address",
    "Charge",
    "ChargeList",
    "Customer",
    "CustomerBalanceTransaction",
    "CustomerBalanceTransactionList",
    "CustomerList",
    "DeletedObject",
    "Invoice",
    "InvoiceList",
    "Subscription",
    "SubscriptionItem",
    "SubscriptionList",
]
