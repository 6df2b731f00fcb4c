from typing import List, Optional

from pydantic import Field  # type: ignore

from vendor_clients.models.base import ApiModel


class CustomerAddress(ApiModel):
    id: Optional[int] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    default: bool = False


class Customer(ApiModel):
    id: Optional[int] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    state: Optional[str] = None
    note: Optional[str] = None
    tags: Optional[str] = None
    verified_email: bool = False
    orders_count: int = 0
    total_spent: Optional[str] = None
    currency: Optional[str] = None
    addresses: List[CustomerAddress] = Field(default_factory=list)
    default_address: Optional[CustomerAddress] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class LineItem(ApiModel):
    id: Optional[int] = None
    product_id: Optional[int] = None
    variant_id: Optional[int] = None
    title: Optional[str] = None
    quantity: int = 0
    price: Optional[str] = None
    sku: Optional[str] = None


class Order(ApiModel):
    id: Optional[int] = None
    name: Optional[str] = None
    order_number: Optional[int] = None
    email: Optional[str] = None
    customer: Optional[Customer] = None
    currency: Optional[str] = None
    financial_status: Optional[str] = None
    fulfillment_status: Optional[str] = None
    total_price: Optional[str] = None
    subtotal_price: Optional[str] = None
    total_tax: Optional[str] = None
    line_items: List[LineItem] = Field(default_factory=list)
    tags: Optional[str] = None
    cancelled_at: Optional[str] = None
    closed_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class CustomerEnvelope(ApiModel):
    customer: Customer


class CustomersEnvelope(ApiModel):
    customers: List[Customer] = Field(default_factory=list)


class OrderEnvelope(ApiModel):
    order: Order


class OrdersEnvelope(ApiModel):
    orders: List[Order] = Field(default_factory=list)


class Count(ApiModel):
    count: int
