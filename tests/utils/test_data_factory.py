"""
Test data factory for generating realistic vendor payloads.

Payloads mirror what each API returns on the wire, so they can be queued on a
``RecordingTransport`` as JSON bodies.
"""

import random
import uuid
from typing import Any, Dict, List, Optional

from faker import Faker  # type: ignore

fake: Faker = Faker()


class VendorDataFactory:
    """Factory for generating vendor API payloads."""

    @staticmethod
    def stripe_customer(customer_id: Optional[str] = None, **kwargs) -> Dict[str, Any]:
        """
        Generate a Stripe customer object.

        Example:
            customer = VendorDataFactory.stripe_customer("cus_1")
        """
        return {
            "id": customer_id or f"cus_{uuid.uuid4().hex[:14]}",
            "object": "customer",
            "email": fake.email(),
            "name": fake.name(),
            "balance": 0,
            "created": int(fake.unix_time()),
            "livemode": False,
            "metadata": {},
            **kwargs,
        }

    @staticmethod
    def stripe_list(data: List[Dict[str, Any]], has_more: bool, url: str = "/v1/customers") -> Dict[str, Any]:
        return {"object": "list", "url": url, "data": data, "has_more": has_more}

    @staticmethod
    def stripe_charge(charge_id: Optional[str] = None, **kwargs) -> Dict[str, Any]:
        return {
            "id": charge_id or f"ch_{uuid.uuid4().hex[:14]}",
            "object": "charge",
            "amount": random.randint(100, 100000),
            "currency": "usd",
            "paid": True,
            "status": "succeeded",
            **kwargs,
        }

    @staticmethod
    def github_user(login: Optional[str] = None) -> Dict[str, Any]:
        return {
            "id": random.randint(1, 10_000_000),
            "login": login or fake.user_name(),
            "type": "User",
            "site_admin": False,
        }

    @staticmethod
    def github_issue(number: int, **kwargs) -> Dict[str, Any]:
        return {
            "id": random.randint(1, 10_000_000),
            "number": number,
            "title": fake.sentence(nb_words=6),
            "state": "open",
            "body": fake.paragraph(),
            "user": VendorDataFactory.github_user(),
            "labels": [],
            "comments": 0,
            **kwargs,
        }

    @staticmethod
    def github_comment(comment_id: Optional[int] = None, **kwargs) -> Dict[str, Any]:
        return {
            "id": comment_id or random.randint(1, 10_000_000),
            "body": fake.paragraph(),
            "user": VendorDataFactory.github_user(),
            **kwargs,
        }

    @staticmethod
    def shopify_customer(customer_id: Optional[int] = None, **kwargs) -> Dict[str, Any]:
        return {
            "id": customer_id or random.randint(1, 10_000_000_000),
            "email": fake.email(),
            "first_name": fake.first_name(),
            "last_name": fake.last_name(),
            "orders_count": 0,
            "state": "enabled",
            **kwargs,
        }

    @staticmethod
    def shopify_order(order_id: Optional[int] = None, **kwargs) -> Dict[str, Any]:
        return {
            "id": order_id or random.randint(1, 10_000_000_000),
            "name": f"#{random.randint(1000, 9999)}",
            "email": fake.email(),
            "currency": "USD",
            "financial_status": "paid",
            "total_price": f"{random.uniform(1, 500):.2f}",
            "line_items": [],
            **kwargs,
        }

    @staticmethod
    def mailchimp_member(email: Optional[str] = None, **kwargs) -> Dict[str, Any]:
        address = email or fake.email()
        return {
            "id": uuid.uuid4().hex,
            "email_address": address,
            "status": "subscribed",
            "merge_fields": {"FNAME": fake.first_name(), "LNAME": fake.last_name()},
            **kwargs,
        }

    @staticmethod
    def docusign_envelope(envelope_id: Optional[str] = None, **kwargs) -> Dict[str, Any]:
        return {
            "envelopeId": envelope_id or str(uuid.uuid4()),
            "status": "sent",
            "emailSubject": fake.sentence(nb_words=4),
            "createdDateTime": fake.iso8601(),
            **kwargs,
        }
