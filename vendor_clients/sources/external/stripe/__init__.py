"""Stripe data source module."""

from vendor_clients.sources.external.stripe.stripe import StripeDataSource

__all__ = ["StripeDataSource"]
