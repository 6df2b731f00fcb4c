from vendor_clients.sources.client.stripe.stripe import StripeClient, StripeConfig, StripeRESTClient

__all__ = ["StripeClient", "StripeConfig", "StripeRESTClient"]
