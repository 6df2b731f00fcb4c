from vendor_clients.sources.client.mailchimp.mailchimp import (
    MailchimpClient,
    MailchimpConfig,
    MailchimpRESTClient,
)

__all__ = ["MailchimpClient", "MailchimpConfig", "MailchimpRESTClient"]
