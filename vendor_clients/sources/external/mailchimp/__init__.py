"""Mailchimp data source module."""

from vendor_clients.sources.external.mailchimp.mailchimp import MailchimpDataSource, subscriber_hash

__all__ = ["MailchimpDataSource", "subscriber_hash"]
