"""Outbound HTTP adapters implementing WebhookPort."""

from .httpx_client import HttpxWebhookClient

__all__ = ["HttpxWebhookClient"]
