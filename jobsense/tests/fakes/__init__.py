"""Fake implementations of core ports for testing.

- FakeWebhookPort: Records outbound requests and returns canned outcomes
"""

from .webhook import FakeWebhookPort, RecordedRequest

__all__ = ["FakeWebhookPort", "RecordedRequest"]
