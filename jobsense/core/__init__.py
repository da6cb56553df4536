"""Core domain logic for the JobSense webhook tools.

This package contains zero external dependencies and represents
the pure logic of the tools: configuration resolution, the request
and outcome models, and result envelopes. All network and schema
integrations are handled by the adapters package.
"""

from .errors import ConfigurationError, InputValidationError
from .models import (
    FailureKind,
    SearchCriteria,
    SearchQuery,
    ToolConfiguration,
    WebhookFailure,
    WebhookOutcome,
    WebhookResponse,
)

__all__ = [
    "ConfigurationError",
    "FailureKind",
    "InputValidationError",
    "SearchCriteria",
    "SearchQuery",
    "ToolConfiguration",
    "WebhookFailure",
    "WebhookOutcome",
    "WebhookResponse",
]
