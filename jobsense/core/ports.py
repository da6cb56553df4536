"""Port interfaces for the JobSense webhook tools.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - WebhookPort: Send one JSON POST to a workflow webhook

2. **Driving Ports** (the agent runtime calls into the tools)
   - ToolPort: A named tool invoked with a JSON-like mapping
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .models import WebhookOutcome


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class WebhookPort(ABC):
    """Port for delivering a request to a workflow-automation webhook.

    Implementations must never raise for transport or upstream problems.
    Every runtime failure is returned as a WebhookFailure so the caller
    can turn it into a user-facing message.

    Implementations must handle:
    - A total deadline of ``timeout_seconds`` for the whole exchange
    - Mapping of DNS/connection failures to UNREACHABLE
    - Mapping of non-2xx responses to UPSTREAM with the response body
    - No retries: exactly one attempt per call
    """

    @abstractmethod
    async def post_json(
        self,
        url: str,
        payload: Mapping[str, Any],
        headers: Mapping[str, str],
        timeout_seconds: float,
    ) -> WebhookOutcome:
        """POST a JSON payload and return the outcome.

        Args:
            url: Webhook endpoint URL.
            payload: JSON-serializable request body.
            headers: Request headers (content type, authorization).
            timeout_seconds: Upper bound for the whole request.

        Returns:
            WebhookResponse for a 2xx answer, WebhookFailure otherwise.
        """


# ============================================================================
# DRIVING PORTS (Agent runtime calls into the tools)
# ============================================================================


class ToolPort(ABC):
    """Port for an agent-callable tool.

    ``name`` and ``description`` are what the language-model runtime
    shows to the model; ``args_schema`` describes the accepted input.
    """

    name: str
    description: str

    @abstractmethod
    def args_schema(self) -> dict[str, Any]:
        """Return the JSON schema of the tool input."""

    @abstractmethod
    async def invoke(self, tool_input: Mapping[str, Any]) -> str:
        """Run the tool once.

        Args:
            tool_input: Input mapping matching ``args_schema``.

        Returns:
            JSON string for the agent.

        Raises:
            InputValidationError: If the input does not match the schema.
        """
