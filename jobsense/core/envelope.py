"""Result envelopes returned to the calling agent.

Every tool call ends in a string. Successful structured calls are
wrapped in a metadata envelope; failures of any kind become a failure
envelope with ``success: false`` so the agent always has a message to
show the user.
"""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .models import FailureKind, ToolConfiguration, WebhookFailure, WebhookResponse

UNKNOWN_ERROR = "Unknown error occurred"


@dataclass(frozen=True)
class FailureWording:
    """Tool-specific text used in failure envelopes.

    ``timeout_message`` is formatted with ``timeout`` (milliseconds).
    """

    timeout_error: str
    timeout_message: str
    unreachable_error: str
    unreachable_message: str
    upstream_error: str


def utc_now_iso(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = now or datetime.now(timezone.utc)
    stamp = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def render_json(payload: Any) -> str:
    """Pretty-print a payload the way tool results are handed back."""
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


def success_envelope(
    response: WebhookResponse, workflow: str | None, executed_at: str | None = None
) -> dict[str, Any]:
    return {
        "success": True,
        "workflow": workflow or "default",
        "result": response.body,
        "executedAt": executed_at or utc_now_iso(),
        "status": response.status,
    }


def failure_envelope(
    failure: WebhookFailure, wording: FailureWording, config: ToolConfiguration
) -> dict[str, Any]:
    """Map a failure outcome to its caller-facing envelope.

    Args:
        failure: The failure produced by the webhook port.
        wording: Tool-specific error and message text.
        config: Configuration of the calling tool (timeout, endpoint).

    Returns:
        Envelope dictionary; shape depends on the failure kind.
    """
    if failure.kind is FailureKind.TIMEOUT:
        return {
            "success": False,
            "error": wording.timeout_error,
            "message": wording.timeout_message.format(timeout=config.timeout_ms),
            "timeout": config.timeout_ms,
        }

    if failure.kind is FailureKind.UNREACHABLE:
        return {
            "success": False,
            "error": wording.unreachable_error,
            "message": wording.unreachable_message,
            "webhookUrl": config.endpoint_url,
        }

    if failure.kind is FailureKind.UPSTREAM:
        return {
            "success": False,
            "error": wording.upstream_error,
            "message": failure.message,
            "status": failure.status,
            "statusText": failure.status_text,
            "details": failure.details,
        }

    return {
        "success": False,
        "error": UNKNOWN_ERROR,
        "message": failure.message,
        "type": failure.error_type or "Exception",
    }
