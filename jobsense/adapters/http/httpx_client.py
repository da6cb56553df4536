"""httpx webhook adapter.

Implements WebhookPort with a short-lived httpx.AsyncClient per request.
Transport and upstream problems are normalized into WebhookFailure values
instead of being raised.
"""

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from jobsense.core.models import (
    FailureKind,
    WebhookFailure,
    WebhookOutcome,
    WebhookResponse,
)
from jobsense.core.ports import WebhookPort

logger = logging.getLogger(__name__)


def _decode_body(response: httpx.Response) -> Any:
    """Return the JSON body, or the raw text if it is not JSON."""
    if not response.content:
        return ""
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


class HttpxWebhookClient(WebhookPort):
    """Webhook delivery over httpx.

    Holds no connection state between calls, so one instance can be
    shared by concurrent tool invocations.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        """Initialize the client.

        Args:
            transport: Optional httpx transport, e.g. httpx.MockTransport
                in tests. Defaults to httpx's network transport.
        """
        self.transport = transport

    async def post_json(
        self,
        url: str,
        payload: Mapping[str, Any],
        headers: Mapping[str, str],
        timeout_seconds: float,
    ) -> WebhookOutcome:
        """POST a JSON payload, bounded by a total deadline."""
        try:
            response = await asyncio.wait_for(
                self._send(url, payload, headers, timeout_seconds),
                timeout=timeout_seconds,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.warning(
                f"Webhook request timed out after {timeout_seconds}s",
                extra={"url": url, "error_type": type(e).__name__},
            )
            return WebhookFailure(
                kind=FailureKind.TIMEOUT,
                message=str(e) or "Request timed out",
                error_type=type(e).__name__,
            )
        except httpx.ConnectError as e:
            logger.warning(
                f"Webhook endpoint unreachable: {e}",
                extra={"url": url},
            )
            return WebhookFailure(
                kind=FailureKind.UNREACHABLE,
                message=str(e),
                error_type=type(e).__name__,
            )
        except Exception as e:
            logger.error(
                f"Unexpected error calling webhook: {e}",
                extra={"url": url},
                exc_info=True,
            )
            return WebhookFailure(
                kind=FailureKind.UNKNOWN,
                message=str(e),
                error_type=type(e).__name__,
            )

        body = _decode_body(response)
        if response.is_success:
            logger.debug(
                f"Webhook responded {response.status_code}",
                extra={"url": url},
            )
            return WebhookResponse(
                status=response.status_code,
                status_text=response.reason_phrase,
                body=body,
            )

        logger.warning(
            f"Webhook returned HTTP {response.status_code}",
            extra={"url": url, "response": response.text[:500]},
        )
        return WebhookFailure(
            kind=FailureKind.UPSTREAM,
            message=f"Request failed with status code {response.status_code}",
            status=response.status_code,
            status_text=response.reason_phrase,
            details=body,
        )

    async def _send(
        self,
        url: str,
        payload: Mapping[str, Any],
        headers: Mapping[str, str],
        timeout_seconds: float,
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            transport=self.transport,
            timeout=httpx.Timeout(timeout_seconds),
        ) as client:
            return await client.post(url, json=dict(payload), headers=dict(headers))
