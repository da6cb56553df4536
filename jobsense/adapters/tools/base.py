"""Shared behaviour of the n8n webhook tools.

Both tools resolve their configuration the same way, send the same
headers and turn runtime failures into the same envelope shapes; they
differ only in the input schema, the request body and how a success is
rendered.
"""

import logging
import os
from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

from jobsense.adapters.http.httpx_client import HttpxWebhookClient
from jobsense.core.envelope import FailureWording, failure_envelope, render_json
from jobsense.core.errors import ConfigurationError
from jobsense.core.models import (
    DEFAULT_TIMEOUT_MS,
    FailureKind,
    ToolConfiguration,
    WebhookFailure,
    WebhookOutcome,
)
from jobsense.core.ports import ToolPort, WebhookPort
from jobsense.core.resolution import (
    Absent,
    Lookup,
    field_then_env,
    parse_flag,
    parse_timeout_ms,
    resolve,
    resolve_value,
)

logger = logging.getLogger(__name__)

ENV_WEBHOOK_URL = "N8N_WEBHOOK_URL"
ENV_JOB_SEARCH_WEBHOOK_URL = "N8N_JOB_SEARCH_WEBHOOK_URL"
ENV_API_KEY = "N8N_API_KEY"
ENV_TIMEOUT = "N8N_TIMEOUT"


class WebhookTool(ToolPort):
    """Base class for tools that forward their input to an n8n webhook.

    Subclasses set ``name``, ``description`` and ``wording`` and implement
    ``url_lookups``, ``args_schema`` and ``invoke``.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    wording: ClassVar[FailureWording]

    def __init__(
        self,
        fields: Mapping[str, Any] | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        webhook: WebhookPort | None = None,
    ):
        """Resolve configuration and set up the webhook port.

        Args:
            fields: Explicit configuration. Recognized keys are the
                environment variable names (``N8N_WEBHOOK_URL``, ...)
                and ``override``.
            environ: Environment to fall back on (default: os.environ).
            webhook: WebhookPort used to send requests (default:
                HttpxWebhookClient).

        Raises:
            ConfigurationError: If no webhook URL is configured and
                ``override`` is not set, or the timeout is invalid.
        """
        fields = fields or {}
        environ = os.environ if environ is None else environ
        self.config = self.resolve_config(fields, environ)

        self.webhook = webhook or HttpxWebhookClient()

    @classmethod
    @abstractmethod
    def url_lookups(
        cls, fields: Mapping[str, Any], environ: Mapping[str, str]
    ) -> list[Lookup]:
        """Ordered sources for the webhook URL."""

    @classmethod
    def resolve_config(
        cls, fields: Mapping[str, Any], environ: Mapping[str, str]
    ) -> ToolConfiguration:
        """Resolve a ToolConfiguration from explicit fields and environment."""
        try:
            override = parse_flag(fields.get("override", False))
        except ValueError as e:
            raise ConfigurationError(f"Invalid override: {e}") from e

        url = resolve(cls.url_lookups(fields, environ))
        if isinstance(url, Absent):
            if not override:
                raise ConfigurationError(
                    f"Missing {url.describe()} environment variable. "
                    "Please configure your N8N webhook URL in the environment settings."
                )
            endpoint_url = None
        else:
            endpoint_url = str(url.value).strip()

        api_key = resolve_value(field_then_env(fields, environ, ENV_API_KEY))

        raw_timeout = resolve_value(
            field_then_env(fields, environ, ENV_TIMEOUT), default=DEFAULT_TIMEOUT_MS
        )
        try:
            timeout_ms = parse_timeout_ms(raw_timeout)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {ENV_TIMEOUT}: {e}") from e

        return ToolConfiguration(
            endpoint_url=endpoint_url,
            api_key=str(api_key) if api_key is not None else None,
            timeout_ms=timeout_ms,
            override=override,
        )

    def headers(self) -> dict[str, str]:
        """Build request headers."""
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    async def send(self, payload: Mapping[str, Any]) -> WebhookOutcome:
        """Send one request to the configured webhook."""
        if not self.config.endpoint_url:
            logger.warning(f"{self.name}: invoked without a webhook URL")
            return WebhookFailure(
                kind=FailureKind.UNKNOWN,
                message="No webhook URL is configured for this tool",
                error_type=ConfigurationError.__name__,
            )

        logger.debug(
            f"{self.name}: POST {self.config.endpoint_url}",
            extra={"tool": self.name, "timeout_ms": self.config.timeout_ms},
        )
        return await self.webhook.post_json(
            self.config.endpoint_url,
            payload,
            self.headers(),
            self.config.timeout_seconds,
        )

    def render_failure(self, failure: WebhookFailure) -> str:
        logger.warning(
            f"{self.name}: webhook call failed ({failure.kind.value})",
            extra={"tool": self.name, "status": failure.status},
        )
        return render_json(failure_envelope(failure, self.wording, self.config))
