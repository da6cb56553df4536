"""Structured n8n workflow tool.

Sends structured job search criteria to an n8n webhook and wraps the
workflow result in an envelope with execution metadata.
"""

import logging
from collections.abc import Mapping
from typing import Any

from jobsense.core.envelope import (
    FailureWording,
    render_json,
    success_envelope,
    utc_now_iso,
)
from jobsense.core.models import WebhookFailure
from jobsense.core.ports import WebhookPort
from jobsense.core.resolution import Lookup, field_then_env

from .base import ENV_WEBHOOK_URL, WebhookTool
from .schemas import WorkflowInput, parse_input

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "librechat"


class N8NWorkflowTool(WebhookTool):
    """Triggers an n8n workflow with structured job search criteria.

    Example:
        tool = N8NWorkflowTool({"N8N_WEBHOOK_URL": "https://n8n.example.com/webhook/jobs"})
        result = await tool.invoke({"workflow_data": {"position": "Engineer"}})
    """

    name = "n8n_workflow"
    description = (
        "Search for job listings and employment opportunities based on position title, "
        "location, skills, experience level, job type (full-time, part-time, contract, "
        "remote), salary range, and other criteria. Returns relevant job opportunities "
        "with detailed information including job descriptions, requirements, company "
        "information, and application links. Use this tool when users are looking for "
        "jobs, career opportunities, or want to explore employment options in specific "
        "fields or locations."
    )
    wording = FailureWording(
        timeout_error="Workflow execution timeout",
        timeout_message=(
            "The N8N workflow did not complete within {timeout}ms. "
            "The workflow may still be running on N8N."
        ),
        unreachable_error="Cannot reach N8N server",
        unreachable_message=(
            "Unable to connect to the N8N webhook URL. Please check your N8N "
            "instance is running and the URL is correct."
        ),
        upstream_error="N8N workflow execution failed",
    )

    def __init__(
        self,
        fields: Mapping[str, Any] | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        webhook: WebhookPort | None = None,
        source: str = DEFAULT_SOURCE,
    ):
        """Initialize the tool.

        Args:
            fields: Explicit configuration (``N8N_WEBHOOK_URL``,
                ``N8N_API_KEY``, ``N8N_TIMEOUT``, ``override``).
            environ: Environment fallback (default: os.environ).
            webhook: WebhookPort used to send requests.
            source: Platform identifier sent with every request.
        """
        super().__init__(fields, environ=environ, webhook=webhook)
        self.source = source

    @classmethod
    def url_lookups(
        cls, fields: Mapping[str, Any], environ: Mapping[str, str]
    ) -> list[Lookup]:
        return field_then_env(fields, environ, ENV_WEBHOOK_URL)

    def args_schema(self) -> dict[str, Any]:
        return WorkflowInput.model_json_schema()

    async def invoke(self, tool_input: Mapping[str, Any]) -> str:
        """Run the workflow with the given criteria.

        Args:
            tool_input: ``{"workflow_data": {...}, "workflow_name": str | None}``.

        Returns:
            Pretty-printed success or failure envelope.

        Raises:
            InputValidationError: If the input does not match the schema.
        """
        parsed = parse_input(WorkflowInput, tool_input)
        criteria = parsed.workflow_data.to_criteria()
        workflow_name = parsed.workflow_name

        body: dict[str, Any] = {"data": criteria.to_payload()}
        if workflow_name is not None:
            body["workflow"] = workflow_name
        body["timestamp"] = utc_now_iso()
        body["source"] = self.source

        outcome = await self.send(body)

        if isinstance(outcome, WebhookFailure):
            return self.render_failure(outcome)

        logger.info(
            f"Workflow '{workflow_name or 'default'}' completed with HTTP {outcome.status}",
            extra={"tool": self.name},
        )
        return render_json(success_envelope(outcome, workflow_name))
