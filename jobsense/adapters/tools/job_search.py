"""Natural-language job search tool.

Sends the user's query to an n8n job search webhook as ``{"query": ...}``
and returns whatever the workflow answers, unwrapped.
"""

import logging
from collections.abc import Mapping
from typing import Any

from jobsense.core.envelope import FailureWording, render_json
from jobsense.core.models import WebhookFailure
from jobsense.core.resolution import Lookup, field_then_env

from .base import ENV_JOB_SEARCH_WEBHOOK_URL, ENV_WEBHOOK_URL, WebhookTool
from .schemas import JobSearchInput, parse_input

logger = logging.getLogger(__name__)


class JobSearchTool(WebhookTool):
    """Searches for jobs with a free-text query.

    A successful result is the upstream body as-is; callers must not
    assume a ``success`` field unless the call failed.
    """

    name = "job_search"
    description = (
        "Search for job listings based on what the user is looking for. "
        "Provide a natural language description of the job search including position, "
        "location, skills, experience level, and any other relevant criteria. "
        "Returns a list of relevant job opportunities with details including title, "
        "company, salary, and application links. Use this when the user asks to find "
        "jobs, search for positions, or look for employment opportunities. "
        "IMPORTANT: When presenting results to the user, format each job detail on a "
        "single line with NO empty lines between fields for compact display."
    )
    wording = FailureWording(
        timeout_error="Job search timeout",
        timeout_message=(
            "The job search did not complete within {timeout}ms. "
            "Please try again with more specific criteria."
        ),
        unreachable_error="Cannot reach job search service",
        unreachable_message=(
            "Unable to connect to the job search service. Please try again later."
        ),
        upstream_error="Job search failed",
    )

    @classmethod
    def url_lookups(
        cls, fields: Mapping[str, Any], environ: Mapping[str, str]
    ) -> list[Lookup]:
        # job search specific webhook first, then the general one
        return field_then_env(
            fields, environ, ENV_JOB_SEARCH_WEBHOOK_URL, ENV_WEBHOOK_URL
        )

    def args_schema(self) -> dict[str, Any]:
        return JobSearchInput.model_json_schema()

    async def invoke(self, tool_input: Mapping[str, Any]) -> str:
        search = parse_input(JobSearchInput, tool_input).to_query()

        outcome = await self.send({"query": search.query})

        if isinstance(outcome, WebhookFailure):
            return self.render_failure(outcome)

        logger.info(
            f"Job search completed with HTTP {outcome.status}",
            extra={"tool": self.name},
        )
        return render_json(outcome.body)
