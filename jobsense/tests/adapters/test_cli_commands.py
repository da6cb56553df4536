"""Tests for the CLI tool command handler."""

import json

import pytest

from jobsense.adapters.cli.commands import ToolCommandHandler
from jobsense.adapters.tools import JobSearchTool, N8NWorkflowTool
from jobsense.core.models import FailureKind, WebhookFailure, WebhookResponse
from jobsense.tests.fakes import FakeWebhookPort


@pytest.fixture
def webhook() -> FakeWebhookPort:
    return FakeWebhookPort(WebhookResponse(status=200, status_text="OK", body={"jobs": ["x"]}))


@pytest.fixture
def handler(webhook: FakeWebhookPort) -> ToolCommandHandler:
    fields = {"N8N_WEBHOOK_URL": "https://n8n.example/webhook/jobs"}
    return ToolCommandHandler(
        {
            "n8n_workflow": N8NWorkflowTool(fields, environ={}, webhook=webhook),
            "job_search": JobSearchTool(fields, environ={}, webhook=webhook),
        }
    )


def test_list_tools(handler: ToolCommandHandler) -> None:
    result = handler.list_tools()

    assert result["status"] == "success"
    assert [tool["name"] for tool in result["tools"]] == ["job_search", "n8n_workflow"]
    assert all(tool["description"] for tool in result["tools"])
    assert "query" in result["tools"][0]["args_schema"]["properties"]


@pytest.mark.asyncio
class TestRunTool:
    async def test_success_returns_tool_output(
        self, handler: ToolCommandHandler, webhook: FakeWebhookPort
    ) -> None:
        result = await handler.run_tool("job_search", {"query": "welder"})

        assert result["status"] == "success"
        assert result["tool"] == "job_search"
        assert json.loads(result["output"]) == {"jobs": ["x"]}
        assert webhook.call_count == 1

    async def test_validation_error_is_reported(
        self, handler: ToolCommandHandler, webhook: FakeWebhookPort
    ) -> None:
        result = await handler.run_tool("n8n_workflow", {"workflow_data": {"remote": "maybe"}})

        assert result["status"] == "error"
        assert result["message"].startswith("Input validation failed: workflow_data.remote")
        assert webhook.call_count == 0

    async def test_unknown_tool(self, handler: ToolCommandHandler) -> None:
        result = await handler.run_tool("weather", {})

        assert result["status"] == "error"
        assert "Unknown tool: weather" in result["message"]
        assert "job_search, n8n_workflow" in result["message"]

    async def test_upstream_failure_is_still_success_status(
        self, handler: ToolCommandHandler, webhook: FakeWebhookPort
    ) -> None:
        webhook.set_outcome(WebhookFailure(kind=FailureKind.UNREACHABLE, message="refused"))

        result = await handler.run_tool("job_search", {"query": "welder"})

        assert result["status"] == "success"
        assert json.loads(result["output"])["success"] is False
