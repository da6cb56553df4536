"""Tests for interactive CLI loop functionality.

Covers:
- _run_cli_interactive: REPL-like command loop
- EOF/KeyboardInterrupt handling
- JSON argument parsing
"""

import json
from unittest.mock import patch

import pytest

from jobsense.adapters.cli.commands import ToolCommandHandler
from jobsense.adapters.tools import JobSearchTool
from jobsense.core.models import WebhookResponse
from jobsense.main import _run_cli_interactive
from jobsense.tests.fakes import FakeWebhookPort


def make_handler(webhook: FakeWebhookPort) -> ToolCommandHandler:
    tool = JobSearchTool(
        {"N8N_JOB_SEARCH_WEBHOOK_URL": "https://n8n.example/webhook/search"},
        environ={},
        webhook=webhook,
    )
    return ToolCommandHandler({tool.name: tool})


def printed(mock_print) -> list[str]:
    return [call.args[0] for call in mock_print.call_args_list if call.args]


@pytest.mark.asyncio
class TestInteractiveCLILoop:
    """Test suite for interactive CLI loop."""

    async def test_cli_executes_tool_command(self) -> None:
        webhook = FakeWebhookPort(WebhookResponse(status=200, status_text="OK", body={"jobs": [7]}))
        handler = make_handler(webhook)

        commands = [
            f'job_search {json.dumps({"query": "barista in Batumi"})}',
            "exit",
        ]

        with patch("builtins.input", side_effect=commands):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        assert webhook.last_request.payload == {"query": "barista in Batumi"}
        assert json.loads(printed(mock_print)[0]) == {"jobs": [7]}

    async def test_cli_handles_json_parse_errors(self) -> None:
        webhook = FakeWebhookPort()
        handler = make_handler(webhook)

        commands = ["job_search not-valid-json", "exit"]

        with patch("builtins.input", side_effect=commands):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        result = json.loads(printed(mock_print)[0])
        assert result["status"] == "error"
        assert "Invalid JSON arguments" in result["message"]
        assert webhook.call_count == 0

    async def test_cli_reports_validation_errors(self) -> None:
        webhook = FakeWebhookPort()
        handler = make_handler(webhook)

        commands = ['job_search {"query": ""}', "exit"]

        with patch("builtins.input", side_effect=commands):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        result = json.loads(printed(mock_print)[0])
        assert result["status"] == "error"
        assert result["message"].startswith("Input validation failed")

    async def test_cli_lists_tools(self) -> None:
        handler = make_handler(FakeWebhookPort())

        with patch("builtins.input", side_effect=["tools", "exit"]):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        result = json.loads(printed(mock_print)[0])
        assert [tool["name"] for tool in result["tools"]] == ["job_search"]

    async def test_cli_help_and_blank_lines(self) -> None:
        handler = make_handler(FakeWebhookPort())

        with patch("builtins.input", side_effect=["", "help", "exit"]):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(handler)

        assert "Available Commands" in printed(mock_print)[0]

    async def test_cli_handles_eof(self) -> None:
        handler = make_handler(FakeWebhookPort())

        def input_with_eof(_: str) -> str:
            raise EOFError()

        with patch("builtins.input", side_effect=input_with_eof):
            await _run_cli_interactive(handler)

    async def test_cli_handles_keyboard_interrupt(self) -> None:
        handler = make_handler(FakeWebhookPort())
        call_count = [0]

        def input_with_interrupt(_: str) -> str:
            call_count[0] += 1
            if call_count[0] == 1:
                raise KeyboardInterrupt()
            return "exit"

        with patch("builtins.input", side_effect=input_with_interrupt):
            await _run_cli_interactive(handler)

        assert call_count[0] == 2
