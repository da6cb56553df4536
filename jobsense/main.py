"""Composition root for the JobSense webhook tools.

This module is the ONLY location that wires configuration, the
webhook adapter and the tools together, creating a clear entry point
for operators who want to run a tool from the command line.

Module Structure:
- Configuration loading via config module
- Logging setup
- Tool instantiation
- Entry point selection (single command or interactive loop)
"""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Mapping
from typing import Any

from jobsense.adapters.cli.commands import ToolCommandHandler
from jobsense.adapters.tools import JobSearchTool, N8NWorkflowTool
from jobsense.config import Settings, load_settings
from jobsense.core.errors import ConfigurationError
from jobsense.core.ports import ToolPort, WebhookPort


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # stdout carries tool output, so logs go to stderr
    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_tools(
    settings: Settings,
    environ: Mapping[str, str] | None = None,
    webhook: WebhookPort | None = None,
) -> dict[str, ToolPort]:
    """Instantiate every tool that can be configured.

    A tool whose webhook URL is missing is skipped with a warning so the
    others stay usable.

    Args:
        settings: Loaded application settings.
        environ: Environment fallback passed to the tools.
        webhook: Optional shared WebhookPort (default: one per tool).

    Returns:
        Tools keyed by name.
    """
    logger = logging.getLogger(__name__)
    fields = settings.tool_fields()
    tools: dict[str, ToolPort] = {}

    try:
        tools[N8NWorkflowTool.name] = N8NWorkflowTool(
            fields,
            environ=environ,
            webhook=webhook,
            source=settings.source_identifier,
        )
    except ConfigurationError as e:
        logger.warning(f"Tool {N8NWorkflowTool.name} disabled: {e}")

    try:
        tools[JobSearchTool.name] = JobSearchTool(
            fields, environ=environ, webhook=webhook
        )
    except ConfigurationError as e:
        logger.warning(f"Tool {JobSearchTool.name} disabled: {e}")

    logger.info(f"Tools available: {', '.join(tools) or 'none'}")
    return tools


def _print_result(result: dict[str, Any]) -> None:
    if result["status"] == "success" and "output" in result:
        print(result["output"])
    else:
        print(json.dumps(result, indent=2, default=str))


async def _execute_command(
    handler: ToolCommandHandler, command: str, args_str: str
) -> dict[str, Any]:
    """Execute a single CLI command.

    Raises:
        ValueError: If the arguments are not valid JSON.
    """
    if command == "tools":
        return handler.list_tools()

    try:
        args = json.loads(args_str) if args_str else {}
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON arguments: {e}") from e

    return await handler.run_tool(command, args)


async def _run_cli_interactive(handler: ToolCommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface: ``<tool_name> <json arguments>``.

    Args:
        handler: ToolCommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            command_line = await loop.run_in_executor(None, input, "jobsense> ")
            command_line = command_line.strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0]
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                result = await _execute_command(handler, command, args_str)
            except ValueError as e:
                result = {"status": "error", "message": str(e)}
            _print_result(result)

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands:

  tools
    List the configured tools with their input schemas.

  n8n_workflow <json>
    Run the structured workflow tool.

    Example: n8n_workflow {"workflow_data": {"position": "Data Engineer", "remote": true}}

  job_search <json>
    Run the natural-language job search tool.

    Example: job_search {"query": "Senior Python developer in Tbilisi"}

  help
    Show this help message.

  exit
    Exit the CLI.
    """
    print(help_text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobsense",
        description="Run the JobSense n8n webhook tools from the command line.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="Tool name, or 'tools' to list tools. Omit for interactive mode.",
    )
    parser.add_argument(
        "arguments",
        nargs="?",
        default="",
        help="Tool input as a JSON object",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to a .env file (default: ./.env)",
    )
    return parser


async def bootstrap(argv: list[str] | None = None) -> int:
    """Load configuration, wire the tools and run the requested command.

    Returns:
        Process exit code.
    """
    args = _build_parser().parse_args(argv)

    settings = load_settings(args.env_file)
    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    tools = build_tools(settings)
    if not tools:
        logger.error("No tools configured. Set N8N_WEBHOOK_URL or N8N_JOB_SEARCH_WEBHOOK_URL.")
        return 1

    handler = ToolCommandHandler(tools)

    if args.command is None:
        await _run_cli_interactive(handler)
        return 0

    try:
        result = await _execute_command(handler, args.command, args.arguments)
    except ValueError as e:
        result = {"status": "error", "message": str(e)}
    _print_result(result)
    return 0 if result["status"] == "success" else 1


def main(argv: list[str] | None = None) -> None:
    """Application entry point.

    Exit codes:
        0: Command succeeded (a returned failure envelope still counts)
        1: Configuration, input or fatal error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        exit_code = asyncio.run(bootstrap(argv))
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
