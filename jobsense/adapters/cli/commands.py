"""CLI command implementations for running the webhook tools.

Maps CLI commands to ToolPort invocations. Handles CLI-specific
formatting and error reporting, so a mistyped argument shows up as an
error result instead of a traceback.
"""

import logging
from collections.abc import Mapping
from typing import Any

from jobsense.core.errors import InputValidationError
from jobsense.core.ports import ToolPort

logger = logging.getLogger(__name__)


class ToolCommandHandler:
    """Handles CLI commands by delegating to the registered tools."""

    def __init__(self, tools: Mapping[str, ToolPort]):
        """Initialize the CLI command handler.

        Args:
            tools: Tools keyed by their name.
        """
        self.tools = dict(tools)

    def list_tools(self) -> dict[str, Any]:
        """Describe every registered tool."""
        return {
            "status": "success",
            "operation": "tools",
            "tools": [
                {
                    "name": name,
                    "description": tool.description,
                    "args_schema": tool.args_schema(),
                }
                for name, tool in sorted(self.tools.items())
            ],
        }

    async def run_tool(self, name: str, args: Any) -> dict[str, Any]:
        """Invoke a tool once.

        Args:
            name: Registered tool name.
            args: Tool input, usually parsed from JSON.

        Returns:
            Dictionary with status and, on success, the tool output string.
        """
        tool = self.tools.get(name)
        if tool is None:
            return {
                "status": "error",
                "operation": "run",
                "tool": name,
                "message": (
                    f"Unknown tool: {name}. "
                    f"Available tools: {', '.join(sorted(self.tools)) or 'none'}"
                ),
            }

        try:
            output = await tool.invoke(args)
        except InputValidationError as e:
            logger.error(f"Invalid input for {name}: {e}")
            return {
                "status": "error",
                "operation": "run",
                "tool": name,
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "run",
            "tool": name,
            "output": output,
        }
