"""Routes tool calls to Todoist API operations."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from mcp.types import Tool

from ..client.todoist_api import TodoistApiClient
from ..utils.errors import UnknownToolError
from ..utils.tool_decorators import handle_tool_errors
from .base import ToolDefinition
from .results import ToolResult


class ToolDispatcher:
    """Maps tool names to handlers and runs them against one API client.

    ``handle_tool`` is the error boundary for tool execution: every failure,
    including unknown tool names and invalid arguments, comes back as a
    ToolResult with ``is_error`` set.
    """

    def __init__(
        self,
        client: TodoistApiClient,
        tools: Iterable[ToolDefinition] | None = None,
        logger: logging.Logger | None = None,
    ):
        if tools is None:
            from . import ALL_TOOL_SCHEMAS

            tools = ALL_TOOL_SCHEMAS

        self.client = client
        self.logger = logger or logging.getLogger(__name__)
        self._tools: dict[str, ToolDefinition] = {}
        for tool in tools:
            self.register_tool(tool)

    def register_tool(self, tool: ToolDefinition) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool
        self.logger.debug(f"Registered tool: {tool.name}")

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[Tool]:
        """MCP descriptors for every registered tool, in registration order."""
        return [tool.to_tool() for tool in self._tools.values()]

    @handle_tool_errors
    async def handle_tool(self, name: str, arguments: Mapping[str, Any] | None) -> ToolResult:
        """Validate arguments, make exactly one API call, and format the result."""
        self.logger.debug(f"Handling tool: {name} with arguments: {arguments}")

        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)

        args = tool.arguments.model_validate(dict(arguments or {}))
        return await tool.handler(self.client, args)
