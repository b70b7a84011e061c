"""MCP server exposing the Todoist tools over stdio."""

import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from .. import __version__
from ..tools import ToolDispatcher

SERVER_NAME = "todoist-mcp"


class TodoistMCPServer:
    """
    MCP server that advertises the Todoist tool table and relays tool calls
    to a ToolDispatcher.

    Only ``tools/list`` and ``tools/call`` are handled.
    """

    def __init__(
        self,
        dispatcher: ToolDispatcher,
        name: str = SERVER_NAME,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize MCP server.

        Args:
            dispatcher: Dispatcher that executes tool calls
            name: Server name reported during initialization
            logger: Logger to use instead of the module logger
        """
        self.app = Server(name, version=__version__)
        self.dispatcher = dispatcher
        self.logger = logger or logging.getLogger(__name__)
        self.tools: list[Tool] = dispatcher.list_tools()
        self.setup_handlers()

    async def list_tools(self) -> list[Tool]:
        """List available MCP tools."""
        self.logger.debug("Listing available tools")
        return self.tools

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        """Execute a tool and relay its result, including the error flag."""
        self.logger.debug(f"Executing tool: {name} with arguments: {arguments}")

        try:
            result = await self.dispatcher.handle_tool(name, arguments or {})
            if result.is_error:
                self.logger.info(f"Tool {name} returned an error: {result.text}")
            return result.to_call_tool_result()
        except Exception as e:
            self.logger.exception(f"Tool execution failed: {name}")
            return CallToolResult(
                content=[
                    TextContent(
                        type="text",
                        text=f"Error executing {name}: {str(e) or 'Unknown error'}",
                    )
                ],
                isError=True,
            )

    def setup_handlers(self) -> None:
        """Register the MCP handlers for tool listing and calling."""
        self.app.list_tools()(self.list_tools)
        # Arguments are validated by the dispatcher's pydantic models.
        self.app.call_tool(validate_input=False)(self.call_tool)

    async def run(self) -> None:
        """Run the MCP server on stdio until the client disconnects."""
        self.logger.info(f"Starting MCP Server: {self.app.name}")

        async with stdio_server() as (read_stream, write_stream):
            self.logger.info(f"MCP server running on stdio with {len(self.tools)} tools")
            await self.app.run(
                read_stream,
                write_stream,
                self.app.create_initialization_options(),
            )


def create_mcp_server(dispatcher: ToolDispatcher, name: str = SERVER_NAME) -> TodoistMCPServer:
    """
    Create a Todoist MCP server.

    Example:
        ```python
        async with TodoistApiClient(settings) as client:
            server = create_mcp_server(ToolDispatcher(client))
            await server.run()
        ```
    """
    return TodoistMCPServer(dispatcher, name=name)
