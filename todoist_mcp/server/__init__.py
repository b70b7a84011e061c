"""MCP server."""

from .server import TodoistMCPServer, create_mcp_server

__all__ = ["TodoistMCPServer", "create_mcp_server"]
