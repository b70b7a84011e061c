"""Todoist MCP - Todoist REST API tools for Model Context Protocol clients."""

__version__ = "0.1.0"

from .client.todoist_api import TodoistApiClient
from .core.config import Settings, load_settings, validate_api_key
from .server.server import TodoistMCPServer, create_mcp_server
from .tools import ALL_TOOL_SCHEMAS, ToolDispatcher, ToolResult
from .utils.errors import (
    ConfigurationError,
    ErrorKind,
    MissingAPIKeyError,
    RateLimitError,
    TodoistApiError,
    TodoistMCPError,
    UnknownToolError,
)

__all__ = [
    "TodoistApiClient",
    "Settings",
    "load_settings",
    "validate_api_key",
    "TodoistMCPServer",
    "create_mcp_server",
    "ToolDispatcher",
    "ToolResult",
    "ALL_TOOL_SCHEMAS",
    # Errors
    "TodoistMCPError",
    "ErrorKind",
    "ConfigurationError",
    "MissingAPIKeyError",
    "TodoistApiError",
    "RateLimitError",
    "UnknownToolError",
]
