"""Utility functions and classes."""

from .errors import (
    ConfigurationError,
    ErrorKind,
    MissingAPIKeyError,
    RateLimitError,
    TodoistApiError,
    TodoistMCPError,
    UnknownToolError,
)
from .tool_decorators import handle_tool_errors

__all__ = [
    "TodoistMCPError",
    "ErrorKind",
    "ConfigurationError",
    "MissingAPIKeyError",
    "TodoistApiError",
    "RateLimitError",
    "UnknownToolError",
    "handle_tool_errors",
]
