"""Error types for the Todoist MCP server."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    """Discriminant used at the tool boundary to decide how an error is reported."""

    RATE_LIMIT = "rate_limit"
    REMOTE = "remote"
    UNKNOWN_TOOL = "unknown_tool"
    OTHER = "other"


class TodoistMCPError(Exception):
    """Base exception for Todoist MCP server errors."""

    kind: ErrorKind = ErrorKind.OTHER


# Configuration errors
class ConfigurationError(TodoistMCPError):
    """Raised when configuration is missing or invalid."""

    pass


class MissingAPIKeyError(ConfigurationError):
    """Raised when required API key is not found."""

    def __init__(self, key_name: str):
        super().__init__(f"{key_name} environment variable is required")
        self.key_name = key_name


# Remote API errors
class TodoistApiError(TodoistMCPError):
    """Raised when a call to the Todoist REST API fails.

    Attributes:
        status_code: HTTP status returned by Todoist, if a response was received
        response: Decoded response body, or the original exception when the
            failure was not an HTTP exchange at all
    """

    kind = ErrorKind.REMOTE

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: Any = None,
        kind: ErrorKind | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        if kind is not None:
            self.kind = kind


class RateLimitError(TodoistApiError):
    """Raised when the request budget is exhausted, locally or by Todoist (HTTP 429).

    ``reset_time`` is a UNIX timestamp in seconds.
    """

    kind = ErrorKind.RATE_LIMIT

    def __init__(self, message: str, reset_time: float | None = None):
        super().__init__(message, status_code=429)
        self.reset_time = reset_time

    @property
    def reset_at(self) -> datetime | None:
        """Return the reset time as an aware datetime."""
        if self.reset_time is None:
            return None
        return datetime.fromtimestamp(self.reset_time, UTC)


# Dispatch errors
class UnknownToolError(TodoistMCPError):
    """Raised when a tool name has no registered handler."""

    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name
