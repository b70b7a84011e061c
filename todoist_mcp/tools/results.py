"""Tool result shape shared by every Todoist tool."""

import json
from dataclasses import dataclass, field
from typing import Any

from mcp.types import CallToolResult, TextContent


@dataclass
class ToolResult:
    """Text blocks returned for one tool call, plus an error flag."""

    content: list[str] = field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        """All text blocks joined with newlines."""
        return "\n".join(self.content)

    def to_call_tool_result(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=block) for block in self.content],
            isError=self.is_error,
        )


def to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2)


def json_result(payload: Any) -> ToolResult:
    """Result for read-only tools: the payload as JSON, nothing else."""
    return ToolResult(content=[to_json(payload)])


def created_result(message: str, payload: Any) -> ToolResult:
    """Result for create tools: a success phrase followed by the created entity."""
    return ToolResult(content=[f"{message}:\n{to_json(payload)}"])


def message_result(message: str) -> ToolResult:
    """Result for tools whose API call returns nothing (update, delete, close, reopen)."""
    return ToolResult(content=[message])


def error_result(message: str | None) -> ToolResult:
    return ToolResult(content=[f"Error: {message or 'Unknown error'}"], is_error=True)
