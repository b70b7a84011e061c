"""Tool definition record used by every tool module.

Each module exposes a ``TOOL_SCHEMAS`` list of ``ToolDefinition`` entries with
the tool name, description, JSON input schema, pydantic argument model and
async handler. ``todoist_mcp.tools`` collects them into ``ALL_TOOL_SCHEMAS``.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mcp.types import Tool
from pydantic import BaseModel, ConfigDict

from ..models.todoist import ResourceId
from .results import ToolResult

if TYPE_CHECKING:
    from ..client.todoist_api import TodoistApiClient

ToolHandler = Callable[["TodoistApiClient", Any], Awaitable[ToolResult]]


class ToolArguments(BaseModel):
    """Base model for tool arguments. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class NoArguments(ToolArguments):
    pass


class ProjectIdArguments(ToolArguments):
    project_id: ResourceId


class TaskIdArguments(ToolArguments):
    task_id: ResourceId


class SectionIdArguments(ToolArguments):
    section_id: ResourceId


class CommentIdArguments(ToolArguments):
    comment_id: ResourceId


class LabelIdArguments(ToolArguments):
    label_id: ResourceId


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: dict[str, Any]
    arguments: type[BaseModel]
    handler: ToolHandler

    def to_tool(self) -> Tool:
        """Build the MCP descriptor advertised by ``list_tools``."""
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


def id_schema(field: str, description: str) -> dict[str, Any]:
    """Input schema for tools that take a single resource id."""
    return {
        "type": "object",
        "properties": {field: {"type": "string", "description": description}},
        "required": [field],
    }
