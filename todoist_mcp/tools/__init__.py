"""Todoist tools exposed over MCP."""

from .base import ToolDefinition
from .results import ToolResult

# Collect all tool schemas from every tool module.  Each module exposes a
# ``TOOL_SCHEMAS`` list of ``ToolDefinition`` entries; the dispatcher and the
# server iterate ``ALL_TOOL_SCHEMAS`` instead of registering tools by hand.
from .comments import TOOL_SCHEMAS as _comments_schemas
from .labels import TOOL_SCHEMAS as _labels_schemas
from .productivity import TOOL_SCHEMAS as _productivity_schemas
from .projects import TOOL_SCHEMAS as _projects_schemas
from .sections import TOOL_SCHEMAS as _sections_schemas
from .tasks import TOOL_SCHEMAS as _tasks_schemas

ALL_TOOL_SCHEMAS: list[ToolDefinition] = [
    *_projects_schemas,
    *_tasks_schemas,
    *_sections_schemas,
    *_comments_schemas,
    *_labels_schemas,
    *_productivity_schemas,
]

from .dispatcher import ToolDispatcher  # noqa: E402

__all__ = [
    "ALL_TOOL_SCHEMAS",
    "ToolDefinition",
    "ToolDispatcher",
    "ToolResult",
]
