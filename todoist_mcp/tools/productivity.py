"""Completed-task history and productivity statistics tools."""

from ..client.todoist_api import TodoistApiClient
from ..models.todoist import CompletionFilters, ResourceId
from .base import NoArguments, ToolArguments, ToolDefinition
from .results import ToolResult, json_result


class CompletedTasksArguments(ToolArguments):
    limit: int | None = None
    since: str | None = None


class CompletedTasksByProjectArguments(ToolArguments):
    project_id: ResourceId
    limit: int | None = None
    until: str | None = None


async def get_completed_tasks(
    client: TodoistApiClient, args: CompletedTasksArguments
) -> ToolResult:
    filters = CompletionFilters(limit=args.limit, since=args.since)
    return json_result(await client.get_completed_tasks(filters))


async def get_completed_tasks_by_project(
    client: TodoistApiClient, args: CompletedTasksByProjectArguments
) -> ToolResult:
    filters = CompletionFilters(limit=args.limit, until=args.until)
    return json_result(await client.get_completed_tasks_by_project(args.project_id, filters))


async def get_productivity_stats(client: TodoistApiClient, args: NoArguments) -> ToolResult:
    return json_result(await client.get_productivity_stats())


_LIMIT_FIELD = {"type": "number", "description": "Maximum number of tasks (default 30, max 200)"}

TOOL_SCHEMAS: list[ToolDefinition] = [
    ToolDefinition(
        name="get_completed_tasks",
        description="Get completed tasks with optional filters",
        input_schema={
            "type": "object",
            "properties": {
                "limit": _LIMIT_FIELD,
                "since": {
                    "type": "string",
                    "description": "Only tasks completed after this timestamp (RFC3339)",
                },
            },
        },
        arguments=CompletedTasksArguments,
        handler=get_completed_tasks,
    ),
    ToolDefinition(
        name="get_completed_tasks_by_project",
        description="Get completed tasks for a specific project",
        input_schema={
            "type": "object",
            "properties": {
                "project_id": {"type": "string", "description": "Project ID"},
                "limit": _LIMIT_FIELD,
                "until": {
                    "type": "string",
                    "description": "Only tasks completed before this date (YYYY-MM-DD)",
                },
            },
            "required": ["project_id"],
        },
        arguments=CompletedTasksByProjectArguments,
        handler=get_completed_tasks_by_project,
    ),
    ToolDefinition(
        name="get_productivity_stats",
        description="Get productivity statistics including karma and daily completion counts",
        input_schema={"type": "object", "properties": {}},
        arguments=NoArguments,
        handler=get_productivity_stats,
    ),
]
