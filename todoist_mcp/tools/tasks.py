"""Task tools."""

from typing import Any

from ..client.todoist_api import TodoistApiClient
from ..models.todoist import (
    CreateTaskRequest,
    QuickAddRequest,
    ResourceId,
    TaskFilters,
    UpdateTaskRequest,
)
from .base import TaskIdArguments, ToolDefinition, id_schema
from .results import ToolResult, created_result, json_result, message_result


class UpdateTaskArguments(UpdateTaskRequest):
    task_id: ResourceId


# Fields shared by create_task and update_task
_TASK_FIELDS: dict[str, dict[str, Any]] = {
    "description": {"type": "string", "description": "Task description (optional)"},
    "project_id": {"type": "string", "description": "Project ID (optional, defaults to Inbox)"},
    "section_id": {"type": "string", "description": "Section ID (optional)"},
    "parent_id": {"type": "string", "description": "Parent task ID for subtasks (optional)"},
    "label_ids": {
        "type": "array",
        "items": {"type": "string"},
        "description": "Label IDs (optional)",
    },
    "priority": {"type": "number", "description": "Priority 1-4 (optional)"},
    "due_string": {"type": "string", "description": "Natural language due date (optional)"},
    "due_date": {"type": "string", "description": "Due date YYYY-MM-DD (optional)"},
    "due_datetime": {"type": "string", "description": "Due datetime RFC3339 (optional)"},
    "due_lang": {"type": "string", "description": "Language for date parsing (optional)"},
    "assignee": {"type": "string", "description": "Assignee user ID (optional)"},
}


async def list_tasks(client: TodoistApiClient, args: TaskFilters) -> ToolResult:
    return json_result(await client.get_tasks(args))


async def create_task(client: TodoistApiClient, args: CreateTaskRequest) -> ToolResult:
    task = await client.create_task(args)
    return created_result("Task created successfully", task)


async def get_task(client: TodoistApiClient, args: TaskIdArguments) -> ToolResult:
    return json_result(await client.get_task(args.task_id))


async def update_task(client: TodoistApiClient, args: UpdateTaskArguments) -> ToolResult:
    data = UpdateTaskRequest.model_validate(args.model_dump(exclude={"task_id"}))
    await client.update_task(args.task_id, data)
    return message_result("Task updated successfully")


async def close_task(client: TodoistApiClient, args: TaskIdArguments) -> ToolResult:
    await client.close_task(args.task_id)
    return message_result("Task marked as completed successfully")


async def reopen_task(client: TodoistApiClient, args: TaskIdArguments) -> ToolResult:
    await client.reopen_task(args.task_id)
    return message_result("Task reopened successfully")


async def delete_task(client: TodoistApiClient, args: TaskIdArguments) -> ToolResult:
    await client.delete_task(args.task_id)
    return message_result("Task deleted successfully")


async def quick_add_task(client: TodoistApiClient, args: QuickAddRequest) -> ToolResult:
    task = await client.quick_add_task(args)
    return created_result("Task created via quick add", task)


TOOL_SCHEMAS: list[ToolDefinition] = [
    ToolDefinition(
        name="list_tasks",
        description="List Todoist tasks with optional filters",
        input_schema={
            "type": "object",
            "properties": {
                "project_id": {"type": "string", "description": "Filter by project ID (optional)"},
                "section_id": {"type": "string", "description": "Filter by section ID (optional)"},
                "label_id": {"type": "string", "description": "Filter by label ID (optional)"},
                "filter": {"type": "string", "description": "Filter expression (optional)"},
                "ids": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Specific task IDs (optional)",
                },
            },
        },
        arguments=TaskFilters,
        handler=list_tasks,
    ),
    ToolDefinition(
        name="create_task",
        description="Create a new Todoist task",
        input_schema={
            "type": "object",
            "properties": {
                "content": {"type": "string", "description": "Task content/title"},
                **_TASK_FIELDS,
            },
            "required": ["content"],
        },
        arguments=CreateTaskRequest,
        handler=create_task,
    ),
    ToolDefinition(
        name="get_task",
        description="Get a specific Todoist task by ID",
        input_schema=id_schema("task_id", "Task ID"),
        arguments=TaskIdArguments,
        handler=get_task,
    ),
    ToolDefinition(
        name="update_task",
        description="Update a Todoist task",
        input_schema={
            "type": "object",
            "properties": {
                "task_id": {"type": "string", "description": "Task ID"},
                "content": {"type": "string", "description": "Task content/title (optional)"},
                **_TASK_FIELDS,
            },
            "required": ["task_id"],
        },
        arguments=UpdateTaskArguments,
        handler=update_task,
    ),
    ToolDefinition(
        name="close_task",
        description="Mark a Todoist task as completed",
        input_schema=id_schema("task_id", "Task ID"),
        arguments=TaskIdArguments,
        handler=close_task,
    ),
    ToolDefinition(
        name="reopen_task",
        description="Reopen a completed Todoist task",
        input_schema=id_schema("task_id", "Task ID"),
        arguments=TaskIdArguments,
        handler=reopen_task,
    ),
    ToolDefinition(
        name="delete_task",
        description="Delete a Todoist task",
        input_schema=id_schema("task_id", "Task ID"),
        arguments=TaskIdArguments,
        handler=delete_task,
    ),
    ToolDefinition(
        name="quick_add_task",
        description="Create a task using natural language (quick add)",
        input_schema={
            "type": "object",
            "properties": {
                "text": {
                    "type": "string",
                    "description": (
                        "Natural language task description "
                        '(e.g., "Submit report by Friday 5pm #Work p2")'
                    ),
                },
                "note": {"type": "string", "description": "Initial note/comment (optional)"},
                "reminder": {"type": "string", "description": "Reminder specification (optional)"},
                "project_id": {"type": "string", "description": "Override project ID (optional)"},
                "section_id": {"type": "string", "description": "Override section ID (optional)"},
                "parent_id": {"type": "string", "description": "Make this a subtask (optional)"},
                "due_lang": {"type": "string", "description": "Language for date parsing (optional)"},
                "priority": {"type": "number", "description": "Priority override 1-4 (optional)"},
            },
            "required": ["text"],
        },
        arguments=QuickAddRequest,
        handler=quick_add_task,
    ),
]
