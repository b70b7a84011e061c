"""Comment tools. Comments attach to either a task or a project."""

from ..client.todoist_api import TodoistApiClient
from ..models.todoist import CreateCommentRequest, ResourceId, UpdateCommentRequest
from .base import CommentIdArguments, ToolArguments, ToolDefinition, id_schema
from .results import ToolResult, created_result, json_result, message_result


class ListCommentsArguments(ToolArguments):
    task_id: ResourceId | None = None
    project_id: ResourceId | None = None


class UpdateCommentArguments(UpdateCommentRequest):
    comment_id: ResourceId


async def list_comments(client: TodoistApiClient, args: ListCommentsArguments) -> ToolResult:
    return json_result(await client.get_comments(args.task_id, args.project_id))


async def create_comment(client: TodoistApiClient, args: CreateCommentRequest) -> ToolResult:
    comment = await client.create_comment(args)
    return created_result("Comment created successfully", comment)


async def get_comment(client: TodoistApiClient, args: CommentIdArguments) -> ToolResult:
    return json_result(await client.get_comment(args.comment_id))


async def update_comment(client: TodoistApiClient, args: UpdateCommentArguments) -> ToolResult:
    await client.update_comment(args.comment_id, UpdateCommentRequest(content=args.content))
    return message_result("Comment updated successfully")


async def delete_comment(client: TodoistApiClient, args: CommentIdArguments) -> ToolResult:
    await client.delete_comment(args.comment_id)
    return message_result("Comment deleted successfully")


_PARENT_HINT = "(optional, either task_id or project_id required)"

TOOL_SCHEMAS: list[ToolDefinition] = [
    ToolDefinition(
        name="list_comments",
        description="List comments for a task or project",
        input_schema={
            "type": "object",
            "properties": {
                "task_id": {"type": "string", "description": f"Task ID {_PARENT_HINT}"},
                "project_id": {"type": "string", "description": f"Project ID {_PARENT_HINT}"},
            },
        },
        arguments=ListCommentsArguments,
        handler=list_comments,
    ),
    ToolDefinition(
        name="create_comment",
        description="Add a comment to a task or project",
        input_schema={
            "type": "object",
            "properties": {
                "content": {"type": "string", "description": "Comment content"},
                "task_id": {"type": "string", "description": f"Task ID {_PARENT_HINT}"},
                "project_id": {"type": "string", "description": f"Project ID {_PARENT_HINT}"},
                "attachment": {
                    "type": "object",
                    "description": "File attachment metadata (optional)",
                },
            },
            "required": ["content"],
        },
        arguments=CreateCommentRequest,
        handler=create_comment,
    ),
    ToolDefinition(
        name="get_comment",
        description="Get a specific comment by ID",
        input_schema=id_schema("comment_id", "Comment ID"),
        arguments=CommentIdArguments,
        handler=get_comment,
    ),
    ToolDefinition(
        name="update_comment",
        description="Update a comment",
        input_schema={
            "type": "object",
            "properties": {
                "comment_id": {"type": "string", "description": "Comment ID"},
                "content": {"type": "string", "description": "New comment content"},
            },
            "required": ["comment_id", "content"],
        },
        arguments=UpdateCommentArguments,
        handler=update_comment,
    ),
    ToolDefinition(
        name="delete_comment",
        description="Delete a comment",
        input_schema=id_schema("comment_id", "Comment ID"),
        arguments=CommentIdArguments,
        handler=delete_comment,
    ),
]
