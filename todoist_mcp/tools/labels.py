"""Label tools."""

from ..client.todoist_api import TodoistApiClient
from ..models.todoist import CreateLabelRequest, ResourceId, UpdateLabelRequest
from .base import LabelIdArguments, NoArguments, ToolDefinition, id_schema
from .results import ToolResult, created_result, json_result, message_result


class UpdateLabelArguments(UpdateLabelRequest):
    label_id: ResourceId


async def list_labels(client: TodoistApiClient, args: NoArguments) -> ToolResult:
    return json_result(await client.get_labels())


async def create_label(client: TodoistApiClient, args: CreateLabelRequest) -> ToolResult:
    label = await client.create_label(args)
    return created_result("Label created successfully", label)


async def get_label(client: TodoistApiClient, args: LabelIdArguments) -> ToolResult:
    return json_result(await client.get_label(args.label_id))


async def update_label(client: TodoistApiClient, args: UpdateLabelArguments) -> ToolResult:
    data = UpdateLabelRequest.model_validate(args.model_dump(exclude={"label_id"}))
    await client.update_label(args.label_id, data)
    return message_result("Label updated successfully")


async def delete_label(client: TodoistApiClient, args: LabelIdArguments) -> ToolResult:
    await client.delete_label(args.label_id)
    return message_result("Label deleted successfully")


TOOL_SCHEMAS: list[ToolDefinition] = [
    ToolDefinition(
        name="list_labels",
        description="List all labels",
        input_schema={"type": "object", "properties": {}},
        arguments=NoArguments,
        handler=list_labels,
    ),
    ToolDefinition(
        name="create_label",
        description="Create a new label",
        input_schema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Label name"},
                "color": {"type": "string", "description": "Color name (optional)"},
                "order": {"type": "number", "description": "Sort order (optional)"},
                "favorite": {"type": "boolean", "description": "Mark as favorite (optional)"},
            },
            "required": ["name"],
        },
        arguments=CreateLabelRequest,
        handler=create_label,
    ),
    ToolDefinition(
        name="get_label",
        description="Get a specific label by ID",
        input_schema=id_schema("label_id", "Label ID"),
        arguments=LabelIdArguments,
        handler=get_label,
    ),
    ToolDefinition(
        name="update_label",
        description="Update a label",
        input_schema={
            "type": "object",
            "properties": {
                "label_id": {"type": "string", "description": "Label ID"},
                "name": {"type": "string", "description": "New label name (optional)"},
                "color": {"type": "string", "description": "Color name (optional)"},
                "order": {"type": "number", "description": "Sort order (optional)"},
                "favorite": {"type": "boolean", "description": "Favorite status (optional)"},
            },
            "required": ["label_id"],
        },
        arguments=UpdateLabelArguments,
        handler=update_label,
    ),
    ToolDefinition(
        name="delete_label",
        description="Delete a label",
        input_schema=id_schema("label_id", "Label ID"),
        arguments=LabelIdArguments,
        handler=delete_label,
    ),
]
