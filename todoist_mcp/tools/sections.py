"""Section tools."""

from ..client.todoist_api import TodoistApiClient
from ..models.todoist import CreateSectionRequest, ResourceId, UpdateSectionRequest
from .base import SectionIdArguments, ToolArguments, ToolDefinition, id_schema
from .results import ToolResult, created_result, json_result, message_result


class ListSectionsArguments(ToolArguments):
    project_id: ResourceId | None = None


class UpdateSectionArguments(UpdateSectionRequest):
    section_id: ResourceId


async def list_sections(client: TodoistApiClient, args: ListSectionsArguments) -> ToolResult:
    return json_result(await client.get_sections(args.project_id))


async def create_section(client: TodoistApiClient, args: CreateSectionRequest) -> ToolResult:
    section = await client.create_section(args)
    return created_result("Section created successfully", section)


async def get_section(client: TodoistApiClient, args: SectionIdArguments) -> ToolResult:
    return json_result(await client.get_section(args.section_id))


async def update_section(client: TodoistApiClient, args: UpdateSectionArguments) -> ToolResult:
    data = UpdateSectionRequest.model_validate(args.model_dump(exclude={"section_id"}))
    await client.update_section(args.section_id, data)
    return message_result("Section updated successfully")


async def delete_section(client: TodoistApiClient, args: SectionIdArguments) -> ToolResult:
    await client.delete_section(args.section_id)
    return message_result("Section deleted successfully")


TOOL_SCHEMAS: list[ToolDefinition] = [
    ToolDefinition(
        name="list_sections",
        description="List sections, optionally filtered by project",
        input_schema={
            "type": "object",
            "properties": {
                "project_id": {
                    "type": "string",
                    "description": "Project ID to filter by (optional)",
                },
            },
        },
        arguments=ListSectionsArguments,
        handler=list_sections,
    ),
    ToolDefinition(
        name="create_section",
        description="Create a new section in a project",
        input_schema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Section name"},
                "project_id": {"type": "string", "description": "Project ID"},
                "order": {"type": "number", "description": "Sort order (optional)"},
            },
            "required": ["name", "project_id"],
        },
        arguments=CreateSectionRequest,
        handler=create_section,
    ),
    ToolDefinition(
        name="get_section",
        description="Get a specific section by ID",
        input_schema=id_schema("section_id", "Section ID"),
        arguments=SectionIdArguments,
        handler=get_section,
    ),
    ToolDefinition(
        name="update_section",
        description="Update a section",
        input_schema={
            "type": "object",
            "properties": {
                "section_id": {"type": "string", "description": "Section ID"},
                "name": {"type": "string", "description": "New section name (optional)"},
                "order": {"type": "number", "description": "New sort order (optional)"},
            },
            "required": ["section_id"],
        },
        arguments=UpdateSectionArguments,
        handler=update_section,
    ),
    ToolDefinition(
        name="delete_section",
        description="Delete a section",
        input_schema=id_schema("section_id", "Section ID"),
        arguments=SectionIdArguments,
        handler=delete_section,
    ),
]
