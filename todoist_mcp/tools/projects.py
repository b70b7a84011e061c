"""Project tools."""

from ..client.todoist_api import TodoistApiClient
from ..models.todoist import CreateProjectRequest, ResourceId, UpdateProjectRequest
from .base import NoArguments, ProjectIdArguments, ToolDefinition, id_schema
from .results import ToolResult, created_result, json_result, message_result


class UpdateProjectArguments(UpdateProjectRequest):
    project_id: ResourceId


async def list_projects(client: TodoistApiClient, args: NoArguments) -> ToolResult:
    return json_result(await client.get_projects())


async def create_project(client: TodoistApiClient, args: CreateProjectRequest) -> ToolResult:
    project = await client.create_project(args)
    return created_result("Project created successfully", project)


async def get_project(client: TodoistApiClient, args: ProjectIdArguments) -> ToolResult:
    return json_result(await client.get_project(args.project_id))


async def update_project(client: TodoistApiClient, args: UpdateProjectArguments) -> ToolResult:
    data = UpdateProjectRequest.model_validate(args.model_dump(exclude={"project_id"}))
    await client.update_project(args.project_id, data)
    return message_result("Project updated successfully")


async def delete_project(client: TodoistApiClient, args: ProjectIdArguments) -> ToolResult:
    await client.delete_project(args.project_id)
    return message_result("Project deleted successfully")


async def get_project_collaborators(
    client: TodoistApiClient, args: ProjectIdArguments
) -> ToolResult:
    return json_result(await client.get_project_collaborators(args.project_id))


TOOL_SCHEMAS: list[ToolDefinition] = [
    ToolDefinition(
        name="list_projects",
        description="List all Todoist projects",
        input_schema={"type": "object", "properties": {}},
        arguments=NoArguments,
        handler=list_projects,
    ),
    ToolDefinition(
        name="create_project",
        description="Create a new Todoist project",
        input_schema={
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Project name"},
                "parent_id": {"type": "string", "description": "Parent project ID (optional)"},
                "color": {"type": "string", "description": "Color name (optional)"},
                "favorite": {"type": "boolean", "description": "Mark as favorite (optional)"},
            },
            "required": ["name"],
        },
        arguments=CreateProjectRequest,
        handler=create_project,
    ),
    ToolDefinition(
        name="get_project",
        description="Get a specific Todoist project by ID",
        input_schema=id_schema("project_id", "Project ID"),
        arguments=ProjectIdArguments,
        handler=get_project,
    ),
    ToolDefinition(
        name="update_project",
        description="Update a Todoist project",
        input_schema={
            "type": "object",
            "properties": {
                "project_id": {"type": "string", "description": "Project ID"},
                "name": {"type": "string", "description": "New project name (optional)"},
                "color": {"type": "string", "description": "Color name (optional)"},
                "favorite": {"type": "boolean", "description": "Favorite status (optional)"},
            },
            "required": ["project_id"],
        },
        arguments=UpdateProjectArguments,
        handler=update_project,
    ),
    ToolDefinition(
        name="delete_project",
        description="Delete a Todoist project",
        input_schema=id_schema("project_id", "Project ID"),
        arguments=ProjectIdArguments,
        handler=delete_project,
    ),
    ToolDefinition(
        name="get_project_collaborators",
        description="Get collaborators for a specific project",
        input_schema=id_schema("project_id", "Project ID"),
        arguments=ProjectIdArguments,
        handler=get_project_collaborators,
    ),
]
