"""Todoist resource records and request shapes.

Records returned by the API are passed through untouched, so they are typed
with ``TypedDict`` only. Request shapes are pydantic models: they are built
from loosely-typed tool arguments and serialized without unset fields.
"""

from typing import Any, Literal, NotRequired, TypedDict

from pydantic import BaseModel, ConfigDict, StrictInt

# Todoist ids are numeric in older API versions and strings in v1. Booleans are
# rejected rather than coerced to 0 or 1.
ResourceId = StrictInt | str


# ---------------------------------------------------------------------------
# Resource records
# ---------------------------------------------------------------------------


class Project(TypedDict):
    id: ResourceId
    name: str
    comment_count: int
    order: int
    color: int | str
    shared: bool
    favorite: bool
    inbox_project: NotRequired[bool]
    team_inbox: NotRequired[bool]
    parent_id: ResourceId | None
    sync_id: ResourceId
    url: str


class Section(TypedDict):
    id: ResourceId
    project_id: ResourceId
    order: int
    name: str


class TaskDue(TypedDict):
    string: str
    date: str
    datetime: NotRequired[str]
    recurring: bool
    timezone: NotRequired[str]


class Task(TypedDict):
    id: ResourceId
    project_id: ResourceId
    section_id: ResourceId | None
    parent_id: ResourceId | None
    content: str
    description: str
    completed: bool
    priority: int
    due: TaskDue | None
    label_ids: list[ResourceId]
    url: str
    order: NotRequired[int]
    creator_id: NotRequired[ResourceId]
    created_at: NotRequired[str]
    assignee_id: NotRequired[ResourceId]


class Comment(TypedDict):
    id: ResourceId
    task_id: ResourceId | None
    project_id: ResourceId | None
    content: str
    posted: str
    attachment: dict[str, Any] | None


class Label(TypedDict):
    id: ResourceId
    name: str
    color: int | str
    order: int
    favorite: bool


class CompletedTasksResponse(TypedDict):
    items: list[Task]
    next_cursor: NotRequired[str]


class DayItems(TypedDict):
    day: str
    completed: int


class ProductivityStats(TypedDict):
    karma: float
    karma_trend: Literal["up", "down"]
    days_items: list[DayItems]


# ---------------------------------------------------------------------------
# Request shapes
# ---------------------------------------------------------------------------


class TodoistRequest(BaseModel):
    """Base class for request bodies and query filters."""

    model_config = ConfigDict(extra="ignore")

    def to_body(self) -> dict[str, Any]:
        """Serialize as a JSON body, omitting every field left unset."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_query(self) -> dict[str, str]:
        """Serialize as query parameters in field declaration order.

        Unset fields are dropped and list values are joined with commas.
        """
        params: dict[str, str] = {}
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)
            if value is None:
                continue
            if isinstance(value, list | tuple):
                params[field_name] = ",".join(str(item) for item in value)
            elif isinstance(value, bool):
                params[field_name] = "true" if value else "false"
            else:
                params[field_name] = str(value)
        return params


class CreateProjectRequest(TodoistRequest):
    name: str
    parent_id: ResourceId | None = None
    color: int | str | None = None
    favorite: bool | None = None


class UpdateProjectRequest(TodoistRequest):
    name: str | None = None
    color: int | str | None = None
    favorite: bool | None = None


class CreateSectionRequest(TodoistRequest):
    name: str
    project_id: ResourceId
    order: int | None = None


class UpdateSectionRequest(TodoistRequest):
    name: str | None = None
    order: int | None = None


class UpdateTaskRequest(TodoistRequest):
    content: str | None = None
    description: str | None = None
    project_id: ResourceId | None = None
    section_id: ResourceId | None = None
    parent_id: ResourceId | None = None
    label_ids: list[ResourceId] | None = None
    priority: int | None = None
    due_string: str | None = None
    due_date: str | None = None
    due_datetime: str | None = None
    due_lang: str | None = None
    assignee: ResourceId | None = None


class CreateTaskRequest(UpdateTaskRequest):
    content: str


class QuickAddRequest(TodoistRequest):
    text: str
    note: str | None = None
    reminder: str | None = None
    project_id: ResourceId | None = None
    section_id: ResourceId | None = None
    parent_id: ResourceId | None = None
    due_lang: str | None = None
    priority: int | None = None


class CreateCommentRequest(TodoistRequest):
    task_id: ResourceId | None = None
    project_id: ResourceId | None = None
    content: str
    attachment: dict[str, Any] | None = None


class UpdateCommentRequest(TodoistRequest):
    content: str


class UpdateLabelRequest(TodoistRequest):
    name: str | None = None
    color: int | str | None = None
    order: int | None = None
    favorite: bool | None = None


class CreateLabelRequest(UpdateLabelRequest):
    name: str


class TaskFilters(TodoistRequest):
    project_id: ResourceId | None = None
    section_id: ResourceId | None = None
    label_id: ResourceId | None = None
    filter: str | None = None
    ids: list[ResourceId] | None = None


class CompletionFilters(TodoistRequest):
    limit: int | None = None
    since: str | None = None
    until: str | None = None
