"""Todoist REST API client.

Every outbound call goes through ``TodoistApiClient._request``, which checks
the local rate window, performs the HTTP exchange, counts it, and converts any
failure into a ``TodoistApiError`` (or ``RateLimitError``).

API documentation: https://developer.todoist.com/api/v1/
"""

import logging
import time
from typing import Any, Self

import httpx

from ..core.config import Settings
from ..models.todoist import (
    Comment,
    CompletedTasksResponse,
    CompletionFilters,
    CreateCommentRequest,
    CreateLabelRequest,
    CreateProjectRequest,
    CreateSectionRequest,
    CreateTaskRequest,
    Label,
    ProductivityStats,
    Project,
    QuickAddRequest,
    ResourceId,
    Section,
    Task,
    TaskFilters,
    UpdateCommentRequest,
    UpdateLabelRequest,
    UpdateProjectRequest,
    UpdateSectionRequest,
    UpdateTaskRequest,
)
from ..utils.errors import ErrorKind, RateLimitError, TodoistApiError
from .rate_limit import WINDOW_SECONDS, RateWindow


class TodoistApiClient:
    """Async client for the Todoist REST API.

    Usage:
        async with TodoistApiClient(settings) as client:
            projects = await client.get_projects()
    """

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        rate_window: RateWindow | None = None,
    ):
        """Initialize the client.

        Args:
            settings: Loaded configuration; ``todoist_api_key`` must be set
            logger: Logger to use instead of the module logger
            transport: Optional httpx transport (used by tests to stub the API)
            rate_window: Optional pre-built rate window
        """
        if not settings.todoist_api_key:
            raise ValueError("Todoist API key required. Set TODOIST_API_KEY environment variable.")

        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)
        self.rate_window = rate_window or RateWindow()
        self._client = httpx.AsyncClient(
            base_url=settings.todoist_api_base_url,
            timeout=settings.timeout_seconds,
            headers={
                "Authorization": f"Bearer {settings.todoist_api_key}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # =========================================================================
    # Request pipeline
    # =========================================================================

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Check the rate window, send the request, count it, normalize failures."""
        self.rate_window.check()

        try:
            response = await self._client.request(method, path, params=params or None, json=json)
            response.raise_for_status()
            return response
        except Exception as e:
            raise self._normalize_error(e) from e
        finally:
            self.rate_window.record()
            self.logger.debug(
                f"{method} {path} done, {self.rate_window.remaining} requests left in window"
            )

    def _normalize_error(self, error: Exception) -> TodoistApiError:
        """Convert a transport or HTTP failure into a TodoistApiError."""
        if isinstance(error, httpx.HTTPStatusError):
            status = error.response.status_code
            body = _decode_body(error.response)
            message = _error_message(body) or str(error) or "HTTP error"

            self.logger.error(f"Todoist API error: {status} - {message}")

            if status == 429:
                return RateLimitError("Rate limit exceeded", reset_time=time.time() + WINDOW_SECONDS)
            return TodoistApiError(message, status_code=status, response=body)

        if isinstance(error, httpx.HTTPError):
            message = str(error) or type(error).__name__
            self.logger.error(f"Todoist API error: None - {message}")
            return TodoistApiError(message)

        self.logger.error(f"Unexpected error calling Todoist API: {error!r}")
        return TodoistApiError("Unknown API error", response=error, kind=ErrorKind.OTHER)

    def _json(self, response: httpx.Response) -> Any:
        """Decode a successful response body; a non-JSON body is an API failure."""
        try:
            return response.json()
        except ValueError as e:
            raise self._normalize_error(e) from e

    async def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        response = await self._request("GET", path, params=params)
        return self._json(response)

    async def _post(self, path: str, data: dict[str, Any] | None = None) -> httpx.Response:
        return await self._request("POST", path, json=data)

    async def _delete(self, path: str) -> None:
        await self._request("DELETE", path)

    # =========================================================================
    # Projects
    # =========================================================================

    async def get_projects(self) -> list[Project]:
        self.logger.debug("Fetching all projects")
        return await self._get("/projects")

    async def create_project(self, data: CreateProjectRequest) -> Project:
        self.logger.debug(f"Creating project: {data}")
        response = await self._post("/projects", data.to_body())
        return self._json(response)

    async def get_project(self, project_id: ResourceId) -> Project:
        self.logger.debug(f"Fetching project {project_id}")
        return await self._get(f"/projects/{project_id}")

    async def update_project(self, project_id: ResourceId, data: UpdateProjectRequest) -> None:
        """Update a project. Todoist does not echo the new state; re-fetch to observe it."""
        self.logger.debug(f"Updating project {project_id}: {data}")
        await self._post(f"/projects/{project_id}", data.to_body())

    async def delete_project(self, project_id: ResourceId) -> None:
        self.logger.debug(f"Deleting project {project_id}")
        await self._delete(f"/projects/{project_id}")

    async def get_project_collaborators(self, project_id: ResourceId) -> list[dict[str, Any]]:
        self.logger.debug(f"Fetching collaborators for project {project_id}")
        return await self._get(f"/projects/{project_id}/collaborators")

    # =========================================================================
    # Tasks
    # =========================================================================

    async def get_tasks(self, filters: TaskFilters | None = None) -> list[Task]:
        self.logger.debug(f"Fetching tasks with filters: {filters}")
        params = filters.to_query() if filters is not None else None
        return await self._get("/tasks", params)

    async def create_task(self, data: CreateTaskRequest) -> Task:
        self.logger.debug(f"Creating task: {data}")
        response = await self._post("/tasks", data.to_body())
        return self._json(response)

    async def get_task(self, task_id: ResourceId) -> Task:
        self.logger.debug(f"Fetching task {task_id}")
        return await self._get(f"/tasks/{task_id}")

    async def update_task(self, task_id: ResourceId, data: UpdateTaskRequest) -> None:
        """Update a task. Todoist does not echo the new state; re-fetch to observe it."""
        self.logger.debug(f"Updating task {task_id}: {data}")
        await self._post(f"/tasks/{task_id}", data.to_body())

    async def close_task(self, task_id: ResourceId) -> None:
        self.logger.debug(f"Closing task {task_id}")
        await self._post(f"/tasks/{task_id}/close")

    async def reopen_task(self, task_id: ResourceId) -> None:
        self.logger.debug(f"Reopening task {task_id}")
        await self._post(f"/tasks/{task_id}/reopen")

    async def delete_task(self, task_id: ResourceId) -> None:
        self.logger.debug(f"Deleting task {task_id}")
        await self._delete(f"/tasks/{task_id}")

    async def quick_add_task(self, data: QuickAddRequest) -> Task:
        """Create a task from natural language; Todoist parses dates, projects and labels."""
        self.logger.debug(f"Quick adding task: {data}")
        response = await self._post("/quick/add", data.to_body())
        return self._json(response)

    # =========================================================================
    # Sections
    # =========================================================================

    async def get_sections(self, project_id: ResourceId | None = None) -> list[Section]:
        self.logger.debug(f"Fetching sections for project {project_id}")
        params = {"project_id": str(project_id)} if project_id is not None else None
        return await self._get("/sections", params)

    async def create_section(self, data: CreateSectionRequest) -> Section:
        self.logger.debug(f"Creating section: {data}")
        response = await self._post("/sections", data.to_body())
        return self._json(response)

    async def get_section(self, section_id: ResourceId) -> Section:
        self.logger.debug(f"Fetching section {section_id}")
        return await self._get(f"/sections/{section_id}")

    async def update_section(self, section_id: ResourceId, data: UpdateSectionRequest) -> None:
        self.logger.debug(f"Updating section {section_id}: {data}")
        await self._post(f"/sections/{section_id}", data.to_body())

    async def delete_section(self, section_id: ResourceId) -> None:
        self.logger.debug(f"Deleting section {section_id}")
        await self._delete(f"/sections/{section_id}")

    # =========================================================================
    # Comments
    # =========================================================================

    async def get_comments(
        self, task_id: ResourceId | None = None, project_id: ResourceId | None = None
    ) -> list[Comment]:
        self.logger.debug(f"Fetching comments for task={task_id}, project={project_id}")
        params: dict[str, str] = {}
        if task_id is not None:
            params["task_id"] = str(task_id)
        if project_id is not None:
            params["project_id"] = str(project_id)
        return await self._get("/comments", params)

    async def create_comment(self, data: CreateCommentRequest) -> Comment:
        self.logger.debug(f"Creating comment: {data}")
        response = await self._post("/comments", data.to_body())
        return self._json(response)

    async def get_comment(self, comment_id: ResourceId) -> Comment:
        self.logger.debug(f"Fetching comment {comment_id}")
        return await self._get(f"/comments/{comment_id}")

    async def update_comment(self, comment_id: ResourceId, data: UpdateCommentRequest) -> None:
        self.logger.debug(f"Updating comment {comment_id}: {data}")
        await self._post(f"/comments/{comment_id}", data.to_body())

    async def delete_comment(self, comment_id: ResourceId) -> None:
        self.logger.debug(f"Deleting comment {comment_id}")
        await self._delete(f"/comments/{comment_id}")

    # =========================================================================
    # Labels
    # =========================================================================

    async def get_labels(self) -> list[Label]:
        self.logger.debug("Fetching labels")
        return await self._get("/labels")

    async def create_label(self, data: CreateLabelRequest) -> Label:
        self.logger.debug(f"Creating label: {data}")
        response = await self._post("/labels", data.to_body())
        return self._json(response)

    async def get_label(self, label_id: ResourceId) -> Label:
        self.logger.debug(f"Fetching label {label_id}")
        return await self._get(f"/labels/{label_id}")

    async def update_label(self, label_id: ResourceId, data: UpdateLabelRequest) -> None:
        self.logger.debug(f"Updating label {label_id}: {data}")
        await self._post(f"/labels/{label_id}", data.to_body())

    async def delete_label(self, label_id: ResourceId) -> None:
        self.logger.debug(f"Deleting label {label_id}")
        await self._delete(f"/labels/{label_id}")

    # =========================================================================
    # Completed tasks and productivity
    # =========================================================================

    async def get_completed_tasks(
        self, filters: CompletionFilters | None = None
    ) -> CompletedTasksResponse:
        self.logger.debug(f"Fetching completed tasks with filters: {filters}")
        params = filters.to_query() if filters is not None else None
        return await self._get("/completed/get_all", params)

    async def get_completed_tasks_by_project(
        self, project_id: ResourceId, filters: CompletionFilters | None = None
    ) -> CompletedTasksResponse:
        self.logger.debug(f"Fetching completed tasks for project {project_id}: {filters}")
        params = {"project_id": str(project_id)}
        if filters is not None:
            params.update(filters.to_query())
        return await self._get("/completed/get_project", params)

    async def get_productivity_stats(self) -> ProductivityStats:
        self.logger.debug("Fetching productivity stats")
        return await self._get("/completed/get_stats")

    # =========================================================================
    # Health
    # =========================================================================

    async def health_check(self) -> bool:
        """Return True if the project listing succeeds; never raises."""
        try:
            await self.get_projects()
            return True
        except Exception as e:
            self.logger.error(f"Health check failed: {e}")
            return False


def _decode_body(response: httpx.Response) -> Any:
    """Best-effort decode of an error response body."""
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _error_message(body: Any) -> str | None:
    if isinstance(body, dict):
        error = body.get("error")
        if error:
            return str(error)
    return None
