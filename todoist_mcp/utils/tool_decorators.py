"""Decorators for standardizing tool error handling."""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

import pydantic

from .errors import ErrorKind, RateLimitError, TodoistApiError, TodoistMCPError

if TYPE_CHECKING:
    from ..tools.results import ToolResult

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable["ToolResult"]])


def handle_tool_errors(func: F) -> F:
    """Turn any exception raised by a tool call into an error-flagged ToolResult.

    The wrapped coroutine must take the tool name as its first argument after
    ``self``. On failure the caller receives ``Error: <message>`` with
    ``is_error`` set; nothing propagates.

    Example:
        class Dispatcher:
            @handle_tool_errors
            async def handle_tool(self, name: str, arguments: dict) -> ToolResult:
                ...
    """
    from ..tools.results import error_result

    @functools.wraps(func)
    async def wrapper(self: Any, name: str, *args: Any, **kwargs: Any) -> "ToolResult":
        log = getattr(self, "logger", logger)
        try:
            return await func(self, name, *args, **kwargs)
        except TodoistMCPError as e:
            match e.kind:
                case ErrorKind.RATE_LIMIT:
                    reset_at = e.reset_at if isinstance(e, RateLimitError) else None
                    log.warning(f"Tool {name} rate limited (resets at {reset_at})")
                case ErrorKind.UNKNOWN_TOOL:
                    log.warning(f"Tool {name} is not registered")
                case ErrorKind.REMOTE:
                    status = e.status_code if isinstance(e, TodoistApiError) else None
                    log.error(f"Tool {name} failed with Todoist API error {status}: {e}")
                case _:
                    log.error(f"Tool {name} failed: {e!r}")
            return error_result(str(e))
        except pydantic.ValidationError as e:
            log.error(f"Tool {name} validation error: {e}")
            return error_result(f"Invalid arguments for {name}: {e}")
        except Exception as e:
            log.exception(f"Tool {name} unexpected error: {e}")
            return error_result(str(e))

    return wrapper  # type: ignore[return-value]
