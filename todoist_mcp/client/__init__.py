"""Todoist REST API client."""

from .rate_limit import RATE_LIMIT, WINDOW_SECONDS, RateWindow
from .todoist_api import TodoistApiClient

__all__ = ["RATE_LIMIT", "WINDOW_SECONDS", "RateWindow", "TodoistApiClient"]
