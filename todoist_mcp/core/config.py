"""Configuration management for the Todoist MCP server."""

import logging
import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.errors import MissingAPIKeyError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.todoist.com/api/v1"
API_KEY_PATTERN = re.compile(r"[a-f0-9]{40}", re.IGNORECASE)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Todoist API
    todoist_api_key: str | None = Field(
        default=None,
        description="Todoist API token. Find it at: Settings -> Integrations -> Developer",
    )
    todoist_api_base_url: str = Field(
        default=DEFAULT_BASE_URL, description="Base URL of the Todoist REST API"
    )
    todoist_timeout: int = Field(
        default=15000, gt=0, description="Request timeout in milliseconds"
    )
    # Accepted for compatibility; no retry logic reads it.
    todoist_retry_attempts: int = Field(
        default=3, ge=0, description="Number of retry attempts (currently unused)"
    )

    # Logging
    debug: bool = Field(default=False, description="Enable verbose debug logging")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("todoist_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be joined with a leading slash."""
        return v.rstrip("/")

    @property
    def timeout_seconds(self) -> float:
        """Request timeout converted to seconds for httpx."""
        return self.todoist_timeout / 1000

    @property
    def effective_log_level(self) -> str:
        """DEBUG when the debug flag is set, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level.upper()


def load_settings(**overrides) -> Settings:
    """Load settings and make sure the Todoist API key is present.

    Args:
        **overrides: Values that take precedence over the environment

    Returns:
        Loaded Settings instance

    Raises:
        MissingAPIKeyError: If TODOIST_API_KEY is not set
    """
    settings = Settings(**overrides)
    if not settings.todoist_api_key:
        raise MissingAPIKeyError("TODOIST_API_KEY")

    logger.debug(
        f"Configuration loaded: base_url={settings.todoist_api_base_url}, "
        f"timeout={settings.todoist_timeout}ms, "
        f"retry_attempts={settings.todoist_retry_attempts}, debug={settings.debug}"
    )
    return settings


def validate_api_key(api_key: str) -> bool:
    """Check that an API key looks like a Todoist token (40 hex characters)."""
    return bool(API_KEY_PATTERN.fullmatch(api_key))
