"""Configuration and logging setup."""

from .config import Settings, load_settings, validate_api_key
from .logging_config import setup_logging

__all__ = ["Settings", "load_settings", "setup_logging", "validate_api_key"]
