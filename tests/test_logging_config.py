"""Tests for logging setup."""

import logging
import sys

import pytest

from todoist_mcp.core.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Restore root logger handlers and level after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_logs_to_stderr_only(self):
        """Test no handler writes to stdout, which carries MCP frames."""
        setup_logging(level="INFO")

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert handlers[0].stream is sys.stderr

    def test_level_from_argument(self):
        """Test an explicit level is applied to the root logger."""
        setup_logging(level="warning")

        assert logging.getLogger().level == logging.WARNING

    def test_level_from_env(self, monkeypatch):
        """Test LOG_LEVEL is used when no level is passed."""
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        setup_logging()

        assert logging.getLogger().level == logging.ERROR

    def test_unknown_level_falls_back_to_info(self):
        """Test a bogus level name does not raise."""
        setup_logging(level="chatty")

        assert logging.getLogger().level == logging.INFO

    def test_returns_named_logger(self):
        """Test the returned logger has the requested name."""
        logger = setup_logging(name="todoist_mcp.test", level="INFO")

        assert logger.name == "todoist_mcp.test"
