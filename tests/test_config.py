"""Tests for the configuration module."""

from pathlib import Path

import pytest

from todoist_mcp.core.config import DEFAULT_BASE_URL, Settings, load_settings, validate_api_key
from todoist_mcp.utils.errors import MissingAPIKeyError

ENV_VARS = [
    "TODOIST_API_KEY",
    "TODOIST_API_BASE_URL",
    "TODOIST_TIMEOUT",
    "TODOIST_RETRY_ATTEMPTS",
    "DEBUG",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch):
    """Clear Todoist variables and run from a directory without a .env file."""
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


class TestSettings:
    """Tests for the Settings class."""

    def test_settings_defaults(self, clean_env):
        """Test Settings with default values."""
        settings = Settings(_env_file=None)

        assert settings.todoist_api_key is None
        assert settings.todoist_api_base_url == DEFAULT_BASE_URL
        assert settings.todoist_timeout == 15000
        assert settings.todoist_retry_attempts == 3
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_settings_from_env(self, clean_env, monkeypatch):
        """Test Settings loads values from environment variables."""
        monkeypatch.setenv("TODOIST_API_KEY", "abc123")
        monkeypatch.setenv("TODOIST_API_BASE_URL", "https://example.test/rest/v2/")
        monkeypatch.setenv("TODOIST_TIMEOUT", "5000")
        monkeypatch.setenv("TODOIST_RETRY_ATTEMPTS", "5")
        monkeypatch.setenv("DEBUG", "true")

        settings = Settings(_env_file=None)

        assert settings.todoist_api_key == "abc123"
        assert settings.todoist_api_base_url == "https://example.test/rest/v2"
        assert settings.todoist_timeout == 5000
        assert settings.todoist_retry_attempts == 5
        assert settings.debug is True

    def test_settings_from_env_file(self, clean_env, tmp_path: Path):
        """Test Settings reads a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("TODOIST_API_KEY=from-dotenv\nTODOIST_TIMEOUT=2500\n")

        settings = Settings(_env_file=env_file)

        assert settings.todoist_api_key == "from-dotenv"
        assert settings.todoist_timeout == 2500

    def test_timeout_seconds(self, clean_env):
        """Test the millisecond timeout is converted for httpx."""
        settings = Settings(todoist_timeout=2500, _env_file=None)

        assert settings.timeout_seconds == 2.5

    def test_invalid_timeout_rejected(self, clean_env):
        """Test a non-positive timeout fails validation."""
        with pytest.raises(ValueError):
            Settings(todoist_timeout=0, _env_file=None)

    def test_effective_log_level(self, clean_env):
        """Test the debug flag forces DEBUG logging."""
        assert Settings(log_level="warning", _env_file=None).effective_log_level == "WARNING"
        assert Settings(log_level="warning", debug=True, _env_file=None).effective_log_level == (
            "DEBUG"
        )

    def test_settings_are_frozen(self, clean_env):
        """Test configuration cannot be mutated after load."""
        settings = Settings(todoist_api_key="abc", _env_file=None)

        with pytest.raises(ValueError):
            settings.todoist_api_key = "other"


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_api_key_raises(self, clean_env):
        """Test load_settings fails without TODOIST_API_KEY."""
        with pytest.raises(MissingAPIKeyError, match="TODOIST_API_KEY"):
            load_settings(_env_file=None)

    def test_empty_api_key_raises(self, clean_env, monkeypatch):
        """Test an empty key counts as missing."""
        monkeypatch.setenv("TODOIST_API_KEY", "")

        with pytest.raises(MissingAPIKeyError):
            load_settings(_env_file=None)

    def test_loads_with_api_key(self, clean_env, monkeypatch):
        """Test load_settings returns settings when the key is present."""
        monkeypatch.setenv("TODOIST_API_KEY", "a" * 40)

        settings = load_settings(_env_file=None)

        assert settings.todoist_api_key == "a" * 40

    def test_overrides_take_precedence(self, clean_env, monkeypatch):
        """Test keyword overrides win over environment variables."""
        monkeypatch.setenv("TODOIST_API_KEY", "env-key")

        settings = load_settings(todoist_api_key="override-key", _env_file=None)

        assert settings.todoist_api_key == "override-key"


class TestValidateApiKey:
    """Tests for validate_api_key."""

    @pytest.mark.parametrize(
        "api_key",
        [
            "0123456789abcdef0123456789abcdef01234567",
            "0123456789ABCDEF0123456789ABCDEF01234567",
        ],
    )
    def test_valid_keys(self, api_key: str):
        assert validate_api_key(api_key) is True

    @pytest.mark.parametrize(
        "api_key",
        [
            "",
            "short",
            "0123456789abcdef0123456789abcdef0123456",  # 39 chars
            "0123456789abcdef0123456789abcdef012345678",  # 41 chars
            "g123456789abcdef0123456789abcdef01234567",  # non-hex
            "0123456789abcdef0123456789abcdef01234567\n",
        ],
    )
    def test_invalid_keys(self, api_key: str):
        assert validate_api_key(api_key) is False
