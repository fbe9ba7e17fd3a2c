"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from src.config.settings import Settings


class TestSettings:
    """Test settings parsing and validation."""

    def test_environment_is_lowercased(self):
        """Test the environment name is lowercased."""
        assert Settings(environment="PRODUCTION").environment == "production"

    def test_invalid_environment_rejected(self):
        """Test an unknown environment is rejected."""
        with pytest.raises(ValidationError, match="Environment must be one of"):
            Settings(environment="qa")

    def test_log_level_is_uppercased(self):
        """Test the log level name is uppercased."""
        assert Settings(environment="development", log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        """Test an unknown log level is rejected."""
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(environment="development", log_level="loud")


class TestCorsOrigins:
    """Test parsing of the CORS origin list."""

    def test_none_returns_empty_list(self):
        """Test no configured origins gives an empty list."""
        assert Settings(environment="development", cors_allow_origins=None).get_cors_origins() == []

    def test_parses_and_normalizes(self):
        """Test origins are split, trimmed and stripped of trailing slashes."""
        settings = Settings(
            environment="development",
            cors_allow_origins=" https://app.example.com/ , ,http://localhost:5173",
        )
        assert settings.get_cors_origins() == ["https://app.example.com", "http://localhost:5173"]
