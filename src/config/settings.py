"""Application settings and configuration."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application (hardcoded constants)
    app_name: str = "Canvas Forms API"
    app_version: str = "0.1.0"

    # Environment-specific settings
    debug: bool = False
    environment: str  # development, staging, production

    # API
    api_prefix: str = "/api"

    # CORS (comma separated origins of the web clients)
    cors_allow_origins: str | None = None

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "staging", "production"}
        env = str(v).lower()
        if env not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}, got {env}")
        return env

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_cors_origins(self) -> list[str]:
        """Return the configured CORS origins as a list.

        Blank entries are dropped and trailing slashes removed so that
        "https://app.example.com/" matches the browser's Origin header.
        """
        if not self.cors_allow_origins:
            return []
        origins = [origin.strip().rstrip("/") for origin in self.cors_allow_origins.split(",")]
        return [origin for origin in origins if origin]


settings = Settings()  # type: ignore[call-arg]
