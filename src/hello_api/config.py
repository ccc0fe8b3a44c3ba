"""
Application configuration and environment variables.

This module unifies configuration using pydantic-settings.
Variables can come from:
1. .env file
2. System environment variables (have priority)
3. Default values

Naming convention:
- In Python code: snake_case (log_level)
- In .env or ENV vars: UPPER_CASE (LOG_LEVEL)
- Pydantic automatically converts between both

Settings are immutable: they are built once at startup and handed to the
application factory, which keeps them on ``app.state``.
"""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "staging", "production", "test"]

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    """
    Unified application configuration.

    All variables can be defined in:
    - .env file: VARIABLE_NAME=value
    - Environment variables: export VARIABLE_NAME=value

    Example:
        # In .env or as environment variable:
        PORT=8080
        ENVIRONMENT=staging
        LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allows using uppercase or lowercase
        extra="ignore",  # Ignores extra variables in .env
        frozen=True,
    )

    # ============================================================================
    # PROJECT SETTINGS
    # ============================================================================
    project_name: str = Field(default="Hello API", description="Project name")
    project_description: str = Field(
        default="Greeting, health and version endpoints",
        description="Project description",
    )
    environment: Environment = Field(
        default="development",
        description="Deployment environment reported by /api/version",
    )

    # ============================================================================
    # SERVER SETTINGS
    # ============================================================================
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=DEFAULT_PORT, description="Server port")
    enable_docs: bool = Field(
        default=False, description="Enable API documentation (Swagger/ReDoc)"
    )

    # ============================================================================
    # LOGGING SETTINGS
    # ============================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="human",
        description="Log output format: 'human' (coloured text) or 'json'",
    )

    # ============================================================================
    # VALIDATORS
    # ============================================================================

    @field_validator("port", mode="before")
    @classmethod
    def fallback_to_default_port(cls, value: Any) -> int:
        """
        Parse the port, falling back to the default when it is unusable.

        Args:
            value: Raw value from the environment or constructor.

        Returns:
            int: A port in 0..65535; 0 asks the OS for a free port.
        """
        try:
            port = int(str(value).strip())
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 0 <= port <= 65535:
            return DEFAULT_PORT
        return port

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, value: Any) -> Any:
        """Accept surrounding whitespace and any letter case."""
        if isinstance(value, str):
            return value.strip().lower()
        return value


# ============================================================================
# SINGLETON PATTERN - Global settings instance
# ============================================================================


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings (LRU cached).

    This function is cached, so the .env file is only read once.
    To refresh the configuration, clear the cache:
        get_settings.cache_clear()

    Returns:
        Settings: Application configuration instance.
    """
    return Settings()


# Global instance for process-level concerns (logging setup, CLI entry point)
settings = get_settings()
