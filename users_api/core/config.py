"""
Configuration management using Pydantic Settings.

Type-safe configuration loaded from environment variables (and an optional
``.env`` file). Every field has a default so the service starts without any
environment at all; deployments override what they need.

Usage:
    from users_api.core.config import settings

    pattern = settings.password_pattern
    if settings.is_production:
        ...
"""

import re
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from users_api.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. ``.env`` file in the working directory
        3. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Users API",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Users service policy
    password_pattern: str = Field(
        default=r"^.{8,}$",
        description="Regular expression every new password must match",
    )
    allow_self_register: bool = Field(
        default=True,
        description="Allow unauthenticated-domain clients to register themselves",
    )

    # Authentication service
    auth_service_url: str = Field(
        default="http://localhost:9001",
        description="Base URL of the remote authentication service",
    )
    auth_request_timeout: float = Field(
        default=10.0,
        description="Timeout for authentication calls in seconds",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("auth_service_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("password_pattern")
    @classmethod
    def validate_password_pattern(cls, v: str) -> str:
        """
        Ensure the password pattern is a valid regular expression.

        Args:
            v: Pattern string.

        Returns:
            str: The unchanged pattern.

        Raises:
            ValueError: If the pattern does not compile.
        """
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"password_pattern is not a valid regex: {e}") from e
        return v

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance
settings = get_settings()
