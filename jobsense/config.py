"""Configuration loading for the JobSense webhook tools.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
- Hand tool configuration to the tools as explicit fields
"""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # n8n webhook configuration
    n8n_webhook_url: str = Field(
        default="",
        description="General n8n webhook URL",
    )
    n8n_job_search_webhook_url: str = Field(
        default="",
        description="n8n webhook URL for natural-language job search",
    )
    n8n_api_key: str = Field(
        default="",
        description="Bearer token sent to the n8n webhook",
    )
    n8n_timeout: int = Field(
        default=30000,
        description="Webhook request timeout in milliseconds",
    )
    source_identifier: str = Field(
        default="librechat",
        description="Platform identifier sent with structured workflow requests",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("n8n_timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Ensure the webhook timeout is positive."""
        if v <= 0:
            raise ValueError("n8n_timeout must be positive")
        return v

    @field_validator("n8n_webhook_url", "n8n_job_search_webhook_url", "n8n_api_key")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        return v.strip()

    def tool_fields(self) -> dict[str, Any]:
        """Tool configuration keyed by the environment variable names.

        Empty values are left out so the tools fall through to their
        next configuration source.
        """
        fields: dict[str, Any] = {
            "N8N_WEBHOOK_URL": self.n8n_webhook_url,
            "N8N_JOB_SEARCH_WEBHOOK_URL": self.n8n_job_search_webhook_url,
            "N8N_API_KEY": self.n8n_api_key,
            "N8N_TIMEOUT": self.n8n_timeout,
        }
        return {key: value for key, value in fields.items() if value}


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
