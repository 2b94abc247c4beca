"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (FNEXPORT_ prefix) and .env file.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="FNEXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = Field(default="development", description="Environment (development/production)")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="WARNING", description="Logging level")

    # Export
    default_image: str = Field(
        default="gcr.io/kpt-dev/kpt:latest",
        description="Container image run by generated pipelines",
    )
    default_orchestrator: str = Field(
        default="tekton",
        description="CI engine used when none is given",
    )

    # Source
    default_filename_pattern: str = Field(
        default="%n_%k.yaml",
        description="Filename pattern for materialized resources",
    )
    default_printer: str = Field(default="events", description="Progress output format")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Fail fast on unknown log levels."""
        level = value.upper().strip()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: '{value}'. Valid: {', '.join(VALID_LOG_LEVELS)}")
        return level

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env.lower() == "production"


# Global settings instance
settings = Settings()
