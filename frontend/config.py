"""
Front-end Configuration Module

Web settings validated with pydantic-settings. Store settings
(MONGODB_URI, MONGODB_DB_NAME) are loaded separately by RepositoryConfig
because their absence is fatal.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BoardSettings(BaseSettings):
    """
    Job board web configuration.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(default="simple", description="Log format: simple or json")
    recent_jobs_limit: int = Field(
        default=6,
        ge=1,
        le=50,
        description="Number of recent jobs shown on the home page (1-50)"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        allowed = {"development", "staging", "production"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of: {', '.join(sorted(allowed))}")
        return v_lower

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in {"simple", "json"}:
            raise ValueError("log_format must be 'simple' or 'json'")
        return v.lower()


@lru_cache()
def get_settings() -> BoardSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached.
    """
    return BoardSettings()
