"""Configuration loading for mediacheck."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mediacheck.utils.logging import LOG_LEVELS

LOG_FORMATS = ("text", "json")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="MEDIACHECK_")

    # Validation settings
    timeout_ms: int = Field(default=3000, description="Overall time budget for a run (ms)")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")

    # Logging settings
    log_level: str = Field(default="error", description="Logging level: info/warn/error")
    log_format: str = Field(default="text", description="Log format: text or json")

    @field_validator("timeout_ms")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate the time budget is positive."""
        if v <= 0:
            raise ValueError(
                f"MEDIACHECK_TIMEOUT_MS must be a positive number of milliseconds, got {v}."
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level."""
        v = v.strip().lower()
        if v not in LOG_LEVELS:
            raise ValueError(
                f"MEDIACHECK_LOG_LEVEL '{v}' is not one of info, warn, error."
            )
        return "warn" if v == "warning" else v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate the log format."""
        v = v.strip().lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"MEDIACHECK_LOG_FORMAT '{v}' is not one of text, json.")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
