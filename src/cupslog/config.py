"""Configuration management using Pydantic Settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Diagnostics settings.

    Loaded from ``CUPSLOG_LOG_LEVEL`` and ``CUPSLOG_LOG_FORMAT`` only. What is
    scanned and how it is rendered comes from the command line, never from the
    environment, and no settings file is read.
    """

    model_config = SettingsConfigDict(
        env_prefix="CUPSLOG_",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "console"] = "console"


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
