"""Configuration management for splitctl."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SPLITCTL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_format: Literal["text", "rich"] = Field(default="text", description="Log format")

    # Argument parsing
    collect_diagnostics: bool = Field(
        default=False, description="Report unknown flags as warnings instead of failing"
    )

    # Transport Configuration
    builtin_transport: bool = Field(default=True, description="Register the builtin tmux transport")
    tmux_binary: str = Field(default="tmux", description="tmux executable used by the builtin transport")


def get_settings() -> Settings:
    """Get application settings.

    Returns:
        Settings instance loaded from the environment and `.env`
    """
    return Settings()
