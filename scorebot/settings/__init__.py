"""Centralized configuration for ScoreBot.

Every setting has a safe default; override via environment variables
or a .env file.

Usage:
    from scorebot.settings import settings

    settings.scraping.user_agent
    settings.paths.snapshot_path
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scorebot.settings.api import APISettings
from scorebot.settings.base import LoggingSettings, PathsSettings, ScrapingSettings
from scorebot.settings.sources import IMDBSettings, MetacriticSettings, RTSettings

__all__ = [
    # Main
    "Settings",
    "settings",
    # Base
    "PathsSettings",
    "LoggingSettings",
    "ScrapingSettings",
    # API
    "APISettings",
    # Sources
    "IMDBSettings",
    "RTSettings",
    "MetacriticSettings",
]


# =============================================================================
# GLOBAL SETTINGS
# =============================================================================


class Settings(BaseSettings):
    """Global application settings.

    Aggregates all configuration sections into a single object.
    Access via the singleton: `from scorebot.settings import settings`
    """

    environment: str = Field(default="development", alias="ENVIRONMENT")

    paths: PathsSettings = Field(default_factory=PathsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    scraping: ScrapingSettings = Field(default_factory=ScrapingSettings)

    # Sources
    imdb: IMDBSettings = Field(default_factory=IMDBSettings)
    rt: RTSettings = Field(default_factory=RTSettings)
    metacritic: MetacriticSettings = Field(default_factory=MetacriticSettings)

    api: APISettings = Field(default_factory=APISettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "production", "test"}
        v_lower = v.lower()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid ENVIRONMENT. Valid: {valid_envs}")
        return v_lower


# =============================================================================
# SINGLETON INSTANCE
# =============================================================================

settings = Settings()
