"""Base configuration settings.

Contains foundational settings for paths, logging, and scraping.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIRNAME = "data"
DEFAULT_SNAPSHOT_FILENAME = "movie-scores.json"


# =============================================================================
# PATH SETTINGS
# =============================================================================


class PathsSettings(BaseSettings):
    """Data paths configuration.

    Directories are created on first write, not on load.

    Attributes:
        snapshot_file: Optional override for the snapshot document location.
    """

    snapshot_file: str | None = Field(default=None, alias="SNAPSHOT_PATH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def data_dir(self) -> Path:
        """Default data directory, relative to the working directory."""
        return Path.cwd() / DEFAULT_DATA_DIRNAME

    @property
    def snapshot_path(self) -> Path:
        """Location of the persisted score snapshot."""
        if self.snapshot_file:
            return Path(self.snapshot_file)
        return self.data_dir / DEFAULT_SNAPSHOT_FILENAME


# =============================================================================
# LOGGING SETTINGS
# =============================================================================


class LoggingSettings(BaseSettings):
    """Logging configuration.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_dir: Log files directory, created on first use.
    """

    level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="logs", alias="LOG_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid LOG_LEVEL. Valid: {valid_levels}")
        return v_upper


# =============================================================================
# SCRAPING SETTINGS
# =============================================================================


class ScrapingSettings(BaseSettings):
    """Scraping and scheduling configuration.

    Attributes:
        timeout: Request timeout (seconds).
        user_agent: Browser-like User-Agent sent with every page fetch.
        interval_seconds: Delay between two scheduled scrape runs.
        scheduler_enabled: Start the background scheduler with the API.
    """

    timeout: float = Field(default=30.0, alias="SCRAPING_TIMEOUT")
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/127.0.0.0 Safari/537.36"
        ),
        alias="SCRAPING_USER_AGENT",
    )
    interval_seconds: int = Field(default=3600, alias="SCRAPE_INTERVAL_SECONDS")
    scheduler_enabled: bool = Field(default=True, alias="SCHEDULER_ENABLED")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Reject non-positive timeouts."""
        if v <= 0:
            raise ValueError("SCRAPING_TIMEOUT must be positive")
        return v

    @field_validator("interval_seconds")
    @classmethod
    def validate_interval(cls, v: int) -> int:
        """Reject non-positive intervals."""
        if v <= 0:
            raise ValueError("SCRAPE_INTERVAL_SECONDS must be positive")
        return v
