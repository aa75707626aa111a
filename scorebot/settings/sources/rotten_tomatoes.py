"""Rotten Tomatoes scraping configuration settings.

Source B: Tomatometer critics score.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RTSettings(BaseSettings):
    """Rotten Tomatoes scraping configuration.

    Attributes:
        base_url: RT website base URL.
    """

    base_url: str = Field(
        default="https://www.rottentomatoes.com",
        alias="RT_BASE_URL",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
