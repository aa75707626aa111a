"""Metacritic scraping configuration settings.

Source C: Metascore out of 100.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MetacriticSettings(BaseSettings):
    """Metacritic scraping configuration.

    Attributes:
        base_url: Metacritic website origin.
    """

    base_url: str = Field(
        default="https://www.metacritic.com",
        alias="METACRITIC_BASE_URL",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
