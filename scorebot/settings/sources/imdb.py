"""IMDb scraping configuration settings.

Source A: user rating out of 10.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IMDBSettings(BaseSettings):
    """IMDb scraping configuration.

    Attributes:
        base_url: IMDb website origin, prefixed to relative title links.
    """

    base_url: str = Field(default="https://www.imdb.com", alias="IMDB_BASE_URL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def search_url(self) -> str:
        """Feature-film title search endpoint."""
        return f"{self.base_url}/find/"
