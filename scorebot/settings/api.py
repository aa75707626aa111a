"""API configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """FastAPI configuration.

    Attributes:
        host: API host address.
        port: API port.
        reload: Enable auto-reload in development.
        title: OpenAPI title.
        version: API version reported by /health.
    """

    host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=8000, alias="API_PORT")
    reload: bool = Field(default=False, alias="API_RELOAD")
    title: str = Field(default="ScoreBot API", alias="API_TITLE")
    version: str = Field(default="1.0.0", alias="API_VERSION")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
