"""Pydantic schemas for API responses."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field

# =============================================================================
# HEALTH
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(examples=["healthy"])
    version: str = Field(examples=["1.0.0"])
    snapshot_available: bool = False
    scrape_running: bool = False
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


# =============================================================================
# MOVIE SCORES
# =============================================================================


class MovieScores(BaseModel):
    """Scores of one movie; null when a source yielded nothing."""

    imdb: str | None = Field(default=None, examples=["6.1/10"])
    rottenTomatoes: str | None = Field(default=None, examples=["22/100"])
    metaCritic: str | None = Field(default=None, examples=["49/100"])


class MessageResponse(BaseModel):
    """Plain confirmation or information message."""

    message: str


NO_DATA_MESSAGE = "No data found. Please run the scraper first."
SCRAPE_DONE_MESSAGE = "Scraping completed. Data is saved."
