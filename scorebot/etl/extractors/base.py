"""Base score extractor abstract class.

Implements the two-step scrape shared by every source:
search page -> exact title/year match -> detail page -> score.
Subclasses only provide URL building and pure HTML parsing.
"""

import logging
from abc import ABC, abstractmethod

import httpx

from scorebot.etl.extractors.client import PageFetcher
from scorebot.etl.types import SearchCandidate, SourceScore
from scorebot.etl.utils.logger import setup_logger


class BaseScoreExtractor(ABC):
    """Abstract base class for all score extractors.

    Failures never leave ``fetch_score``: network errors and
    unexpected markup are logged and collapse to None.

    Attributes:
        name: Extractor identifier used for logger names (e.g., 'imdb').
        source_key: Key of this source in a MovieScoreRecord.
        display_name: Human-readable site name for log messages.
    """

    name: str = "base"
    source_key: str = ""
    display_name: str = "base"

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize extractor.

        Args:
            logger: Optional logger instance.
        """
        self._logger = logger or setup_logger(f"etl.{self.name}")

    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def fetch_score(
        self,
        fetcher: PageFetcher,
        title: str,
        year: int,
    ) -> SourceScore:
        """Scrape and normalize the score of one movie.

        Args:
            fetcher: Open page fetcher.
            title: Exact movie title.
            year: Release year.

        Returns:
            Normalized score string, or None if not found or on failure.
        """
        try:
            return await self._scrape(fetcher, title, year)
        except httpx.HTTPError as e:
            self._logger.error(f'Failed to scrape {self.display_name} for "{title}": {e!r}')
        except Exception as e:  # noqa: BLE001
            self._logger.error(
                f'Unexpected page content on {self.display_name} for "{title}": {e!r}'
            )
        return None

    @staticmethod
    def find_match(
        candidates: list[SearchCandidate],
        title: str,
        year: int,
    ) -> str | None:
        """Return the link of the first candidate matching title and year.

        Matching is exact and case-sensitive on both fields.

        Args:
            candidates: Parsed search results, in page order.
            title: Expected title.
            year: Expected release year.

        Returns:
            Candidate link or None.
        """
        expected_year = str(year)
        for candidate in candidates:
            if candidate["title"] == title and candidate["year"] == expected_year:
                return candidate["url"]
        return None

    # -------------------------------------------------------------------------
    # Source-specific hooks
    # -------------------------------------------------------------------------

    @abstractmethod
    def build_search_url(self, title: str) -> str:
        """Build the search page URL for a title."""

    @abstractmethod
    def build_detail_url(self, link: str) -> str:
        """Turn a link taken from the search listing into an absolute URL."""

    @abstractmethod
    def parse_candidates(self, html: str) -> list[SearchCandidate]:
        """Extract title, year and link from every search result row."""

    @abstractmethod
    def parse_score(self, html: str) -> SourceScore:
        """Locate and normalize the score on a detail page."""

    # -------------------------------------------------------------------------
    # Scrape flow
    # -------------------------------------------------------------------------

    async def _scrape(
        self,
        fetcher: PageFetcher,
        title: str,
        year: int,
    ) -> SourceScore:
        search_html = await fetcher.get_html(self.build_search_url(title))
        link = self.find_match(self.parse_candidates(search_html), title, year)

        if not link:
            self._logger.warning(f'No movie link found for "{title}" on {self.display_name}.')
            return None

        detail_html = await fetcher.get_html(self.build_detail_url(link))
        score = self.parse_score(detail_html)

        if score is None:
            self._logger.warning(f'Rating for "{title}" not found on {self.display_name}.')
        return score
