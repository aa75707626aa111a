"""Rotten Tomatoes score extractor.

Search rows are ``search-page-media-row`` custom elements exposing
the release year as an attribute and linking to absolute film URLs.
"""

from bs4 import BeautifulSoup

from scorebot.etl.extractors.base import BaseScoreExtractor
from scorebot.etl.extractors.rotten_tomatoes.normalizer import normalize_tomatometer
from scorebot.etl.extractors.rotten_tomatoes.url_builder import RTUrlBuilder
from scorebot.etl.types import SearchCandidate, SourceScore

RESULT_ROW_SELECTOR = "search-page-media-row[data-qa='data-row']"
RESULT_LINK_SELECTOR = "a[data-qa='info-name']"
CRITICS_SCORE_SELECTOR = "rt-button[slot='criticsScore']"


class RTExtractor(BaseScoreExtractor):
    """Scrapes the Tomatometer critics score (e.g. "81/100")."""

    name = "rotten_tomatoes"
    source_key = "rottenTomatoes"
    display_name = "Rotten Tomatoes"

    def build_search_url(self, title: str) -> str:
        return RTUrlBuilder.build_search_url(title)

    def build_detail_url(self, link: str) -> str:
        return RTUrlBuilder.build_full_url(link)

    def parse_candidates(self, html: str) -> list[SearchCandidate]:
        """Parse movie rows from the RT search page.

        Args:
            html: Search page HTML.

        Returns:
            Candidates in page order; rows without a link are skipped.
        """
        soup = BeautifulSoup(html, "html.parser")
        candidates: list[SearchCandidate] = []

        for row in soup.select(RESULT_ROW_SELECTOR):
            link = row.select_one(RESULT_LINK_SELECTOR)
            if link is None or not link.get("href"):
                continue
            candidates.append(
                SearchCandidate(
                    title=link.get_text(strip=True),
                    year=str(row.get("releaseyear", "")),
                    url=link["href"],
                )
            )

        return candidates

    def parse_score(self, html: str) -> SourceScore:
        """Extract the critics score button text.

        Args:
            html: Film page HTML.

        Returns:
            Score out of 100, or None.
        """
        soup = BeautifulSoup(html, "html.parser")
        button = soup.select_one(CRITICS_SCORE_SELECTOR)
        if button is None:
            return None
        return normalize_tomatometer(button.get_text(strip=True))
