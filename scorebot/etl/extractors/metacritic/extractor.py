"""Metacritic score extractor.

Search results mix movies, games and shows; only rows tagged
``movie`` are considered.
"""

from bs4 import BeautifulSoup, Tag

from scorebot.etl.extractors.base import BaseScoreExtractor
from scorebot.etl.extractors.metacritic.normalizer import normalize_metascore
from scorebot.etl.extractors.metacritic.url_builder import MetacriticUrlBuilder
from scorebot.etl.types import SearchCandidate, SourceScore

RESULT_ROW_SELECTOR = "a.c-pageSiteSearch-results-item"
RESULT_TITLE_SELECTOR = "p.g-text-medium-fluid"
RESULT_YEAR_SELECTOR = "span.u-text-uppercase"
RESULT_TYPE_SELECTOR = "span.c-tagList_button"
METASCORE_SELECTOR = "div.c-siteReviewScore_background div.c-siteReviewScore"

MOVIE_TYPE = "movie"


class MetacriticExtractor(BaseScoreExtractor):
    """Scrapes the Metascore (e.g. "74/100")."""

    name = "metacritic"
    source_key = "metaCritic"
    display_name = "MetaCritic"

    def build_search_url(self, title: str) -> str:
        return MetacriticUrlBuilder.build_search_url(title)

    def build_detail_url(self, link: str) -> str:
        return MetacriticUrlBuilder.build_full_url(link)

    def parse_candidates(self, html: str) -> list[SearchCandidate]:
        """Parse movie rows from the search page.

        Args:
            html: Search page HTML.

        Returns:
            Movie candidates in page order.
        """
        soup = BeautifulSoup(html, "html.parser")
        candidates: list[SearchCandidate] = []

        for row in soup.select(RESULT_ROW_SELECTOR):
            if _first_text(row, RESULT_TYPE_SELECTOR) != MOVIE_TYPE:
                continue
            if not row.get("href"):
                continue
            candidates.append(
                SearchCandidate(
                    title=_first_text(row, RESULT_TITLE_SELECTOR),
                    year=_first_text(row, RESULT_YEAR_SELECTOR),
                    url=row["href"],
                )
            )

        return candidates

    def parse_score(self, html: str) -> SourceScore:
        """Extract the metascore from the movie page.

        Args:
            html: Movie page HTML.

        Returns:
            Score out of 100, or None.
        """
        soup = BeautifulSoup(html, "html.parser")
        score_element = soup.select_one(METASCORE_SELECTOR)
        if score_element is None:
            return None
        text = "".join(span.get_text() for span in score_element.find_all("span"))
        return normalize_metascore(text)


def _first_text(row: Tag, selector: str) -> str:
    """Return the stripped text of the first match, or an empty string."""
    element = row.select_one(selector)
    return element.get_text(strip=True) if element else ""
