"""IMDb score extractor.

Search rows carry site-relative title links; the score is the
aggregate rating shown in the title page hero bar.
"""

from bs4 import BeautifulSoup

from scorebot.etl.extractors.base import BaseScoreExtractor
from scorebot.etl.extractors.imdb.normalizer import normalize_rating
from scorebot.etl.extractors.imdb.url_builder import IMDBUrlBuilder
from scorebot.etl.types import SearchCandidate, SourceScore

RESULT_ROW_SELECTOR = ".ipc-metadata-list-summary-item__c"
RESULT_TITLE_SELECTOR = "a.ipc-metadata-list-summary-item__t"
RESULT_YEAR_SELECTOR = "span.ipc-metadata-list-summary-item__li"
RATING_SELECTOR = 'div[data-testid="hero-rating-bar__aggregate-rating__score"]'


class IMDBExtractor(BaseScoreExtractor):
    """Scrapes the IMDb user rating (e.g. "8.1/10")."""

    name = "imdb"
    source_key = "imdb"
    display_name = "IMDb"

    def build_search_url(self, title: str) -> str:
        return IMDBUrlBuilder.build_search_url(title)

    def build_detail_url(self, link: str) -> str:
        return IMDBUrlBuilder.build_full_url(link)

    def parse_candidates(self, html: str) -> list[SearchCandidate]:
        """Parse the find page result list.

        Args:
            html: Search page HTML.

        Returns:
            Candidates in page order; rows without a link are skipped.
        """
        soup = BeautifulSoup(html, "html.parser")
        candidates: list[SearchCandidate] = []

        for row in soup.select(RESULT_ROW_SELECTOR):
            link = row.select_one(RESULT_TITLE_SELECTOR)
            if link is None or not link.get("href"):
                continue
            year = row.select_one(RESULT_YEAR_SELECTOR)
            candidates.append(
                SearchCandidate(
                    title=link.get_text(strip=True),
                    year=year.get_text(strip=True) if year else "",
                    url=link["href"],
                )
            )

        return candidates

    def parse_score(self, html: str) -> SourceScore:
        """Extract rating and scale from the hero rating bar.

        Args:
            html: Title page HTML.

        Returns:
            Score such as "8.1/10", or None.
        """
        soup = BeautifulSoup(html, "html.parser")
        rating_element = soup.select_one(RATING_SELECTOR)
        if rating_element is None:
            return None

        spans = rating_element.find_all("span")
        if not spans:
            return None

        rating = spans[0].get_text()
        max_score = spans[-1].get_text(strip=True)
        return normalize_rating(rating, max_score)
