"""IMDb URL builder."""

from urllib.parse import urlencode

from scorebot.settings import settings


class IMDBUrlBuilder:
    """Builds search and title page URLs for IMDb."""

    # Restrict results to titles of type feature film
    SEARCH_PARAMS = {"s": "tt", "ttype": "ft", "ref_": "fn_ft"}

    @classmethod
    def build_search_url(cls, title: str) -> str:
        """Build search page URL.

        Args:
            title: Film title to search.

        Returns:
            Complete search URL with the title query-encoded.
        """
        query = urlencode({"q": title, **cls.SEARCH_PARAMS})
        return f"{settings.imdb.search_url}?{query}"

    @classmethod
    def build_full_url(cls, relative_url: str) -> str:
        """Build full URL from a site-relative title link.

        Args:
            relative_url: Path such as ``/title/tt0112642/``.

        Returns:
            Absolute URL on the IMDb origin.
        """
        return f"{settings.imdb.base_url}{relative_url}"
