"""Metacritic URL builder."""

from urllib.parse import quote

from scorebot.settings import settings


class MetacriticUrlBuilder:
    """Builds search and movie page URLs for Metacritic."""

    @classmethod
    def build_search_url(cls, title: str) -> str:
        """Build search page URL.

        The title is a path segment, so slashes are encoded too.

        Args:
            title: Film title to search.

        Returns:
            Complete search URL.
        """
        return f"{settings.metacritic.base_url}/search/{quote(title, safe='')}"

    @classmethod
    def build_full_url(cls, relative_url: str) -> str:
        """Build full URL from a site-relative movie link.

        Args:
            relative_url: Path such as ``/movie/casper/``.

        Returns:
            Absolute URL on the Metacritic origin.
        """
        return f"{settings.metacritic.base_url}{relative_url}"
