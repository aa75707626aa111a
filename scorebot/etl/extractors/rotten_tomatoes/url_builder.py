"""Rotten Tomatoes URL builder."""

from urllib.parse import quote_plus

from scorebot.settings import settings


class RTUrlBuilder:
    """Builds search URLs for Rotten Tomatoes."""

    @classmethod
    def build_search_url(cls, title: str) -> str:
        """Build search page URL.

        Args:
            title: Film title to search.

        Returns:
            Complete search URL.
        """
        return f"{settings.rt.base_url}/search?search={quote_plus(title)}"

    @classmethod
    def build_full_url(cls, url: str) -> str:
        """Return a film page URL taken from the search listing.

        RT search rows already link to absolute URLs, so the link
        is used as-is.

        Args:
            url: Film page URL from the listing.

        Returns:
            The same URL.
        """
        return url
