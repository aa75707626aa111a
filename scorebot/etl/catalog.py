"""Fixed list of movies tracked by the scraper."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MovieTitle:
    """A movie identified by its display name and release year."""

    name: str
    year: int


MOVIES: tuple[MovieTitle, ...] = (
    MovieTitle("Casper", 1995),
    MovieTitle("Drop Dead Fred", 1991),
    MovieTitle("Dumb and Dumber", 1994),
    MovieTitle("Stand by Me", 1986),
    MovieTitle("Toy Story", 1995),
)
