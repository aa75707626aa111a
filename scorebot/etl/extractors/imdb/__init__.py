"""IMDb extractor package.

Classes:
    IMDBExtractor: Search + title page scraper.
    IMDBUrlBuilder: URL generation.
"""

from scorebot.etl.extractors.imdb.extractor import IMDBExtractor
from scorebot.etl.extractors.imdb.normalizer import normalize_rating
from scorebot.etl.extractors.imdb.url_builder import IMDBUrlBuilder

__all__ = [
    "IMDBExtractor",
    "IMDBUrlBuilder",
    "normalize_rating",
]
