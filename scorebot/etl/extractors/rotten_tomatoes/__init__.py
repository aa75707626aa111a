"""Rotten Tomatoes extractor package.

Classes:
    RTExtractor: Search + film page scraper.
    RTUrlBuilder: URL generation.
"""

from scorebot.etl.extractors.rotten_tomatoes.extractor import RTExtractor
from scorebot.etl.extractors.rotten_tomatoes.normalizer import normalize_tomatometer
from scorebot.etl.extractors.rotten_tomatoes.url_builder import RTUrlBuilder

__all__ = [
    "RTExtractor",
    "RTUrlBuilder",
    "normalize_tomatometer",
]
