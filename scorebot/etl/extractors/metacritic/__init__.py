"""Metacritic extractor package.

Classes:
    MetacriticExtractor: Search + movie page scraper.
    MetacriticUrlBuilder: URL generation.
"""

from scorebot.etl.extractors.metacritic.extractor import MetacriticExtractor
from scorebot.etl.extractors.metacritic.normalizer import normalize_metascore
from scorebot.etl.extractors.metacritic.url_builder import MetacriticUrlBuilder

__all__ = [
    "MetacriticExtractor",
    "MetacriticUrlBuilder",
    "normalize_metascore",
]
