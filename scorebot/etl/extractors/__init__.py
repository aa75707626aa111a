"""Score extractors package.

Provides one scraper per score source:
- IMDb: user rating out of 10
- Rotten Tomatoes: Tomatometer critics score
- Metacritic: Metascore

Classes:
    BaseScoreExtractor: Shared search -> match -> detail flow.
    PageFetcher: Async HTTP client with browser-like headers.
"""

from scorebot.etl.extractors.base import BaseScoreExtractor
from scorebot.etl.extractors.client import PageFetcher, PageFetcherError
from scorebot.etl.extractors.imdb import IMDBExtractor
from scorebot.etl.extractors.metacritic import MetacriticExtractor
from scorebot.etl.extractors.rotten_tomatoes import RTExtractor

__all__ = [
    # Base
    "BaseScoreExtractor",
    "PageFetcher",
    "PageFetcherError",
    # Sources
    "IMDBExtractor",
    "RTExtractor",
    "MetacriticExtractor",
]
