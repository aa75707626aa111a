"""Score source settings.

Exports configuration classes for the three scraped sites:
- IMDb
- Rotten Tomatoes
- Metacritic
"""

from scorebot.settings.sources.imdb import IMDBSettings
from scorebot.settings.sources.metacritic import MetacriticSettings
from scorebot.settings.sources.rotten_tomatoes import RTSettings

__all__ = [
    "IMDBSettings",
    "RTSettings",
    "MetacriticSettings",
]
