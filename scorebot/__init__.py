"""ScoreBot: periodic IMDb, Rotten Tomatoes and Metacritic score scraper."""

__version__ = "1.0.0"
