"""Scraping, aggregation and persistence of movie scores."""

from scorebot.etl.aggregation import ScoreAggregator
from scorebot.etl.catalog import MOVIES, MovieTitle
from scorebot.etl.loaders import SnapshotStore
from scorebot.etl.scheduler import RunController, ScrapeScheduler

__all__ = [
    "MOVIES",
    "MovieTitle",
    "ScoreAggregator",
    "SnapshotStore",
    "RunController",
    "ScrapeScheduler",
]
