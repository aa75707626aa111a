"""Aggregation module for multi-source movie scores.

Example:
    >>> from scorebot.etl.aggregation import ScoreAggregator
    >>> aggregator = ScoreAggregator()
    >>> snapshot = await aggregator.run()
"""

from scorebot.etl.aggregation.aggregator import (
    AggregationStats,
    ScoreAggregator,
    default_extractors,
)

__all__ = [
    "ScoreAggregator",
    "AggregationStats",
    "default_extractors",
]
