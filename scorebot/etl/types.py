"""ETL data types.

TypedDict definitions for search candidates, per-movie score
records, and the aggregated snapshot document.
"""

from typing import TypedDict

SourceScore = str | None
"""Normalized score string, or None when the source yielded nothing."""


class SearchCandidate(TypedDict):
    """One row of a search-results listing."""

    title: str
    year: str
    url: str


MovieScoreRecord = TypedDict(
    "MovieScoreRecord",
    {
        "imdb": SourceScore,
        "rottenTomatoes": SourceScore,
        "metaCritic": SourceScore,
    },
)
"""Scores for one movie, keyed by source name."""

Snapshot = dict[str, MovieScoreRecord]
"""One completed run: movie title -> score record."""

SOURCE_KEYS: tuple[str, ...] = ("imdb", "rottenTomatoes", "metaCritic")
"""Source names present in every MovieScoreRecord, in document order."""
