"""Score aggregator.

Runs every extractor for every configured movie and assembles
one snapshot, then hands it to the snapshot store.
"""

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from scorebot.etl.catalog import MOVIES, MovieTitle
from scorebot.etl.extractors import (
    BaseScoreExtractor,
    IMDBExtractor,
    MetacriticExtractor,
    PageFetcher,
    RTExtractor,
)
from scorebot.etl.loaders.snapshot import SnapshotStore
from scorebot.etl.types import SOURCE_KEYS, MovieScoreRecord, Snapshot, SourceScore
from scorebot.etl.utils.logger import setup_logger

# =============================================================================
# AGGREGATION STATISTICS
# =============================================================================


@dataclass
class AggregationStats:
    """Statistics of one aggregation run.

    Attributes:
        start_time: Run start timestamp.
        end_time: Run end timestamp.
        movies: Number of movies processed.
        found: Scores obtained, per source key.
        absent: Scores missing, per source key.
    """

    start_time: datetime | None = None
    end_time: datetime | None = None
    movies: int = 0
    found: dict[str, int] = field(default_factory=lambda: dict.fromkeys(SOURCE_KEYS, 0))
    absent: dict[str, int] = field(default_factory=lambda: dict.fromkeys(SOURCE_KEYS, 0))

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration in seconds."""
        if not self.start_time or not self.end_time:
            return 0.0
        delta = self.end_time - self.start_time
        return round(delta.total_seconds(), 2)

    def record(self, scores: MovieScoreRecord) -> None:
        """Count found and absent scores of one movie.

        Args:
            scores: Completed record.
        """
        self.movies += 1
        for key in SOURCE_KEYS:
            if scores[key] is None:
                self.absent[key] += 1
            else:
                self.found[key] += 1

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "duration_seconds": self.duration_seconds,
            "movies": self.movies,
            "found": dict(self.found),
            "absent": dict(self.absent),
        }

    def log_summary(self, logger: logging.Logger) -> None:
        """Log run summary.

        Args:
            logger: Destination logger.
        """
        found = ", ".join(f"{key}={count}" for key, count in self.found.items())
        logger.info(
            "Scraping complete in %.2fs: %d movies (found: %s)",
            self.duration_seconds,
            self.movies,
            found,
        )


# =============================================================================
# AGGREGATOR
# =============================================================================


def default_extractors(logger: logging.Logger | None = None) -> list[BaseScoreExtractor]:
    """Build one extractor per source, in document key order."""
    return [
        IMDBExtractor(logger=logger),
        RTExtractor(logger=logger),
        MetacriticExtractor(logger=logger),
    ]


class ScoreAggregator:
    """Builds and persists score snapshots.

    The three extractors of a movie run concurrently and share one
    page fetcher; movies are processed one after another.

    Attributes:
        stats: Statistics of the last run.
    """

    def __init__(
        self,
        store: SnapshotStore | None = None,
        extractors: Sequence[BaseScoreExtractor] | None = None,
        fetcher_factory: Callable[[], PageFetcher] = PageFetcher,
        movies: Iterable[MovieTitle] = MOVIES,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize aggregator.

        Args:
            store: Snapshot store (default: store at the configured path).
            extractors: Source extractors (default: IMDb, RT, Metacritic).
            fetcher_factory: Callable returning a fresh page fetcher.
            movies: Movies to score.
            logger: Optional logger instance.
        """
        self._logger = logger or setup_logger("etl.aggregator")
        self._store = store or SnapshotStore()
        self._extractors = list(extractors) if extractors is not None else default_extractors()
        self._fetcher_factory = fetcher_factory
        self._movies = tuple(movies)
        self.stats = AggregationStats()

    @property
    def store(self) -> SnapshotStore:
        """Get the snapshot store."""
        return self._store

    # =========================================================================
    # Public API
    # =========================================================================

    async def run(self) -> Snapshot:
        """Collect a fresh snapshot and persist it.

        Returns:
            The written snapshot.

        Raises:
            SnapshotWriteError: If the snapshot cannot be saved.
        """
        snapshot = await self.collect()
        await asyncio.to_thread(self._store.write, snapshot)
        return snapshot

    async def collect(self) -> Snapshot:
        """Score every configured movie.

        Returns:
            Snapshot with one record per movie, in catalog order.
        """
        self.stats = AggregationStats(start_time=datetime.now())
        self._logger.info(f"Starting scrape of {len(self._movies)} movies")

        snapshot: Snapshot = {}
        async with self._fetcher_factory() as fetcher:
            for movie in self._movies:
                scores = await self._score_movie(fetcher, movie)
                snapshot[movie.name] = scores
                self.stats.record(scores)

        self.stats.end_time = datetime.now()
        self.stats.log_summary(self._logger)
        return snapshot

    # =========================================================================
    # Per-movie scoring
    # =========================================================================

    async def _score_movie(
        self,
        fetcher: PageFetcher,
        movie: MovieTitle,
    ) -> MovieScoreRecord:
        """Run all extractors for one movie.

        Args:
            fetcher: Open page fetcher.
            movie: Movie to score.

        Returns:
            Record holding every source key.
        """
        results = await asyncio.gather(
            *(extractor.fetch_score(fetcher, movie.name, movie.year) for extractor in self._extractors),
            return_exceptions=True,
        )

        scores: dict[str, SourceScore] = {}
        for extractor, result in zip(self._extractors, results):
            scores[extractor.source_key] = self._resolve(extractor, movie, result)

        return MovieScoreRecord(
            imdb=scores.get("imdb"),
            rottenTomatoes=scores.get("rottenTomatoes"),
            metaCritic=scores.get("metaCritic"),
        )

    def _resolve(
        self,
        extractor: BaseScoreExtractor,
        movie: MovieTitle,
        result: SourceScore | BaseException,
    ) -> SourceScore:
        """Map an extractor exception to an absent score."""
        if isinstance(result, BaseException):
            self._logger.error(
                f'{extractor.display_name} extractor raised for "{movie.name}": {result!r}'
            )
            return None
        return result
