"""Unit tests for ScoreAggregator."""

import asyncio
import json
import logging
import threading
from pathlib import Path

import pytest

from scorebot.etl.aggregation import AggregationStats, ScoreAggregator, default_extractors
from scorebot.etl.catalog import MOVIES, MovieTitle
from scorebot.etl.loaders import SnapshotStore, SnapshotWriteError
from scorebot.etl.types import SOURCE_KEYS
from tests.pages import (
    FakeFetcher,
    imdb_search_html,
    imdb_title_html,
    mc_movie_html,
    mc_search_html,
    rt_movie_html,
    rt_search_html,
)


class StubExtractor:
    """Extractor returning canned scores per title."""

    def __init__(self, source_key: str, scores: dict[str, str | None] | None = None) -> None:
        self.source_key = source_key
        self.display_name = source_key
        self.scores = scores or {}
        self.calls: list[tuple[str, int]] = []

    async def fetch_score(self, fetcher, title: str, year: int) -> str | None:
        self.calls.append((title, year))
        return self.scores.get(title)


class RaisingExtractor(StubExtractor):
    """Extractor that escapes its own error handling."""

    async def fetch_score(self, fetcher, title: str, year: int) -> str | None:
        raise RuntimeError("boom")


def _stubs(**overrides: StubExtractor) -> list[StubExtractor]:
    extractors = {key: StubExtractor(key, {"Casper": f"{key}-score"}) for key in SOURCE_KEYS}
    extractors.update(overrides)
    return [extractors[key] for key in SOURCE_KEYS]


@pytest.fixture()
def store(tmp_path: Path, test_logger: logging.Logger) -> SnapshotStore:
    return SnapshotStore(tmp_path / "scores.json", logger=test_logger)


# -------------------------------------------------------------------------
# collect()
# -------------------------------------------------------------------------


class TestCollect:
    @staticmethod
    async def test_every_movie_has_every_key(
        store: SnapshotStore,
        test_logger: logging.Logger,
    ) -> None:
        aggregator = ScoreAggregator(
            store=store,
            extractors=_stubs(),
            fetcher_factory=FakeFetcher,
            logger=test_logger,
        )

        snapshot = await aggregator.collect()

        assert list(snapshot) == [movie.name for movie in MOVIES]
        for record in snapshot.values():
            assert set(record) == set(SOURCE_KEYS)
        assert snapshot["Casper"] == {
            "imdb": "imdb-score",
            "rottenTomatoes": "rottenTomatoes-score",
            "metaCritic": "metaCritic-score",
        }
        assert snapshot["Toy Story"] == {"imdb": None, "rottenTomatoes": None, "metaCritic": None}

    @staticmethod
    async def test_extractors_receive_title_and_year(
        store: SnapshotStore,
        test_logger: logging.Logger,
    ) -> None:
        extractors = _stubs()
        movies = (MovieTitle("Casper", 1995), MovieTitle("Stand by Me", 1986))
        aggregator = ScoreAggregator(
            store=store,
            extractors=extractors,
            fetcher_factory=FakeFetcher,
            movies=movies,
            logger=test_logger,
        )

        await aggregator.collect()

        for extractor in extractors:
            assert extractor.calls == [("Casper", 1995), ("Stand by Me", 1986)]

    @staticmethod
    async def test_raising_extractor_isolated(
        store: SnapshotStore,
        test_logger: logging.Logger,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        aggregator = ScoreAggregator(
            store=store,
            extractors=_stubs(imdb=RaisingExtractor("imdb")),
            fetcher_factory=FakeFetcher,
            movies=(MovieTitle("Casper", 1995),),
            logger=test_logger,
        )

        with caplog.at_level(logging.ERROR):
            snapshot = await aggregator.collect()

        assert snapshot["Casper"] == {
            "imdb": None,
            "rottenTomatoes": "rottenTomatoes-score",
            "metaCritic": "metaCritic-score",
        }
        assert "boom" in caplog.text

    @staticmethod
    async def test_empty_catalog(store: SnapshotStore, test_logger: logging.Logger) -> None:
        aggregator = ScoreAggregator(
            store=store,
            extractors=_stubs(),
            fetcher_factory=FakeFetcher,
            movies=(),
            logger=test_logger,
        )

        assert await aggregator.collect() == {}

    @staticmethod
    async def test_sources_run_concurrently(
        store: SnapshotStore,
        test_logger: logging.Logger,
    ) -> None:
        started = asyncio.Event()
        running = 0
        peak = 0

        class SlowExtractor(StubExtractor):
            async def fetch_score(self, fetcher, title: str, year: int) -> str | None:
                nonlocal running, peak
                running += 1
                peak = max(peak, running)
                started.set()
                await asyncio.sleep(0.01)
                running -= 1
                return None

        aggregator = ScoreAggregator(
            store=store,
            extractors=[SlowExtractor(key) for key in SOURCE_KEYS],
            fetcher_factory=FakeFetcher,
            movies=(MovieTitle("Casper", 1995), MovieTitle("Toy Story", 1995)),
            logger=test_logger,
        )

        await aggregator.collect()

        assert started.is_set()
        assert peak == len(SOURCE_KEYS)

    @staticmethod
    async def test_end_to_end_with_real_extractors(
        store: SnapshotStore,
        test_logger: logging.Logger,
    ) -> None:
        extractors = default_extractors(logger=test_logger)
        imdb, rt, mc = extractors
        rt_url = "https://www.rottentomatoes.com/m/casper"
        pages = {
            imdb.build_search_url("Casper"): imdb_search_html(("Casper", "1995", "/title/tt0112642/")),
            imdb.build_detail_url("/title/tt0112642/"): imdb_title_html("6.1", "/10"),
            rt.build_search_url("Casper"): rt_search_html(("Casper", "1995", rt_url)),
            rt_url: rt_movie_html("22%"),
            mc.build_search_url("Casper"): mc_search_html(("Casper", "1995", "movie", "/movie/casper/")),
            mc.build_detail_url("/movie/casper/"): mc_movie_html("49"),
        }
        aggregator = ScoreAggregator(
            store=store,
            extractors=extractors,
            fetcher_factory=lambda: FakeFetcher(pages),
            movies=(MovieTitle("Casper", 1995), MovieTitle("Stand by Me", 1986)),
            logger=test_logger,
        )

        snapshot = await aggregator.collect()

        assert snapshot == {
            "Casper": {"imdb": "6.1/10", "rottenTomatoes": "22/100", "metaCritic": "49/100"},
            "Stand by Me": {"imdb": None, "rottenTomatoes": None, "metaCritic": None},
        }


# -------------------------------------------------------------------------
# run()
# -------------------------------------------------------------------------


class TestRun:
    @staticmethod
    async def test_run_persists_snapshot(store: SnapshotStore, test_logger: logging.Logger) -> None:
        aggregator = ScoreAggregator(
            store=store,
            extractors=_stubs(),
            fetcher_factory=FakeFetcher,
            logger=test_logger,
        )

        snapshot = await aggregator.run()

        assert store.read() == snapshot
        assert json.loads(store.path.read_text(encoding="utf-8")) == snapshot

    @staticmethod
    async def test_write_failure_propagates(test_logger: logging.Logger) -> None:
        class BrokenStore(SnapshotStore):
            def write(self, snapshot):
                raise SnapshotWriteError("disk full")

        aggregator = ScoreAggregator(
            store=BrokenStore(Path("unused.json"), logger=test_logger),
            extractors=_stubs(),
            fetcher_factory=FakeFetcher,
            logger=test_logger,
        )

        with pytest.raises(SnapshotWriteError):
            await aggregator.run()

    @staticmethod
    async def test_write_runs_off_event_loop_thread(
        tmp_path: Path,
        test_logger: logging.Logger,
    ) -> None:
        writer_threads: list[int] = []

        class RecordingStore(SnapshotStore):
            def write(self, snapshot):
                writer_threads.append(threading.get_ident())
                return super().write(snapshot)

        aggregator = ScoreAggregator(
            store=RecordingStore(tmp_path / "scores.json", logger=test_logger),
            extractors=_stubs(),
            fetcher_factory=FakeFetcher,
            movies=(MovieTitle("Casper", 1995),),
            logger=test_logger,
        )

        await aggregator.run()

        assert writer_threads
        assert writer_threads[0] != threading.get_ident()


# -------------------------------------------------------------------------
# Statistics
# -------------------------------------------------------------------------


class TestStats:
    @staticmethod
    async def test_counts_found_and_absent(
        store: SnapshotStore,
        test_logger: logging.Logger,
    ) -> None:
        aggregator = ScoreAggregator(
            store=store,
            extractors=_stubs(),
            fetcher_factory=FakeFetcher,
            logger=test_logger,
        )

        await aggregator.collect()
        stats = aggregator.stats.to_dict()

        assert stats["movies"] == len(MOVIES)
        assert stats["found"] == dict.fromkeys(SOURCE_KEYS, 1)
        assert stats["absent"] == dict.fromkeys(SOURCE_KEYS, len(MOVIES) - 1)
        assert aggregator.stats.end_time is not None

    @staticmethod
    def test_duration_without_times() -> None:
        assert AggregationStats().duration_seconds == 0.0
