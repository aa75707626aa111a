"""Scheduled scraping.

An APScheduler interval job emits "run now" signals into a single-consumer
run controller. The controller serializes aggregator runs, so a
signal arriving during a run is dropped when one is already pending,
and direct callers (the API) wait for the current run to finish.

Lifecycle
----------
Create a ``ScrapeScheduler`` once, ``start()`` it on app boot and
``await stop()`` on shutdown. Wired into FastAPI via the ``lifespan``
context in ``scorebot.api.main``.
"""

import asyncio
import logging
from datetime import UTC, datetime

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from scorebot.etl.aggregation import ScoreAggregator
from scorebot.etl.types import Snapshot
from scorebot.etl.utils.logger import setup_logger

SCRAPE_JOB_ID = "scrape_movies"

# ---------------------------------------------------------------------------
# Run controller
# ---------------------------------------------------------------------------


class RunController:
    """Single consumer of run signals guarding the aggregator.

    At most one aggregator run executes at a time.
    """

    def __init__(
        self,
        aggregator: ScoreAggregator,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            aggregator: Aggregator to run.
            logger: Optional logger instance.
        """
        self._aggregator = aggregator
        self._logger = logger or setup_logger("etl.scheduler")
        self._signals: asyncio.Queue[None] = asyncio.Queue(maxsize=1)
        self._lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        """True while an aggregator run is in progress."""
        return self._lock.locked()

    def trigger(self) -> bool:
        """Request a run without waiting for it.

        Returns:
            False if a run request was already pending and this one is dropped.
        """
        try:
            self._signals.put_nowait(None)
        except asyncio.QueueFull:
            self._logger.debug("Run already pending, trigger dropped")
            return False
        return True

    async def run_once(self) -> Snapshot:
        """Run the aggregator, waiting for any run in progress first.

        Returns:
            The written snapshot.

        Raises:
            SnapshotWriteError: If the snapshot cannot be saved.
        """
        async with self._lock:
            return await self._aggregator.run()

    async def consume(self) -> None:
        """Process run signals forever.

        A failed run is logged and does not stop the loop.
        """
        while True:
            await self._signals.get()
            try:
                await self.run_once()
            except Exception:  # noqa: BLE001
                self._logger.exception("Scheduled scrape failed")
            finally:
                self._signals.task_done()


# ---------------------------------------------------------------------------
# Scheduler
# ---------------------------------------------------------------------------


class ScrapeScheduler:
    """Emits run signals on an interval and owns the consumer task.

    The first signal fires as soon as the scheduler starts.
    """

    def __init__(
        self,
        controller: RunController,
        interval_seconds: float,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize scheduler.

        Args:
            controller: Run controller to drive.
            interval_seconds: Delay between scheduled runs.
            logger: Optional logger instance.

        Raises:
            ValueError: If the interval is not positive.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._controller = controller
        self._interval = interval_seconds
        self._logger = logger or setup_logger("etl.scheduler")
        self._scheduler: AsyncIOScheduler | None = None
        self._consumer: asyncio.Task[None] | None = None

    @property
    def is_started(self) -> bool:
        """True once ``start()`` has been called and until ``stop()``."""
        return self._scheduler is not None

    def start(self) -> None:
        """Start the consumer task and the interval job on the running loop."""
        if self._scheduler is not None:
            return
        self._consumer = asyncio.create_task(self._controller.consume(), name="scrape-consumer")
        self._scheduler = self._build_scheduler()
        self._scheduler.start()
        self._logger.info(f"Scheduler started (every {self._interval:g}s)")

    async def stop(self) -> None:
        """Shut down the interval job, then cancel the consumer."""
        if self._scheduler is not None:
            self._scheduler.shutdown(wait=False)
            self._scheduler = None
        if self._consumer is not None:
            self._consumer.cancel()
            await asyncio.gather(self._consumer, return_exceptions=True)
            self._consumer = None
        self._logger.info("Scheduler stopped")

    def _build_scheduler(self) -> AsyncIOScheduler:
        """Build an APScheduler instance with the scrape job registered.

        Returns:
            Configured but not yet started scheduler.
        """
        scheduler = AsyncIOScheduler(timezone="UTC")
        scheduler.add_job(
            self._emit_signal,
            trigger="interval",
            seconds=self._interval,
            next_run_time=datetime.now(UTC),
            id=SCRAPE_JOB_ID,
            name="Scrape movie scores",
            replace_existing=True,
            coalesce=True,
            max_instances=1,
        )
        return scheduler

    async def _emit_signal(self) -> None:
        """Job body. Coroutine jobs run on the loop that owns the signal queue."""
        self._logger.debug("Running the scheduled movie scraper...")
        self._controller.trigger()
