"""Shared FastAPI dependencies.

Provides the snapshot store and the run controller as cached
singletons so that the scheduler and the endpoints share one
controller, and tests can override them.
"""

from functools import lru_cache

from scorebot.etl.aggregation import ScoreAggregator
from scorebot.etl.loaders import SnapshotStore
from scorebot.etl.scheduler import RunController


@lru_cache(maxsize=1)
def get_snapshot_store() -> SnapshotStore:
    """Get cached snapshot store at the configured path."""
    return SnapshotStore()


@lru_cache(maxsize=1)
def get_run_controller() -> RunController:
    """Get cached run controller wrapping the default aggregator."""
    return RunController(ScoreAggregator(store=get_snapshot_store()))
