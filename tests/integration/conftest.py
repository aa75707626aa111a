"""Shared fixtures for API integration tests.

Uses the module-level ``app`` from ``scorebot.api.main``. The snapshot
store and run controller are overridden with instances bound to a
temporary directory and an offline page fetcher, so no test touches
the network. ASGITransport does not run the lifespan, so the
scheduler stays off.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from scorebot.api.dependencies import get_run_controller, get_snapshot_store
from scorebot.etl.aggregation import ScoreAggregator
from scorebot.etl.catalog import MovieTitle
from scorebot.etl.loaders import SnapshotStore
from scorebot.etl.scheduler import RunController
from tests.pages import FakeFetcher

# ---------------------------------------------------------------------------
# Auto-mark all tests in this directory as "integration"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply ``@pytest.mark.integration`` to every test collected here."""
    integration_marker = pytest.mark.integration
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(integration_marker)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def store(tmp_path: Path) -> SnapshotStore:
    """Snapshot store in a temporary directory."""
    return SnapshotStore(tmp_path / "api" / "movie-scores.json")


@pytest.fixture
def controller(store: SnapshotStore) -> RunController:
    """Run controller over an aggregator that never reaches the network."""
    aggregator = ScoreAggregator(
        store=store,
        fetcher_factory=FakeFetcher,
        movies=(MovieTitle("Casper", 1995), MovieTitle("Toy Story", 1995)),
    )
    return RunController(aggregator)


@pytest.fixture
async def client(
    store: SnapshotStore,
    controller: RunController,
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an ``httpx.AsyncClient`` wired to the real app."""
    from scorebot.api.main import app

    app.dependency_overrides[get_snapshot_store] = lambda: store
    app.dependency_overrides[get_run_controller] = lambda: controller
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
