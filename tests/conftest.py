"""Shared pytest fixtures: isolated settings and fake fetcher."""

import logging
from pathlib import Path

import pytest

from scorebot.api.dependencies import get_run_controller, get_snapshot_store
from scorebot.settings import settings
from tests.pages import FakeFetcher


@pytest.fixture(autouse=True, scope="function")
def mock_env_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables for reproducible tests."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("SCHEDULER_ENABLED", "false")


@pytest.fixture(autouse=True)
def override_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point data and log paths at a temporary directory."""
    monkeypatch.setattr(settings.paths, "snapshot_file", str(tmp_path / "movie-scores.json"))
    monkeypatch.setattr(settings.logging, "log_dir", str(tmp_path / "logs"))
    monkeypatch.setattr(settings.scraping, "scheduler_enabled", False)
    get_snapshot_store.cache_clear()
    get_run_controller.cache_clear()


@pytest.fixture
def test_logger() -> logging.Logger:
    """Propagating logger so caplog sees injected-logger records."""
    logger = logging.getLogger("tests.scorebot")
    logger.setLevel(logging.DEBUG)
    logger.propagate = True
    return logger


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    """Empty fake fetcher; tests register pages on it."""
    return FakeFetcher()
