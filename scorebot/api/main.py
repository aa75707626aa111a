"""FastAPI application entry point.

Creates the ScoreBot REST API and runs the scrape scheduler
for the lifetime of the application.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI

from scorebot.api.dependencies import get_run_controller, get_snapshot_store
from scorebot.api.routers import movies
from scorebot.api.schemas import HealthResponse
from scorebot.etl.loaders import SnapshotStore
from scorebot.etl.scheduler import RunController, ScrapeScheduler
from scorebot.settings import settings

# =============================================================================
# LIFESPAN
# =============================================================================


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Starts the scrape scheduler (first run immediately) and stops
    it on shutdown.

    Args:
        _app: FastAPI application instance.

    Yields:
        None after startup tasks complete.
    """
    scheduler = _build_scheduler()
    if scheduler:
        scheduler.start()
    try:
        yield
    finally:
        if scheduler:
            await scheduler.stop()


def _build_scheduler() -> ScrapeScheduler | None:
    """Create the scheduler, or None when disabled in settings."""
    if not settings.scraping.scheduler_enabled:
        return None
    return ScrapeScheduler(
        get_run_controller(),
        interval_seconds=settings.scraping.interval_seconds,
    )


# =============================================================================
# APPLICATION FACTORY
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance.
    """
    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description="Movie scores scraped from IMDb, Rotten Tomatoes and Metacritic",
        lifespan=lifespan,
    )
    app.include_router(movies.router)
    app.add_api_route(
        "/health",
        health_check,
        methods=["GET"],
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    return app


# =============================================================================
# ROOT ENDPOINTS
# =============================================================================


def health_check(
    store: Annotated[SnapshotStore, Depends(get_snapshot_store)],
    controller: Annotated[RunController, Depends(get_run_controller)],
) -> HealthResponse:
    """Health check endpoint.

    Returns:
        API status, snapshot availability and scrape activity.
    """
    return HealthResponse(
        status="healthy",
        version=settings.api.version,
        snapshot_available=store.exists(),
        scrape_running=controller.is_running,
    )


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "scorebot.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )
