"""Movie score endpoints.

Returns the last persisted snapshot or triggers a scrape run.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from scorebot.api.dependencies import get_run_controller, get_snapshot_store
from scorebot.api.schemas import (
    NO_DATA_MESSAGE,
    SCRAPE_DONE_MESSAGE,
    MessageResponse,
    MovieScores,
)
from scorebot.etl.loaders import SnapshotReadError, SnapshotStore, SnapshotWriteError
from scorebot.etl.scheduler import RunController

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["Movies"])


@router.get(
    "/scores",
    response_model=dict[str, MovieScores] | MessageResponse,
    summary="Get movie scores",
    description="Return the last scraped snapshot, keyed by movie title.",
)
def get_movie_scores(
    store: Annotated[SnapshotStore, Depends(get_snapshot_store)],
) -> dict[str, MovieScores] | MessageResponse:
    """Read the persisted snapshot.

    Args:
        store: Snapshot store.

    Returns:
        Snapshot, or a message when nothing was scraped yet.

    Raises:
        HTTPException: 503 if the snapshot file is unreadable.
    """
    try:
        snapshot = store.read()
    except SnapshotReadError as e:
        logger.error(str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Snapshot unavailable. Please run the scraper again.",
        ) from e

    if snapshot is None:
        return MessageResponse(message=NO_DATA_MESSAGE)
    return {title: MovieScores.model_validate(scores) for title, scores in snapshot.items()}


@router.get(
    "/scrape",
    response_model=MessageResponse,
    summary="Run the scraper",
    description="Scrape all sources now and save the snapshot.",
)
async def scrape_movies(
    controller: Annotated[RunController, Depends(get_run_controller)],
) -> MessageResponse:
    """Run one scrape and wait for it to be saved.

    Args:
        controller: Run controller.

    Returns:
        Confirmation message.

    Raises:
        HTTPException: 500 if the snapshot could not be saved.
    """
    try:
        await controller.run_once()
    except SnapshotWriteError as e:
        logger.error(str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Scraping failed: snapshot could not be saved.",
        ) from e
    return MessageResponse(message=SCRAPE_DONE_MESSAGE)
