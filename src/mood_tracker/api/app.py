"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool

from mood_tracker.api.models import MoodResponse
from mood_tracker.app_logging import configure_logging
from mood_tracker.containers import AppContainer
from mood_tracker.domain.models import (
    BackendUnavailable,
    MoodNotFound,
    MoodOk,
    MoodOutcome,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Mood service ready: backend=%s", container.settings.mood_backend)
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Mood Tracker", lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/mood/user/{name}")
    async def get_mood(name: str, request: Request) -> MoodResponse:
        """Return the current mood for a user."""
        state_container: AppContainer = request.app.state.container
        outcome = await run_in_threadpool(
            state_container.mood_service.get_mood, name
        )
        return _to_response(outcome)

    @app.put("/mood/user/{name}")
    async def set_mood(name: str, request: Request) -> MoodResponse:
        """Replace the mood for a user with the raw request body."""
        state_container: AppContainer = request.app.state.container
        try:
            mood = (await request.body()).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Mood must be UTF-8 text",
            ) from exc
        outcome = await run_in_threadpool(
            state_container.mood_service.set_mood, name, mood
        )
        return _to_response(outcome)

    return app


def _to_response(outcome: MoodOutcome) -> MoodResponse:
    match outcome:
        case MoodOk(record=record):
            return MoodResponse.from_record(record)
        case MoodNotFound(message=message):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)
        case BackendUnavailable(detail=detail):
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Mood store unavailable: {detail}",
            )
