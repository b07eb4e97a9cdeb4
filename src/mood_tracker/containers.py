"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from mood_tracker.adapters.in_memory_mood_repository import InMemoryMoodRepository
from mood_tracker.adapters.redis_mood_repository import RedisMoodRepository
from mood_tracker.config import Settings
from mood_tracker.services.moods import MoodRepository, MoodService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    mood_service: MoodService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Raises BackendUnavailableError when the configured backend cannot be
    reached; callers treat that as fatal.
    """
    resolved_settings = settings or Settings()
    closers: list[Callable[[], None]] = []
    repository: MoodRepository
    if resolved_settings.mood_backend == "redis":
        redis_repository = RedisMoodRepository.create(
            host=resolved_settings.redis_host,
            port=resolved_settings.redis_port,
            db=resolved_settings.redis_db,
            socket_timeout=resolved_settings.redis_socket_timeout,
            key_prefix=resolved_settings.redis_key_prefix,
        )
        closers.append(redis_repository.close)
        repository = redis_repository
    else:
        repository = InMemoryMoodRepository()
    mood_service = MoodService(
        repository=repository,
        not_found_message=resolved_settings.mood_not_found_message,
    )

    async def close_resources() -> None:
        for close in closers:
            close()

    return AppContainer(
        settings=resolved_settings,
        mood_service=mood_service,
        close_resources=close_resources,
    )
