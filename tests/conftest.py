"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest
import redis

from mood_tracker.adapters.in_memory_mood_repository import InMemoryMoodRepository
from mood_tracker.config import Settings
from mood_tracker.containers import AppContainer
from mood_tracker.domain.models import BackendUnavailableError, MoodRecord
from mood_tracker.services.moods import MoodRepository, MoodService

NOT_FOUND_MESSAGE = "Mood not set, try PUT /mood/user/<name>"


@dataclass
class FakeRedisClient:
    """Fake Redis client that keeps hashes in a dict."""

    hashes: dict[str, dict[str, str]] = field(default_factory=dict)
    fail: bool = False
    closed: bool = False
    pings: int = 0
    undecodable: set[str] = field(default_factory=set)

    def ping(self) -> bool:
        self._maybe_fail()
        self.pings += 1
        return True

    def hgetall(self, key: str) -> dict[str, str]:
        self._maybe_fail()
        if key in self.undecodable:
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        return dict(self.hashes.get(key, {}))

    def hset(self, key: str, mapping: dict[str, str] | None = None) -> int:
        self._maybe_fail()
        current = self.hashes.setdefault(key, {})
        added = len(set(mapping or {}) - set(current))
        current.update(mapping or {})
        return added

    def close(self) -> None:
        self.closed = True

    def _maybe_fail(self) -> None:
        if self.fail:
            raise redis.ConnectionError("Connection refused")


@dataclass
class FailingMoodRepository(MoodRepository):
    """Repository whose backend is always down."""

    reason: str = "connection refused"

    def find(self, user: str) -> MoodRecord | None:
        raise BackendUnavailableError(self.reason)

    def save(self, record: MoodRecord) -> MoodRecord:
        raise BackendUnavailableError(self.reason)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        mood_not_found_message=NOT_FOUND_MESSAGE,
        mood_backend="memory",
    )


@pytest.fixture
def mood_repository() -> InMemoryMoodRepository:
    return InMemoryMoodRepository()


@pytest.fixture
def mood_service(mood_repository: InMemoryMoodRepository) -> MoodService:
    return MoodService(repository=mood_repository, not_found_message=NOT_FOUND_MESSAGE)


@pytest.fixture
def container(settings: Settings, mood_service: MoodService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        mood_service=mood_service,
        close_resources=close_resources,
    )
