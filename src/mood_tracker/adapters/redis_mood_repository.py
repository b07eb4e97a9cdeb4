"""Redis-backed mood repository."""

import logging
from dataclasses import dataclass

import redis

from mood_tracker.domain.models import BackendUnavailableError, MoodRecord
from mood_tracker.services.moods import MoodRepository

_logger = logging.getLogger(__name__)


@dataclass
class RedisMoodRepository(MoodRepository):
    """Stores each mood record as a Redis hash keyed by user."""

    client: redis.Redis
    key_prefix: str = "moods"

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        host: str,
        port: int,
        db: int = 0,
        socket_timeout: float | None = None,
        key_prefix: str = "moods",
    ) -> "RedisMoodRepository":
        """Connect to Redis and verify the connection before returning."""
        _logger.info("Redis connection: %s:%s/%s", host, port, db)
        client = redis.Redis(
            host=host,
            port=port,
            db=db,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
            decode_responses=True,
        )
        try:
            client.ping()
        except redis.RedisError as exc:
            client.close()
            raise BackendUnavailableError(
                f"Cannot connect to Redis at {host}:{port}: {exc}"
            ) from exc
        return cls(client=client, key_prefix=key_prefix)

    def find(self, user: str) -> MoodRecord | None:
        """Return the stored record for a user, if present."""
        try:
            fields = self.client.hgetall(self._key(user))
        except (redis.RedisError, UnicodeDecodeError) as exc:
            raise BackendUnavailableError(f"Redis read failed: {exc}") from exc
        if not fields:
            return None
        if "mood" not in fields:
            raise BackendUnavailableError(
                f"Malformed mood record at {self._key(user)!r}"
            )
        return MoodRecord(user=fields.get("user", user), mood=fields["mood"])

    def save(self, record: MoodRecord) -> MoodRecord:
        """Write the record hash in a single command."""
        try:
            self.client.hset(self._key(record.user), mapping=record.as_dict())
        except redis.RedisError as exc:
            raise BackendUnavailableError(f"Redis write failed: {exc}") from exc
        return record

    def close(self) -> None:
        """Release the underlying connection pool."""
        self.client.close()

    def _key(self, user: str) -> str:
        return f"{self.key_prefix}:{user}"
