"""Mood lookup and update service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from mood_tracker.domain.models import (
    BackendUnavailable,
    BackendUnavailableError,
    MoodNotFound,
    MoodOk,
    MoodRecord,
)

_logger = logging.getLogger(__name__)


class MoodRepository(Protocol):
    """Persistence interface for mood records."""

    def find(self, user: str) -> MoodRecord | None:
        """Return the mood record for a user, if present."""

    def save(self, record: MoodRecord) -> MoodRecord:
        """Store the record, replacing any previous one for the same user."""


@dataclass
class MoodService:
    """Application service for reading and replacing user moods."""

    repository: MoodRepository
    not_found_message: str

    def get_mood(self, user: str) -> MoodOk | MoodNotFound | BackendUnavailable:
        """Return the user's current mood or the reason it is unavailable."""
        try:
            record = self.repository.find(user)
        except BackendUnavailableError as exc:
            _logger.warning("Mood lookup failed: user=%s error=%s", user, exc)
            return BackendUnavailable(detail=str(exc))
        if record is None:
            return MoodNotFound(message=self.not_found_message)
        return MoodOk(record=record)

    def set_mood(self, user: str, mood: str) -> MoodOk | BackendUnavailable:
        """Replace the user's mood with the given text."""
        _logger.info("Setting mood for %s to %s", user, mood)
        try:
            saved = self.repository.save(MoodRecord(user=user, mood=mood))
        except BackendUnavailableError as exc:
            _logger.warning("Mood update failed: user=%s error=%s", user, exc)
            return BackendUnavailable(detail=str(exc))
        return MoodOk(record=saved)
