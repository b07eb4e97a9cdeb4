"""Process-local mood repository."""

from dataclasses import dataclass, field

from mood_tracker.domain.models import MoodRecord
from mood_tracker.services.moods import MoodRepository


@dataclass
class InMemoryMoodRepository(MoodRepository):
    """Dictionary-backed repository; contents are lost on restart."""

    records: dict[str, MoodRecord] = field(default_factory=dict)

    def find(self, user: str) -> MoodRecord | None:
        return self.records.get(user)

    def save(self, record: MoodRecord) -> MoodRecord:
        self.records[record.user] = record
        return record
