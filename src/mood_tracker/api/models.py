"""HTTP response models."""

from pydantic import BaseModel, Field

from mood_tracker.domain.models import MoodRecord


class MoodResponse(BaseModel):
    """JSON representation of a mood record."""

    user: str = Field(..., description="User identifier")
    mood: str = Field(..., description="Current mood text")

    @classmethod
    def from_record(cls, record: MoodRecord) -> "MoodResponse":
        return cls(user=record.user, mood=record.mood)
