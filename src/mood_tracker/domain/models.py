"""Domain models for the mood tracker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MoodRecord:
    """Current mood of a single user, keyed by the user identifier."""

    user: str
    mood: str

    def as_dict(self) -> dict[str, str]:
        """Return the record as a field mapping."""
        return {"user": self.user, "mood": self.mood}


@dataclass(frozen=True)
class MoodOk:
    """Successful mood lookup or update."""

    record: MoodRecord


@dataclass(frozen=True)
class MoodNotFound:
    """No mood has been set for the requested user."""

    message: str


@dataclass(frozen=True)
class BackendUnavailable:
    """The storage backend could not serve the request."""

    detail: str


MoodOutcome = MoodOk | MoodNotFound | BackendUnavailable


class BackendUnavailableError(RuntimeError):
    """Raised by repositories when the backing store fails."""
