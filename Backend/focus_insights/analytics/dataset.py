"""Input records for the focus analytics engine.

The engine never touches the database. Callers load a user's sessions,
convert them to these immutable records, and hand them over as a list.

All hour-of-day and calendar-day bucketing goes through ``utc_hour`` and
``utc_date`` so that every aggregator shares the same UTC day boundary.
Naive timestamps (as returned by SQLite) are taken to already be UTC.
"""

import logging
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

logger = logging.getLogger(__name__)

MIN_QUALITY_RATING = 1
MAX_QUALITY_RATING = 5


class InvalidSessionError(ValueError):
    """A session record violates the engine's input preconditions."""

    def __init__(self, session_id: uuid.UUID | int | str, reason: str):
        self.session_id = session_id
        self.reason = reason
        super().__init__(f"Focus session {session_id}: {reason}")


@dataclass(frozen=True)
class DistractionRecord:
    description: str
    category: str
    timestamp: datetime


@dataclass(frozen=True)
class FocusSessionRecord:
    id: uuid.UUID | int | str
    user_id: uuid.UUID | int | str
    start_time: datetime
    end_time: datetime | None = None
    duration_minutes: int = 0
    task_id: uuid.UUID | int | str | None = None
    category_name: str | None = None
    session_quality_rating: int | None = None
    task_progress_before: int | None = None
    task_progress_after: int | None = None
    task_completed_during_session: bool = False
    distractions: tuple[DistractionRecord, ...] = field(default_factory=tuple)

    @property
    def is_completed(self) -> bool:
        return self.end_time is not None

    @property
    def is_rated(self) -> bool:
        return self.session_quality_rating is not None

    @property
    def distraction_count(self) -> int:
        return len(self.distractions) if self.distractions else 0

    @property
    def known_category(self) -> str | None:
        """Category name, or None when missing or blank."""
        if self.category_name is None or not self.category_name.strip():
            return None
        return self.category_name.strip()


def as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def utc_hour(moment: datetime) -> int:
    return as_utc(moment).hour


def utc_date(moment: datetime) -> date:
    return as_utc(moment).date()


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def completed(sessions: Iterable[FocusSessionRecord]) -> list[FocusSessionRecord]:
    """Keep only sessions that have ended, preserving order."""
    return [s for s in sessions if s.is_completed]


def rated(sessions: Iterable[FocusSessionRecord]) -> list[FocusSessionRecord]:
    return [s for s in sessions if s.is_rated]


def average(values: list[float] | list[int]) -> float:
    """Arithmetic mean, 0.0 for an empty list."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def validate_sessions(sessions: Iterable[FocusSessionRecord]) -> list[FocusSessionRecord]:
    """Check preconditions and return the sessions as a list.

    Raises InvalidSessionError for a session that ends before it starts,
    has a negative duration, or carries a rating outside 1-5.
    """
    checked = list(sessions)
    for s in checked:
        if s.end_time is not None and as_utc(s.end_time) < as_utc(s.start_time):
            logger.warning("Rejecting focus session %s: end_time before start_time", s.id)
            raise InvalidSessionError(s.id, "end_time is earlier than start_time")
        if s.duration_minutes < 0:
            logger.warning("Rejecting focus session %s: negative duration", s.id)
            raise InvalidSessionError(s.id, "duration_minutes is negative")
        if s.session_quality_rating is not None and not (
            MIN_QUALITY_RATING <= s.session_quality_rating <= MAX_QUALITY_RATING
        ):
            logger.warning("Rejecting focus session %s: rating out of range", s.id)
            raise InvalidSessionError(
                s.id,
                f"session_quality_rating must be between {MIN_QUALITY_RATING} "
                f"and {MAX_QUALITY_RATING}",
            )
    return checked
