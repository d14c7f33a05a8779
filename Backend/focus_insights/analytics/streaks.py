from dataclasses import dataclass
from datetime import date, timedelta

from focus_insights.analytics.dataset import (
    FocusSessionRecord,
    as_utc,
    average,
    completed,
    rated,
    utc_date,
    utc_today,
)

QUALITY_STREAK_WINDOW = 30
QUALITY_STREAK_MIN_RATING = 4

# Productivity impact: (avg_quality - 3) * 10 + (avg_length - 25) * 0.5
IMPACT_MIN_SESSIONS = 10
IMPACT_BASELINE_QUALITY = 3.0
IMPACT_BASELINE_LENGTH = 25.0
IMPACT_QUALITY_WEIGHT = 10.0
IMPACT_LENGTH_WEIGHT = 0.5


@dataclass(frozen=True)
class StreakPeriod:
    start_date: date
    end_date: date
    length_days: int


@dataclass(frozen=True)
class StreakState:
    current_streak: int = 0
    longest_streak: int = 0
    quality_streak: int = 0
    productivity_impact: float = 0.0
    history: tuple[StreakPeriod, ...] = ()


def active_days(sessions: list[FocusSessionRecord]) -> set[date]:
    """Distinct UTC calendar days with at least one completed session."""
    return {utc_date(s.start_time) for s in completed(sessions)}


def current_streak(days: set[date], today: date) -> int:
    """Consecutive active days ending today; 0 when today is inactive."""
    streak = 0
    expected = today
    while expected in days:
        streak += 1
        expected -= timedelta(days=1)
    return streak


def streak_periods(days: set[date]) -> list[StreakPeriod]:
    """Split active days into runs of consecutive days, oldest first."""
    periods: list[StreakPeriod] = []
    run_start: date | None = None
    previous: date | None = None

    for day in sorted(days):
        if previous is not None and day == previous + timedelta(days=1):
            previous = day
            continue
        if run_start is not None and previous is not None:
            periods.append(
                StreakPeriod(run_start, previous, (previous - run_start).days + 1)
            )
        run_start = previous = day

    if run_start is not None and previous is not None:
        periods.append(StreakPeriod(run_start, previous, (previous - run_start).days + 1))
    return periods


def quality_streak(history: list[FocusSessionRecord]) -> int:
    """Count recent sessions rated 4+ in a row, newest first.

    Only the last 30 completed sessions are scanned. An unrated session
    breaks the streak the same way a low rating does.
    """
    chronological = sorted(completed(history), key=lambda s: as_utc(s.start_time))
    recent = chronological[-QUALITY_STREAK_WINDOW:]

    streak = 0
    for s in reversed(recent):
        rating = s.session_quality_rating
        if rating is None or rating < QUALITY_STREAK_MIN_RATING:
            break
        streak += 1
    return streak


def productivity_impact(window: list[FocusSessionRecord]) -> float:
    if len(window) < IMPACT_MIN_SESSIONS:
        return 0.0
    ratings = [s.session_quality_rating for s in rated(window)]
    if not ratings:
        return 0.0

    avg_quality = average(ratings)
    avg_length = average([s.duration_minutes for s in window])
    return (
        (avg_quality - IMPACT_BASELINE_QUALITY) * IMPACT_QUALITY_WEIGHT
        + (avg_length - IMPACT_BASELINE_LENGTH) * IMPACT_LENGTH_WEIGHT
    )


def compute_streaks(
    history: list[FocusSessionRecord],
    window: list[FocusSessionRecord],
    today: date | None = None,
) -> StreakState:
    """Streaks come from the full history; the impact score from the window."""
    today = today or utc_today()
    days = active_days(history)
    periods = streak_periods(days)

    return StreakState(
        current_streak=current_streak(days, today),
        longest_streak=max((p.length_days for p in periods), default=0),
        quality_streak=quality_streak(history),
        productivity_impact=productivity_impact(window),
        history=tuple(periods),
    )
