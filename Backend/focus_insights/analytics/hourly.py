from collections import defaultdict
from dataclasses import dataclass, field

from focus_insights.analytics.dataset import (
    FocusSessionRecord,
    average,
    rated,
    utc_hour,
)

# Cold-start suggestions shown before any rated session exists
DEFAULT_BEST_HOUR = 9
DEFAULT_WORST_HOUR = 15


@dataclass(frozen=True)
class HourlyStat:
    hour: int  # 0-23, UTC
    session_count: int
    rated_count: int
    average_quality: float  # 0.0 when no session in the hour is rated
    average_length: float
    completion_rate: float  # percent, 0-100


@dataclass(frozen=True)
class TimeOfDayPatterns:
    hourly: dict[int, HourlyStat] = field(default_factory=dict)
    best_focus_hour: int = DEFAULT_BEST_HOUR
    best_hour_quality: float = 0.0
    worst_focus_hour: int = DEFAULT_WORST_HOUR
    worst_hour_quality: float = 0.0


def compute_time_of_day_patterns(sessions: list[FocusSessionRecord]) -> TimeOfDayPatterns:
    """Bucket sessions by UTC start hour and pick the best and worst hours.

    Best/worst only consider hours with at least one rated session, so an
    hour full of unrated sessions never shows up as the "worst" hour with
    quality 0. Ties go to the earliest hour.
    """
    buckets: dict[int, list[FocusSessionRecord]] = defaultdict(list)
    for s in sessions:
        buckets[utc_hour(s.start_time)].append(s)

    hourly: dict[int, HourlyStat] = {}
    for hour in sorted(buckets):
        group = buckets[hour]
        ratings = [s.session_quality_rating for s in rated(group)]
        completed_count = sum(1 for s in group if s.task_completed_during_session)
        hourly[hour] = HourlyStat(
            hour=hour,
            session_count=len(group),
            rated_count=len(ratings),
            average_quality=average(ratings),
            average_length=average([s.duration_minutes for s in group]),
            completion_rate=completed_count / len(group) * 100,
        )

    candidates = [stat for stat in hourly.values() if stat.rated_count > 0]
    if not candidates:
        return TimeOfDayPatterns(hourly=hourly)

    # max()/min() return the first extreme in ascending-hour order
    best = max(candidates, key=lambda stat: stat.average_quality)
    worst = min(candidates, key=lambda stat: stat.average_quality)
    return TimeOfDayPatterns(
        hourly=hourly,
        best_focus_hour=best.hour,
        best_hour_quality=best.average_quality,
        worst_focus_hour=worst.hour,
        worst_hour_quality=worst.average_quality,
    )
