from collections import Counter, defaultdict
from dataclasses import dataclass, field

from focus_insights.analytics.dataset import FocusSessionRecord, average, utc_date


@dataclass(frozen=True)
class FocusStatistics:
    total_minutes_focused: int = 0
    session_count: int = 0
    distraction_count: int = 0
    average_session_length: float = 0.0
    distractions_by_category: dict[str, int] = field(default_factory=dict)
    daily_focus_minutes: dict[str, int] = field(default_factory=dict)  # ISO date -> minutes


def compute_focus_statistics(sessions: list[FocusSessionRecord]) -> FocusStatistics:
    """Totals over every session in the window, finished or not."""
    if not sessions:
        return FocusStatistics()

    by_category = Counter(d.category for s in sessions for d in s.distractions)

    daily: dict[str, int] = defaultdict(int)
    for s in sessions:
        daily[utc_date(s.start_time).isoformat()] += s.duration_minutes

    return FocusStatistics(
        total_minutes_focused=sum(s.duration_minutes for s in sessions),
        session_count=len(sessions),
        distraction_count=sum(s.distraction_count for s in sessions),
        average_session_length=average([s.duration_minutes for s in sessions]),
        distractions_by_category=dict(by_category),
        daily_focus_minutes=dict(sorted(daily.items())),
    )
