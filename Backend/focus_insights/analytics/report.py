import logging
from dataclasses import dataclass, field
from datetime import date, datetime

from focus_insights.analytics.categories import CategoryInsights, compute_category_insights
from focus_insights.analytics.correlation import CorrelationSet, compute_correlations
from focus_insights.analytics.dataset import FocusSessionRecord, completed, validate_sessions
from focus_insights.analytics.hourly import TimeOfDayPatterns, compute_time_of_day_patterns
from focus_insights.analytics.recommendations import Recommendation, generate_recommendations
from focus_insights.analytics.streaks import StreakState, compute_streaks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsightsReport:
    window_start: datetime
    window_end: datetime
    session_count: int
    time_of_day: TimeOfDayPatterns = field(default_factory=TimeOfDayPatterns)
    streaks: StreakState = field(default_factory=StreakState)
    correlations: CorrelationSet = field(default_factory=CorrelationSet)
    categories: CategoryInsights = field(default_factory=CategoryInsights)
    recommendations: tuple[Recommendation, ...] = ()


def compute_insights(
    sessions: list[FocusSessionRecord],
    window_start: datetime,
    window_end: datetime,
    history: list[FocusSessionRecord] | None = None,
    today: date | None = None,
) -> InsightsReport:
    """Build the productivity insights report for one user.

    ``sessions`` must already be restricted to the reporting window;
    ``history`` is the user's full session history used for streaks and
    falls back to ``sessions`` when omitted. Sessions that have not ended
    are ignored. Empty input yields the cold-start report.
    """
    window = completed(validate_sessions(sessions))
    full_history = completed(validate_sessions(history)) if history is not None else window

    time_of_day = compute_time_of_day_patterns(window)
    categories = compute_category_insights(window)
    report = InsightsReport(
        window_start=window_start,
        window_end=window_end,
        session_count=len(window),
        time_of_day=time_of_day,
        streaks=compute_streaks(full_history, window, today=today),
        correlations=compute_correlations(window),
        categories=categories,
        recommendations=tuple(generate_recommendations(window, time_of_day, categories)),
    )
    logger.debug(
        "Computed insights over %d sessions (%d in history), %d recommendations",
        len(window),
        len(full_history),
        len(report.recommendations),
    )
    return report
