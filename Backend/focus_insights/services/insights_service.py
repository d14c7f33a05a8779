import logging
import uuid
from datetime import date, datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from focus_insights.analytics import (
    FocusStatistics,
    InsightsReport,
    compute_focus_statistics,
    compute_insights,
)
from focus_insights.analytics.dataset import as_utc
from focus_insights.config import settings
from focus_insights.services import session_service

logger = logging.getLogger(__name__)


def resolve_window(
    start: datetime | None, end: datetime | None, default_days: int
) -> tuple[datetime, datetime]:
    """Fill in a missing window bound; the default window ends now."""
    end = as_utc(end) if end else datetime.now(timezone.utc)
    start = as_utc(start) if start else end - timedelta(days=default_days)
    if start > end:
        raise ValueError("start_date must not be after end_date")
    return start, end


async def get_productivity_insights(
    db: AsyncSession,
    user_id: uuid.UUID,
    start: datetime | None = None,
    end: datetime | None = None,
    today: date | None = None,
) -> InsightsReport:
    """Insights over the window (default last 30 days); streaks use the
    user's whole completed history."""
    start, end = resolve_window(start, end, settings.INSIGHTS_WINDOW_DAYS)

    window = await session_service.get_focus_sessions(db, user_id, start=start, end=end)
    history = await session_service.get_focus_sessions(db, user_id)

    report = compute_insights(window, start, end, history=history, today=today)
    logger.info(
        "Productivity insights for user %s: %d sessions in window, %d recommendations",
        user_id,
        report.session_count,
        len(report.recommendations),
    )
    return report


async def get_focus_statistics(
    db: AsyncSession,
    user_id: uuid.UUID,
    start: datetime | None = None,
    end: datetime | None = None,
) -> tuple[datetime, datetime, FocusStatistics]:
    """Focus totals over the window (default last 7 days), including
    sessions that are still running."""
    start, end = resolve_window(start, end, settings.STATISTICS_WINDOW_DAYS)

    sessions = await session_service.get_focus_sessions(
        db, user_id, start=start, end=end, completed_only=False
    )
    return start, end, compute_focus_statistics(sessions)
