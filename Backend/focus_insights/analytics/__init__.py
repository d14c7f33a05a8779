from focus_insights.analytics.dataset import (
    DistractionRecord,
    FocusSessionRecord,
    InvalidSessionError,
)
from focus_insights.analytics.report import InsightsReport, compute_insights
from focus_insights.analytics.statistics import FocusStatistics, compute_focus_statistics

__all__ = [
    "DistractionRecord",
    "FocusSessionRecord",
    "FocusStatistics",
    "InsightsReport",
    "InvalidSessionError",
    "compute_focus_statistics",
    "compute_insights",
]
