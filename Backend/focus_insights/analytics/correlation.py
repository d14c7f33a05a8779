import math
from collections.abc import Sequence
from dataclasses import dataclass

from focus_insights.analytics.dataset import FocusSessionRecord, rated

MIN_RATED_SESSIONS = 5


@dataclass(frozen=True)
class CorrelationSet:
    session_length_quality: float = 0.0
    distraction_quality: float = 0.0
    task_progress_quality: float = 0.0
    completion_quality: float = 0.0


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation coefficient of two paired samples.

    Returns 0.0 for mismatched or fewer than two samples, and when either
    sample has zero variance. The result is clamped to [-1, 1] so float
    rounding never leaks values like 1.0000000000000002.
    """
    if len(x) != len(y) or len(x) < 2:
        return 0.0

    mean_x = sum(x) / len(x)
    mean_y = sum(y) / len(y)

    numerator = sum((xi - mean_x) * (yi - mean_y) for xi, yi in zip(x, y))
    denominator = math.sqrt(sum((xi - mean_x) ** 2 for xi in x)) * math.sqrt(
        sum((yi - mean_y) ** 2 for yi in y)
    )
    if denominator <= 0 or not math.isfinite(denominator):
        return 0.0

    r = numerator / denominator
    if not math.isfinite(r):
        return 0.0
    return max(-1.0, min(1.0, r))


def compute_correlations(sessions: list[FocusSessionRecord]) -> CorrelationSet:
    """Correlate session attributes against the self-reported quality rating.

    Needs at least five rated sessions; below that every coefficient is 0.
    """
    quality_sessions = rated(sessions)
    if len(quality_sessions) < MIN_RATED_SESSIONS:
        return CorrelationSet()

    qualities = [float(s.session_quality_rating) for s in quality_sessions]
    lengths = [float(s.duration_minutes) for s in quality_sessions]
    distraction_counts = [float(s.distraction_count) for s in quality_sessions]
    completions = [1.0 if s.task_completed_during_session else 0.0 for s in quality_sessions]

    progress_sessions = [
        s
        for s in quality_sessions
        if s.task_progress_before is not None
        and s.task_progress_after is not None
        and s.task_progress_before >= 0
        and s.task_progress_after >= 0
    ]
    progress_quality = 0.0
    if progress_sessions:
        progress_quality = pearson(
            [float(s.task_progress_after - s.task_progress_before) for s in progress_sessions],
            [float(s.session_quality_rating) for s in progress_sessions],
        )

    return CorrelationSet(
        session_length_quality=pearson(lengths, qualities),
        distraction_quality=pearson(distraction_counts, qualities),
        task_progress_quality=progress_quality,
        completion_quality=pearson(completions, qualities),
    )
