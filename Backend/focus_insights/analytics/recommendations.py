"""Rule-based productivity recommendations.

Each rule fires independently of the others; the final list is ordered
by priority (1 = most important) and keeps generation order within a
priority. Every number quoted in a recommendation comes from the same
window of sessions the other aggregators saw.
"""

from dataclasses import dataclass, field
from typing import Any

from focus_insights.analytics.categories import CategoryInsights
from focus_insights.analytics.dataset import FocusSessionRecord, average, rated
from focus_insights.analytics.hourly import TimeOfDayPatterns
from focus_insights.analytics.streaks import active_days

STREAK_TARGET_DAYS = 7
SHORT_SESSION_MINUTES = 25
LONG_SESSION_MINUTES = 60
SUGGESTED_SESSION_MINUTES = 30
GOOD_QUALITY = 3.5
LOW_QUALITY = 3.0
MAX_AVG_DISTRACTIONS = 3


@dataclass(frozen=True)
class Recommendation:
    id: str
    title: str
    description: str
    category: str
    priority: int
    data: dict[str, Any] = field(default_factory=dict)


def cold_start_recommendations() -> list[Recommendation]:
    return [
        Recommendation(
            id="getting_started",
            title="Start Your Focus Journey",
            description="Begin with a 25-minute focus session to establish your productivity baseline.",
            category="Getting Started",
            priority=1,
            data={"action_suggested": "Start your first focus session with any task"},
        )
    ]


def generate_recommendations(
    sessions: list[FocusSessionRecord],
    time_of_day: TimeOfDayPatterns,
    categories: CategoryInsights,
) -> list[Recommendation]:
    if not sessions:
        return cold_start_recommendations()

    recommendations: list[Recommendation] = []

    # Without a rated hour the best hour is only the cold-start placeholder
    if any(stat.rated_count > 0 for stat in time_of_day.hourly.values()):
        recommendations.append(
            Recommendation(
                id="best-time",
                title="Optimal Focus Time",
                description=(
                    f"Schedule your most important tasks around {time_of_day.best_focus_hour}:00. "
                    f"This is when your focus quality peaks at {time_of_day.best_hour_quality:.1f}/5."
                ),
                category="Timing",
                priority=1,
                data={
                    "best_hour": time_of_day.best_focus_hour,
                    "avg_quality": time_of_day.best_hour_quality,
                },
            )
        )

    unique_days = len(active_days(sessions))
    if unique_days < STREAK_TARGET_DAYS:
        recommendations.append(
            Recommendation(
                id="build-streak",
                title="Build Your Focus Streak",
                description=(
                    f"You're at {unique_days} days. Aim for daily focus sessions "
                    "to build momentum and improve productivity."
                ),
                category="Habits",
                priority=2,
                data={"current_days": unique_days, "target_days": STREAK_TARGET_DAYS},
            )
        )

    avg_length = average([s.duration_minutes for s in sessions])
    ratings = [s.session_quality_rating for s in rated(sessions)]
    avg_quality = average(ratings) if ratings else None

    if avg_quality is not None and avg_length < SHORT_SESSION_MINUTES and avg_quality >= GOOD_QUALITY:
        recommendations.append(
            Recommendation(
                id="extend-sessions",
                title="Try Longer Sessions",
                description=(
                    "Your short sessions have good quality. Consider extending to "
                    "25-45 minutes for even better productivity."
                ),
                category="Duration",
                priority=2,
                data={
                    "current_avg_length": avg_length,
                    "suggested_length": SUGGESTED_SESSION_MINUTES,
                },
            )
        )

    if avg_quality is not None and avg_length > LONG_SESSION_MINUTES and avg_quality < LOW_QUALITY:
        recommendations.append(
            Recommendation(
                id="shorter-sessions",
                title="Try Shorter Sessions",
                description=(
                    "Your longer sessions tend to have lower quality. Consider shorter, "
                    "more focused 25-45 minute sessions."
                ),
                category="Duration",
                priority=2,
                data={
                    "current_avg_length": avg_length,
                    "suggested_length": SUGGESTED_SESSION_MINUTES,
                },
            )
        )

    avg_distractions = average([s.distraction_count for s in sessions])
    if avg_distractions > MAX_AVG_DISTRACTIONS:
        recommendations.append(
            Recommendation(
                id="reduce-distractions",
                title="Minimize Distractions",
                description=(
                    f"You average {avg_distractions:.1f} distractions per session. Try using "
                    "Do Not Disturb mode or working in a quieter environment."
                ),
                category="Environment",
                priority=1,
                data={"avg_distractions": avg_distractions},
            )
        )

    rated_categories = [c for c in categories.categories.values() if c.rated_count > 0]
    if rated_categories:
        best = max(rated_categories, key=lambda c: c.average_quality)
        recommendations.append(
            Recommendation(
                id="focus-category",
                title="Leverage Your Strengths",
                description=(
                    f"You're most effective with {best.name} tasks "
                    f"(avg quality: {best.average_quality:.1f}/5). "
                    "Consider scheduling these during your peak focus times."
                ),
                category="Task Planning",
                priority=3,
                data={"best_category": best.name, "avg_quality": best.average_quality},
            )
        )

    if avg_quality is not None and avg_quality < LOW_QUALITY:
        recommendations.append(
            Recommendation(
                id="improve-quality",
                title="Focus on Session Quality",
                description=(
                    "Your average session quality is below 3.0. Try preparing better "
                    "before sessions and eliminating distractions."
                ),
                category="Quality",
                priority=1,
                data={"avg_quality": avg_quality},
            )
        )

    # sorted() is stable, so equal priorities keep generation order
    return sorted(recommendations, key=lambda r: r.priority)
