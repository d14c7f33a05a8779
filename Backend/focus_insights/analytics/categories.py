from dataclasses import dataclass, field

from focus_insights.analytics.dataset import FocusSessionRecord, average, rated


@dataclass(frozen=True)
class CategoryStat:
    name: str
    session_count: int
    rated_count: int
    average_quality: float  # 0.0 when no session in the category is rated
    total_minutes: int
    completed_tasks: int
    effectiveness: float  # completed tasks per hour of focus


@dataclass(frozen=True)
class CategoryInsights:
    categories: dict[str, CategoryStat] = field(default_factory=dict)
    most_focused_category: str = ""
    highest_quality_category: str = ""


def compute_category_insights(sessions: list[FocusSessionRecord]) -> CategoryInsights:
    """Per-category quality and effectiveness for categorized sessions.

    Categories keep the order in which they first appear in ``sessions``;
    ties for most-focused / highest-quality go to the earlier category.
    """
    groups: dict[str, list[FocusSessionRecord]] = {}
    for s in sessions:
        name = s.known_category
        if name is None:
            continue
        groups.setdefault(name, []).append(s)

    if not groups:
        return CategoryInsights()

    categories: dict[str, CategoryStat] = {}
    for name, group in groups.items():
        ratings = [s.session_quality_rating for s in rated(group)]
        total_minutes = sum(s.duration_minutes for s in group)
        completed_tasks = sum(1 for s in group if s.task_completed_during_session)
        categories[name] = CategoryStat(
            name=name,
            session_count=len(group),
            rated_count=len(ratings),
            average_quality=average(ratings),
            total_minutes=total_minutes,
            completed_tasks=completed_tasks,
            effectiveness=completed_tasks * 60 / total_minutes if total_minutes > 0 else 0.0,
        )

    stats = list(categories.values())
    return CategoryInsights(
        categories=categories,
        most_focused_category=max(stats, key=lambda c: c.session_count).name,
        highest_quality_category=max(stats, key=lambda c: c.average_quality).name,
    )
