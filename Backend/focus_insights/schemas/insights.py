from datetime import date, datetime
from typing import Any

from pydantic import BaseModel


class HourlyStatResponse(BaseModel):
    hour: int  # 0-23, UTC
    session_count: int
    rated_count: int
    average_quality: float
    average_length: float
    completion_rate: float  # percent


class TimeOfDayResponse(BaseModel):
    hourly: dict[int, HourlyStatResponse]
    best_focus_hour: int
    best_hour_quality: float
    worst_focus_hour: int
    worst_hour_quality: float


class StreakPeriodResponse(BaseModel):
    start_date: date
    end_date: date
    length_days: int


class StreakResponse(BaseModel):
    current_streak: int
    longest_streak: int
    quality_streak: int
    productivity_impact: float
    history: list[StreakPeriodResponse]


class CorrelationResponse(BaseModel):
    session_length_quality: float
    distraction_quality: float
    task_progress_quality: float
    completion_quality: float


class CategoryStatResponse(BaseModel):
    name: str
    session_count: int
    rated_count: int
    average_quality: float
    total_minutes: int
    completed_tasks: int
    effectiveness: float  # completed tasks per focus hour


class CategoryInsightsResponse(BaseModel):
    categories: dict[str, CategoryStatResponse]
    most_focused_category: str
    highest_quality_category: str


class RecommendationResponse(BaseModel):
    id: str
    title: str
    description: str
    category: str
    priority: int  # 1 = highest
    data: dict[str, Any]


class InsightsResponse(BaseModel):
    window_start: datetime
    window_end: datetime
    session_count: int
    time_of_day: TimeOfDayResponse
    streaks: StreakResponse
    correlations: CorrelationResponse
    categories: CategoryInsightsResponse
    recommendations: list[RecommendationResponse]


class FocusStatisticsResponse(BaseModel):
    window_start: datetime
    window_end: datetime
    total_minutes_focused: int
    session_count: int
    distraction_count: int
    average_session_length: float
    distractions_by_category: dict[str, int]
    daily_focus_minutes: dict[str, int]  # ISO date -> minutes
