from dataclasses import asdict, replace
from datetime import UTC, date, datetime, timedelta

import pytest

from focus_insights.analytics import InvalidSessionError, compute_insights
from tests.factories import make_session

WINDOW_START = datetime(2023, 12, 4, tzinfo=UTC)
WINDOW_END = datetime(2024, 1, 3, 23, 59, tzinfo=UTC)
TODAY = date(2024, 1, 3)


def test_empty_input_gives_cold_start_report():
    report = compute_insights([], WINDOW_START, WINDOW_END, today=TODAY)

    assert report.session_count == 0
    assert report.time_of_day.hourly == {}
    assert (report.time_of_day.best_focus_hour, report.time_of_day.best_hour_quality) == (9, 0)
    assert (report.time_of_day.worst_focus_hour, report.time_of_day.worst_hour_quality) == (15, 0)
    assert report.streaks.current_streak == 0
    assert report.streaks.longest_streak == 0
    assert report.streaks.quality_streak == 0
    assert report.correlations.session_length_quality == 0
    assert report.categories.categories == {}
    assert [r.id for r in report.recommendations] == ["getting_started"]


def test_in_progress_sessions_are_ignored():
    sessions = [make_session(ended=False, rating=5)]
    report = compute_insights(sessions, WINDOW_START, WINDOW_END, today=TODAY)
    assert report.session_count == 0
    assert [r.id for r in report.recommendations] == ["getting_started"]


def test_streaks_use_full_history():
    window = [make_session(day=TODAY, rating=4)]
    history = [make_session(day=TODAY - timedelta(days=n), rating=4) for n in range(1, 40)] + window
    report = compute_insights(window, WINDOW_START, WINDOW_END, history=history, today=TODAY)
    assert report.session_count == 1
    assert report.streaks.current_streak == 40
    assert report.streaks.longest_streak == 40
    assert report.streaks.quality_streak == 30


def test_history_defaults_to_window():
    window = [make_session(day=date(2024, 1, d), rating=4) for d in (1, 2, 3)]
    report = compute_insights(window, WINDOW_START, WINDOW_END, today=TODAY)
    assert report.streaks.current_streak == 3
    assert report.streaks.longest_streak == 3


def test_full_report():
    sessions = [
        make_session(
            day=date(2024, 1, 1 + i % 3),
            hour=9,
            duration=30,
            rating=5,
            completed_task=True,
            category="Deep Work",
        )
        for i in range(10)
    ]
    report = compute_insights(sessions, WINDOW_START, WINDOW_END, today=TODAY)

    assert report.session_count == 10
    assert report.time_of_day.best_focus_hour == 9
    assert report.time_of_day.worst_focus_hour == 9
    # (5 - 3) * 10 + (30 - 25) * 0.5
    assert report.streaks.productivity_impact == pytest.approx(22.5)
    assert report.categories.most_focused_category == "Deep Work"
    assert report.categories.categories["Deep Work"].effectiveness == pytest.approx(2.0)
    assert [r.id for r in report.recommendations] == ["best-time", "build-streak", "focus-category"]


def test_report_sequences_are_immutable():
    sessions = [make_session(day=date(2024, 1, d), rating=4) for d in (1, 3)]
    report = compute_insights(sessions, WINDOW_START, WINDOW_END, today=TODAY)

    assert isinstance(report.recommendations, tuple)
    assert isinstance(report.streaks.history, tuple)
    assert len(report.streaks.history) == 2
    with pytest.raises(AttributeError):
        report.recommendations.append(report.recommendations[0])
    with pytest.raises(AttributeError):
        report.streaks.history.append(report.streaks.history[0])


def test_idempotent():
    sessions = [
        make_session(day=date(2024, 1, d), hour=h, duration=10 * h, rating=1 + h % 5, distractions=h % 4)
        for d in (1, 2, 3)
        for h in (8, 11, 15)
    ]
    first = compute_insights(sessions, WINDOW_START, WINDOW_END, today=TODAY)
    second = compute_insights(sessions, WINDOW_START, WINDOW_END, today=TODAY)
    assert asdict(first) == asdict(second)


def test_end_before_start_is_rejected():
    bad = make_session()
    bad = replace(bad, end_time=bad.start_time - timedelta(minutes=5))
    with pytest.raises(InvalidSessionError):
        compute_insights([bad], WINDOW_START, WINDOW_END, today=TODAY)


def test_out_of_range_rating_is_rejected():
    with pytest.raises(InvalidSessionError, match="session_quality_rating"):
        compute_insights([make_session(rating=7)], WINDOW_START, WINDOW_END, today=TODAY)


def test_negative_duration_is_rejected_in_history():
    with pytest.raises(ValueError):
        compute_insights(
            [], WINDOW_START, WINDOW_END, history=[make_session(duration=-5)], today=TODAY
        )
