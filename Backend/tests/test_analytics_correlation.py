import math

import pytest

from focus_insights.analytics.correlation import compute_correlations, pearson
from tests.factories import make_session


class TestPearson:
    def test_perfect_positive(self):
        assert pearson([1, 2, 3], [2, 4, 6]) == pytest.approx(1.0)

    def test_perfect_negative(self):
        assert pearson([1, 2, 3], [3, 2, 1]) == pytest.approx(-1.0)

    def test_known_value(self):
        # r for these points is 0.8 exactly
        assert pearson([1, 2, 3, 4, 5], [2, 1, 4, 3, 5]) == pytest.approx(0.8)

    def test_constant_sample_gives_zero(self):
        assert pearson([5, 5, 5], [1, 2, 3]) == 0
        assert pearson([1, 2, 3], [4, 4, 4]) == 0

    def test_too_few_samples(self):
        assert pearson([], []) == 0
        assert pearson([1], [1]) == 0

    def test_mismatched_lengths(self):
        assert pearson([1, 2, 3], [1, 2]) == 0

    def test_result_is_clamped(self):
        xs = [0.1 * i for i in range(50)]
        r = pearson(xs, [3 * x + 0.7 for x in xs])
        assert -1.0 <= r <= 1.0
        assert r == pytest.approx(1.0)


def test_length_quality_perfect_correlation():
    sessions = [
        make_session(duration=d, rating=q)
        for d, q in zip([10, 20, 30, 40, 50], [1, 2, 3, 4, 5])
    ]
    correlations = compute_correlations(sessions)
    assert correlations.session_length_quality == pytest.approx(1.0)


def test_fewer_than_five_rated_sessions_gives_zeros():
    sessions = [make_session(duration=d, rating=q) for d, q in [(10, 1), (20, 2), (30, 3), (40, 4)]]
    sessions += [make_session(duration=90, rating=None) for _ in range(5)]
    correlations = compute_correlations(sessions)
    assert correlations.session_length_quality == 0
    assert correlations.distraction_quality == 0
    assert correlations.task_progress_quality == 0
    assert correlations.completion_quality == 0


def test_distractions_negatively_correlated():
    sessions = [
        make_session(distractions=n, rating=q)
        for n, q in [(0, 5), (1, 4), (2, 3), (3, 2), (4, 1)]
    ]
    assert compute_correlations(sessions).distraction_quality == pytest.approx(-1.0)


def test_completion_correlation():
    sessions = [
        make_session(completed_task=c, rating=q)
        for c, q in [(True, 5), (True, 5), (False, 1), (False, 1), (True, 5)]
    ]
    assert compute_correlations(sessions).completion_quality == pytest.approx(1.0)


def test_progress_correlation_ignores_sessions_without_snapshots():
    sessions = [
        make_session(rating=1, progress=(0, 10)),
        make_session(rating=2, progress=(10, 30)),
        make_session(rating=3, progress=(30, 60)),
        make_session(rating=5, progress=(None, None)),
        make_session(rating=1, progress=(50, None)),
    ]
    # only the first three qualify: deltas 10, 20, 30 vs ratings 1, 2, 3
    assert compute_correlations(sessions).task_progress_quality == pytest.approx(1.0)


def test_progress_correlation_defaults_when_no_snapshots():
    sessions = [make_session(duration=10 * q, rating=q) for q in range(1, 6)]
    assert compute_correlations(sessions).task_progress_quality == 0


def test_identical_ratings_never_produce_nan():
    sessions = [make_session(duration=d, distractions=d % 3, rating=4) for d in range(10, 70, 10)]
    correlations = compute_correlations(sessions)
    for value in (
        correlations.session_length_quality,
        correlations.distraction_quality,
        correlations.task_progress_quality,
        correlations.completion_quality,
    ):
        assert not math.isnan(value)
        assert value == 0
