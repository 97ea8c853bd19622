"""Tests for workout statistics."""

from datetime import datetime

import pytest

from fit_avatar.errors import InvalidInputError
from fit_avatar.models.exercises import SubCategory
from fit_avatar.models.user_settings import UserSettings
from fit_avatar.models.workout import TimePeriod, WorkoutHistory
from fit_avatar.services.statistics import (
    StatisticsAggregator,
    is_in_period,
    weekday_name,
)


class TestPeriods:
    """Tests for calendar period membership."""

    def test_week_uses_iso_weeks(self, now):
        # 2024-05-15 is a Wednesday; its ISO week starts on Monday the 13th
        assert is_in_period(datetime(2024, 5, 13), now, TimePeriod.WEEK)
        assert is_in_period(datetime(2024, 5, 19, 23, 59), now, TimePeriod.WEEK)
        assert not is_in_period(datetime(2024, 5, 12, 23, 59), now, TimePeriod.WEEK)

    def test_week_across_year_boundary(self):
        """Monday 2024-12-30 belongs to ISO week 1 of 2025."""
        new_year = datetime(2025, 1, 1, 10, 0)
        assert is_in_period(datetime(2024, 12, 30), new_year, TimePeriod.WEEK)

    def test_same_week_number_different_year(self, now):
        assert not is_in_period(datetime(2023, 5, 17), now, TimePeriod.WEEK)

    def test_month_and_year(self, now):
        assert is_in_period(datetime(2024, 5, 1), now, TimePeriod.MONTH)
        assert not is_in_period(datetime(2023, 5, 15), now, TimePeriod.MONTH)
        assert is_in_period(datetime(2024, 1, 1), now, TimePeriod.YEAR)
        assert not is_in_period(datetime(2023, 12, 31), now, TimePeriod.YEAR)

    def test_weekday_name_is_sunday_first(self):
        assert weekday_name(datetime(2024, 5, 12)) == "Sun"
        assert weekday_name(datetime(2024, 5, 13)) == "Mon"
        assert weekday_name(datetime(2024, 5, 18)) == "Sat"


class TestPeriodAggregates:
    """Tests for filtered totals."""

    @pytest.mark.parametrize(
        "period,count,xp,sets,minutes",
        [
            (TimePeriod.WEEK, 2, 75, 4, 36),
            (TimePeriod.MONTH, 3, 105, 6, 37),
            (TimePeriod.YEAR, 4, 165, 8, 41),
        ],
    )
    def test_totals(self, sample_history, now, period, count, xp, sets, minutes):
        stats = StatisticsAggregator(sample_history, now)

        assert len(stats.filtered_workouts(period)) == count
        assert stats.total_xp(period) == xp
        assert stats.total_sets(period) == sets
        assert stats.total_minutes(period) == minutes

    def test_filtered_keeps_history_order(self, sample_history, now):
        filtered = StatisticsAggregator(sample_history, now).filtered_workouts(
            TimePeriod.MONTH
        )
        assert [w.exercise_name for w in filtered] == ["Push-up", "Running", "Plank"]

    def test_category_breakdown(self, sample_history, now):
        breakdown = StatisticsAggregator(sample_history, now).category_breakdown(
            TimePeriod.MONTH
        )

        assert set(breakdown.counts) == set(SubCategory)
        assert breakdown.total == 3
        assert breakdown.counts[SubCategory.LOWER_BODY] == 0
        assert breakdown.percentage(SubCategory.CARDIO) == pytest.approx(100 / 3)
        assert breakdown.percentage(SubCategory.LOWER_BODY) == 0.0

    def test_breakdown_to_dict(self, sample_history, now):
        data = StatisticsAggregator(sample_history, now).category_breakdown(
            TimePeriod.YEAR
        ).to_dict()

        assert data["total"] == 4
        lower = next(c for c in data["categories"] if c["category"] == "lower_body")
        assert lower == {"category": "lower_body", "count": 1, "percentage": 25.0}


class TestHistoryWide:
    """Tests for level, recent and today views."""

    def test_level_from_all_time_xp(self, sample_history, now):
        stats = StatisticsAggregator(sample_history, now)

        assert stats.total_xp_all_time == 180
        assert stats.current_level == 1
        assert stats.xp_to_next_level == 20

    def test_level_for_45_xp(self, now, make_record):
        history = WorkoutHistory(workouts=(make_record(now, xp=45),))
        stats = StatisticsAggregator(history, now)

        assert stats.current_level == 1
        assert stats.xp_to_next_level == 155

    def test_level_at_threshold(self, now, make_record):
        history = WorkoutHistory(workouts=(make_record(now, xp=200),))
        stats = StatisticsAggregator(history, now)

        assert stats.current_level == 2
        assert stats.xp_to_next_level == 200

    def test_recent_workouts(self, sample_history, now):
        stats = StatisticsAggregator(sample_history, now)

        assert [w.exercise_name for w in stats.recent_workouts(2)] == ["Push-up", "Running"]
        assert stats.recent_workouts(0) == []
        assert len(stats.recent_workouts(50)) == 5

    def test_recent_negative_limit(self, sample_history, now):
        with pytest.raises(InvalidInputError):
            StatisticsAggregator(sample_history, now).recent_workouts(-1)

    def test_today_workouts(self, sample_history, now):
        today = StatisticsAggregator(sample_history, now).today_workouts()
        assert [w.exercise_name for w in today] == ["Push-up"]


class TestWeeklyBarData:
    """Tests for the trailing seven-day chart."""

    def test_trailing_window_ends_today(self, sample_history, now):
        data = StatisticsAggregator(sample_history, now).weekly_bar_data()

        assert [d.day for d in data] == ["Thu", "Fri", "Sat", "Sun", "Mon", "Tue", "Wed"]
        assert [d.count for d in data] == [0, 0, 0, 1, 1, 0, 1]

    def test_window_differs_from_calendar_week(self, sample_history, now):
        """Sunday the 12th is charted but is outside the ISO week."""
        stats = StatisticsAggregator(sample_history, now)

        assert sum(d.count for d in stats.weekly_bar_data()) == 3
        assert len(stats.filtered_workouts(TimePeriod.WEEK)) == 2

    def test_counts_multiple_workouts_per_day(self, now, make_record):
        history = WorkoutHistory(
            workouts=(make_record(now), make_record(now.replace(hour=7)))
        )
        data = StatisticsAggregator(history, now).weekly_bar_data()
        assert data[-1].count == 2


class TestEmptyHistory:
    """Statistics over an empty history."""

    def test_all_zero(self, now):
        stats = StatisticsAggregator(WorkoutHistory(), now)

        for period in TimePeriod:
            assert stats.total_xp(period) == 0
            assert stats.total_sets(period) == 0
            assert stats.total_minutes(period) == 0
        assert stats.current_level == 1
        assert stats.xp_to_next_level == 200
        assert stats.recent_workouts() == []
        assert [d.count for d in stats.weekly_bar_data()] == [0] * 7

    def test_breakdown_percentages_zero(self, now):
        breakdown = StatisticsAggregator([], now).category_breakdown(TimePeriod.WEEK)

        assert breakdown.total == 0
        for category in SubCategory:
            assert breakdown.percentage(category) == 0.0


class TestSummary:
    """Tests for composite views."""

    def test_summary(self, sample_history, now):
        summary = StatisticsAggregator(sample_history, now).summary(
            TimePeriod.MONTH, recent_limit=2
        )

        assert summary.workout_count == 3
        assert summary.total_xp == 105
        assert summary.current_level == 1
        assert [w.exercise_name for w in summary.recent_workouts] == ["Push-up", "Running"]
        assert len(summary.weekly_bar_data) == 7

    def test_summary_to_dict(self, sample_history, now):
        data = StatisticsAggregator(sample_history, now).summary(TimePeriod.WEEK).to_dict()

        assert data["period"] == "week"
        assert data["workout_count"] == 2
        assert data["weekly_bar_data"][0] == {"day": "Thu", "count": 0}
        assert data["recent_workouts"][0]["exercise_name"] == "Push-up"

    def test_goal_progress(self, sample_history, now):
        settings = UserSettings(weekly_workout_goal=3, monthly_xp_goal=1000)
        goals = StatisticsAggregator(sample_history, now).goal_progress(settings)

        assert goals.weekly_workouts == 2
        assert goals.weekly_ratio == pytest.approx(2 / 3)
        assert goals.monthly_xp == 105
        assert goals.monthly_ratio == pytest.approx(0.105)

    def test_goal_ratios_capped(self, sample_history, now):
        settings = UserSettings(weekly_workout_goal=1, monthly_xp_goal=0)
        goals = StatisticsAggregator(sample_history, now).goal_progress(settings)

        assert goals.weekly_ratio == 1.0
        assert goals.monthly_ratio == 1.0
