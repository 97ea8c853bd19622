"""Workout history statistics over calendar periods."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable

from ..errors import InvalidInputError
from ..logging_setup import get_logger
from ..models.exercises import SubCategory
from ..models.user_settings import UserSettings
from ..models.workout import DayData, TimePeriod, WorkoutRecord

logger = get_logger(__name__)

# XP per overall history level; separate from the per-body-part cadence
XP_PER_LEVEL = 200

# Short weekday names indexed by Sunday-first weekday (0 = Sunday)
WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# Days shown in the trailing activity chart
BAR_CHART_DAYS = 7


def is_in_period(date: datetime, now: datetime, period: TimePeriod) -> bool:
    """Whether ``date`` falls in the same calendar week, month or year as ``now``.

    Weeks are ISO weeks (Monday to Sunday), compared by ISO year and week number.
    """
    if period == TimePeriod.WEEK:
        return date.isocalendar()[:2] == now.isocalendar()[:2]
    if period == TimePeriod.MONTH:
        return (date.year, date.month) == (now.year, now.month)
    return date.year == now.year


def weekday_name(date: datetime) -> str:
    # datetime.weekday() is Monday-first
    return WEEKDAY_NAMES[(date.weekday() + 1) % 7]


@dataclass(frozen=True)
class CategoryBreakdown:
    """Workout counts per category with the shared denominator."""

    counts: dict[SubCategory, int]
    total: int

    def percentage(self, category: SubCategory) -> float:
        """Share of workouts in ``category`` as 0-100; 0 when there are none."""
        if self.total == 0:
            return 0.0
        return self.counts.get(category, 0) / self.total * 100

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "categories": [
                {
                    "category": category.value,
                    "count": count,
                    "percentage": round(self.percentage(category), 1),
                }
                for category, count in self.counts.items()
            ],
        }


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregates for one period plus history-wide level information."""

    period: TimePeriod
    workout_count: int
    total_xp: int
    total_sets: int
    total_minutes: int
    current_level: int
    xp_to_next_level: int
    weekly_bar_data: list[DayData]
    category_breakdown: CategoryBreakdown
    recent_workouts: list[WorkoutRecord]

    def to_dict(self) -> dict:
        return {
            "period": self.period.value,
            "workout_count": self.workout_count,
            "total_xp": self.total_xp,
            "total_sets": self.total_sets,
            "total_minutes": self.total_minutes,
            "current_level": self.current_level,
            "xp_to_next_level": self.xp_to_next_level,
            "weekly_bar_data": [
                {"day": d.day, "count": d.count} for d in self.weekly_bar_data
            ],
            "category_breakdown": self.category_breakdown.to_dict(),
            "recent_workouts": [w.to_dict() for w in self.recent_workouts],
        }


@dataclass(frozen=True)
class GoalProgress:
    """Progress toward the weekly workout and monthly XP goals."""

    weekly_workouts: int
    weekly_goal: int
    monthly_xp: int
    monthly_goal: int

    @property
    def weekly_ratio(self) -> float:
        if self.weekly_goal <= 0:
            return 1.0
        return min(self.weekly_workouts / self.weekly_goal, 1.0)

    @property
    def monthly_ratio(self) -> float:
        if self.monthly_goal <= 0:
            return 1.0
        return min(self.monthly_xp / self.monthly_goal, 1.0)


class StatisticsAggregator:
    """Summaries of a newest-first workout history relative to ``now``.

    Usage:
        stats = StatisticsAggregator(history)
        stats.total_xp(TimePeriod.MONTH)
        stats.weekly_bar_data()
    """

    def __init__(self, workouts: Iterable[WorkoutRecord], now: datetime | None = None):
        self.workouts = list(workouts)
        self.now = now or datetime.now()

    # Period filtered aggregates

    def filtered_workouts(self, period: TimePeriod) -> list[WorkoutRecord]:
        """Records in the same calendar week/month/year as now."""
        return [w for w in self.workouts if is_in_period(w.date, self.now, period)]

    def total_xp(self, period: TimePeriod) -> int:
        return sum(w.xp_earned for w in self.filtered_workouts(period))

    def total_sets(self, period: TimePeriod) -> int:
        return sum(w.sets for w in self.filtered_workouts(period))

    def total_minutes(self, period: TimePeriod) -> int:
        return sum(w.duration_minutes for w in self.filtered_workouts(period))

    def category_breakdown(self, period: TimePeriod) -> CategoryBreakdown:
        """Per-category counts over the period, every category present."""
        filtered = self.filtered_workouts(period)
        counts = {category: 0 for category in SubCategory}
        for workout in filtered:
            counts[workout.category] += 1
        return CategoryBreakdown(counts=counts, total=len(filtered))

    # History-wide aggregates

    @property
    def total_xp_all_time(self) -> int:
        return sum(w.xp_earned for w in self.workouts)

    @property
    def current_level(self) -> int:
        """Overall level: one level per 200 XP across the whole history."""
        return self.total_xp_all_time // XP_PER_LEVEL + 1

    @property
    def xp_to_next_level(self) -> int:
        return self.current_level * XP_PER_LEVEL - self.total_xp_all_time

    def recent_workouts(self, limit: int = 5) -> list[WorkoutRecord]:
        """The first ``limit`` records; history is stored newest first."""
        if limit < 0:
            raise InvalidInputError(f"Limit must be non-negative, got {limit}")
        return self.workouts[:limit]

    def today_workouts(self) -> list[WorkoutRecord]:
        today = self.now.date()
        return [w for w in self.workouts if w.date.date() == today]

    def weekly_bar_data(self) -> list[DayData]:
        """Workout counts for the trailing seven days ending today, oldest first.

        This window always ends today and is not aligned to the calendar week
        used by ``TimePeriod.WEEK``.
        """
        counts: dict = {}
        for workout in self.workouts:
            day = workout.date.date()
            counts[day] = counts.get(day, 0) + 1

        data = []
        for offset in range(BAR_CHART_DAYS):
            date = self.now - timedelta(days=BAR_CHART_DAYS - 1 - offset)
            data.append(DayData(day=weekday_name(date), count=counts.get(date.date(), 0)))
        return data

    # Composite views

    def summary(self, period: TimePeriod, recent_limit: int = 5) -> PeriodSummary:
        """Build every statistic shown for a period in one snapshot."""
        filtered = self.filtered_workouts(period)
        logger.debug(
            "Computing statistics summary",
            period=period.value,
            history_size=len(self.workouts),
            matched=len(filtered),
        )
        return PeriodSummary(
            period=period,
            workout_count=len(filtered),
            total_xp=sum(w.xp_earned for w in filtered),
            total_sets=sum(w.sets for w in filtered),
            total_minutes=sum(w.duration_minutes for w in filtered),
            current_level=self.current_level,
            xp_to_next_level=self.xp_to_next_level,
            weekly_bar_data=self.weekly_bar_data(),
            category_breakdown=self.category_breakdown(period),
            recent_workouts=filtered[:recent_limit],
        )

    def goal_progress(self, settings: UserSettings) -> GoalProgress:
        return GoalProgress(
            weekly_workouts=len(self.filtered_workouts(TimePeriod.WEEK)),
            weekly_goal=settings.weekly_workout_goal,
            monthly_xp=self.total_xp(TimePeriod.MONTH),
            monthly_goal=settings.monthly_xp_goal,
        )
