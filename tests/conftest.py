"""Pytest configuration and fixtures."""

import pytest
import tempfile
from datetime import datetime
from pathlib import Path

from fit_avatar.models.exercises import SubCategory
from fit_avatar.models.workout import WorkoutHistory, WorkoutRecord, WorkoutSetDetail


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def now():
    """A fixed Wednesday, mid-month."""
    return datetime(2024, 5, 15, 12, 0)


def _make_record(
    date: datetime,
    category: SubCategory = SubCategory.UPPER_BODY,
    xp: int = 15,
    sets: int = 1,
    minutes: int = 2,
    name: str = "Push-up",
) -> WorkoutRecord:
    """Build a workout record with sensible defaults."""
    return WorkoutRecord(
        exercise_name=name,
        category=category,
        sets=sets,
        duration_minutes=minutes,
        xp_earned=xp,
        date=date,
        details=tuple(WorkoutSetDetail(reps=10) for _ in range(sets)),
    )


@pytest.fixture
def make_record():
    """Factory for workout records."""
    return _make_record


@pytest.fixture
def sample_history(now):
    """History spanning this week, this month, this year and last year.

    Records are newest first, as stored.
    """
    return WorkoutHistory(
        workouts=(
            _make_record(now, SubCategory.UPPER_BODY, xp=45, sets=3, minutes=6),
            _make_record(datetime(2024, 5, 13, 8, 0), SubCategory.CARDIO, xp=30, sets=1, minutes=30, name="Running"),
            _make_record(datetime(2024, 5, 12, 18, 0), SubCategory.CORE, xp=30, sets=2, minutes=1, name="Plank"),
            _make_record(datetime(2024, 4, 30, 7, 0), SubCategory.LOWER_BODY, xp=60, sets=2, minutes=4, name="Lunge"),
            _make_record(datetime(2023, 12, 31, 9, 0), SubCategory.LOWER_BODY, xp=15, sets=1, minutes=2, name="Squat"),
        )
    )
