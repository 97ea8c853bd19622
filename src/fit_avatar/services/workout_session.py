"""Turning a finished exercise session into a workout record and avatar XP."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence

from ..errors import InvalidInputError
from ..logging_setup import get_logger
from ..models.avatar import AvatarStats
from ..models.exercises import DifficultyLevel, Exercise, TrainingType
from ..models.workout import WorkoutHistory, WorkoutRecord, WorkoutSetDetail

logger = get_logger(__name__)

# XP for one beginner set
BASE_XP_PER_SET = 15

# Assumed minutes per set for rep-based exercises
MINUTES_PER_SET = 2


def calculate_xp(set_count: int, difficulty: DifficultyLevel) -> int:
    """XP earned for a session: base XP x sets x difficulty multiplier."""
    if set_count < 0:
        raise InvalidInputError(f"Set count must be non-negative, got {set_count}")
    return BASE_XP_PER_SET * set_count * difficulty.xp_multiplier


def calculate_duration_minutes(
    training_type: TrainingType, details: Sequence[WorkoutSetDetail]
) -> int:
    """Estimate session length in whole minutes from its sets.

    Cardio sums the recorded seconds, timed exercises count whole minutes per
    set, and everything else assumes two minutes per set.
    """
    if training_type == TrainingType.CARDIO:
        return sum(d.duration_seconds or 0 for d in details) // 60
    if training_type == TrainingType.TIMED:
        return sum((d.duration_seconds or 0) // 60 for d in details)
    return len(details) * MINUTES_PER_SET


@dataclass(frozen=True)
class WorkoutOutcome:
    """New snapshots produced by completing a workout. Nothing is saved yet."""

    record: WorkoutRecord
    history: WorkoutHistory
    stats: AvatarStats


def complete_workout(
    exercise: Exercise,
    details: Iterable[WorkoutSetDetail],
    history: WorkoutHistory,
    stats: AvatarStats,
    now: datetime | None = None,
) -> WorkoutOutcome:
    """Record a finished session.

    The record is prepended to the history and its XP is added in full to each
    body part the exercise trains.

    Raises:
        InvalidInputError: If no sets were performed
    """
    details = tuple(details)
    if not details:
        raise InvalidInputError("A workout needs at least one set")

    xp = calculate_xp(len(details), exercise.difficulty)
    record = WorkoutRecord(
        exercise_name=exercise.name,
        category=exercise.sub_category,
        sets=len(details),
        duration_minutes=calculate_duration_minutes(exercise.training_type, details),
        xp_earned=xp,
        date=now or datetime.now(),
        details=details,
    )

    parts = exercise.trained_body_parts
    logger.info(
        "Workout completed",
        exercise=exercise.name,
        sets=record.sets,
        xp=xp,
        body_parts=sorted(p.value for p in parts),
    )

    return WorkoutOutcome(
        record=record,
        history=history.prepend(record),
        stats=stats.add_xp(xp, parts),
    )


def last_performed_by_exercise(history: WorkoutHistory) -> dict[str, datetime]:
    """Latest workout time per exercise name."""
    performed: dict[str, datetime] = {}
    for record in history:
        latest = performed.get(record.exercise_name)
        if latest is None or record.date > latest:
            performed[record.exercise_name] = record.date
    return performed
