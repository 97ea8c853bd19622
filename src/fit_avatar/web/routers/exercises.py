"""Exercise catalog routes."""

from fastapi import APIRouter, Depends, Query

from ...db import AppStateRepository
from ...models.exercises import (
    COMMON_EXERCISES,
    DifficultyLevel,
    EquipmentType,
    Location,
    MainCategory,
    MuscleGroup,
    SubCategory,
)
from ...services.exercise_query import ExerciseFilter, ExerciseQueryEngine, SortOrder
from ...services.workout_session import last_performed_by_exercise
from .deps import get_repository

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("")
async def list_exercises(
    main_category: MainCategory | None = None,
    sub_category: SubCategory | None = None,
    difficulty: list[DifficultyLevel] = Query([]),
    muscle: list[MuscleGroup] = Query([]),
    equipment: list[EquipmentType] = Query([]),
    location: list[Location] = Query([]),
    search: str = "",
    sort: SortOrder = SortOrder.NAME_ASCENDING,
    grouped: bool = False,
    repo: AppStateRepository = Depends(get_repository),
):
    """Filter and sort the catalog. Repeat list parameters to accept several values."""
    exercise_filter = ExerciseFilter(
        main_category=main_category,
        sub_category=sub_category,
        difficulty_levels=frozenset(difficulty),
        target_muscles=frozenset(muscle),
        equipment=frozenset(equipment),
        locations=frozenset(location),
        search_text=search.strip(),
    )

    history = await repo.workouts.list_all()
    engine = ExerciseQueryEngine(COMMON_EXERCISES).with_last_performed(
        last_performed_by_exercise(history)
    )

    payload = {"filter_active": exercise_filter.is_active}
    if grouped:
        payload["groups"] = [
            {
                "sub_category": sub.value,
                "label": sub.label,
                "exercises": [e.to_dict() for e in entries],
            }
            for sub, entries in engine.grouped_by_sub_category(exercise_filter, sort)
        ]
    else:
        payload["exercises"] = [e.to_dict() for e in engine.apply(exercise_filter, sort)]
    return payload
