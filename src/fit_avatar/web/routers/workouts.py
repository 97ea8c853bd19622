"""Workout history routes."""

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from ...db import AppStateRepository
from ...models.exercises import find_exercise
from ...models.workout import WorkoutSetDetail
from ...services.statistics import StatisticsAggregator
from ...services.workout_session import complete_workout
from .deps import get_repository

router = APIRouter(prefix="/workouts", tags=["workouts"])


class SetIn(BaseModel):
    weight: float | None = Field(None, ge=0)
    reps: int | None = Field(None, ge=0)
    duration_seconds: int | None = Field(None, ge=0)
    distance: float | None = Field(None, ge=0)


class WorkoutIn(BaseModel):
    exercise_name: str
    sets: list[SetIn] = Field(min_length=1)


@router.get("")
async def list_workouts(
    limit: int = Query(5, ge=0),
    repo: AppStateRepository = Depends(get_repository),
):
    """Most recent workouts, newest first."""
    history = await repo.workouts.list_all()
    return {
        "total": len(history),
        "workouts": [w.to_dict() for w in history.recent(limit)],
    }


@router.get("/today")
async def today_workouts(repo: AppStateRepository = Depends(get_repository)):
    history = await repo.workouts.list_all()
    return [w.to_dict() for w in StatisticsAggregator(history).today_workouts()]


@router.post("", status_code=201)
async def create_workout(
    body: WorkoutIn, repo: AppStateRepository = Depends(get_repository)
):
    """Complete a workout: store the record and add XP to the avatar."""
    exercise = find_exercise(body.exercise_name)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")

    details = [WorkoutSetDetail(**s.model_dump()) for s in body.sets]
    state = await repo.load()
    outcome = complete_workout(exercise, details, state.history, state.stats)
    await repo.save_workout(outcome.record, outcome.stats)

    return {"workout": outcome.record.to_dict(), "avatar": outcome.stats.to_dict()}
