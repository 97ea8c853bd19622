"""Statistics routes."""

from fastapi import APIRouter, Depends, Query

from ...config import get_settings
from ...db import AppStateRepository
from ...models.workout import TimePeriod
from ...services.statistics import StatisticsAggregator
from .deps import get_repository

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("")
async def get_stats(
    period: TimePeriod = Query(TimePeriod.WEEK),
    repo: AppStateRepository = Depends(get_repository),
):
    """Period summary, trailing seven-day chart, categories and goals."""
    state = await repo.load()
    aggregator = StatisticsAggregator(state.history)
    summary = aggregator.summary(
        period, recent_limit=get_settings().recent_workouts_limit
    )
    goals = aggregator.goal_progress(state.settings)

    payload = summary.to_dict()
    payload["goals"] = {
        "weekly_workouts": goals.weekly_workouts,
        "weekly_goal": goals.weekly_goal,
        "weekly_ratio": goals.weekly_ratio,
        "monthly_xp": goals.monthly_xp,
        "monthly_goal": goals.monthly_goal,
        "monthly_ratio": goals.monthly_ratio,
    }
    return payload
