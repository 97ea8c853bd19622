"""Avatar stats routes."""

from fastapi import APIRouter, Depends, Query

from ...db import AppStateRepository
from ...models.avatar import BodyPart
from ...utils.radar import build_radar_chart
from .deps import get_repository

router = APIRouter(prefix="/avatar", tags=["avatar"])


@router.get("")
async def get_avatar(repo: AppStateRepository = Depends(get_repository)):
    """Per-part points, levels and progress plus the overall level."""
    stats = await repo.avatar.load()
    return {
        "overall_level": stats.overall_level,
        "parts": [
            {
                "part": part.value,
                "label": part.label,
                "points": stats.points(part),
                "level": stats.level(part),
                "xp_to_next_level": stats.xp_to_next_level(part),
                "level_progress": stats.level_progress(part),
            }
            for part in BodyPart
        ],
    }


@router.get("/radar")
async def get_radar(
    size: float = Query(200.0, gt=0),
    levels: bool = Query(False, description="Include concentric grid rings"),
    repo: AppStateRepository = Depends(get_repository),
):
    """Radar vector and chart geometry for the current stats."""
    stats = await repo.avatar.load()
    points = stats.radar_data()
    chart = build_radar_chart([p.value for p in points], size, show_multiple_levels=levels)
    return {"points": [p.to_dict() for p in points], "chart": chart.to_dict()}


@router.post("/reset")
async def reset_avatar(repo: AppStateRepository = Depends(get_repository)):
    stats = await repo.avatar.reset()
    return stats.to_dict()
