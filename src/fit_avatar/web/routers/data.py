"""Export, import and clear routes."""

import json

from fastapi import APIRouter, Depends, Request

from ...db import AppStateRepository
from ...services.data_transfer import clear_all_data, export_data, import_data
from .deps import get_repository

router = APIRouter(tags=["data"])


@router.get("/export")
async def export(repo: AppStateRepository = Depends(get_repository)):
    state = await repo.load()
    return json.loads(export_data(state.settings, state.history))


@router.post("/import")
async def import_(request: Request, repo: AppStateRepository = Depends(get_repository)):
    """Replace history and settings with an export payload."""
    state = await repo.load()
    imported, settings = import_data(await request.body(), state.settings)
    await repo.save_import(imported, settings)
    return {"imported": len(imported.workout_history), "user_name": settings.user_name}


@router.post("/clear")
async def clear(repo: AppStateRepository = Depends(get_repository)):
    state = await repo.load()
    _, settings = clear_all_data(state.settings)
    await repo.clear_all(settings)
    return {"status": "cleared"}
