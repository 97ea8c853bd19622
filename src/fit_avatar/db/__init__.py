"""Database layer for fit-avatar."""

from .engine import get_db_path, init_db
from .repositories import (
    AppState,
    AppStateRepository,
    AvatarStatsRepository,
    UserSettingsRepository,
    WorkoutRepository,
)

__all__ = [
    "AppState",
    "AppStateRepository",
    "AvatarStatsRepository",
    "get_db_path",
    "init_db",
    "UserSettingsRepository",
    "WorkoutRepository",
]
