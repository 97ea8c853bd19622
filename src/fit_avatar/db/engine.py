"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite

from ..config import get_settings
from ..logging_setup import get_logger

logger = get_logger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path, creating its directory if needed."""
    settings = get_settings()
    if data_dir is None:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings.db_path
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / settings.db_filename


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Workout history; seq gives newest-first ordering
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                seq INTEGER PRIMARY KEY AUTOINCREMENT,
                id TEXT UNIQUE NOT NULL,
                exercise_name TEXT NOT NULL,
                category TEXT NOT NULL,
                sets INTEGER NOT NULL,
                duration_minutes INTEGER NOT NULL,
                xp_earned INTEGER NOT NULL,
                performed_at TIMESTAMP NOT NULL,
                details TEXT DEFAULT '[]'
            )
        """)

        # Single-row JSON documents (avatar stats, user settings)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS app_state (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_performed_at
            ON workouts(performed_at)
        """)

        await db.commit()

    logger.info("Database initialized", db_path=str(db_path))
