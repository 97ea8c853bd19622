"""Data access layer for fit-avatar."""

import json
from dataclasses import dataclass
from pathlib import Path

import aiosqlite

from ..errors import DeserializationError
from ..logging_setup import get_logger
from ..models.avatar import AvatarStats
from ..models.user_settings import ExportData, UserSettings
from ..models.workout import WorkoutHistory, WorkoutRecord
from .engine import get_db_path

logger = get_logger(__name__)

AVATAR_STATS_KEY = "avatar_stats"
USER_SETTINGS_KEY = "user_settings"


async def _insert_workout(db: aiosqlite.Connection, record: WorkoutRecord) -> None:
    data = record.to_dict()
    await db.execute(
        """
        INSERT INTO workouts
        (id, exercise_name, category, sets, duration_minutes, xp_earned,
         performed_at, details)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            data["id"],
            data["exercise_name"],
            data["category"],
            data["sets"],
            data["duration_minutes"],
            data["xp_earned"],
            data["date"],
            json.dumps(data["details"]),
        ),
    )


async def _write_state(db: aiosqlite.Connection, key: str, value: dict) -> None:
    await db.execute(
        """
        INSERT INTO app_state (key, value, updated_at)
        VALUES (?, ?, CURRENT_TIMESTAMP)
        ON CONFLICT(key) DO UPDATE SET
            value = excluded.value, updated_at = CURRENT_TIMESTAMP
        """,
        (key, json.dumps(value)),
    )


async def _read_state(db_path: Path, key: str) -> dict | None:
    """Load a JSON document, or None if missing.

    Raises:
        DeserializationError: If the stored value is not a JSON object
    """
    async with aiosqlite.connect(db_path) as db:
        cursor = await db.execute("SELECT value FROM app_state WHERE key = ?", (key,))
        row = await cursor.fetchone()
    if row is None:
        return None
    try:
        value = json.loads(row[0])
    except json.JSONDecodeError as e:
        raise DeserializationError(f"Corrupt {key} document: {e}") from e
    if not isinstance(value, dict):
        raise DeserializationError(f"Corrupt {key} document: expected an object")
    return value


class WorkoutRepository:
    """Repository for the workout history. Rows come back newest first."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def list_all(self) -> WorkoutHistory:
        """Load the full history. Unreadable rows are skipped."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM workouts ORDER BY seq DESC")
            rows = await cursor.fetchall()

        records = []
        for row in rows:
            try:
                records.append(self._row_to_record(row))
            except DeserializationError as e:
                logger.warning("Skipping unreadable workout", id=row["id"], error=str(e))
        return WorkoutHistory(workouts=tuple(records))

    async def prepend(self, record: WorkoutRecord) -> None:
        """Store ``record`` as the newest workout."""
        async with aiosqlite.connect(self.db_path) as db:
            await _insert_workout(db, record)
            await db.commit()
        logger.info("Workout stored", id=str(record.id), exercise=record.exercise_name)

    async def replace_all(self, history: WorkoutHistory) -> None:
        """Replace the stored history, keeping the given order."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM workouts")
            for record in reversed(history.workouts):
                await _insert_workout(db, record)
            await db.commit()
        logger.info("Workout history replaced", count=len(history))

    async def clear(self) -> None:
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM workouts")
            await db.commit()
        logger.info("Workout history cleared")

    async def count(self) -> int:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT COUNT(*) FROM workouts")
            row = await cursor.fetchone()
            return row[0]

    def _row_to_record(self, row: aiosqlite.Row) -> WorkoutRecord:
        """Convert a database row to a WorkoutRecord."""
        try:
            details = json.loads(row["details"]) if row["details"] else []
        except json.JSONDecodeError as e:
            raise DeserializationError(f"Corrupt set details: {e}") from e

        return WorkoutRecord.from_dict(
            {
                "id": row["id"],
                "exercise_name": row["exercise_name"],
                "category": row["category"],
                "sets": row["sets"],
                "duration_minutes": row["duration_minutes"],
                "xp_earned": row["xp_earned"],
                "date": row["performed_at"],
                "details": details,
            }
        )


class AvatarStatsRepository:
    """Repository for the avatar stats snapshot."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def load(self) -> AvatarStats:
        """Load stats; missing or corrupt data yields fresh stats."""
        try:
            data = await _read_state(self.db_path, AVATAR_STATS_KEY)
            if data is None:
                return AvatarStats()
            return AvatarStats.from_dict(data)
        except DeserializationError as e:
            logger.warning("Using default avatar stats", error=str(e))
            return AvatarStats()

    async def save(self, stats: AvatarStats) -> None:
        async with aiosqlite.connect(self.db_path) as db:
            await _write_state(db, AVATAR_STATS_KEY, stats.to_dict())
            await db.commit()

    async def reset(self) -> AvatarStats:
        stats = AvatarStats()
        await self.save(stats)
        logger.info("Avatar stats reset")
        return stats


class UserSettingsRepository:
    """Repository for user settings."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def load(self) -> UserSettings:
        """Load settings; missing or corrupt data yields defaults."""
        try:
            data = await _read_state(self.db_path, USER_SETTINGS_KEY)
            if data is None:
                return UserSettings()
            return UserSettings.from_dict(data)
        except DeserializationError as e:
            logger.warning("Using default user settings", error=str(e))
            return UserSettings()

    async def save(self, settings: UserSettings) -> None:
        async with aiosqlite.connect(self.db_path) as db:
            await _write_state(db, USER_SETTINGS_KEY, settings.to_dict())
            await db.commit()


@dataclass(frozen=True)
class AppState:
    """Snapshot of everything the engine reads."""

    history: WorkoutHistory
    stats: AvatarStats
    settings: UserSettings


class AppStateRepository:
    """Loads and saves the combined application state.

    Multi-part writes happen in one transaction so readers never see a
    workout without its XP, or an import half applied.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()
        self.workouts = WorkoutRepository(self.db_path)
        self.avatar = AvatarStatsRepository(self.db_path)
        self.settings = UserSettingsRepository(self.db_path)

    async def load(self) -> AppState:
        return AppState(
            history=await self.workouts.list_all(),
            stats=await self.avatar.load(),
            settings=await self.settings.load(),
        )

    async def save_workout(self, record: WorkoutRecord, stats: AvatarStats) -> None:
        """Store a completed workout together with the updated stats."""
        async with aiosqlite.connect(self.db_path) as db:
            await _insert_workout(db, record)
            await _write_state(db, AVATAR_STATS_KEY, stats.to_dict())
            await db.commit()
        logger.info(
            "Workout saved",
            id=str(record.id),
            exercise=record.exercise_name,
            xp=record.xp_earned,
        )

    async def save_import(self, data: ExportData, settings: UserSettings) -> None:
        """Replace history and settings with imported data."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM workouts")
            for record in reversed(data.workout_history.workouts):
                await _insert_workout(db, record)
            await _write_state(db, USER_SETTINGS_KEY, settings.to_dict())
            await db.commit()
        logger.info("Import applied", workouts=len(data.workout_history))

    async def clear_all(self, settings: UserSettings) -> None:
        """Empty the history and store ``settings``."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM workouts")
            await _write_state(db, USER_SETTINGS_KEY, settings.to_dict())
            await db.commit()
        logger.info("All workout data cleared")
