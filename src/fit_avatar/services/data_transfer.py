"""Export, import and reset of user data."""

import json
from dataclasses import replace

from ..errors import DeserializationError
from ..logging_setup import get_logger
from ..models.user_settings import DEFAULT_USER_NAME, ExportData, UserSettings
from ..models.workout import WorkoutHistory

logger = get_logger(__name__)


def export_data(settings: UserSettings, history: WorkoutHistory) -> str:
    """Serialize name, goals and the full history to JSON."""
    payload = ExportData.from_state(settings, history).to_dict()
    logger.info("Exporting data", workouts=len(history))
    return json.dumps(payload, indent=2, ensure_ascii=False)


def parse_import(payload: str | bytes) -> ExportData:
    """Decode an export payload.

    Raises:
        DeserializationError: If the payload is not a valid export
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DeserializationError(f"Import payload is not valid JSON: {e}") from e

    imported = ExportData.from_dict(data)
    logger.info("Parsed import payload", workouts=len(imported.workout_history))
    return imported


def import_data(
    payload: str | bytes, settings: UserSettings
) -> tuple[ExportData, UserSettings]:
    """Decode a payload and compute the settings that replace the current ones.

    History is replaced wholesale by ``ExportData.workout_history``; there is no
    merging with existing records.
    """
    imported = parse_import(payload)
    return imported, imported.apply_to(settings)


def clear_all_data(settings: UserSettings) -> tuple[WorkoutHistory, UserSettings]:
    """Empty history and default user name. Goals and units are kept."""
    return WorkoutHistory(), replace(settings, user_name=DEFAULT_USER_NAME)
