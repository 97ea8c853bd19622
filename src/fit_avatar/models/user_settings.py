"""User settings and the export/import payload."""

from dataclasses import dataclass
from enum import Enum

from ..errors import DeserializationError, InvalidInputError
from .workout import WorkoutHistory

DEFAULT_USER_NAME = "Trainee"


class WeightUnit(str, Enum):
    KG = "kg"
    LB = "lb"


class DistanceUnit(str, Enum):
    KM = "km"
    MI = "mi"


@dataclass(frozen=True)
class UserSettings:
    """User-editable preferences and goals."""

    user_name: str = DEFAULT_USER_NAME
    weekly_workout_goal: int = 3
    monthly_xp_goal: int = 1000
    weight_unit: WeightUnit = WeightUnit.KG
    distance_unit: DistanceUnit = DistanceUnit.KM

    def __post_init__(self):
        if self.weekly_workout_goal < 0 or self.monthly_xp_goal < 0:
            raise InvalidInputError("Goals must be non-negative")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_name": self.user_name,
            "weekly_workout_goal": self.weekly_workout_goal,
            "monthly_xp_goal": self.monthly_xp_goal,
            "weight_unit": self.weight_unit.value,
            "distance_unit": self.distance_unit.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserSettings":
        """Create from dictionary, falling back to defaults for missing keys."""
        try:
            return cls(
                user_name=data.get("user_name", DEFAULT_USER_NAME),
                weekly_workout_goal=int(data.get("weekly_workout_goal", 3)),
                monthly_xp_goal=int(data.get("monthly_xp_goal", 1000)),
                weight_unit=WeightUnit(data.get("weight_unit", "kg")),
                distance_unit=DistanceUnit(data.get("distance_unit", "km")),
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise DeserializationError(f"Invalid settings: {e}") from e


@dataclass(frozen=True)
class ExportData:
    """Flat export record. Importing it replaces history and settings wholesale."""

    user_name: str
    workout_history: WorkoutHistory
    weekly_goal: int
    monthly_goal: int

    def to_dict(self) -> dict:
        return {
            "userName": self.user_name,
            "workoutHistory": self.workout_history.to_list(),
            "weeklyGoal": self.weekly_goal,
            "monthlyGoal": self.monthly_goal,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExportData":
        """Create from dictionary.

        Raises:
            DeserializationError: If any required field is missing or malformed
        """
        if not isinstance(data, dict):
            raise DeserializationError("Export payload must be a JSON object")
        try:
            history = data["workoutHistory"]
            user_name = str(data["userName"])
            weekly_goal = int(data["weeklyGoal"])
            monthly_goal = int(data["monthlyGoal"])
        except (KeyError, TypeError, ValueError) as e:
            raise DeserializationError(f"Invalid export payload: {e}") from e

        if not isinstance(history, list):
            raise DeserializationError("workoutHistory must be a list")
        if weekly_goal < 0 or monthly_goal < 0:
            raise DeserializationError("Goals must be non-negative")

        return cls(
            user_name=user_name,
            workout_history=WorkoutHistory.from_list(history),
            weekly_goal=weekly_goal,
            monthly_goal=monthly_goal,
        )

    @classmethod
    def from_state(
        cls, settings: UserSettings, history: WorkoutHistory
    ) -> "ExportData":
        return cls(
            user_name=settings.user_name,
            workout_history=history,
            weekly_goal=settings.weekly_workout_goal,
            monthly_goal=settings.monthly_xp_goal,
        )

    def apply_to(self, settings: UserSettings) -> UserSettings:
        """Settings with the imported name and goals; units are kept."""
        return UserSettings(
            user_name=self.user_name,
            weekly_workout_goal=self.weekly_goal,
            monthly_xp_goal=self.monthly_goal,
            weight_unit=settings.weight_unit,
            distance_unit=settings.distance_unit,
        )
