"""Workout records and the newest-first workout history."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Iterator
from uuid import UUID, uuid4

from ..errors import DeserializationError, InvalidInputError
from .exercises import SubCategory


class TimePeriod(str, Enum):
    """Calendar period used to filter statistics."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class DayData:
    """Workout count for one day of the bar chart."""

    day: str
    count: int


@dataclass(frozen=True)
class WorkoutSetDetail:
    """Measurements for a single set. At least one field must be populated."""

    weight: float | None = None  # kg
    reps: int | None = None
    duration_seconds: int | None = None
    distance: float | None = None  # km

    def __post_init__(self):
        if (
            self.weight is None
            and self.reps is None
            and self.duration_seconds is None
            and self.distance is None
        ):
            raise InvalidInputError("A set needs at least one measurement")

    def describe(self) -> str:
        """Get a short human-readable description of the set."""
        if self.weight is not None and self.reps is not None:
            return f"{self.weight:.1f}kg x {self.reps}"
        if self.reps is not None:
            return f"{self.reps} reps"
        if self.duration_seconds is not None:
            return f"{self.duration_seconds} sec"
        if self.distance is not None:
            return f"{self.distance:.1f}km"
        return ""

    def to_dict(self) -> dict:
        return {
            "weight": self.weight,
            "reps": self.reps,
            "duration_seconds": self.duration_seconds,
            "distance": self.distance,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSetDetail":
        return cls(
            weight=data.get("weight"),
            reps=data.get("reps"),
            duration_seconds=data.get("duration_seconds"),
            distance=data.get("distance"),
        )



def _parse_id(raw) -> UUID:
    """Parse a stored id; missing or malformed ids get a fresh UUID."""
    if not raw:
        return uuid4()
    try:
        return UUID(str(raw))
    except ValueError:
        return uuid4()


@dataclass(frozen=True)
class WorkoutRecord:
    """A completed workout. Never mutated after creation."""

    exercise_name: str
    category: SubCategory
    sets: int
    duration_minutes: int
    xp_earned: int
    date: datetime
    details: tuple[WorkoutSetDetail, ...] = ()
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        # Stored times are naive local time
        if self.date.tzinfo is not None:
            object.__setattr__(self, "date", self.date.astimezone().replace(tzinfo=None))
        if self.sets < 0:
            raise InvalidInputError(f"Set count must be non-negative, got {self.sets}")
        if self.duration_minutes < 0:
            raise InvalidInputError(
                f"Duration must be non-negative, got {self.duration_minutes}"
            )
        if self.xp_earned < 0:
            raise InvalidInputError(f"XP must be non-negative, got {self.xp_earned}")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": str(self.id),
            "exercise_name": self.exercise_name,
            "category": self.category.value,
            "sets": self.sets,
            "duration_minutes": self.duration_minutes,
            "xp_earned": self.xp_earned,
            "date": self.date.isoformat(),
            "details": [d.to_dict() for d in self.details],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutRecord":
        """Create from dictionary.

        Raises:
            DeserializationError: If the data is missing fields or malformed
        """
        try:
            return cls(
                id=_parse_id(data.get("id")),
                exercise_name=data["exercise_name"],
                category=SubCategory(data["category"]),
                sets=int(data["sets"]),
                duration_minutes=int(data["duration_minutes"]),
                xp_earned=int(data["xp_earned"]),
                date=datetime.fromisoformat(data["date"]),
                details=tuple(
                    WorkoutSetDetail.from_dict(d) for d in data.get("details") or []
                ),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DeserializationError(f"Invalid workout record: {e}") from e


@dataclass(frozen=True)
class WorkoutHistory:
    """Ordered workout records, newest first.

    New records are always inserted at index 0; nothing else reorders the history.
    """

    workouts: tuple[WorkoutRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.workouts)

    def __iter__(self) -> Iterator[WorkoutRecord]:
        return iter(self.workouts)

    def prepend(self, record: WorkoutRecord) -> "WorkoutHistory":
        """Return a new history with ``record`` as the newest entry."""
        return WorkoutHistory(workouts=(record,) + self.workouts)

    def recent(self, limit: int = 5) -> list[WorkoutRecord]:
        """Get the ``limit`` newest records."""
        if limit < 0:
            raise InvalidInputError(f"Limit must be non-negative, got {limit}")
        return list(self.workouts[:limit])

    @property
    def total_xp(self) -> int:
        return sum(w.xp_earned for w in self.workouts)

    def clear(self) -> "WorkoutHistory":
        return WorkoutHistory()

    def to_list(self) -> list[dict]:
        return [w.to_dict() for w in self.workouts]

    @classmethod
    def from_list(cls, data: list[dict]) -> "WorkoutHistory":
        """Create from a list of dicts. Repeated ids are replaced with fresh ones."""
        records = []
        seen: set[UUID] = set()
        for item in data:
            record = WorkoutRecord.from_dict(item)
            if record.id in seen:
                record = replace(record, id=uuid4())
            seen.add(record.id)
            records.append(record)
        return cls(workouts=tuple(records))
