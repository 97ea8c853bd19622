"""Per-body-part avatar stats and leveling formulas."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

from ..errors import DeserializationError, InvalidInputError

# Points needed per body-part level
POINTS_PER_LEVEL = 100

# Radar normalization never divides by less than this
RADAR_MIN_SCALE = 100

# Smallest radius fraction drawn for a body part
RADAR_MIN_DISPLAY_VALUE = 0.05


class BodyPart(str, Enum):
    """Body parts tracked independently for progression."""

    ARMS = "arms"
    SHOULDERS = "shoulders"
    ABS = "abs"
    BACK = "back"
    LEGS = "legs"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class RadarDataPoint:
    """One labelled vertex value of the avatar radar chart."""

    label: str
    value: float  # 0.05 to 1.0
    part: BodyPart

    def to_dict(self) -> dict:
        return {"label": self.label, "value": self.value, "part": self.part.value}


@dataclass(frozen=True)
class AvatarStats:
    """Accumulated points for each body part.

    Instances are immutable snapshots: ``add_xp`` returns a new object and the
    caller decides when to persist it.
    """

    arms: int = 0
    shoulders: int = 0
    abs: int = 0
    back: int = 0
    legs: int = 0

    def points(self, part: BodyPart) -> int:
        """Get the raw points for a body part."""
        return getattr(self, part.value)

    @property
    def total_points(self) -> int:
        return sum(self.points(part) for part in BodyPart)

    @property
    def overall_level(self) -> int:
        """Integer mean of the five raw scores.

        This is not passed through the per-part 100-point cadence, so 250 points
        in a single part yields 50, not 1.
        """
        return self.total_points // len(BodyPart)

    def level(self, part: BodyPart) -> int:
        """Level for a body part (100 points per level, starting at 1)."""
        return self.points(part) // POINTS_PER_LEVEL + 1

    def xp_to_next_level(self, part: BodyPart) -> int:
        """Points still missing before the next level is reached."""
        return self.level(part) * POINTS_PER_LEVEL - self.points(part)

    def level_progress(self, part: BodyPart) -> float:
        """Fraction of the current level completed, clamped to [0, 1]."""
        current_level_floor = (self.level(part) - 1) * POINTS_PER_LEVEL
        progress = (self.points(part) - current_level_floor) / POINTS_PER_LEVEL
        return min(max(progress, 0.0), 1.0)

    def add_xp(self, amount: int, parts: Iterable[BodyPart]) -> "AvatarStats":
        """Return a new snapshot with ``amount`` added to every listed part.

        The full amount goes to each part; it is not split between them.
        Passing no parts returns an unchanged snapshot.

        Raises:
            InvalidInputError: If amount is negative
        """
        if amount < 0:
            raise InvalidInputError(f"XP amount must be non-negative, got {amount}")

        changes = {part.value: self.points(part) + amount for part in set(parts)}
        if not changes:
            return self
        return replace(self, **changes)

    def radar_data(self) -> list[RadarDataPoint]:
        """Normalized per-part values for the radar chart, in BodyPart order."""
        max_points = max(*(self.points(part) for part in BodyPart), RADAR_MIN_SCALE)

        data = []
        for part in BodyPart:
            points = self.points(part)
            if points > 0:
                value = max(points / max_points, RADAR_MIN_DISPLAY_VALUE)
            else:
                value = RADAR_MIN_DISPLAY_VALUE
            data.append(RadarDataPoint(label=part.label, value=value, part=part))
        return data

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {part.value: self.points(part) for part in BodyPart}

    @classmethod
    def from_dict(cls, data: dict) -> "AvatarStats":
        """Create from dictionary. Missing parts default to 0."""
        values = {}
        for part in BodyPart:
            raw = data.get(part.value, 0)
            if not isinstance(raw, int) or isinstance(raw, bool) or raw < 0:
                raise DeserializationError(f"Invalid points for {part.value}: {raw!r}")
            values[part.value] = raw
        return cls(**values)
