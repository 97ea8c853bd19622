"""Exercise catalog filtering and sorting."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Sequence

from ..logging_setup import get_logger
from ..models.exercises import (
    DifficultyLevel,
    EquipmentType,
    Exercise,
    Location,
    MainCategory,
    MuscleGroup,
    SubCategory,
)

logger = get_logger(__name__)


class SortOrder(str, Enum):
    """Orderings available for catalog results."""

    NAME_ASCENDING = "name_asc"
    NAME_DESCENDING = "name_desc"
    DIFFICULTY_ASCENDING = "difficulty_asc"
    DIFFICULTY_DESCENDING = "difficulty_desc"
    RECENT = "recent"
    CATEGORY = "category"


@dataclass(frozen=True)
class ExerciseFilter:
    """Filter criteria. Every unset axis accepts everything.

    Axes are combined with AND; set-valued axes accept an entry when any of
    their members matches.
    """

    main_category: MainCategory | None = None
    sub_category: SubCategory | None = None
    difficulty_levels: frozenset[DifficultyLevel] = field(default_factory=frozenset)
    target_muscles: frozenset[MuscleGroup] = field(default_factory=frozenset)
    equipment: frozenset[EquipmentType] = field(default_factory=frozenset)
    locations: frozenset[Location] = field(default_factory=frozenset)
    search_text: str = ""

    @property
    def is_active(self) -> bool:
        """True when any axis constrains the results."""
        return (
            self.main_category is not None
            or self.sub_category is not None
            or bool(self.difficulty_levels)
            or bool(self.target_muscles)
            or bool(self.equipment)
            or bool(self.locations)
            or bool(self.search_text)
        )

    def reset(self) -> "ExerciseFilter":
        """A filter with every axis cleared."""
        return ExerciseFilter()

    def with_changes(self, **changes) -> "ExerciseFilter":
        return replace(self, **changes)

    def matches(self, exercise: Exercise) -> bool:
        if self.main_category is not None and exercise.main_category != self.main_category:
            return False

        if self.sub_category is not None and exercise.sub_category != self.sub_category:
            return False

        if self.difficulty_levels and exercise.difficulty not in self.difficulty_levels:
            return False

        if self.target_muscles and not (exercise.target_muscles & self.target_muscles):
            return False

        if self.equipment and exercise.equipment not in self.equipment:
            return False

        if self.locations and not (
            exercise.location in self.locations or exercise.location == Location.BOTH
        ):
            return False

        if self.search_text:
            query = self.search_text.lower()
            if query not in exercise.name.lower() and not any(
                query in muscle.label.lower() for muscle in exercise.target_muscles
            ):
                return False

        return True


def _recent_key(exercise: Exercise) -> tuple[bool, float]:
    # Undated entries go last; dated ones newest first
    if exercise.last_performed is None:
        return (True, 0.0)
    return (False, -exercise.last_performed.timestamp())


def sort_exercises(exercises: Sequence[Exercise], order: SortOrder) -> list[Exercise]:
    """Stable sort; ties keep their relative catalog order.

    Difficulty is ordered by the tier's label text, so "Advanced" sorts
    before "Beginner".
    """
    if order == SortOrder.NAME_ASCENDING:
        return sorted(exercises, key=lambda e: e.name)
    if order == SortOrder.NAME_DESCENDING:
        return sorted(exercises, key=lambda e: e.name, reverse=True)
    if order == SortOrder.DIFFICULTY_ASCENDING:
        return sorted(exercises, key=lambda e: e.difficulty.label)
    if order == SortOrder.DIFFICULTY_DESCENDING:
        return sorted(exercises, key=lambda e: e.difficulty.label, reverse=True)
    if order == SortOrder.RECENT:
        return sorted(exercises, key=_recent_key)
    return sorted(exercises, key=lambda e: e.sub_category.label)


class ExerciseQueryEngine:
    """Selects and orders entries of a read-only exercise catalog."""

    def __init__(self, catalog: Sequence[Exercise]):
        self.catalog = list(catalog)

    def apply(
        self,
        exercise_filter: ExerciseFilter | None = None,
        sort_order: SortOrder = SortOrder.NAME_ASCENDING,
    ) -> list[Exercise]:
        """Filter the catalog, then sort the matches."""
        exercise_filter = exercise_filter or ExerciseFilter()
        matched = [e for e in self.catalog if exercise_filter.matches(e)]
        logger.debug(
            "Applied exercise filter",
            active=exercise_filter.is_active,
            sort_order=sort_order.value,
            matched=len(matched),
            catalog_size=len(self.catalog),
        )
        return sort_exercises(matched, sort_order)

    def grouped_by_sub_category(
        self,
        exercise_filter: ExerciseFilter | None = None,
        sort_order: SortOrder = SortOrder.CATEGORY,
    ) -> list[tuple[SubCategory, list[Exercise]]]:
        """Matching entries grouped by sub-category, groups ordered by label.

        Within a group, entries follow ``sort_order``. Empty groups are omitted.
        """
        groups: dict[SubCategory, list[Exercise]] = {}
        for exercise in self.apply(exercise_filter, sort_order):
            groups.setdefault(exercise.sub_category, []).append(exercise)
        return sorted(groups.items(), key=lambda item: item[0].label)

    def with_last_performed(self, performed: dict[str, datetime]) -> "ExerciseQueryEngine":
        """Engine over a copy of the catalog with last-performed times filled in.

        ``performed`` maps exercise names to their latest workout time.
        """
        catalog = [
            replace(e, last_performed=performed.get(e.name, e.last_performed))
            for e in self.catalog
        ]
        return ExerciseQueryEngine(catalog)
