"""Exercise catalog definitions and metadata."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .avatar import BodyPart


class MainCategory(str, Enum):
    """Top-level exercise families."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    MOBILITY = "mobility"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class SubCategory(str, Enum):
    """Training focus of an exercise; also the category tag on workout records."""

    UPPER_BODY = "upper_body"
    LOWER_BODY = "lower_body"
    CORE = "core"
    CARDIO = "cardio"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class DifficultyLevel(str, Enum):
    """Difficulty tiers."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def xp_multiplier(self) -> int:
        return {
            DifficultyLevel.BEGINNER: 1,
            DifficultyLevel.INTERMEDIATE: 2,
            DifficultyLevel.ADVANCED: 3,
        }[self]


class EquipmentType(str, Enum):
    """Equipment needed for an exercise."""

    BODYWEIGHT = "bodyweight"
    DUMBBELL = "dumbbell"
    BARBELL = "barbell"
    KETTLEBELL = "kettlebell"
    CABLE = "cable"
    MACHINE = "machine"
    BANDS = "bands"
    PULL_UP_BAR = "pull_up_bar"


class Location(str, Enum):
    """Where an exercise can be performed. BOTH matches any requested location."""

    HOME = "home"
    GYM = "gym"
    BOTH = "both"


class TrainingType(str, Enum):
    """How sets of an exercise are measured."""

    WEIGHTED = "weighted"  # weight x reps
    BODYWEIGHT = "bodyweight"  # reps only
    TIMED = "timed"  # seconds only, e.g. plank
    CARDIO = "cardio"  # distance x duration


class MuscleGroup(str, Enum):
    """Target muscles."""

    CHEST = "chest"
    TRICEPS = "triceps"
    DELTOIDS = "deltoids"
    LATS = "lats"
    BICEPS = "biceps"
    TRAPS = "traps"
    QUADS = "quadriceps"
    GLUTES = "glutes"
    HAMSTRINGS = "hamstrings"
    CALVES = "calves"
    RECTUS_ABDOMINIS = "rectus_abdominis"
    TRANSVERSE_ABDOMINIS = "transverse_abdominis"
    OBLIQUES = "obliques"
    LOWER_BACK = "lower_back"
    FULL_BODY = "full_body"
    CARDIOVASCULAR = "cardiovascular"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


# Whole-word names of upper-body pulling movements, which train the back.
# An upright row is a shoulder movement.
_PULL_PATTERN = re.compile(
    r"\b(pull[- ]?ups?|chin[- ]?ups?|(?<!upright )rows?)\b", re.IGNORECASE
)


@dataclass(frozen=True)
class Exercise:
    """Static, read-only exercise descriptor."""

    name: str
    main_category: MainCategory
    sub_category: SubCategory
    target_muscles: frozenset[MuscleGroup]
    difficulty: DifficultyLevel
    instructions: str
    equipment: EquipmentType = EquipmentType.BODYWEIGHT
    location: Location = Location.BOTH
    training_type: TrainingType = TrainingType.WEIGHTED
    last_performed: datetime | None = field(default=None, compare=False)

    @property
    def trained_body_parts(self) -> frozenset[BodyPart]:
        """Body parts that receive XP when this exercise is completed."""
        if self.sub_category == SubCategory.UPPER_BODY:
            if _PULL_PATTERN.search(self.name):
                return frozenset({BodyPart.ARMS, BodyPart.BACK})
            return frozenset({BodyPart.ARMS, BodyPart.SHOULDERS})
        if self.sub_category == SubCategory.LOWER_BODY:
            return frozenset({BodyPart.LEGS})
        if self.sub_category == SubCategory.CORE:
            return frozenset({BodyPart.ABS})
        return frozenset({BodyPart.LEGS, BodyPart.ABS})

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return {
            "name": self.name,
            "main_category": self.main_category.value,
            "sub_category": self.sub_category.value,
            "target_muscles": sorted(m.value for m in self.target_muscles),
            "difficulty": self.difficulty.value,
            "instructions": self.instructions,
            "equipment": self.equipment.value,
            "location": self.location.value,
            "training_type": self.training_type.value,
            "last_performed": (
                self.last_performed.isoformat() if self.last_performed else None
            ),
        }


def find_exercise(name: str, exercises: list[Exercise] | None = None) -> Exercise | None:
    """Look up a catalog entry by name, ignoring case and surrounding whitespace."""
    if exercises is None:
        exercises = COMMON_EXERCISES

    wanted = name.strip().lower()
    for exercise in exercises:
        if exercise.name.lower() == wanted:
            return exercise
    return None


# Built-in catalog
COMMON_EXERCISES: list[Exercise] = [
    # Upper body
    Exercise(
        name="Push-up",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.UPPER_BODY,
        target_muscles=frozenset({MuscleGroup.CHEST, MuscleGroup.TRICEPS, MuscleGroup.DELTOIDS}),
        difficulty=DifficultyLevel.BEGINNER,
        instructions="Lower your chest toward the floor and press back up, body in a straight line.",
        equipment=EquipmentType.BODYWEIGHT,
        location=Location.BOTH,
        training_type=TrainingType.BODYWEIGHT,
    ),
    Exercise(
        name="Dumbbell Bench Press",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.UPPER_BODY,
        target_muscles=frozenset({MuscleGroup.CHEST, MuscleGroup.DELTOIDS, MuscleGroup.TRICEPS}),
        difficulty=DifficultyLevel.INTERMEDIATE,
        instructions="Lie on a bench and press the dumbbells up and down over your chest.",
        equipment=EquipmentType.DUMBBELL,
        location=Location.BOTH,
    ),
    Exercise(
        name="Pull-up",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.UPPER_BODY,
        target_muscles=frozenset({MuscleGroup.LATS, MuscleGroup.BICEPS}),
        difficulty=DifficultyLevel.ADVANCED,
        instructions="Hang from the bar and pull your chest up toward it.",
        equipment=EquipmentType.PULL_UP_BAR,
        location=Location.BOTH,
        training_type=TrainingType.BODYWEIGHT,
    ),
    Exercise(
        name="Barbell Overhead Press",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.UPPER_BODY,
        target_muscles=frozenset({MuscleGroup.DELTOIDS, MuscleGroup.TRICEPS}),
        difficulty=DifficultyLevel.INTERMEDIATE,
        instructions="Press the bar from your shoulders to lockout overhead.",
        equipment=EquipmentType.BARBELL,
        location=Location.GYM,
    ),
    Exercise(
        name="Seated Cable Row",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.UPPER_BODY,
        target_muscles=frozenset({MuscleGroup.LATS, MuscleGroup.BICEPS, MuscleGroup.TRAPS}),
        difficulty=DifficultyLevel.BEGINNER,
        instructions="Pull the handle to your stomach while keeping your back upright.",
        equipment=EquipmentType.CABLE,
        location=Location.GYM,
    ),
    Exercise(
        name="Band Bicep Curl",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.UPPER_BODY,
        target_muscles=frozenset({MuscleGroup.BICEPS}),
        difficulty=DifficultyLevel.BEGINNER,
        instructions="Stand on the band and curl the handles toward your shoulders.",
        equipment=EquipmentType.BANDS,
        location=Location.HOME,
    ),
    # Lower body
    Exercise(
        name="Squat",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.LOWER_BODY,
        target_muscles=frozenset({MuscleGroup.QUADS, MuscleGroup.GLUTES, MuscleGroup.HAMSTRINGS}),
        difficulty=DifficultyLevel.BEGINNER,
        instructions="Stand with feet shoulder-width apart, sit the hips back and stand up again.",
        equipment=EquipmentType.BODYWEIGHT,
        location=Location.BOTH,
        training_type=TrainingType.BODYWEIGHT,
    ),
    Exercise(
        name="Lunge",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.LOWER_BODY,
        target_muscles=frozenset({MuscleGroup.QUADS, MuscleGroup.GLUTES}),
        difficulty=DifficultyLevel.INTERMEDIATE,
        instructions="Step forward, bend the front knee to 90 degrees and return.",
        equipment=EquipmentType.BODYWEIGHT,
        location=Location.BOTH,
        training_type=TrainingType.BODYWEIGHT,
    ),
    Exercise(
        name="Deadlift",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.LOWER_BODY,
        target_muscles=frozenset({MuscleGroup.HAMSTRINGS, MuscleGroup.GLUTES, MuscleGroup.LATS}),
        difficulty=DifficultyLevel.ADVANCED,
        instructions="Lift the barbell from the floor with a neutral spine, hinging at the hips.",
        equipment=EquipmentType.BARBELL,
        location=Location.GYM,
    ),
    Exercise(
        name="Kettlebell Swing",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.LOWER_BODY,
        target_muscles=frozenset({MuscleGroup.GLUTES, MuscleGroup.HAMSTRINGS, MuscleGroup.LOWER_BACK}),
        difficulty=DifficultyLevel.INTERMEDIATE,
        instructions="Hinge and drive the hips forward to swing the bell to chest height.",
        equipment=EquipmentType.KETTLEBELL,
        location=Location.HOME,
    ),
    Exercise(
        name="Leg Press",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.LOWER_BODY,
        target_muscles=frozenset({MuscleGroup.QUADS, MuscleGroup.GLUTES}),
        difficulty=DifficultyLevel.BEGINNER,
        instructions="Push the sled away until the knees are almost straight, then lower it.",
        equipment=EquipmentType.MACHINE,
        location=Location.GYM,
    ),
    # Core
    Exercise(
        name="Plank",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.CORE,
        target_muscles=frozenset({MuscleGroup.RECTUS_ABDOMINIS, MuscleGroup.TRANSVERSE_ABDOMINIS}),
        difficulty=DifficultyLevel.BEGINNER,
        instructions="Hold a straight line from head to heels on your forearms and toes.",
        equipment=EquipmentType.BODYWEIGHT,
        location=Location.BOTH,
        training_type=TrainingType.TIMED,
    ),
    Exercise(
        name="Crunch",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.CORE,
        target_muscles=frozenset({MuscleGroup.RECTUS_ABDOMINIS}),
        difficulty=DifficultyLevel.BEGINNER,
        instructions="Lie on your back with bent knees and curl the upper body up.",
        equipment=EquipmentType.BODYWEIGHT,
        location=Location.HOME,
        training_type=TrainingType.BODYWEIGHT,
    ),
    Exercise(
        name="Hanging Leg Raise",
        main_category=MainCategory.STRENGTH,
        sub_category=SubCategory.CORE,
        target_muscles=frozenset({MuscleGroup.RECTUS_ABDOMINIS, MuscleGroup.OBLIQUES}),
        difficulty=DifficultyLevel.ADVANCED,
        instructions="Hang from a bar and raise straight legs to hip height.",
        equipment=EquipmentType.PULL_UP_BAR,
        location=Location.GYM,
        training_type=TrainingType.BODYWEIGHT,
    ),
    # Cardio
    Exercise(
        name="Running",
        main_category=MainCategory.CARDIO,
        sub_category=SubCategory.CARDIO,
        target_muscles=frozenset({MuscleGroup.FULL_BODY}),
        difficulty=DifficultyLevel.BEGINNER,
        instructions="Run at a steady pace while keeping your heart rate under control.",
        equipment=EquipmentType.BODYWEIGHT,
        location=Location.BOTH,
        training_type=TrainingType.CARDIO,
    ),
    Exercise(
        name="Cycling",
        main_category=MainCategory.CARDIO,
        sub_category=SubCategory.CARDIO,
        target_muscles=frozenset({MuscleGroup.QUADS, MuscleGroup.CARDIOVASCULAR}),
        difficulty=DifficultyLevel.INTERMEDIATE,
        instructions="Ride at a steady cadence; easy on the knees and good for endurance.",
        equipment=EquipmentType.MACHINE,
        location=Location.GYM,
        training_type=TrainingType.CARDIO,
    ),
    Exercise(
        name="Burpee",
        main_category=MainCategory.CARDIO,
        sub_category=SubCategory.CARDIO,
        target_muscles=frozenset({MuscleGroup.FULL_BODY, MuscleGroup.CARDIOVASCULAR}),
        difficulty=DifficultyLevel.ADVANCED,
        instructions="Squat, kick back to a plank, return and jump explosively.",
        equipment=EquipmentType.BODYWEIGHT,
        location=Location.HOME,
        training_type=TrainingType.BODYWEIGHT,
    ),
    # Mobility
    Exercise(
        name="Hip Flexor Stretch",
        main_category=MainCategory.MOBILITY,
        sub_category=SubCategory.LOWER_BODY,
        target_muscles=frozenset({MuscleGroup.QUADS, MuscleGroup.GLUTES}),
        difficulty=DifficultyLevel.BEGINNER,
        instructions="Kneel in a lunge and push the hips forward until you feel the stretch.",
        equipment=EquipmentType.BODYWEIGHT,
        location=Location.BOTH,
        training_type=TrainingType.TIMED,
    ),
    Exercise(
        name="Band Shoulder Dislocate",
        main_category=MainCategory.MOBILITY,
        sub_category=SubCategory.UPPER_BODY,
        target_muscles=frozenset({MuscleGroup.DELTOIDS, MuscleGroup.TRAPS}),
        difficulty=DifficultyLevel.BEGINNER,
        instructions="Hold a band wide and pass it over your head and behind you.",
        equipment=EquipmentType.BANDS,
        location=Location.HOME,
        training_type=TrainingType.BODYWEIGHT,
    ),
]
