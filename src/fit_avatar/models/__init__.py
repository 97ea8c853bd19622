"""Data models for fit-avatar."""

from .avatar import AvatarStats, BodyPart, RadarDataPoint
from .exercises import (
    COMMON_EXERCISES,
    DifficultyLevel,
    EquipmentType,
    Exercise,
    Location,
    MainCategory,
    MuscleGroup,
    SubCategory,
    TrainingType,
)
from .user_settings import ExportData, UserSettings
from .workout import DayData, TimePeriod, WorkoutHistory, WorkoutRecord, WorkoutSetDetail

__all__ = [
    "AvatarStats",
    "BodyPart",
    "COMMON_EXERCISES",
    "DayData",
    "DifficultyLevel",
    "EquipmentType",
    "Exercise",
    "ExportData",
    "Location",
    "MainCategory",
    "MuscleGroup",
    "RadarDataPoint",
    "SubCategory",
    "TimePeriod",
    "TrainingType",
    "UserSettings",
    "WorkoutHistory",
    "WorkoutRecord",
    "WorkoutSetDetail",
]
