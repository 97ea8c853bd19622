"""Engine services: statistics, catalog queries, workouts and data transfer."""

from .exercise_query import ExerciseFilter, ExerciseQueryEngine, SortOrder
from .statistics import StatisticsAggregator
from .workout_session import complete_workout

__all__ = [
    "complete_workout",
    "ExerciseFilter",
    "ExerciseQueryEngine",
    "SortOrder",
    "StatisticsAggregator",
]
