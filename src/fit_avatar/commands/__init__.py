"""CLI commands for fit-avatar."""

from .avatar import avatar
from .data import data
from .exercises import exercises
from .init import init
from .serve import serve
from .stats import stats
from .workout import workout

__all__ = [
    "avatar",
    "data",
    "exercises",
    "init",
    "serve",
    "stats",
    "workout",
]
