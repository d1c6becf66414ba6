"""Exercise catalog and muscle-group taxonomy."""

from program_engine.catalog.exercises import DEFAULT_CATALOG, EXERCISES, ExerciseCatalog
from program_engine.catalog.taxonomy import MUSCLE_GROUPS, expand, expand_all

__all__ = [
    "DEFAULT_CATALOG",
    "EXERCISES",
    "ExerciseCatalog",
    "MUSCLE_GROUPS",
    "expand",
    "expand_all",
]
