"""Data models for the program engine."""

from program_engine.models.enums import (
    ExercisePhase,
    ExperienceLevel,
    Goal,
    MuscleLabel,
    SplitType,
    TimeUnit,
)
from program_engine.models.exercise import CatalogExercise, Duration, SessionExercise
from program_engine.models.plan import Plan, PlanUser
from program_engine.models.profile import Profile
from program_engine.models.session import (
    CircuitBlock,
    CircuitExercise,
    Focus,
    Session,
    SessionSections,
    SupersetBlock,
)

__all__ = [
    "CatalogExercise",
    "CircuitBlock",
    "CircuitExercise",
    "Duration",
    "ExercisePhase",
    "ExperienceLevel",
    "Focus",
    "Goal",
    "MuscleLabel",
    "Plan",
    "PlanUser",
    "Profile",
    "Session",
    "SessionExercise",
    "SessionSections",
    "SplitType",
    "SupersetBlock",
    "TimeUnit",
]
