"""Enumerations and programming constants for the program engine.

Labels are closed enumerations. Anything a caller passes that is not a
known label resolves to an explicit ``UNKNOWN`` member (where one exists)
instead of leaking the raw string into the engine.
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class Goal(Enum):
    """Training goal selected by the user."""

    MUSCLE_GAIN = "muscle_gain"
    FAT_LOSS = "fat_loss"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    GENERAL_FITNESS = "general_fitness"
    UNKNOWN = "unknown"

    @classmethod
    def from_label(cls, label: str) -> Goal:
        """Resolve a goal label, falling back to UNKNOWN."""
        key = str(label).strip().lower()
        key = _GOAL_ALIASES.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        return cls.UNKNOWN


# Older clients sent "weight_loss" for the fat-loss goal
_GOAL_ALIASES = {"weight_loss": "fat_loss"}


class ExperienceLevel(Enum):
    """Lifting experience. Drives split choice, rounds and progression rate."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class SplitType(Enum):
    """Weekly split archetypes."""

    FULL_BODY = "full_body"
    PUSH_PULL_LEGS = "push_pull_legs"
    UPPER_LOWER = "upper_lower"
    BRO_SPLIT = "bro_split"


class MuscleLabel(Enum):
    """Coarse muscle-group labels used for session focus."""

    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    FULL_BODY = "full_body"
    CARDIO = "cardio"
    # Isolation labels (bro split secondaries)
    TRICEPS = "triceps"
    BICEPS = "biceps"
    TRAPS = "traps"
    FOREARMS = "forearms"
    UNKNOWN = "unknown"

    @classmethod
    def from_label(cls, label: str) -> MuscleLabel:
        """Resolve a focus label, falling back to UNKNOWN."""
        key = str(label).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return cls.UNKNOWN


class ExercisePhase(Enum):
    """Which block of a session an exercise belongs to."""

    WARMUP = "warmup"
    MAIN = "main"
    COOLDOWN = "cooldown"


class TimeUnit(IntEnum):
    """Units for Duration quantities (value = seconds per unit)."""

    SECONDS = 1
    MINUTES = 60


class SectionType(IntEnum):
    """Session section blocks in display order."""

    WARMUP = auto()
    MAIN = auto()
    CIRCUIT = auto()
    SUPERSET = auto()
    COOLDOWN = auto()


# ---------------------------------------------------------------------------
# Plan shape
# ---------------------------------------------------------------------------
SESSIONS_PER_PLAN = 12
DEFAULT_DAYS_PER_WEEK = 3
DEFAULT_EQUIPMENT = frozenset({"bodyweight"})

# Focus tables repeat with this period
FOCUS_CYCLE_LENGTH = 6

# ---------------------------------------------------------------------------
# Main-lift selection counts (clamped against the candidate pool size)
# ---------------------------------------------------------------------------
PRIMARY_MIN_EXERCISES = 3
PRIMARY_MAX_EXERCISES = 4
SECONDARY_MIN_EXERCISES = 2
SECONDARY_MAX_EXERCISES = 3

# Probability of adding a second focus-specific warm-up
SECOND_WARMUP_PROBABILITY = 0.5

# ---------------------------------------------------------------------------
# Circuit / superset cadence and parameters
# ---------------------------------------------------------------------------
CIRCUIT_EVERY_N_SESSIONS = 4
SUPERSET_EVERY_N_SESSIONS = 3
CIRCUIT_MAX_EXERCISES = 4
BEGINNER_ROUNDS = 2
DEFAULT_ROUNDS = 3
CIRCUIT_REST_BETWEEN_EXERCISES_S = 30
CIRCUIT_REST_BETWEEN_ROUNDS_S = 90
CIRCUIT_DEFAULT_REPS = 10
CIRCUIT_DEFAULT_TIME_S = 30
SUPERSET_DEFAULT_SETS = 3
SUPERSET_DEFAULT_REPS = 10
SUPERSET_DEFAULT_REST_S = 60

# ---------------------------------------------------------------------------
# Progressive overload
# ---------------------------------------------------------------------------
# A "week" of progression is every 3 sessions, independent of frequency
SESSIONS_PER_PROGRESSION_STEP = 3
MIN_SETS = 1
MIN_REPS = 1
MIN_REST_S = 30

# (sets delta, reps delta, rest delta in seconds) per progression step
PROGRESSION_INCREMENTS: dict[ExperienceLevel, tuple[float, int, int]] = {
    ExperienceLevel.BEGINNER: (0.5, 2, -5),
    ExperienceLevel.INTERMEDIATE: (1, 1, -10),
    ExperienceLevel.ADVANCED: (1, 2, -15),
}
