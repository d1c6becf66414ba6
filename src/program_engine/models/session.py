"""Session models: focus, section blocks and the dated session itself."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from program_engine.models.enums import MuscleLabel
from program_engine.models.exercise import Duration, SessionExercise
from program_engine.planning.schedule import format_date


@dataclass(frozen=True)
class Focus:
    """Primary/secondary muscle-group emphasis for one session."""

    primary: MuscleLabel
    secondary: MuscleLabel


@dataclass(frozen=True)
class CircuitExercise:
    name: str
    reps: int
    time: Duration


@dataclass(frozen=True)
class CircuitBlock:
    """Back-to-back rotation through several exercises for N rounds."""

    rounds: int
    rest_between_exercises: Duration
    rest_between_rounds: Duration
    exercises: tuple[CircuitExercise, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SupersetBlock:
    """Two exercises (primary + secondary focus) performed back-to-back."""

    name: str
    rounds: int
    exercises: tuple[SessionExercise, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SessionSections:
    warmup: tuple[SessionExercise, ...] = field(default_factory=tuple)
    main: tuple[SessionExercise, ...] = field(default_factory=tuple)
    cooldown: tuple[SessionExercise, ...] = field(default_factory=tuple)
    circuit: CircuitBlock | None = None
    superset: tuple[SupersetBlock, ...] | None = None


@dataclass(frozen=True)
class Session:
    """One dated workout within a plan. ``session_number`` is 1-based."""

    session_number: int
    date: date
    focus: Focus
    sections: SessionSections

    @property
    def formatted_date(self) -> str:
        return format_date(self.date)
