"""Exercise models: catalog reference entries and per-session copies."""

from __future__ import annotations

from dataclasses import dataclass, field

from program_engine.models.enums import ExercisePhase, TimeUnit

_UNIT_NAMES: dict[TimeUnit, str] = {
    TimeUnit.SECONDS: "second",
    TimeUnit.MINUTES: "minute",
}


@dataclass(frozen=True)
class Duration:
    """A whole-number time quantity, e.g. 90 seconds or 5 minutes.

    Arithmetic happens on ``amount``; the "<n> seconds" text form exists
    only for display and export.
    """

    amount: int
    unit: TimeUnit = TimeUnit.SECONDS

    @classmethod
    def seconds(cls, amount: int) -> Duration:
        return cls(int(amount), TimeUnit.SECONDS)

    @classmethod
    def minutes(cls, amount: int) -> Duration:
        return cls(int(amount), TimeUnit.MINUTES)

    @property
    def total_seconds(self) -> int:
        return self.amount * self.unit.value

    def __str__(self) -> str:
        name = _UNIT_NAMES[self.unit]
        return f"{self.amount} {name}" if self.amount == 1 else f"{self.amount} {name}s"


@dataclass(frozen=True)
class CatalogExercise:
    """Read-only catalog entry.

    An entry is either timed (``duration``) or counted (``sets``/``reps``
    with an optional ``rest``). ``muscle_group`` is a fine-grained tag such
    as "quadriceps", matched against taxonomy expansions.
    """

    name: str
    phase: ExercisePhase
    muscle_group: str
    equipment: frozenset[str]
    sets: int | None = None
    reps: int | None = None
    rest: Duration | None = None
    duration: Duration | None = None


@dataclass(frozen=True)
class SessionExercise:
    """An exercise as prescribed in one session.

    Always a fresh value built from a catalog entry; adjusting it never
    touches the catalog.
    """

    name: str
    phase: ExercisePhase
    muscle_group: str
    equipment: frozenset[str] = field(default_factory=frozenset)
    sets: int | None = None
    reps: int | None = None
    rest: Duration | None = None
    duration: Duration | None = None

    @classmethod
    def from_catalog(cls, entry: CatalogExercise) -> SessionExercise:
        return cls(
            name=entry.name,
            phase=entry.phase,
            muscle_group=entry.muscle_group,
            equipment=frozenset(entry.equipment),
            sets=entry.sets,
            reps=entry.reps,
            rest=entry.rest,
            duration=entry.duration,
        )
