"""Static exercise catalog and its filter query.

Entries are declared in a fixed order and ``query`` preserves it, so
callers that need variety must randomise their own selection.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from program_engine.models.enums import ExercisePhase
from program_engine.models.exercise import CatalogExercise, Duration


def _entry(
    name: str,
    phase: ExercisePhase,
    muscle_group: str,
    equipment: Iterable[str],
    *,
    sets: int | None = None,
    reps: int | None = None,
    rest_s: int | None = None,
    duration: Duration | None = None,
) -> CatalogExercise:
    return CatalogExercise(
        name=name,
        phase=phase,
        muscle_group=muscle_group,
        equipment=frozenset(equipment),
        sets=sets,
        reps=reps,
        rest=Duration.seconds(rest_s) if rest_s is not None else None,
        duration=duration,
    )


_W = ExercisePhase.WARMUP
_MAIN = ExercisePhase.MAIN
_C = ExercisePhase.COOLDOWN
_BW = ("bodyweight",)
_DB = ("dumbbells",)
_BB = ("barbell",)

EXERCISES: tuple[CatalogExercise, ...] = (
    # --- Warm-ups ---
    _entry("Light Jogging", _W, "cardio", _BW, duration=Duration.minutes(5)),
    _entry("Jumping Jacks", _W, "cardio", _BW, duration=Duration.minutes(2)),
    _entry("Jump Rope", _W, "cardio", ("jump_rope",), duration=Duration.minutes(3)),
    _entry("Inchworms", _W, "full_body", _BW, sets=2, reps=6),
    _entry("Arm Circles", _W, "shoulders", _BW, duration=Duration.minutes(1)),
    _entry("Scapular Push-ups", _W, "chest", _BW, sets=2, reps=10),
    _entry("Band Pull-Aparts", _W, "rear_deltoids", ("resistance_bands",), sets=2, reps=15),
    _entry("Bodyweight Squats", _W, "quadriceps", _BW, sets=2, reps=10),
    _entry("Walking Lunges", _W, "glutes", _BW, sets=2, reps=10),
    _entry("Leg Swings", _W, "hamstrings", _BW, duration=Duration.minutes(1)),
    _entry("Cat-Cow", _W, "lower_back", _BW, duration=Duration.minutes(1)),

    # --- Main lifts: push ---
    _entry("Push-ups", _MAIN, "chest", _BW, sets=3, reps=12, rest_s=60),
    _entry("Dumbbell Bench Press", _MAIN, "chest", _DB, sets=4, reps=10, rest_s=90),
    _entry("Barbell Bench Press", _MAIN, "chest", _BB, sets=4, reps=8, rest_s=120),
    _entry("Dumbbell Shoulder Press", _MAIN, "shoulders", _DB, sets=3, reps=12, rest_s=60),
    _entry("Pike Push-ups", _MAIN, "shoulders", _BW, sets=3, reps=10, rest_s=60),
    _entry("Overhead Press", _MAIN, "shoulders", _BB, sets=4, reps=6, rest_s=120),
    _entry("Bench Dips", _MAIN, "triceps", _BW, sets=3, reps=12, rest_s=60),
    _entry("Overhead Triceps Extension", _MAIN, "triceps", _DB, sets=3, reps=12, rest_s=60),

    # --- Main lifts: pull ---
    _entry("Pull-ups", _MAIN, "back", _BW, sets=3, reps=8, rest_s=90),
    _entry("Bent Over Rows", _MAIN, "back", ("dumbbells", "barbell"), sets=3, reps=12, rest_s=90),
    _entry("Inverted Rows", _MAIN, "back", _BW, sets=3, reps=10, rest_s=60),
    _entry("Chin-ups", _MAIN, "biceps", _BW, sets=3, reps=8, rest_s=90),
    _entry("Dumbbell Curls", _MAIN, "biceps", _DB, sets=3, reps=12, rest_s=60),
    _entry("Barbell Curls", _MAIN, "biceps", _BB, sets=3, reps=10, rest_s=60),
    _entry("Reverse Flyes", _MAIN, "rear_deltoids", _DB, sets=3, reps=15, rest_s=45),
    _entry("Dumbbell Shrugs", _MAIN, "traps", _DB, sets=3, reps=15, rest_s=60),
    _entry("Barbell Shrugs", _MAIN, "traps", _BB, sets=3, reps=12, rest_s=60),
    _entry("Wrist Curls", _MAIN, "forearms", _DB, sets=3, reps=15, rest_s=45),
    _entry("Farmer's Carry", _MAIN, "forearms", ("dumbbells", "kettlebell"),
           duration=Duration.seconds(45)),

    # --- Main lifts: legs ---
    _entry("Barbell Squats", _MAIN, "quadriceps", _BB, sets=4, reps=8, rest_s=120),
    _entry("Goblet Squats", _MAIN, "quadriceps", ("dumbbells", "kettlebell"),
           sets=3, reps=12, rest_s=90),
    _entry("Bulgarian Split Squats", _MAIN, "quadriceps", ("bodyweight", "dumbbells"),
           sets=3, reps=10, rest_s=90),
    _entry("Romanian Deadlifts", _MAIN, "hamstrings", ("barbell", "dumbbells"),
           sets=4, reps=10, rest_s=90),
    _entry("Deadlifts", _MAIN, "hamstrings", _BB, sets=4, reps=6, rest_s=150),
    _entry("Glute Bridges", _MAIN, "glutes", _BW, sets=3, reps=15, rest_s=60),
    _entry("Hip Thrusts", _MAIN, "glutes", _BB, sets=4, reps=10, rest_s=90),
    _entry("Calf Raises", _MAIN, "calves", ("bodyweight", "dumbbells"), sets=3, reps=20, rest_s=45),

    # --- Main lifts: core ---
    _entry("Plank", _MAIN, "abs", _BW, duration=Duration.seconds(45)),
    _entry("Crunches", _MAIN, "abs", _BW, sets=3, reps=20, rest_s=45),
    _entry("Hanging Leg Raises", _MAIN, "abs", _BW, sets=3, reps=12, rest_s=60),
    _entry("Russian Twists", _MAIN, "obliques", _BW, sets=3, reps=20, rest_s=45),
    _entry("Superman Holds", _MAIN, "lower_back", _BW, sets=3, reps=15, rest_s=45),

    # --- Main lifts: full body / conditioning ---
    _entry("Burpees", _MAIN, "full_body", _BW, sets=3, reps=10, rest_s=60),
    _entry("Dumbbell Thrusters", _MAIN, "full_body", _DB, sets=3, reps=12, rest_s=90),
    _entry("Kettlebell Swings", _MAIN, "full_body", ("kettlebell",), sets=3, reps=15, rest_s=60),
    _entry("Mountain Climbers", _MAIN, "cardio", _BW, sets=3, reps=20, rest_s=45),
    _entry("Jump Squats", _MAIN, "cardio", _BW, sets=3, reps=15, rest_s=60),
    _entry("High Knees", _MAIN, "cardio", _BW, duration=Duration.seconds(45)),

    # --- Cool-downs ---
    _entry("Light Stretching", _C, "full_body", _BW, duration=Duration.minutes(5)),
    _entry("Deep Breathing", _C, "full_body", _BW, duration=Duration.minutes(2)),
    _entry("Child's Pose", _C, "lower_back", _BW, duration=Duration.minutes(1)),
    _entry("Foam Rolling", _C, "full_body", ("foam_roller",), duration=Duration.minutes(5)),
)


class ExerciseCatalog:
    """Read-only collection of exercises with a conjunctive filter query.

    Usage::

        catalog = ExerciseCatalog()
        presses = catalog.query(phase=ExercisePhase.MAIN, equipment={"dumbbells"})
    """

    def __init__(self, exercises: Iterable[CatalogExercise] | None = None) -> None:
        self._exercises: tuple[CatalogExercise, ...] = (
            EXERCISES if exercises is None else tuple(exercises)
        )

    def query(
        self,
        phase: ExercisePhase | None = None,
        equipment: Iterable[str] | None = None,
        muscle_groups: Iterable[str] | str | None = None,
    ) -> list[CatalogExercise]:
        """Return exercises matching every filter given, in declaration order.

        Args:
            phase: Only exercises of this phase.
            equipment: Owned equipment; an exercise passes if it needs any
                of these tags.
            muscle_groups: Fine muscle tags; an exercise passes if its tag is
                one of them. An empty collection matches nothing.
        """
        owned = frozenset(equipment) if equipment is not None else None
        if isinstance(muscle_groups, str):
            muscle_groups = (muscle_groups,)
        groups = frozenset(muscle_groups) if muscle_groups is not None else None

        results: list[CatalogExercise] = []
        for exercise in self._exercises:
            if phase is not None and exercise.phase != phase:
                continue
            if owned is not None and not (exercise.equipment & owned):
                continue
            if groups is not None and exercise.muscle_group not in groups:
                continue
            results.append(exercise)
        return results

    def __iter__(self) -> Iterator[CatalogExercise]:
        return iter(self._exercises)

    def __len__(self) -> int:
        return len(self._exercises)


DEFAULT_CATALOG = ExerciseCatalog()
