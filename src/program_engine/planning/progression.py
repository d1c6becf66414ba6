"""Progressive overload: scale sets/reps up and rest down as sessions advance.

Every 3 sessions count as one progression step. The per-step increments
depend on experience:

    beginner      +0.5 sets, +2 reps, -5 s rest
    intermediate  +1 set,    +1 rep,  -10 s rest
    advanced      +1 set,    +2 reps, -15 s rest

Sets and reps are floored at 1, rest at 30 seconds. Fractional sets are
floored after scaling, so beginners gain a set every second step.
"""

from __future__ import annotations

import dataclasses
import math

from program_engine.models.enums import (
    MIN_REPS,
    MIN_REST_S,
    MIN_SETS,
    PROGRESSION_INCREMENTS,
    SESSIONS_PER_PROGRESSION_STEP,
    ExperienceLevel,
)
from program_engine.models.exercise import CatalogExercise, Duration, SessionExercise


def progression_steps(session_number: int) -> int:
    """Number of completed progression steps at *session_number*."""
    return session_number // SESSIONS_PER_PROGRESSION_STEP


def apply_progression(
    exercise: CatalogExercise | SessionExercise,
    session_number: int,
    experience: ExperienceLevel,
) -> SessionExercise:
    """Return a new SessionExercise with overload applied.

    Pure: the input is never modified and repeated calls with the same
    arguments return equal values. Fields the exercise does not carry
    (e.g. sets on a timed warm-up) stay ``None``.
    """
    if isinstance(exercise, CatalogExercise):
        exercise = SessionExercise.from_catalog(exercise)

    sets_delta, reps_delta, rest_delta = PROGRESSION_INCREMENTS[experience]
    weeks = progression_steps(session_number)

    sets = exercise.sets
    if sets is not None:
        sets = max(MIN_SETS, math.floor(sets + weeks * sets_delta))

    reps = exercise.reps
    if reps is not None:
        reps = max(MIN_REPS, math.floor(reps + weeks * reps_delta))

    rest = exercise.rest
    if rest is not None:
        rest_s = max(MIN_REST_S, rest.total_seconds + weeks * rest_delta)
        rest = Duration.seconds(rest_s)

    return dataclasses.replace(exercise, sets=sets, reps=reps, rest=rest)
