"""Optional session blocks: circuits and supersets."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable

import numpy as np

from program_engine.catalog.exercises import ExerciseCatalog
from program_engine.catalog.taxonomy import expand, expand_all
from program_engine.models.enums import (
    BEGINNER_ROUNDS,
    CIRCUIT_DEFAULT_REPS,
    CIRCUIT_DEFAULT_TIME_S,
    CIRCUIT_MAX_EXERCISES,
    CIRCUIT_REST_BETWEEN_EXERCISES_S,
    CIRCUIT_REST_BETWEEN_ROUNDS_S,
    DEFAULT_ROUNDS,
    SUPERSET_DEFAULT_REPS,
    SUPERSET_DEFAULT_REST_S,
    SUPERSET_DEFAULT_SETS,
    ExercisePhase,
    ExperienceLevel,
)
from program_engine.models.exercise import CatalogExercise, Duration, SessionExercise
from program_engine.models.session import (
    CircuitBlock,
    CircuitExercise,
    Focus,
    SupersetBlock,
)

logger = logging.getLogger(__name__)


def rounds_for(experience: ExperienceLevel) -> int:
    """Beginners do 2 rounds of circuits/supersets, everyone else 3."""
    return BEGINNER_ROUNDS if experience == ExperienceLevel.BEGINNER else DEFAULT_ROUNDS


def build_circuit(
    catalog: ExerciseCatalog,
    focus: Focus,
    experience: ExperienceLevel,
    equipment: Iterable[str],
) -> CircuitBlock:
    """Build a circuit from the first few focus-matching main exercises.

    Selection is deterministic (catalog order). The block is returned even
    when nothing matches; it then lists no exercises.
    """
    candidates = catalog.query(
        phase=ExercisePhase.MAIN,
        equipment=equipment,
        muscle_groups=expand_all(focus.primary, focus.secondary),
    )[:CIRCUIT_MAX_EXERCISES]
    if not candidates:
        logger.debug("No circuit exercises for %s/%s", focus.primary.value, focus.secondary.value)

    return CircuitBlock(
        rounds=rounds_for(experience),
        rest_between_exercises=Duration.seconds(CIRCUIT_REST_BETWEEN_EXERCISES_S),
        rest_between_rounds=Duration.seconds(CIRCUIT_REST_BETWEEN_ROUNDS_S),
        exercises=tuple(
            CircuitExercise(
                name=ex.name,
                reps=ex.reps or CIRCUIT_DEFAULT_REPS,
                time=ex.duration or Duration.seconds(CIRCUIT_DEFAULT_TIME_S),
            )
            for ex in candidates
        ),
    )


def _superset_exercise(entry: CatalogExercise) -> SessionExercise:
    return dataclasses.replace(
        SessionExercise.from_catalog(entry),
        sets=entry.sets or SUPERSET_DEFAULT_SETS,
        reps=entry.reps or SUPERSET_DEFAULT_REPS,
        rest=entry.rest or Duration.seconds(SUPERSET_DEFAULT_REST_S),
    )


def build_superset(
    catalog: ExerciseCatalog,
    focus: Focus,
    experience: ExperienceLevel,
    equipment: Iterable[str],
    rng: np.random.Generator,
) -> tuple[SupersetBlock, ...] | None:
    """Pair one random primary and one random secondary main exercise.

    Returns None when either focus has no main exercise for the owned
    equipment.
    """
    equipment = frozenset(equipment)
    primary_pool = catalog.query(
        phase=ExercisePhase.MAIN, equipment=equipment, muscle_groups=expand(focus.primary),
    )
    secondary_pool = catalog.query(
        phase=ExercisePhase.MAIN, equipment=equipment, muscle_groups=expand(focus.secondary),
    )
    if not primary_pool or not secondary_pool:
        logger.debug(
            "Superset omitted: %d primary / %d secondary candidates",
            len(primary_pool),
            len(secondary_pool),
        )
        return None

    first = primary_pool[int(rng.integers(len(primary_pool)))]
    second = secondary_pool[int(rng.integers(len(secondary_pool)))]

    block = SupersetBlock(
        name=f"{focus.primary.value} + {focus.secondary.value} Superset",
        rounds=rounds_for(experience),
        exercises=(_superset_exercise(first), _superset_exercise(second)),
    )
    return (block,)
