"""SessionComposer: assembles one dated session from catalog exercises.

For a session's focus it pulls catalog exercises through the taxonomy,
applies progressive overload to the main lifts and adds the optional
circuit (every 4th session) and superset (every 3rd session) blocks.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

import numpy as np

from program_engine.catalog.exercises import DEFAULT_CATALOG, ExerciseCatalog
from program_engine.catalog.taxonomy import expand
from program_engine.models.enums import (
    CIRCUIT_EVERY_N_SESSIONS,
    PRIMARY_MAX_EXERCISES,
    PRIMARY_MIN_EXERCISES,
    SECOND_WARMUP_PROBABILITY,
    SECONDARY_MAX_EXERCISES,
    SECONDARY_MIN_EXERCISES,
    SUPERSET_EVERY_N_SESSIONS,
    ExercisePhase,
    ExperienceLevel,
    MuscleLabel,
)
from program_engine.models.exercise import CatalogExercise, SessionExercise
from program_engine.models.session import Focus, Session, SessionSections
from program_engine.planning.progression import apply_progression
from program_engine.session_builder.blocks import build_circuit, build_superset

logger = logging.getLogger(__name__)

# Warm-ups with these tags count as general (whole-body) preparation
_GENERAL_WARMUP_GROUPS = frozenset({"full_body", "cardio"})


def clamp(n: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, n))


class SessionComposer:
    """Builds Session objects for a plan.

    Usage::

        composer = SessionComposer(rng=np.random.default_rng(7))
        session = composer.compose(4, date(2026, 10, 22), focus,
                                   ExperienceLevel.INTERMEDIATE, {"dumbbells"})
    """

    def __init__(
        self,
        catalog: ExerciseCatalog | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.catalog = catalog or DEFAULT_CATALOG
        self.rng = rng if rng is not None else np.random.default_rng()

    def compose(
        self,
        session_number: int,
        session_date: date,
        focus: Focus,
        experience: ExperienceLevel,
        equipment: Iterable[str],
    ) -> Session:
        """Compose session *session_number* (1-based).

        Args:
            session_number: Position in the plan; drives progression and
                circuit/superset cadence.
            session_date: Calendar date of the session.
            focus: Primary/secondary muscle emphasis.
            experience: User experience level.
            equipment: Equipment the user owns.

        Returns:
            A fully populated Session.
        """
        equipment = frozenset(equipment)

        circuit = None
        if session_number % CIRCUIT_EVERY_N_SESSIONS == 0:
            circuit = build_circuit(self.catalog, focus, experience, equipment)

        superset = None
        if session_number % SUPERSET_EVERY_N_SESSIONS == 0:
            superset = build_superset(self.catalog, focus, experience, equipment, self.rng)

        sections = SessionSections(
            warmup=self.build_warmup(focus.primary, equipment),
            main=self.build_main(focus, experience, equipment, session_number),
            cooldown=self.build_cooldown(equipment),
            circuit=circuit,
            superset=superset,
        )
        return Session(
            session_number=session_number,
            date=session_date,
            focus=focus,
            sections=sections,
        )

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def build_warmup(
        self, primary: MuscleLabel, equipment: frozenset[str],
    ) -> tuple[SessionExercise, ...]:
        """One general warm-up plus one or two focus-specific ones.

        Any category without candidates is skipped, so the result may be
        empty.
        """
        warmups = self.catalog.query(phase=ExercisePhase.WARMUP, equipment=equipment)
        selected: list[CatalogExercise] = []

        general = [ex for ex in warmups if ex.muscle_group in _GENERAL_WARMUP_GROUPS]
        if general:
            selected.append(self._pick(general))

        focus_tags = expand(primary)
        focused = [ex for ex in warmups if ex.muscle_group in focus_tags]
        if not focused:
            logger.debug("No focus warm-ups for %s", primary.value)
        else:
            first_idx = int(self.rng.integers(len(focused)))
            selected.append(focused[first_idx])

            if len(focused) > 1 and self.rng.random() < SECOND_WARMUP_PROBABILITY:
                remaining = focused[:first_idx] + focused[first_idx + 1:]
                selected.append(self._pick(remaining))

        return tuple(SessionExercise.from_catalog(ex) for ex in selected)

    def build_main(
        self,
        focus: Focus,
        experience: ExperienceLevel,
        equipment: frozenset[str],
        session_number: int,
    ) -> tuple[SessionExercise, ...]:
        """3-4 primary and 2-3 secondary lifts, drawn with replacement."""
        mains = self.catalog.query(phase=ExercisePhase.MAIN, equipment=equipment)
        picks: list[CatalogExercise] = []
        for label, lo, hi in (
            (focus.primary, PRIMARY_MIN_EXERCISES, PRIMARY_MAX_EXERCISES),
            (focus.secondary, SECONDARY_MIN_EXERCISES, SECONDARY_MAX_EXERCISES),
        ):
            tags = expand(label)
            pool = [ex for ex in mains if ex.muscle_group in tags]
            if not pool:
                logger.debug("No main exercises for %s", label.value)
                continue
            count = clamp(len(pool), lo, hi)
            picks.extend(pool[int(i)] for i in self.rng.integers(len(pool), size=count))

        return tuple(apply_progression(ex, session_number, experience) for ex in picks)

    def build_cooldown(self, equipment: frozenset[str]) -> tuple[SessionExercise, ...]:
        """Every cool-down the user can do, in catalog order."""
        return tuple(
            SessionExercise.from_catalog(ex)
            for ex in self.catalog.query(phase=ExercisePhase.COOLDOWN, equipment=equipment)
        )

    def _pick(self, pool: list[CatalogExercise]) -> CatalogExercise:
        return pool[int(self.rng.integers(len(pool)))]
