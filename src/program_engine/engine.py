"""PlanEngine: the orchestrator that turns a Profile into a stored Plan."""

from __future__ import annotations

import logging
import uuid
from datetime import date

import numpy as np

from program_engine.catalog.exercises import ExerciseCatalog
from program_engine.models.enums import SESSIONS_PER_PLAN
from program_engine.models.plan import Plan, PlanUser
from program_engine.models.profile import Profile
from program_engine.planning.schedule import generate_dates
from program_engine.planning.split import choose_split, focus_for
from program_engine.registry import PlanRegistry
from program_engine.session_builder.composer import SessionComposer

logger = logging.getLogger(__name__)


class PlanEngine:
    """Generates 12-session workout plans and keeps them in a registry.

    Usage:
        engine = PlanEngine(rng=np.random.default_rng(42))
        plan = engine.generate(profile)
        same = engine.get_plan(plan.id)
    """

    def __init__(
        self,
        catalog: ExerciseCatalog | None = None,
        registry: PlanRegistry | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.registry = registry if registry is not None else PlanRegistry()
        self.composer = SessionComposer(catalog=catalog, rng=rng)

    def generate(self, profile: Profile, start: date | None = None) -> Plan:
        """Generate, store and return a plan for *profile*.

        Args:
            profile: Validated user profile.
            start: First candidate session date (default: today).

        Returns:
            The stored Plan.
        """
        split = choose_split(profile.goal, profile.experience)
        dates = generate_dates(profile.days_per_week, SESSIONS_PER_PLAN, start)

        sessions = []
        for session_number, session_date in enumerate(dates, start=1):
            # The focus tables are indexed by the 1-based session number
            focus = focus_for(split, session_number)
            sessions.append(
                self.composer.compose(
                    session_number,
                    session_date,
                    focus,
                    profile.experience,
                    profile.equipment,
                )
            )

        plan = Plan(
            id=str(uuid.uuid4()),
            user=PlanUser.from_profile(profile),
            workout_split=split,
            sessions=tuple(sessions),
        )
        self.registry.put(plan)
        logger.info(
            "Generated plan %s: %s split, %d sessions from %s",
            plan.id,
            split.value,
            len(sessions),
            dates[0].isoformat(),
        )
        return plan

    def get_plan(self, plan_id: str) -> Plan | None:
        """Look up a previously generated plan."""
        return self.registry.get(plan_id)
