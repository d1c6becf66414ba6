"""Shared test fixtures: profiles, seeded generators, engines."""

from __future__ import annotations

from datetime import date
from typing import Callable

import numpy as np
import pytest

from program_engine.engine import PlanEngine
from program_engine.models.enums import ExperienceLevel, Goal
from program_engine.models.profile import Profile
from program_engine.registry import PlanRegistry

# A Monday
START_DATE = date(2026, 10, 19)


@pytest.fixture
def start_date() -> date:
    return START_DATE


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def beginner_profile() -> Profile:
    """Bodyweight-only beginner training 3 days a week."""
    return Profile(
        name="Bob",
        age=45,
        gender="male",
        goal=Goal.FAT_LOSS,
        experience=ExperienceLevel.BEGINNER,
        equipment=frozenset({"bodyweight"}),
        days_per_week=3,
    )


@pytest.fixture
def intermediate_profile() -> Profile:
    """Intermediate lifter chasing muscle gain with dumbbells (upper/lower)."""
    return Profile(
        name="Sarah",
        age=32,
        gender="female",
        goal=Goal.MUSCLE_GAIN,
        experience=ExperienceLevel.INTERMEDIATE,
        equipment=frozenset({"bodyweight", "dumbbells"}),
        days_per_week=4,
    )


@pytest.fixture
def advanced_strength_profile() -> Profile:
    """Advanced strength athlete with a full barbell setup (push/pull/legs)."""
    return Profile(
        name="Alex",
        age=28,
        gender="male",
        goal=Goal.STRENGTH,
        experience=ExperienceLevel.ADVANCED,
        equipment=frozenset({"barbell", "dumbbells", "bodyweight"}),
        days_per_week=4,
    )


@pytest.fixture
def engine(rng: np.random.Generator) -> PlanEngine:
    """Engine with a fresh registry and a seeded generator."""
    return PlanEngine(registry=PlanRegistry(), rng=rng)


@pytest.fixture
def profile_payload_factory() -> Callable[..., dict]:
    """Factory for raw profile payloads as a form or JSON body would send them.

    Usage:
        payload = profile_payload_factory(goal="strength", days_per_week=5)
    """

    def factory(**overrides) -> dict:
        payload = {
            "name": "Jamie",
            "age": 30,
            "gender": "female",
            "goal": "general_fitness",
            "experience": "intermediate",
            "equipment": ["bodyweight", "dumbbells"],
            "days_per_week": 3,
        }
        payload.update(overrides)
        return payload

    return factory
