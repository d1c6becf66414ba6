"""Tests for progressive overload."""

from __future__ import annotations

import dataclasses

import pytest

from program_engine.models.enums import ExercisePhase, ExperienceLevel
from program_engine.models.exercise import CatalogExercise, Duration, SessionExercise
from program_engine.planning.progression import apply_progression, progression_steps


def _lift(sets: int = 3, reps: int = 10, rest_s: int = 60) -> CatalogExercise:
    return CatalogExercise(
        name="Dumbbell Curls",
        phase=ExercisePhase.MAIN,
        muscle_group="biceps",
        equipment=frozenset({"dumbbells"}),
        sets=sets,
        reps=reps,
        rest=Duration.seconds(rest_s),
    )


class TestProgressionSteps:
    @pytest.mark.parametrize(
        ("session", "steps"), [(1, 0), (2, 0), (3, 1), (5, 1), (6, 2), (12, 4)],
    )
    def test_one_step_per_three_sessions(self, session, steps) -> None:
        assert progression_steps(session) == steps


class TestApplyProgression:
    def test_no_change_before_first_step(self) -> None:
        result = apply_progression(_lift(), 2, ExperienceLevel.ADVANCED)
        assert (result.sets, result.reps, result.rest) == (3, 10, Duration.seconds(60))

    def test_intermediate_at_session_six(self) -> None:
        result = apply_progression(_lift(), 6, ExperienceLevel.INTERMEDIATE)
        assert result.sets == 5
        assert result.reps == 12
        assert result.rest == Duration.seconds(40)

    def test_advanced_at_session_twelve(self) -> None:
        result = apply_progression(_lift(rest_s=120), 12, ExperienceLevel.ADVANCED)
        assert result.sets == 7
        assert result.reps == 18
        assert result.rest == Duration.seconds(60)

    def test_beginner_half_sets_are_floored(self) -> None:
        assert apply_progression(_lift(), 3, ExperienceLevel.BEGINNER).sets == 3
        assert apply_progression(_lift(), 6, ExperienceLevel.BEGINNER).sets == 4
        assert apply_progression(_lift(), 9, ExperienceLevel.BEGINNER).sets == 4

    def test_rest_floor(self) -> None:
        result = apply_progression(_lift(rest_s=45), 12, ExperienceLevel.ADVANCED)
        assert result.rest == Duration.seconds(30)

    def test_minute_rest_is_converted(self) -> None:
        entry = dataclasses.replace(_lift(), rest=Duration.minutes(2))
        result = apply_progression(entry, 3, ExperienceLevel.INTERMEDIATE)
        assert result.rest == Duration.seconds(110)

    def test_timed_exercise_keeps_duration(self) -> None:
        plank = CatalogExercise(
            name="Plank",
            phase=ExercisePhase.MAIN,
            muscle_group="abs",
            equipment=frozenset({"bodyweight"}),
            duration=Duration.seconds(45),
        )
        result = apply_progression(plank, 12, ExperienceLevel.ADVANCED)
        assert result.sets is None
        assert result.reps is None
        assert result.rest is None
        assert result.duration == Duration.seconds(45)

    def test_input_is_not_modified(self) -> None:
        entry = _lift()
        apply_progression(entry, 12, ExperienceLevel.ADVANCED)
        assert (entry.sets, entry.reps) == (3, 10)

    def test_deterministic(self) -> None:
        entry = _lift()
        a = apply_progression(entry, 9, ExperienceLevel.BEGINNER)
        b = apply_progression(entry, 9, ExperienceLevel.BEGINNER)
        assert a == b
        assert isinstance(a, SessionExercise)

    @pytest.mark.parametrize("experience", list(ExperienceLevel))
    def test_monotonic_across_sessions(self, experience) -> None:
        entry = _lift(rest_s=90)
        previous = apply_progression(entry, 1, experience)
        for n in range(2, 13):
            current = apply_progression(entry, n, experience)
            assert current.sets >= previous.sets
            assert current.reps >= previous.reps
            assert current.rest.total_seconds <= previous.rest.total_seconds
            assert current.rest.total_seconds >= 30
            previous = current
