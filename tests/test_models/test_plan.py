"""Tests for Plan invariants."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from program_engine.models.enums import MuscleLabel, SplitType
from program_engine.models.plan import Plan, PlanUser
from program_engine.models.session import Focus, Session, SessionSections


def _make_sessions(count: int = 12, numbering: list[int] | None = None) -> tuple[Session, ...]:
    numbers = numbering or list(range(1, count + 1))
    focus = Focus(MuscleLabel.FULL_BODY, MuscleLabel.CARDIO)
    return tuple(
        Session(
            session_number=n,
            date=date(2026, 10, 19) + timedelta(days=i),
            focus=focus,
            sections=SessionSections(),
        )
        for i, n in enumerate(numbers)
    )


class TestPlan:
    def test_valid_plan(self, beginner_profile) -> None:
        plan = Plan(
            id="abc",
            user=PlanUser.from_profile(beginner_profile),
            workout_split=SplitType.FULL_BODY,
            sessions=_make_sessions(),
        )
        assert len(plan.sessions) == 12
        assert plan.created_at.tzinfo is not None
        assert plan.session(3).session_number == 3

    def test_wrong_session_count_rejected(self, beginner_profile) -> None:
        with pytest.raises(ValueError):
            Plan(
                id="abc",
                user=PlanUser.from_profile(beginner_profile),
                workout_split=SplitType.FULL_BODY,
                sessions=_make_sessions(count=11),
            )

    def test_misnumbered_sessions_rejected(self, beginner_profile) -> None:
        numbering = list(range(1, 13))
        numbering[4], numbering[5] = numbering[5], numbering[4]
        with pytest.raises(ValueError):
            Plan(
                id="abc",
                user=PlanUser.from_profile(beginner_profile),
                workout_split=SplitType.FULL_BODY,
                sessions=_make_sessions(numbering=numbering),
            )

    def test_session_lookup_out_of_range(self, beginner_profile) -> None:
        plan = Plan(
            id="abc",
            user=PlanUser.from_profile(beginner_profile),
            workout_split=SplitType.FULL_BODY,
            sessions=_make_sessions(),
        )
        with pytest.raises(IndexError):
            plan.session(13)

    def test_user_is_denormalised_from_profile(self, advanced_strength_profile) -> None:
        user = PlanUser.from_profile(advanced_strength_profile)
        assert user.name == "Alex"
        assert user.equipment == advanced_strength_profile.equipment
        assert user.experience == advanced_strength_profile.experience


class TestSession:
    def test_formatted_date(self) -> None:
        session = _make_sessions()[0]
        assert session.formatted_date == "Monday, October 19"
