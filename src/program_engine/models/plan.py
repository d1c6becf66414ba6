"""Plan models: the generated 12-session program and its denormalised user."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from program_engine.models.enums import SESSIONS_PER_PLAN, ExperienceLevel, Goal, SplitType
from program_engine.models.profile import Profile
from program_engine.models.session import Session


@dataclass(frozen=True)
class PlanUser:
    """Subset of the Profile kept on the plan for export."""

    name: str
    age: int
    gender: str
    goal: Goal
    experience: ExperienceLevel
    equipment: frozenset[str]

    @classmethod
    def from_profile(cls, profile: Profile) -> PlanUser:
        return cls(
            name=profile.name,
            age=profile.age,
            gender=profile.gender,
            goal=profile.goal,
            experience=profile.experience,
            equipment=profile.equipment,
        )


@dataclass(frozen=True)
class Plan:
    """Output of PlanEngine.generate(). Never mutated once built."""

    id: str
    user: PlanUser
    workout_split: SplitType
    sessions: tuple[Session, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if len(self.sessions) != SESSIONS_PER_PLAN:
            raise ValueError(
                f"A plan holds exactly {SESSIONS_PER_PLAN} sessions, got {len(self.sessions)}"
            )
        for position, session in enumerate(self.sessions, start=1):
            if session.session_number != position:
                raise ValueError(
                    f"Session at position {position} is numbered {session.session_number}"
                )

    def session(self, session_number: int) -> Session:
        """Return the session with the given 1-based number."""
        if not 1 <= session_number <= len(self.sessions):
            raise IndexError(f"No session {session_number} in this plan")
        return self.sessions[session_number - 1]
