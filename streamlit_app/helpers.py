"""Utility helpers bridging the Streamlit UI and the program engine.

Pure functions for formatting, profile construction and tabular views of
a generated plan.
"""

from __future__ import annotations

import pandas as pd

from program_engine.models.enums import ExperienceLevel, Goal, SectionType, SplitType
from program_engine.models.exercise import Duration, SessionExercise
from program_engine.models.plan import Plan
from program_engine.models.profile import Profile
from program_engine.models.session import CircuitBlock, Session

# ---------------------------------------------------------------------------
# Labels and colors
# ---------------------------------------------------------------------------

GOAL_LABELS: dict[Goal, str] = {
    Goal.MUSCLE_GAIN: "Muscle Gain",
    Goal.FAT_LOSS: "Fat Loss",
    Goal.STRENGTH: "Strength",
    Goal.ENDURANCE: "Endurance",
    Goal.GENERAL_FITNESS: "General Fitness",
    Goal.UNKNOWN: "General Fitness",
}

EXPERIENCE_LABELS: dict[ExperienceLevel, str] = {
    ExperienceLevel.BEGINNER: "Beginner",
    ExperienceLevel.INTERMEDIATE: "Intermediate",
    ExperienceLevel.ADVANCED: "Advanced",
}

SPLIT_LABELS: dict[SplitType, str] = {
    SplitType.FULL_BODY: "Full Body",
    SplitType.PUSH_PULL_LEGS: "Push / Pull / Legs",
    SplitType.UPPER_LOWER: "Upper / Lower",
    SplitType.BRO_SPLIT: "Body-Part Split",
}

SECTION_LABELS: dict[SectionType, str] = {
    SectionType.WARMUP: "Warm-up",
    SectionType.MAIN: "Main Workout",
    SectionType.CIRCUIT: "Circuit",
    SectionType.SUPERSET: "Superset",
    SectionType.COOLDOWN: "Cool-down",
}

SECTION_COLORS: dict[SectionType, str] = {
    SectionType.WARMUP: "#FF8C00",    # orange
    SectionType.MAIN: "#2ECC71",      # green
    SectionType.CIRCUIT: "#8E44AD",   # purple
    SectionType.SUPERSET: "#E74C3C",  # red
    SectionType.COOLDOWN: "#4A90D9",  # blue
}

EQUIPMENT_OPTIONS = (
    "bodyweight",
    "dumbbells",
    "barbell",
    "kettlebell",
    "resistance_bands",
    "jump_rope",
    "foam_roller",
)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_label(value: str) -> str:
    """'full_body' -> 'Full Body'."""
    return value.replace("_", " ").title()


def format_duration(duration: Duration | None) -> str:
    return str(duration) if duration is not None else "--"


def format_prescription(exercise: SessionExercise) -> str:
    """Compact set/rep/time text, e.g. '4 x 10' or '5 minutes'."""
    if exercise.sets is not None and exercise.reps is not None:
        return f"{exercise.sets} x {exercise.reps}"
    if exercise.duration is not None:
        return str(exercise.duration)
    if exercise.reps is not None:
        return f"{exercise.reps} reps"
    return "--"


# ---------------------------------------------------------------------------
# Profile construction
# ---------------------------------------------------------------------------


def build_profile(form: dict) -> Profile:
    """Convert a UI form dict into a validated Profile.

    Raises:
        InvalidProfileError: if required fields are missing or invalid.
    """
    return Profile.from_dict(form)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def exercise_table(exercises: tuple[SessionExercise, ...]) -> pd.DataFrame:
    """One row per exercise with sets, reps, rest and duration columns."""
    rows = [
        {
            "Exercise": ex.name,
            "Muscle Group": format_label(ex.muscle_group),
            "Sets": ex.sets,
            "Reps": ex.reps,
            "Rest": format_duration(ex.rest),
            "Duration": format_duration(ex.duration),
        }
        for ex in exercises
    ]
    return pd.DataFrame(
        rows, columns=["Exercise", "Muscle Group", "Sets", "Reps", "Rest", "Duration"],
    )


def circuit_table(circuit: CircuitBlock) -> pd.DataFrame:
    rows = [{"Exercise": ex.name, "Reps": ex.reps, "Time": str(ex.time)} for ex in circuit.exercises]
    return pd.DataFrame(rows, columns=["Exercise", "Reps", "Time"])


def plan_overview(plan: Plan) -> pd.DataFrame:
    """One row per session: date, focus, and which optional blocks it has."""
    rows = []
    for session in plan.sessions:
        sections = session.sections
        rows.append({
            "Session": session.session_number,
            "Date": session.formatted_date,
            "Primary": format_label(session.focus.primary.value),
            "Secondary": format_label(session.focus.secondary.value),
            "Main Exercises": len(sections.main),
            "Circuit": sections.circuit is not None,
            "Superset": sections.superset is not None,
        })
    return pd.DataFrame(rows).set_index("Session")


def plan_label(plan: Plan) -> str:
    """'Jamie: Push / Pull / Legs, from Monday, October 19'."""
    return (
        f"{plan.user.name}: {SPLIT_LABELS[plan.workout_split]}, "
        f"from {plan.sessions[0].formatted_date}"
    )


def session_title(session: Session) -> str:
    """'Session 3 · Wednesday, October 21: Legs / Core'."""
    return (
        f"Session {session.session_number} · {session.formatted_date}: "
        f"{format_label(session.focus.primary.value)} / "
        f"{format_label(session.focus.secondary.value)}"
    )
