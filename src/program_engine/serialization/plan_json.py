"""JSON export for Plan objects.

Produces the wire shape the web client and export endpoint have always
used: camelCase plan keys, snake_case exercise keys, and rest/duration
rendered as "<n> seconds" / "<n> minutes" strings. Durations only become
text here.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from program_engine.models.exercise import SessionExercise
from program_engine.models.plan import Plan
from program_engine.models.session import CircuitBlock, Session, SupersetBlock


def plan_to_dict(plan: Plan) -> dict:
    """Convert a Plan to a JSON-ready dict."""
    user = plan.user
    return {
        "id": plan.id,
        "user": {
            "name": user.name,
            "age": user.age,
            "gender": user.gender,
            "goal": user.goal.value,
            "experience": user.experience.value,
            "equipment": sorted(user.equipment),
        },
        "workoutSplit": plan.workout_split.value,
        "sessions": [session_to_dict(s) for s in plan.sessions],
        "createdAt": plan.created_at.isoformat(),
    }


def plan_to_json_string(plan: Plan, indent: int = 2) -> str:
    """Convert a Plan to a JSON string."""
    return json.dumps(plan_to_dict(plan), indent=indent)


def session_to_dict(session: Session) -> dict:
    sections = session.sections
    result_sections: dict = {
        "warmup": [exercise_to_dict(ex) for ex in sections.warmup],
        "main": [exercise_to_dict(ex) for ex in sections.main],
        "cooldown": [exercise_to_dict(ex) for ex in sections.cooldown],
    }
    if sections.circuit is not None:
        result_sections["circuit"] = _circuit_to_dict(sections.circuit)
    if sections.superset is not None:
        result_sections["superset"] = [_superset_to_dict(b) for b in sections.superset]

    return {
        "session": session.session_number,
        "date": session.formatted_date,
        "focus": {
            "primary": session.focus.primary.value,
            "secondary": session.focus.secondary.value,
        },
        "sections": result_sections,
    }


def exercise_to_dict(exercise: SessionExercise) -> dict:
    """Serialise one exercise, omitting fields it does not carry."""
    result: dict = {
        "name": exercise.name,
        "type": exercise.phase.value,
        "muscle_group": exercise.muscle_group,
        "equipment": sorted(exercise.equipment),
    }
    if exercise.sets is not None:
        result["sets"] = exercise.sets
    if exercise.reps is not None:
        result["reps"] = exercise.reps
    if exercise.rest is not None:
        result["rest"] = str(exercise.rest)
    if exercise.duration is not None:
        result["duration"] = str(exercise.duration)
    return result


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _circuit_to_dict(circuit: CircuitBlock) -> dict:
    return {
        "rounds": circuit.rounds,
        "rest_between_exercises": str(circuit.rest_between_exercises),
        "rest_between_rounds": str(circuit.rest_between_rounds),
        "exercises": [
            {"name": ex.name, "reps": ex.reps, "time": str(ex.time)}
            for ex in circuit.exercises
        ],
    }


def _superset_to_dict(block: SupersetBlock) -> dict:
    return {
        "name": block.name,
        "rounds": block.rounds,
        "exercises": [exercise_to_dict(ex) for ex in block.exercises],
    }
