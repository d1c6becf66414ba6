"""Frozen user profile: the sole input to PlanEngine.generate()."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from program_engine.exceptions import InvalidProfileError
from program_engine.models.enums import (
    DEFAULT_DAYS_PER_WEEK,
    DEFAULT_EQUIPMENT,
    ExperienceLevel,
    Goal,
)

_REQUIRED_FIELDS = ("name", "age", "gender", "goal", "experience")


@dataclass(frozen=True)
class Profile:
    """Immutable snapshot of what the user told us about themselves."""

    name: str
    age: int
    gender: str
    goal: Goal
    experience: ExperienceLevel
    equipment: frozenset[str] = field(default=DEFAULT_EQUIPMENT)
    days_per_week: int = DEFAULT_DAYS_PER_WEEK

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Profile:
        """Build a Profile from a form/JSON payload.

        ``equipment`` and ``days_per_week`` fall back to their defaults when
        absent or empty. Unknown goals resolve to ``Goal.UNKNOWN``.

        Raises:
            InvalidProfileError: if *data* is not a mapping, a required
                field is missing, a number is not a whole number, the
                experience level is unknown or ``days_per_week`` is below 1.
        """
        if not isinstance(data, Mapping):
            raise InvalidProfileError("Profile must be a JSON object")

        for key in _REQUIRED_FIELDS:
            value = data.get(key)
            if value is None or value == "":
                raise InvalidProfileError(f"Missing required field: {key}", key)

        age = _whole_number(data["age"], "age")

        experience_label = str(data["experience"]).strip().lower()
        try:
            experience = ExperienceLevel(experience_label)
        except ValueError:
            raise InvalidProfileError(
                f"Unknown experience level: {data['experience']!r}", "experience"
            ) from None

        raw_days = data.get("days_per_week")
        if raw_days is None or raw_days == "":
            days_per_week = DEFAULT_DAYS_PER_WEEK
        else:
            days_per_week = _whole_number(raw_days, "days_per_week")
        if days_per_week < 1:
            raise InvalidProfileError(
                f"days_per_week must be at least 1, got {days_per_week}", "days_per_week"
            )

        return cls(
            name=str(data["name"]),
            age=age,
            gender=str(data["gender"]),
            goal=Goal.from_label(data["goal"]),
            experience=experience,
            equipment=normalize_equipment(data.get("equipment")),
            days_per_week=days_per_week,
        )


def _whole_number(value: Any, field_name: str) -> int:
    """Accept ints and integral floats/strings; reject bools and fractions."""
    if isinstance(value, bool):
        raise InvalidProfileError(f"Invalid {field_name}: {value!r}", field_name)
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidProfileError(f"Invalid {field_name}: {value!r}", field_name)
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidProfileError(f"Invalid {field_name}: {value!r}", field_name) from None


def normalize_equipment(equipment: Iterable[str] | str | None) -> frozenset[str]:
    """Lower-case and de-duplicate equipment tags; empty means bodyweight.

    Raises:
        InvalidProfileError: if *equipment* is neither a string nor an iterable.
    """
    if isinstance(equipment, str):
        equipment = [equipment]
    elif equipment is not None and not isinstance(equipment, Iterable):
        raise InvalidProfileError(f"Invalid equipment: {equipment!r}", "equipment")
    if not equipment:
        return DEFAULT_EQUIPMENT
    tags = frozenset(str(tag).strip().lower() for tag in equipment if str(tag).strip())
    return tags or DEFAULT_EQUIPMENT
