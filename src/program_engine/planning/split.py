"""Split selection and per-session muscle-group focus rotation.

Each non-full-body split has a fixed 6-slot focus table. A session index
maps to slot ``(index % 6) + 1``, so index 0 lands on slot 1 and every
exact multiple of 6 (sessions 6 and 12 when numbering from 1) lands on
slot 1 as well. Slot 6 is only reached by indices 5, 11, ...
"""

from __future__ import annotations

from program_engine.models.enums import (
    FOCUS_CYCLE_LENGTH,
    ExperienceLevel,
    Goal,
    MuscleLabel,
    SplitType,
)
from program_engine.models.session import Focus

_M = MuscleLabel

_FULL_BODY_FOCUS = Focus(primary=_M.FULL_BODY, secondary=_M.CARDIO)

# Slot number (1-6) -> focus
_FOCUS_TABLES: dict[SplitType, dict[int, Focus]] = {
    SplitType.PUSH_PULL_LEGS: {
        1: Focus(_M.CHEST, _M.SHOULDERS),
        2: Focus(_M.BACK, _M.ARMS),
        3: Focus(_M.LEGS, _M.CORE),
        4: Focus(_M.SHOULDERS, _M.CHEST),
        5: Focus(_M.BACK, _M.ARMS),
        6: Focus(_M.LEGS, _M.CORE),
    },
    # Lower body on odd slots (even session numbers), upper body otherwise
    SplitType.UPPER_LOWER: {
        1: Focus(_M.LEGS, _M.CORE),
        2: Focus(_M.CHEST, _M.BACK),
        3: Focus(_M.LEGS, _M.CORE),
        4: Focus(_M.CHEST, _M.BACK),
        5: Focus(_M.LEGS, _M.CORE),
        6: Focus(_M.CHEST, _M.BACK),
    },
    SplitType.BRO_SPLIT: {
        1: Focus(_M.CHEST, _M.TRICEPS),
        2: Focus(_M.BACK, _M.BICEPS),
        3: Focus(_M.LEGS, _M.CORE),
        4: Focus(_M.SHOULDERS, _M.TRAPS),
        5: Focus(_M.ARMS, _M.FOREARMS),
        6: Focus(_M.CORE, _M.CARDIO),
    },
}


def choose_split(goal: Goal, experience: ExperienceLevel) -> SplitType:
    """Pick the weekly split archetype.

    Beginners always train full body. Otherwise strength goes
    push/pull/legs, muscle gain goes upper/lower (bro split when advanced),
    and every other goal (including unknown ones) trains full body.
    """
    if experience == ExperienceLevel.BEGINNER:
        return SplitType.FULL_BODY

    if goal == Goal.STRENGTH:
        return SplitType.PUSH_PULL_LEGS
    if goal == Goal.MUSCLE_GAIN:
        if experience == ExperienceLevel.ADVANCED:
            return SplitType.BRO_SPLIT
        return SplitType.UPPER_LOWER
    return SplitType.FULL_BODY


def focus_slot(session_index: int) -> int:
    """Map a session index onto a 1-based focus-table slot."""
    return (session_index % FOCUS_CYCLE_LENGTH) + 1


def focus_for(split: SplitType, session_index: int) -> Focus:
    """Return the primary/secondary focus for a session under *split*."""
    table = _FOCUS_TABLES.get(split)
    if table is None:
        return _FULL_BODY_FOCUS
    return table[focus_slot(session_index)]
