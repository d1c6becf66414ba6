"""Muscle-group taxonomy: coarse focus labels -> fine catalog tags.

The isolation labels (triceps, biceps, traps, forearms) are a deliberate
extension: each expands to its own tag so body-part split sessions get
matching secondary lifts and supersets.
"""

from __future__ import annotations

from program_engine.models.enums import MuscleLabel

MUSCLE_GROUPS: dict[MuscleLabel, frozenset[str]] = {
    MuscleLabel.CHEST: frozenset({"chest", "shoulders", "triceps"}),
    MuscleLabel.BACK: frozenset({"back", "biceps", "rear_deltoids"}),
    MuscleLabel.LEGS: frozenset({"quadriceps", "hamstrings", "calves", "glutes"}),
    MuscleLabel.SHOULDERS: frozenset({"shoulders", "traps", "triceps"}),
    MuscleLabel.ARMS: frozenset({"biceps", "triceps", "forearms"}),
    MuscleLabel.CORE: frozenset({"abs", "obliques", "lower_back"}),
    MuscleLabel.FULL_BODY: frozenset({"full_body"}),
    MuscleLabel.CARDIO: frozenset({"cardio"}),
    MuscleLabel.TRICEPS: frozenset({"triceps"}),
    MuscleLabel.BICEPS: frozenset({"biceps"}),
    MuscleLabel.TRAPS: frozenset({"traps"}),
    MuscleLabel.FOREARMS: frozenset({"forearms"}),
}


def expand(label: MuscleLabel | str) -> frozenset[str]:
    """Return the fine tags a focus label covers.

    Unknown labels expand to the empty set, which downstream filters treat
    as "nothing matches".
    """
    if not isinstance(label, MuscleLabel):
        label = MuscleLabel.from_label(label)
    return MUSCLE_GROUPS.get(label, frozenset())


def expand_all(*labels: MuscleLabel | str) -> frozenset[str]:
    """Union of the expansions of several labels."""
    tags: frozenset[str] = frozenset()
    for label in labels:
        tags |= expand(label)
    return tags
