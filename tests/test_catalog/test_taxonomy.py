"""Tests for the muscle-group taxonomy."""

from __future__ import annotations

from program_engine.catalog.taxonomy import expand, expand_all
from program_engine.models.enums import MuscleLabel


class TestExpand:
    def test_chest_covers_pressing_muscles(self) -> None:
        assert expand(MuscleLabel.CHEST) == frozenset({"chest", "shoulders", "triceps"})

    def test_legs(self) -> None:
        assert expand(MuscleLabel.LEGS) == frozenset(
            {"quadriceps", "hamstrings", "calves", "glutes"}
        )

    def test_core(self) -> None:
        assert expand(MuscleLabel.CORE) == frozenset({"abs", "obliques", "lower_back"})

    def test_accepts_string_labels(self) -> None:
        assert expand("back") == frozenset({"back", "biceps", "rear_deltoids"})

    def test_unknown_string_is_empty(self) -> None:
        assert expand("neck") == frozenset()

    def test_unknown_member_is_empty(self) -> None:
        assert expand(MuscleLabel.UNKNOWN) == frozenset()

    def test_isolation_labels_expand_to_themselves(self) -> None:
        assert expand(MuscleLabel.TRICEPS) == frozenset({"triceps"})
        assert expand(MuscleLabel.FOREARMS) == frozenset({"forearms"})

    def test_expand_all_is_union(self) -> None:
        tags = expand_all(MuscleLabel.FULL_BODY, MuscleLabel.CARDIO)
        assert tags == frozenset({"full_body", "cardio"})
