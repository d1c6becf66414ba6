"""Custom exception hierarchy for the program engine."""

from __future__ import annotations


class ProgramEngineError(Exception):
    """Base exception for all program_engine errors."""


class InvalidProfileError(ProgramEngineError):
    """A user profile is missing required fields or carries bad values."""

    def __init__(self, message: str, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name
