"""Program engine: builds progressive 12-session strength programs from a user profile."""

from program_engine.engine import PlanEngine
from program_engine.registry import PlanRegistry

__all__ = ["PlanEngine", "PlanRegistry"]
