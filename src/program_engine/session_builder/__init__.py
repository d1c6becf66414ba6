"""Session builder: turns a focus into warm-up/main/circuit/superset/cool-down blocks."""

from program_engine.session_builder.composer import SessionComposer

__all__ = ["SessionComposer"]
