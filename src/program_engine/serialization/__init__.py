"""Serialization module: export plans for clients and downloads."""

from program_engine.serialization.plan_json import plan_to_dict, plan_to_json_string

__all__ = ["plan_to_dict", "plan_to_json_string"]
