"""Environment-variable-based configuration for the program engine."""

from __future__ import annotations

import logging
import os

import numpy as np

_seed = os.environ.get("PROGRAM_RNG_SEED", "")
RNG_SEED: int | None = int(_seed) if _seed else None
LOG_LEVEL: str = os.environ.get("PROGRAM_LOG_LEVEL", "INFO").upper()
DEFAULT_DAYS_PER_WEEK: int = int(os.environ.get("PROGRAM_DEFAULT_DAYS_PER_WEEK", "3"))

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install the root handler. Only entry points should call this."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Random generator seeded from *seed*, else PROGRAM_RNG_SEED, else entropy."""
    return np.random.default_rng(seed if seed is not None else RNG_SEED)
