"""In-memory plan registry: plan id -> generated Plan."""

from __future__ import annotations

import logging
import threading
from collections.abc import MutableMapping

from program_engine.models.plan import Plan

logger = logging.getLogger(__name__)


class PlanRegistry:
    """Holds generated plans for later retrieval (e.g. export).

    One registry is created per process and handed to whatever serves
    requests. The backing mapping is injectable; access to it is guarded
    by a lock so concurrent request threads can insert and look up safely.
    Plans are never updated or removed here.
    """

    def __init__(self, store: MutableMapping[str, Plan] | None = None) -> None:
        self._plans: MutableMapping[str, Plan] = store if store is not None else {}
        self._lock = threading.Lock()

    def put(self, plan: Plan) -> None:
        """Store a plan under its id."""
        with self._lock:
            self._plans[plan.id] = plan
        logger.debug("Stored plan %s", plan.id)

    def get(self, plan_id: str) -> Plan | None:
        """Retrieve a plan by id, or None if it was never stored."""
        with self._lock:
            return self._plans.get(plan_id)

    @property
    def plan_ids(self) -> list[str]:
        """List stored plan ids."""
        with self._lock:
            return list(self._plans.keys())

    def __contains__(self, plan_id: object) -> bool:
        with self._lock:
            return plan_id in self._plans

    def __len__(self) -> int:
        with self._lock:
            return len(self._plans)
