"""Tests for PlanRegistry."""

from __future__ import annotations

import threading

from program_engine.registry import PlanRegistry


class TestPlanRegistry:
    def test_put_then_get(self, engine, beginner_profile, start_date) -> None:
        plan = engine.generate(beginner_profile, start=start_date)
        registry = PlanRegistry()
        registry.put(plan)
        assert registry.get(plan.id) is plan
        assert plan.id in registry
        assert registry.plan_ids == [plan.id]
        assert len(registry) == 1

    def test_get_nonexistent_returns_none(self) -> None:
        assert PlanRegistry().get("no-such-plan") is None
        assert "no-such-plan" not in PlanRegistry()

    def test_injected_store_is_used(self, engine, beginner_profile, start_date) -> None:
        store: dict = {}
        registry = PlanRegistry(store)
        plan = engine.generate(beginner_profile, start=start_date)
        registry.put(plan)
        assert store == {plan.id: plan}

    def test_concurrent_puts(self, engine, beginner_profile, start_date) -> None:
        plans = [engine.generate(beginner_profile, start=start_date) for _ in range(8)]
        registry = PlanRegistry()
        threads = [threading.Thread(target=registry.put, args=(p,)) for p in plans]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(registry) == 8
        assert all(registry.get(p.id) is p for p in plans)
