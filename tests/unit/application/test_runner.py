"""Tests for the demonstration runner."""

import threading
from itertools import count

import pytest

from pattern_catalog.application.runner import DemonstrationRunner
from pattern_catalog.domain.base.exceptions import NotFoundError
from pattern_catalog.domain.demonstration import Category
from pattern_catalog.infrastructure.registry.demonstration_registry import DemonstrationRegistry


class TestDemonstrationRunner:
    """Test sequential runs."""

    def test_run_preserves_requested_order(self, small_registry):
        runner = DemonstrationRunner(small_registry)

        results = runner.run(["farewell", "greeting"])

        assert [result.name for result in results] == ["farewell", "greeting"]
        assert results[0].lines == ("goodbye",)
        assert results[1].lines == ("hello", "world")

    def test_unknown_name_fails_fast_without_executing(self):
        calls = []
        registry = DemonstrationRegistry()
        registry.register("tracked", Category.CREATIONAL, lambda: calls.append("ran") or ["ran"])
        runner = DemonstrationRunner(registry)

        with pytest.raises(NotFoundError) as exc_info:
            runner.run(["tracked", "not_a_pattern"])

        assert exc_info.value.name == "not_a_pattern"
        assert calls == []

    def test_fault_is_isolated(self, small_registry):
        runner = DemonstrationRunner(small_registry)

        results = runner.run(["greeting", "broken", "farewell"])

        assert [result.succeeded for result in results] == [True, False, True]
        broken = results[1]
        assert broken.lines == ()
        assert broken.error == "RuntimeError: collaborator wiring is wrong"
        assert results[2].lines == ("goodbye",)

    def test_run_all_uses_registration_order(self, small_registry):
        runner = DemonstrationRunner(small_registry)

        results = runner.run_all()

        assert [result.name for result in results] == ["greeting", "counter", "broken", "farewell"]

    def test_run_all_by_category(self, small_registry):
        runner = DemonstrationRunner(small_registry)

        results = runner.run_all(Category.BEHAVIORAL)

        assert [result.name for result in results] == ["broken", "farewell"]

    def test_duration_comes_from_clock(self, small_registry):
        ticks = count(start=0, step=0.5)
        runner = DemonstrationRunner(small_registry, clock=lambda: next(ticks))

        result = runner.run(["greeting"])[0]

        assert result.duration_seconds == 0.5

    def test_empty_request(self, small_registry):
        assert DemonstrationRunner(small_registry).run([]) == []

    def test_invalid_worker_count(self, small_registry):
        with pytest.raises(ValueError):
            DemonstrationRunner(small_registry, max_workers=0)


class TestParallelRunner:
    """Test thread pool execution."""

    def test_parallel_results_keep_requested_order(self):
        release = threading.Event()
        registry = DemonstrationRegistry()

        def slow():
            release.wait(timeout=5)
            return ["slow"]

        def fast():
            release.set()
            return ["fast"]

        registry.register("slow", Category.CREATIONAL, slow)
        registry.register("fast", Category.CREATIONAL, fast)
        runner = DemonstrationRunner(registry, parallel=True, max_workers=2)

        results = runner.run(["slow", "fast"])

        assert [result.name for result in results] == ["slow", "fast"]
        assert [result.lines for result in results] == [("slow",), ("fast",)]

    def test_parallel_fault_does_not_affect_siblings(self, small_registry):
        runner = DemonstrationRunner(small_registry, parallel=True, max_workers=4)

        results = runner.run_all()

        assert [result.succeeded for result in results] == [True, True, False, True]
        assert results[1].lines == ("0", "1", "2")

    def test_parallel_matches_sequential_for_catalog(self, catalog_registry):
        sequential = DemonstrationRunner(catalog_registry).run_all()
        parallel = DemonstrationRunner(catalog_registry, parallel=True, max_workers=8).run_all()

        assert [r.lines for r in parallel] == [r.lines for r in sequential]
