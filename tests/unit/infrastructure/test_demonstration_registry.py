"""Tests for the demonstration registry."""

import threading

import pytest

from pattern_catalog.domain.base.exceptions import (
    DuplicateNameError,
    NotFoundError,
    RegistryFrozenError,
)
from pattern_catalog.domain.demonstration import Category
from pattern_catalog.infrastructure.registry import demonstration_registry
from pattern_catalog.infrastructure.registry.demonstration_registry import (
    DemonstrationRegistry,
    get_demonstration_registry,
)


class TestDemonstrationRegistry:
    """Test registry contracts."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = DemonstrationRegistry()
        self.body = lambda: ["line"]

    def test_register_and_lookup(self):
        registered = self.registry.register("adapter", Category.STRUCTURAL, self.body, "Adapts")

        found = self.registry.lookup("adapter")
        assert found is registered
        assert found.category is Category.STRUCTURAL
        assert found.summary == "Adapts"
        assert "adapter" in self.registry
        assert len(self.registry) == 1

    def test_duplicate_name_rejected(self):
        self.registry.register("adapter", Category.STRUCTURAL, self.body)

        with pytest.raises(DuplicateNameError, match="'adapter' is already registered"):
            self.registry.register("adapter", Category.BEHAVIORAL, self.body)

        assert self.registry.lookup("adapter").category is Category.STRUCTURAL

    def test_names_are_case_sensitive(self):
        self.registry.register("adapter", Category.STRUCTURAL, self.body)
        self.registry.register("Adapter", Category.STRUCTURAL, self.body)

        assert self.registry.list() == ["adapter", "Adapter"]

    def test_lookup_missing_name(self):
        with pytest.raises(NotFoundError) as exc_info:
            self.registry.lookup("not_a_pattern")

        assert exc_info.value.name == "not_a_pattern"
        assert "not_a_pattern" in str(exc_info.value)

    def test_list_preserves_registration_order(self):
        for name in ("zeta", "alpha", "mid"):
            self.registry.register(name, Category.CREATIONAL, self.body)

        assert self.registry.list() == ["zeta", "alpha", "mid"]

    def test_list_by_category(self):
        self.registry.register("one", Category.CREATIONAL, self.body)
        self.registry.register("two", Category.BEHAVIORAL, self.body)
        self.registry.register("three", Category.CREATIONAL, self.body)

        assert self.registry.list(Category.CREATIONAL) == ["one", "three"]
        assert self.registry.list("behavioral") == ["two"]
        assert self.registry.list(Category.STRUCTURAL) == []

    def test_categories_in_first_registration_order(self):
        self.registry.register("one", Category.BEHAVIORAL, self.body)
        self.registry.register("two", Category.CREATIONAL, self.body)
        self.registry.register("three", Category.BEHAVIORAL, self.body)

        assert self.registry.categories() == [Category.BEHAVIORAL, Category.CREATIONAL]

    def test_frozen_registry_rejects_registration(self):
        self.registry.register("one", Category.CREATIONAL, self.body)
        self.registry.freeze()

        assert self.registry.is_frozen
        with pytest.raises(RegistryFrozenError):
            self.registry.register("two", Category.CREATIONAL, self.body)
        assert self.registry.list() == ["one"]


class TestProcessWideRegistry:
    """Test the guarded process-wide accessor."""

    def test_returns_same_frozen_instance(self):
        first = get_demonstration_registry()
        second = get_demonstration_registry()

        assert first is second
        assert first.is_frozen
        assert len(first) >= 23

    def test_concurrent_first_access_builds_once(self, monkeypatch):
        monkeypatch.setattr(demonstration_registry, "_registry", None)
        handles = []

        def access():
            handles.append(get_demonstration_registry())

        threads = [threading.Thread(target=access) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(handles) == 8
        assert all(handle is handles[0] for handle in handles)
