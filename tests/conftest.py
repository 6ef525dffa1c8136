"""Shared fixtures for the pattern catalog test suite."""

import pytest

from pattern_catalog.application.runner import DemonstrationRunner
from pattern_catalog.application.validator import OutputValidator
from pattern_catalog.catalog import build_registry
from pattern_catalog.domain.demonstration import Category
from pattern_catalog.infrastructure.registry.demonstration_registry import DemonstrationRegistry


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration environment overrides out of every test."""
    for key in ("PATTERN_CATALOG_LOG_LEVEL", "PATTERN_CATALOG_PARALLEL", "PATTERN_CATALOG_MAX_WORKERS"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def catalog_registry():
    """Frozen registry holding the full catalog."""
    return build_registry()


@pytest.fixture
def small_registry():
    """Unfrozen registry with a handful of hand-written demonstrations."""
    registry = DemonstrationRegistry()
    registry.register("greeting", Category.CREATIONAL, lambda: ["hello", "world"])
    registry.register("counter", Category.STRUCTURAL, lambda: [str(i) for i in range(3)])
    registry.register("broken", Category.BEHAVIORAL, _broken_body)
    registry.register("farewell", Category.BEHAVIORAL, lambda: ["goodbye"])
    return registry


@pytest.fixture
def validator():
    return OutputValidator()


@pytest.fixture
def runner(catalog_registry):
    return DemonstrationRunner(catalog_registry)


def _broken_body():
    raise RuntimeError("collaborator wiring is wrong")
