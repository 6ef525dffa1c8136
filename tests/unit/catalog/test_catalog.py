"""Catalog-wide properties of the bundled demonstrations."""

import pytest

from pattern_catalog.catalog import build_registry
from pattern_catalog.domain.demonstration import TIMESTAMP_PLACEHOLDER, Category
from pattern_catalog.fixtures import EXPECTED_OUTPUTS, load_expected_outputs

CATALOG_ORDER = {
    Category.CREATIONAL: [
        "simple_factory",
        "factory_method",
        "abstract_factory",
        "builder",
        "prototype",
        "singleton",
    ],
    Category.STRUCTURAL: [
        "adapter",
        "bridge",
        "composite",
        "decorator",
        "facade",
        "flyweight",
        "proxy",
    ],
    Category.BEHAVIORAL: [
        "chain_of_responsibility",
        "command",
        "iterator",
        "mediator",
        "memento",
        "observer",
        "visitor",
        "strategy",
        "state",
        "template_method",
    ],
}

ALL_NAMES = [name for names in CATALOG_ORDER.values() for name in names]


class TestCatalogRegistry:
    """Test the catalog as registered."""

    def test_all_patterns_registered_in_catalog_order(self, catalog_registry):
        assert catalog_registry.list() == ALL_NAMES

    @pytest.mark.parametrize("category", list(Category))
    def test_category_listing(self, catalog_registry, category):
        assert catalog_registry.list(category) == CATALOG_ORDER[category]

    def test_listing_is_deterministic(self, catalog_registry):
        assert catalog_registry.list() == catalog_registry.list()
        assert build_registry().list() == catalog_registry.list()

    def test_every_pattern_has_a_summary(self, catalog_registry):
        for name in catalog_registry.list():
            assert catalog_registry.lookup(name).summary

    def test_registry_is_frozen(self, catalog_registry):
        assert catalog_registry.is_frozen


@pytest.mark.parametrize("name", ALL_NAMES)
class TestEveryDemonstration:
    """Properties every demonstration must hold."""

    def test_executes_to_non_empty_output(self, catalog_registry, name):
        lines = catalog_registry.lookup(name).execute()

        assert lines
        assert all(isinstance(line, str) for line in lines)

    def test_execution_is_idempotent(self, catalog_registry, name):
        demonstration = catalog_registry.lookup(name)

        assert demonstration.execute() == demonstration.execute()

    def test_matches_bundled_fixture(self, catalog_registry, name):
        assert tuple(catalog_registry.lookup(name).execute()) == EXPECTED_OUTPUTS[name]


class TestFixtures:
    """Test the bundled fixtures."""

    def test_fixture_for_every_pattern_and_nothing_else(self):
        assert list(EXPECTED_OUTPUTS) == ALL_NAMES

    def test_load_selected_names_in_order(self):
        loaded = load_expected_outputs(["visitor", "adapter", "unknown"])

        assert [expected.name for expected in loaded] == ["visitor", "adapter"]

    def test_runner_and_validator_agree_with_fixtures(self, runner, validator):
        reports = validator.validate_all(runner.run_all(), load_expected_outputs())

        assert [report.message for report in reports if not report.passed] == []
        assert len(reports) == len(ALL_NAMES)

    def test_timestamps_are_placeholders(self, catalog_registry):
        lines = catalog_registry.lookup("mediator").execute()

        assert all(line.startswith(f"[{TIMESTAMP_PLACEHOLDER}]") for line in lines[:2])
