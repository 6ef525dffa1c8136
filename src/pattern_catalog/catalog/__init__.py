"""
Pattern catalog - the concrete demonstrations.

Registration order is catalog order: creational, structural, then
behavioral, each module's demonstrations in the order they are declared.
"""

from pattern_catalog.catalog import behavioral, creational, structural
from pattern_catalog.catalog.registration import CatalogEntry, catalog_entries, demonstration
from pattern_catalog.infrastructure.registry.demonstration_registry import DemonstrationRegistry

CATALOG_MODULES = (creational, structural, behavioral)


def build_registry(freeze: bool = True) -> DemonstrationRegistry:
    """
    Build a registry holding every catalog demonstration.

    Args:
        freeze: Freeze the registry once all entries are registered

    Returns:
        Populated registry
    """
    registry = DemonstrationRegistry()
    entries = catalog_entries()
    for module in CATALOG_MODULES:
        for entry in entries:
            if entry.body.__module__ == module.__name__:
                registry.register(entry.name, entry.category, entry.body, entry.summary)
    if freeze:
        registry.freeze()
    return registry


__all__ = ["CATALOG_MODULES", "CatalogEntry", "build_registry", "catalog_entries", "demonstration"]
