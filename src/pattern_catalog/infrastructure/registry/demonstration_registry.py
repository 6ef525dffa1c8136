"""Demonstration Registry - catalog of pattern demonstrations keyed by name.

Registration happens during a single-threaded initialization phase. Once the
registry is frozen it is read-only, so lookups take no locks.
"""

import threading
from typing import Dict, List, Optional

from pattern_catalog.domain.base.exceptions import (
    DuplicateNameError,
    NotFoundError,
    RegistryFrozenError,
)
from pattern_catalog.domain.demonstration import Category, Demonstration, DemonstrationBody
from pattern_catalog.infrastructure.logging.logger import get_logger


class DemonstrationRegistry:
    """
    Registry mapping pattern names to demonstrations.

    Names are unique and case-sensitive. Listing preserves registration order,
    which follows the source listing order of the catalog.
    """

    def __init__(self):
        """Initialize an empty, unfrozen registry."""
        self._registrations: Dict[str, Demonstration] = {}
        self._frozen = False
        self._registration_lock = threading.RLock()
        self._logger = get_logger(__name__)

    def register(
        self,
        name: str,
        category: Category,
        body: DemonstrationBody,
        summary: str = "",
    ) -> Demonstration:
        """
        Register a demonstration.

        Args:
            name: Unique pattern name
            category: Pattern family
            body: Zero-argument callable producing the output lines
            summary: One-line description of the pattern's intent

        Returns:
            The registered demonstration

        Raises:
            DuplicateNameError: If name is already registered
            RegistryFrozenError: If the registry has been frozen
        """
        with self._registration_lock:
            if self._frozen:
                raise RegistryFrozenError(name)
            if name in self._registrations:
                raise DuplicateNameError(name)

            demonstration = Demonstration(
                name=name, category=Category(category), body=body, summary=summary
            )
            self._registrations[name] = demonstration

        self._logger.debug("Registered demonstration", pattern=name, category=demonstration.category.value)
        return demonstration

    def lookup(self, name: str) -> Demonstration:
        """
        Get the demonstration registered under name.

        Raises:
            NotFoundError: If name is not registered
        """
        try:
            return self._registrations[name]
        except KeyError:
            raise NotFoundError(name) from None

    def list(self, category: Optional[Category] = None) -> List[str]:
        """Get pattern names in registration order, optionally filtered by category."""
        if category is None:
            return [name for name in self._registrations]
        category = Category(category)
        return [
            name
            for name, demonstration in self._registrations.items()
            if demonstration.category == category
        ]

    def categories(self) -> List[Category]:
        """Get the categories present, in first-registration order."""
        seen: List[Category] = []
        for demonstration in self._registrations.values():
            if demonstration.category not in seen:
                seen.append(demonstration.category)
        return seen

    def freeze(self) -> None:
        """Make the registry read-only."""
        with self._registration_lock:
            self._frozen = True
        self._logger.debug("Registry frozen", size=len(self._registrations))

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._registrations

    def __len__(self) -> int:
        return len(self._registrations)


_registry: Optional[DemonstrationRegistry] = None
_registry_lock = threading.Lock()


def get_demonstration_registry() -> DemonstrationRegistry:
    """
    Get the process-wide catalog registry.

    The first call builds the registry from the catalog and freezes it behind
    a lock (double-checked locking). Every later call returns the same frozen
    instance.
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                from pattern_catalog.catalog import build_registry

                _registry = build_registry()
    return _registry
