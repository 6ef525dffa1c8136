"""
Catalog registration decorator.

Demonstration bodies are marked with @demonstration where they are defined.
Marking only records the entry; the registry is populated later, in one pass,
by build_registry(). Entries keep the order in which they were declared.

Usage:
    @demonstration("decorator", Category.STRUCTURAL, "Attach responsibilities dynamically")
    def decorator_demo() -> List[str]:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple, TypeVar

from pattern_catalog.domain.base.exceptions import DemonstrationFault
from pattern_catalog.domain.demonstration import Category, DemonstrationBody

TBody = TypeVar("TBody", bound=Callable)


@dataclass(frozen=True)
class CatalogEntry:
    """A declared demonstration awaiting registration."""

    name: str
    category: Category
    summary: str
    body: DemonstrationBody


_catalog_entries: List[CatalogEntry] = []


def demonstration(name: str, category: Category, summary: str = "") -> Callable[[TBody], TBody]:
    """
    Mark a function as the body of a catalog demonstration.

    Args:
        name: Unique pattern name
        category: Pattern family
        summary: One-line description of the pattern's intent

    Returns:
        Decorator that records the entry and returns the function unchanged
    """

    def decorator(body: TBody) -> TBody:
        _catalog_entries.append(CatalogEntry(name=name, category=category, summary=summary, body=body))
        return body

    return decorator


def catalog_entries() -> Tuple[CatalogEntry, ...]:
    """Get all declared entries in declaration order."""
    return tuple(_catalog_entries)


def ensure(condition: bool, name: str, reason: str) -> None:
    """Raise DemonstrationFault when a demonstration's own invariant does not hold."""
    if not condition:
        raise DemonstrationFault(name, reason)
