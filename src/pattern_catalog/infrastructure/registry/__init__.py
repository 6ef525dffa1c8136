"""Registry infrastructure."""

from .demonstration_registry import DemonstrationRegistry, get_demonstration_registry

__all__ = ["DemonstrationRegistry", "get_demonstration_registry"]
