"""Application layer - runner and validator services."""

from .runner import DemonstrationRunner
from .validator import OutputValidator

__all__ = ["DemonstrationRunner", "OutputValidator"]
