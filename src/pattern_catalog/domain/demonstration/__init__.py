"""Demonstration bounded context."""

from .aggregate import Demonstration, DemonstrationBody
from .value_objects import TIMESTAMP_PLACEHOLDER, Category, PatternName

__all__ = [
    "Demonstration",
    "DemonstrationBody",
    "Category",
    "PatternName",
    "TIMESTAMP_PLACEHOLDER",
]
