"""Demonstration value objects."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from pattern_catalog.domain.base.exceptions import InvalidPatternNameError

# Stands in for wall-clock values so demonstration output stays reproducible.
TIMESTAMP_PLACEHOLDER = "<timestamp>"

_NAME_PATTERN = re.compile(r"\S+")


class Category(str, Enum):
    """Design pattern family."""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @classmethod
    def from_str(cls, value: str) -> "Category":
        """Resolve a category from its string value."""
        try:
            return cls(value.lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown category '{value}'. Valid categories: {valid}")


@dataclass(frozen=True)
class PatternName:
    """Case-sensitive pattern identifier with validation."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not _NAME_PATTERN.fullmatch(self.value):
            raise InvalidPatternNameError(self.value)

    def __str__(self) -> str:
        return self.value
