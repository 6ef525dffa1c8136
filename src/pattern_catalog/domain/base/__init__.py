"""Base domain layer - shared kernel for all catalog contexts."""

from .exceptions import (
    ConfigurationError,
    DemonstrationFault,
    DomainException,
    DuplicateNameError,
    DuplicateValidationEntryError,
    InvalidPatternNameError,
    MissingExpectationError,
    NotFoundError,
    RegistryFrozenError,
    UnexpectedResultError,
)

__all__ = [
    "DomainException",
    "ConfigurationError",
    "InvalidPatternNameError",
    "DuplicateNameError",
    "RegistryFrozenError",
    "NotFoundError",
    "DemonstrationFault",
    "MissingExpectationError",
    "UnexpectedResultError",
    "DuplicateValidationEntryError",
]
