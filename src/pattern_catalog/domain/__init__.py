"""
Domain Layer

Organized by bounded contexts:
- base/: Shared kernel with the exception hierarchy
- demonstration/: Demonstration aggregate and its value objects
- execution/: Captured output of a demonstration run
- validation/: Golden expectations and validation reports
"""

from .base import (
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
from .demonstration import TIMESTAMP_PLACEHOLDER, Category, Demonstration, PatternName
from .execution import ExecutionResult
from .validation import ExpectedOutput, ReportStatus, ValidationReport, ValidationSummary

__all__ = [
    # Exceptions
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
    # Demonstration
    "Demonstration",
    "Category",
    "PatternName",
    "TIMESTAMP_PLACEHOLDER",
    # Execution
    "ExecutionResult",
    # Validation
    "ExpectedOutput",
    "ReportStatus",
    "ValidationReport",
    "ValidationSummary",
]
