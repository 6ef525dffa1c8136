"""Domain exceptions shared by all catalog contexts."""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""


class InvalidPatternNameError(DomainException):
    """Raised when a pattern name is empty or malformed."""

    def __init__(self, name: Any):
        super().__init__(
            f"Invalid pattern name: {name!r}",
            "INVALID_PATTERN_NAME",
            {"name": name},
        )
        self.name = name


class DuplicateNameError(DomainException):
    """Raised when a pattern name is registered twice."""

    def __init__(self, name: str):
        super().__init__(
            f"Pattern '{name}' is already registered",
            "DUPLICATE_PATTERN_NAME",
            {"name": name},
        )
        self.name = name


class RegistryFrozenError(DomainException):
    """Raised when registering into a registry that has been frozen."""

    def __init__(self, name: str):
        super().__init__(
            f"Cannot register '{name}': registry is frozen",
            "REGISTRY_FROZEN",
            {"name": name},
        )
        self.name = name


class NotFoundError(DomainException):
    """Raised when a pattern name is not present in the registry."""

    def __init__(self, name: str):
        super().__init__(f"Pattern '{name}' not found", "PATTERN_NOT_FOUND", {"name": name})
        self.name = name


class DemonstrationFault(DomainException):
    """Raised when a demonstration body breaks its own contract."""

    def __init__(self, name: str, reason: str):
        super().__init__(
            f"Demonstration '{name}' failed: {reason}",
            "DEMONSTRATION_FAULT",
            {"name": name, "reason": reason},
        )
        self.name = name
        self.reason = reason


class MissingExpectationError(DomainException):
    """Raised when an execution result has no expected output to compare with."""

    def __init__(self, name: str):
        super().__init__(
            f"No expected output for pattern '{name}'",
            "MISSING_EXPECTATION",
            {"name": name},
        )
        self.name = name


class UnexpectedResultError(DomainException):
    """Raised when an expected output has no execution result to compare with."""

    def __init__(self, name: str):
        super().__init__(
            f"Expected output for pattern '{name}' has no execution result",
            "UNEXPECTED_RESULT",
            {"name": name},
        )
        self.name = name


class DuplicateValidationEntryError(DomainException):
    """Raised when a pattern appears more than once among results or expectations."""

    def __init__(self, name: str, kind: str):
        super().__init__(
            f"Duplicate {kind} for pattern '{name}'",
            "DUPLICATE_VALIDATION_ENTRY",
            {"name": name, "kind": kind},
        )
        self.name = name
        self.kind = kind
