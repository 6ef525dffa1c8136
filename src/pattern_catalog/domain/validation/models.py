"""Validation models - golden expectations and comparison reports."""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class ExpectedOutput(BaseModel):
    """Golden reference lines for one pattern."""

    model_config = ConfigDict(frozen=True)

    name: str
    lines: Tuple[str, ...]


class ReportStatus(str, Enum):
    """Outcome of comparing a result with its expectation."""

    PASSED = "passed"
    MISMATCH = "mismatch"
    EXECUTION_ERROR = "execution_error"
    MISSING_EXPECTATION = "missing_expectation"
    UNEXPECTED_RESULT = "unexpected_result"
    DUPLICATE = "duplicate"


class ValidationReport(BaseModel):
    """
    Result of validating one pattern.

    For a mismatch, ``index`` is the first diverging line and ``expected`` /
    ``actual`` hold the values found there. Either value is None when one
    sequence ends before the other.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    status: ReportStatus
    message: str
    index: Optional[int] = None
    expected: Optional[str] = None
    actual: Optional[str] = None
    expected_lines: Tuple[str, ...] = ()
    actual_lines: Tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.status == ReportStatus.PASSED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "message": self.message,
            "index": self.index,
            "expected": self.expected,
            "actual": self.actual,
        }


class ValidationSummary(BaseModel):
    """Aggregate counts over a batch of reports."""

    model_config = ConfigDict(frozen=True)

    total: int
    passed: int
    failed: int

    @property
    def all_passed(self) -> bool:
        return self.failed == 0
