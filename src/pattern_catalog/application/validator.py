"""Output validator - compares execution results against golden expectations."""

import difflib
from typing import Dict, Iterable, List, Set

from pattern_catalog.domain.base.exceptions import (
    DuplicateValidationEntryError,
    MissingExpectationError,
    UnexpectedResultError,
)
from pattern_catalog.domain.execution import ExecutionResult
from pattern_catalog.domain.validation import (
    ExpectedOutput,
    ReportStatus,
    ValidationReport,
    ValidationSummary,
)

_ABSENT = "<no line>"


class OutputValidator:
    """
    Exact, ordered, line-by-line comparison of output with expectations.

    The validator holds no state; every method is a pure function of its
    arguments.
    """

    def validate(self, result: ExecutionResult, expected: ExpectedOutput) -> ValidationReport:
        """
        Compare one result with one expectation.

        Raises:
            ValueError: If the result and the expectation belong to different patterns
        """
        if result.name != expected.name:
            raise ValueError(
                f"Cannot validate pattern '{result.name}' against "
                f"expected output for pattern '{expected.name}'"
            )
        expected_lines = tuple(expected.lines)
        actual_lines = tuple(result.lines)

        if not result.succeeded:
            return ValidationReport(
                name=result.name,
                status=ReportStatus.EXECUTION_ERROR,
                message=f"Pattern '{result.name}' failed to execute: {result.error}",
                expected_lines=expected_lines,
                actual_lines=actual_lines,
            )

        index = _first_divergence(expected_lines, actual_lines)
        if index is None:
            return ValidationReport(
                name=result.name,
                status=ReportStatus.PASSED,
                message=f"Pattern '{result.name}' matches {len(expected_lines)} expected lines",
                expected_lines=expected_lines,
                actual_lines=actual_lines,
            )

        expected_value = expected_lines[index] if index < len(expected_lines) else None
        actual_value = actual_lines[index] if index < len(actual_lines) else None
        message = (
            f"Pattern '{result.name}' diverges at line {index}: "
            f"expected {_show(expected_value)}, got {_show(actual_value)}"
        )
        if len(expected_lines) != len(actual_lines):
            message += f" ({len(expected_lines)} lines expected, {len(actual_lines)} produced)"

        return ValidationReport(
            name=result.name,
            status=ReportStatus.MISMATCH,
            message=message,
            index=index,
            expected=expected_value,
            actual=actual_value,
            expected_lines=expected_lines,
            actual_lines=actual_lines,
        )

    def validate_all(
        self, results: Iterable[ExecutionResult], expectations: Iterable[ExpectedOutput]
    ) -> List[ValidationReport]:
        """
        Pair results with expectations by pattern name and validate each pair.

        A result without an expectation is reported as a missing expectation;
        an expectation without a result is reported as an unexpected result.
        A name seen a second time on either side is reported as a duplicate.
        Reports follow the order of results, then the order of the unpaired
        expectations.
        """
        expectations = list(expectations)
        by_name: Dict[str, ExpectedOutput] = {}
        for expected in expectations:
            by_name.setdefault(expected.name, expected)

        reports = []
        seen: Set[str] = set()
        for result in results:
            if result.name in seen:
                error = DuplicateValidationEntryError(result.name, "result")
                reports.append(
                    ValidationReport(
                        name=result.name,
                        status=ReportStatus.DUPLICATE,
                        message=str(error),
                        actual_lines=tuple(result.lines),
                    )
                )
                continue
            seen.add(result.name)

            expected = by_name.get(result.name)
            if expected is None:
                error = MissingExpectationError(result.name)
                reports.append(
                    ValidationReport(
                        name=result.name,
                        status=ReportStatus.MISSING_EXPECTATION,
                        message=str(error),
                        actual_lines=tuple(result.lines),
                    )
                )
            else:
                reports.append(self.validate(result, expected))

        claimed: Set[str] = set()
        for expected in expectations:
            if expected.name in claimed:
                error = DuplicateValidationEntryError(expected.name, "expectation")
                status = ReportStatus.DUPLICATE
            elif expected.name not in seen:
                claimed.add(expected.name)
                error = UnexpectedResultError(expected.name)
                status = ReportStatus.UNEXPECTED_RESULT
            else:
                claimed.add(expected.name)
                continue
            reports.append(
                ValidationReport(
                    name=expected.name,
                    status=status,
                    message=str(error),
                    expected_lines=tuple(expected.lines),
                )
            )
        return reports

    @staticmethod
    def summarize(reports: Iterable[ValidationReport]) -> ValidationSummary:
        """Count passed and failed reports."""
        reports = list(reports)
        passed = sum(1 for report in reports if report.passed)
        return ValidationSummary(total=len(reports), passed=passed, failed=len(reports) - passed)

    @staticmethod
    def render_diff(report: ValidationReport) -> str:
        """Render a unified diff of expected versus actual lines."""
        diff = difflib.unified_diff(
            list(report.expected_lines),
            list(report.actual_lines),
            fromfile=f"{report.name} (expected)",
            tofile=f"{report.name} (actual)",
            lineterm="",
        )
        return "\n".join(diff)


def _first_divergence(expected, actual):
    for index, (want, got) in enumerate(zip(expected, actual)):
        if want != got:
            return index
    if len(expected) != len(actual):
        return min(len(expected), len(actual))
    return None


def _show(value):
    return _ABSENT if value is None else repr(value)
