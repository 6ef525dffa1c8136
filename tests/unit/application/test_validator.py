"""Tests for the output validator."""

import pytest

from pattern_catalog.domain.execution import ExecutionResult
from pattern_catalog.domain.validation import ExpectedOutput, ReportStatus


def _result(name, *lines, error=None):
    return ExecutionResult(name=name, lines=lines, error=error)


def _expected(name, *lines):
    return ExpectedOutput(name=name, lines=lines)


class TestValidate:
    """Test single result validation."""

    def test_exact_match_passes(self, validator):
        report = validator.validate(_result("demo", "a", "b"), _expected("demo", "a", "b"))

        assert report.passed
        assert report.status == ReportStatus.PASSED
        assert report.index is None

    def test_first_divergence_reported(self, validator):
        report = validator.validate(
            _result("demo", "a", "x", "y"), _expected("demo", "a", "b", "c")
        )

        assert report.status == ReportStatus.MISMATCH
        assert report.index == 1
        assert report.expected == "b"
        assert report.actual == "x"
        assert "demo" in report.message
        assert "line 1" in report.message

    def test_shorter_output_is_a_mismatch(self, validator):
        report = validator.validate(_result("demo", "a"), _expected("demo", "a", "b"))

        assert report.status == ReportStatus.MISMATCH
        assert report.index == 1
        assert report.expected == "b"
        assert report.actual is None
        assert "2 lines expected, 1 produced" in report.message

    def test_longer_output_is_a_mismatch(self, validator):
        report = validator.validate(_result("demo", "a", "extra"), _expected("demo", "a"))

        assert report.index == 1
        assert report.expected is None
        assert report.actual == "extra"

    def test_no_fuzzy_matching(self, validator):
        report = validator.validate(_result("demo", "Simple coffee "), _expected("demo", "Simple coffee"))

        assert not report.passed

    def test_execution_error_fails(self, validator):
        report = validator.validate(
            _result("demo", error="RuntimeError: boom"), _expected("demo", "a")
        )

        assert report.status == ReportStatus.EXECUTION_ERROR
        assert "RuntimeError: boom" in report.message

    def test_validate_is_pure(self, validator):
        result = _result("demo", "a", "z")
        expected = _expected("demo", "a", "b")

        assert validator.validate(result, expected) == validator.validate(result, expected)

    def test_names_must_match(self, validator):
        with pytest.raises(ValueError, match="pattern 'a' against expected output for pattern 'b'"):
            validator.validate(_result("a", "x"), _expected("b", "x"))


class TestValidateAll:
    """Test batch validation."""

    def test_pairs_by_name(self, validator):
        results = [_result("one", "1"), _result("two", "2")]
        expectations = [_expected("two", "2"), _expected("one", "1")]

        reports = validator.validate_all(results, expectations)

        assert [report.name for report in reports] == ["one", "two"]
        assert all(report.passed for report in reports)

    def test_result_without_expectation_reported(self, validator):
        reports = validator.validate_all([_result("orphan", "x")], [])

        assert len(reports) == 1
        assert reports[0].status == ReportStatus.MISSING_EXPECTATION
        assert "No expected output for pattern 'orphan'" == reports[0].message

    def test_expectation_without_result_reported(self, validator):
        reports = validator.validate_all([_result("one", "1")], [_expected("one", "1"), _expected("ghost", "g")])

        assert [report.name for report in reports] == ["one", "ghost"]
        assert reports[1].status == ReportStatus.UNEXPECTED_RESULT
        assert "ghost" in reports[1].message

    def test_all_failures_aggregated(self, validator):
        results = [_result("a", "1"), _result("b", "wrong"), _result("c", error="X: y")]
        expectations = [_expected("a", "1"), _expected("b", "2"), _expected("c", "3")]

        reports = validator.validate_all(results, expectations)
        summary = validator.summarize(reports)

        assert [report.status for report in reports] == [
            ReportStatus.PASSED,
            ReportStatus.MISMATCH,
            ReportStatus.EXECUTION_ERROR,
        ]
        assert (summary.total, summary.passed, summary.failed) == (3, 1, 2)
        assert not summary.all_passed

    def test_duplicate_expectation_reported(self, validator):
        reports = validator.validate_all([_result("a", "x")], [_expected("a", "x"), _expected("a", "y")])

        assert [(report.name, report.status) for report in reports] == [
            ("a", ReportStatus.PASSED),
            ("a", ReportStatus.DUPLICATE),
        ]
        assert reports[1].message == "Duplicate expectation for pattern 'a'"
        assert reports[1].expected_lines == ("y",)
        assert not validator.summarize(reports).all_passed

    def test_same_expectation_passed_twice_reported(self, validator):
        expected = _expected("a", "x")

        reports = validator.validate_all([_result("a", "x")], [expected, expected])

        assert [report.status for report in reports] == [ReportStatus.PASSED, ReportStatus.DUPLICATE]

    def test_duplicate_result_reported(self, validator):
        reports = validator.validate_all([_result("a", "x"), _result("a", "x")], [_expected("a", "x")])

        assert [report.status for report in reports] == [ReportStatus.PASSED, ReportStatus.DUPLICATE]
        assert reports[1].message == "Duplicate result for pattern 'a'"

    def test_duplicate_unpaired_expectations_keep_given_order(self, validator):
        reports = validator.validate_all(
            [], [_expected("ghost", "1"), _expected("other", "2"), _expected("ghost", "3")]
        )

        assert [(report.name, report.status) for report in reports] == [
            ("ghost", ReportStatus.UNEXPECTED_RESULT),
            ("other", ReportStatus.UNEXPECTED_RESULT),
            ("ghost", ReportStatus.DUPLICATE),
        ]


class TestRenderDiff:
    """Test diff rendering."""

    def test_unified_diff(self, validator):
        report = validator.validate(_result("demo", "a", "x"), _expected("demo", "a", "b"))

        diff = validator.render_diff(report)

        assert "--- demo (expected)" in diff
        assert "+++ demo (actual)" in diff
        assert "-b" in diff
        assert "+x" in diff

    def test_no_diff_when_passed(self, validator):
        report = validator.validate(_result("demo", "a"), _expected("demo", "a"))

        assert validator.render_diff(report) == ""
