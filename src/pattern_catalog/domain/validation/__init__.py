"""Validation bounded context."""

from .models import ExpectedOutput, ReportStatus, ValidationReport, ValidationSummary

__all__ = ["ExpectedOutput", "ReportStatus", "ValidationReport", "ValidationSummary"]
