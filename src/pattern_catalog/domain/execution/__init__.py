"""Execution bounded context."""

from .result import ExecutionResult

__all__ = ["ExecutionResult"]
