"""Compiled-in golden fixtures."""

from .expected_outputs import EXPECTED_OUTPUTS, load_expected_outputs

__all__ = ["EXPECTED_OUTPUTS", "load_expected_outputs"]
