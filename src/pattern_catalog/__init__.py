"""Pattern Catalog - Root Package.

This package registers, runs and validates executable demonstrations of the
classic object-oriented design patterns (creational, structural and
behavioral).

Key Components:
    - catalog: The concrete pattern demonstrations
    - domain: Demonstration, execution and validation models
    - application: Runner and validator services
    - infrastructure: Registry and logging
    - config: Configuration schemas and management
    - cli: Command-line interface

Usage:
    >>> pattern-catalog list
    >>> pattern-catalog run decorator
    >>> pattern-catalog validate
"""

from ._version import __version__

PACKAGE_NAME = "pattern-catalog"

__package_name__ = PACKAGE_NAME
