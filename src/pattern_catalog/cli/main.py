"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Exit codes: 0 success, 1 failure, 2 unknown pattern or usage error
"""

import argparse
import sys
import traceback
from typing import Callable, Dict, List, Optional

from pattern_catalog._version import __version__
from pattern_catalog.bootstrap import Application, create_application
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.config.schemas import OUTPUT_FORMATS
from pattern_catalog.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    NotFoundError,
)
from pattern_catalog.domain.demonstration import Category
from pattern_catalog.domain.validation import ReportStatus
from pattern_catalog.fixtures import load_expected_outputs
from pattern_catalog.infrastructure.logging.logger import get_logger

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 2
EXIT_INTERRUPTED = 130

CATEGORY_CHOICES = [category.value for category in Category]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    # Options accepted both before and after the command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--format", choices=OUTPUT_FORMATS, default=argparse.SUPPRESS, help="Output format"
    )

    parser = argparse.ArgumentParser(
        prog="pattern-catalog",
        description="Pattern Catalog - run and validate design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all patterns by category
  %(prog)s run decorator                     # Run one demonstration
  %(prog)s run --category behavioral         # Run a whole category
  %(prog)s describe visitor                  # Show pattern details
  %(prog)s validate                          # Check every demonstration
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format")
    parser.add_argument(
        "--parallel",
        action="store_true",
        default=None,
        help="Execute demonstrations on a thread pool",
    )
    parser.add_argument("--verbose", action="store_true", help="Show tracebacks on errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run
    run_parser = subparsers.add_parser(
        "run", parents=[common], help="Execute demonstrations and print their output"
    )
    run_parser.add_argument("name", nargs="?", help="Pattern name to run")
    run_parser.add_argument("--category", choices=CATEGORY_CHOICES, help="Run every pattern in a category")

    # List
    list_parser = subparsers.add_parser("list", parents=[common], help="List registered patterns")
    list_parser.add_argument("--category", choices=CATEGORY_CHOICES, help="Filter by category")

    # Describe
    describe_parser = subparsers.add_parser("describe", parents=[common], help="Show pattern details")
    describe_parser.add_argument("name", help="Pattern name to describe")

    # Validate
    validate_parser = subparsers.add_parser(
        "validate", parents=[common], help="Compare demonstration output with bundled fixtures"
    )
    validate_parser.add_argument("--category", choices=CATEGORY_CHOICES, help="Validate one category")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.error("no command specified")
    if args.command == "run" and (args.name is None) == (args.category is None):
        run_parser.error("specify either a pattern name or --category")

    return args


def _category(args: argparse.Namespace) -> Optional[Category]:
    category = getattr(args, "category", None)
    return Category(category) if category else None


def handle_run(app: Application, args: argparse.Namespace, output_format: str) -> int:
    """Execute one pattern or a whole category."""
    if args.name:
        results = app.runner.run([args.name])
    else:
        results = app.runner.run_all(_category(args))

    formatted = format_output({"results": [result.to_dict() for result in results]}, output_format)
    if formatted:
        print(formatted)

    failed = [result for result in results if not result.succeeded]
    for result in failed:
        print(f"Error: demonstration '{result.name}' faulted: {result.error}", file=sys.stderr)
    return EXIT_FAILURE if failed else EXIT_OK


def handle_list(app: Application, args: argparse.Namespace, output_format: str) -> int:
    """List registered patterns grouped by category."""
    registry = app.registry
    patterns = [registry.lookup(name).describe() for name in registry.list(_category(args))]
    print(format_output({"patterns": patterns}, output_format))
    return EXIT_OK


def handle_describe(app: Application, args: argparse.Namespace, output_format: str) -> int:
    """Show one pattern's details."""
    pattern = app.registry.lookup(args.name).describe()
    print(format_output({"pattern": pattern}, output_format))
    return EXIT_OK


def handle_validate(app: Application, args: argparse.Namespace, output_format: str) -> int:
    """Run demonstrations and compare them with the bundled fixtures."""
    category = _category(args)
    results = app.runner.run_all(category)
    if category is None:
        expectations = load_expected_outputs()
    else:
        expectations = load_expected_outputs(app.registry.list(category))

    validator = app.validator
    reports = validator.validate_all(results, expectations)
    summary = validator.summarize(reports)

    report_data = []
    for report in reports:
        entry = report.to_dict()
        if report.status == ReportStatus.MISMATCH:
            entry["diff"] = validator.render_diff(report)
        report_data.append(entry)

    print(format_output({"reports": report_data, "summary": summary.model_dump()}, output_format))
    return EXIT_OK if summary.all_passed else EXIT_FAILURE


COMMAND_HANDLERS: Dict[str, Callable[[Application, argparse.Namespace, str], int]] = {
    "run": handle_run,
    "list": handle_list,
    "describe": handle_describe,
    "validate": handle_validate,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    try:
        try:
            app = create_application(args.config, log_level=args.log_level, parallel=args.parallel)
        except ConfigurationError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_FAILURE

        output_format = args.format or app.config.default_format
        handler = COMMAND_HANDLERS[args.command]

        try:
            return handler(app, args, output_format)
        except NotFoundError as e:
            logger.error("Unknown pattern", pattern=e.name)
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_NOT_FOUND
        except DomainException as e:
            logger.error("Domain error", error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_FAILURE
        except Exception as e:
            logger.error("Unexpected error", error=str(e))
            if args.verbose:
                traceback.print_exc()
            print(f"Unexpected error: {e}", file=sys.stderr)
            return EXIT_FAILURE

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
