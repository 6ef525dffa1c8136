"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Plain text output of demonstration lines
- Rich tables for listings and validation reports
- JSON and YAML serialization
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Dict[str, Any], format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "table":
        return format_table_output(data)
    else:
        return format_text_output(data)


def format_text_output(data: Dict[str, Any]) -> str:
    """Format data as plain text."""
    if "results" in data:
        return format_results_text(data["results"])
    elif "patterns" in data:
        return format_patterns_text(data["patterns"])
    elif "pattern" in data:
        return format_pattern_text(data["pattern"])
    elif "reports" in data:
        return format_reports_text(data["reports"], data.get("summary", {}))
    return json.dumps(data, indent=2, default=str)


def format_table_output(data: Dict[str, Any]) -> str:
    """Format data as a table."""
    if "results" in data:
        return format_results_table(data["results"])
    elif "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif "pattern" in data:
        return format_patterns_table([data["pattern"]])
    elif "reports" in data:
        return format_reports_table(data["reports"])
    return json.dumps(data, indent=2, default=str)


def format_results_text(results: List[Dict]) -> str:
    """Format execution results; a single result prints its lines only."""
    successful = [result for result in results if result.get("error") is None]
    if len(results) == 1:
        return "\n".join(successful[0]["lines"]) if successful else ""

    blocks = []
    for result in successful:
        blocks.append("\n".join([f"== {result['name']} =="] + list(result["lines"])))
    return "\n\n".join(blocks)


def format_patterns_text(patterns: List[Dict]) -> str:
    """Format pattern names grouped by category, keeping listing order."""
    groups: Dict[str, List[str]] = {}
    for pattern in patterns:
        groups.setdefault(pattern["category"], []).append(pattern["name"])

    lines = []
    for category, names in groups.items():
        lines.append(f"{category}:")
        lines.extend(f"  {name}" for name in names)
    return "\n".join(lines)


def format_pattern_text(pattern: Dict) -> str:
    """Format one pattern's details."""
    return "\n".join(
        [
            f"Name:     {pattern['name']}",
            f"Category: {pattern['category']}",
            f"Summary:  {pattern['summary'] or 'N/A'}",
        ]
    )


def format_reports_text(reports: List[Dict], summary: Dict) -> str:
    """Format validation reports, one status line per pattern plus diffs."""
    lines = []
    for report in reports:
        status = "PASS" if report["status"] == "passed" else "FAIL"
        lines.append(f"{status} {report['name']}")
        if status == "FAIL":
            lines.append(f"  {report['message']}")
            if report.get("diff"):
                lines.extend(f"  {diff_line}" for diff_line in report["diff"].splitlines())
    if summary:
        lines.append(
            f"{summary['passed']}/{summary['total']} passed, {summary['failed']} failed"
        )
    return "\n".join(lines)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip("\n")


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format patterns as a table using Rich."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Summary")
    for pattern in patterns:
        table.add_row(pattern["name"], pattern["category"], pattern["summary"] or "N/A")
    return _render(table)


def format_results_table(results: List[Dict]) -> str:
    """Format execution results as a table using Rich."""
    if not results:
        return "No results."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Lines", justify="right", style="yellow")
    table.add_column("Duration (ms)", justify="right", style="yellow")
    table.add_column("Status")
    for result in results:
        status = "ok" if result.get("error") is None else f"error: {result['error']}"
        table.add_row(
            result["name"],
            str(len(result["lines"])),
            f"{result['duration_seconds'] * 1000:.3f}",
            status,
        )
    return _render(table)


def format_reports_table(reports: List[Dict]) -> str:
    """Format validation reports as a table using Rich."""
    if not reports:
        return "No reports."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Name", style="cyan")
    table.add_column("Status")
    table.add_column("Detail")
    for report in reports:
        detail = "" if report["status"] == "passed" else report["message"]
        table.add_row(report["name"], report["status"], detail)
    return _render(table)
