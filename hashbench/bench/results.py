"""Emission of finished suite results.

Supports the live text layout plus JSON and YAML renderings of the same
data. Everything goes to a stream; nothing is written to disk.

Usage:
    from hashbench.bench.results import OutputFormat, emit

    emit(results, sys.stdout, OutputFormat.JSON)
"""

import json
import sys
from enum import Enum
from io import StringIO
from typing import Any, TextIO

import yaml  # type: ignore[import-untyped, unused-ignore]

from hashbench.bench.report import ComparisonReporter
from hashbench.models.bench_models import SuiteResults


class OutputFormat(Enum):
    """Supported output formats for suite results."""

    TEXT = "text"  # Human-readable report
    JSON = "json"
    YAML = "yaml"


def to_dict(results: SuiteResults) -> dict[str, Any]:
    """Convert results to JSON-compatible primitives, with a summary."""
    data = results.model_dump(mode="json")
    data["summary"] = _generate_summary(results)
    return data


def _generate_summary(results: SuiteResults) -> dict[str, Any]:
    loaded = [outcome for outcome in results.load_outcomes if outcome.loaded]
    verification = results.verification
    return {
        "implementations_total": len(results.load_outcomes),
        "implementations_available": len(loaded),
        "workloads_compared": len(results.tables),
        "fastest": {table.title: table.fastest for table in results.tables},
        "all_match": verification.all_match if verification is not None else None,
    }


def to_json(results: SuiteResults, indent: int = 2) -> str:
    return json.dumps(to_dict(results), indent=indent, ensure_ascii=False)


def to_yaml(results: SuiteResults, indent: int = 2) -> str:
    rendered: str = yaml.safe_dump(
        to_dict(results), indent=indent, default_flow_style=False, sort_keys=False
    )
    return rendered


def to_text(results: SuiteResults) -> str:
    output = StringIO()
    ComparisonReporter(output=output).report_suite(results)
    return output.getvalue()


def emit(
    results: SuiteResults,
    output: TextIO | None = None,
    format: OutputFormat = OutputFormat.TEXT,
    indent: int = 2,
) -> None:
    """Write results to a stream.

    Args:
        results: Finished suite results.
        output: File-like object; defaults to sys.stdout.
        format: Output format (TEXT, JSON, YAML).
        indent: Indentation level for JSON/YAML.

    Raises:
        ValueError: If format is unknown.
    """
    if format == OutputFormat.JSON:
        content = to_json(results, indent) + "\n"
    elif format == OutputFormat.YAML:
        content = to_yaml(results, indent)
    elif format == OutputFormat.TEXT:
        content = to_text(results)
    else:
        raise ValueError(f"Unknown format: {format}")

    stream = output if output is not None else sys.stdout
    stream.write(content)
    if stream is not sys.stdout and stream is not sys.stderr:
        stream.flush()
