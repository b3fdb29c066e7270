"""Line-oriented text report for benchmark runs.

Usage:
    from hashbench.bench.report import ComparisonReporter

    reporter = ComparisonReporter()
    reporter.section("Small (11 bytes)")
    reporter.report(compare(results))
"""

from collections.abc import Sequence
from typing import TextIO

import click

from hashbench.models.bench_models import (
    BenchmarkResult,
    ComparisonEntry,
    ComparisonTable,
    LoadOutcome,
    SuiteResults,
    SystemInfo,
    VerificationReport,
)
from hashbench.models.constants import (
    FASTEST_MARKER,
    HASH_FAMILY,
    NAME_COLUMN_WIDTH,
    REPORT_WIDTH,
    VARIANCE_NOTES,
)


def format_result(result: BenchmarkResult) -> str:
    """Name, total time, time per op and raw throughput."""
    return (
        f"{result.name:<{NAME_COLUMN_WIDTH}} "
        f"{result.total_time_ms:.2f}ms | "
        f"{result.avg_time_ms:.4f}ms/op | "
        f"{result.throughput_ops_per_sec:.0f} ops/sec"
    )


def format_entry(entry: ComparisonEntry) -> str:
    """format_result() plus the ranking against the fastest entry."""
    relative = (
        f"{entry.relative_percent:.1f}%" if entry.relative_percent is not None else "N/A"
    )
    speedup = (
        f"{entry.speedup_factor:.2f}" if entry.speedup_factor is not None else "N/A"
    )
    marker = FASTEST_MARKER if entry.is_fastest else ""
    return (
        f"{format_result(entry.result)} | {relative} of fastest | "
        f"{speedup}x slower{marker}"
    )


class ComparisonReporter:
    """Writes benchmark progress and comparison tables to a text stream.

    Example:
        >>> reporter = ComparisonReporter(output=sys.stdout)
        >>> reporter.banner()
        >>> reporter.report(table)
    """

    def __init__(self, output: TextIO | None = None, width: int = REPORT_WIDTH) -> None:
        """Initialize the reporter.

        Args:
            output: Stream to write to. Defaults to stdout at write time.
            width: Width of rule lines.
        """
        self._output = output
        self.width = width

    def _echo(self, message: str = "") -> None:
        click.echo(message, file=self._output)

    def _rule(self, char: str = "=") -> None:
        self._echo(char * self.width)

    # -------------------------------------------------------------------------
    # Suite framing
    # -------------------------------------------------------------------------

    def banner(self, system: SystemInfo | None = None) -> None:
        """Suite title and host details."""
        self._echo(f"{HASH_FAMILY} Implementation Benchmark Comparison")
        self._echo()
        if system is not None:
            cores = (
                f"{system.physical_cores or '?'} physical / "
                f"{system.logical_cores or '?'} logical cores"
            )
            self._echo(
                f"{system.python_implementation} {system.python_version} on "
                f"{system.platform} ({system.machine}, {cores})"
            )
            self._echo()

    def load_summary(self, outcomes: Sequence[LoadOutcome]) -> None:
        """One notice per registration attempt."""
        self._echo("Loading implementations...")
        self._echo()
        for outcome in outcomes:
            if outcome.loaded:
                self._echo(f"✓ Loaded {outcome.pretty_name}")
            else:
                self._echo(f"✗ Failed to load {outcome.pretty_name}: {outcome.error}")

    def suite_header(self) -> None:
        self._echo()
        self._rule()
        self._echo("Benchmark Suite")
        self._rule()

    def section(self, name: str) -> None:
        """Heading printed before a workload runs."""
        self._echo()
        self._echo(f"📊 Test: {name}")
        self._rule("-")

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    def report(self, table: ComparisonTable | None) -> None:
        """Print one line per entry; print nothing for an empty comparison."""
        if table is None:
            return

        self._echo()
        self._rule()
        self._echo("Results:")
        self._rule()
        for entry in table.entries:
            self._echo(format_entry(entry))
        self._rule()

    # -------------------------------------------------------------------------
    # Verification & closing
    # -------------------------------------------------------------------------

    def verification(self, report: VerificationReport) -> None:
        """Digest of each implementation and whether it matches the reference."""
        self._echo()
        self._rule()
        self._echo("Correctness Verification")
        self._rule()

        ids = [report.reference_id, *report.matches, *report.skipped]
        label_width = max(len(impl_id) for impl_id in ids) + 2
        self._echo(
            f"{report.reference_id + ':':<{label_width}} {report.reference_digest}"
        )
        for impl_id, matched in report.matches.items():
            if impl_id in report.errors:
                self._echo(f"{impl_id + ':':<{label_width}} error: {report.errors[impl_id]}")
            else:
                self._echo(f"{impl_id + ':':<{label_width}} {report.digests[impl_id]}")
            self._echo(f"Match: {'✓' if matched else '✗'}")
        for impl_id in report.skipped:
            self._echo(f"{impl_id + ':':<{label_width}} skipped (streaming only)")

    def footer(self) -> None:
        """Completion banner and the usual caveats."""
        self._echo()
        self._rule()
        self._echo("Benchmark Complete!")
        self._rule()
        self._echo()
        self._echo("Note: Results may vary based on:")
        for note in VARIANCE_NOTES:
            self._echo(f"  - {note}")

    def report_suite(self, results: SuiteResults) -> None:
        """Replay a finished suite in the same layout as a live run."""
        self.banner(results.system)
        self.load_summary(results.load_outcomes)
        self.suite_header()
        for table in results.tables:
            self.section(table.title)
            self.report(table)
        if results.verification is not None:
            self.verification(results.verification)
        self.footer()
