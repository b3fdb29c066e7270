"""Benchmark engine for hashbench.

This module provides:
- TimedRunner: Warmup plus a sequential timed loop
- aggregate: Raw timing to BenchmarkResult with derived throughput
- compare: Ranking against the fastest result
- ComparisonReporter: Line-oriented text report
- verify: Digest agreement against the reference implementation
- WorkloadDriver: The fixed workload matrix and its orchestration

Quick Start:
    from hashbench.bench import ComparisonReporter, WorkloadDriver
    from hashbench.implementations import ImplementationRegistry

    registry = ImplementationRegistry.default()
    results = WorkloadDriver(registry, reporter=ComparisonReporter()).run()
"""

from hashbench.bench.aggregate import aggregate, aggregate_sample, calculate_throughput
from hashbench.bench.compare import compare, find_fastest
from hashbench.bench.driver import (
    DEFAULT_STREAMING_CASE,
    DEFAULT_TEST_CASES,
    WorkloadDriver,
)
from hashbench.bench.report import ComparisonReporter
from hashbench.bench.results import OutputFormat, emit
from hashbench.bench.runner import TimedRunner
from hashbench.bench.verify import ReferenceUnavailableError, digest_hex, verify

__all__ = [
    "DEFAULT_STREAMING_CASE",
    "DEFAULT_TEST_CASES",
    "ComparisonReporter",
    "OutputFormat",
    "ReferenceUnavailableError",
    "TimedRunner",
    "WorkloadDriver",
    "aggregate",
    "aggregate_sample",
    "calculate_throughput",
    "compare",
    "digest_hex",
    "emit",
    "find_fastest",
    "verify",
]
