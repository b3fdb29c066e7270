"""Data models for hashbench."""

from hashbench.models.bench_models import (
    BenchmarkResult,
    ComparisonEntry,
    ComparisonTable,
    LoadOutcome,
    StreamingCase,
    SuiteResults,
    SystemInfo,
    TestCase,
    TimingSample,
    VerificationReport,
)
from hashbench.models.constants import Capability

__all__ = [
    "BenchmarkResult",
    "Capability",
    "ComparisonEntry",
    "ComparisonTable",
    "LoadOutcome",
    "StreamingCase",
    "SuiteResults",
    "SystemInfo",
    "TestCase",
    "TimingSample",
    "VerificationReport",
]
