"""Tests for benchmark data models."""

import pytest
from pydantic import ValidationError

from hashbench.bench.aggregate import aggregate
from hashbench.bench.compare import compare
from hashbench.models import (
    BenchmarkResult,
    ComparisonTable,
    SuiteResults,
    TestCase,
    VerificationReport,
)
from hashbench.models.constants import Capability


def test_test_case_validation():
    """Test that workloads need a positive iteration count."""
    with pytest.raises(ValidationError):
        TestCase(name="bad", payload="x", iterations=0)


def test_test_case_is_frozen():
    """Test that workloads can't be modified after creation."""
    case = TestCase(name="Small", payload="hello world", iterations=1)
    with pytest.raises(ValidationError):
        case.iterations = 2


def test_payload_size_counts_utf8_bytes():
    """Test payload sizes for text and bytes."""
    assert TestCase(name="t", payload="héllo", iterations=1).payload_size == 6
    assert TestCase(name="b", payload=b"\x00" * 4, iterations=1).payload_size == 4


def test_benchmark_result_rejects_negative_throughput():
    """Test that throughput can't go below zero."""
    with pytest.raises(ValidationError):
        BenchmarkResult(
            name="x",
            total_time_ms=1.0,
            avg_time_ms=1.0,
            throughput_ops_per_sec=-1.0,
            op_count=1,
        )


def test_comparison_table_needs_entries():
    """Test that an empty table can't be built."""
    with pytest.raises(ValidationError):
        ComparisonTable(title="empty", entries=[], fastest="none")


def test_verification_report_properties():
    """Test all_match and mismatches."""
    report = VerificationReport(
        input="hello world",
        reference_id="ref",
        reference_digest="00",
        matches={"good": True, "bad": False},
    )

    assert not report.all_match
    assert report.mismatches == ["bad"]


def test_suite_results_get_table():
    """Test lookup of a workload's table by title."""
    table = compare([aggregate("A", 1.0, 1)], title="Small")
    results = SuiteResults(hashbench_version="0.1.0", tables=[table])

    assert results.get_table("Small") is table
    assert results.get_table("Large") is None


def test_capability_values():
    """Test capability string values."""
    assert Capability.ONE_SHOT == "one_shot"
    assert Capability("streaming") is Capability.STREAMING
