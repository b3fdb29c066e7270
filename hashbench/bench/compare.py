"""Rank the results of one workload against its fastest result."""

from collections.abc import Sequence

from hashbench.models.bench_models import (
    BenchmarkResult,
    ComparisonEntry,
    ComparisonTable,
)


def find_fastest(results: Sequence[BenchmarkResult]) -> BenchmarkResult:
    """Result with the highest throughput; the first one wins ties.

    Raises:
        ValueError: If results is empty.
    """
    if not results:
        raise ValueError("Cannot pick the fastest of no results")

    fastest = results[0]
    for result in results[1:]:
        if result.throughput_ops_per_sec > fastest.throughput_ops_per_sec:
            fastest = result
    return fastest


def compare(
    results: Sequence[BenchmarkResult], title: str = ""
) -> ComparisonTable | None:
    """Rank results by throughput.

    Args:
        results: Results for one workload, in report order.
        title: Workload name.

    Returns:
        ComparisonTable, or None when there is nothing to compare.
    """
    if not results:
        return None

    fastest = find_fastest(results)
    best = fastest.throughput_ops_per_sec

    entries = []
    for result in results:
        throughput = result.throughput_ops_per_sec
        # Unmeasurable results have no meaningful ratio
        if throughput > 0 and best > 0:
            relative_percent: float | None = throughput / best * 100
            speedup_factor: float | None = best / throughput
        else:
            relative_percent = None
            speedup_factor = None

        entries.append(
            ComparisonEntry(
                result=result,
                relative_percent=relative_percent,
                speedup_factor=speedup_factor,
                is_fastest=result is fastest,
            )
        )

    return ComparisonTable(title=title, entries=entries, fastest=fastest.name)
