"""Turn raw timings into named benchmark results."""

from hashbench.models.bench_models import BenchmarkResult, TimingSample


def calculate_throughput(iterations: int, total_time_ms: float) -> float:
    """Operations per second, or 0.0 when the elapsed time is unmeasurable.

    Args:
        iterations: Number of timed operations.
        total_time_ms: Elapsed time in milliseconds.
    """
    if total_time_ms <= 0:
        return 0.0
    return iterations / total_time_ms * 1000


def aggregate(name: str, total_time_ms: float, iterations: int) -> BenchmarkResult:
    """Build a BenchmarkResult from a timed loop.

    Args:
        name: Display name of the implementation.
        total_time_ms: Duration of the timed loop in milliseconds.
        iterations: Number of timed operations.

    Raises:
        ValueError: If iterations is not positive.
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")

    return BenchmarkResult(
        name=name,
        total_time_ms=total_time_ms,
        avg_time_ms=total_time_ms / iterations,
        throughput_ops_per_sec=calculate_throughput(iterations, total_time_ms),
        op_count=iterations,
    )


def aggregate_sample(name: str, sample: TimingSample) -> BenchmarkResult:
    """aggregate() for a runner sample."""
    return aggregate(name, sample.total_time_ms, sample.op_count)
