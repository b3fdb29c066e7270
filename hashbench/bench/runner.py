"""Timed runner: warmup, then a sequential timed loop.

Usage:
    from hashbench.bench.runner import TimedRunner

    runner = TimedRunner()
    sample = runner.run(lambda: impl.hash(b"hello world"), iterations=10000)
    sample.total_time_ms
"""

import logging
import time
from collections.abc import Callable

from hashbench.models.bench_models import TimingSample
from hashbench.models.constants import DEFAULT_WARMUP_ITERATIONS


class TimedRunner:
    """Executes an operation a fixed number of times and times the loop.

    The first min(warmup_iterations, iterations) calls are untimed so one-time
    initialization doesn't land in the measurement. The timed calls run
    strictly one after another on the calling thread.

    Example:
        >>> runner = TimedRunner(warmup_iterations=10)
        >>> sample = runner.run(lambda: None, iterations=100)
        >>> sample.op_count
        100
    """

    def __init__(
        self,
        warmup_iterations: int = DEFAULT_WARMUP_ITERATIONS,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        """Initialize the runner.

        Args:
            warmup_iterations: Upper bound on untimed calls before measuring.
            clock: Monotonic clock returning seconds.
        """
        if warmup_iterations < 0:
            raise ValueError(f"warmup_iterations must be >= 0, got {warmup_iterations}")
        self.warmup_iterations = warmup_iterations
        self._clock = clock

    @property
    def logger(self) -> logging.Logger:
        from hashbench.utils.logger import Logger

        return Logger.get("runner")

    def run(self, operation: Callable[[], object], iterations: int) -> TimingSample:
        """Warm up, then time exactly `iterations` calls of operation.

        Args:
            operation: Zero-argument callable; its return value is discarded.
            iterations: Number of timed calls (must be positive).

        Returns:
            TimingSample with the timed loop's duration in milliseconds.

        Raises:
            ValueError: If iterations is not positive.
        """
        if iterations <= 0:
            raise ValueError(f"iterations must be positive, got {iterations}")

        warmup = min(self.warmup_iterations, iterations)
        self.logger.debug(f"Warmup: {warmup} iterations")
        for _ in range(warmup):
            operation()

        self.logger.debug(f"Timing {iterations} iterations")
        clock = self._clock
        start = clock()
        for _ in range(iterations):
            operation()
        end = clock()

        total_time_ms = (end - start) * 1000
        self.logger.debug(f"Timed loop took {total_time_ms:.3f}ms")
        return TimingSample(total_time_ms=total_time_ms, op_count=iterations)
