"""Workload driver: the fixed benchmark matrix and its orchestration.

Usage:
    from hashbench.bench.driver import WorkloadDriver
    from hashbench.implementations import ImplementationRegistry

    registry = ImplementationRegistry.default()
    results = WorkloadDriver(registry, reporter=ComparisonReporter()).run()
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from hashbench.bench.aggregate import aggregate_sample
from hashbench.bench.compare import compare
from hashbench.bench.report import ComparisonReporter
from hashbench.bench.runner import TimedRunner
from hashbench.bench.verify import verify
from hashbench.implementations.base import HashImplementation
from hashbench.implementations.registry import ImplementationRegistry
from hashbench.models.bench_models import (
    ComparisonTable,
    StreamingCase,
    SuiteResults,
    SystemInfo,
    TestCase,
    VerificationReport,
)
from hashbench.models.constants import (
    LARGE_ITERATIONS,
    LARGE_PAYLOAD,
    MEDIUM_ITERATIONS,
    MEDIUM_PAYLOAD,
    REFERENCE_IMPLEMENTATION_ID,
    SMALL_ITERATIONS,
    SMALL_PAYLOAD,
    STREAMING_CHUNK,
    STREAMING_CHUNK_COUNT,
    STREAMING_ITERATIONS,
    VERIFY_INPUT,
    VERY_LARGE_ITERATIONS,
    VERY_LARGE_PAYLOAD,
    Capability,
)

DEFAULT_TEST_CASES: tuple[TestCase, ...] = (
    TestCase(name="Small (11 bytes)", payload=SMALL_PAYLOAD, iterations=SMALL_ITERATIONS),
    TestCase(name="Medium (1KB)", payload=MEDIUM_PAYLOAD, iterations=MEDIUM_ITERATIONS),
    TestCase(name="Large (100KB)", payload=LARGE_PAYLOAD, iterations=LARGE_ITERATIONS),
    TestCase(
        name="Very Large (1MB)",
        payload=VERY_LARGE_PAYLOAD,
        iterations=VERY_LARGE_ITERATIONS,
    ),
)

DEFAULT_STREAMING_CASE = StreamingCase(
    name=f"Streaming ({STREAMING_CHUNK_COUNT} chunks of 1KB each)",
    chunk=STREAMING_CHUNK,
    chunk_count=STREAMING_CHUNK_COUNT,
    iterations=STREAMING_ITERATIONS,
)


def one_shot_operation(
    impl: HashImplementation, payload: bytes | str
) -> Callable[[], bytes]:
    """A timed operation hashing payload in a single call."""

    def operation() -> bytes:
        return impl.hash(payload)

    return operation


def streaming_operation(
    impl: HashImplementation, chunk: bytes | str, chunk_count: int
) -> Callable[[], bytes]:
    """A timed operation building, feeding and finalizing one hasher."""

    def operation() -> bytes:
        hasher = impl.create_hasher()
        for _ in range(chunk_count):
            hasher.update(chunk)
        return hasher.finalize()

    return operation


class WorkloadDriver:
    """Runs the benchmark matrix over every available implementation.

    Each one-shot test case runs every available implementation with
    one-shot hashing; the streaming case runs every implementation with
    streaming hashing. Results are compared and reported per workload, then
    digests are verified once against the reference.

    Example:
        >>> driver = WorkloadDriver(registry, reporter=ComparisonReporter())
        >>> results = driver.run()
        >>> results.verification.all_match
        True
    """

    def __init__(
        self,
        registry: ImplementationRegistry,
        runner: TimedRunner | None = None,
        reporter: ComparisonReporter | None = None,
        test_cases: Sequence[TestCase] = DEFAULT_TEST_CASES,
        streaming_case: StreamingCase | None = DEFAULT_STREAMING_CASE,
        verify_input: bytes | str = VERIFY_INPUT,
        reference_id: str = REFERENCE_IMPLEMENTATION_ID,
        only_ids: Iterable[str] | None = None,
        system: SystemInfo | None = None,
    ) -> None:
        """Initialize the driver.

        Args:
            registry: Registry whose loading has already settled.
            runner: Timed runner; defaults to TimedRunner().
            reporter: Text reporter; None runs silently.
            test_cases: One-shot workloads, in run order.
            streaming_case: Streaming workload, or None to skip it.
            verify_input: Input hashed by the correctness pass.
            reference_id: Implementation whose digest is ground truth.
            only_ids: If given, benchmark only these implementation ids.
            system: Host details shown in the report header.
        """
        self._registry = registry
        self._runner = runner or TimedRunner()
        self._reporter = reporter
        self.test_cases = tuple(test_cases)
        self.streaming_case = streaming_case
        self.verify_input = verify_input
        self.reference_id = reference_id
        self.only_ids = frozenset(only_ids) if only_ids is not None else None
        self.system = system

    @property
    def logger(self) -> logging.Logger:
        from hashbench.utils.logger import Logger

        return Logger.get("driver")

    def _selected(self, capability: Capability) -> list[HashImplementation]:
        return [
            impl
            for impl in self._registry.list_available(capability)
            if self.only_ids is None or impl.id in self.only_ids
        ]

    # -------------------------------------------------------------------------
    # Workloads
    # -------------------------------------------------------------------------

    def run_test_case(self, case: TestCase) -> ComparisonTable | None:
        """Benchmark one-shot hashing of case.payload."""
        self.logger.info(
            f"{case.name}: {case.payload_size} bytes x {case.iterations} iterations"
        )
        if self._reporter is not None:
            self._reporter.section(case.name)

        results = []
        for impl in self._selected(Capability.ONE_SHOT):
            self.logger.debug(f"Running {impl.id} on {case.name}")
            sample = self._runner.run(one_shot_operation(impl, case.payload), case.iterations)
            results.append(aggregate_sample(impl.get_pretty_name(), sample))

        table = compare(results, title=case.name)
        if self._reporter is not None:
            self._reporter.report(table)
        return table

    def run_streaming_case(self, case: StreamingCase) -> ComparisonTable | None:
        """Benchmark incremental hashing: one hasher per operation."""
        self.logger.info(
            f"{case.name}: {case.chunk_count} chunks x {case.iterations} iterations"
        )
        if self._reporter is not None:
            self._reporter.section(case.name)

        results = []
        for impl in self._selected(Capability.STREAMING):
            self.logger.debug(f"Running {impl.id} on {case.name}")
            operation = streaming_operation(impl, case.chunk, case.chunk_count)
            sample = self._runner.run(operation, case.iterations)
            results.append(aggregate_sample(f"{impl.get_pretty_name()} (streaming)", sample))

        table = compare(results, title=case.name)
        if self._reporter is not None:
            self._reporter.report(table)
        return table

    def run_verification(self) -> VerificationReport:
        """Check every selected one-shot implementation against the reference."""
        implementations = [
            impl
            for impl in self._registry.list_available()
            if self.only_ids is None or impl.id in self.only_ids
        ]
        # The reference takes part even when filtered out of the benchmarks
        if all(impl.id != self.reference_id for impl in implementations):
            if self._registry.is_available(self.reference_id):
                implementations.insert(0, self._registry.get(self.reference_id))

        report = verify(implementations, self.reference_id, self.verify_input)
        if self._reporter is not None:
            self._reporter.verification(report)
        return report

    # -------------------------------------------------------------------------
    # Suite
    # -------------------------------------------------------------------------

    def run(self, skip_streaming: bool = False, skip_verify: bool = False) -> SuiteResults:
        """Run every workload, then the correctness pass.

        Args:
            skip_streaming: Don't run the streaming workload.
            skip_verify: Don't run the correctness pass.

        Returns:
            SuiteResults holding every non-empty comparison table.
        """
        from hashbench import __version__

        results = SuiteResults(
            hashbench_version=__version__,
            system=self.system,
            load_outcomes=self._registry.outcomes,
        )

        if self._reporter is not None:
            self._reporter.banner(self.system)
            self._reporter.load_summary(results.load_outcomes)
            self._reporter.suite_header()

        for case in self.test_cases:
            table = self.run_test_case(case)
            if table is not None:
                results.tables.append(table)

        if self.streaming_case is not None and not skip_streaming:
            table = self.run_streaming_case(self.streaming_case)
            if table is not None:
                results.tables.append(table)

        if not skip_verify:
            results.verification = self.run_verification()

        if self._reporter is not None:
            self._reporter.footer()

        return results
