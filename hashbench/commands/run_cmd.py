"""Run command - benchmark every available implementation.

CLI Examples:
    hashbench run                        # Full suite, text report
    hashbench run -c small -c streaming  # Selected workloads only
    hashbench run -i pyb3 -i blake3      # Selected implementations only
    hashbench run --skip-verify          # Benchmarks without the digest check
    hashbench run -f json                # Structured results on stdout
"""

import sys

import click

from hashbench.backends.system import get_system_info
from hashbench.bench import (
    DEFAULT_STREAMING_CASE,
    DEFAULT_TEST_CASES,
    ComparisonReporter,
    OutputFormat,
    TimedRunner,
    WorkloadDriver,
    emit,
)
from hashbench.implementations import ImplementationRegistry
from hashbench.models.bench_models import TestCase
from hashbench.models.constants import ONE_SHOT_CASE_KEYS, STREAMING_CASE_KEY
from hashbench.utils.logger import Logger

# Map CLI names to the fixed workload matrix
CASE_MAP: dict[str, TestCase] = dict(
    zip(ONE_SHOT_CASE_KEYS, DEFAULT_TEST_CASES, strict=True)
)


def _select_cases(cases: tuple[str, ...]) -> tuple[list[TestCase], bool]:
    """Resolve CLI case names to test cases and whether to run streaming."""
    if not cases:
        return list(DEFAULT_TEST_CASES), True

    # Keep matrix order regardless of the order options were given
    selected = [case for key, case in CASE_MAP.items() if key in cases]
    return selected, STREAMING_CASE_KEY in cases


def _validate_implementations(
    implementations: tuple[str, ...], registry: ImplementationRegistry
) -> None:
    """Reject implementation ids the registry doesn't know."""
    unknown = [name for name in implementations if name not in registry]
    if unknown:
        valid = ", ".join(outcome.implementation_id for outcome in registry.outcomes)
        raise click.ClickException(
            f"Unknown implementation(s): {', '.join(unknown)}. Valid: {valid}"
        )


def run_suite(
    implementations: tuple[str, ...] = (),
    cases: tuple[str, ...] = (),
    skip_streaming: bool = False,
    skip_verify: bool = False,
    fmt: str = "text",
    warmup: int = 10,
    debug: bool = False,
) -> None:
    """Load implementations, run the selected workloads and report.

    Any unexpected failure is logged and ends the process with status 1.
    Implementations that fail to load and digest mismatches are reported
    but don't affect the exit status.
    """
    log = Logger.get("cli")
    try:
        output_format = OutputFormat(fmt.lower())
        test_cases, run_streaming = _select_cases(cases)

        registry = ImplementationRegistry.default()
        _validate_implementations(implementations, registry)

        reporter = ComparisonReporter() if output_format == OutputFormat.TEXT else None
        driver = WorkloadDriver(
            registry,
            runner=TimedRunner(warmup_iterations=warmup),
            reporter=reporter,
            test_cases=test_cases,
            streaming_case=DEFAULT_STREAMING_CASE if run_streaming else None,
            only_ids=implementations or None,
            system=get_system_info(),
        )
        results = driver.run(skip_streaming=skip_streaming, skip_verify=skip_verify)

        if output_format != OutputFormat.TEXT:
            emit(results, sys.stdout, output_format)

    except click.ClickException:
        raise
    except Exception as e:
        if debug:
            log.exception(f"Benchmark run failed: {e}")
        else:
            log.error(f"Benchmark run failed: {e}")
        click.echo(f"Error: benchmark run failed: {e}", err=True)
        sys.exit(1)
