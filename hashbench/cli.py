#!/usr/bin/env python3
"""hashbench CLI - compare hash implementations for speed and agreement."""

import click

from hashbench.models.constants import (
    CASE_CHOICES,
    DEFAULT_WARMUP_ITERATIONS,
    VERIFY_INPUT,
)
from hashbench.utils.env import get_log_level, get_warmup_iterations
from hashbench.utils.logger import Logger


@click.group(invoke_without_command=True)
@click.pass_context
def hashbench(ctx):
    """Benchmark interchangeable BLAKE3 implementations.

    Runs the full suite when no command is given.
    """
    # Configure logger at startup if not already configured
    if not Logger.is_configured():
        Logger.configure(level=get_log_level(), timestamps=True)

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@hashbench.command()
@click.option(
    "--impl",
    "-i",
    "implementations",
    multiple=True,
    help="Benchmark only these implementation ids (repeatable)",
)
@click.option(
    "--case",
    "-c",
    "cases",
    multiple=True,
    type=click.Choice(CASE_CHOICES),
    help="Run only these workloads (repeatable)",
)
@click.option(
    "--skip-streaming",
    is_flag=True,
    help="Skip the streaming workload",
)
@click.option(
    "--skip-verify",
    is_flag=True,
    help="Skip the correctness verification pass",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Report format on stdout (default: text)",
)
@click.option(
    "--warmup",
    "-w",
    type=click.IntRange(min=0),
    default=None,
    help=(
        "Untimed calls before each timed loop, capped at the iteration count "
        f"(default: $HASHBENCH_WARMUP or {DEFAULT_WARMUP_ITERATIONS})"
    ),
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug output and stack traces",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log loading and progress details",
)
def run(
    implementations=(),
    cases=(),
    skip_streaming=False,
    skip_verify=False,
    fmt="text",
    warmup=None,
    debug=False,
    verbose=False,
):
    r"""Run the benchmark suite.

    \b
    Examples:
      hashbench run                        # Full suite
      hashbench run -c small -c streaming  # Selected workloads only
      hashbench run --skip-streaming       # One-shot workloads only
      hashbench run -i pyb3 -i blake3      # Selected implementations only
      hashbench run -f json                # Structured results on stdout
    """
    from hashbench.commands.run_cmd import run_suite

    if debug:
        Logger.set_level("DEBUG")
    elif verbose:
        Logger.set_level("INFO")

    if warmup is None:
        warmup = get_warmup_iterations(DEFAULT_WARMUP_ITERATIONS)

    run_suite(
        implementations=implementations,
        cases=cases,
        skip_streaming=skip_streaming,
        skip_verify=skip_verify,
        fmt=fmt,
        warmup=warmup,
        debug=debug,
    )


@hashbench.command(name="list")
@click.option("--verbose", "-v", is_flag=True, help="Show descriptions and load errors")
def list_command(verbose):
    """List known implementations and their availability."""
    from hashbench.commands.list_cmd import list_implementations

    list_implementations(verbose=verbose)


@hashbench.command()
@click.option(
    "--input",
    "text",
    default=VERIFY_INPUT,
    show_default=True,
    help="Text hashed by every implementation",
)
def verify(text):
    """Check that every implementation agrees with the reference digest."""
    from hashbench.commands.verify_cmd import run_verify

    run_verify(text=text)


@hashbench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display hashbench version information."""
    from hashbench.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    hashbench()
