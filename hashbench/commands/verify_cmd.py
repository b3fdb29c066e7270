"""Verify command - check digest agreement without benchmarking."""

import sys

import click

from hashbench.bench import ComparisonReporter, ReferenceUnavailableError, verify
from hashbench.implementations import ImplementationRegistry
from hashbench.models.constants import REFERENCE_IMPLEMENTATION_ID, VERIFY_INPUT
from hashbench.utils.logger import Logger


def run_verify(
    text: str = VERIFY_INPUT,
    reference_id: str = REFERENCE_IMPLEMENTATION_ID,
    registry: ImplementationRegistry | None = None,
) -> None:
    """Hash text with every available implementation and compare digests.

    Mismatches are reported but don't change the exit status; a missing
    reference, or the reference raising while hashing, exits with status 1.
    """
    log = Logger.get("cli")
    if registry is None:
        registry = ImplementationRegistry.default()

    try:
        report = verify(registry.list_available(), reference_id, text)
    except ReferenceUnavailableError as e:
        log.error(str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        log.error(f"Verification failed: {e}")
        click.echo(f"Error: verification failed: {e}", err=True)
        sys.exit(1)

    ComparisonReporter().verification(report)
