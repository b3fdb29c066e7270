"""List command - show known implementations and whether they loaded."""

import textwrap

import click

from hashbench.implementations import ImplementationRegistry
from hashbench.models.constants import REFERENCE_IMPLEMENTATION_ID


def list_implementations(
    registry: ImplementationRegistry | None = None, verbose: bool = False
) -> None:
    """Print every candidate with its availability."""
    if registry is None:
        registry = ImplementationRegistry.default()

    click.echo("Hash Implementations:")
    click.echo("-" * 60)

    summaries = registry.list_implementations()
    if not summaries:
        click.echo("  No implementations registered.")
        return

    for summary in summaries:
        status = "Available" if summary["available"] else "Not Available"
        reference = " (reference)" if summary["id"] == REFERENCE_IMPLEMENTATION_ID else ""
        click.echo(f"  {summary['id']:<20} {status}{reference}")
        if verbose:
            click.echo(f"      {summary['pretty_name']}")
            click.echo(f"      Modes: {summary['capabilities']}")
            wrapped = textwrap.fill(
                str(summary["description"]),
                width=70,
                initial_indent="      ",
                subsequent_indent="      ",
            )
            click.echo(wrapped)
            if summary["error"]:
                click.echo(f"      Load error: {summary['error']}")
            click.echo()

    available = sum(1 for summary in summaries if summary["available"])
    click.echo("-" * 60)
    click.echo(f"Total: {available}/{len(summaries)} implementations available")
    if not verbose:
        click.echo("Use --verbose for detailed info")
