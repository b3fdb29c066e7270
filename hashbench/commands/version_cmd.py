"""
Version command - displays hashbench version information
"""

import click

from hashbench.version import HASHBENCH_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display hashbench version information.

    Args:
        verbose: If True, show additional details like full hash and date
    """
    if verbose:
        click.echo(f"hashbench version {HASHBENCH_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {HASHBENCH_VERSION}")
        click.echo(f"  Release Date:     {HASHBENCH_VERSION.date_string()}")
        click.echo(f"  Source Hash:      {HASHBENCH_VERSION.hash}")
    else:
        click.echo(f"hashbench {HASHBENCH_VERSION}")
