"""Output utilities for CLI commands.

Two channels, as gh and git use them:
- user_output(): human-facing messages on stderr
- machine_output(): results meant for piping (the PR URL) on stdout
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    """Write a machine-readable result to stdout."""
    click.echo(message, nl=nl)
