"""Output utilities for CLI commands with clear intent.

user_output() is for messages meant for a human (stderr); machine_output()
is for data other programs may consume (stdout).
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write structured output to stdout."""
    click.echo(message, nl=nl)
