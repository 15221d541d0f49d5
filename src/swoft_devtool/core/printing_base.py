"""Shared plumbing for wrappers that print operations before delegating."""

from typing import Generic, TypeVar

import click

from swoft_devtool.cli.output import user_output

T = TypeVar("T")


class PrintingBase(Generic[T]):
    """Base class for printing wrappers.

    Subclasses call ``self._emit(self._format_command(...))`` before
    delegating to ``self._wrapped``.
    """

    def __init__(self, wrapped: T, *, script_mode: bool = False, dry_run: bool = False) -> None:
        """Create a printing wrapper.

        Args:
            wrapped: The implementation to delegate to (Real, Fake or DryRun)
            script_mode: Suppress all printing when True
            dry_run: Mark printed commands as dry-run
        """
        self._wrapped = wrapped
        self._script_mode = script_mode
        self._dry_run = dry_run

    def _emit(self, message: str) -> None:
        if not self._script_mode:
            user_output(message)

    def _format_command(self, command: str) -> str:
        styled = click.style(f"  $ {command}", dim=True)
        if self._dry_run:
            styled += click.style(" (dry run)", fg="yellow")
        return styled
