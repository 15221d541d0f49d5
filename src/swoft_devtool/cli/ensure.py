"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

import click

from swoft_devtool.cli.output import user_output
from swoft_devtool.core.creation import CreationError


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def no_creation_error(error: CreationError | None) -> None:
        """Ensure the creation workflow recorded no error, otherwise report it and exit.

        Raises:
            SystemExit: If an error was recorded (with exit code 1)
        """
        if error is not None:
            Ensure.invariant(False, error.message)
