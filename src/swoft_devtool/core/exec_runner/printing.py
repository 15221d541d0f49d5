"""Printing ExecRunner wrapper for verbose output.

This module provides an ExecRunner wrapper that prints styled output for each
command before delegating to the wrapped implementation.
"""

from collections.abc import Sequence
from pathlib import Path

from swoft_devtool.core.exec_runner.abc import ExecResult, ExecRunner, format_command
from swoft_devtool.core.printing_base import PrintingBase


class PrintingExecRunner(PrintingBase[ExecRunner], ExecRunner):
    """Wrapper that prints commands before delegating to inner implementation.

    Usage:
        # Verbose production run
        printing_runner = PrintingExecRunner(RealExecRunner())

        # Verbose run against a fake, marking commands as not executed
        printing_runner = PrintingExecRunner(FakeExecRunner(), dry_run=True)
    """

    # Inherits __init__, _emit, and _format_command from PrintingBase

    def run(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None = None,
    ) -> ExecResult:
        """Print the command, then delegate."""
        self._emit(self._format_command(format_command(cmd)))
        return self._wrapped.run(cmd, cwd=cwd, operation_context=operation_context)
