"""Fake ExecRunner implementation for testing.

This fake enables testing the project creation workflow without spawning
git, cp, rm or composer processes.
"""

from collections.abc import Sequence
from pathlib import Path

from swoft_devtool.core.exec_runner.abc import ExecResult, ExecRunner, format_command


class FakeExecRunner(ExecRunner):
    """In-memory fake implementation of command execution.

    Constructor Injection:
    - Failing programs/commands are provided via constructor parameters
    - Calls are recorded for assertions

    Examples:
        # Every command succeeds
        >>> runner = FakeExecRunner()
        >>> runner.run(["git", "status"], operation_context="status").success
        True

        # Every git command fails
        >>> runner = FakeExecRunner(failing_programs={"git"})
        >>> runner.run(["git", "clone", "x"], operation_context="clone").success
        False

        # Only one specific command fails, matched by prefix
        >>> runner = FakeExecRunner(failing_prefixes=[["rm", "-rf"]])
    """

    def __init__(
        self,
        *,
        failing_programs: set[str] | None = None,
        failing_prefixes: list[list[str]] | None = None,
        error_message: str = "command failed",
    ) -> None:
        """Initialize fake with predetermined failures.

        Args:
            failing_programs: Program names (cmd[0]) whose commands fail
            failing_prefixes: Argument-list prefixes whose commands fail
            error_message: Error text attached to failed results
        """
        self._failing_programs = failing_programs or set()
        self._failing_prefixes = failing_prefixes or []
        self._error_message = error_message
        self._calls: list[tuple[list[str], Path | None]] = []

    def run(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None = None,
    ) -> ExecResult:
        """Record the call and return the configured outcome."""
        args = [str(arg) for arg in cmd]
        self._calls.append((args, cwd))

        if self._should_fail(args):
            return ExecResult.failed(
                f"Failed to {operation_context}\nCommand: {format_command(args)}\n"
                f"{self._error_message}"
            )
        return ExecResult.ok()

    def _should_fail(self, args: list[str]) -> bool:
        if args and args[0] in self._failing_programs:
            return True
        return any(args[: len(prefix)] == prefix for prefix in self._failing_prefixes)

    @property
    def calls(self) -> list[tuple[list[str], Path | None]]:
        """Get the list of run() calls that were made.

        Returns list of (command, cwd) tuples.

        This property is for test assertions only.
        """
        return self._calls.copy()

    @property
    def commands(self) -> list[list[str]]:
        """Get only the argument lists of recorded calls."""
        return [cmd for cmd, _ in self._calls]

    def programs_run(self) -> list[str]:
        """Get the program name of each recorded call, in order."""
        return [cmd[0] for cmd, _ in self._calls if cmd]
