"""External command execution interface.

This module provides a clean abstraction over process invocation, making the
project creation workflow testable without spawning real processes.

Architecture:
- ExecRunner: Abstract base class defining the interface
- RealExecRunner: Production implementation using subprocess
- DryRunExecRunner: Announces commands without executing them
- PrintingExecRunner: Announces commands, then delegates
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExecResult:
    """Outcome of a single external command.

    ``error`` carries a human-readable description when ``success`` is False.
    """

    success: bool
    error: str | None = None

    @staticmethod
    def ok() -> "ExecResult":
        return ExecResult(success=True)

    @staticmethod
    def failed(error: str) -> "ExecResult":
        return ExecResult(success=False, error=error)


def format_command(cmd: Sequence[str]) -> str:
    """Render an argument list as a single display string."""
    return " ".join(str(arg) for arg in cmd)


class ExecRunner(ABC):
    """Abstract interface for running one external command to completion.

    Implementations never retry and never raise for a failing command:
    failures are reported through the returned ExecResult so the caller
    decides whether to abort.
    """

    @abstractmethod
    def run(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None = None,
    ) -> ExecResult:
        """Run a command synchronously.

        Args:
            cmd: Program and arguments (no shell interpretation)
            operation_context: Short description used in error messages,
                e.g. "clone template repository"
            cwd: Working directory for the command

        Returns:
            ExecResult describing success or failure
        """
        ...
