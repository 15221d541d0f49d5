"""No-op ExecRunner wrapper for dry-run mode."""

from collections.abc import Sequence
from pathlib import Path

from swoft_devtool.cli.output import user_output
from swoft_devtool.core.exec_runner.abc import ExecResult, ExecRunner, format_command


class DryRunExecRunner(ExecRunner):
    """No-op wrapper that prevents execution of external commands.

    Every command is announced with a ``[DRY RUN]`` prefix and reported as
    successful without reaching the wrapped implementation.

    Usage:
        real_runner = RealExecRunner()
        noop_runner = DryRunExecRunner(real_runner)

        # Prints message instead of cloning
        noop_runner.run(["git", "clone", "--depth", "1", url], operation_context="clone")
    """

    def __init__(self, wrapped: ExecRunner) -> None:
        """Create a dry-run wrapper around an ExecRunner implementation.

        Args:
            wrapped: The ExecRunner to wrap (usually RealExecRunner or FakeExecRunner)
        """
        self._wrapped = wrapped

    def run(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None = None,
    ) -> ExecResult:
        """Print what would run (no-op)."""
        location = f" (in {cwd})" if cwd is not None else ""
        user_output(f"[DRY RUN] Would run: {format_command(cmd)}{location}")
        return ExecResult.ok()
