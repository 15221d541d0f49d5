"""Production ExecRunner implementation using subprocess."""

import logging
from collections.abc import Sequence
from pathlib import Path

from swoft_devtool.core.exec_runner.abc import ExecResult, ExecRunner, format_command
from swoft_devtool.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealExecRunner(ExecRunner):
    """Production implementation using subprocess.

    Every command executes for real and writes to the inherited stdout and
    stderr, so clone and install progress reaches the terminal as it happens.
    Non-zero exits, missing binaries and unusable working directories are
    turned into a failed ExecResult carrying the enriched error text.
    """

    def run(
        self,
        cmd: Sequence[str],
        *,
        operation_context: str,
        cwd: Path | None = None,
    ) -> ExecResult:
        """Run the command and report its outcome."""
        logger.debug("Running command: %s (cwd=%s)", format_command(cmd), cwd)
        try:
            run_subprocess_with_context(
                cmd, operation_context=operation_context, cwd=cwd, capture_output=False
            )
        except RuntimeError as e:
            logger.debug("Command failed: %s", e)
            return ExecResult.failed(str(e))
        return ExecResult.ok()
