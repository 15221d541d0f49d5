"""Subprocess execution with rich error context.

Wraps subprocess.run() so that failures carry the operation being performed,
the command line, the exit code and any captured output.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import IO, Any


def _decode(output: str | bytes) -> str:
    if isinstance(output, str):
        return output
    return output.decode("utf-8", errors="replace")


def _describe_os_error(
    cmd: Sequence[str], operation_context: str, cwd: Path | None, error: OSError
) -> str:
    cmd_str = " ".join(str(arg) for arg in cmd)
    if cwd is not None and error.filename is not None and str(error.filename) == str(cwd):
        error_msg = f"Working directory unusable while trying to {operation_context}: {cwd}"
        error_msg += f" ({error.strerror})"
    elif isinstance(error, FileNotFoundError):
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
    else:
        error_msg = f"Could not start {cmd[0]} while trying to {operation_context}: {error}"
    error_msg += f"\nFull command: {cmd_str}"
    return error_msg


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    capture_output: bool = True,
    text: bool = True,
    encoding: str = "utf-8",
    errors: str = "replace",
    check: bool = True,
    stdout: int | IO[Any] | None = None,
    stderr: int | IO[Any] | None = None,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        capture_output: Whether to capture stdout/stderr (default: True)
        text: Whether to decode output as text (default: True)
        encoding: Text encoding to use (default: "utf-8")
        errors: Decoding error handler; undecodable bytes never raise by default
        check: Whether to raise on non-zero exit (default: True)
        stdout: File descriptor or file object for stdout
        stderr: File descriptor or file object for stderr
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        RuntimeError: If the command fails, its binary cannot be found, or the
            process cannot be started (e.g. unusable working directory)
    """
    try:
        # Explicit stdout/stderr targets take precedence over capture_output
        if capture_output and (stdout is not None or stderr is not None):
            capture_output = False

        return subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=capture_output,
            text=text,
            encoding=encoding,
            errors=errors,
            check=check,
            stdout=stdout,
            stderr=stderr,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {e.returncode}"

        if e.stdout:
            stdout_stripped = _decode(e.stdout).strip()
            if stdout_stripped:
                error_msg += f"\nstdout: {stdout_stripped}"

        if e.stderr:
            stderr_stripped = _decode(e.stderr).strip()
            if stderr_stripped:
                error_msg += f"\nstderr: {stderr_stripped}"

        raise RuntimeError(error_msg) from e

    except OSError as e:
        raise RuntimeError(_describe_os_error(cmd, operation_context, cwd, e)) from e
