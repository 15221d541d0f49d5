"""External command execution subpackage.

This subpackage provides abstractions over process invocation with support for
testing via fakes and dry-run via wrappers.
"""

from swoft_devtool.core.exec_runner.abc import ExecResult, ExecRunner, format_command
from swoft_devtool.core.exec_runner.dry_run import DryRunExecRunner
from swoft_devtool.core.exec_runner.printing import PrintingExecRunner
from swoft_devtool.core.exec_runner.real import RealExecRunner

__all__ = [
    "ExecRunner",
    "ExecResult",
    "RealExecRunner",
    "DryRunExecRunner",
    "PrintingExecRunner",
    "format_command",
]
