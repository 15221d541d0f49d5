"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

import click

from swoft_devtool.cli.output import user_output
from swoft_devtool.core.exec_runner.abc import ExecRunner
from swoft_devtool.core.exec_runner.dry_run import DryRunExecRunner
from swoft_devtool.core.exec_runner.printing import PrintingExecRunner
from swoft_devtool.core.exec_runner.real import RealExecRunner
from swoft_devtool.core.global_config import (
    ConfigStore,
    FilesystemConfigStore,
    GlobalConfig,
    InMemoryConfigStore,
)
from swoft_devtool.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback


@dataclass(frozen=True)
class DevtoolContext:
    """Immutable context holding all dependencies for devtool operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    runner: ExecRunner
    feedback: UserFeedback
    config_store: ConfigStore
    global_config: GlobalConfig
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool

    @staticmethod
    def for_test(
        runner: ExecRunner | None = None,
        feedback: UserFeedback | None = None,
        config_store: ConfigStore | None = None,
        global_config: GlobalConfig | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "DevtoolContext":
        """Create test context with optional pre-configured dependencies.

        Args:
            runner: Optional ExecRunner. If None, creates an empty FakeExecRunner.
            feedback: Optional UserFeedback. If None, creates FakeUserFeedback.
            config_store: Optional ConfigStore. If None, wraps global_config
                in an InMemoryConfigStore.
            global_config: Optional GlobalConfig. If None, uses test defaults.
            cwd: Optional current working directory. If None, uses Path("/test/default/cwd").
            dry_run: Whether to enable dry-run mode (default False).

        Returns:
            DevtoolContext configured with provided values and test defaults

        Example:
            >>> runner = FakeExecRunner(failing_programs={"git"})
            >>> ctx = DevtoolContext.for_test(runner=runner)
        """
        from tests.fakes.user_feedback import FakeUserFeedback

        from swoft_devtool.core.exec_runner.fake import FakeExecRunner

        if runner is None:
            runner = FakeExecRunner()

        if feedback is None:
            feedback = FakeUserFeedback()

        if global_config is None:
            global_config = GlobalConfig(
                cache_root=Path("/test/cache/swoft-app-demos"),
                installer="composer",
            )

        if config_store is None:
            config_store = InMemoryConfigStore(config=global_config)

        # Apply dry-run wrapper if needed (matching production behavior)
        if dry_run:
            runner = DryRunExecRunner(runner)

        return DevtoolContext(
            runner=runner,
            feedback=feedback,
            config_store=config_store,
            global_config=global_config,
            cwd=cwd or Path("/test/default/cwd"),
            dry_run=dry_run,
        )


def safe_cwd() -> tuple[Path | None, str | None]:
    """Get current working directory, detecting if it no longer exists.

    Returns:
        tuple[Path | None, str | None]: (path, error_message)
        - If successful: (Path, None)
        - If directory deleted: (None, error_message)
    """
    try:
        cwd_path = Path.cwd()
        return (cwd_path, None)
    except (FileNotFoundError, OSError):
        return (
            None,
            "Current working directory no longer exists",
        )


def create_context(*, dry_run: bool, verbose: bool = False, quiet: bool = False) -> DevtoolContext:
    """Create production context with real implementations.

    Args:
        dry_run: If True, wrap the runner so commands are announced, not executed
        verbose: If True, print every command before it runs
        quiet: If True, use SuppressedFeedback so only errors are shown

    Returns:
        DevtoolContext with real implementations
    """
    # 1. Capture cwd (no deps)
    cwd_result, error_msg = safe_cwd()
    if cwd_result is None:
        assert error_msg is not None
        user_output(click.style("Error: ", fg="red") + error_msg)
        user_output("\nThe directory you're running from has been deleted.")
        user_output("Please change to a valid directory and try again.")
        raise SystemExit(1)

    # 2. Load global config (defaults when no file exists)
    config_store = FilesystemConfigStore()
    try:
        global_config = config_store.load()
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from None

    # 3. Choose feedback implementation based on mode
    feedback: UserFeedback
    if quiet:
        feedback = SuppressedFeedback()
    else:
        feedback = InteractiveFeedback()

    # 4. Apply runner wrappers
    runner: ExecRunner = RealExecRunner()
    if dry_run:
        runner = DryRunExecRunner(runner)
    elif verbose:
        runner = PrintingExecRunner(runner, script_mode=quiet)

    return DevtoolContext(
        runner=runner,
        feedback=feedback,
        config_store=config_store,
        global_config=global_config,
        cwd=cwd_result,
        dry_run=dry_run,
    )
