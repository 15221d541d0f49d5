"""Tests for DevtoolContext construction."""

from pathlib import Path

import pytest

from swoft_devtool.core.context import DevtoolContext, create_context
from swoft_devtool.core.exec_runner import DryRunExecRunner, PrintingExecRunner, RealExecRunner
from swoft_devtool.core.exec_runner.fake import FakeExecRunner
from swoft_devtool.core.global_config import CONFIG_PATH_ENV_VAR
from swoft_devtool.core.user_feedback import InteractiveFeedback, SuppressedFeedback
from tests.fakes.user_feedback import FakeUserFeedback


def test_for_test_uses_fakes_by_default() -> None:
    ctx = DevtoolContext.for_test()

    assert isinstance(ctx.runner, FakeExecRunner)
    assert isinstance(ctx.feedback, FakeUserFeedback)
    assert ctx.global_config.installer == "composer"
    assert ctx.config_store.load() == ctx.global_config
    assert ctx.cwd == Path("/test/default/cwd")
    assert not ctx.dry_run


def test_for_test_wraps_runner_in_dry_run() -> None:
    runner = FakeExecRunner()

    ctx = DevtoolContext.for_test(runner=runner, dry_run=True)

    assert isinstance(ctx.runner, DryRunExecRunner)
    assert ctx.dry_run


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "config.toml"
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))
    return path


def test_create_context_selects_runner_wrappers(isolated_config: Path) -> None:
    assert isinstance(create_context(dry_run=False).runner, RealExecRunner)
    assert isinstance(create_context(dry_run=True).runner, DryRunExecRunner)
    assert isinstance(create_context(dry_run=False, verbose=True).runner, PrintingExecRunner)
    # dry-run already announces every command
    assert isinstance(create_context(dry_run=True, verbose=True).runner, DryRunExecRunner)


def test_create_context_selects_feedback(isolated_config: Path) -> None:
    assert isinstance(create_context(dry_run=False).feedback, InteractiveFeedback)
    assert isinstance(create_context(dry_run=False, quiet=True).feedback, SuppressedFeedback)


def test_create_context_exits_on_bad_config(isolated_config: Path) -> None:
    isolated_config.write_text("installer = 3\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        create_context(dry_run=False)

    assert exc_info.value.code == 1
