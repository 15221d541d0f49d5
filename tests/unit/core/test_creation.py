"""Tests for request resolution."""

import pytest

from swoft_devtool.core.creation import (
    CreationError,
    CreationErrorKind,
    CreationRequest,
    ResolvedPlan,
    resolve_plan,
)


def _resolve_ok(request: CreationRequest) -> ResolvedPlan:
    result = resolve_plan(request)
    assert isinstance(result, ResolvedPlan), result
    return result


def _resolve_err(request: CreationRequest) -> CreationError:
    result = resolve_plan(request)
    assert isinstance(result, CreationError), result
    return result


@pytest.mark.parametrize(
    "request_",
    [
        CreationRequest(name=""),
        CreationRequest(name="", type="http"),
        CreationRequest(name="", repo="org/repo", work_dir="/tmp/ws", refresh=True),
    ],
)
def test_empty_name_fails_regardless_of_other_fields(request_: CreationRequest) -> None:
    error = _resolve_err(request_)

    assert error.kind is CreationErrorKind.MISSING_NAME
    assert error.message == "please set the new project name"
    assert str(error) == "please set the new project name"


def test_ssh_reference_is_used_verbatim() -> None:
    plan = _resolve_ok(CreationRequest(name="demo", repo="git@host:org/repo.git"))

    assert plan.repo_url == "git@host:org/repo.git"


def test_https_reference_is_used_verbatim() -> None:
    plan = _resolve_ok(CreationRequest(name="demo", repo="https://gitlab.com/org/repo"))

    assert plan.repo_url == "https://gitlab.com/org/repo"


def test_short_reference_expands_to_github() -> None:
    plan = _resolve_ok(CreationRequest(name="demo", repo="org/repo"))

    assert plan.repo_url == "https://github.com/org/repo.git"


@pytest.mark.parametrize("repo", ["not-a-valid-token", "/leading-slash"])
def test_invalid_repo_reports_original_string(repo: str) -> None:
    error = _resolve_err(CreationRequest(name="demo", repo=repo))

    assert error.kind is CreationErrorKind.INVALID_REPO
    assert error.message == f"invalid 'repo' address: {repo}"


def test_type_resolves_to_swoft_cloud_repository() -> None:
    plan = _resolve_ok(CreationRequest(name="demo", type="http"))

    assert plan.repo_url == "https://github.com/swoft-cloud/swoft-http-project.git"


def test_unknown_type_lists_allowed_keys() -> None:
    error = _resolve_err(CreationRequest(name="demo", type="unknown"))

    assert error.kind is CreationErrorKind.INVALID_TYPE
    assert error.message == "invalid 'type' name: unknown, allow: http, tcp, rpc, ws, full"


def test_missing_repo_and_type_fails() -> None:
    error = _resolve_err(CreationRequest(name="demo"))

    assert error.kind is CreationErrorKind.MISSING_SOURCE
    assert error.message == "missing 'repo' or 'type' setting"


def test_repo_takes_precedence_over_type() -> None:
    plan = _resolve_ok(CreationRequest(name="demo", repo="org/repo", type="http"))
    assert plan.repo_url == "https://github.com/org/repo.git"

    # An invalid repo is not rescued by a valid type
    error = _resolve_err(CreationRequest(name="demo", repo="bad", type="http"))
    assert error.kind is CreationErrorKind.INVALID_REPO


@pytest.mark.parametrize(
    ("work_dir", "expected"),
    [("/tmp/ws", "/tmp/ws/demo"), ("", "demo"), ("relative/dir", "relative/dir/demo")],
)
def test_project_path_joins_work_dir_and_name(work_dir: str, expected: str) -> None:
    plan = _resolve_ok(CreationRequest(name="demo", type="rpc", work_dir=work_dir))

    assert plan.project_path == expected


def test_build_strips_blank_values() -> None:
    request = CreationRequest.build("  demo ", repo="   ", type=" ws ", work_dir=None)

    assert request == CreationRequest(name="demo", repo="", type="ws", work_dir="", refresh=False)
    assert _resolve_ok(request).repo_url == "https://github.com/swoft-cloud/swoft-ws-project.git"
