"""Creation request, resolved plan and structured errors.

``resolve_plan`` is a pure function: it turns a CreationRequest into either a
ResolvedPlan or a CreationError without touching the filesystem.
"""

from dataclasses import dataclass
from enum import Enum

from swoft_devtool.core.templates import (
    allowed_types,
    is_full_url,
    is_valid_type,
    repo_url_for_short_ref,
    repo_url_for_type,
)


class CreationErrorKind(Enum):
    MISSING_NAME = "missing-name"
    INVALID_REPO = "invalid-repo"
    INVALID_TYPE = "invalid-type"
    MISSING_SOURCE = "missing-source"
    PATH_EXISTS = "path-exists"
    PROCESS_FAILED = "process-failed"


class CreationPhase(Enum):
    """Workflow step during which an external command failed."""

    CACHE = "cache"
    PURGE = "purge"
    CLONE = "clone"
    COPY = "copy"
    STRIP = "strip"
    ROLLBACK = "rollback"
    INSTALL = "install"


@dataclass(frozen=True)
class CreationError:
    """A recoverable, reported failure of validation or execution.

    Callers branch on ``kind`` (and ``phase`` for PROCESS_FAILED); ``message``
    is the text shown to the user.
    """

    kind: CreationErrorKind
    message: str
    phase: CreationPhase | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class CreationRequest:
    """User-supplied description of the project to create.

    Exactly one of ``repo`` or ``type`` is expected; ``repo`` wins when both
    are set.
    """

    name: str
    repo: str = ""
    type: str = ""
    work_dir: str = ""
    refresh: bool = False

    @staticmethod
    def build(
        name: str,
        *,
        repo: str | None = None,
        type: str | None = None,
        work_dir: str | None = None,
        refresh: bool = False,
    ) -> "CreationRequest":
        """Build a request from raw input, treating blank values as unset."""
        return CreationRequest(
            name=(name or "").strip(),
            repo=(repo or "").strip(),
            type=(type or "").strip(),
            work_dir=(work_dir or "").strip(),
            refresh=refresh,
        )


@dataclass(frozen=True)
class ResolvedPlan:
    """Validated creation target."""

    repo_url: str
    project_path: str


def project_path_for(request: CreationRequest) -> str:
    if request.work_dir:
        return f"{request.work_dir}/{request.name}"
    return request.name


def resolve_plan(request: CreationRequest) -> ResolvedPlan | CreationError:
    """Resolve the clone URL and destination path for a request.

    Args:
        request: The creation request to validate

    Returns:
        ResolvedPlan on success, CreationError describing the first problem
        otherwise
    """
    if not request.name:
        return CreationError(CreationErrorKind.MISSING_NAME, "please set the new project name")

    if request.repo:
        repo = request.repo
        if is_full_url(repo):
            repo_url = repo
        elif repo.find("/") > 0:
            repo_url = repo_url_for_short_ref(repo)
        else:
            return CreationError(
                CreationErrorKind.INVALID_REPO, f"invalid 'repo' address: {repo}"
            )
    elif request.type:
        if not is_valid_type(request.type):
            allow = ", ".join(allowed_types())
            return CreationError(
                CreationErrorKind.INVALID_TYPE,
                f"invalid 'type' name: {request.type}, allow: {allow}",
            )
        repo_url = repo_url_for_type(request.type)
    else:
        return CreationError(CreationErrorKind.MISSING_SOURCE, "missing 'repo' or 'type' setting")

    return ResolvedPlan(repo_url=repo_url, project_path=project_path_for(request))
