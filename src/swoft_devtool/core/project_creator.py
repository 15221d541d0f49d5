"""Create a new project directory from a cached upstream template.

Workflow for one invocation:

    creator = ProjectCreator(request, runner=runner, feedback=feedback)
    if creator.validate():
        creator.create()
        creator.install(no_dev=False)
    if creator.error is not None:
        ...  # report creator.error.message

The cache root is shared by every invocation on the machine and is not
locked; callers must not run two creations against the same cache root at
the same time.
"""

import logging
import tempfile
from pathlib import Path

from swoft_devtool.core.creation import (
    CreationError,
    CreationErrorKind,
    CreationPhase,
    CreationRequest,
    ResolvedPlan,
    resolve_plan,
)
from swoft_devtool.core.exec_runner.abc import ExecRunner
from swoft_devtool.core.templates import cache_entry_name
from swoft_devtool.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

CACHE_DIR_NAME = "swoft-app-demos"
CACHE_DIR_MODE = 0o775
VCS_METADATA_DIR = ".git"
MIN_DELETE_PATH_LENGTH = 6


def default_cache_root() -> Path:
    """Template cache location: ``<system temp dir>/swoft-app-demos``."""
    return Path(tempfile.gettempdir()) / CACHE_DIR_NAME


class UnsafeDeletePathError(ValueError):
    """Raised when asked to recursively delete a root-level or near-root path."""


class ProjectCreator:
    """Orchestrates validation, template caching and project materialization.

    Errors from validation and from external commands are recorded on the
    instance (see ``error``) and stop the remaining steps; they are never
    raised. The only exception this class raises is UnsafeDeletePathError.
    """

    def __init__(
        self,
        request: CreationRequest,
        *,
        runner: ExecRunner,
        feedback: UserFeedback,
        cache_root: Path | None = None,
        installer: str = "composer",
    ) -> None:
        self._request = request
        self._runner = runner
        self._feedback = feedback
        self._cache_root = cache_root if cache_root is not None else default_cache_root()
        self._installer = installer
        self._plan: ResolvedPlan | None = None
        self._error: CreationError | None = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def request(self) -> CreationRequest:
        return self._request

    @property
    def name(self) -> str:
        return self._request.name

    @property
    def type(self) -> str:
        return self._request.type

    @property
    def repo(self) -> str:
        return self._request.repo

    @property
    def work_dir(self) -> str:
        return self._request.work_dir

    @property
    def refresh(self) -> bool:
        return self._request.refresh

    @property
    def cache_root(self) -> Path:
        return self._cache_root

    @property
    def plan(self) -> ResolvedPlan | None:
        return self._plan

    @property
    def repo_url(self) -> str:
        return self._plan.repo_url if self._plan is not None else ""

    @property
    def project_path(self) -> str:
        return self._plan.project_path if self._plan is not None else ""

    @property
    def error(self) -> CreationError | None:
        return self._error

    @property
    def has_error(self) -> bool:
        return self._error is not None

    def info(self) -> dict[str, str]:
        """Summary of the creation with empty fields omitted."""
        info = {
            "name": self.name,
            "type": self.type,
            "repo": self.repo,
            "repoUrl": self.repo_url,
            "workDir": self.work_dir,
            "projectPath": self.project_path,
        }
        return {key: value for key, value in info.items() if value}

    # ------------------------------------------------------------------
    # Workflow
    # ------------------------------------------------------------------

    def validate(self) -> bool:
        """Resolve the clone URL and project path.

        Returns:
            True if the request is valid; otherwise the error is recorded
        """
        result = resolve_plan(self._request)
        if isinstance(result, CreationError):
            self._error = result
            logger.debug("Validation failed: kind=%s, message=%s", result.kind, result.message)
            return False

        self._plan = result
        logger.debug(
            "Resolved plan: repo_url=%s, project_path=%s", result.repo_url, result.project_path
        )
        return True

    def create(self) -> None:
        """Materialize the project directory from the template cache."""
        if self._error is not None or self._plan is None:
            return

        project_path = Path(self._plan.project_path)
        if project_path.exists():
            self._error = CreationError(
                CreationErrorKind.PATH_EXISTS, "the project dir has been exist!"
            )
            return

        self._feedback.info(f"Begin create the new project: {self.name}")
        if not self._cache_root.is_dir():
            if not self._exec(
                ["mkdir", "-p", "-m", f"{CACHE_DIR_MODE:o}", str(self._cache_root)],
                phase=CreationPhase.CACHE,
                operation_context=f"create cache dir {self._cache_root}",
            ):
                return

        entry = self._cache_root / cache_entry_name(self._plan.repo_url)
        has_exist = entry.exists()
        logger.debug("Cache entry %s exists=%s refresh=%s", entry, has_exist, self.refresh)

        if has_exist and self.refresh:
            if not self.delete_dir(entry):
                self._record_failure(CreationPhase.PURGE, f"failed to delete cache dir: {entry}")
                return
            has_exist = False

        if not has_exist:
            self._feedback.info(f"Clone Repo {self._plan.repo_url}")
            if not self._exec(
                ["git", "clone", "--depth", "1", self._plan.repo_url],
                cwd=self._cache_root,
                phase=CreationPhase.CLONE,
                operation_context=f"clone {self._plan.repo_url}",
            ):
                return

        self._feedback.info("Copy project files from local cache")
        if not self._exec(
            ["cp", "-R", str(entry), str(project_path)],
            phase=CreationPhase.COPY,
            operation_context="copy project files from local cache",
        ):
            return

        self._feedback.info(f"Remove {VCS_METADATA_DIR} directory on new project")
        if not self._exec(
            ["rm", "-rf", str(project_path / VCS_METADATA_DIR)],
            phase=CreationPhase.STRIP,
            operation_context=f"remove {VCS_METADATA_DIR} directory on new project",
        ):
            self._rollback(project_path)
            return

        self._feedback.success(f"Project: {project_path} created")

    def install(self, no_dev: bool = False) -> None:
        """Run the dependency installer inside the new project."""
        if self._error is not None or self._plan is None:
            return

        self._feedback.info(f"Begin run {self._installer} install for init project")

        cmd = [self._installer, "install"]
        if no_dev:
            cmd.append("--no-dev")

        if not self._exec(
            cmd,
            cwd=Path(self._plan.project_path),
            phase=CreationPhase.INSTALL,
            operation_context=f"run {self._installer} install",
        ):
            return

        self._feedback.success(f"{self._installer.capitalize()} packages install complete")

    def delete_dir(self, path: str | Path) -> bool:
        """Recursively remove a directory.

        Raises:
            UnsafeDeletePathError: If the path is shorter than 6 characters
        """
        path_str = str(path)
        if len(path_str) < MIN_DELETE_PATH_LENGTH:
            raise UnsafeDeletePathError(f"path is to short, cannot exec rm: {path_str!r}")

        self._feedback.info(f"Delete Dir: {path_str}")
        result = self._runner.run(["rm", "-rf", path_str], operation_context=f"delete {path_str}")
        return result.success

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _exec(
        self,
        cmd: list[str],
        *,
        phase: CreationPhase,
        operation_context: str,
        cwd: Path | None = None,
    ) -> bool:
        result = self._runner.run(cmd, cwd=cwd, operation_context=operation_context)
        if result.success:
            return True
        self._record_failure(phase, result.error or f"failed to {operation_context}")
        return False

    def _record_failure(self, phase: CreationPhase, message: str) -> None:
        logger.debug("Step %s failed: %s", phase.value, message)
        self._error = CreationError(CreationErrorKind.PROCESS_FAILED, message, phase=phase)

    def _rollback(self, project_path: Path) -> None:
        """Remove a copied project whose VCS metadata could not be stripped."""
        strip_message = self._error.message if self._error is not None else ""
        target = project_path.absolute()
        if len(str(target)) >= MIN_DELETE_PATH_LENGTH and self.delete_dir(target):
            return

        leftover = f"the partially created project dir was left behind: {project_path}"
        self._record_failure(CreationPhase.ROLLBACK, f"{strip_message}\n{leftover}".strip())
