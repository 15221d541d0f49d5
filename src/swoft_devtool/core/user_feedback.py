"""User-facing progress notifications with mode awareness."""

from abc import ABC, abstractmethod

import click

from swoft_devtool.cli.output import user_output


class UserFeedback(ABC):
    """Sink for progress notifications emitted by the creation workflow.

    The project creator never formats or displays messages itself. It calls
    these methods at well-defined points (begin-create, begin-clone,
    begin-copy, begin-metadata-strip, begin-delete, completion,
    begin-install, install-complete) and the implementation decides how to
    present them. Errors are not notifications; they are recorded on the
    creator and reported by the CLI.

    Two modes:
    - Interactive: Show all messages
    - Quiet: Suppress everything

    Usage:
        ctx.feedback.info("Clone Repo https://github.com/...")
        ctx.feedback.success("Project: demo created")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))


class SuppressedFeedback(UserFeedback):
    """Feedback for --quiet runs (progress messages hidden)."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass
