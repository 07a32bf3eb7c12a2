"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from ghmerge.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing output for workflow progress.

    Workflow code calls ctx.feedback methods instead of echoing directly, so
    tests can substitute a recording fake and assert on what the user saw.

    Usage:
        ctx.feedback.info("Pushing to origin...")
        ctx.feedback.warning("Note: --draft cannot be used with --web")
        ctx.feedback.success("✅ Pull request created successfully!")

    debug() output is gated by the caller (see GhMergeContext.debug); the
    implementation always writes what it is given.
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show non-fatal warning."""

    @abstractmethod
    def debug(self, message: str) -> None:
        """Show a verbose trace line."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to stderr with click styling."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def debug(self, message: str) -> None:
        user_output(click.style(f"[verbose] {message}", dim=True))
