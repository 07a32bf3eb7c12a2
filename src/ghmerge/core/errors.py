"""Error types raised by ghmerge operations.

Every failure that should end the invocation derives from GhMergeError. The CLI
entry point catches GhMergeError, prints the message to stderr and exits with
code 1. Nothing is retried.

Malformed invocations (unknown flag, missing option value) never reach this
module: click raises click.UsageError before any command code runs, and the
command class maps it to exit code 1 as well.
"""

from collections.abc import Sequence


class GhMergeError(Exception):
    """Base class for all ghmerge failures."""


class PrerequisiteError(GhMergeError):
    """A required tool is missing, gh is not authenticated, or cwd is not a repo."""


class ValidationError(GhMergeError):
    """A resolved field failed its non-empty requirement."""


class ExternalCommandError(GhMergeError):
    """An external command exited non-zero or could not be started.

    Attributes:
        command: The argument vector that was executed
        exit_code: Process exit code, or None if the executable was not found
        stderr: Captured stderr text; None when output was streamed to the terminal
    """

    def __init__(
        self,
        command: Sequence[str],
        *,
        exit_code: int | None,
        stderr: str | None = None,
        message: str | None = None,
    ) -> None:
        self.command = tuple(command)
        self.exit_code = exit_code
        self.stderr = stderr
        if message is None:
            message = _format_failure(self.command, exit_code, stderr)
        super().__init__(message)


class SubmissionError(GhMergeError):
    """`gh pr create` failed. Wraps the underlying message for the user."""

    def __init__(self, underlying_message: str) -> None:
        self.underlying_message = underlying_message
        super().__init__(f"Failed to create PR: {underlying_message}")


def _format_failure(command: tuple[str, ...], exit_code: int | None, stderr: str | None) -> str:
    # Prefer captured stderr over a generic message
    if stderr:
        return stderr
    cmd_str = " ".join(command)
    return f"Command '{cmd_str}' failed with exit code {exit_code}"
