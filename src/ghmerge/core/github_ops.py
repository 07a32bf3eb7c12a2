"""GitHub operations through the gh CLI.

Architecture:
- GitHubOps: Abstract base class defining the interface
- RealGitHubOps: Production implementation using gh
- build_pr_create_command: Pure argv construction, shared with dry-run output
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ghmerge.core.errors import ExternalCommandError, SubmissionError
from ghmerge.core.shell_ops import OutputMode, ShellOps
from ghmerge.core.types import ResolvedRequest

DEFAULT_REMOTE = "origin"


def strip_remote_prefix(branch: str, remote: str = DEFAULT_REMOTE) -> str:
    """Turn a remote-tracking name like 'origin/main' into 'main'.

    A leading 'origin/' is always removed, as is '<remote>/' when a different
    remote is configured. Only one prefix is removed; other slashes are part
    of the branch name ('feature/x').
    """
    for name in dict.fromkeys((DEFAULT_REMOTE, remote)):
        prefix = f"{name}/"
        if branch.startswith(prefix):
            return branch[len(prefix) :]
    return branch


def build_pr_create_command(
    request: ResolvedRequest, *, remote: str = DEFAULT_REMOTE
) -> list[str]:
    """Build the `gh pr create` argument vector for a resolved request.

    List values are joined with commas into a single flag, matching gh's
    accepted syntax for --label, --reviewer and --assignee.
    """
    cmd = [
        "gh",
        "pr",
        "create",
        "--base",
        strip_remote_prefix(request.dest_branch, remote),
        "--head",
        request.source_branch,
        "--title",
        request.title,
        "--body",
        request.description,
    ]

    if request.draft:
        cmd.append("--draft")
    if request.labels:
        cmd.extend(["--label", ",".join(request.labels)])
    if request.reviewers:
        cmd.extend(["--reviewer", ",".join(request.reviewers)])
    if request.assignees:
        cmd.extend(["--assignee", ",".join(request.assignees)])
    if request.open_in_browser:
        cmd.append("--web")

    return cmd


class GitHubOps(ABC):
    """GitHub operations used by the workflow."""

    @abstractmethod
    def is_authenticated(self, cwd: Path) -> bool:
        """Check whether gh has a logged-in session."""

    @abstractmethod
    def create_pr(self, cwd: Path, request: ResolvedRequest) -> str:
        """Create a pull request.

        Args:
            cwd: Repository working directory
            request: Fully resolved pull request inputs

        Returns:
            URL printed by gh. May be empty when the request opens a browser.

        Raises:
            SubmissionError: If gh pr create fails
        """


class RealGitHubOps(GitHubOps):
    """Production implementation using the gh CLI."""

    def __init__(self, shell_ops: ShellOps, *, remote: str = DEFAULT_REMOTE) -> None:
        self._shell = shell_ops
        self._remote = remote

    def is_authenticated(self, cwd: Path) -> bool:
        try:
            self._shell.run(["gh", "auth", "status"], mode=OutputMode.SILENT, cwd=cwd)
        except ExternalCommandError:
            return False
        return True

    def create_pr(self, cwd: Path, request: ResolvedRequest) -> str:
        cmd = build_pr_create_command(request, remote=self._remote)
        try:
            return self._shell.run(cmd, mode=OutputMode.SILENT, cwd=cwd).strip()
        except ExternalCommandError as e:
            raise SubmissionError(str(e)) from e
