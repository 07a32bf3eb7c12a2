"""Git operations interface.

Read-only repository queries used to compute defaults, plus the single
mutating operation ghmerge performs against git: pushing the source branch.

Architecture:
- GitOps: Abstract base class defining the interface
- RealGitOps: Production implementation running git through ShellOps
- PushPlan: The push decision, renderable as the exact git argv
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from ghmerge.core.errors import ExternalCommandError
from ghmerge.core.shell_ops import OutputMode, ShellOps

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PushPlan:
    """How the source branch will be pushed.

    A branch that does not exist on the remote yet is pushed with -u so the
    local branch starts tracking it. A branch that already exists is pushed
    plainly to upload any unpushed commits.
    """

    remote: str
    branch: str
    set_upstream: bool

    def command(self) -> list[str]:
        """Return the git argument vector for this push."""
        if self.set_upstream:
            return ["git", "push", "-u", self.remote, self.branch]
        return ["git", "push", self.remote, self.branch]


class GitOps(ABC):
    """Git queries and the push operation used by the workflow."""

    @abstractmethod
    def is_inside_repository(self, cwd: Path) -> bool:
        """Check whether cwd is inside a git repository.

        Fails closed: any query error returns False.
        """

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str:
        """Get the checked-out branch name.

        Returns:
            Branch name, or "" when HEAD is detached
        """

    @abstractmethod
    def get_last_commit_subject(self, cwd: Path) -> str:
        """Get the subject line of HEAD.

        Returns:
            Commit subject, or "" when the repository has no commits
        """

    @abstractmethod
    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        """Check whether the remote has a head named branch.

        Returns False when the query fails (for example, no such remote).
        """

    @abstractmethod
    def push_branch(self, cwd: Path, plan: PushPlan, *, quiet: bool) -> None:
        """Push according to plan.

        Args:
            cwd: Repository working directory
            plan: What to push and whether to set upstream
            quiet: Capture git's output instead of streaming it to the terminal

        Raises:
            ExternalCommandError: If git push fails
        """


class RealGitOps(GitOps):
    """Production implementation using the git CLI."""

    def __init__(self, shell_ops: ShellOps) -> None:
        self._shell = shell_ops

    def is_inside_repository(self, cwd: Path) -> bool:
        try:
            self._shell.run(["git", "rev-parse", "--git-dir"], mode=OutputMode.SILENT, cwd=cwd)
        except ExternalCommandError:
            return False
        return True

    def get_current_branch(self, cwd: Path) -> str:
        return self._shell.run(
            ["git", "branch", "--show-current"], mode=OutputMode.SILENT, cwd=cwd
        ).strip()

    def get_last_commit_subject(self, cwd: Path) -> str:
        try:
            return self._shell.run(
                ["git", "log", "-1", "--pretty=%s"], mode=OutputMode.SILENT, cwd=cwd
            ).strip()
        except ExternalCommandError as e:
            # git log fails on an unborn branch
            logger.debug("No last commit subject: %s", e)
            return ""

    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        try:
            output = self._shell.run(
                ["git", "ls-remote", "--heads", remote, branch], mode=OutputMode.SILENT, cwd=cwd
            )
        except ExternalCommandError as e:
            logger.debug("Remote branch query failed: %s", e)
            return False
        return len(output) > 0

    def push_branch(self, cwd: Path, plan: PushPlan, *, quiet: bool) -> None:
        mode = OutputMode.SILENT if quiet else OutputMode.INHERIT
        self._shell.run(plan.command(), mode=mode, cwd=cwd)
