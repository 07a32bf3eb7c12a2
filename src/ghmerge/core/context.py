"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from ghmerge.core.git_ops import GitOps, RealGitOps
from ghmerge.core.github_ops import GitHubOps, RealGitHubOps
from ghmerge.core.global_config import GlobalConfig, load_global_config
from ghmerge.core.prompt_ops import GumPromptOps, PromptOps
from ghmerge.core.shell_ops import RealShellOps, ShellOps
from ghmerge.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class ExecutionContext:
    """Process-wide switches, fixed once flags are parsed."""

    verbose: bool = False
    dry_run: bool = False


@dataclass(frozen=True)
class GhMergeContext:
    """Immutable context holding all dependencies for ghmerge operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime. Tests build one
    with fakes (see tests/fakes/context.py) and pass it as the click obj.
    """

    shell_ops: ShellOps
    git_ops: GitOps
    github_ops: GitHubOps
    prompt_ops: PromptOps
    feedback: UserFeedback
    config: GlobalConfig
    cwd: Path  # Current working directory at CLI invocation
    execution: ExecutionContext

    def debug(self, message: str) -> None:
        """Emit a trace line when --verbose is set."""
        if self.execution.verbose:
            self.feedback.debug(message)


def create_context(
    *, execution: ExecutionContext, config_path: Path | None = None
) -> GhMergeContext:
    """Create production context with real implementations.

    Args:
        execution: Verbosity and dry-run switches from the command line
        config_path: Optional config file override (defaults to the global path)

    Returns:
        GhMergeContext wired to git, gh and gum

    Raises:
        ValueError: If the config file exists but is malformed
    """
    # 1. Load config (no deps)
    config = load_global_config(config_path)

    # 2. Gateways all share one shell runner
    shell_ops = RealShellOps()

    return GhMergeContext(
        shell_ops=shell_ops,
        git_ops=RealGitOps(shell_ops),
        github_ops=RealGitHubOps(shell_ops, remote=config.remote),
        prompt_ops=GumPromptOps(shell_ops),
        feedback=InteractiveFeedback(),
        config=config,
        cwd=Path.cwd(),
        execution=execution,
    )
