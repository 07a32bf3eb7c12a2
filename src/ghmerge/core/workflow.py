"""Pull request workflow orchestration.

One invocation walks these states in order:

    START -> PREREQUISITE_CHECK -> DETERMINE_SOURCE -> RESOLVE_INPUTS
        -> DRY_RUN_REPORT                              (--dry-run, then stop)
        -> PUSH_DECISION -> SUBMIT -> REPORT -> DONE   (normal run)

Any failure raises a GhMergeError subclass out of run_workflow(); the CLI
turns that into exit code 1. Completed steps are not undone, so a branch that
was pushed stays pushed if submission fails afterwards.
"""

import shlex
from dataclasses import dataclass
from enum import Enum

from ghmerge.core.context import GhMergeContext
from ghmerge.core.errors import PrerequisiteError
from ghmerge.core.git_ops import PushPlan
from ghmerge.core.github_ops import build_pr_create_command, strip_remote_prefix
from ghmerge.core.prompt_ops import PROMPT_TOOL
from ghmerge.core.resolver import resolve_request, resolve_source_branch
from ghmerge.core.types import CliInput, ResolvedRequest

GUM_INSTALL_HINT = "gum is not installed. Install it from https://github.com/charmbracelet/gum"
GH_INSTALL_HINT = "gh CLI is not installed. Install it from https://cli.github.com/"
GH_LOGIN_HINT = "Not authenticated with GitHub CLI. Run: gh auth login"


class WorkflowState(Enum):
    START = "start"
    PREREQUISITE_CHECK = "prerequisite_check"
    DETERMINE_SOURCE = "determine_source"
    RESOLVE_INPUTS = "resolve_inputs"
    DRY_RUN_REPORT = "dry_run_report"
    PUSH_DECISION = "push_decision"
    SUBMIT = "submit"
    REPORT = "report"
    DONE = "done"


@dataclass(frozen=True)
class WorkflowResult:
    """Outcome of a completed (or dry-run) invocation.

    Attributes:
        request: The resolved pull request inputs
        push_plan: The push that was performed, or would have been in a dry run
        pr_url: URL returned by gh; "" for dry runs and usually for --web
        dry_run: Whether nothing was pushed or submitted
        states: States visited, in order
    """

    request: ResolvedRequest
    push_plan: PushPlan
    pr_url: str
    dry_run: bool
    states: tuple[WorkflowState, ...]


class _StateTrace:
    """Records state transitions and traces them in verbose mode."""

    def __init__(self, ctx: GhMergeContext) -> None:
        self._ctx = ctx
        self.visited: list[WorkflowState] = []

    def enter(self, state: WorkflowState) -> None:
        self.visited.append(state)
        self._ctx.debug(f"-> {state.value}")


def run_workflow(ctx: GhMergeContext, cli_input: CliInput) -> WorkflowResult:
    """Run the full create-pull-request workflow.

    Args:
        ctx: Application context (gateways, config, verbosity, dry-run)
        cli_input: Parsed command-line flags

    Returns:
        WorkflowResult describing what was (or would have been) done

    Raises:
        PrerequisiteError: Missing tool, missing gh login, or not in a repository
        ValidationError: Empty title, destination or source branch
        ExternalCommandError: git push failed
        SubmissionError: gh pr create failed
    """
    trace = _StateTrace(ctx)
    trace.enter(WorkflowState.START)
    ctx.debug("Starting ghmerge...")
    ctx.debug(f"Arguments: {cli_input}")

    trace.enter(WorkflowState.PREREQUISITE_CHECK)
    interactive = check_prerequisites(ctx, cli_input)

    trace.enter(WorkflowState.DETERMINE_SOURCE)
    source_branch = resolve_source_branch(ctx, cli_input)
    ctx.debug(f"Source branch: {source_branch}")

    trace.enter(WorkflowState.RESOLVE_INPUTS)
    request = resolve_request(
        ctx, cli_input, source_branch=source_branch, interactive=interactive
    )
    _trace_request(ctx, request)

    if ctx.execution.dry_run:
        trace.enter(WorkflowState.DRY_RUN_REPORT)
        push_plan = decide_push(ctx, request.source_branch)
        report_dry_run(ctx, request, push_plan)
        trace.enter(WorkflowState.DONE)
        return WorkflowResult(
            request=request,
            push_plan=push_plan,
            pr_url="",
            dry_run=True,
            states=tuple(trace.visited),
        )

    trace.enter(WorkflowState.PUSH_DECISION)
    push_plan = decide_push(ctx, request.source_branch)
    _push(ctx, push_plan, quiet=request.open_in_browser)

    trace.enter(WorkflowState.SUBMIT)
    if not request.open_in_browser:
        ctx.feedback.info("\nCreating pull request...")
    pr_command = build_pr_create_command(request, remote=ctx.config.remote)
    ctx.debug(f"Command: {shlex.join(pr_command)}")
    pr_url = ctx.github_ops.create_pr(ctx.cwd, request)

    trace.enter(WorkflowState.REPORT)
    _report_success(ctx, request, pr_url)

    trace.enter(WorkflowState.DONE)
    return WorkflowResult(
        request=request,
        push_plan=push_plan,
        pr_url=pr_url,
        dry_run=False,
        states=tuple(trace.visited),
    )


def check_prerequisites(ctx: GhMergeContext, cli_input: CliInput) -> bool:
    """Verify tools, authentication and repository before doing anything.

    gum is only required when title or base must be prompted for, so fully
    scripted invocations work without it.

    Returns:
        Whether gum is available, i.e. whether optional fields may be prompted for

    Raises:
        PrerequisiteError: On the first failed check
    """
    prompt_tool_available = ctx.shell_ops.is_tool_available(PROMPT_TOOL)
    if cli_input.needs_prompt_tool() and not prompt_tool_available:
        raise PrerequisiteError(GUM_INSTALL_HINT)

    if not ctx.shell_ops.is_tool_available("gh"):
        raise PrerequisiteError(GH_INSTALL_HINT)

    ctx.debug("Checking GitHub authentication...")
    if not ctx.github_ops.is_authenticated(ctx.cwd):
        raise PrerequisiteError(GH_LOGIN_HINT)
    ctx.debug("GitHub authentication verified")

    if not ctx.git_ops.is_inside_repository(ctx.cwd):
        raise PrerequisiteError("Not in a git repository")
    ctx.debug("Git repository detected")

    return prompt_tool_available


def decide_push(ctx: GhMergeContext, branch: str) -> PushPlan:
    """Push with upstream tracking only if the remote does not have the branch yet."""
    remote = ctx.config.remote
    exists = ctx.git_ops.remote_branch_exists(ctx.cwd, remote, branch)
    return PushPlan(remote=remote, branch=branch, set_upstream=not exists)


def report_dry_run(ctx: GhMergeContext, request: ResolvedRequest, push_plan: PushPlan) -> None:
    """Describe what a real run would do, without running any of it."""
    out = ctx.feedback.info
    out("\n🔍 Dry run mode - no changes will be made\n")
    out("Would create PR with the following details:")
    out(f"  Title: {request.title}")
    out(f"  Description: {request.description or '(empty)'}")
    out(f"  Source: {request.source_branch}")
    out(f"  Base: {strip_remote_prefix(request.dest_branch, push_plan.remote)}")
    if request.draft:
        out("  Draft: Yes")
    if request.labels:
        out(f"  Labels: {', '.join(request.labels)}")
    if request.reviewers:
        out(f"  Reviewers: {', '.join(request.reviewers)}")
    if request.assignees:
        out(f"  Assignees: {', '.join(request.assignees)}")
    if request.open_in_browser:
        out("  Open in browser: Yes")

    if push_plan.set_upstream:
        out(f"\n  Would push branch '{push_plan.branch}' to {push_plan.remote}")
    else:
        out(f"\n  Would push any unpushed commits to {push_plan.remote}")
    out(f"  Would run: {shlex.join(push_plan.command())}")
    pr_command = build_pr_create_command(request, remote=push_plan.remote)
    out(f"  Would run: {shlex.join(pr_command)}")

    out("\nNo PR created (dry run mode)\n")


def _push(ctx: GhMergeContext, plan: PushPlan, *, quiet: bool) -> None:
    if plan.set_upstream:
        ctx.debug("Remote branch does not exist, creating and pushing...")
        if not quiet:
            ctx.feedback.info(f"\nPushing branch '{plan.branch}' to {plan.remote}...")
    else:
        ctx.debug("Pushing any unpushed commits...")
        if not quiet:
            ctx.feedback.info(f"\nPushing to {plan.remote}...")
    ctx.git_ops.push_branch(ctx.cwd, plan, quiet=quiet)


def _report_success(ctx: GhMergeContext, request: ResolvedRequest, pr_url: str) -> None:
    # The URL itself is written to stdout by the CLI
    if request.open_in_browser:
        ctx.feedback.success("\n✅ Pull request opened in browser")
        return
    ctx.feedback.success("\n✅ Pull request created successfully!")
    if request.draft:
        ctx.feedback.info("📝 Created as draft")
    ctx.debug(f"PR URL: {pr_url}")


def _trace_request(ctx: GhMergeContext, request: ResolvedRequest) -> None:
    ctx.debug(f"PR title: {request.title}")
    ctx.debug(f"PR description: {request.description}")
    ctx.debug(f"Destination branch: {request.dest_branch}")
    ctx.debug(f"Draft: {request.draft}")
    ctx.debug(f"Labels: {', '.join(request.labels)}")
    ctx.debug(f"Reviewers: {', '.join(request.reviewers)}")
    ctx.debug(f"Assignees: {', '.join(request.assignees)}")
