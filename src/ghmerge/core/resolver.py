"""Resolve command-line flags, defaults and prompts into a ResolvedRequest.

Resolution is a single pass over the fields. A field given on the command
line is used as-is and never prompted for; everything else falls back to a
prompt (when the prompt tool is usable) or a computed default. Required
fields are validated as soon as they are resolved, so a ResolvedRequest with
an empty title, base or source branch is never constructed.
"""

from ghmerge.core.context import GhMergeContext
from ghmerge.core.errors import ValidationError
from ghmerge.core.types import CliInput, ResolvedRequest

TITLE_LABEL = "PR title"
DESCRIPTION_LABEL = "PR description (optional, ctrl+d to finish)"
BASE_LABEL = "Destination branch"
LABELS_LABEL = "Labels (comma-separated, optional)"
REVIEWERS_LABEL = "Reviewers (comma-separated, optional)"
ASSIGNEES_LABEL = "Assignees (comma-separated, optional)"

DRAFT_WEB_WARNING = "⚠️  Note: --draft cannot be used with --web, creating as ready PR"


def resolve_source_branch(ctx: GhMergeContext, cli_input: CliInput) -> str:
    """Use --source if given, otherwise the checked-out branch.

    Raises:
        ValidationError: If neither yields a branch (detached HEAD)
    """
    source = cli_input.source or ctx.git_ops.get_current_branch(ctx.cwd)
    if not source:
        raise ValidationError("Not on a git branch")
    return source


def resolve_request(
    ctx: GhMergeContext,
    cli_input: CliInput,
    *,
    source_branch: str,
    interactive: bool,
) -> ResolvedRequest:
    """Build the ResolvedRequest for this invocation.

    Args:
        ctx: Application context
        cli_input: Parsed flags
        source_branch: Branch already chosen by resolve_source_branch()
        interactive: Whether optional fields may be prompted for. Title and
            base are prompted for regardless when missing; the caller has
            already verified the prompt tool in that case.

    Raises:
        ValidationError: If the title or destination branch ends up empty
    """
    title = _resolve_title(ctx, cli_input)
    description = _resolve_description(ctx, cli_input, interactive=interactive)
    dest_branch = _resolve_dest_branch(ctx, cli_input)

    labels = _resolve_list(ctx, cli_input.labels, LABELS_LABEL, interactive=interactive)
    reviewers = _resolve_list(ctx, cli_input.reviewers, REVIEWERS_LABEL, interactive=interactive)
    assignees = _resolve_list(ctx, cli_input.assignees, ASSIGNEES_LABEL, interactive=interactive)

    # gh rejects --draft together with --web
    draft = cli_input.draft
    if draft and cli_input.web:
        ctx.feedback.warning(DRAFT_WEB_WARNING)
        draft = False

    return ResolvedRequest(
        title=title,
        description=description,
        source_branch=source_branch,
        dest_branch=dest_branch,
        draft=draft,
        labels=labels,
        reviewers=reviewers,
        assignees=assignees,
        open_in_browser=cli_input.web,
    )


def _resolve_title(ctx: GhMergeContext, cli_input: CliInput) -> str:
    if cli_input.title is not None:
        title = cli_input.title
    else:
        default_title = ctx.git_ops.get_last_commit_subject(ctx.cwd) or ctx.config.fallback_title
        ctx.debug(f"Default title: {default_title}")
        title = ctx.prompt_ops.prompt_line(TITLE_LABEL, default_title)

    if not title:
        raise ValidationError("PR title is required")
    return title


def _resolve_description(ctx: GhMergeContext, cli_input: CliInput, *, interactive: bool) -> str:
    if cli_input.description is not None:
        return cli_input.description
    if interactive and ctx.config.prompt_description:
        return ctx.prompt_ops.prompt_multiline(DESCRIPTION_LABEL)
    return ""


def _resolve_dest_branch(ctx: GhMergeContext, cli_input: CliInput) -> str:
    if cli_input.base is not None:
        dest_branch = cli_input.base
    else:
        dest_branch = ctx.prompt_ops.prompt_line(BASE_LABEL, ctx.config.default_base)

    if not dest_branch:
        raise ValidationError("Destination branch is required")
    return dest_branch


def _resolve_list(
    ctx: GhMergeContext, given: tuple[str, ...], label: str, *, interactive: bool
) -> tuple[str, ...]:
    if given:
        return given
    if not interactive:
        return ()
    return ctx.prompt_ops.prompt_comma_list(label)
