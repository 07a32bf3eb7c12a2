import logging
import os
import sys
from dataclasses import replace
from typing import Any

import click

from ghmerge.cli.output import machine_output, user_output
from ghmerge.core.context import ExecutionContext, GhMergeContext, create_context
from ghmerge.core.errors import GhMergeError
from ghmerge.core.types import CliInput
from ghmerge.core.workflow import run_workflow

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags
DEBUG_ENV_VAR = "GHMERGE_DEBUG"

EXAMPLES = """\b
Examples:
  # Interactive mode
  ghmerge

  # Non-interactive mode with all options
  ghmerge -t "Add new feature" -d "This adds X" -b develop

  # Create draft PR with labels
  ghmerge --draft -l bug -l urgent -t "Fix critical bug"

  # Add reviewers and assignees
  ghmerge -t "New feature" -r alice -r bob -a charlie

  # Dry run to preview
  ghmerge --dry-run -t "Test PR" -b main

  # Open in browser after creation
  ghmerge -t "Review this" -o
"""


class GhMergeCommand(click.Command):
    """Command that exits with code 1 (not click's 2) on usage errors."""

    def main(self, *args: Any, standalone_mode: bool = True, **kwargs: Any) -> Any:
        # standalone_mode is always disabled so usage errors reach this handler
        try:
            return super().main(*args, standalone_mode=False, **kwargs)
        except click.ClickException as e:
            e.show()
            sys.exit(1)
        except click.Abort:
            user_output("Aborted!")
            sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    if verbose or os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(format="[DEBUG %(name)s] %(message)s")
        logging.getLogger("ghmerge").setLevel(logging.DEBUG)


def _build_context(obj: GhMergeContext | None, execution: ExecutionContext) -> GhMergeContext:
    # Tests inject a context holding fakes; production builds the real one
    if obj is None:
        return create_context(execution=execution)
    return replace(obj, execution=execution)


@click.command("ghmerge", cls=GhMergeCommand, context_settings=CONTEXT_SETTINGS, epilog=EXAMPLES)
@click.version_option(package_name="ghmerge")
@click.option("-t", "--title", metavar="TEXT", help="PR title (default: last commit message)")
@click.option(
    "-d", "--description", metavar="TEXT", help="PR description (optional, default: empty)"
)
@click.option("-b", "--base", metavar="BRANCH", help="Destination/base branch (default: develop)")
@click.option("-s", "--source", metavar="BRANCH", help="Source branch (default: current branch)")
@click.option("--draft", is_flag=True, help="Create PR as draft (default: ready for review)")
@click.option(
    "-l", "--label", "labels", multiple=True, metavar="LABEL", help="Add label (repeatable)"
)
@click.option(
    "-r",
    "--reviewer",
    "reviewers",
    multiple=True,
    metavar="USER",
    help="Request reviewer (repeatable)",
)
@click.option(
    "-a",
    "--assignee",
    "assignees",
    multiple=True,
    metavar="USER",
    help="Assign PR to user (repeatable)",
)
@click.option("--dry-run", is_flag=True, help="Show what would happen without creating PR")
@click.option("-v", "--verbose", is_flag=True, help="Show verbose output")
@click.option("-o", "-w", "--web", is_flag=True, help="Open PR in browser after creation")
@click.pass_context
def cli(
    ctx: click.Context,
    title: str | None,
    description: str | None,
    base: str | None,
    source: str | None,
    draft: bool,
    labels: tuple[str, ...],
    reviewers: tuple[str, ...],
    assignees: tuple[str, ...],
    dry_run: bool,
    verbose: bool,
    web: bool,
) -> None:
    """Interactive CLI tool for creating GitHub pull requests.

    Pushes the current branch if needed and opens a pull request with gh.
    Anything not given as an option is asked for with gum or defaulted.
    """
    cli_input = CliInput(
        title=title,
        description=description,
        base=base,
        source=source,
        draft=draft,
        labels=labels,
        reviewers=reviewers,
        assignees=assignees,
        dry_run=dry_run,
        verbose=verbose,
        web=web,
    )
    _configure_logging(cli_input.verbose)

    execution = ExecutionContext(verbose=cli_input.verbose, dry_run=cli_input.dry_run)
    try:
        gm_ctx = _build_context(ctx.obj, execution)
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + f"Invalid configuration: {e}")
        raise SystemExit(1) from e

    try:
        result = run_workflow(gm_ctx, cli_input)
    except GhMergeError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    if result.pr_url:
        machine_output(result.pr_url)


def main() -> None:
    """CLI entry point used by the `ghmerge` console script."""
    cli()
