"""Data types shared by the resolver, submitter and workflow."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CliInput:
    """Raw command-line flags.

    Scalar flags are None when absent, so an explicit empty string
    (`--description ""`) stays distinguishable from "not given".
    """

    title: str | None = None
    description: str | None = None
    base: str | None = None
    source: str | None = None
    draft: bool = False
    labels: tuple[str, ...] = ()
    reviewers: tuple[str, ...] = ()
    assignees: tuple[str, ...] = ()
    dry_run: bool = False
    verbose: bool = False
    web: bool = False

    def needs_prompt_tool(self) -> bool:
        """True when title or base must be asked for interactively."""
        return self.title is None or self.base is None


@dataclass(frozen=True)
class ResolvedRequest:
    """Everything needed to open a pull request.

    Only the resolver builds these, and it fails before construction if
    title, dest_branch or source_branch would be empty.
    """

    title: str
    source_branch: str
    dest_branch: str
    description: str = ""
    draft: bool = False
    labels: tuple[str, ...] = ()
    reviewers: tuple[str, ...] = ()
    assignees: tuple[str, ...] = ()
    open_in_browser: bool = False
