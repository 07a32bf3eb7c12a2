"""Interactive prompts through gum.

Each prompt is one blocking gum invocation. A cancelled prompt (Esc or
Ctrl-C makes gum exit non-zero) is not an error here: it yields an empty
answer, and callers that need a value enforce that themselves.

See https://github.com/charmbracelet/gum for the prompt tool.
"""

import logging
from abc import ABC, abstractmethod

from ghmerge.core.errors import ExternalCommandError
from ghmerge.core.shell_ops import OutputMode, ShellOps

logger = logging.getLogger(__name__)

PROMPT_TOOL = "gum"


def split_comma_list(raw: str) -> tuple[str, ...]:
    """Split comma-separated input, trimming items and dropping empty ones.

    Examples:
        >>> split_comma_list("bug, urgent,,")
        ('bug', 'urgent')
        >>> split_comma_list("")
        ()
    """
    return tuple(item.strip() for item in raw.split(",") if item.strip())


class PromptOps(ABC):
    """Interactive text input."""

    @abstractmethod
    def prompt_line(self, label: str, default: str) -> str:
        """Ask for one line of text, pre-filled with an editable default.

        Returns:
            Trimmed answer, or "" if the prompt was cancelled
        """

    @abstractmethod
    def prompt_multiline(self, label: str) -> str:
        """Ask for optional multi-line text.

        Returns:
            The text entered, or "" if the prompt was cancelled
        """

    @abstractmethod
    def prompt_comma_list(self, label: str) -> tuple[str, ...]:
        """Ask for a comma-separated list on one line.

        Returns:
            Parsed items (see split_comma_list); empty on empty input or cancel
        """


class GumPromptOps(PromptOps):
    """Production prompts using `gum input` and `gum write`."""

    def __init__(self, shell_ops: ShellOps) -> None:
        self._shell = shell_ops

    def _ask(self, command: list[str]) -> str:
        try:
            return self._shell.run(command, mode=OutputMode.INTERACTIVE)
        except ExternalCommandError as e:
            logger.debug("Prompt cancelled: %s", e)
            return ""

    def prompt_line(self, label: str, default: str) -> str:
        return self._ask([PROMPT_TOOL, "input", "--placeholder", label, "--value", default]).strip()

    def prompt_multiline(self, label: str) -> str:
        return self._ask([PROMPT_TOOL, "write", "--placeholder", label])

    def prompt_comma_list(self, label: str) -> tuple[str, ...]:
        return split_comma_list(self._ask([PROMPT_TOOL, "input", "--placeholder", label]))
