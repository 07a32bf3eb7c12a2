"""Shell command gateway.

Every external program ghmerge talks to (git, gh, gum) is started through
ShellOps. Commands are always argument vectors; nothing is interpolated into a
shell string, so titles and descriptions need no quoting.

Architecture:
- ShellOps: Abstract base class defining the interface
- RealShellOps: Production implementation using subprocess
- Fakes live in tests/fakes/shell_ops.py
"""

import logging
import shlex
import shutil
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from ghmerge.core.errors import ExternalCommandError

logger = logging.getLogger(__name__)


class OutputMode(Enum):
    """How an external command's standard streams are wired.

    SILENT: stdout and stderr captured; stderr text is kept for error reports.
    INHERIT: both streams go straight to the terminal; nothing is captured.
    INTERACTIVE: stdout captured, stdin and stderr left on the terminal so a
        TUI prompt can draw itself while its answer is collected.
    """

    SILENT = "silent"
    INHERIT = "inherit"
    INTERACTIVE = "interactive"


class ShellOps(ABC):
    """Operations for running external commands."""

    @abstractmethod
    def run(self, command: Sequence[str], *, mode: OutputMode, cwd: Path | None = None) -> str:
        """Run a command and wait for it to exit.

        Args:
            command: Program and arguments
            mode: How stdout/stderr are handled
            cwd: Working directory, or None for the current one

        Returns:
            Captured stdout with trailing whitespace removed. Always "" in INHERIT mode.

        Raises:
            ExternalCommandError: Non-zero exit, or executable not found
        """

    @abstractmethod
    def is_tool_available(self, tool_name: str) -> bool:
        """Check whether an executable is on PATH."""


class RealShellOps(ShellOps):
    """Production implementation using subprocess.run."""

    def run(self, command: Sequence[str], *, mode: OutputMode, cwd: Path | None = None) -> str:
        cmd = list(command)
        logger.debug("Running (%s): %s", mode.value, shlex.join(cmd))

        try:
            if mode is OutputMode.SILENT:
                result = subprocess.run(
                    cmd, cwd=cwd, capture_output=True, text=True, encoding="utf-8", check=False
                )
            elif mode is OutputMode.INTERACTIVE:
                result = subprocess.run(
                    cmd, cwd=cwd, stdout=subprocess.PIPE, text=True, encoding="utf-8", check=False
                )
            else:
                result = subprocess.run(cmd, cwd=cwd, check=False)
        except FileNotFoundError as e:
            raise ExternalCommandError(
                cmd, exit_code=None, message=f"Command not found: {cmd[0]}"
            ) from e

        if result.returncode != 0:
            logger.debug("Command exited with %d: %s", result.returncode, shlex.join(cmd))
            stderr = None
            if mode is OutputMode.SILENT:
                stderr = (result.stderr or "").strip() or None
            raise ExternalCommandError(cmd, exit_code=result.returncode, stderr=stderr)

        if mode is OutputMode.INHERIT:
            return ""
        return (result.stdout or "").rstrip()

    def is_tool_available(self, tool_name: str) -> bool:
        return shutil.which(tool_name) is not None
