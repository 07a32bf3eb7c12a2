"""Integration tests for RealShellOps.

These start real processes (the running Python interpreter) to verify how
each OutputMode captures output and reports failures.
"""

import sys
from pathlib import Path

import pytest

from ghmerge.core.errors import ExternalCommandError
from ghmerge.core.shell_ops import OutputMode, RealShellOps


def _python(code: str) -> list[str]:
    return [sys.executable, "-c", code]


def test_silent_returns_stdout_without_trailing_whitespace() -> None:
    output = RealShellOps().run(_python("print('hello  ')"), mode=OutputMode.SILENT)
    assert output == "hello"


def test_interactive_captures_stdout() -> None:
    output = RealShellOps().run(_python("print('answer')"), mode=OutputMode.INTERACTIVE)
    assert output == "answer"


def test_inherit_returns_empty() -> None:
    assert RealShellOps().run(_python("print('streamed')"), mode=OutputMode.INHERIT) == ""


def test_silent_failure_keeps_stderr() -> None:
    code = "import sys; sys.stderr.write('boom\\n'); sys.exit(3)"

    with pytest.raises(ExternalCommandError) as exc_info:
        RealShellOps().run(_python(code), mode=OutputMode.SILENT)

    assert exc_info.value.exit_code == 3
    assert exc_info.value.stderr == "boom"
    assert str(exc_info.value) == "boom"


def test_inherit_failure_has_no_stderr() -> None:
    with pytest.raises(ExternalCommandError) as exc_info:
        RealShellOps().run(_python("import sys; sys.exit(2)"), mode=OutputMode.INHERIT)

    assert exc_info.value.exit_code == 2
    assert exc_info.value.stderr is None
    assert "failed with exit code 2" in str(exc_info.value)


def test_missing_executable() -> None:
    with pytest.raises(ExternalCommandError) as exc_info:
        RealShellOps().run(["nonexistent-tool-xyz-123"], mode=OutputMode.SILENT)

    assert exc_info.value.exit_code is None
    assert "Command not found: nonexistent-tool-xyz-123" in str(exc_info.value)


def test_runs_in_cwd(tmp_path: Path) -> None:
    output = RealShellOps().run(
        _python("import os; print(os.getcwd())"), mode=OutputMode.SILENT, cwd=tmp_path
    )
    assert Path(output).resolve() == tmp_path.resolve()


def test_arguments_are_not_shell_interpreted() -> None:
    title = 'Use "strict" mode; $HOME `x`'
    output = RealShellOps().run(
        _python("import sys; print(sys.argv[1])") + [title], mode=OutputMode.SILENT
    )
    assert output == title


def test_is_tool_available() -> None:
    ops = RealShellOps()
    assert ops.is_tool_available("sh") is True
    assert ops.is_tool_available("nonexistent-tool-xyz-123") is False
