"""Tests for gum prompt construction and cancellation handling."""

import pytest

from ghmerge.core.prompt_ops import GumPromptOps, split_comma_list
from ghmerge.core.shell_ops import OutputMode
from tests.fakes.shell_ops import FakeShellOps


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", ()),
        ("bug", ("bug",)),
        ("bug, urgent", ("bug", "urgent")),
        (" a ,, b , ", ("a", "b")),
        (",,,", ()),
    ],
)
def test_split_comma_list(raw: str, expected: tuple[str, ...]) -> None:
    assert split_comma_list(raw) == expected


def test_prompt_line_builds_gum_input() -> None:
    cmd = ("gum", "input", "--placeholder", "PR title", "--value", "Fix bug")
    shell = FakeShellOps(outputs={cmd: "  Fix the bug  \n"})

    answer = GumPromptOps(shell).prompt_line("PR title", "Fix bug")

    assert answer == "Fix the bug"
    assert shell.run_calls == [(cmd, OutputMode.INTERACTIVE, None)]


def test_prompt_line_cancelled_is_empty() -> None:
    cmd = ("gum", "input", "--placeholder", "PR title", "--value", "Fix bug")
    shell = FakeShellOps(failures={cmd: ""})

    assert GumPromptOps(shell).prompt_line("PR title", "Fix bug") == ""


def test_prompt_multiline_uses_gum_write() -> None:
    cmd = ("gum", "write", "--placeholder", "Description")
    shell = FakeShellOps(outputs={cmd: "line one\nline two\n"})

    assert GumPromptOps(shell).prompt_multiline("Description") == "line one\nline two"


def test_prompt_multiline_cancelled_is_empty() -> None:
    cmd = ("gum", "write", "--placeholder", "Description")
    shell = FakeShellOps(failures={cmd: ""})

    assert GumPromptOps(shell).prompt_multiline("Description") == ""


def test_prompt_comma_list_parses_answer() -> None:
    cmd = ("gum", "input", "--placeholder", "Labels")
    shell = FakeShellOps(outputs={cmd: "bug, urgent"})

    assert GumPromptOps(shell).prompt_comma_list("Labels") == ("bug", "urgent")


def test_prompt_comma_list_cancelled_is_empty() -> None:
    cmd = ("gum", "input", "--placeholder", "Labels")
    shell = FakeShellOps(failures={cmd: ""})

    assert GumPromptOps(shell).prompt_comma_list("Labels") == ()
